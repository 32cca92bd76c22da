# snapshot.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np  # type: ignore

Position = Tuple[int, int]

# Board matrix cell codes
EMPTY, BODY, FOOD, HEAD = 0, 1, 2, 7

_CHARS = {EMPTY: ".", BODY: "o", FOOD: "*", HEAD: "@"}


class State(str, Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"


@dataclass(frozen=True)
class Snapshot:
    """
    Read-only view of a session, built fresh for every frame.

    Everything a renderer or HUD needs: grid size, body (head first),
    food, score, lifecycle state and the current move interval.
    """
    cols: int
    rows: int
    body: Tuple[Position, ...]
    food: Optional[Position]
    score: int
    state: State
    move_interval: float
    end_reason: Optional[str] = None

    @property
    def head(self) -> Position:
        return self.body[0]

    def to_grid(self) -> np.ndarray:
        """
        Dense rows x cols board: 0 empty, 1 body, 2 food, 7 head.
        Segments outside the grid (a head that just hit the wall) are skipped.
        """
        grid = np.zeros((self.rows, self.cols), dtype=np.int8)
        if self.food is not None:
            fx, fy = self.food
            grid[fy, fx] = FOOD
        # tail first so the head wins on a self-collision frame
        for i in range(len(self.body) - 1, -1, -1):
            x, y = self.body[i]
            if 0 <= x < self.cols and 0 <= y < self.rows:
                grid[y, x] = HEAD if i == 0 else BODY
        return grid

    def render_text(self) -> str:
        return "\n".join(
            "".join(_CHARS[int(v)] for v in row) for row in self.to_grid()
        )
