# game.py
from collections import deque
from typing import Deque, Iterable, Optional, Tuple
import logging
import random

from .config import Config, CFG
from .food import RandomFoodPlacer, NoFreeCellError
from .snapshot import Position, Snapshot, State

logger = logging.getLogger(__name__)


# ---------- Helpers ----------
def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def in_bounds(pos: Position, cols: int, rows: int) -> bool:
    x, y = pos
    return 0 <= x < cols and 0 <= y < rows


# ---------- Snake ----------
class Snake:
    """Ordered body (head at index 0) plus a one-shot growth flag."""

    def __init__(self, body: Iterable[Position], direction: Tuple[int, int]):
        self.body: Deque[Position] = deque(body)
        self.direction = direction   # applied on the last step
        self.pending = direction     # applied on the next step
        self.grow_next = False

    @property
    def head(self) -> Position:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def set_direction(self, d: Tuple[int, int]) -> None:
        # no 180° turns once there is a neck to run into
        if len(self.body) > 1 and is_opposite(d, self.direction):
            return
        self.pending = d

    def move(self) -> Position:
        """Commit the pending direction and advance one cell."""
        self.direction = self.pending
        hx, hy = self.head
        dx, dy = self.direction
        new_head = (hx + dx, hy + dy)
        self.body.appendleft(new_head)
        if self.grow_next:
            self.grow_next = False
        else:
            self.body.pop()
        return new_head

    def grow(self) -> None:
        self.grow_next = True

    def collides_with_self(self) -> bool:
        h = self.head
        return any(seg == h for i, seg in enumerate(self.body) if i > 0)


# ---------- Session ----------
class GameSession:
    """
    The whole simulation: snake, food, score, speed and lifecycle state.

    Input handling mutates it through ``set_direction``, ``toggle_pause``
    and ``restart``; the scheduler drives ``step``; renderers only ever see
    ``snapshot()``.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        placer: Optional[RandomFoodPlacer] = None,
    ):
        self.cfg = cfg.validate()
        if placer is None:
            rng = random.Random(cfg.seed) if cfg.seed is not None else None
            placer = RandomFoodPlacer(rng)
        self.placer = placer
        self.restart()

    # ----- lifecycle -----
    def restart(self) -> None:
        self.snake = Snake(self.cfg.initial_body(), self.cfg.start_direction)
        self.score = 0
        self.move_interval = self.cfg.move_interval
        self.state = State.RUNNING
        self.end_reason: Optional[str] = None
        self.food: Optional[Position] = self.placer.place(
            self.snake.body, self.cfg.cols, self.cfg.rows
        )
        logger.info(
            "New game: %dx%d grid, length %d, interval %.3fs",
            self.cfg.cols, self.cfg.rows, len(self.snake), self.move_interval,
        )

    def toggle_pause(self) -> State:
        if self.state is State.RUNNING:
            self.state = State.PAUSED
            logger.info("Paused (score %d)", self.score)
        elif self.state is State.PAUSED:
            self.state = State.RUNNING
            logger.info("Resumed")
        return self.state

    def set_direction(self, d: Tuple[int, int]) -> None:
        self.snake.set_direction(d)

    # ----- simulation -----
    def step(self) -> State:
        """
        Advance the snake one cell. Only does anything while RUNNING.
        Returns the state after the step.
        """
        if self.state is not State.RUNNING:
            return self.state

        new_head = self.snake.move()

        # Wall collision
        if not in_bounds(new_head, self.cfg.cols, self.cfg.rows):
            return self._end(State.GAME_OVER, "wall")

        # Self collision
        if self.snake.collides_with_self():
            return self._end(State.GAME_OVER, "self")

        if new_head == self.food:
            self._eat()
        return self.state

    def _eat(self) -> None:
        self.snake.grow()
        self.score += self.cfg.food_reward

        # speed up every N points, never below the floor
        if self.score % self.cfg.speedup_threshold == 0 and self.move_interval > self.cfg.min_move_interval:
            self.move_interval = max(
                self.cfg.min_move_interval,
                self.move_interval * self.cfg.speedup_factor,
            )
            logger.debug("Speed up: interval now %.4fs", self.move_interval)

        try:
            self.food = self.placer.place(self.snake.body, self.cfg.cols, self.cfg.rows)
        except NoFreeCellError:
            self.food = None
            self._end(State.WON, "board full")

    def _end(self, state: State, reason: str) -> State:
        self.state = state
        self.end_reason = reason
        if state is State.WON:
            logger.info("Board filled, you win! Score: %d", self.score)
        else:
            logger.info("Game over (%s). Score: %d", reason, self.score)
        return self.state

    # ----- read-only view -----
    @property
    def body(self) -> Tuple[Position, ...]:
        return tuple(self.snake.body)

    @property
    def direction(self) -> Tuple[int, int]:
        return self.snake.direction

    def snapshot(self) -> Snapshot:
        return Snapshot(
            cols=self.cfg.cols,
            rows=self.cfg.rows,
            body=tuple(self.snake.body),
            food=self.food,
            score=self.score,
            state=self.state,
            move_interval=self.move_interval,
            end_reason=self.end_reason,
        )
