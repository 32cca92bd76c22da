# food.py
from typing import Collection, Optional, Tuple
import logging
import random
import time

logger = logging.getLogger(__name__)

# Process-wide source, seeded once at import from the high-resolution clock
RNG = random.Random(time.time_ns())


class NoFreeCellError(RuntimeError):
    """The snake covers every cell, so there is nowhere left to put food."""


class RandomFoodPlacer:
    """
    Picks a uniformly random cell not occupied by the snake.

    Uses rejection sampling: draw cells across the whole grid until one is
    free. Pass your own ``random.Random`` for reproducible placement.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else RNG

    def place(self, occupied: Collection[Tuple[int, int]], cols: int, rows: int) -> Tuple[int, int]:
        taken = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)
        if len(taken) >= cols * rows:
            raise NoFreeCellError(f"no free cell on a {cols}x{rows} grid")

        while True:
            fx = self.rng.randrange(cols)
            fy = self.rng.randrange(rows)
            if (fx, fy) not in taken:
                logger.debug("Food placed at %s", (fx, fy))
                return (fx, fy)
