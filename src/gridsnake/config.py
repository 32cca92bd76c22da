# config.py
from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Colors -----
BG         = (30, 30, 30)
CELL_EVEN  = (38, 38, 38)
CELL_ODD   = (34, 34, 34)
HEAD       = (120, 220, 120)
GREEN      = (80, 180, 80)
RED        = (200, 40, 40)
TEXT       = (220, 220, 230)
TITLE      = (240, 240, 250)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class ConfigError(ValueError):
    """Raised when a Config cannot produce a playable session."""


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    cell_size: int = 20                 # pixels, rendering only
    cols: int = 32
    rows: int = 24
    move_interval: float = 0.12         # seconds per step (smaller => faster)
    initial_length: int = 5
    food_reward: int = 10
    speedup_threshold: int = 50         # speed up every N points
    speedup_factor: float = 0.92
    min_move_interval: float = 0.04
    start: Optional[Tuple[int, int]] = None   # None -> grid centre
    start_direction: Tuple[int, int] = RIGHT
    seed: Optional[int] = None          # None -> seeded from the clock
    fps: int = 120

    @property
    def start_cell(self) -> Tuple[int, int]:
        if self.start is None:
            return (self.cols // 2, self.rows // 2)
        return self.start

    @property
    def window_size(self) -> Tuple[int, int]:
        return (self.cols * self.cell_size, self.rows * self.cell_size)

    def initial_body(self) -> Tuple[Tuple[int, int], ...]:
        """Head first, extended away from the starting direction."""
        sx, sy = self.start_cell
        dx, dy = self.start_direction
        return tuple((sx - i * dx, sy - i * dy) for i in range(self.initial_length))

    def validate(self) -> "Config":
        if self.cols <= 0 or self.rows <= 0:
            raise ConfigError(f"grid must be at least 1x1, got {self.cols}x{self.rows}")
        if self.cell_size <= 0:
            raise ConfigError(f"cell_size must be positive, got {self.cell_size}")
        if self.move_interval <= 0 or self.min_move_interval <= 0:
            raise ConfigError("move intervals must be positive")
        if not 0 < self.speedup_factor <= 1:
            raise ConfigError(f"speedup_factor must be in (0, 1], got {self.speedup_factor}")
        if self.speedup_threshold <= 0:
            raise ConfigError(f"speedup_threshold must be positive, got {self.speedup_threshold}")
        if self.food_reward < 0:
            raise ConfigError(f"food_reward must be >= 0, got {self.food_reward}")
        if self.start_direction not in DIRECTIONS:
            raise ConfigError(f"unknown start direction {self.start_direction}")
        if self.initial_length < 1:
            raise ConfigError(f"initial_length must be >= 1, got {self.initial_length}")
        if self.initial_length >= self.cols * self.rows:
            raise ConfigError("initial snake leaves no free cell for food")
        for x, y in self.initial_body():
            if not (0 <= x < self.cols and 0 <= y < self.rows):
                raise ConfigError(
                    f"initial snake of length {self.initial_length} at "
                    f"{self.start_cell} does not fit on a {self.cols}x{self.rows} grid"
                )
        return self


CFG = Config()
