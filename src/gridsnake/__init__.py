"""Grid snake: fixed-step simulation core plus a thin pygame shell."""

from .config import Config, ConfigError
from .food import RandomFoodPlacer, NoFreeCellError
from .game import GameSession, Snake
from .snapshot import Snapshot, State
from .scheduler import FixedStepScheduler
from .controls import Command, InputEvent, InputTranslator

__all__ = [
    "Config", "ConfigError",
    "RandomFoodPlacer", "NoFreeCellError",
    "GameSession", "Snake",
    "Snapshot", "State",
    "FixedStepScheduler",
    "Command", "InputEvent", "InputTranslator",
]
