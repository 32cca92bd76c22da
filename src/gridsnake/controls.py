# controls.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import UP, DOWN, LEFT, RIGHT
from .game import GameSession
from .snapshot import State


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    QUIT = "quit"
    IGNORE = "ignore"


@dataclass(frozen=True)
class InputEvent:
    """A close signal (``quit=True``) or a key press named like ``pygame.key.name``."""
    key: Optional[str] = None
    quit: bool = False


# Arrows and WASD share the four directions
KEYMAP = {
    "up": Command.MOVE_UP,
    "w": Command.MOVE_UP,
    "down": Command.MOVE_DOWN,
    "s": Command.MOVE_DOWN,
    "left": Command.MOVE_LEFT,
    "a": Command.MOVE_LEFT,
    "right": Command.MOVE_RIGHT,
    "d": Command.MOVE_RIGHT,
    "p": Command.TOGGLE_PAUSE,
    "r": Command.RESTART,
    "escape": Command.QUIT,
}

MOVES = {
    Command.MOVE_UP: UP,
    Command.MOVE_DOWN: DOWN,
    Command.MOVE_LEFT: LEFT,
    Command.MOVE_RIGHT: RIGHT,
}


class InputTranslator:
    def __init__(self, session: GameSession):
        self.session = session

    @staticmethod
    def translate(event: InputEvent) -> Command:
        if event.quit:
            return Command.QUIT
        if event.key is None:
            return Command.IGNORE
        return KEYMAP.get(event.key.lower(), Command.IGNORE)

    def handle(self, event: InputEvent) -> Command:
        """
        Translate one event and apply it to the session.
        QUIT is only reported back; ending the run loop is the caller's job.
        """
        cmd = self.translate(event)
        if cmd in MOVES:
            if self.session.state is not State.GAME_OVER:
                self.session.set_direction(MOVES[cmd])
        elif cmd is Command.TOGGLE_PAUSE:
            self.session.toggle_pause()
        elif cmd is Command.RESTART:
            self.session.restart()
        return cmd
