# scheduler.py
import logging

from .game import GameSession
from .snapshot import State

logger = logging.getLogger(__name__)


class FixedStepScheduler:
    """
    Turns variable frame times into fixed simulation steps.

    Elapsed seconds are accumulated and one ``session.step()`` is emitted
    per full move interval, so a slow frame is caught up with several steps.
    The interval is re-read from the session before every step because
    eating food can shorten it mid-burst. While the session is not running
    the accumulator is dropped, so resuming never fires a burst of moves.
    """

    def __init__(self, session: GameSession):
        self.session = session
        self.accumulator = 0.0

    def reset(self) -> None:
        self.accumulator = 0.0

    def tick(self, dt: float) -> int:
        """Feed ``dt`` seconds of real time. Returns the number of steps run."""
        if dt < 0:
            raise ValueError(f"elapsed time must be >= 0, got {dt}")

        if self.session.state is not State.RUNNING:
            self.accumulator = 0.0
            return 0

        self.accumulator += dt
        steps = 0
        while self.accumulator >= self.session.move_interval:
            self.accumulator -= self.session.move_interval
            steps += 1
            if self.session.step() is not State.RUNNING:
                if self.accumulator >= self.session.move_interval:
                    logger.debug("Session ended mid catch-up, dropping %.3fs", self.accumulator)
                self.accumulator = 0.0
                break
        return steps
