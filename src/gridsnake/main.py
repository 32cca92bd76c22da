# main.py
import argparse
import logging
from typing import List, Optional

import pygame # type: ignore

from .config import Config, ConfigError
from .controls import Command, InputEvent, InputTranslator
from .game import GameSession
from .render import draw_frame
from .scheduler import FixedStepScheduler
from .snapshot import State

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--cols", type=int, default=defaults.cols)
    parser.add_argument("--rows", type=int, default=defaults.rows)
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size,
                        help="pixels per grid cell")
    parser.add_argument("--interval", type=float, default=defaults.move_interval,
                        help="seconds per move at the start (smaller => faster)")
    parser.add_argument("--length", type=int, default=defaults.initial_length,
                        help="initial snake length")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed food placement (default: clock)")
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        cols=args.cols,
        rows=args.rows,
        cell_size=args.cell_size,
        move_interval=args.interval,
        initial_length=args.length,
        seed=args.seed,
        fps=args.fps,
    ).validate()


def poll_events() -> List[InputEvent]:
    events = []
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            events.append(InputEvent(quit=True))
        elif event.type == pygame.KEYDOWN:
            events.append(InputEvent(key=pygame.key.name(event.key)))
    return events


def run(cfg: Config) -> None:
    session = GameSession(cfg)
    scheduler = FixedStepScheduler(session)
    controls = InputTranslator(session)

    pygame.init()
    fonts = (pygame.font.SysFont(None, 22), pygame.font.SysFont(None, 48))
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption("Grid Snake")
    clock = pygame.time.Clock()

    running = True
    clock.tick()
    try:
        while running:
            # 1) input
            for event in poll_events():
                cmd = controls.handle(event)
                if cmd is Command.QUIT:
                    running = False
                elif cmd is Command.RESTART:
                    scheduler.reset()

            # 2) update
            before = session.state
            scheduler.tick(clock.get_time() / 1000.0)
            if before is State.RUNNING and session.state in (State.GAME_OVER, State.WON):
                logger.debug("Final board:\n%s", session.snapshot().render_text())

            # 3) render
            draw_frame(screen, fonts, cfg.cell_size, session.snapshot())
            pygame.display.flip()
            clock.tick(cfg.fps)
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = config_from_args(args)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2
    run(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
