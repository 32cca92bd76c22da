# render.py
from typing import Tuple
import pygame # type: ignore

from .config import BG, CELL_EVEN, CELL_ODD, HEAD, GREEN, RED, TEXT, TITLE
from .snapshot import Snapshot, State

HELP = {
    State.RUNNING: "[Arrows / WASD] Move  [P] Pause  [R] Restart  [Esc] Quit",
    State.PAUSED: "[P] Resume  [R] Restart  [Esc] Quit  (Paused)",
    State.GAME_OVER: "[R] Restart  [Esc] Quit",
    State.WON: "[R] Restart  [Esc] Quit",
}


def draw_cell(screen: pygame.Surface, cell: int, gx: int, gy: int,
              color: Tuple[int, int, int], inset: int = 1) -> None:
    rect = pygame.Rect(gx * cell + inset, gy * cell + inset, cell - 2 * inset, cell - 2 * inset)
    pygame.draw.rect(screen, color, rect)


def draw_board(screen: pygame.Surface, cell: int, snap: Snapshot) -> None:
    screen.fill(BG)
    # faint checker
    for x in range(snap.cols):
        for y in range(snap.rows):
            draw_cell(screen, cell, x, y, CELL_EVEN if (x + y) % 2 == 0 else CELL_ODD, inset=0)
    # food
    if snap.food is not None:
        draw_cell(screen, cell, snap.food[0], snap.food[1], RED)
    # snake, head last so it stays on top
    for x, y in snap.body[1:]:
        draw_cell(screen, cell, x, y, GREEN)
    draw_cell(screen, cell, snap.head[0], snap.head[1], HEAD)


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    height = screen.get_height()
    score = font.render(f"Score: {snap.score}", True, TEXT)
    screen.blit(score, (8, 4))
    info = font.render(HELP[snap.state], True, TEXT)
    screen.blit(info, (8, height - 28))


def draw_banner(screen: pygame.Surface, font: pygame.font.Font, title: str) -> None:
    width, height = screen.get_size()
    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    text = font.render(title, True, TITLE)
    screen.blit(text, text.get_rect(center=(width // 2, height // 2 - 20)))


def draw_frame(screen: pygame.Surface, fonts: Tuple[pygame.font.Font, pygame.font.Font],
               cell: int, snap: Snapshot) -> None:
    small, big = fonts
    draw_board(screen, cell, snap)
    if snap.state is State.GAME_OVER:
        draw_banner(screen, big, "Game Over")
    elif snap.state is State.WON:
        draw_banner(screen, big, "You Win!")
    draw_hud(screen, small, snap)
