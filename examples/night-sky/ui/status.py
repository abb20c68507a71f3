"""Bottom status bar."""
from __future__ import annotations

import pygame

from nocturne_scene import SETTLED, Frame

from ui.constants import SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, frame: Frame) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))

    settled = sum(1 for item in frame.items if item.phase == SETTLED)
    drifting = sum(1 for item in frame.items if item.ambient)
    text = (
        f"progress {frame.progress:5.3f}   t {frame.elapsed:6.2f}s   "
        f"settled {settled}   drifting {drifting}"
    )
    surface.blit(font.render(text, True, TEXT_COLOR), (10, y + 7))

    hint = font.render("Wheel/Up/Down scroll  Home/End jump  Esc quit", True, TEXT_DIM)
    surface.blit(hint, (SCREEN_W - hint.get_width() - 10, y + 7))
