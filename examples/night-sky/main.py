"""Night Sky - Scroll-driven animated night sky.

Exercises nocturne, nocturne-tween, nocturne-schedule, nocturne-fsm and
nocturne-scene.

Controls:
  Wheel     Scroll
  Up/Down   Scroll by a small step
  Home/End  Jump to top / bottom
  Esc       Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from nocturne_scene import SceneConfig, Timeline

from ui.constants import BG_COLOR, FPS, KEY_STEP, SCREEN_H, SCREEN_W, WHEEL_STEP
from ui.sky import draw_sky
from ui.status import draw_status_bar

logger = logging.getLogger("night-sky")


class PygameHost:
    """Host for the pygame window: the viewer owns the scroll offset."""

    def __init__(self, timeline: Timeline) -> None:
        self.timeline = timeline
        self.offset = 0.0

    def disable_scroll_restoration(self) -> None:
        # A fresh window never restores a previous offset.
        logger.info("scroll restoration disabled")

    def scroll_to(self, offset: float) -> None:
        self.offset = offset
        self.timeline.on_scroll(offset)

    def scroll_by(self, delta: float) -> None:
        self.timeline.scroll_by(delta)
        self.offset = self.timeline.scroll.offset


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Night Sky - nocturne demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    timeline = Timeline(config=SceneConfig(fps=FPS, viewport_width=SCREEN_W, viewport_height=SCREEN_H))
    host = PygameHost(timeline)
    timeline.start(host)

    frame_interval = 1.0 / FPS
    accumulator = 0.0
    frame = timeline.frame()
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.MOUSEWHEEL:
                host.scroll_by(-event.y * WHEEL_STEP)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_DOWN:
                    host.scroll_by(KEY_STEP)
                elif event.key == pygame.K_UP:
                    host.scroll_by(-KEY_STEP)
                elif event.key == pygame.K_HOME:
                    host.scroll_to(0.0)
                elif event.key == pygame.K_END:
                    host.scroll_to(timeline.scroll.scrollable)

        # --- Frames ---
        while accumulator >= frame_interval:
            frame = timeline.frame()
            accumulator -= frame_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_sky(screen, frame, timeline.world)
        draw_status_bar(screen, font, frame)
        pygame.display.flip()

    timeline.teardown()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
