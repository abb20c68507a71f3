"""Renderers for the night sky elements of one Frame."""
from __future__ import annotations

import pygame

from nocturne_scene import CloudConfig, Element, Frame, RenderItem

from ui.constants import ARROW_HEAD, ARROW_SHAFT, MOON_FILL, SCREEN_H, SCREEN_W


def _fade(color: tuple[int, int, int], opacity: float) -> tuple[int, int, int]:
    """Blend toward the black background; stands in for alpha."""
    return tuple(int(c * max(0.0, min(opacity, 1.0))) for c in color)


def _anchor(item: RenderItem) -> tuple[float, float]:
    return (
        item.x / 100.0 * SCREEN_W + item.offset_x,
        item.y / 100.0 * SCREEN_H + item.offset_y,
    )


def path_points(path: str) -> list[tuple[float, float]]:
    """Parse the ``M x y L x y ... Z`` outline produced by star_path."""
    coords = [float(tok.lstrip("ML")) for tok in path.split() if tok != "Z"]
    return list(zip(coords[0::2], coords[1::2]))


def draw_star(surface: pygame.Surface, item: RenderItem) -> None:
    if item.opacity <= 0.0 or item.path is None:
        return
    cx, cy = _anchor(item)
    # Outline is centred at (size, size) in its own box.
    points = [
        (cx + (px - item.size) * item.scale, cy + (py - item.size) * item.scale)
        for px, py in path_points(item.path)
    ]
    width = max(1, round(item.style.stroke_width))
    pygame.draw.polygon(surface, _fade(item.style.color, item.opacity), points, width)


def draw_moon(surface: pygame.Surface, item: RenderItem) -> None:
    cx, cy = _anchor(item)
    radius = item.size / 2 * item.scale
    if cy - radius > SCREEN_H:
        return
    pygame.draw.circle(surface, MOON_FILL, (cx, cy), radius)
    if item.opacity > 0.0:
        width = max(1, round(item.style.stroke_width))
        pygame.draw.circle(surface, _fade(item.style.color, item.opacity), (cx, cy), radius, width)


def draw_cloud(surface: pygame.Surface, item: RenderItem, config: CloudConfig) -> None:
    if item.opacity <= 0.0:
        return
    cx, cy = _anchor(item)
    w = config.width_vw / 100.0 * SCREEN_W
    h = item.size
    color = _fade(item.style.color, item.opacity)
    width = max(1, round(item.style.stroke_width))
    # Three overlapping puffs over a flat base.
    for fx, fy, fw, fh in ((0.0, 0.25, 1.0, 0.75), (0.15, 0.0, 0.4, 0.7), (0.45, 0.1, 0.35, 0.6)):
        rect = pygame.Rect(cx - w / 2 + fx * w, cy - h / 2 + fy * h, fw * w, fh * h)
        pygame.draw.ellipse(surface, color, rect, width)


def draw_arrow(surface: pygame.Surface, item: RenderItem) -> None:
    cx, cy = _anchor(item)
    top = cy - ARROW_SHAFT / 2
    tip = cy + ARROW_SHAFT / 2
    color = _fade(item.style.color, item.opacity)
    width = max(1, round(item.style.stroke_width * 2))

    shaft = item.strokes.get("shaft", 0.0)
    if shaft > 0.0:
        pygame.draw.line(surface, color, (cx, top), (cx, top + ARROW_SHAFT * shaft), width)
    for name, sign in (("head_left", -1), ("head_right", 1)):
        t = item.strokes.get(name, 0.0)
        if t > 0.0:
            end = (cx + sign * ARROW_HEAD * t, tip - ARROW_HEAD * t)
            pygame.draw.line(surface, color, (cx, tip), end, width)


def draw_sky(surface: pygame.Surface, frame: Frame, world) -> None:
    """Draw every item; the frame is already in draw order."""
    for item in frame.items:
        if item.kind == "star":
            draw_star(surface, item)
        elif item.kind == "moon":
            draw_moon(surface, item)
        elif item.kind == "cloud":
            draw_cloud(surface, item, world.get(item.eid, Element).config)
        elif item.kind == "arrow":
            draw_arrow(surface, item)
