"""Star polygon geometry."""
from __future__ import annotations

import math

Point = tuple[float, float]


def star_inner_radius(size: float, points: int) -> float:
    """Valley radius for a star: 4-pointed stars are sharper, others classic."""
    return size * 0.25 if points == 4 else size * 0.38


def star_vertices(
    num_points: int, outer_radius: float, inner_radius: float, precision: int = 2
) -> list[Point]:
    """Vertices of an n-pointed star, alternating outer and inner radius.

    The star is centred at ``(outer_radius, outer_radius)`` so it fits a
    square of side ``2 * outer_radius``. The first vertex is the outer tip
    straight up (angle -90 degrees); each step turns by ``pi / num_points``.
    """
    if num_points < 2:
        raise ValueError(f"num_points must be >= 2, got {num_points}")
    if outer_radius <= 0 or inner_radius <= 0:
        raise ValueError(
            f"radii must be positive, got outer={outer_radius} inner={inner_radius}"
        )

    cx = cy = outer_radius
    vertices: list[Point] = []
    for i in range(num_points * 2):
        angle = math.pi / num_points * i - math.pi / 2
        r = outer_radius if i % 2 == 0 else inner_radius
        vertices.append(
            (round(cx + r * math.cos(angle), precision), round(cy + r * math.sin(angle), precision))
        )
    return vertices


def star_path(
    num_points: int, outer_radius: float, inner_radius: float, precision: int = 2
) -> str:
    """Closed SVG path for :func:`star_vertices`, e.g. ``"M20.00 0.00 L... Z"``."""
    vertices = star_vertices(num_points, outer_radius, inner_radius, precision)
    parts = [
        f"{'M' if i == 0 else 'L'}{x:.{precision}f} {y:.{precision}f}"
        for i, (x, y) in enumerate(vertices)
    ]
    return " ".join(parts) + " Z"
