"""The declarative cast of the scene and checks over its windows."""
from __future__ import annotations

from typing import Iterable

from nocturne_tween import Window

from nocturne_scene.config import (
    ArrowConfig,
    CloudConfig,
    ElementConfig,
    MoonConfig,
    StarConfig,
)

# Hand-placed, no randomness. Each star enters alone over 5% of scroll:
# 0.20-0.75 covers all eleven entrances and leaves 0.75-1.0 for ambient.
# (x%, y%, outer radius px, points, window start, window end, layer)
STARS: tuple[tuple[float, float, float, int, float, float, str], ...] = (
    (5, 8, 20, 4, 0.20, 0.25, "midground"),
    (92, 25, 28, 4, 0.25, 0.30, "foreground"),
    (8, 50, 16, 5, 0.30, 0.35, "background"),
    (70, 6, 24, 4, 0.35, 0.40, "foreground"),
    (35, 88, 18, 5, 0.40, 0.45, "midground"),
    (50, 42, 34, 4, 0.45, 0.50, "foreground"),
    (93, 72, 14, 5, 0.50, 0.55, "background"),
    (28, 5, 20, 4, 0.55, 0.60, "midground"),
    (88, 90, 22, 5, 0.60, 0.65, "midground"),
    (4, 82, 12, 4, 0.65, 0.70, "background"),
    (62, 65, 18, 5, 0.70, 0.75, "midground"),
)


def star_configs() -> tuple[StarConfig, ...]:
    return tuple(
        StarConfig(
            x=x,
            y=y,
            size=size,
            points=points,
            window=Window(start, end),
            layer=layer,
            drift_period=5.0 + 0.7 * (i % 5),
        )
        for i, (x, y, size, points, start, end, layer) in enumerate(STARS)
    )


def default_ensemble() -> tuple[ElementConfig, ...]:
    """Arrow first, then the star field, the moon and the cloud."""
    return (ArrowConfig(), *star_configs(), MoonConfig(), CloudConfig())


def validate_ensemble(ensemble: Iterable[ElementConfig]) -> tuple[ElementConfig, ...]:
    """Freeze and check an ensemble before any element is spawned."""
    elements = tuple(ensemble)
    if not elements:
        raise ValueError("ensemble must contain at least one element")
    kinds = (ArrowConfig, StarConfig, MoonConfig, CloudConfig)
    for i, config in enumerate(elements):
        if not isinstance(config, kinds):
            raise TypeError(
                f"ensemble entry {i} is {type(config).__name__}, not an element config"
            )
    if sum(isinstance(c, ArrowConfig) for c in elements) > 1:
        raise ValueError("ensemble may contain at most one arrow")
    return elements


def entrance_windows(ensemble: Iterable[ElementConfig]) -> list[Window]:
    """Entrance window of every element that has one, in ensemble order."""
    return [config.entrance for config in ensemble if config.entrance is not None]


def overlapping_pairs(windows: Iterable[Window]) -> list[tuple[int, int]]:
    """Index pairs of windows that overlap. Shared endpoints are not overlap."""
    items = list(windows)
    return [
        (i, j)
        for i in range(len(items))
        for j in range(i + 1, len(items))
        if items[i].overlaps(items[j])
    ]


def window_coverage(windows: Iterable[Window]) -> list[tuple[float, float]]:
    """Union of the windows as sorted, merged ``(start, end)`` intervals."""
    merged: list[list[float]] = []
    for w in sorted(windows, key=lambda w: (w.start, w.end)):
        if merged and w.start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], w.end)
        else:
            merged.append([w.start, w.end])
    return [(start, end) for start, end in merged]
