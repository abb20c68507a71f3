"""Easing functions for windowed interpolation.

Every easing maps [0, 1] onto [0, 1] with ``f(0) == 0`` and ``f(1) == 1``.
They are only ever called with an already-clamped ``t``.
"""
from __future__ import annotations

import math
from typing import Callable

Easing = Callable[[float], float]

_TAU = 2 * math.pi


def linear(t: float) -> float:
    return t


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_out(t: float) -> float:
    """Cubic deceleration: fast start, gentle landing."""
    return 1 - (1 - t) ** 3


def ease_sinusoidal(t: float) -> float:
    """S-curve with zero velocity at both ends, used for settle motions."""
    return t - math.sin(_TAU * t) / _TAU


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in_out": ease_in_out,
    "ease_out": ease_out,
    "ease_sinusoidal": ease_sinusoidal,
}


def resolve_easing(easing: str | Easing) -> Easing:
    """Look up an easing by name, or pass a callable through unchanged."""
    if callable(easing):
        return easing
    try:
        return EASINGS[easing]
    except KeyError:
        raise ValueError(f"Unknown easing: {easing!r}") from None
