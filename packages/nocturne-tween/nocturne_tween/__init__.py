"""nocturne-tween - Easing curves and windowed interpolation."""
from __future__ import annotations

from nocturne_tween.easing import (
    EASINGS,
    ease_in_out,
    ease_out,
    ease_sinusoidal,
    linear,
    resolve_easing,
)
from nocturne_tween.window import InvalidWindowError, Window, interpolate, remap

__all__ = [
    "EASINGS",
    "linear",
    "ease_in_out",
    "ease_out",
    "ease_sinusoidal",
    "resolve_easing",
    "interpolate",
    "remap",
    "Window",
    "InvalidWindowError",
]
