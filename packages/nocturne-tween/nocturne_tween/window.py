"""Windowed interpolation: the primitive under every scroll-driven channel."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from nocturne_tween.easing import Easing, linear, resolve_easing


class InvalidWindowError(ValueError):
    """Raised when an activation window does not satisfy 0 <= start < end <= 1."""


def interpolate(
    progress: float, start: float, end: float, easing: Easing = linear
) -> float:
    """Return the eased position of ``progress`` inside ``[start, end]``.

    0 at or before ``start``, 1 at or after ``end``, ``easing`` of the
    normalized position in between. Callers scale the result themselves:
    ``a + (b - a) * interpolate(...)``.
    """
    if progress <= start:
        return 0.0
    if progress >= end:
        return 1.0
    return easing((progress - start) / (end - start))


@dataclass(frozen=True)
class Window:
    """Progress interval over which one channel moves from rest to settled."""

    start: float
    end: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.start < self.end <= 1.0):
            raise InvalidWindowError(
                f"window must satisfy 0 <= start < end <= 1, got [{self.start}, {self.end}]"
            )

    @property
    def width(self) -> float:
        return self.end - self.start

    def apply(self, progress: float, easing: str | Easing = linear) -> float:
        return interpolate(progress, self.start, self.end, resolve_easing(easing))

    def contains(self, progress: float) -> bool:
        """True while ``progress`` is strictly inside the window."""
        return self.start < progress < self.end

    def overlaps(self, other: Window) -> bool:
        """Windows that only share an endpoint do not overlap."""
        return self.start < other.end and other.start < self.end


def remap(
    value: float,
    stops: Sequence[float],
    outputs: Sequence[float],
    easing: str | Easing = linear,
) -> float:
    """Map ``value`` through a piecewise curve.

    ``stops`` must be strictly increasing and the same length as
    ``outputs``. Values before the first stop or after the last are pinned
    to the first or last output.
    """
    if len(stops) != len(outputs):
        raise ValueError(
            f"stops and outputs differ in length: {len(stops)} != {len(outputs)}"
        )
    if len(stops) < 2:
        raise ValueError("remap needs at least two stops")
    if any(b <= a for a, b in zip(stops, stops[1:])):
        raise ValueError(f"stops must be strictly increasing, got {list(stops)}")

    fn = resolve_easing(easing)
    if value <= stops[0]:
        return float(outputs[0])
    for i in range(1, len(stops)):
        if value <= stops[i]:
            a, b = outputs[i - 1], outputs[i]
            return a + (b - a) * interpolate(value, stops[i - 1], stops[i], fn)
    return float(outputs[-1])
