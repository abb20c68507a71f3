"""Sequence and Oscillator components."""
from __future__ import annotations

from dataclasses import dataclass, field

from nocturne_tween import EASINGS


@dataclass(frozen=True)
class Stage:
    """One timed step of a staged sequence.

    Attributes:
        channel: Name of the channel this stage drives.
        delay: Seconds after the sequence starts before the stage begins.
        duration: Seconds the stage takes to reach ``target``.
        easing: Name of the easing in ``EASINGS``.
        target: Value the channel holds once the stage is done.
    """

    channel: str
    delay: float
    duration: float
    easing: str = "linear"
    target: float = 1.0

    def __post_init__(self) -> None:
        if not self.channel:
            raise ValueError("Stage channel must be non-empty")
        if self.delay < 0:
            raise ValueError(f"delay must be >= 0, got {self.delay}")
        if self.duration <= 0:
            raise ValueError(f"duration must be > 0, got {self.duration}")
        if self.easing not in EASINGS:
            raise ValueError(f"Unknown easing: {self.easing!r}")

    @property
    def end(self) -> float:
        return self.delay + self.duration


@dataclass
class Sequence:
    """Staged real-time sequence. Auto-detaches once every stage is done.

    ``elapsed`` is derived from the frame count, not summed, so it matches
    the clock exactly. ``completed`` holds the indexes of finished stages,
    so several stages may drive the same channel.
    """

    stages: tuple[Stage, ...]
    frames: int = 0
    elapsed: float = 0.0
    completed: list[int] = field(default_factory=list)


@dataclass
class Oscillator:
    """Repeating time-driven drift. ``phase`` cycles through [0, 1).

    ``running`` drops to False when the oscillator is detached; a stopped
    oscillator never advances again.
    """

    period: float
    amplitude_x: float
    amplitude_y: float
    phase: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    running: bool = True

    def __post_init__(self) -> None:
        if self.period <= 0:
            raise ValueError(f"period must be > 0, got {self.period}")
