"""Scene components."""
from __future__ import annotations

from dataclasses import dataclass, field

from nocturne_tween import Window

from nocturne_scene.config import ElementConfig


@dataclass(frozen=True)
class Element:
    """Immutable link from an entity to its configuration."""

    kind: str
    config: ElementConfig
    index: int = 0


@dataclass
class Channels:
    """Current value of every named output channel of one element."""

    values: dict[str, float] = field(default_factory=dict)

    def get(self, name: str, default: float = 0.0) -> float:
        return self.values.get(name, default)


@dataclass
class Entrance:
    """Entrance window plus the one-shot completion latch.

    ``completed`` flips to True once and is never cleared.
    """

    window: Window
    completed: bool = False
