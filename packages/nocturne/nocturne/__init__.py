"""nocturne - A small frame engine for scroll- and time-driven scenes."""

from nocturne.clock import Clock
from nocturne.engine import Engine, clamp_progress
from nocturne.filters import Not
from nocturne.types import DeadEntityError, EntityId, FrameContext
from nocturne.world import World

__all__ = [
    "Engine",
    "clamp_progress",
    "World",
    "Clock",
    "Not",
    "FrameContext",
    "EntityId",
    "DeadEntityError",
]
