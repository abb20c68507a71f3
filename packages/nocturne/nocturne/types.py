"""Shared type aliases and protocols for the frame engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


@dataclass(frozen=True, slots=True)
class FrameContext:
    """Everything a system may read about the current frame.

    ``progress`` is the one scroll sample taken for this frame; every
    system in the frame sees the same value.
    """

    frame_number: int
    dt: float
    elapsed: float
    progress: float
    request_stop: Callable[[], None]


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not alive."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


if TYPE_CHECKING:
    from nocturne.world import World

System = Callable[["World", FrameContext], None]
