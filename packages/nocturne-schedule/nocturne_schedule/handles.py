"""Cancellation handles for scheduled components."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nocturne import EntityId, World


class Handle:
    """Stops one scheduled component (a Sequence or an Oscillator).

    Cancelling after the element is gone, or twice, does nothing.
    """

    __slots__ = ("_world", "_eid", "_ctype")

    def __init__(self, world: World, eid: EntityId, ctype: type) -> None:
        self._world = world
        self._eid = eid
        self._ctype = ctype

    @property
    def eid(self) -> EntityId:
        return self._eid

    @property
    def ctype(self) -> type:
        return self._ctype

    @property
    def active(self) -> bool:
        return self._world.has(self._eid, self._ctype)

    def cancel(self) -> None:
        if self.active:
            self._world.detach(self._eid, self._ctype)

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return f"Handle({self._ctype.__name__}, eid={self._eid}, {state})"
