"""Named guard predicates for FSM transitions."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from nocturne import EntityId, FrameContext, World

Guard = Callable[["World", "FrameContext", "EntityId"], bool]


class FSMGuards:
    """Guards are looked up by name so transition tables stay plain data.

    A guard receives ``(world, ctx, eid)``; reading ``ctx.progress`` lets a
    phase follow the frame's scroll sample.
    """

    def __init__(self) -> None:
        self._table: dict[str, Guard] = {}

    def register(self, name: str, fn: Guard) -> None:
        """Bind ``name`` to ``fn``, replacing an earlier binding."""
        self._table[name] = fn

    def check(self, name: str, world: World, ctx: FrameContext, eid: EntityId) -> bool:
        if name not in self._table:
            raise KeyError(f"No guard named {name!r}; known: {self.names()}")
        return bool(self._table[name](world, ctx, eid))

    def has(self, name: str) -> bool:
        return name in self._table

    def names(self) -> list[str]:
        return [*self._table]
