"""World - element and component storage with queries."""

from __future__ import annotations

from typing import Any, Callable, Iterator, TypeVar, Union, cast

from nocturne.filters import Not
from nocturne.types import DeadEntityError, EntityId

T = TypeVar("T")

QueryArg = Union[type, Not]
HookCallback = Callable[["World", EntityId, Any], None]

_ATTACH = "attach"
_DETACH = "detach"


class World:
    """Entities are bare ids; components live in one store per type.

    Hooks fire synchronously: attach hooks after the component is stored,
    detach hooks after it is removed (including every component of a
    despawned entity).
    """

    def __init__(self) -> None:
        self._stores: dict[type, dict[EntityId, Any]] = {}
        self._living: set[EntityId] = set()
        self._last_id: EntityId = -1
        self._hooks: dict[str, dict[type, list[HookCallback]]] = {
            _ATTACH: {},
            _DETACH: {},
        }

    # -- Entities --

    def spawn(self) -> EntityId:
        self._last_id += 1
        self._living.add(self._last_id)
        return self._last_id

    def despawn(self, entity_id: EntityId) -> None:
        """Remove an entity and all of its components. Dead ids are ignored."""
        if not self.alive(entity_id):
            return
        self._living.remove(entity_id)
        for ctype in list(self._stores):
            self._remove(entity_id, ctype)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._living

    def entities(self) -> frozenset[EntityId]:
        return frozenset(self._living)

    # -- Components --

    def attach(self, entity_id: EntityId, component: Any) -> None:
        """Store ``component`` under its own type, replacing any previous one."""
        ctype = type(component)
        if not self.alive(entity_id):
            raise DeadEntityError(
                entity_id, f"Cannot attach {ctype.__name__} to dead entity {entity_id}"
            )
        self._stores.setdefault(ctype, {})[entity_id] = component
        self._fire(_ATTACH, ctype, entity_id, component)

    def detach(self, entity_id: EntityId, component_type: type) -> None:
        self._remove(entity_id, component_type)

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if not self.alive(entity_id):
            raise DeadEntityError(entity_id, f"Entity {entity_id} is not alive")
        try:
            return cast(T, self._stores[component_type][entity_id])
        except KeyError:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component"
            ) from None

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        return self.alive(entity_id) and entity_id in self._stores.get(component_type, {})

    def query(self, *args: QueryArg) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Yield ``(eid, components)`` for live entities holding every type.

        ``Not(ctype)`` arguments exclude entities holding ``ctype``. At least
        one plain type is needed; with none the query yields nothing.
        """
        wanted = [a for a in args if not isinstance(a, Not)]
        unwanted = [a.ctype for a in args if isinstance(a, Not)]
        if not wanted:
            return
        driver = self._stores.get(wanted[0], {})
        for eid in list(driver):
            if eid not in self._living or self._holds_any(eid, unwanted):
                continue
            found = self._collect(eid, wanted)
            if found is not None:
                yield eid, found

    # -- Hooks --

    def on_attach(self, ctype: type, callback: HookCallback) -> None:
        self._hooks[_ATTACH].setdefault(ctype, []).append(callback)

    def on_detach(self, ctype: type, callback: HookCallback) -> None:
        self._hooks[_DETACH].setdefault(ctype, []).append(callback)

    def off_attach(self, ctype: type, callback: HookCallback) -> None:
        self._unhook(_ATTACH, ctype, callback)

    def off_detach(self, ctype: type, callback: HookCallback) -> None:
        self._unhook(_DETACH, ctype, callback)

    # -- Internals --

    def _remove(self, entity_id: EntityId, ctype: type) -> None:
        component = self._stores.get(ctype, {}).pop(entity_id, None)
        if component is not None:
            self._fire(_DETACH, ctype, entity_id, component)

    def _fire(self, kind: str, ctype: type, entity_id: EntityId, component: Any) -> None:
        for callback in list(self._hooks[kind].get(ctype, ())):
            callback(self, entity_id, component)

    def _unhook(self, kind: str, ctype: type, callback: HookCallback) -> None:
        callbacks = self._hooks[kind].get(ctype, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def _holds_any(self, eid: EntityId, ctypes: list[type]) -> bool:
        return any(eid in self._stores.get(ctype, {}) for ctype in ctypes)

    def _collect(self, eid: EntityId, ctypes: list[type]) -> tuple[Any, ...] | None:
        found = []
        for ctype in ctypes:
            store = self._stores.get(ctype, {})
            if eid not in store:
                return None
            found.append(store[eid])
        return tuple(found)
