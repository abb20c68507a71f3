"""System factory for FSM evaluation."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from nocturne_fsm.components import FSM
from nocturne_fsm.guards import FSMGuards

if TYPE_CHECKING:
    from nocturne import EntityId, FrameContext, World


def make_fsm_system(
    guards: FSMGuards,
    on_transition: Callable[[World, FrameContext, EntityId, str, str], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that fires at most one FSM transition per entity per frame."""

    def _find_transition(fsm: FSM, world: World, ctx: FrameContext, eid: int) -> str | None:
        for guard_name, target in fsm.transitions.get(fsm.state, ()):
            if guards.check(guard_name, world, ctx, eid):
                return target
        return None

    def fsm_system(world: World, ctx: FrameContext) -> None:
        for eid, (fsm,) in list(world.query(FSM)):
            if not world.alive(eid):
                continue
            target = _find_transition(fsm, world, ctx, eid)
            if target is None or target == fsm.state:
                continue
            old = fsm.state
            fsm.state = target
            if on_transition is not None:
                on_transition(world, ctx, eid, old, target)

    return fsm_system
