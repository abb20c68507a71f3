"""Entrance phase guards and transition table."""
from __future__ import annotations

from nocturne_fsm import FSMGuards

from nocturne_scene.components import Entrance

PENDING = "pending"
ENTERING = "entering"
SETTLED = "settled"

# Phases follow progress in both directions; only the ambient latch is one-way.
ENTRANCE_TRANSITIONS: dict[str, list[list[str]]] = {
    PENDING: [["in_window", ENTERING], ["past_window", SETTLED]],
    ENTERING: [["past_window", SETTLED], ["before_window", PENDING]],
    SETTLED: [["in_window", ENTERING], ["before_window", PENDING]],
}


def make_entrance_guards() -> FSMGuards:
    guards = FSMGuards()
    guards.register(
        "before_window",
        lambda w, ctx, e: ctx.progress <= w.get(e, Entrance).window.start,
    )
    guards.register(
        "in_window",
        lambda w, ctx, e: w.get(e, Entrance).window.contains(ctx.progress),
    )
    guards.register(
        "past_window",
        lambda w, ctx, e: ctx.progress >= w.get(e, Entrance).window.end,
    )
    return guards
