"""Sampling helpers and system factories for sequences and oscillators."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Iterable

from nocturne_schedule.components import Oscillator, Sequence, Stage
from nocturne_tween import EASINGS, interpolate

if TYPE_CHECKING:
    from nocturne import EntityId, FrameContext, World


def sample_stage(stage: Stage, elapsed: float, origin: float = 0.0) -> float:
    """Value of one stage ``elapsed`` seconds after its sequence started.

    The stage moves its channel from ``origin`` to ``stage.target``.
    """
    t = interpolate(elapsed, stage.delay, stage.end, EASINGS[stage.easing])
    return origin + (stage.target - origin) * t


def sample_sequence(stages: Iterable[Stage], elapsed: float) -> dict[str, float]:
    """Channel values ``elapsed`` seconds in.

    Stages sharing a channel chain in order: each starts from the previous
    one's target, and a stage that has not begun leaves the earlier value.
    """
    values: dict[str, float] = {}
    origins: dict[str, float] = {}
    for stage in stages:
        origin = origins.get(stage.channel, 0.0)
        if stage.channel not in values or elapsed > stage.delay:
            values[stage.channel] = sample_stage(stage, elapsed, origin)
        origins[stage.channel] = stage.target
    return values


def make_sequence_system(
    on_sample: Callable[[World, FrameContext, EntityId, dict[str, float]], None],
    on_stage_complete: Callable[[World, FrameContext, EntityId, Stage], None] | None = None,
    on_complete: Callable[[World, FrameContext, EntityId, Sequence], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that advances every Sequence by one frame.

    Callbacks are skipped for entities despawned earlier in the same frame.
    """

    def sequence_system(world: World, ctx: FrameContext) -> None:
        for eid, (seq,) in list(world.query(Sequence)):
            if not world.has(eid, Sequence):
                continue
            seq.frames += 1
            seq.elapsed = seq.frames * ctx.dt
            on_sample(world, ctx, eid, sample_sequence(seq.stages, seq.elapsed))

            for index, stage in enumerate(seq.stages):
                if index in seq.completed or seq.elapsed < stage.end:
                    continue
                seq.completed.append(index)
                if on_stage_complete is not None and world.alive(eid):
                    on_stage_complete(world, ctx, eid, stage)

            if len(seq.completed) == len(seq.stages) and world.has(eid, Sequence):
                world.detach(eid, Sequence)
                if on_complete is not None:
                    on_complete(world, ctx, eid, seq)

    return sequence_system


def make_oscillator_system() -> Callable[[World, FrameContext], None]:
    """Return a system that advances running Oscillators.

    Offsets trace a figure-eight: ``dx = ax * sin(2*pi*phase)`` and
    ``dy = ay * sin(4*pi*phase) / 2``. Both are 0 at phase 0.
    """

    def oscillator_system(world: World, ctx: FrameContext) -> None:
        for _eid, (osc,) in world.query(Oscillator):
            if not osc.running:
                continue
            osc.phase = (osc.phase + ctx.dt / osc.period) % 1.0
            angle = 2 * math.pi * osc.phase
            osc.dx = osc.amplitude_x * math.sin(angle)
            osc.dy = osc.amplitude_y * math.sin(2 * angle) / 2

    return oscillator_system


def stop_on_detach(world: World, eid: EntityId, osc: Oscillator) -> None:
    """Detach hook: an oscillator removed from its element stops for good."""
    osc.running = False
