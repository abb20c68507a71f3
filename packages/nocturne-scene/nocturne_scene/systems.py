"""Scene system factories: scroll channels, stroke writes and the entrance latch."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from nocturne import Not
from nocturne_schedule import Oscillator

from nocturne_scene.animators import scroll_channels
from nocturne_scene.components import Channels, Element, Entrance

if TYPE_CHECKING:
    from nocturne import EntityId, FrameContext, World

logger = logging.getLogger(__name__)


def make_scroll_system() -> Callable[[World, FrameContext], None]:
    """Return a system that recomputes every scroll-driven channel."""

    def scroll_system(world: World, ctx: FrameContext) -> None:
        for _eid, (element, channels) in world.query(Element, Channels):
            channels.values.update(scroll_channels(element.config, ctx.progress))

    return scroll_system


def write_stage_channels(
    world: World, ctx: FrameContext, eid: EntityId, values: dict[str, float]
) -> None:
    """Sequence ``on_sample`` callback: copy stroke fractions into Channels."""
    if world.has(eid, Channels):
        world.get(eid, Channels).values.update(values)


def make_latch_system(
    threshold: float,
    on_complete: Callable[[World, FrameContext, EntityId], None] | None = None,
) -> Callable[[World, FrameContext], None]:
    """Return a system that latches finished entrances and starts their drift.

    An entrance completes the first time its ``opacity`` channel reaches
    ``threshold``. The oscillator is attached once; scrolling back later
    leaves it running.
    """

    def latch_system(world: World, ctx: FrameContext) -> None:
        for eid, (element, entrance, channels) in list(
            world.query(Element, Entrance, Channels, Not(Oscillator))
        ):
            if entrance.completed or channels.get("opacity") < threshold:
                continue
            entrance.completed = True
            style = element.config.style
            world.attach(
                eid,
                Oscillator(
                    period=element.config.drift_period,
                    amplitude_x=style.drift,
                    amplitude_y=style.drift,
                ),
            )
            logger.debug(
                "%s %d settled at progress %.3f, drift started",
                element.kind, element.index, ctx.progress,
            )
            if on_complete is not None:
                on_complete(world, ctx, eid)

    return latch_system
