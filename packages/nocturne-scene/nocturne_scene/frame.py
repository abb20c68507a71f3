"""Frame output: the numbers a renderer needs to draw one frame."""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING

from nocturne_fsm import FSM
from nocturne_schedule import Oscillator

from nocturne_scene.components import Channels, Element, Entrance
from nocturne_scene.config import StarConfig
from nocturne_scene.layers import LayerStyle
from nocturne_scene.shapes import star_inner_radius, star_path

if TYPE_CHECKING:
    from nocturne import EntityId, FrameContext, World

STROKE_CHANNELS = ("shaft", "head_left", "head_right")


@dataclass(frozen=True)
class RenderItem:
    """One element as the renderer sees it.

    ``x``/``y`` are the resting position in viewport percent; ``offset_x``
    and ``offset_y`` are the summed pixel offsets (entrance, parallax and
    drift) to add to it.
    """

    eid: EntityId
    kind: str
    x: float
    y: float
    offset_x: float
    offset_y: float
    opacity: float
    scale: float
    style: LayerStyle
    size: float = 0.0
    path: str | None = None
    strokes: dict[str, float] = field(default_factory=dict)
    phase: str | None = None
    ambient: bool = False


@dataclass(frozen=True)
class Frame:
    frame_number: int
    elapsed: float
    progress: float
    items: tuple[RenderItem, ...]

    def by_kind(self, kind: str) -> list[RenderItem]:
        return [item for item in self.items if item.kind == kind]


@lru_cache(maxsize=None)
def _star_outline(points: int, size: float) -> str:
    return star_path(points, size, star_inner_radius(size, points))


def render_item(world: World, eid: EntityId) -> RenderItem:
    element = world.get(eid, Element)
    values = world.get(eid, Channels).values
    config = element.config

    dx = values.get("offset_x", 0.0)
    dy = values.get("offset_y", 0.0) + values.get("parallax_y", 0.0)
    ambient = False
    if world.has(eid, Oscillator):
        osc = world.get(eid, Oscillator)
        dx += osc.dx
        dy += osc.dy
        ambient = osc.running

    path = None
    if isinstance(config, StarConfig):
        path = _star_outline(config.points, config.size)

    return RenderItem(
        eid=eid,
        kind=element.kind,
        x=config.x,
        y=config.y,
        offset_x=dx,
        offset_y=dy,
        opacity=values.get("opacity", 1.0),
        scale=values.get("scale", 1.0),
        style=config.style,
        size=config.size,
        path=path,
        strokes={name: values[name] for name in STROKE_CHANNELS if name in values},
        phase=world.get(eid, FSM).state if world.has(eid, FSM) else None,
        ambient=ambient and world.has(eid, Entrance),
    )


def build_frame(world: World, ctx: FrameContext) -> Frame:
    """Read every element once, after all systems ran for this frame."""
    items = [render_item(world, eid) for eid, _ in world.query(Element, Channels)]
    items.sort(key=lambda item: (item.style.z_order, item.eid))
    return Frame(
        frame_number=ctx.frame_number,
        elapsed=ctx.elapsed,
        progress=ctx.progress,
        items=tuple(items),
    )
