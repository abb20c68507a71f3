"""Timeline - owns the scroll sample, the cast and the frame loop."""
from __future__ import annotations

import logging
from typing import Iterable

from nocturne import EntityId, Engine, FrameContext, World
from nocturne_fsm import FSM, make_fsm_system
from nocturne_schedule import (
    Handle,
    Oscillator,
    Sequence,
    make_oscillator_system,
    make_sequence_system,
    stop_on_detach,
)

from nocturne_scene.animators import arrow_stage_channels, scroll_channels
from nocturne_scene.components import Channels, Element, Entrance
from nocturne_scene.config import (
    ArrowConfig,
    CloudConfig,
    ElementConfig,
    MoonConfig,
    SceneConfig,
    StarConfig,
)
from nocturne_scene.ensemble import default_ensemble, validate_ensemble
from nocturne_scene.frame import Frame, build_frame
from nocturne_scene.guards import ENTRANCE_TRANSITIONS, PENDING, make_entrance_guards
from nocturne_scene.host import Host, MemoryHost
from nocturne_scene.scroll import ScrollSource
from nocturne_scene.systems import (
    make_latch_system,
    make_scroll_system,
    write_stage_channels,
)

logger = logging.getLogger(__name__)

_KINDS: dict[type, str] = {
    ArrowConfig: "arrow",
    StarConfig: "star",
    MoonConfig: "moon",
    CloudConfig: "cloud",
}


class Timeline:
    """Scroll-driven scene orchestrator.

    Owns the single scroll position and the immutable ensemble. Each call
    to :meth:`frame` takes one progress sample, runs every system against
    it and returns the resulting :class:`Frame`.

    Args:
        ensemble: Element configs in draw-declaration order. Defaults to
            :func:`default_ensemble`.
        config: Session configuration. Defaults to ``SceneConfig()``.
    """

    def __init__(
        self,
        ensemble: Iterable[ElementConfig] | None = None,
        config: SceneConfig | None = None,
    ) -> None:
        self._config = config if config is not None else SceneConfig()
        self._ensemble = validate_ensemble(
            ensemble if ensemble is not None else default_ensemble()
        )
        self._scroll = ScrollSource(self._config.viewport_height, self._config.spacer_vh)
        self._engine = Engine(fps=self._config.fps)
        self._host: Host | None = None
        self._handles: dict[EntityId, list[Handle]] = {}
        self._frame: Frame | None = None
        self._started = False
        self._torn_down = False

        world = self._engine.world
        world.on_attach(Oscillator, self._track)
        world.on_attach(Sequence, self._track)
        world.on_detach(Oscillator, stop_on_detach)

        # Order matters: strokes and scroll channels first, then phases,
        # then the latch that reads opacity, then drift, then the read-out.
        self._engine.add_system(make_sequence_system(write_stage_channels))
        self._engine.add_system(make_scroll_system())
        self._engine.add_system(
            make_fsm_system(make_entrance_guards(), on_transition=self._log_transition)
        )
        self._engine.add_system(make_latch_system(self._config.completion_threshold))
        self._engine.add_system(make_oscillator_system())
        self._engine.add_system(self._capture_frame)

        self._engine.on_start(self._begin_session)
        self._engine.on_stop(self._release)

        self._eids: tuple[EntityId, ...] = tuple(
            self._spawn(world, i, cfg) for i, cfg in enumerate(self._ensemble)
        )

    # -- Properties --

    @property
    def config(self) -> SceneConfig:
        return self._config

    @property
    def ensemble(self) -> tuple[ElementConfig, ...]:
        return self._ensemble

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def world(self) -> World:
        return self._engine.world

    @property
    def scroll(self) -> ScrollSource:
        return self._scroll

    @property
    def progress(self) -> float:
        return self._scroll.progress

    @property
    def element_ids(self) -> tuple[EntityId, ...]:
        return self._eids

    @property
    def started(self) -> bool:
        return self._started

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    def handles(self, eid: EntityId) -> list[Handle]:
        return list(self._handles.get(eid, ()))

    # -- Session lifecycle --

    def start(self, host: Host | None = None) -> None:
        """Run the one-time session setup. Later calls do nothing."""
        if self._started or self._torn_down:
            return
        self._host = host if host is not None else MemoryHost()
        self._started = True
        self._engine.start()

    def teardown(self) -> None:
        """Cancel every handle and remove every element. Idempotent."""
        if self._torn_down:
            return
        for handles in self._handles.values():
            for handle in handles:
                handle.cancel()
        self._engine.stop()
        self._torn_down = True

    # -- Scroll input --

    def on_scroll(self, offset: float) -> None:
        """Host scroll notification with the new offset in pixels."""
        self._scroll.scroll_to(offset)

    def scroll_by(self, delta: float) -> None:
        self._scroll.scroll_by(delta)

    def scroll_to_progress(self, progress: float) -> None:
        self._scroll.scroll_to(self._scroll.offset_for(progress))

    # -- Frames --

    def frame(self) -> Frame:
        """Advance one frame at the current scroll position."""
        if self._torn_down:
            raise RuntimeError("Timeline has been torn down")
        if not self._started:
            self.start()
        self._engine.step(self._scroll.progress)
        assert self._frame is not None
        return self._frame

    def sample(self, progress: float, elapsed: float = 0.0) -> dict[EntityId, dict[str, float]]:
        """Recompute every scroll and stroke channel without touching state.

        Drift is excluded: it is the only channel with time-accumulated state.
        """
        out: dict[EntityId, dict[str, float]] = {}
        for eid, cfg in zip(self._eids, self._ensemble):
            values = scroll_channels(cfg, progress)
            if isinstance(cfg, ArrowConfig):
                values.update(arrow_stage_channels(cfg, elapsed))
            out[eid] = values
        return out

    # -- Internals --

    def _spawn(self, world: World, index: int, config: ElementConfig) -> EntityId:
        eid = world.spawn()
        kind = _KINDS[type(config)]
        values = scroll_channels(config, self._scroll.progress)
        if isinstance(config, ArrowConfig):
            values.update(arrow_stage_channels(config, 0.0))
        world.attach(eid, Element(kind=kind, config=config, index=index))
        world.attach(eid, Channels(values=values))
        if config.entrance is not None:
            world.attach(eid, Entrance(window=config.entrance))
            world.attach(eid, FSM(state=PENDING, transitions=ENTRANCE_TRANSITIONS))
        return eid

    def _track(self, world: World, eid: EntityId, component: object) -> None:
        self._handles.setdefault(eid, []).append(Handle(world, eid, type(component)))

    def _begin_session(self, world: World, ctx: FrameContext) -> None:
        assert self._host is not None
        self._host.disable_scroll_restoration()
        self._host.scroll_to(0.0)
        self._scroll.scroll_to(0.0)
        for eid, (element,) in world.query(Element):
            if isinstance(element.config, ArrowConfig):
                world.attach(eid, Sequence(stages=element.config.stages))
        logger.debug("session started with %d elements", len(self._eids))

    def _release(self, world: World, ctx: FrameContext) -> None:
        for eid in self._eids:
            world.despawn(eid)
        self._handles.clear()
        logger.debug("timeline torn down after %d frames", ctx.frame_number)

    def _capture_frame(self, world: World, ctx: FrameContext) -> None:
        self._frame = build_frame(world, ctx)

    def _log_transition(
        self, world: World, ctx: FrameContext, eid: EntityId, old: str, new: str
    ) -> None:
        logger.debug("element %d: %s -> %s at progress %.3f", eid, old, new, ctx.progress)
