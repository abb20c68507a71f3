"""Engine - fixed-step frame driver and session lifecycle hooks."""

import math
from typing import Callable

from nocturne.clock import Clock
from nocturne.types import FrameContext, System
from nocturne.world import World

Hook = Callable[[World, FrameContext], None]


def clamp_progress(progress: float) -> float:
    """Clamp a host-supplied progress sample into [0, 1]; NaN reads as 0."""
    if math.isnan(progress):
        return 0.0
    return min(max(progress, 0.0), 1.0)


class Engine:
    """Runs an ordered list of systems once per frame.

    Every frame carries one progress sample. The engine never reads scroll
    itself; the caller passes the sample to :meth:`step` or :meth:`run`.
    """

    def __init__(self, fps: int = 60) -> None:
        self._clock = Clock(fps)
        self._world = World()
        self._systems: list[System] = []
        self._hooks: dict[str, list[Hook]] = {"start": [], "stop": []}
        self._progress = 0.0
        self._halt = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def progress(self) -> float:
        """Progress sample used by the most recent frame."""
        return self._progress

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._hooks["start"].append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._hooks["stop"].append(hook)

    def start(self) -> None:
        self._halt = False
        self._run_hooks("start")

    def stop(self) -> None:
        self._run_hooks("stop")

    def step(self, progress: float = 0.0) -> None:
        """Advance one frame with ``progress`` as its sample."""
        self._halt = False
        self._progress = clamp_progress(progress)
        self._advance()

    def run(self, n: int, progress: float = 0.0) -> None:
        """Start, run up to ``n`` frames at a fixed sample, then stop."""
        self.start()
        self._progress = clamp_progress(progress)
        for _ in range(n):
            self._advance()
            if self._halt:
                break
        self.stop()

    def _halt_requested(self) -> None:
        self._halt = True

    def _context(self) -> FrameContext:
        return self._clock.context(self._halt_requested, self._progress)

    def _run_hooks(self, name: str) -> None:
        ctx = self._context()
        for hook in self._hooks[name]:
            hook(self._world, ctx)

    def _advance(self) -> None:
        self._clock.advance()
        ctx = self._context()
        for system in self._systems:
            system(self._world, ctx)
            if self._halt:
                return
