"""Clock and FrameContext for the fixed-timestep frame driver."""

from typing import Callable

from nocturne.types import FrameContext


class Clock:
    def __init__(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._frame_number = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._frame_number * self._dt

    def advance(self) -> int:
        self._frame_number += 1
        return self._frame_number

    def context(self, stop_fn: Callable[[], None], progress: float = 0.0) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self.elapsed,
            progress=progress,
            request_stop=stop_fn,
        )

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number
