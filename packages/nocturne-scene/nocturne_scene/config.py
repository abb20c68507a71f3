"""Scene configuration and per-element configuration records.

All records are frozen and validated on construction, so a bad entry in
the ensemble fails when the ensemble is built rather than on first draw.
"""
from __future__ import annotations

from dataclasses import dataclass

from nocturne_schedule import Stage
from nocturne_tween import Window

from nocturne_scene.layers import LayerStyle, layer_style

ARROW_STAGES: tuple[Stage, ...] = (
    Stage(channel="shaft", delay=1.0, duration=1.8, easing="ease_in_out"),
    Stage(channel="head_left", delay=3.0, duration=0.6, easing="ease_out"),
    Stage(channel="head_right", delay=3.3, duration=0.6, easing="ease_out"),
)


def _check_percent(label: str, value: float) -> None:
    if not 0.0 <= value <= 100.0:
        raise ValueError(f"{label} must be within [0, 100] percent, got {value}")


def _check_positive(label: str, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{label} must be > 0, got {value}")


@dataclass(frozen=True)
class SceneConfig:
    """Immutable configuration for a timeline session.

    Attributes:
        fps: Fixed frame rate of the wall-clock driver.
        viewport_width: Viewport width in pixels.
        viewport_height: Viewport height in pixels.
        spacer_vh: Height of the scroll spacer in viewport-height units.
            Scrollable distance is ``spacer_vh - 100`` of those units.
        completion_threshold: Opacity at which an entrance counts as done.
    """

    fps: int = 60
    viewport_width: float = 1280.0
    viewport_height: float = 800.0
    spacer_vh: float = 900.0
    completion_threshold: float = 0.99

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError(f"fps must be > 0, got {self.fps}")
        _check_positive("viewport_width", self.viewport_width)
        _check_positive("viewport_height", self.viewport_height)
        if self.spacer_vh <= 100.0:
            raise ValueError(
                f"spacer_vh must exceed one viewport (100), got {self.spacer_vh}"
            )
        if not 0.0 < self.completion_threshold <= 1.0:
            raise ValueError(
                f"completion_threshold must be within (0, 1], got {self.completion_threshold}"
            )


@dataclass(frozen=True)
class ArrowConfig:
    """Centered down arrow: staged draw-in on load, slides away on scroll."""

    stages: tuple[Stage, ...] = ARROW_STAGES
    exit_stops: tuple[float, ...] = (0.0, 0.13, 1.0)
    exit_offsets: tuple[float, ...] = (0.0, 800.0, 800.0)
    x: float = 50.0
    y: float = 50.0
    layer: str = "foreground"

    def __post_init__(self) -> None:
        _check_percent("x", self.x)
        _check_percent("y", self.y)
        layer_style(self.layer)
        if not self.stages:
            raise ValueError("ArrowConfig needs at least one stage")
        if len(self.exit_stops) != len(self.exit_offsets):
            raise ValueError("exit_stops and exit_offsets differ in length")

    @property
    def style(self) -> LayerStyle:
        return layer_style(self.layer)

    @property
    def size(self) -> float:
        """The arrow is drawn from fixed stroke geometry, not a size."""
        return 0.0

    @property
    def entrance(self) -> Window | None:
        return None


@dataclass(frozen=True)
class StarConfig:
    """One hand-placed star.

    Attributes:
        x: Final horizontal position, percent of viewport width.
        y: Final vertical position, percent of viewport height.
        size: Outer radius in pixels.
        points: Number of outer points.
        window: Scroll window of the entrance.
        layer: Layer tag.
        rise: Pixels below the final position where the entrance begins.
        drift_period: Seconds per ambient drift cycle.
    """

    x: float
    y: float
    size: float
    window: Window
    points: int = 4
    layer: str = "midground"
    rise: float = 300.0
    drift_period: float = 6.0

    def __post_init__(self) -> None:
        _check_percent("x", self.x)
        _check_percent("y", self.y)
        _check_positive("size", self.size)
        _check_positive("drift_period", self.drift_period)
        if self.points < 2:
            raise ValueError(f"points must be >= 2, got {self.points}")
        layer_style(self.layer)

    @property
    def style(self) -> LayerStyle:
        return layer_style(self.layer)

    @property
    def entrance(self) -> Window:
        return self.window


@dataclass(frozen=True)
class MoonConfig:
    """Outlined moon that rises into the upper-left third after the stars."""

    x: float = 28.0
    y: float = 28.0
    size: float = 140.0
    window: Window = Window(0.45, 0.60)
    rise: float = 600.0
    layer: str = "midground"
    drift_period: float = 9.0

    def __post_init__(self) -> None:
        _check_percent("x", self.x)
        _check_percent("y", self.y)
        _check_positive("size", self.size)
        _check_positive("drift_period", self.drift_period)
        layer_style(self.layer)

    @property
    def style(self) -> LayerStyle:
        return layer_style(self.layer)

    @property
    def entrance(self) -> Window:
        return self.window


@dataclass(frozen=True)
class CloudConfig:
    """Outlined cloud that slides across the screen from the right.

    ``slide`` drives the horizontal travel from ``start_x`` to ``end_x``;
    ``fade`` brings the outline in at the start of the slide.
    """

    x: float = 100.0
    y: float = 38.0
    width_vw: float = 110.0
    height: float = 170.0
    slide: Window = Window(0.28, 0.48)
    fade: Window = Window(0.28, 0.31)
    start_x: float = 1400.0
    end_x: float = -2400.0
    layer: str = "foreground"
    drift_period: float = 11.0

    def __post_init__(self) -> None:
        _check_percent("x", self.x)
        _check_percent("y", self.y)
        _check_positive("width_vw", self.width_vw)
        _check_positive("height", self.height)
        _check_positive("drift_period", self.drift_period)
        layer_style(self.layer)

    @property
    def style(self) -> LayerStyle:
        return layer_style(self.layer)

    @property
    def size(self) -> float:
        return self.height

    @property
    def entrance(self) -> Window:
        """The cloud counts as entered once its outline has faded in."""
        return self.fade


ElementConfig = ArrowConfig | StarConfig | MoonConfig | CloudConfig
