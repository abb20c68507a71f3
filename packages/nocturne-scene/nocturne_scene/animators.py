"""Element animators: channel values as pure functions of their inputs.

Scroll-driven channels are functions of ``progress`` alone; the arrow's
staged strokes are functions of seconds since the session started. No
function here keeps state, so any frame can be recomputed from scratch.
"""
from __future__ import annotations

from nocturne import clamp_progress
from nocturne_schedule import sample_sequence
from nocturne_tween import ease_sinusoidal, remap

from nocturne_scene.config import ArrowConfig, CloudConfig, MoonConfig, StarConfig

STAR_MIN_SCALE = 0.6

Channels = dict[str, float]


def parallax_offset(parallax: float, progress: float) -> float:
    """Upward layer parallax across the whole scroll range."""
    return -parallax * progress


def arrow_channels(config: ArrowConfig, progress: float) -> Channels:
    """The arrow slides off the bottom as soon as scrolling starts."""
    return {"offset_y": remap(progress, config.exit_stops, config.exit_offsets)}


def arrow_stage_channels(config: ArrowConfig, elapsed: float) -> Channels:
    """Stroke draw fractions ``elapsed`` seconds into the session."""
    return sample_sequence(config.stages, elapsed)


def star_channels(config: StarConfig, progress: float) -> Channels:
    e = config.window.apply(progress, ease_sinusoidal)
    return {
        "opacity": e,
        "scale": STAR_MIN_SCALE + (1.0 - STAR_MIN_SCALE) * e,
        "offset_y": config.rise * (1.0 - e),
        "parallax_y": parallax_offset(config.style.parallax, progress),
    }


def moon_channels(config: MoonConfig, progress: float) -> Channels:
    # Only the outline fades; the black fill stays opaque over the stars.
    e = config.window.apply(progress, ease_sinusoidal)
    return {
        "opacity": e,
        "scale": 1.0,
        "offset_y": config.rise * (1.0 - e),
        "parallax_y": parallax_offset(config.style.parallax, progress),
    }


def cloud_channels(config: CloudConfig, progress: float) -> Channels:
    slide = config.slide.apply(progress, ease_sinusoidal)
    return {
        "opacity": config.fade.apply(progress, ease_sinusoidal),
        "scale": 1.0,
        "offset_x": config.start_x + (config.end_x - config.start_x) * slide,
    }


def scroll_channels(config: object, progress: float) -> Channels:
    """Dispatch to the animator for ``config``'s element kind.

    ``progress`` is clamped to [0, 1] first (NaN reads as 0), so no
    channel extrapolates past its settled value.
    """
    progress = clamp_progress(progress)
    if isinstance(config, StarConfig):
        return star_channels(config, progress)
    if isinstance(config, MoonConfig):
        return moon_channels(config, progress)
    if isinstance(config, CloudConfig):
        return cloud_channels(config, progress)
    if isinstance(config, ArrowConfig):
        return arrow_channels(config, progress)
    raise TypeError(f"No animator for {type(config).__name__}")
