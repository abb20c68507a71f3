"""Layer bundles: fixed rendering parameters selected by a layer tag."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayerStyle:
    """Rendering parameters shared by every element on one visual tier.

    Attributes:
        name: Layer tag.
        color: Stroke color as an RGB triple.
        stroke_width: Outline width in pixels.
        shadow: Glow intensity in [0, 1].
        z_order: Draw order; higher is drawn later.
        parallax: Pixels of upward travel across the whole scroll range.
        drift: Amplitude in pixels of the ambient oscillation.
    """

    name: str
    color: tuple[int, int, int]
    stroke_width: float
    shadow: float
    z_order: int
    parallax: float
    drift: float


LAYERS: dict[str, LayerStyle] = {
    "background": LayerStyle(
        name="background",
        color=(150, 150, 160),
        stroke_width=1.0,
        shadow=0.0,
        z_order=10,
        parallax=40.0,
        drift=2.0,
    ),
    "midground": LayerStyle(
        name="midground",
        color=(190, 190, 190),
        stroke_width=1.25,
        shadow=0.3,
        z_order=15,
        parallax=80.0,
        drift=4.0,
    ),
    "foreground": LayerStyle(
        name="foreground",
        color=(255, 255, 255),
        stroke_width=1.5,
        shadow=0.6,
        z_order=20,
        parallax=140.0,
        drift=6.0,
    ),
}


def layer_style(name: str) -> LayerStyle:
    try:
        return LAYERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown layer {name!r}, expected one of {sorted(LAYERS)}"
        ) from None
