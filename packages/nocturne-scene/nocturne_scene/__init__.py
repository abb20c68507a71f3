"""nocturne-scene - The scroll-driven night sky: cast, animators and timeline."""
from __future__ import annotations

from nocturne_scene.animators import (
    arrow_channels,
    arrow_stage_channels,
    cloud_channels,
    moon_channels,
    scroll_channels,
    star_channels,
)
from nocturne_scene.components import Channels, Element, Entrance
from nocturne_scene.config import (
    ARROW_STAGES,
    ArrowConfig,
    CloudConfig,
    ElementConfig,
    MoonConfig,
    SceneConfig,
    StarConfig,
)
from nocturne_scene.ensemble import (
    STARS,
    default_ensemble,
    entrance_windows,
    overlapping_pairs,
    star_configs,
    validate_ensemble,
    window_coverage,
)
from nocturne_scene.frame import Frame, RenderItem
from nocturne_scene.guards import ENTERING, PENDING, SETTLED
from nocturne_scene.host import Host, MemoryHost
from nocturne_scene.layers import LAYERS, LayerStyle, layer_style
from nocturne_scene.scroll import ScrollSource
from nocturne_scene.shapes import star_inner_radius, star_path, star_vertices
from nocturne_scene.timeline import Timeline

__all__ = [
    "Timeline",
    "SceneConfig",
    "ArrowConfig",
    "StarConfig",
    "MoonConfig",
    "CloudConfig",
    "ElementConfig",
    "ARROW_STAGES",
    "STARS",
    "default_ensemble",
    "star_configs",
    "validate_ensemble",
    "entrance_windows",
    "overlapping_pairs",
    "window_coverage",
    "arrow_channels",
    "arrow_stage_channels",
    "star_channels",
    "moon_channels",
    "cloud_channels",
    "scroll_channels",
    "Element",
    "Channels",
    "Entrance",
    "Frame",
    "RenderItem",
    "PENDING",
    "ENTERING",
    "SETTLED",
    "Host",
    "MemoryHost",
    "LAYERS",
    "LayerStyle",
    "layer_style",
    "ScrollSource",
    "star_vertices",
    "star_path",
    "star_inner_radius",
]
