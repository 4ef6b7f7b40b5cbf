"""Graphics module for the crab game rendering pipeline."""

from crab.graphics.renderer import Renderer, DrawRequest, TextRequest
from crab.graphics.assets import AssetBundle, AssetLoadError, default_assets, load_assets
from crab.graphics.primitives import (
    draw_rect,
    draw_circle,
    draw_ellipse,
    draw_image,
    scale_image,
    rotate_image,
    clear,
)

__all__ = [
    # Renderer
    "Renderer",
    "DrawRequest",
    "TextRequest",
    # Assets
    "AssetBundle",
    "AssetLoadError",
    "default_assets",
    "load_assets",
    # Primitives
    "draw_rect",
    "draw_circle",
    "draw_ellipse",
    "draw_image",
    "scale_image",
    "rotate_image",
    "clear",
]
