"""
Sprite assets for the crab game.

An AssetBundle is built once at startup and handed to the game, either
drawn procedurally with the primitives or decoded from PNG sprite sheets
with Pillow. Every frame is an RGBA numpy array.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from crab.config.settings import GameSettings
from crab.graphics.primitives import Buffer, new_image, draw_rect, draw_ellipse, draw_circle

logger = logging.getLogger(__name__)

CRAB_SHEET = "crab.png"
BIRD_SHEET = "bird.png"
FISH_IMAGE = "fish.png"
BEACH_IMAGE = "beach.png"

# Palette
SEA = (64, 146, 204, 255)
FOAM = (232, 244, 250, 255)
SAND = (238, 214, 160, 255)
SAND_DARK = (214, 186, 128, 255)
CRAB_RED = (214, 64, 48, 255)
CRAB_DARK = (150, 36, 28, 255)
BIRD_WHITE = (244, 244, 244, 255)
BIRD_GREY = (150, 156, 168, 255)
BEAK = (250, 176, 40, 255)
FISH_ORANGE = (246, 140, 52, 255)
EYE = (20, 20, 20, 255)


class AssetLoadError(RuntimeError):
    """Raised when sprite images cannot be read or sliced."""


@dataclass(frozen=True, eq=False)
class AssetBundle:
    """Decoded frames for every sprite the game draws."""

    beach: Buffer
    fish: Buffer
    crab_frames: List[Buffer]
    bird_frames: List[Buffer]


def default_assets(settings: GameSettings) -> AssetBundle:
    """Draw a complete set of sprites without any image files."""
    columns = settings.animation_frame_columns
    w, h = settings.sprite_width, settings.sprite_height

    return AssetBundle(
        beach=_draw_beach(settings),
        fish=_draw_fish(w, h),
        crab_frames=[_draw_crab(w, h, i) for i in range(columns)],
        bird_frames=[_draw_bird(w, h, i) for i in range(columns)],
    )


def load_assets(path: Path, settings: GameSettings) -> AssetBundle:
    """Load sprite sheets and images from a directory.

    Raises:
        AssetLoadError: If a file is missing, cannot be decoded or is too small
    """
    path = Path(path)
    logger.info(f"Loading assets from {path}")

    bundle = AssetBundle(
        beach=read_image(path / BEACH_IMAGE),
        fish=read_image(path / FISH_IMAGE),
        crab_frames=read_animation_frames(
            read_image(path / CRAB_SHEET), settings.crab_animation_row, settings
        ),
        bird_frames=read_animation_frames(
            read_image(path / BIRD_SHEET), settings.bird_animation_row, settings
        ),
    )

    logger.info(
        f"Assets loaded: {len(bundle.crab_frames)} crab frames, "
        f"{len(bundle.bird_frames)} bird frames"
    )
    return bundle


def read_image(path: Path) -> Buffer:
    """Decode an image file into an RGBA array."""
    try:
        with Image.open(path) as img:
            return np.array(img.convert("RGBA"), dtype=np.uint8)
    except FileNotFoundError as e:
        raise AssetLoadError(f"Image not found: {path}") from e
    except (UnidentifiedImageError, OSError) as e:
        raise AssetLoadError(f"Error while loading image {path}: {e}") from e


def read_animation_frames(sheet: Buffer, row: int, settings: GameSettings) -> List[Buffer]:
    """Slice one row of a sprite sheet into animation frames."""
    w, h = settings.sprite_width, settings.sprite_height
    columns = settings.animation_frame_columns
    sheet_h, sheet_w = sheet.shape[:2]

    if (row + 1) * h > sheet_h or columns * w > sheet_w:
        raise AssetLoadError(
            f"Sprite sheet {sheet_w}x{sheet_h} too small for row {row} "
            f"with {columns} frames of {w}x{h}"
        )

    frames = []
    for index in range(columns):
        x_offset = index * w
        frame = sheet[row * h:(row + 1) * h, x_offset:x_offset + w]
        frames.append(np.ascontiguousarray(frame))

    return frames


# Procedural sprites

def _draw_beach(settings: GameSettings) -> Buffer:
    """Sea on top, a foam line, then sand. Drawn at beach scale."""
    scale = settings.beach_scale_factor
    width = settings.screen_width // scale
    height = settings.screen_height // scale
    shore = settings.walkable_min_beach_y

    img = new_image(width, height)
    draw_rect(img, 0, 0, width, shore, SEA)
    draw_rect(img, 0, shore - 10, width, 10, FOAM)
    draw_rect(img, 0, shore, width, height - shore, SAND)
    # Wet sand marks the lower edge of the walkable band
    draw_rect(img, 0, settings.walkable_max_beach_y, width, 4, SAND_DARK)
    return img


def _draw_crab(w: int, h: int, frame: int) -> Buffer:
    img = new_image(w, h)
    cx, cy = w // 2, h // 2 + h // 8
    # Legs shuffle by one pixel per frame
    shuffle = (frame % 2) * 2 - 1
    for i in range(3):
        leg_y = cy - 2 + i * 5 + shuffle
        draw_rect(img, cx - w // 2 + 2, leg_y, w // 4, 2, CRAB_DARK)
        draw_rect(img, cx + w // 4 - 2, leg_y - 2 * shuffle, w // 4, 2, CRAB_DARK)
    draw_ellipse(img, cx, cy, w // 3, h // 5, CRAB_RED)
    # Claws open and close
    claw = 4 + (frame % 2) * 2
    draw_circle(img, cx - w // 3, cy - h // 4, claw, CRAB_RED)
    draw_circle(img, cx + w // 3, cy - h // 4, claw, CRAB_RED)
    draw_circle(img, cx - 4, cy - h // 6, 2, EYE)
    draw_circle(img, cx + 4, cy - h // 6, 2, EYE)
    return img


def _draw_bird(w: int, h: int, frame: int) -> Buffer:
    img = new_image(w, h)
    cx, cy = w // 2, h // 2
    # Wings: up, level, down, level
    wing_offset = (-h // 5, 0, h // 5, 0)[frame % 4]
    draw_ellipse(img, cx - w // 4, cy + wing_offset, w // 4, h // 12, BIRD_GREY)
    draw_ellipse(img, cx + w // 4, cy + wing_offset, w // 4, h // 12, BIRD_GREY)
    draw_ellipse(img, cx, cy, w // 6, h // 6, BIRD_WHITE)
    draw_rect(img, cx + w // 6 - 1, cy - 2, 5, 3, BEAK)
    draw_circle(img, cx + 3, cy - 3, 1, EYE)
    return img


def _draw_fish(w: int, h: int) -> Buffer:
    img = new_image(w, h)
    cx, cy = w // 2, h // 2
    draw_ellipse(img, cx + 2, cy, w // 3, h // 6, FISH_ORANGE)
    draw_ellipse(img, cx - w // 3, cy, w // 8, h // 5, FISH_ORANGE)
    draw_circle(img, cx + w // 5, cy - 2, 2, EYE)
    return img
