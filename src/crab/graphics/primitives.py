"""Basic drawing primitives for the crab game frame buffer."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]
Buffer = NDArray[np.uint8]


def new_image(width: int, height: int) -> Buffer:
    """Create a fully transparent RGBA image."""
    return np.zeros((height, width, 4), dtype=np.uint8)


def clear(buffer: Buffer, color: Color = (0, 0, 0)) -> None:
    """Clear buffer to a solid color."""
    buffer[:, :, :3] = color
    if buffer.shape[2] == 4:
        buffer[:, :, 3] = 255


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color | RGBA,
) -> None:
    """Fill a rectangle on the buffer, clipped to the buffer bounds.

    Args:
        buffer: Target numpy array (height, width, 3 or 4)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB or RGBA color tuple
    """
    h, w = buffer.shape[:2]

    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    buffer[y1:y2, x1:x2] = _match_channels(buffer, color)


def draw_ellipse(
    buffer: Buffer,
    cx: int,
    cy: int,
    rx: int,
    ry: int,
    color: Color | RGBA,
) -> None:
    """Fill an axis-aligned ellipse centred on (cx, cy)."""
    if rx <= 0 or ry <= 0:
        return

    h, w = buffer.shape[:2]
    y_indices, x_indices = np.ogrid[:h, :w]
    mask = ((x_indices - cx) / rx) ** 2 + ((y_indices - cy) / ry) ** 2 <= 1.0
    buffer[mask] = _match_channels(buffer, color)


def draw_circle(
    buffer: Buffer,
    cx: int,
    cy: int,
    radius: int,
    color: Color | RGBA,
) -> None:
    """Fill a circle on the buffer."""
    draw_ellipse(buffer, cx, cy, radius, radius, color)


def scale_image(image: Buffer, factor: float) -> Buffer:
    """Nearest-neighbour resize by `factor`. Output size is truncated like sprite sizes."""
    if factor == 1.0:
        return image

    img_h, img_w = image.shape[:2]
    out_w = max(0, int(img_w * factor))
    out_h = max(0, int(img_h * factor))

    cols = np.minimum((np.arange(out_w) / factor).astype(int), img_w - 1)
    rows = np.minimum((np.arange(out_h) / factor).astype(int), img_h - 1)
    return image[rows][:, cols]


def rotate_image(image: Buffer, degrees: float) -> Buffer:
    """Rotate clockwise in quarter turns. Angles are rounded to the nearest 90 degrees."""
    quarter_turns = int(round(degrees / 90.0)) % 4
    if quarter_turns == 0:
        return image
    # np.rot90 turns counter-clockwise for positive k
    return np.ascontiguousarray(np.rot90(image, k=-quarter_turns))


def draw_image(
    buffer: Buffer,
    image: Buffer,
    x: int,
    y: int,
    alpha: float = 1.0,
) -> None:
    """Draw an image onto the buffer with optional alpha blending.

    Args:
        buffer: Target numpy array (height, width, 3)
        image: Source image array (height, width, 3 or 4)
        x: Top-left x coordinate
        y: Top-left y coordinate
        alpha: Global alpha multiplier (0.0 to 1.0)
    """
    buf_h, buf_w = buffer.shape[:2]
    img_h, img_w = image.shape[:2]

    # Calculate visible region
    src_x1 = max(0, -x)
    src_y1 = max(0, -y)
    src_x2 = min(img_w, buf_w - x)
    src_y2 = min(img_h, buf_h - y)

    dst_x1 = max(0, x)
    dst_y1 = max(0, y)
    dst_x2 = dst_x1 + (src_x2 - src_x1)
    dst_y2 = dst_y1 + (src_y2 - src_y1)

    if src_x2 <= src_x1 or src_y2 <= src_y1:
        return  # Nothing to draw

    src_region = image[src_y1:src_y2, src_x1:src_x2]

    if alpha >= 1.0 and image.shape[2] == 3:
        # Fast path: direct copy
        buffer[dst_y1:dst_y2, dst_x1:dst_x2] = src_region
        return

    dst_region = buffer[dst_y1:dst_y2, dst_x1:dst_x2, :3]

    if image.shape[2] == 4:
        # RGBA image with per-pixel alpha
        img_alpha = (src_region[:, :, 3:4] / 255.0) * alpha
        src_rgb = src_region[:, :, :3]
    else:
        img_alpha = alpha
        src_rgb = src_region

    blended = (src_rgb * img_alpha + dst_region * (1 - img_alpha)).astype(np.uint8)
    buffer[dst_y1:dst_y2, dst_x1:dst_x2, :3] = blended


def _match_channels(buffer: Buffer, color: Color | RGBA) -> tuple:
    """Pad or trim a color to the buffer's channel count."""
    channels = buffer.shape[2]
    if len(color) == channels:
        return tuple(color)
    if channels == 4:
        return (*color[:3], 255)
    return tuple(color[:3])
