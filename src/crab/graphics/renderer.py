"""Main renderer for the crab game."""

from dataclasses import dataclass
from typing import Iterable
import logging

import numpy as np
from numpy.typing import NDArray

from crab.graphics.primitives import Buffer, Color, clear, draw_image, rotate_image, scale_image

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class DrawRequest:
    """One image to draw at a screen position."""

    image: Buffer
    x: int
    y: int
    scale: float = 1.0
    rotation: float = 0.0


@dataclass(frozen=True)
class TextRequest:
    """A line of HUD text. Text rendering is left to the host window."""

    text: str
    x: int
    y: int
    big: bool = True


class Renderer:
    """Composes draw requests into an RGB frame buffer.

    Requests are drawn in order, later ones on top. Scaled frames are
    cached per (image, scale, rotation) since the same few frames are
    drawn every tick.
    """

    def __init__(self, width: int, height: int, background: Color = (0, 0, 0)):
        self.width = width
        self.height = height
        self.background = background
        self.buffer: NDArray[np.uint8] = np.zeros((height, width, 3), dtype=np.uint8)
        # Keyed by id(); the source image is kept alive alongside its transform
        self._cache: dict[tuple[int, float, float], tuple[Buffer, Buffer]] = {}

    def render(self, requests: Iterable[DrawRequest]) -> NDArray[np.uint8]:
        """Draw all requests onto a cleared buffer and return it."""
        clear(self.buffer, self.background)

        for request in requests:
            if request.image is None:
                continue
            image = self._transformed(request.image, request.scale, request.rotation)
            draw_image(self.buffer, image, request.x, request.y)

        return self.buffer

    def _transformed(self, image: Buffer, scale: float, rotation: float) -> Buffer:
        if scale == 1.0 and rotation == 0.0:
            return image

        key = (id(image), scale, rotation)
        cached = self._cache.get(key)
        if cached is None:
            cached = (image, rotate_image(scale_image(image, scale), rotation))
            self._cache[key] = cached
            logger.debug(f"Cached frame at scale={scale} rotation={rotation}")
        return cached[1]
