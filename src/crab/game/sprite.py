"""Sprites: position, size and animation state of on-screen objects."""

from dataclasses import dataclass, field
from typing import Any, List

# Base frame size of the reference sprite sheets
SPRITE_WIDTH = 48
SPRITE_HEIGHT = 48

# Scale 1.0 draws a frame at its native size
DEFAULT_SCALE = 1.0
# Rotation in degrees; only used as a visual flag, never for collision
DEFAULT_ROTATION = 0.0


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle covering [min_x, max_x) x [min_y, max_y)."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    def is_empty(self) -> bool:
        return self.min_x >= self.max_x or self.min_y >= self.max_y

    def overlaps(self, other: "Rect") -> bool:
        """True if both rectangles share an area. Touching edges do not count."""
        return (
            not self.is_empty()
            and not other.is_empty()
            and self.min_x < other.max_x
            and other.min_x < self.max_x
            and self.min_y < other.max_y
            and other.min_y < self.max_y
        )


@dataclass(eq=False)
class Sprite:
    """A positioned, optionally animated and scaled on-screen object.

    Static sprites (the fish) have no animation and a move step of 0.
    """

    x: int
    y: int
    image: Any = None
    animation: List[Any] = field(default_factory=list)
    move_step_tick: int = 0
    scale: float = DEFAULT_SCALE
    rotation: float = DEFAULT_ROTATION
    base_width: int = SPRITE_WIDTH
    base_height: int = SPRITE_HEIGHT

    @property
    def width(self) -> int:
        return int(self.base_width * self.scale)

    @property
    def height(self) -> int:
        return int(self.base_height * self.scale)

    def bounding_box(self) -> Rect:
        """Position and scaled size as a rectangle.

        Rotation is not included. Callers must not rely on the box matching
        a rotated sprite on screen.
        """
        return Rect(self.x, self.y, self.x + self.width, self.y + self.height)

    def select_frame(self, index: int) -> None:
        """Show animation frame `index`; a no-op if there is no such frame."""
        if index < 0 or index >= len(self.animation):
            return
        self.image = self.animation[index]

    def overlaps(self, other: "Sprite") -> bool:
        return self.bounding_box().overlaps(other.bounding_box())

