"""Random placement of sprites inside the walkable band."""

import random
from typing import Tuple

from crab.config.settings import GameSettings


def random_walkable_position(
    settings: GameSettings,
    rng: random.Random,
    width: int,
    height: int,
) -> Tuple[int, int]:
    """Return a uniformly random top-left position for a width x height sprite.

    x is drawn from [0, screen_width - width) and y from
    [walkable_min_y, walkable_max_y - height), so the sprite always lies
    on the beach band that the crab and the birds share.
    """
    max_x = settings.screen_width - width
    max_y_offset = settings.walkable_max_y - settings.walkable_min_y - height

    x = rng.randrange(max_x)
    y = rng.randrange(max_y_offset) + settings.walkable_min_y

    return x, y
