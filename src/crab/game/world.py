"""Mutable state of one round."""

from dataclasses import dataclass, field
from typing import List

from crab.game.sprite import Sprite


@dataclass
class GameState:
    """Everything a round mutates. Rebuilt from scratch on restart.

    Attributes:
        frame: Tick counter, cyclic with period ticks_per_second
        score: Fish collected this round
        level: Difficulty level, starts at 1
        crab: The player-controlled sprite
        fish: The collectible
        birds: Patrolling obstacles, grows up to max_bird_count
    """

    crab: Sprite
    fish: Sprite
    birds: List[Sprite] = field(default_factory=list)
    frame: int = 0
    score: int = 0
    level: int = 1
