"""Game simulation for the crab game."""

from crab.game.sprite import Rect, Sprite, DEFAULT_SCALE, DEFAULT_ROTATION
from crab.game.world import GameState
from crab.game.spawn import random_walkable_position
from crab.game.difficulty import DifficultyController, LevelUpAction
from crab.game.engine import CrabGame, Controls

__all__ = [
    "Rect",
    "Sprite",
    "DEFAULT_SCALE",
    "DEFAULT_ROTATION",
    "GameState",
    "random_walkable_position",
    "DifficultyController",
    "LevelUpAction",
    "CrabGame",
    "Controls",
]
