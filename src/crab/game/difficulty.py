"""Difficulty progression: more birds first, then faster birds."""

import logging
import random
from enum import Enum
from typing import Any, List, Optional, Sequence

from crab.config.settings import GameSettings
from crab.game.sprite import Sprite
from crab.game.world import GameState

logger = logging.getLogger(__name__)


class LevelUpAction(Enum):
    """What a level-up changed."""

    ADD_BIRD = "add"
    SPEED_UP = "speed_up"


class DifficultyController:
    """Maps score to level and grows the bird flock accordingly.

    A level-up is earned every `score_level_divisor` points. Each earned
    level first adds a bird; once the flock is full, one random bird that
    is still below `max_bird_step_tick` gets one step faster. When neither
    is possible the level stays where it is.
    """

    def __init__(
        self,
        settings: GameSettings,
        bird_frames: Sequence[Any],
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings
        self._bird_frames = list(bird_frames)
        self._rng = rng or random.Random()

    def desired_level(self, score: int) -> int:
        # Levels start counting at 1
        return score // self.settings.score_level_divisor + 1

    def evaluate(self, state: GameState) -> Optional[LevelUpAction]:
        """Raise the level if the score earned it and difficulty can grow.

        Returns:
            The action that was applied, or None if the level did not change
        """
        next_level = self.desired_level(state.score)

        if next_level <= state.level or next_level >= self.settings.max_level:
            return None

        action = None
        if self.add_bird(state.birds):
            action = LevelUpAction.ADD_BIRD
        elif self.speed_up_random_bird(state.birds):
            action = LevelUpAction.SPEED_UP

        if action is None:
            logger.debug(f"Level {next_level} earned but difficulty is maxed out")
            return None

        state.level = next_level
        logger.info(f"Next level reached: {next_level} ({action.value})")
        return action

    def add_bird(self, birds: List[Sprite]) -> bool:
        """Append a new bird in the next free lane. False if the flock is full."""
        if len(birds) >= self.settings.max_bird_count:
            return False

        birds.append(Sprite(
            x=0,
            y=self.settings.walkable_min_y + self.settings.sprite_height * len(birds) * 2,
            image=self._bird_frames[0] if self._bird_frames else None,
            animation=list(self._bird_frames),
            move_step_tick=self.settings.default_step_tick,
            scale=self.settings.bird_scale_factor,
            base_width=self.settings.sprite_width,
            base_height=self.settings.sprite_height,
        ))
        logger.debug(f"Bird added, flock size {len(birds)}")
        return True

    def upgradable_birds(self, birds: Sequence[Sprite]) -> List[Sprite]:
        """Birds that are still slower than the speed cap."""
        return [b for b in birds if b.move_step_tick < self.settings.max_bird_step_tick]

    def speed_up_random_bird(self, birds: Sequence[Sprite]) -> bool:
        """Speed up one uniformly chosen upgradable bird. False if none is left."""
        candidates = self.upgradable_birds(birds)
        if not candidates:
            return False

        bird = candidates[self._rng.randrange(len(candidates))]
        bird.move_step_tick += 1
        logger.debug(f"Bird in lane y={bird.y} sped up to {bird.move_step_tick}")
        return True
