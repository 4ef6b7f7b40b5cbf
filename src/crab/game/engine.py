"""
Per-tick simulation of the crab game.

Each tick reads the control state, moves the crab and the birds,
resolves collisions and hands scoring over to the difficulty controller.
"""

from dataclasses import dataclass
import logging
import random
from typing import List, Optional

from crab.config.settings import GameSettings
from crab.core.events import Event, EventBus, EventType
from crab.core.state import GamePhase, StateMachine
from crab.game.difficulty import DifficultyController
from crab.game.spawn import random_walkable_position
from crab.game.sprite import Sprite
from crab.game.world import GameState
from crab.graphics.assets import AssetBundle
from crab.graphics.renderer import DrawRequest, TextRequest

logger = logging.getLogger(__name__)

# Rotation applied to the crab when a bird catches it (upside down)
GAME_OVER_ROTATION = 180.0

GAME_OVER_TEXT = "Game Over! (Enter: restart, Esc: exit)"


@dataclass(frozen=True)
class Controls:
    """Logical control state for one tick."""

    terminate: bool = False
    restart: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False


class CrabGame:
    """The crab game: owns all round state and advances it one tick at a time.

    Lifecycle:
        1. CrabGame(settings, assets) - starts a fresh round
        2. update(controls) - once per tick; False means the host should stop
        3. draw_requests() / hud_texts() - once per rendered frame
    """

    def __init__(
        self,
        settings: GameSettings,
        assets: AssetBundle,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.settings = settings
        self.assets = assets
        self.rng = rng or random.Random()
        self.event_bus = event_bus or EventBus()
        self.state_machine = StateMachine()
        self.difficulty = DifficultyController(settings, assets.bird_frames, self.rng)
        self.state = self._new_state()

    # Round lifecycle

    @property
    def is_over(self) -> bool:
        return self.state_machine.is_over

    @property
    def max_level(self) -> int:
        return self.settings.max_level

    def restart(self) -> None:
        """Reset all round state to its initial values. Possible at any time."""
        self.state = self._new_state()
        self.state_machine.reset()
        logger.info("Game restarted")
        self.event_bus.emit(Event(EventType.RESTART))

    def _new_state(self) -> GameState:
        s = self.settings
        crab_frames = self.assets.crab_frames

        crab = Sprite(
            x=(s.screen_width - s.sprite_width) // 2,
            y=s.walkable_min_y,
            image=crab_frames[0] if crab_frames else None,
            animation=list(crab_frames),
            move_step_tick=s.default_step_tick,
            base_width=s.sprite_width,
            base_height=s.sprite_height,
        )
        fish = Sprite(
            x=0,
            y=0,
            image=self.assets.fish,
            base_width=s.sprite_width,
            base_height=s.sprite_height,
        )
        fish.x, fish.y = random_walkable_position(s, self.rng, fish.width, fish.height)

        # Start with zero birds, difficulty adds them as the score rises
        return GameState(crab=crab, fish=fish, birds=[])

    # Tick

    def update(self, controls: Controls) -> bool:
        """Advance the game by one tick.

        Returns:
            False if the host loop should stop, True otherwise
        """
        if controls.terminate:
            logger.info("Termination requested")
            self.event_bus.emit(Event(EventType.TERMINATE))
            return False

        if controls.restart:
            # Restart works in both phases and wins over the game-over freeze
            self.restart()
            return True

        if self.is_over:
            # Frozen until restart, including the animation counter
            return True

        self._update_animation()
        self._move_crab(controls)
        self._move_birds()

        if self._check_bird_collision():
            return True

        self._check_fish_collision()
        return True

    def _update_animation(self) -> None:
        s = self.settings
        self.state.frame = (self.state.frame + 1) % s.ticks_per_second
        index = self.state.frame // s.ticks_per_frame

        self.state.crab.select_frame(index)
        for bird in self.state.birds:
            bird.select_frame(index)
        # The fish is not animated

    def _move_crab(self, controls: Controls) -> None:
        # One direction per tick, left > right > up > down
        if controls.left:
            self.move_crab_left()
        elif controls.right:
            self.move_crab_right()
        elif controls.up:
            self.move_crab_up()
        elif controls.down:
            self.move_crab_down()

    def move_crab_left(self) -> None:
        crab = self.state.crab
        crab.x = max(crab.x - crab.move_step_tick, 0)

    def move_crab_right(self) -> None:
        crab = self.state.crab
        crab.x = min(crab.x + crab.move_step_tick, self.settings.screen_width - crab.width - 1)

    def move_crab_up(self) -> None:
        crab = self.state.crab
        crab.y = max(crab.y - crab.move_step_tick, self.settings.walkable_min_y)

    def move_crab_down(self) -> None:
        crab = self.state.crab
        # Lower bound uses the crab's width, matching the square reference sprites
        crab.y = min(crab.y + crab.move_step_tick, self.settings.walkable_max_y - crab.width - 1)

    def _move_birds(self) -> None:
        for bird in self.state.birds:
            if bird.x >= self.settings.screen_width:
                bird.x = 0
            else:
                bird.x += bird.move_step_tick

    def _check_bird_collision(self) -> bool:
        crab = self.state.crab
        for bird in self.state.birds:
            if crab.overlaps(bird):
                # Turn the crab upside down and stop the round
                crab.rotation = GAME_OVER_ROTATION
                self.state_machine.transition(GamePhase.GAME_OVER)
                logger.info(f"Game over at score {self.state.score}, level {self.state.level}")
                self.event_bus.emit(Event(
                    EventType.GAME_OVER,
                    data={"score": self.state.score, "level": self.state.level},
                ))
                return True
        return False

    def _check_fish_collision(self) -> None:
        crab, fish = self.state.crab, self.state.fish
        if not crab.overlaps(fish):
            return

        fish.x, fish.y = random_walkable_position(
            self.settings, self.rng, fish.width, fish.height
        )
        self.state.score += 1
        self.event_bus.emit(Event(EventType.FISH_COLLECTED, data={"score": self.state.score}))

        action = self.difficulty.evaluate(self.state)
        if action is not None:
            self.event_bus.emit(Event(
                EventType.LEVEL_UP,
                data={"level": self.state.level, "action": action.value},
            ))

    # Rendering contract

    def draw_requests(self) -> List[DrawRequest]:
        """Everything to draw this frame, back to front."""
        requests = [
            DrawRequest(
                self.assets.beach, 0, 0, scale=float(self.settings.beach_scale_factor)
            ),
        ]
        for sprite in (self.state.crab, self.state.fish, *self.state.birds):
            requests.append(DrawRequest(
                sprite.image, sprite.x, sprite.y,
                scale=sprite.scale, rotation=sprite.rotation,
            ))
        return requests

    def hud_texts(self) -> List[TextRequest]:
        """Score and level indicator, plus the game-over hint when the round ended."""
        s = self.settings
        texts = [
            TextRequest(f"Score: {self.state.score}", s.score_x, s.score_y),
            TextRequest(f"Level: {self.state.level}/{self.max_level}", s.level_x, s.level_y),
        ]
        if self.is_over:
            texts.append(TextRequest(GAME_OVER_TEXT, s.game_over_x, s.game_over_y))
        return texts
