"""
Phase state machine for a round of the crab game.

States:
    PLAYING: The crab moves, birds patrol, fish can be collected
    GAME_OVER: A bird caught the crab; the scene is frozen until restart
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Round phases."""
    PLAYING = auto()
    GAME_OVER = auto()


PhaseListener = Callable[[GamePhase, GamePhase], None]


class StateMachine:
    """
    Tracks the current phase and guards transitions.

    Listeners are notified after every accepted transition and on reset.
    """

    VALID_TRANSITIONS: list[tuple[GamePhase, GamePhase]] = [
        (GamePhase.PLAYING, GamePhase.GAME_OVER),
        (GamePhase.PLAYING, GamePhase.PLAYING),  # Restart mid-round
        (GamePhase.GAME_OVER, GamePhase.PLAYING),  # Restart after game over
    ]

    def __init__(self, initial_state: GamePhase = GamePhase.PLAYING) -> None:
        self._state = initial_state
        self._listeners: list[PhaseListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> GamePhase:
        """Get current phase."""
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state == GamePhase.GAME_OVER

    def can_transition(self, to_state: GamePhase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: GamePhase) -> bool:
        """
        Attempt to transition to a new phase.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        logger.info(f"Phase transition: {old_state.name} -> {to_state.name}")
        self._notify(old_state, to_state)

        return True

    def add_listener(self, callback: PhaseListener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: PhaseListener) -> None:
        """Remove a phase change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def reset(self) -> None:
        """Force the PLAYING phase, whatever the current phase is."""
        old_state = self._state
        self._state = GamePhase.PLAYING
        self._notify(old_state, GamePhase.PLAYING)
        logger.debug("StateMachine reset to PLAYING")

    def _notify(self, old_state: GamePhase, new_state: GamePhase) -> None:
        for listener in self._listeners:
            try:
                listener(old_state, new_state)
            except Exception as e:
                logger.error(f"Error in phase listener: {e}")
