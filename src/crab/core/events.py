"""
Event bus for the crab game.

The engine publishes what happened during a tick; observers (logging,
a future sound player) subscribe without being able to change game state.
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
import logging
import time
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Game event types."""
    FISH_COLLECTED = auto()
    LEVEL_UP = auto()
    GAME_OVER = auto()
    RESTART = auto()
    TERMINATE = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "game"
    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Event], None]


class EventBus:
    """
    Synchronous publish/subscribe hub.

    Handlers run inline on the simulation thread. A failing handler is
    logged and skipped so it cannot break the tick that emitted the event.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._event_history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(self, event_type: EventType, handler: Handler) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Subscribe to all events. Returns an unsubscribe function."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Record the event and dispatch it to every matching handler."""
        self._add_to_history(event)

        handlers = self._handlers.get(event.type, []) + self._global_handlers
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler: {e}")

    def _add_to_history(self, event: Event) -> None:
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(
        self,
        event_type: EventType | None = None,
        limit: int = 10
    ) -> list[Event]:
        """Get recent events from history."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        """Clear event history."""
        self._event_history.clear()
