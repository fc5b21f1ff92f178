"""Synchronous event bus and game events.

The core never talks to a window or a socket. Anything a front-end should
react to (a victory banner, a defeat message, a birth) is emitted here and
front-ends subscribe to the event types they care about.

Handlers run synchronously in registration order, inside the tick that
produced the event. With no subscribers, ``emit`` is a single dict lookup.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


class EventBus:
    """Synchronous pub/sub for game events.

    Example:
        bus = EventBus()
        bus.subscribe(GameOverEvent, show_defeat_banner)
        bus.emit(GameOverEvent(level=2, deaths=5, alive=3, frame=900))
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable]] = defaultdict(list)

    def emit(self, event: object) -> None:
        """Dispatch an event to every handler registered for its type."""
        handlers = self._handlers.get(type(event))
        if handlers:
            for handler in list(handlers):
                handler(event)

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> bool:
        """Remove a handler.

        Returns:
            True if the handler was found and removed, False otherwise
        """
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def clear_subscribers(self) -> None:
        self._handlers.clear()

    def subscriber_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, []))


# ============================================================================
# Game Events
# ============================================================================


@dataclass(frozen=True)
class FishBornEvent:
    """A fed fish produced a clone."""

    fish_id: int
    parent_id: int
    size: float
    frame: int


@dataclass(frozen=True)
class FishEatenEvent:
    """A fish was eaten by a larger one."""

    prey_id: int
    predator_id: int
    prey_size: float
    predator_size: float
    frame: int


@dataclass(frozen=True)
class FoodEatenEvent:
    """A fish ate food.

    Attributes:
        source: "drop" for a pointer drop, "falling" for overflow food
    """

    fish_id: int
    source: str
    new_size: float
    eat_count: int
    frame: int


@dataclass(frozen=True)
class LevelStartedEvent:
    level: int
    target_population: int
    founders: int
    frame: int


@dataclass(frozen=True)
class LevelCompletedEvent:
    """Victory notification: the population target was reached."""

    level: int
    alive: int
    deaths: int
    frame: int


@dataclass(frozen=True)
class GameOverEvent:
    """Defeat notification. No further ticks are processed."""

    level: int
    deaths: int
    alive: int
    frame: int
