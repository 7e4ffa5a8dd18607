"""
Combat event bus.

The resolver publishes what happened; loggers and host systems subscribe by
event type. Events wait in a priority heap until the host calls
process_events(), so a whole turn can be resolved before anyone reacts.
"""

import heapq
import itertools
import threading
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


class EventPriority(Enum):
    """Delivery order for queued events. Lower value is delivered first."""
    CRITICAL = 1
    HIGH = 2
    NORMAL = 3
    LOW = 4


_publish_order = itertools.count()


@dataclass
class QueuedEvent:
    """An event waiting on the bus.

    Events with equal priority are delivered in the order they were queued.
    """
    event: "GameEvent"
    priority: EventPriority = EventPriority.NORMAL
    source: Optional[str] = None
    sequence: int = field(default_factory=lambda: next(_publish_order))

    def __lt__(self, other: "QueuedEvent") -> bool:
        return (self.priority.value, self.sequence) < (other.priority.value, other.sequence)


EventHandler = Callable[["GameEvent"], None]


class EventManager:
    """Routes combat events from the resolver to their handlers."""

    def __init__(self, enable_debug_logging: bool = False):
        self.enable_debug_logging = enable_debug_logging

        self._handlers: dict["EventType", list[EventHandler]] = defaultdict(list)
        self._catch_all: list[EventHandler] = []
        self._pending: list[QueuedEvent] = []

        self._published = 0
        self._delivered = 0
        self._handler_errors = 0

        self._lock = threading.RLock()
        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Route bus diagnostics to a logger, usually LogManager.debug."""
        self._debug_callback = callback

    def _trace(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    # ============== Subscriptions ==============

    def subscribe(self, event_type: "EventType", handler: EventHandler) -> None:
        """Call handler for every delivered event of event_type."""
        with self._lock:
            self._handlers[event_type].append(handler)
        self._trace(f"{_handler_name(handler)} listening for {event_type.name}")

    def subscribe_all(self, handler: EventHandler) -> None:
        """Call handler for every delivered event regardless of type."""
        with self._lock:
            self._catch_all.append(handler)
        self._trace(f"{_handler_name(handler)} listening for all events")

    def unsubscribe(self, event_type: "EventType", handler: EventHandler) -> bool:
        """Stop calling handler for event_type.

        Returns:
            False if the handler was not subscribed
        """
        with self._lock:
            handlers = self._handlers.get(event_type, [])
            if handler not in handlers:
                return False
            handlers.remove(handler)
        self._trace(f"{_handler_name(handler)} stopped listening for {event_type.name}")
        return True

    # ============== Publishing ==============

    def publish(
        self,
        event: "GameEvent",
        priority: EventPriority = EventPriority.NORMAL,
        source: Optional[str] = None
    ) -> None:
        """Queue an event until the next process_events() call."""
        queued = QueuedEvent(event, priority, source or "unknown")
        with self._lock:
            heapq.heappush(self._pending, queued)
            self._published += 1
        self._trace(f"Queued {type(event).__name__} from {queued.source} ({priority.name})")

    def publish_immediate(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Deliver an event now, skipping the queue."""
        with self._lock:
            self._published += 1
        self._deliver(QueuedEvent(event, EventPriority.CRITICAL, source or "immediate"))

    def process_events(self, max_events: Optional[int] = None) -> int:
        """Deliver queued events, highest priority first.

        Events published by handlers during delivery are picked up in the
        same call unless max_events is reached.

        Args:
            max_events: Stop after this many deliveries (None for all)

        Returns:
            Number of events delivered
        """
        delivered = 0
        while max_events is None or delivered < max_events:
            with self._lock:
                if not self._pending:
                    break
                queued = heapq.heappop(self._pending)
            self._deliver(queued)
            delivered += 1
        return delivered

    def _deliver(self, queued: QueuedEvent) -> None:
        event = queued.event
        with self._lock:
            self._delivered += 1
            handlers = self._handlers.get(event.event_type, []) + self._catch_all

        self._trace(f"Delivering {type(event).__name__} from {queued.source} (turn {event.turn})")

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                with self._lock:
                    self._handler_errors += 1
                self._trace(f"{_handler_name(handler)} failed on {type(event).__name__}: {e}")

    # ============== Introspection ==============

    def has_queued_events(self) -> bool:
        with self._lock:
            return bool(self._pending)

    def get_statistics(self) -> dict[str, Any]:
        """Counters for tests and debug overlays."""
        with self._lock:
            return {
                'events_published': self._published,
                'events_processed': self._delivered,
                'events_queued': len(self._pending),
                'subscriber_errors': self._handler_errors,
                'subscribers_count': sum(len(h) for h in self._handlers.values()),
                'universal_subscribers_count': len(self._catch_all),
            }

    def shutdown(self) -> None:
        """Drop all handlers and pending events."""
        with self._lock:
            self._handlers.clear()
            self._catch_all.clear()
            self._pending.clear()


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, '__name__', 'anonymous')
