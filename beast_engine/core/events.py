"""
Typed event bus.

Beasts, the battle coordinator and the command menu announce what happened
by publishing Enum-typed events; displays and hosts listen without holding
references back into the battle.

Usage:
    events.subscribe(BeastEvent.HEALTH_CHANGED, display.on_health_changed)
    events.publish(BeastEvent.HEALTH_CHANGED, beast=beast, current=90.0, maximum=100.0)
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable
from weakref import WeakMethod, ref

logger = logging.getLogger(__name__)


class UIEvent(Enum):
    """Published by the command menu."""
    BUTTON_CLICKED = auto()  # label
    MENU_REFRESHED = auto()  # labels


@dataclass
class Event:
    """A published event: its type plus keyword payload."""
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]


class EventBus:
    """
    Publish/subscribe hub keyed by event type.

    Bound methods are held weakly by default, so a widget that goes away
    stops receiving events without unsubscribing. An event published while
    another is being delivered waits until that delivery finishes; listeners
    always see events in the order they were published.
    """

    def __init__(self):
        self._subscribers: dict[Enum, list[Any]] = {}
        self._pending: deque[Event] = deque()
        self._delivering = False

    def subscribe(self, event_type: Enum, handler: EventHandler, weak: bool = True) -> None:
        """
        Call `handler(event)` for every event of `event_type`.

        Args:
            weak: Hold the handler weakly. Pass False for lambdas and
                  other handlers nothing else keeps alive.
        """
        if not weak:
            entry = handler
        elif hasattr(handler, '__self__'):
            entry = WeakMethod(handler)
        else:
            entry = ref(handler)
        self._subscribers.setdefault(event_type, []).append(entry)

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        entries = self._subscribers.get(event_type)
        if entries:
            entries[:] = [e for e in entries if self._resolve(e) != handler]

    def has_subscribers(self, event_type: Enum) -> bool:
        return any(self._resolve(e) is not None for e in self._subscribers.get(event_type, []))

    def publish(self, event_type: Enum, **data: Any) -> Event:
        event = Event(type=event_type, data=data)
        self._pending.append(event)
        if not self._delivering:
            self._drain()
        return event

    def _drain(self) -> None:
        self._delivering = True
        try:
            while self._pending:
                self._deliver(self._pending.popleft())
        finally:
            self._delivering = False

    def _deliver(self, event: Event) -> None:
        entries = self._subscribers.get(event.type)
        if not entries:
            return

        dead = []
        for entry in list(entries):
            handler = self._resolve(entry)
            if handler is None:
                dead.append(entry)
                continue
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error in event handler for {event.type}")

        if dead:
            entries[:] = [e for e in entries if all(e is not d for d in dead)]

    @staticmethod
    def _resolve(entry: Any) -> EventHandler | None:
        if isinstance(entry, (ref, WeakMethod)):
            return entry()
        return entry
