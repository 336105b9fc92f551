"""
Core engine module.

Exports:
- Component: Pydantic base for data-only models
- EventBus, Event, UIEvent: Event system
- Action: Input actions
"""

from beast_engine.core.component import Component
from beast_engine.core.events import EventBus, Event, EventHandler, UIEvent
from beast_engine.core.actions import Action, DEFAULT_KEY_BINDINGS

__all__ = [
    # Data
    "Component",
    # Events
    "EventBus",
    "Event",
    "EventHandler",
    "UIEvent",
    # Input
    "Action",
    "DEFAULT_KEY_BINDINGS",
]
