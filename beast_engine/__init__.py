"""
Beast Engine

Game-agnostic pieces the battle framework is built on: typed event bus,
pydantic data components, input actions, a small widget tree and a
JSON data database.

Quick Start:
    from beast_engine import EventBus, Database

    events = EventBus()
    database = Database("data")
    database.load_all()
"""

__version__ = "0.1.0"

from beast_engine.core import (
    Component,
    EventBus,
    Event,
    UIEvent,
    Action,
)
from beast_engine.input import InputHandler, InputState
from beast_engine.resources import Database

__all__ = [
    # Data
    "Component",
    "Database",
    # Events
    "EventBus",
    "Event",
    "UIEvent",
    # Input
    "Action",
    "InputHandler",
    "InputState",
]
