"""Input handling module."""

from beast_engine.input.handler import InputHandler, InputState

__all__ = [
    "InputHandler",
    "InputState",
]
