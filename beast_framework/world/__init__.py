"""World module - overworld player control."""

from beast_framework.world.player import PlayerController, PlayerEvent, IDLE_ANIMATIONS

__all__ = [
    "PlayerController",
    "PlayerEvent",
    "IDLE_ANIMATIONS",
]
