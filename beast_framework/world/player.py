"""
Player controller - overworld movement.

Turns held movement actions into a velocity and picks the matching idle
animation. Input arrives as an explicit InputState each update; the
controller never reads global input.
"""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Optional

from beast_engine.core.actions import Action
from beast_engine.core.events import EventBus
from beast_engine.input.handler import InputState


class PlayerEvent(Enum):
    """Player controller events."""
    SPEED_INCREASED = auto()  # speed, amount


# (facing down, facing left) -> idle animation name
IDLE_ANIMATIONS: dict[tuple[bool, bool], str] = {
    (True, True): "downleft_idle",
    (True, False): "downright_idle",
    (False, True): "upleft_idle",
    (False, False): "upright_idle",
}


class PlayerController:
    """
    Handles player input and movement.

    Attributes:
        speed: Movement speed in pixels per second
        position: Current (x, y)
        velocity: Velocity from the last update
        animation: Current animation name, None until the first move
    """

    def __init__(self, events: Optional[EventBus] = None, speed: float = 250.0):
        self.events = events
        self.speed = speed
        self.position: tuple[float, float] = (0.0, 0.0)
        self.velocity: tuple[float, float] = (0.0, 0.0)
        self.animation: Optional[str] = None

    def update(self, dt: float, input_state: InputState) -> None:
        """Update velocity, animation and position from input."""
        down = True
        left = True
        dx = 0.0
        dy = 0.0

        if input_state.is_pressed(Action.MOVE_RIGHT):
            dx += 1.0
            left = False
        if input_state.is_pressed(Action.MOVE_LEFT):
            dx -= 1.0
        if input_state.is_pressed(Action.MOVE_UP):
            dy -= 1.0
            down = False
        if input_state.is_pressed(Action.MOVE_DOWN):
            dy += 1.0

        length = math.hypot(dx, dy)
        if length > 0:
            self.animation = IDLE_ANIMATIONS[(down, left)]
            dx /= length
            dy /= length

        self.velocity = (dx * self.speed, dy * self.speed)

        x, y = self.position
        self.position = (x + self.velocity[0] * dt, y + self.velocity[1] * dt)

    def increase_speed(self, amount: float) -> None:
        """Raise movement speed and announce it."""
        self.speed += amount
        if self.events:
            self.events.publish(PlayerEvent.SPEED_INCREASED, speed=self.speed, amount=amount)
