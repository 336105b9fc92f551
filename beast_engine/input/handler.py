"""
Keyboard to action translation.

The host feeds pygame key events in and hands the resulting InputState
to the battle menu and the player controller each frame:

    for event in pygame.event.get():
        input_handler.process_event(event)
    input_handler.update()

    player.update(dt, input_handler.state)
    battle.menu.handle_input(input_handler.state)
"""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from beast_engine.core.actions import Action, DEFAULT_KEY_BINDINGS


@dataclass
class InputState:
    """Actions held this frame, and which of them went down or up since the last one."""
    held: set[Action] = field(default_factory=set)
    pressed: set[Action] = field(default_factory=set)
    released: set[Action] = field(default_factory=set)

    def is_pressed(self, action: Action) -> bool:
        return action in self.held

    def is_just_pressed(self, action: Action) -> bool:
        return action in self.pressed


class InputHandler:
    """Tracks held keys and maps them to actions through a binding table."""

    def __init__(self, bindings: dict[Action, list[int]] | None = None):
        self.bindings = bindings if bindings is not None else DEFAULT_KEY_BINDINGS
        self._keys_down: set[int] = set()
        self._last_held: set[Action] = set()
        self._state = InputState()

    @property
    def state(self) -> InputState:
        return self._state

    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._keys_down.add(event.key)
        elif event.type == pygame.KEYUP:
            self._keys_down.discard(event.key)

    def update(self) -> None:
        """Recompute the state from the keys currently down. Call once per frame."""
        # An action stays held while any of its keys is down
        held = {
            action for action, keys in self.bindings.items()
            if any(key in self._keys_down for key in keys)
        }
        self._state = InputState(
            held=held,
            pressed=held - self._last_held,
            released=self._last_held - held,
        )
        self._last_held = held
