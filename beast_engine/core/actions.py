"""
Semantic input actions and their default keys.

The menu and the player controller ask about actions, never raw keys:
    if input_state.is_just_pressed(Action.CONFIRM):
        ...
"""

from enum import Enum, auto

import pygame


class Action(Enum):
    # Command menu
    MENU_UP = auto()
    MENU_DOWN = auto()
    CONFIRM = auto()

    # Overworld movement
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()


# A key may drive several actions; the arrows move the player and the menu
DEFAULT_KEY_BINDINGS: dict[Action, list[int]] = {
    Action.MENU_UP: [pygame.K_UP, pygame.K_w],
    Action.MENU_DOWN: [pygame.K_DOWN, pygame.K_s],
    Action.CONFIRM: [pygame.K_RETURN, pygame.K_SPACE, pygame.K_z],
    Action.MOVE_UP: [pygame.K_UP, pygame.K_w],
    Action.MOVE_DOWN: [pygame.K_DOWN, pygame.K_s],
    Action.MOVE_LEFT: [pygame.K_LEFT, pygame.K_a],
    Action.MOVE_RIGHT: [pygame.K_RIGHT, pygame.K_d],
}
