"""
Battle command menu.

The menu turns the current turn/menu state into a row of buttons inside
a host-supplied Container. Every button carries the MenuAction it was
built for, so pressing it dispatches exactly the attack that was shown,
even if the beast's attack list changes afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Sequence

from beast_engine.core.actions import Action
from beast_engine.core.events import EventBus, UIEvent
from beast_engine.input.handler import InputState
from beast_engine.ui.container import Container
from beast_engine.ui.widgets.button import Button
from beast_framework.battle.attack import Attack
from beast_framework.battle.states import BattleSide, MenuState, TurnState

logger = logging.getLogger(__name__)


class MenuActionKind(Enum):
    """What pressing a menu entry does."""
    ATTACK = auto()         # open the attack list
    FLEE = auto()
    ATTACK_OPTION = auto()  # use a specific attack


@dataclass(frozen=True, eq=False)
class MenuAction:
    """
    A selectable menu entry.

    Compared by identity: an action is only valid while the exact
    instance is on offer.
    """
    kind: MenuActionKind
    label: str
    attack: Optional[Attack] = None
    target: Optional[BattleSide] = None


ActionCallback = Callable[[MenuAction], None]


class MenuController:
    """
    Renders menu actions as buttons and dispatches presses.

    Usage:
        menu = MenuController(container, on_action=coordinator.dispatch)
        menu.populate(TurnState.PLAYER_TURN, MenuState.BASE, beast.attacks)
    """

    def __init__(
        self,
        container: Container,
        on_action: ActionCallback,
        events: Optional[EventBus] = None,
    ):
        self.container = container
        self.on_action = on_action
        self.events = events
        self._actions: list[MenuAction] = []

    @property
    def actions(self) -> tuple[MenuAction, ...]:
        """Actions currently on offer, in display order."""
        return tuple(self._actions)

    @property
    def labels(self) -> list[str]:
        return [action.label for action in self._actions]

    def retract(self) -> None:
        """Remove every offered action. Safe to call on an empty menu."""
        self._actions.clear()
        self.container.clear_children()

    def populate(
        self,
        turn_state: TurnState,
        menu_state: MenuState,
        attacks: Sequence[Attack] = (),
    ) -> None:
        """Replace the offered actions with those for the given state."""
        logger.debug(f"Populating menu ({turn_state.name}, {menu_state.name})")
        self.retract()

        if turn_state is TurnState.ENEMY_TURN:
            logger.info("Enemy's turn")
        elif menu_state is MenuState.BASE:
            self._offer(MenuAction(MenuActionKind.ATTACK, "Attack"))
            self._offer(MenuAction(MenuActionKind.FLEE, "Flee"))
        else:
            for attack in attacks:
                self._offer(MenuAction(
                    MenuActionKind.ATTACK_OPTION,
                    attack.name,
                    attack=attack,
                    target=BattleSide.ENEMY,
                ))

        self.container.focus_first()

        if self.events:
            self.events.publish(UIEvent.MENU_REFRESHED, labels=self.labels)

    def select(self, action: MenuAction) -> bool:
        """
        Dispatch an action if it is still on offer.

        Returns:
            False if the action was stale and got discarded
        """
        if not any(action is offered for offered in self._actions):
            logger.warning(f"Discarding stale menu action '{action.label}'")
            return False

        if self.events:
            self.events.publish(UIEvent.BUTTON_CLICKED, label=action.label)

        self.on_action(action)
        return True

    def handle_input(self, input_state: InputState) -> bool:
        """
        Keyboard navigation: up/down moves focus, confirm presses.

        Returns:
            True if the input was handled
        """
        if input_state.is_just_pressed(Action.CONFIRM):
            return self.container.on_confirm()
        if input_state.is_just_pressed(Action.MENU_UP):
            return self.container.navigate(-1)
        if input_state.is_just_pressed(Action.MENU_DOWN):
            return self.container.navigate(1)
        return False

    def _offer(self, action: MenuAction) -> None:
        self._actions.append(action)
        self.container.add_child(Button(action.label, on_click=lambda: self.select(action)))
