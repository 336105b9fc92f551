"""
Battle coordinator - turn/menu state and the damage pipeline.

The coordinator owns the turn and menu state and references (but does
not own) the two beasts. Every point of damage goes through
resolve_attack(), so the matchup rules are applied in exactly one place.

Turn alternation is host-driven: the battle starts on the player's turn
and stays there until the host calls set_turn(). No enemy behaviour is
implemented here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from beast_engine.core.events import EventBus
from beast_engine.ui.container import Container
from beast_framework.battle.attack import Attack
from beast_framework.battle.beast import Beast
from beast_framework.battle.elements import type_modifier
from beast_framework.battle.errors import BattleConfigurationError
from beast_framework.battle.menu import MenuAction, MenuActionKind, MenuController
from beast_framework.battle.states import BattleSide, MenuState, TurnState, TURN_OWNERS

logger = logging.getLogger(__name__)


class BattleEvent(Enum):
    """Battle-level events."""
    BATTLE_STARTED = auto()   # player, enemy
    ATTACK_RESOLVED = auto()  # outcome
    FLEE_SELECTED = auto()
    TURN_CHANGED = auto()     # turn_state


@dataclass
class AttackOutcome:
    """Result of one resolved attack."""
    attacker: BattleSide
    defender: BattleSide
    attack: Attack
    modifier: float
    damage: float
    defeated: bool


class BattleConfig:
    """
    Everything a battle needs, supplied by the scene that starts it.

    Validated once, when the coordinator is created, so a bad scene fails
    at setup instead of on the first button press.
    """

    def __init__(
        self,
        player_beast: Optional[Beast] = None,
        enemy_beast: Optional[Beast] = None,
        menu_container: Optional[Container] = None,
    ):
        self.player_beast = player_beast
        self.enemy_beast = enemy_beast
        self.menu_container = menu_container

    def validate(self) -> None:
        """Raise BattleConfigurationError if anything is missing or wrong."""
        if not isinstance(self.player_beast, Beast):
            raise BattleConfigurationError("Battle has no player beast")
        if not isinstance(self.enemy_beast, Beast):
            raise BattleConfigurationError("Battle has no enemy beast")
        if self.player_beast is self.enemy_beast:
            raise BattleConfigurationError("The same beast cannot fight on both sides")
        if not isinstance(self.menu_container, Container):
            raise BattleConfigurationError("Battle has no menu container")


class BattleCoordinator:
    """
    Turn-based battle controller for one player beast against one enemy.

    Usage:
        battle = BattleCoordinator(BattleConfig(player, enemy, menu_panel), events)
        battle.start()
        # menu buttons now call back into the coordinator
    """

    def __init__(self, config: BattleConfig, events: EventBus):
        config.validate()

        self.config = config
        self.events = events

        self._beasts: dict[BattleSide, Beast] = {
            BattleSide.PLAYER: config.player_beast,
            BattleSide.ENEMY: config.enemy_beast,
        }
        self.turn_state = TurnState.PLAYER_TURN
        self.menu_state = MenuState.BASE
        self.menu = MenuController(config.menu_container, self.dispatch, events)

    @property
    def player_beast(self) -> Beast:
        return self._beasts[BattleSide.PLAYER]

    @property
    def enemy_beast(self) -> Beast:
        return self._beasts[BattleSide.ENEMY]

    def beast_for(self, side: BattleSide) -> Beast:
        return self._beasts[side]

    # Lifecycle

    def start(self) -> None:
        """Activate both beasts and show the base menu."""
        logger.info(f"Battle start: {self.player_beast.name} vs {self.enemy_beast.name}")
        for beast in self._beasts.values():
            if not beast.is_active:
                beast.activate()

        self.menu_state = MenuState.BASE
        self.populate_menu()

        self.events.publish(
            BattleEvent.BATTLE_STARTED,
            player=self.player_beast,
            enemy=self.enemy_beast,
        )

    def populate_menu(self) -> None:
        """Re-render the menu for the current state."""
        self.menu.populate(self.turn_state, self.menu_state, self.player_beast.attacks)

    def set_turn(self, turn_state: TurnState) -> None:
        """Hand the turn to a side. The menu resets to its base entries."""
        if turn_state is self.turn_state:
            return

        logger.info(f"Turn changed to {turn_state.name}")
        self.turn_state = turn_state
        self.menu_state = MenuState.BASE
        self.populate_menu()
        self.events.publish(BattleEvent.TURN_CHANGED, turn_state=turn_state)

    # Menu handlers

    def dispatch(self, action: MenuAction) -> None:
        """Route a selected menu action to its handler."""
        if action.kind is MenuActionKind.ATTACK:
            self.on_attack_pressed()
        elif action.kind is MenuActionKind.FLEE:
            self.on_flee_pressed()
        elif action.kind is MenuActionKind.ATTACK_OPTION and action.attack is not None:
            self.on_attack_option_pressed(action.attack, action.target or BattleSide.ENEMY)

    def on_attack_pressed(self) -> None:
        if self.turn_state is not TurnState.PLAYER_TURN or self.menu_state is not MenuState.BASE:
            logger.warning("Attack menu requested outside the player's base menu")
            return

        self.menu_state = MenuState.ATTACK_CHOICE
        self.populate_menu()

    def on_flee_pressed(self) -> None:
        logger.info("Fleeing")
        self.events.publish(BattleEvent.FLEE_SELECTED, side=BattleSide.PLAYER)

    def on_attack_option_pressed(
        self,
        attack: Attack,
        target: BattleSide = BattleSide.ENEMY,
    ) -> Optional[AttackOutcome]:
        if self.menu_state is not MenuState.ATTACK_CHOICE:
            logger.warning(f"Attack option '{attack.name}' selected outside the attack menu")
            return None
        return self.resolve_attack(BattleSide.PLAYER, target, attack)

    # Damage pipeline

    def resolve_attack(
        self,
        attacker: BattleSide,
        defender: BattleSide,
        attack: Attack,
    ) -> Optional[AttackOutcome]:
        """
        Apply `attack` from one side to the other.

        Rejected (logged, nothing changes) when the attacker does not own
        the current turn or either beast is out of play.

        Returns:
            The outcome, or None if the attack was rejected
        """
        logger.info(f"Handling attack {attacker.name}->{defender.name} ({attack.name})")

        if TURN_OWNERS[self.turn_state] is not attacker:
            logger.warning(f"Rejecting attack by {attacker.name} during {self.turn_state.name}")
            return None

        source = self._beasts[attacker]
        if not source.in_play:
            logger.warning(f"Rejecting attack by {source.name}, not in play")
            return None

        target = self._beasts[defender]
        if not target.in_play:
            logger.warning(f"Rejecting attack on {target.name}, not in play")
            return None

        modifier = type_modifier(target.element, attack.element)
        damage = attack.strength * modifier
        logger.info(f"Dealing {damage} damage from {attacker.name} to {defender.name}")
        target.change_health(-damage)

        outcome = AttackOutcome(
            attacker=attacker,
            defender=defender,
            attack=attack,
            modifier=modifier,
            damage=damage,
            defeated=target.is_defeated,
        )

        self.menu_state = MenuState.BASE
        self.populate_menu()

        self.events.publish(BattleEvent.ATTACK_RESOLVED, outcome=outcome)
        return outcome
