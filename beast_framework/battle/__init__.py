"""
Battle module - turn-based beast combat.

Provides:
- Elemental types and the matchup table
- Attacks and beasts
- The command menu
- The battle coordinator (turn state and damage pipeline)
- Beast status displays
- Factories building battles from database records
"""

from beast_framework.battle.elements import ElementalType, type_modifier
from beast_framework.battle.attack import Attack
from beast_framework.battle.beast import Beast, BeastData, BeastEvent
from beast_framework.battle.states import BattleSide, TurnState, MenuState
from beast_framework.battle.menu import MenuAction, MenuActionKind, MenuController
from beast_framework.battle.coordinator import (
    BattleCoordinator,
    BattleConfig,
    BattleEvent,
    AttackOutcome,
)
from beast_framework.battle.display import BeastDisplay
from beast_framework.battle.errors import BattleError, BattleConfigurationError
from beast_framework.battle.factory import create_attack, create_beast, build_battle_config

__all__ = [
    # Elements
    "ElementalType",
    "type_modifier",
    # Combatants
    "Attack",
    "Beast",
    "BeastData",
    "BeastEvent",
    # State
    "BattleSide",
    "TurnState",
    "MenuState",
    # Menu
    "MenuAction",
    "MenuActionKind",
    "MenuController",
    # Coordinator
    "BattleCoordinator",
    "BattleConfig",
    "BattleEvent",
    "AttackOutcome",
    # Display
    "BeastDisplay",
    # Errors
    "BattleError",
    "BattleConfigurationError",
    # Factories
    "create_attack",
    "create_beast",
    "build_battle_config",
]
