"""
Battle state enums shared by the coordinator and the menu.
"""

from enum import Enum, auto


class BattleSide(Enum):
    """Which side of the battle a beast fights for. Fixed at setup."""
    PLAYER = auto()
    ENEMY = auto()

    @property
    def opponent(self) -> 'BattleSide':
        return BattleSide.ENEMY if self is BattleSide.PLAYER else BattleSide.PLAYER


class TurnState(Enum):
    """Whose side may act."""
    PLAYER_TURN = auto()
    ENEMY_TURN = auto()


class MenuState(Enum):
    """Which set of actions the menu offers during the player's turn."""
    BASE = auto()
    ATTACK_CHOICE = auto()


TURN_OWNERS: dict[TurnState, BattleSide] = {
    TurnState.PLAYER_TURN: BattleSide.PLAYER,
    TurnState.ENEMY_TURN: BattleSide.ENEMY,
}
