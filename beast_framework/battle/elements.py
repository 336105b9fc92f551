"""
Elemental types and the damage matchup table.
"""

from __future__ import annotations

from enum import Enum


class ElementalType(Enum):
    """Element of a beast or an attack. Values match authored data files."""
    BASIC = "Basic"
    EARTH = "Earth"
    WIND = "Wind"
    FIRE = "Fire"
    WATER = "Water"

    def modifier_when_receiving(self, attacker: ElementalType) -> float:
        """Damage multiplier when this element is hit by `attacker`."""
        return type_modifier(self, attacker)


BASIC_MODIFIER = 0.9
NEUTRAL_MODIFIER = 1.0

# (defender, attacker) -> multiplier. Deliberately asymmetric.
# Pairs not listed here are neutral.
MATCHUP_TABLE: dict[tuple[ElementalType, ElementalType], float] = {
    (ElementalType.EARTH, ElementalType.WIND): 0.5,
    (ElementalType.EARTH, ElementalType.FIRE): 2.0,
    (ElementalType.WIND, ElementalType.FIRE): 0.5,
    (ElementalType.WIND, ElementalType.EARTH): 2.0,
    (ElementalType.FIRE, ElementalType.EARTH): 0.5,
    (ElementalType.FIRE, ElementalType.WIND): 2.0,
}


def type_modifier(defender: ElementalType, attacker: ElementalType) -> float:
    """
    Damage multiplier for an attack of element `attacker` against a
    beast of element `defender`.

    Basic attacks always deal 0.9x, whatever the defender.
    """
    if attacker is ElementalType.BASIC:
        return BASIC_MODIFIER
    return MATCHUP_TABLE.get((defender, attacker), NEUTRAL_MODIFIER)
