"""
Attack records - authored, shared, read-only at battle time.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from beast_engine.core.component import Component
from beast_framework.battle.elements import ElementalType


class Attack(Component):
    """
    A named attack a beast can use.

    Attributes:
        name: Label shown in the attack menu
        element: Elemental type used for the matchup modifier
        strength: Raw damage before the modifier
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    element: ElementalType = ElementalType.BASIC
    strength: float = Field(default=0.0, ge=0)
