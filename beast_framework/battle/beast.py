"""
Beasts - the combatants of a battle.

BeastData is the authored configuration; Beast wraps it with runtime
health and announces changes on the event bus so displays and battle-end
handlers can react.
"""

from __future__ import annotations

import logging
import math
from enum import Enum, auto

from pydantic import Field

from beast_engine.core.component import Component
from beast_engine.core.events import EventBus
from beast_framework.battle.attack import Attack
from beast_framework.battle.elements import ElementalType

logger = logging.getLogger(__name__)


class BeastEvent(Enum):
    """Beast notifications."""
    HEALTH_CHANGED = auto()  # beast, current, maximum
    DEFEATED = auto()        # beast


class BeastData(Component):
    """
    Authored beast configuration.

    Attributes:
        name: Display name (shown on the name tag)
        element: Elemental type, used when receiving attacks
        max_health: Health after activation, must be positive
        attacks: Attacks offered in the attack menu, in order
    """
    name: str = Field(min_length=1)
    element: ElementalType = ElementalType.BASIC
    max_health: float = Field(gt=0, allow_inf_nan=False)
    attacks: list[Attack] = Field(default_factory=list)


class Beast:
    """
    A combatant in battle.

    Health stays within [0, max_health]. Once health reaches zero the
    beast is defeated and removed from play; further health changes are
    ignored.
    """

    def __init__(self, data: BeastData, events: EventBus):
        self.data = data
        self.events = events

        self._health: float = 0.0
        self._active = False
        self._defeated = False

    def __repr__(self) -> str:
        return f"Beast({self.name!r}, {self.element.value}, {self._health}/{self.max_health})"

    @property
    def name(self) -> str:
        return self.data.name

    @property
    def element(self) -> ElementalType:
        return self.data.element

    @property
    def max_health(self) -> float:
        return self.data.max_health

    @property
    def health(self) -> float:
        return self._health

    @property
    def attacks(self) -> tuple[Attack, ...]:
        return tuple(self.data.attacks)

    @property
    def is_active(self) -> bool:
        """True once activate() has run."""
        return self._active

    @property
    def is_defeated(self) -> bool:
        return self._defeated

    @property
    def in_play(self) -> bool:
        """Active and not defeated."""
        return self._active and not self._defeated

    def activate(self) -> None:
        """Fill health and announce it. Only the first call has an effect."""
        if self._active:
            logger.warning(f"{self.name} is already active")
            return

        self._active = True
        self._health = self.max_health
        self._notify_health()

    def change_health(self, amount: float) -> bool:
        """
        Add `amount` to health (negative for damage).

        Returns:
            False if the change was ignored (not active, already defeated or NaN)
        """
        if not self._active:
            logger.warning(f"Ignoring health change on inactive beast {self.name}")
            return False
        if self._defeated:
            logger.warning(f"Ignoring health change on defeated beast {self.name}")
            return False
        if math.isnan(amount):
            logger.warning(f"Ignoring NaN health change on {self.name}")
            return False

        logger.info(f"Changing health of {self.name} by {amount}")
        self._health = min(self._health + amount, self.max_health)

        if self._health <= 0:
            self._health = 0.0
            self._defeated = True
            logger.info(f"{self.name} was defeated")
            self.events.publish(BeastEvent.DEFEATED, beast=self)

        self._notify_health()
        return True

    def _notify_health(self) -> None:
        self.events.publish(
            BeastEvent.HEALTH_CHANGED,
            beast=self,
            current=self._health,
            maximum=self.max_health,
        )
