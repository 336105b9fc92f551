"""
Build attacks, beasts and battle configs from database records.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from beast_engine.core.events import EventBus
from beast_engine.resources.database import Database
from beast_engine.ui.container import Container
from beast_framework.battle.attack import Attack
from beast_framework.battle.beast import Beast, BeastData
from beast_framework.battle.coordinator import BattleConfig
from beast_framework.battle.errors import BattleConfigurationError

logger = logging.getLogger(__name__)


def create_attack(record: Mapping[str, Any]) -> Attack:
    """
    Create an Attack from a database record.

    Record keys: name, type, strength.
    """
    try:
        return Attack(
            name=record["name"],
            element=record.get("type", "Basic"),
            strength=record.get("strength", 0.0),
        )
    except (KeyError, ValidationError) as e:
        raise BattleConfigurationError(f"Invalid attack record {record.get('id')!r}: {e}") from e


def create_beast(
    record: Mapping[str, Any],
    attacks: Mapping[str, Attack],
    events: EventBus,
) -> Beast:
    """
    Create a Beast from a database record.

    Args:
        record: Beast record (name, type, max_health, attacks as attack ids)
        attacks: Attack lookup by id. The same Attack instance is shared
                 by every beast that lists it.
        events: Bus the beast publishes on
    """
    beast_id = record.get("id")
    beast_attacks = []
    for attack_id in record.get("attacks", []):
        if attack_id not in attacks:
            raise BattleConfigurationError(
                f"Beast {beast_id!r} references unknown attack {attack_id!r}"
            )
        beast_attacks.append(attacks[attack_id])

    try:
        data = BeastData(
            name=record["name"],
            element=record.get("type", "Basic"),
            max_health=record["max_health"],
            attacks=beast_attacks,
        )
    except (KeyError, ValidationError) as e:
        raise BattleConfigurationError(f"Invalid beast record {beast_id!r}: {e}") from e

    return Beast(data, events)


def build_battle_config(
    database: Database,
    player_beast_id: str,
    enemy_beast_id: str,
    events: EventBus,
    menu_container: Container,
) -> BattleConfig:
    """
    Look up both beasts and assemble a BattleConfig.

    Only the attacks those two beasts list are built, so a bad record
    elsewhere in the database does not affect this battle.
    """
    records = []
    for beast_id in (player_beast_id, enemy_beast_id):
        record = database.get_beast(beast_id)
        if record is None:
            raise BattleConfigurationError(f"Unknown beast {beast_id!r}")
        records.append(record)

    attacks = {}
    for record in records:
        for attack_id in record.get("attacks", []):
            attack_record = database.get_attack(attack_id)
            if attack_record is not None and attack_id not in attacks:
                attacks[attack_id] = create_attack(attack_record)

    beasts = [create_beast(record, attacks, events) for record in records]

    logger.info(f"Configured battle {player_beast_id} vs {enemy_beast_id}")
    return BattleConfig(
        player_beast=beasts[0],
        enemy_beast=beasts[1],
        menu_container=menu_container,
    )
