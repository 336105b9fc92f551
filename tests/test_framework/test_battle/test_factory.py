from pathlib import Path

import pytest

from beast_engine.resources.database import Database
from beast_engine.ui.container import Container
from beast_framework.battle import (
    BattleConfigurationError,
    BattleCoordinator,
    ElementalType,
    build_battle_config,
    create_attack,
    create_beast,
)

DATA_PATH = Path(__file__).resolve().parents[3] / "data"

def test_create_attack():
    attack = create_attack({"id": "gust", "name": "Gust", "type": "Wind", "strength": 20})
    assert attack.name == "Gust"
    assert attack.element is ElementalType.WIND
    assert attack.strength == 20

def test_create_attack_rejects_bad_record():
    with pytest.raises(BattleConfigurationError):
        create_attack({"id": "bad", "name": "Bad", "type": "Lightning", "strength": 1})
    with pytest.raises(BattleConfigurationError):
        create_attack({"id": "nameless", "type": "Fire"})

def test_create_beast_shares_attacks(event_bus):
    gust = create_attack({"name": "Gust", "type": "Wind", "strength": 20})
    attacks = {"gust": gust}
    record = {"id": "z", "name": "Zephyrk", "type": "Wind", "max_health": 80, "attacks": ["gust"]}

    first = create_beast(record, attacks, event_bus)
    second = create_beast(record, attacks, event_bus)

    assert first.attacks[0] is gust
    assert second.attacks[0] is gust
    assert first.element is ElementalType.WIND
    assert first.max_health == 80

def test_create_beast_unknown_attack(event_bus):
    record = {"id": "z", "name": "Zephyrk", "type": "Wind", "max_health": 80, "attacks": ["nope"]}
    with pytest.raises(BattleConfigurationError, match="nope"):
        create_beast(record, {}, event_bus)

def test_create_beast_bad_max_health(event_bus):
    record = {"id": "z", "name": "Zephyrk", "type": "Wind", "max_health": 0}
    with pytest.raises(BattleConfigurationError):
        create_beast(record, {}, event_bus)

def test_build_battle_from_shipped_data(event_bus):
    database = Database(DATA_PATH)
    database.load_all()
    panel = Container()

    config = build_battle_config(database, "pebblit", "cindrel", event_bus, panel)
    battle = BattleCoordinator(config, event_bus)
    battle.start()

    assert battle.player_beast.name == "Pebblit"
    assert battle.enemy_beast.element is ElementalType.FIRE
    assert [b.text for b in panel.children] == ["Attack", "Flee"]

    panel.children[0].on_confirm()
    assert [b.text for b in panel.children] == ["Tackle", "Rock Throw"]

    panel.children[1].on_confirm()  # Earth vs Fire: 25 * 0.5
    assert battle.enemy_beast.health == pytest.approx(90 - 12.5)

def test_build_battle_unknown_beast(event_bus):
    database = Database(DATA_PATH)
    database.load_all()

    with pytest.raises(BattleConfigurationError, match="missingno"):
        build_battle_config(database, "pebblit", "missingno", event_bus, Container())

def test_unused_bad_attack_record_does_not_block_battle(event_bus):
    database = Database(DATA_PATH)
    database.load_all()
    database.attacks["broken"] = {"id": "broken", "name": "", "type": "Fire", "strength": -1}

    config = build_battle_config(database, "pebblit", "cindrel", event_bus, Container())
    assert [a.name for a in config.player_beast.attacks] == ["Tackle", "Rock Throw"]

def test_bad_attack_record_used_by_beast_fails(event_bus):
    database = Database(DATA_PATH)
    database.load_all()
    database.attacks["ember"] = {"id": "ember", "name": "", "type": "Fire", "strength": 30}

    with pytest.raises(BattleConfigurationError, match="ember"):
        build_battle_config(database, "pebblit", "cindrel", event_bus, Container())
