import itertools

import pytest

from beast_framework.battle.elements import ElementalType, type_modifier

E = ElementalType

@pytest.mark.parametrize("defender", list(ElementalType))
def test_basic_attacker_always_point_nine(defender):
    assert type_modifier(defender, E.BASIC) == 0.9

@pytest.mark.parametrize("defender, attacker, expected", [
    (E.EARTH, E.WIND, 0.5),
    (E.EARTH, E.FIRE, 2.0),
    (E.WIND, E.FIRE, 0.5),
    (E.WIND, E.EARTH, 2.0),
    (E.FIRE, E.EARTH, 0.5),
    (E.FIRE, E.WIND, 2.0),
])
def test_listed_matchups(defender, attacker, expected):
    assert type_modifier(defender, attacker) == expected

def test_table_is_not_symmetric():
    assert type_modifier(E.EARTH, E.WIND) == 0.5
    assert type_modifier(E.WIND, E.EARTH) == 2.0

def test_table_is_total():
    expected = {
        E.BASIC: {E.BASIC: 0.9, E.EARTH: 1.0, E.WIND: 1.0, E.FIRE: 1.0, E.WATER: 1.0},
        E.EARTH: {E.BASIC: 0.9, E.EARTH: 1.0, E.WIND: 0.5, E.FIRE: 2.0, E.WATER: 1.0},
        E.WIND: {E.BASIC: 0.9, E.EARTH: 2.0, E.WIND: 1.0, E.FIRE: 0.5, E.WATER: 1.0},
        E.FIRE: {E.BASIC: 0.9, E.EARTH: 0.5, E.WIND: 2.0, E.FIRE: 1.0, E.WATER: 1.0},
        E.WATER: {E.BASIC: 0.9, E.EARTH: 1.0, E.WIND: 1.0, E.FIRE: 1.0, E.WATER: 1.0},
    }
    for defender, attacker in itertools.product(ElementalType, repeat=2):
        assert type_modifier(defender, attacker) == expected[defender][attacker]

def test_water_attacks_are_neutral():
    for defender in ElementalType:
        assert type_modifier(defender, E.WATER) == 1.0

def test_method_form_uses_self_as_defender():
    assert E.EARTH.modifier_when_receiving(E.FIRE) == 2.0
    assert E.FIRE.modifier_when_receiving(E.EARTH) == 0.5

def test_values_match_data_files():
    assert ElementalType("Fire") is E.FIRE
    assert [e.value for e in ElementalType] == ["Basic", "Earth", "Wind", "Fire", "Water"]
