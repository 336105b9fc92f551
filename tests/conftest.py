import os
import sys
import pytest
from unittest.mock import patch

# Ensure engine modules can be imported
sys.path.append(os.getcwd())

@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame to allow headless testing.
    Autoused for all tests to prevent accidental window creation.
    """
    with patch('pygame.init'), \
         patch('pygame.display'), \
         patch('pygame.event'), \
         patch('pygame.key'):
        yield

@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from beast_engine.core.events import EventBus
    return EventBus()

@pytest.fixture
def menu_container():
    """Empty container the battle menu renders into."""
    from beast_engine.ui.container import Container
    return Container()

@pytest.fixture
def attacks():
    """A small set of attacks covering several elements."""
    from beast_framework.battle import Attack, ElementalType
    return {
        "tackle": Attack(name="Tackle", element=ElementalType.BASIC, strength=10),
        "gust": Attack(name="Gust", element=ElementalType.WIND, strength=20),
        "inferno": Attack(name="Inferno", element=ElementalType.FIRE, strength=60),
    }

@pytest.fixture
def player_beast(event_bus, attacks):
    """Wind beast with three attacks, not yet activated."""
    from beast_framework.battle import Beast, BeastData, ElementalType
    data = BeastData(
        name="Zephyrk",
        element=ElementalType.WIND,
        max_health=80,
        attacks=[attacks["gust"], attacks["inferno"], attacks["tackle"]],
    )
    return Beast(data, event_bus)

@pytest.fixture
def enemy_beast(event_bus, attacks):
    """Earth beast, maxHealth 100, not yet activated."""
    from beast_framework.battle import Beast, BeastData, ElementalType
    data = BeastData(
        name="Pebblit",
        element=ElementalType.EARTH,
        max_health=100,
        attacks=[attacks["tackle"]],
    )
    return Beast(data, event_bus)

@pytest.fixture
def battle(player_beast, enemy_beast, menu_container, event_bus):
    """Started battle on the player's turn with the base menu shown."""
    from beast_framework.battle import BattleCoordinator, BattleConfig
    coordinator = BattleCoordinator(
        BattleConfig(player_beast, enemy_beast, menu_container),
        event_bus,
    )
    coordinator.start()
    return coordinator

@pytest.fixture
def recorder(event_bus):
    """Records every event of the types passed to .watch()."""
    class Recorder:
        def __init__(self):
            self.events = []

        def watch(self, *event_types):
            for event_type in event_types:
                event_bus.subscribe(event_type, self.events.append, weak=False)
            return self

        def of(self, event_type):
            return [e for e in self.events if e.type == event_type]

    return Recorder()
