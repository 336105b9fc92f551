"""
Battle Demo: beast battle in the terminal

Demonstrates:
- Loading attacks and beasts from the JSON database
- Battle coordinator and command menu
- Elemental matchups and defeat

The menu is printed as a numbered list; type a number to press that
button. Enemy turns are not implemented, so the player keeps attacking
until the enemy is defeated.

Usage:
    python demos/battle_demo.py [player_beast_id] [enemy_beast_id]
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from beast_engine.core.events import Event, EventBus
from beast_engine.resources.database import Database
from beast_engine.ui.container import Container
from beast_framework.battle import (
    BattleCoordinator,
    BattleEvent,
    BeastDisplay,
    BeastEvent,
    build_battle_config,
)

DATA_PATH = Path(__file__).parent.parent / "data"


def print_status(displays: list[BeastDisplay]) -> None:
    for display in displays:
        if display.visible:
            print(f"  {display.name_tag.text:<10} HP {display.health_bar.text}")


def main() -> None:
    """Run the battle demo."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    player_id = sys.argv[1] if len(sys.argv) > 1 else "pebblit"
    enemy_id = sys.argv[2] if len(sys.argv) > 2 else "cindrel"

    database = Database(DATA_PATH)
    database.load_all()

    events = EventBus()
    menu_panel = Container()
    config = build_battle_config(database, player_id, enemy_id, events, menu_panel)
    battle = BattleCoordinator(config, events)

    displays = [
        BeastDisplay(battle.player_beast, events),
        BeastDisplay(battle.enemy_beast, events),
    ]

    finished = []

    def on_defeated(event: Event) -> None:
        print(f"{event['beast'].name} was defeated!")
        finished.append(event["beast"])

    def on_resolved(event: Event) -> None:
        outcome = event["outcome"]
        print(f"{outcome.attack.name} hit for {outcome.damage:g} (x{outcome.modifier})")

    events.subscribe(BeastEvent.DEFEATED, on_defeated)
    events.subscribe(BattleEvent.ATTACK_RESOLVED, on_resolved)

    battle.start()

    while not finished:
        print_status(displays)
        for i, button in enumerate(menu_panel.children, start=1):
            print(f"  {i}. {button.text}")

        choice = input("> ").strip()
        if choice in ("q", "quit"):
            break
        if not choice.isdigit() or not 1 <= int(choice) <= menu_panel.child_count():
            print("Pick one of the listed numbers (q to quit).")
            continue

        menu_panel.children[int(choice) - 1].on_confirm()

    print_status(displays)


if __name__ == "__main__":
    main()
