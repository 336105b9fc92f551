"""
Beast status display - name tag and health bar.
"""

from __future__ import annotations

from beast_engine.core.events import Event, EventBus
from beast_engine.ui.container import Container
from beast_engine.ui.widgets.label import Label
from beast_engine.ui.widgets.progress_bar import ProgressBar
from beast_framework.battle.beast import Beast, BeastEvent


class BeastDisplay(Container):
    """
    Name tag plus HP bar for one beast.

    Create it before the battle starts so it sees the activation refresh.
    Hidden once the beast is defeated.
    """

    def __init__(self, beast: Beast, events: EventBus):
        super().__init__()
        self.beast = beast
        self.events = events
        self.focusable = False

        self.name_tag = Label(beast.name)
        self.health_bar = ProgressBar(beast.health, beast.max_health)
        self.add_children(self.name_tag, self.health_bar)

        events.subscribe(BeastEvent.HEALTH_CHANGED, self._on_health_changed)
        events.subscribe(BeastEvent.DEFEATED, self._on_defeated)

    def close(self) -> None:
        """Stop listening for beast events."""
        self.events.unsubscribe(BeastEvent.HEALTH_CHANGED, self._on_health_changed)
        self.events.unsubscribe(BeastEvent.DEFEATED, self._on_defeated)

    def _on_health_changed(self, event: Event) -> None:
        if event["beast"] is not self.beast:
            return
        self.health_bar.set_value(event["current"], event["maximum"])

    def _on_defeated(self, event: Event) -> None:
        if event["beast"] is not self.beast:
            return
        self.set_visible(False)
