"""
Button widget: a focusable label that runs a callback when confirmed.
"""

from __future__ import annotations

from typing import Callable, Optional

from beast_engine.ui.widget import Widget


class Button(Widget):

    focusable = True

    def __init__(self, text: str = "", on_click: Optional[Callable[[], None]] = None):
        super().__init__()
        self.text = text
        self.on_click = on_click

    def on_confirm(self) -> bool:
        if self.on_click:
            self.on_click()
        return True

    def __repr__(self) -> str:
        return f"Button(text={self.text!r})"
