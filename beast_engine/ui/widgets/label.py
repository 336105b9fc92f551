"""
Label widget for static text such as a beast's name tag.
"""

from __future__ import annotations

from beast_engine.ui.widget import Widget


class Label(Widget):

    def __init__(self, text: str = ""):
        super().__init__()
        self.text = text

    def __repr__(self) -> str:
        return f"Label(text={self.text!r})"
