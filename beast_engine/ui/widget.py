"""
Widget base class.

Widgets carry display state only. A host renderer reads `visible`,
`focused` and the leaf widgets' text and values and draws them however it
likes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from beast_engine.ui.container import Container


class Widget:
    """A node in the widget tree that may take focus and confirm input."""

    focusable = False

    def __init__(self):
        self.visible: bool = True
        self.focused: bool = False
        self.parent: Optional[Container] = None

    def set_visible(self, visible: bool) -> 'Widget':
        """Show or hide the widget (fluent). Hidden widgets drop focus."""
        self.visible = visible
        if not visible:
            self.unfocus()
        return self

    def focus(self) -> bool:
        """Take focus if this widget can hold it."""
        if not (self.focusable and self.visible):
            return False
        self.focused = True
        return True

    def unfocus(self) -> None:
        self.focused = False

    def navigate(self, step: int) -> bool:
        """Move focus by `step` rows. True if anything moved."""
        return False

    def on_confirm(self) -> bool:
        """Activate the widget. True if it reacted."""
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
