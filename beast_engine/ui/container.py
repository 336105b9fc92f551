"""
Container widget: an ordered list of children with a focus cursor.

The battle menu renders its buttons into one and rebuilds it wholesale on
every menu change; beast displays use one to group a name tag with a bar.
"""

from __future__ import annotations

from typing import List, Optional

from beast_engine.ui.widget import Widget


class Container(Widget):
    """
    Holds child widgets top to bottom.

    Focus moves over the visible focusable children only and stops at
    either end.
    """

    focusable = True

    def __init__(self):
        super().__init__()
        self.children: List[Widget] = []
        self._cursor: int = 0

    def add_child(self, widget: Widget) -> 'Container':
        widget.parent = self
        self.children.append(widget)
        return self

    def add_children(self, *widgets: Widget) -> 'Container':
        for widget in widgets:
            self.add_child(widget)
        return self

    def clear_children(self) -> None:
        """Detach every child. Safe to call on an empty container."""
        for child in self.children:
            child.unfocus()
            child.parent = None
        self.children.clear()
        self._cursor = 0

    def child_count(self) -> int:
        return len(self.children)

    @property
    def focusable_children(self) -> List[Widget]:
        return [c for c in self.children if c.focusable and c.visible]

    @property
    def focused_child(self) -> Optional[Widget]:
        candidates = self.focusable_children
        if 0 <= self._cursor < len(candidates):
            return candidates[self._cursor]
        return None

    def focus_first(self) -> bool:
        """Put the cursor on the first focusable child."""
        current = self.focused_child
        if current:
            current.unfocus()
        self._cursor = 0
        first = self.focused_child
        return first.focus() if first else False

    def navigate(self, step: int) -> bool:
        # Nested containers get the first chance to move
        current = self.focused_child
        if current and current.navigate(step):
            return True

        target = self._cursor + step
        candidates = self.focusable_children
        if step == 0 or not 0 <= target < len(candidates):
            return False

        if current:
            current.unfocus()
        self._cursor = target
        return candidates[target].focus()

    def on_confirm(self) -> bool:
        """Confirm the focused child."""
        current = self.focused_child
        return current.on_confirm() if current else False
