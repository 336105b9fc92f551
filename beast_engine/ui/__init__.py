"""
UI module.

Widget tree for menus and status displays:
- Widget: base class (focus, confirm, visibility)
- Container: child management and focus navigation
- Button, Label, ProgressBar: leaf widgets
"""

from beast_engine.ui.widget import Widget
from beast_engine.ui.container import Container
from beast_engine.ui.widgets import Button, Label, ProgressBar

__all__ = [
    "Widget",
    "Container",
    "Button",
    "Label",
    "ProgressBar",
]
