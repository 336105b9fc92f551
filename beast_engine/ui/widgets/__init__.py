"""Leaf widgets."""

from beast_engine.ui.widgets.button import Button
from beast_engine.ui.widgets.label import Label
from beast_engine.ui.widgets.progress_bar import ProgressBar

__all__ = [
    "Button",
    "Label",
    "ProgressBar",
]
