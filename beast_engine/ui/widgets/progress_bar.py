"""
Progress bar widget, used for health bars.
"""

from __future__ import annotations

from typing import Optional

from beast_engine.ui.widget import Widget


class ProgressBar(Widget):
    """
    A value out of a maximum.

    The maximum is never negative and the value always lies in
    [0, max_value]; out-of-range values are clamped on assignment.
    """

    def __init__(self, value: float = 0.0, max_value: float = 1.0):
        super().__init__()
        self._max_value = max(0.0, max_value)
        self._value = 0.0
        self.value = value

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, val: float) -> None:
        self._value = max(0.0, min(val, self._max_value))

    @property
    def max_value(self) -> float:
        return self._max_value

    def set_value(self, value: float, max_value: Optional[float] = None) -> 'ProgressBar':
        """Update the value, and the maximum first when one is given (fluent)."""
        if max_value is not None:
            self._max_value = max(0.0, max_value)
        self.value = value
        return self

    @property
    def text(self) -> str:
        """Whole-number "value/max" caption."""
        return f"{int(self._value)}/{int(self._max_value)}"
