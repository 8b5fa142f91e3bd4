"""A labelled range slider that reports numeric changes."""

from __future__ import annotations

import html
import itertools
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Optional

_slider_ids = itertools.count()


def next_slider_id() -> int:
    """Return a fresh slider id; ids start at zero and increase by one."""
    return next(_slider_ids)


def _format_number(value: float) -> str:
    """Format a float the way a plain decimal attribute value is written."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


@dataclass
class Slider:
    """Range input with a label and a formatted value display."""

    label: str
    value: float
    onchange: Callable[[float], object]
    max: float
    min: float = 0.0
    precision: Optional[int] = None
    percentage: bool = False
    step: Optional[float] = None
    id: int = field(default_factory=next_slider_id, init=False, compare=False)

    def _precision(self) -> int:
        if self.precision is not None:
            return self.precision
        return 1 if self.percentage else 0

    def display_value(self) -> str:
        """The value as shown next to the slider."""
        p = self._precision()
        if self.percentage:
            return f"{100.0 * self.value:.{p}f}%"
        return f"{self.value:.{p}f}"

    def effective_step(self) -> float:
        """The explicit step, or one derived from the display precision."""
        if self.step is not None:
            return self.step
        p = self._precision()
        if self.percentage:
            p += 2
        return 10.0 ** -p

    def _on_input(self, text: str) -> object:
        return self.onchange(float(text))

    def view(self) -> str:
        """Render the slider as HTML."""
        element_id = f"slider-{self.id}"
        return (
            '<div class="slider">'
            f'<label for="{element_id}" class="slider__label">{html.escape(self.label)}</label>'
            f'<input type="range" id="{element_id}" class="slider__input" '
            f'min="{_format_number(self.min)}" max="{_format_number(self.max)}" '
            f'step="{_format_number(self.effective_step())}" '
            f'value="{_format_number(self.value)}"/>'
            f'<span class="slider__value">{html.escape(self.display_value())}</span>'
            "</div>"
        )