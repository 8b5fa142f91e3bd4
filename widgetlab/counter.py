"""A counter with increment and decrement buttons."""

from __future__ import annotations

import html
import logging
from datetime import datetime
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Counter:
    """Counter state; actions return whether a re-render is needed."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.value = 0
        self._clock = clock if clock is not None else datetime.now

    def increment(self) -> bool:
        self.value += 1
        logger.info("plus one")
        return True

    def decrement(self) -> bool:
        self.value -= 1
        logger.info("minus one")
        return True

    def increment_twice(self) -> bool:
        """Apply two increments as one batch."""
        first = self.increment()
        second = self.increment()
        return first or second

    def view(self) -> str:
        """Render the buttons, the value and the time of rendering."""
        rendered = self._clock().strftime("%a %b %d %Y %H:%M:%S")
        return (
            "<div>"
            '<div class="panel">'
            '<button class="button">+1</button>'
            "<button>-1</button>"
            "<button>+1, +1</button>"
            "</div>"
            f'<p class="counter">{self.value}</p>'
            f'<p class="footer">Rendered: {html.escape(rendered)}</p>'
            "</div>"
        )