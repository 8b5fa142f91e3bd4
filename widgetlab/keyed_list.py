"""A list of people that can be grown, shrunk, shuffled and sorted."""

from __future__ import annotations

import logging
import random
import time
from typing import List, Optional

from .person import Person
from .randomness import swap_two_distinct

logger = logging.getLogger(__name__)

_DEFAULT_RATIO = 0.5

_CREATE_BUTTONS = (
    ("create", 1, "Create 1"),
    ("create", 5, "Create 5"),
    ("create", 100, "Create 100"),
    ("create", 500, "Create 500"),
    ("prepend", 1, "Prepend 1"),
    ("prepend", 5, "Prepend 5"),
)
_INFO_BUTTONS = (
    "Swap random",
    "Reverse list",
    "Sort by id",
    "Sort by name",
    "Sort by age",
    "Sort by address",
)


def _parse_ratio(text: str) -> float:
    if text != text.strip() or "_" in text:
        return _DEFAULT_RATIO
    try:
        return float(text)
    except ValueError:
        return _DEFAULT_RATIO


def _format_number(value: float) -> str:
    if value == value and value not in (float("inf"), float("-inf")) and value.is_integer():
        return str(int(value))
    return repr(value)


class KeyedList:
    """State of the keyed list; actions return whether a re-render is needed."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.persons: List[Person] = []
        self.last_id = 0
        self.keyed = True
        self.build_component_ratio = _DEFAULT_RATIO
        self.last_render_ms: Optional[int] = None

    def _new_person(self) -> Person:
        self.last_id += 1
        return Person.new_random(self.last_id, self.build_component_ratio, self._rng)

    def create_persons(self, n: int) -> bool:
        self.persons.extend(self._new_person() for _ in range(n))
        return True

    def create_persons_prepend(self, n: int) -> bool:
        for _ in range(n):
            self.persons.insert(0, self._new_person())
        return True

    def change_ratio(self, text: str) -> bool:
        """Set the inline/component ratio from text, falling back to 0.5."""
        ratio = _parse_ratio(text)
        if self.build_component_ratio != ratio:
            self.build_component_ratio = ratio
            logger.info("Ratio changed: %s", ratio)
            return True
        return False

    def delete_person_by_id(self, person_id: int) -> bool:
        for idx, person in enumerate(self.persons):
            if person.info.id == person_id:
                del self.persons[idx]
                return True
        return False

    def delete_everybody(self) -> bool:
        self.persons.clear()
        return True

    def swap_random(self) -> bool:
        """Swap two distinct random persons; needs at least two."""
        chosen = swap_two_distinct(self.persons, self._rng)
        if chosen is None:
            raise ValueError("need at least two persons to swap")
        lo, hi = chosen
        logger.info("Swapping %s and %s.", self.persons[hi].info.id, self.persons[lo].info.id)
        return True

    def reverse_list(self) -> bool:
        self.persons.reverse()
        return True

    def sort_by_id(self) -> bool:
        self.persons.sort(key=lambda p: p.info.id)
        return True

    def sort_by_name(self) -> bool:
        self.persons.sort(key=lambda p: p.info.name)
        return True

    def sort_by_age(self) -> bool:
        self.persons.sort(key=lambda p: p.info.age)
        return True

    def sort_by_address(self) -> bool:
        self.persons.sort(key=lambda p: p.info.address)
        return True

    def toggle_keyed(self) -> bool:
        self.keyed = not self.keyed
        return True

    def ids_text(self) -> str:
        """Space-separated ids, or a marker when there are twenty or more."""
        if len(self.persons) < 20:
            return " ".join(str(p.info.id) for p in self.persons)
        return "<too many>"

    def _button_view(self) -> str:
        create = "".join(
            f'<div class="col"><button class="btn_size alert alert-success">{label}</button></div>'
            for _, _, label in _CREATE_BUTTONS
        )
        keyed_label = "Disable keys" if self.keyed else "Enable keys"
        info = "".join(
            f'<div class="col"><button class="btn_size alert alert-info">{label}</button></div>'
            for label in _INFO_BUTTONS
        )
        return (
            '<div class="row">'
            '<div class="col"><button class="btn_size alert alert-danger">'
            "Delete everybody</button></div>"
            f"{create}</div>"
            '<div class="row">'
            '<div class="col"><button class="btn_size alert alert-warning">'
            f"{keyed_label}</button></div>"
            f"{info}</div>"
        )

    def _action_view(self) -> str:
        ratio = _format_number(self.build_component_ratio)
        return (
            self._button_view()
            + '<div class="row"><div class="col">'
            '<p class="h5">Person type ratio (0=only tags &lt;= ratio &lt;= 1=only components): '
            f"{ratio}</p>"
            '<input name="ratio" type="range" class="form-control-range" '
            f'min="0.0" max="1.0" step="any" value="{ratio}"/>'
            "</div></div>"
        )

    def _info_view(self) -> str:
        ids = self.ids_text().replace("<", "&lt;").replace(">", "&gt;")
        persons = "".join(p.render(self.keyed) for p in self.persons)
        return (
            "<div>"
            f'<p class="h5">Number of persons: {len(self.persons)}</p>'
            f'<p class="h5">Ids: {ids}</p>'
            "<hr/>"
            f'<div class="persons">{persons}</div>'
            "</div>"
        )

    def view(self) -> str:
        """Render the page; the time it takes is shown on the next render."""
        started = time.perf_counter()
        delta = (
            f"The last rendering took {self.last_render_ms} ms"
            if self.last_render_ms is not None
            else ""
        )
        page = (
            '<div class="container">'
            f'<div class="row"><p class="h2">{delta}</p><hr/></div>'
            f"{self._action_view()}{self._info_view()}"
            "</div>"
        )
        self.last_render_ms = int((time.perf_counter() - started) * 1000)
        logger.info("Rendering took %s ms.", self.last_render_ms)
        return page