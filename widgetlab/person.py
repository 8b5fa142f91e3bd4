"""Randomly generated people, rendered inline or as components."""

from __future__ import annotations

import html
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .randomness import chance, range_exclusive

_FIRST_NAMES = (
    "Alice", "Bruno", "Carla", "Dmitri", "Elena", "Farid", "Greta", "Hugo",
    "Ines", "Jonas", "Keiko", "Liam", "Maya", "Nils", "Olga", "Pablo",
    "Quinn", "Rosa", "Stefan", "Tara", "Umar", "Vera", "Wendell", "Yara", "Zane",
)
_LAST_NAMES = (
    "Abbott", "Becker", "Castillo", "Dunn", "Ellison", "Fischer", "Garner",
    "Holloway", "Ibarra", "Jensen", "Keller", "Lindqvist", "Morrow", "Novak",
    "Ortega", "Pruitt", "Quimby", "Rasmussen", "Sloane", "Thorne", "Underwood",
    "Vance", "Whitaker", "Young", "Zeller",
)
_STREET_NAMES = (
    "Maple", "Oak", "Cedar", "Willow", "Birch", "Elm", "Pine", "Chestnut",
    "Juniper", "Hawthorn", "Meadow", "Ridge", "Lake", "River", "Sunset", "Harbor",
)
_CITY_NAMES = (
    "Brookfield", "Clearwater", "Fairview", "Glenwood", "Harrisville", "Kingsport",
    "Lakeside", "Milford", "Northgate", "Oakdale", "Riverton", "Springdale",
    "Westbury", "Ashland", "Bellmont", "Cedarville",
)
_STATE_ABBRS = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA", "HI", "ID", "IL",
    "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO", "MT",
    "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI",
    "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
)


@dataclass(frozen=True)
class PersonInfo:
    """Identity and contact details of a person."""

    id: int
    name: str
    address: str
    age: int

    @classmethod
    def new_random(cls, person_id: int, rng: Optional[random.Random] = None) -> "PersonInfo":
        rng = rng if rng is not None else random.Random()
        number = range_exclusive(1, 300, rng)
        state = rng.choice(_STATE_ABBRS)
        city = rng.choice(_CITY_NAMES)
        street = rng.choice(_STREET_NAMES)
        address = f"{number} {street} St., {city}, {state}"
        name = f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}"
        age = range_exclusive(7, 77, rng)
        return cls(id=person_id, name=name, address=address, age=age)

    def render(self) -> str:
        """Render the person as an HTML card."""
        title = html.escape(f"{self.id} - {self.name}")
        return (
            '<div class="card w-50 card_style">'
            '<div class="card-body">'
            f'<h5 class="card-title">{title}</h5>'
            f'<p class="card-text">Age: {self.age}</p>'
            f'<p class="card-text">Address: {html.escape(self.address)}</p>'
            "</div></div>"
        )


class PersonKind(Enum):
    INLINE = "inline"
    COMPONENT = "component"


@dataclass
class Person:
    """A person shown either as an inline element or through a component."""

    kind: PersonKind
    info: PersonInfo

    @classmethod
    def new_random(
        cls, person_id: int, ratio: float, rng: Optional[random.Random] = None
    ) -> "Person":
        """Create a random person; ``ratio`` is the chance of an inline one."""
        rng = rng if rng is not None else random.Random()
        info = PersonInfo.new_random(person_id, rng)
        kind = PersonKind.INLINE if chance(ratio, rng) else PersonKind.COMPONENT
        return cls(kind=kind, info=info)

    def render(self, keyed: bool) -> str:
        """Render as HTML; keyed output carries a ``data-key`` attribute."""
        ident = html.escape(str(self.info.id), quote=True)
        key = f' data-key="{ident}"' if keyed else ""
        css = "text-danger" if self.kind is PersonKind.INLINE else "text-info"
        return f'<div{key} class="{css}" id="{ident}">{self.info.render()}</div>'