"""Item categories (system-defined and user-defined)."""

import uuid
from dataclasses import dataclass, field

from trip_checklist.models.constants import SYSTEM_CATEGORY_SPECS


def new_id() -> str:
    """Return a fresh opaque identifier for a trip, item, or category."""
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True, eq=False)
class TripCategory:
    """A named grouping tag for items.

    Categories are immutable values. An item stores the category it was
    added with, so renaming or deleting a category later does not touch
    items that already carry it. Identity (equality, hashing) is ``id``.
    """
    name: str
    icon: str
    is_system: bool = False
    id: str = field(default_factory=new_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TripCategory):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def system_categories() -> list[TripCategory]:
    """Build the four built-in categories (Documents, Clothes, Hygiene, Electronics)."""
    return [
        TripCategory(name=name, icon=icon, is_system=True)
        for name, icon in SYSTEM_CATEGORY_SPECS
    ]
