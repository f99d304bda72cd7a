"""Trip data model.

A trip is a packing checklist for one journey. Everything that can be
derived from its items (counts, weights, status) is computed on access
rather than stored, so it cannot drift out of sync with ``items``.
"""

from dataclasses import dataclass, field
from datetime import date

from trip_checklist.models.category import new_id
from trip_checklist.models.constants import TripStatus
from trip_checklist.models.item import TripItem


@dataclass(slots=True)
class Trip:
    """A packing checklist for one journey."""

    title: str
    start_date: date | None = None
    end_date: date | None = None
    items: list[TripItem] = field(default_factory=list)
    is_archived: bool = False
    icon: str | None = None
    id: str = field(default_factory=new_id)

    # -- Derived counts -----------------------------------------------------

    @property
    def completed_item_count(self) -> int:
        return sum(1 for item in self.items if item.is_checked)

    @property
    def total_item_count(self) -> int:
        return len(self.items)

    @property
    def total_weight_kg(self) -> float:
        return sum(item.line_weight_kg for item in self.items)

    @property
    def packed_weight_kg(self) -> float:
        return sum(item.line_weight_kg for item in self.items if item.is_checked)

    @property
    def category_count(self) -> int:
        return len({item.category.id for item in self.items})

    @property
    def progress_percent(self) -> int:
        return int(self.completed_item_count / max(self.total_item_count, 1) * 100)

    # -- Status -------------------------------------------------------------

    @property
    def status(self) -> TripStatus:
        """READY when every item is checked, IN_PROGRESS when some are."""
        total = self.total_item_count
        completed = self.completed_item_count
        if total > 0 and completed == total:
            return TripStatus.READY
        if completed > 0:
            return TripStatus.IN_PROGRESS
        return TripStatus.NEW

    @property
    def is_completed(self) -> bool:
        return self.status is TripStatus.READY

    def find_item(self, item_id: str) -> TripItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None
