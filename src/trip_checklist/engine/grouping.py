"""Item ordering and per-category grouping for checklist display."""

from collections.abc import Iterable

from trip_checklist.models.category import TripCategory
from trip_checklist.models.constants import IMPORTANCE_RANK
from trip_checklist.models.item import TripItem
from trip_checklist.models.trip import Trip


def _item_sort_key(item: TripItem) -> tuple[bool, int, str]:
    # Unchecked first, then importance rank ascending (low first), then title.
    return (item.is_checked, IMPORTANCE_RANK[item.importance], item.title.casefold())


def sort_items(items: Iterable[TripItem]) -> list[TripItem]:
    return sorted(items, key=_item_sort_key)


def group_items(
    items: Iterable[TripItem],
    only_remaining: bool = False,
) -> list[tuple[TripCategory, list[TripItem]]]:
    """Partition items by category id, ordered for display.

    Groups are ordered by category name (case-sensitive); each group is
    keyed by the category snapshot of its first item.
    """
    rows = [item for item in items if not (only_remaining and item.is_checked)]

    groups: dict[str, tuple[TripCategory, list[TripItem]]] = {}
    for item in sort_items(rows):
        entry = groups.get(item.category.id)
        if entry is None:
            entry = (item.category, [])
            groups[item.category.id] = entry
        entry[1].append(item)

    return sorted(groups.values(), key=lambda group: group[0].name)


def group_trip(trip: Trip, only_remaining: bool = False) -> list[tuple[TripCategory, list[TripItem]]]:
    return group_items(trip.items, only_remaining=only_remaining)
