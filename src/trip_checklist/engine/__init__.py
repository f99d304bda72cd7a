"""Pure evaluation and presentation helpers over trip state."""

from trip_checklist.engine.achievements import (
    completed_trips,
    count_items_with_notes,
    evaluate_achievements,
)
from trip_checklist.engine.grouping import group_items, group_trip, sort_items

__all__ = [
    "completed_trips",
    "count_items_with_notes",
    "evaluate_achievements",
    "group_items",
    "group_trip",
    "sort_items",
]
