"""Achievement evaluation over accumulated trip state.

``evaluate_achievements`` is pure: it scans the trips, compares against
the ids that are already unlocked, and returns only the new ones. Saving
the merged set is the caller's job (see ``AchievementTracker``).

Archived trips count towards every rule.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from trip_checklist.models.trip import Trip


@dataclass(frozen=True, slots=True)
class TripAggregates:
    """Totals every rule is evaluated against."""
    trip_count: int
    completed_trip_count: int
    noted_item_count: int
    has_completed_trip: bool
    has_light_trip: bool   # some trip with 1-4 items
    has_heavy_trip: bool   # some trip with more than 30 items


def completed_trips(trips: Iterable[Trip]) -> list[Trip]:
    """Trips where every item is checked (and there is at least one item)."""
    return [t for t in trips if t.total_item_count > 0 and t.completed_item_count == t.total_item_count]


def count_items_with_notes(trips: Iterable[Trip]) -> int:
    return sum(1 for trip in trips for item in trip.items if item.has_note)


def aggregate(trips: Sequence[Trip]) -> TripAggregates:
    completed = completed_trips(trips)
    return TripAggregates(
        trip_count=len(trips),
        completed_trip_count=len(completed),
        noted_item_count=count_items_with_notes(trips),
        has_completed_trip=bool(completed),
        has_light_trip=any(0 < t.total_item_count < 5 for t in trips),
        has_heavy_trip=any(t.total_item_count > 30 for t in trips),
    )


# Evaluated in this order. Ids 9-12 exist in the catalog but have no rule.
RULES: tuple[tuple[int, Callable[[TripAggregates], bool]], ...] = (
    (1, lambda a: a.trip_count >= 1),
    (2, lambda a: a.has_completed_trip),
    (3, lambda a: a.has_light_trip),
    (4, lambda a: a.has_heavy_trip),
    (5, lambda a: a.completed_trip_count >= 1),
    (6, lambda a: a.completed_trip_count >= 5),
    (7, lambda a: a.completed_trip_count >= 10),
    (8, lambda a: a.noted_item_count >= 10),
    (13, lambda a: a.noted_item_count >= 1),
    (14, lambda a: a.trip_count >= 20),
    (15, lambda a: a.completed_trip_count >= 50),
)

RULED_ACHIEVEMENT_IDS = frozenset(aid for aid, _rule in RULES)


def evaluate_achievements(
    trips: Sequence[Trip],
    previously_unlocked: Iterable[int] = (),
) -> set[int]:
    """Return ids whose condition holds now and that were not unlocked before."""
    if not trips:
        return set()
    already = {int(aid) for aid in previously_unlocked}
    totals = aggregate(trips)
    return {aid for aid, rule in RULES if aid not in already and rule(totals)}
