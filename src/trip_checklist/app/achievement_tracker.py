"""Keeps the persisted set of unlocked achievements in step with the store."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from trip_checklist.app.store import TripStore
from trip_checklist.engine.achievements import evaluate_achievements
from trip_checklist.models.achievement import ACHIEVEMENTS, AchievementDefinition
from trip_checklist.models.trip import Trip
from trip_checklist.persistence.storage import AchievementStorage

logger = logging.getLogger(__name__)


class AchievementTracker:
    """Merges newly unlocked ids into a monotonically growing set.

    The set is saved only when it grows. ``on_unlock`` receives the ids
    unlocked by a single check, e.g. to show a "new badge" banner.
    """

    __slots__ = ("unlocked", "storage", "on_unlock")

    def __init__(
        self,
        unlocked: Iterable[int] = (),
        storage: AchievementStorage | None = None,
        on_unlock: Callable[[set[int]], None] | None = None,
    ) -> None:
        self.unlocked: set[int] = {int(aid) for aid in unlocked}
        self.storage = storage
        self.on_unlock = on_unlock

    def check(self, trips: Sequence[Trip]) -> set[int]:
        """Evaluate against ``trips`` and return the ids unlocked by this call."""
        new_ids = evaluate_achievements(trips, self.unlocked)
        if not new_ids:
            return new_ids
        self.unlocked |= new_ids
        logger.info("Unlocked achievement(s): %s", ", ".join(str(aid) for aid in sorted(new_ids)))
        if self.storage is not None:
            self.storage.save(self.unlocked)
        if self.on_unlock is not None:
            self.on_unlock(set(new_ids))
        return new_ids

    def attach(self, store: TripStore) -> Callable[[], None]:
        """Re-check after every store mutation. Returns the unsubscribe function."""
        return store.subscribe(lambda s: self.check(s.trips))

    # -- Queries ------------------------------------------------------------

    def is_unlocked(self, achievement_id: int) -> bool:
        return int(achievement_id) in self.unlocked

    def unlocked_definitions(self) -> list[AchievementDefinition]:
        return [a for a in ACHIEVEMENTS if a.id in self.unlocked]

    def locked_definitions(self) -> list[AchievementDefinition]:
        return [a for a in ACHIEVEMENTS if a.id not in self.unlocked]

    def progress(self) -> tuple[int, int]:
        """(unlocked, total) counted against the catalog."""
        return len(self.unlocked_definitions()), len(ACHIEVEMENTS)
