"""Authoritative holder of trips, categories, and settings.

Every public mutation runs to completion, then (only if something actually
changed) saves the snapshot once and notifies subscribers once. Lookups
that miss are silent no-ops reported through the return value.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import replace
from datetime import date
from typing import Callable

from trip_checklist.app.state import AppState
from trip_checklist.models.category import TripCategory, new_id
from trip_checklist.models.constants import DEFAULT_TRIP_TITLE, TEXT_SCALE_MAX, TEXT_SCALE_MIN
from trip_checklist.models.item import TripItem
from trip_checklist.models.settings import UserSettings
from trip_checklist.models.trip import Trip
from trip_checklist.persistence.storage import StateStorage

logger = logging.getLogger(__name__)

Listener = Callable[["TripStore"], None]


class TripStore:
    """Owns an ``AppState`` and exposes its mutations.

    ``storage`` is optional so tests and previews can run purely in memory.
    """

    __slots__ = ("state", "storage", "_listeners")

    def __init__(self, state: AppState | None = None, storage: StateStorage | None = None) -> None:
        self.state = state if state is not None else AppState()
        self.storage = storage
        self._listeners: list[Listener] = []

    # -- Subscriptions ------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(store)`` after every effective mutation.

        Returns a function that removes the subscription.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, action: str) -> None:
        logger.debug("Store mutation: %s", action)
        if self.storage is not None:
            self.storage.save(self.state)
        for listener in list(self._listeners):
            listener(self)

    # -- Queries ------------------------------------------------------------

    @property
    def trips(self) -> list[Trip]:
        return self.state.trips

    @property
    def categories(self) -> list[TripCategory]:
        return self.state.categories

    @property
    def settings(self) -> UserSettings:
        return self.state.settings

    def get_trip(self, trip_id: str) -> Trip | None:
        for trip in self.state.trips:
            if trip.id == trip_id:
                return trip
        return None

    def get_category(self, category_id: str) -> TripCategory | None:
        for category in self.state.categories:
            if category.id == category_id:
                return category
        return None

    def active_trips(self) -> list[Trip]:
        return [t for t in self.state.trips if not t.is_archived]

    def archived_trips(self) -> list[Trip]:
        """Trips moved to history."""
        return [t for t in self.state.trips if t.is_archived]

    def snapshot(self) -> AppState:
        """Independent deep copy of the current state."""
        return copy.deepcopy(self.state)

    # -- Trip helpers -------------------------------------------------------

    def add_trip(
        self,
        title: str,
        icon: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> Trip:
        trip = Trip(
            title=title if title.strip() else DEFAULT_TRIP_TITLE,
            icon=icon,
            start_date=start_date,
            end_date=end_date,
        )
        self.state.trips.append(trip)
        self._commit(f"add trip {trip.id}")
        return trip

    def delete_trip(self, trip_id: str) -> bool:
        trip = self.get_trip(trip_id)
        if trip is None:
            return False
        self.state.trips.remove(trip)
        self._commit(f"delete trip {trip_id}")
        return True

    def archive_trip(self, trip_id: str) -> bool:
        return self._set_archived(trip_id, True)

    def restore_trip(self, trip_id: str) -> bool:
        """Move an archived trip back to the active list."""
        return self._set_archived(trip_id, False)

    def _set_archived(self, trip_id: str, archived: bool) -> bool:
        trip = self.get_trip(trip_id)
        if trip is None or trip.is_archived == archived:
            return False
        trip.is_archived = archived
        self._commit(f"{'archive' if archived else 'restore'} trip {trip_id}")
        return True

    def duplicate_trip(self, trip_id: str) -> Trip | None:
        """Append a copy of a trip with a fresh id, outside the archive."""
        source = self.get_trip(trip_id)
        if source is None:
            return None
        clone = replace(
            source,
            id=new_id(),
            is_archived=False,
            items=[replace(item) for item in source.items],
        )
        self.state.trips.append(clone)
        self._commit(f"duplicate trip {trip_id} -> {clone.id}")
        return clone

    def update_trip(self, trip_id: str, mutator: Callable[[Trip], None]) -> bool:
        """Apply ``mutator`` to a trip (title, dates, icon, ...)."""
        trip = self.get_trip(trip_id)
        if trip is None:
            return False
        mutator(trip)
        for item in trip.items:
            item.normalize()
        self._commit(f"update trip {trip_id}")
        return True

    # -- Item helpers -------------------------------------------------------

    def add_item(self, trip_id: str, item: TripItem) -> bool:
        trip = self.get_trip(trip_id)
        if trip is None:
            return False
        # The trip keeps its own copy of the item.
        owned = replace(item)
        owned.normalize()
        trip.items.append(owned)
        self._commit(f"add item {owned.id} to trip {trip_id}")
        return True

    def update_item(self, trip_id: str, item_id: str, mutator: Callable[[TripItem], None]) -> bool:
        trip = self.get_trip(trip_id)
        item = trip.find_item(item_id) if trip is not None else None
        if item is None:
            return False
        mutator(item)
        item.normalize()
        self._commit(f"update item {item_id} in trip {trip_id}")
        return True

    def set_item_checked(self, trip_id: str, item_id: str, checked: bool) -> bool:
        def apply(item: TripItem) -> None:
            item.is_checked = checked

        return self.update_item(trip_id, item_id, apply)

    def toggle_item(self, trip_id: str, item_id: str) -> bool:
        def apply(item: TripItem) -> None:
            item.is_checked = not item.is_checked

        return self.update_item(trip_id, item_id, apply)

    def remove_item(self, trip_id: str, item_id: str) -> bool:
        trip = self.get_trip(trip_id)
        item = trip.find_item(item_id) if trip is not None else None
        if item is None:
            return False
        trip.items.remove(item)
        self._commit(f"remove item {item_id} from trip {trip_id}")
        return True

    # -- Category helpers ---------------------------------------------------

    def add_category(self, category: TripCategory) -> bool:
        if self.get_category(category.id) is not None:
            return False
        self.state.categories.append(category)
        self._commit(f"add category {category.name!r}")
        return True

    def delete_category(self, category_id: str) -> bool:
        """Remove a custom category. Items keep their copy of it."""
        category = self.get_category(category_id)
        if category is None or category.is_system:
            return False
        self.state.categories.remove(category)
        self._commit(f"delete category {category.name!r}")
        return True

    # -- Settings helpers ---------------------------------------------------

    def update_settings(self, mutator: Callable[[UserSettings], None]) -> bool:
        settings = self.state.settings
        before = replace(settings)
        mutator(settings)
        settings.normalize()
        if settings == before:
            return False
        self._commit("update settings")
        return True

    # -- Invariants ---------------------------------------------------------

    def check_invariants(self) -> list[str]:
        """Describe every way the current state is inconsistent (empty if none)."""
        problems: list[str] = []
        trip_ids = [t.id for t in self.state.trips]
        if len(trip_ids) != len(set(trip_ids)):
            problems.append("duplicate trip ids")
        category_ids = [c.id for c in self.state.categories]
        if len(category_ids) != len(set(category_ids)):
            problems.append("duplicate category ids")
        for trip in self.state.trips:
            for item in trip.items:
                if item.quantity < 1:
                    problems.append(f"item {item.id} in trip {trip.id} has quantity {item.quantity}")
                if item.weight_kg is not None and item.weight_kg < 0:
                    problems.append(f"item {item.id} in trip {trip.id} has negative weight")
        scale = self.state.settings.text_scale
        if not TEXT_SCALE_MIN <= scale <= TEXT_SCALE_MAX:
            problems.append(f"text scale {scale} out of range")
        return problems
