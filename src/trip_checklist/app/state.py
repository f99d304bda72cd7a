"""In-memory application snapshot owned by the store."""

from dataclasses import dataclass, field

from trip_checklist.models.category import TripCategory, system_categories
from trip_checklist.models.settings import UserSettings
from trip_checklist.models.trip import Trip


@dataclass(slots=True)
class AppState:
    """Top-level state: trips, categories, and settings."""

    trips: list[Trip] = field(default_factory=list)
    categories: list[TripCategory] = field(default_factory=system_categories)
    settings: UserSettings = field(default_factory=UserSettings)
