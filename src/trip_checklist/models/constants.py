"""Enumerations and fixed values shared by the checklist model.

Enum values double as the persisted spellings, so renaming a member is a
snapshot format change.
"""

from enum import Enum


class TripStatus(str, Enum):
    """Packing status of a trip, derived from its item counts."""
    NEW = "new"
    IN_PROGRESS = "inProgress"
    READY = "ready"

    @property
    def display_name(self) -> str:
        return _STATUS_DISPLAY_NAMES[self]


_STATUS_DISPLAY_NAMES: dict[TripStatus, str] = {
    TripStatus.NEW: "New",
    TripStatus.IN_PROGRESS: "In progress",
    TripStatus.READY: "Ready",
}


class Importance(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Sort rank for item ordering: low < medium < high.
IMPORTANCE_RANK: dict[Importance, int] = {
    Importance.LOW: 0,
    Importance.MEDIUM: 1,
    Importance.HIGH: 2,
}


class Theme(str, Enum):
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


class AppLanguage(str, Enum):
    EN = "en"
    RU = "ru"
    ES = "es"


TEXT_SCALE_MIN = 0.9
TEXT_SCALE_MAX = 1.3

DEFAULT_TRIP_TITLE = "New trip"
DEFAULT_AVATAR = "luggage"

# Built-in categories: (name, icon). These can never be deleted.
SYSTEM_CATEGORY_SPECS: tuple[tuple[str, str], ...] = (
    ("Documents", "doc.text"),
    ("Clothes", "tshirt"),
    ("Hygiene", "sparkles"),
    ("Electronics", "bolt"),
)
