"""Convert model objects to and from plain JSON-ready dicts.

Decoders raise ``KeyError``/``ValueError``/``TypeError`` on malformed
input; the storage layer turns those into a fallback to defaults.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from trip_checklist.app.state import AppState
from trip_checklist.models.category import TripCategory
from trip_checklist.models.constants import AppLanguage, Importance, Theme
from trip_checklist.models.item import TripItem
from trip_checklist.models.settings import UserSettings
from trip_checklist.models.trip import Trip


def _date_to_str(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _date_from_str(value: Any) -> date | None:
    if value is None:
        return None
    return date.fromisoformat(str(value))


def _optional_float(value: Any) -> float | None:
    return float(value) if value is not None else None


# --- Categories -------------------------------------------------------------

def category_to_dict(category: TripCategory) -> dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "is_system": bool(category.is_system),
        "icon": category.icon,
    }


def category_from_dict(data: dict[str, Any]) -> TripCategory:
    return TripCategory(
        id=str(data["id"]),
        name=str(data["name"]),
        is_system=bool(data.get("is_system", False)),
        icon=str(data.get("icon", "")),
    )


# --- Items ------------------------------------------------------------------

def item_to_dict(item: TripItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "title": item.title,
        "note": item.note,
        "category": category_to_dict(item.category),
        "importance": item.importance.value,
        "weight_kg": item.weight_kg,
        "quantity": int(item.quantity),
        "is_checked": bool(item.is_checked),
    }


def item_from_dict(data: dict[str, Any]) -> TripItem:
    return TripItem(
        id=str(data["id"]),
        title=str(data["title"]),
        note=data.get("note"),
        category=category_from_dict(data["category"]),
        importance=Importance(data.get("importance", Importance.MEDIUM.value)),
        weight_kg=_optional_float(data.get("weight_kg")),
        quantity=int(data.get("quantity", 1)),
        is_checked=bool(data.get("is_checked", False)),
    )


# --- Trips ------------------------------------------------------------------

def trip_to_dict(trip: Trip) -> dict[str, Any]:
    return {
        "id": trip.id,
        "title": trip.title,
        "start_date": _date_to_str(trip.start_date),
        "end_date": _date_to_str(trip.end_date),
        "items": [item_to_dict(item) for item in trip.items],
        "is_archived": bool(trip.is_archived),
        # Written for readers of the file; recomputed from items on load.
        "status": trip.status.value,
        "icon": trip.icon,
    }


def trip_from_dict(data: dict[str, Any]) -> Trip:
    return Trip(
        id=str(data["id"]),
        title=str(data["title"]),
        start_date=_date_from_str(data.get("start_date")),
        end_date=_date_from_str(data.get("end_date")),
        items=[item_from_dict(row) for row in data.get("items", [])],
        is_archived=bool(data.get("is_archived", False)),
        icon=data.get("icon"),
    )


# --- Settings ---------------------------------------------------------------

def settings_to_dict(settings: UserSettings) -> dict[str, Any]:
    return {
        "display_name": settings.display_name,
        "avatar": settings.avatar,
        "theme": settings.theme.value,
        "language": settings.language.value,
        "text_scale": float(settings.text_scale),
    }


def settings_from_dict(data: dict[str, Any]) -> UserSettings:
    defaults = UserSettings()
    return UserSettings(
        display_name=str(data.get("display_name", defaults.display_name)),
        avatar=str(data.get("avatar", defaults.avatar)),
        theme=Theme(data.get("theme", defaults.theme.value)),
        language=AppLanguage(data.get("language", defaults.language.value)),
        text_scale=float(data.get("text_scale", defaults.text_scale)),
    )


# --- Whole snapshot ---------------------------------------------------------

def state_to_dict(state: AppState) -> dict[str, Any]:
    return {
        "trips": [trip_to_dict(trip) for trip in state.trips],
        "categories": [category_to_dict(c) for c in state.categories],
        "settings": settings_to_dict(state.settings),
    }


def state_from_dict(data: dict[str, Any]) -> AppState:
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object for app state, got {type(data).__name__}")
    return AppState(
        trips=[trip_from_dict(row) for row in data["trips"]],
        categories=[category_from_dict(row) for row in data["categories"]],
        settings=settings_from_dict(data.get("settings") or {}),
    )
