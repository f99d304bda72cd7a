"""Single-file JSON persistence for app state and unlocked achievements.

Both snapshots are whole-file overwrites wrapped in a versioned envelope.
Loading never fails: a missing or unreadable file yields the default
value. Saving never raises: failures are logged and reported as ``False``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable

from trip_checklist.app.state import AppState
from trip_checklist.persistence.codec import state_from_dict, state_to_dict

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Everything a malformed snapshot can raise while being read or decoded.
_LOAD_ERRORS = (OSError, ValueError, TypeError, KeyError, AttributeError, RecursionError)
_SAVE_ERRORS = (OSError, ValueError, TypeError)


def _write_atomic(path: Path, payload: dict[str, Any]) -> None:
    """Replace ``path`` with ``payload`` as JSON; readers never see a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _read_envelope(path: Path) -> dict[str, Any]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    version = raw.get("version")
    if version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported snapshot version {version!r} in {path}")
    return raw


class StateStorage:
    """Loads and saves the primary ``{trips, categories, settings}`` snapshot."""

    __slots__ = ("path",)

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> AppState:
        if not self.path.exists():
            logger.debug("No state file at %s; starting empty", self.path)
            return AppState()
        try:
            return state_from_dict(_read_envelope(self.path)["state"])
        except _LOAD_ERRORS as exc:
            logger.warning("Could not load state from %s (%s); starting empty", self.path, exc)
            return AppState()

    def save(self, state: AppState) -> bool:
        try:
            _write_atomic(self.path, {"version": SCHEMA_VERSION, "state": state_to_dict(state)})
        except _SAVE_ERRORS as exc:
            logger.warning("Could not save state to %s: %s", self.path, exc)
            return False
        logger.debug("Saved %d trip(s) to %s", len(state.trips), self.path)
        return True


class AchievementStorage:
    """Loads and saves the set of unlocked achievement ids."""

    __slots__ = ("path",)

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> set[int]:
        if not self.path.exists():
            logger.debug("No achievements file at %s", self.path)
            return set()
        try:
            ids = _read_envelope(self.path)["unlocked_achievement_ids"]
            if not isinstance(ids, list):
                raise ValueError(f"unlocked_achievement_ids must be a list, got {type(ids).__name__}")
            return {int(aid) for aid in ids}
        except _LOAD_ERRORS as exc:
            logger.warning("Could not load achievements from %s (%s); starting empty", self.path, exc)
            return set()

    def save(self, unlocked: Iterable[int]) -> bool:
        payload = {
            "version": SCHEMA_VERSION,
            "unlocked_achievement_ids": sorted(int(aid) for aid in unlocked),
        }
        try:
            _write_atomic(self.path, payload)
        except _SAVE_ERRORS as exc:
            logger.warning("Could not save achievements to %s: %s", self.path, exc)
            return False
        return True
