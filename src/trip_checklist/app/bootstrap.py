"""Composition root: load persisted data and wire store and tracker together."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from trip_checklist.app.achievement_tracker import AchievementTracker
from trip_checklist.app.config import AppConfig
from trip_checklist.app.store import TripStore
from trip_checklist.persistence.storage import AchievementStorage, StateStorage

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ChecklistSession:
    """Loaded runtime objects shared by every consumer of the checklist."""

    config: AppConfig
    store: TripStore
    tracker: AchievementTracker


def bootstrap_session(config: AppConfig | None = None) -> ChecklistSession:
    """Load state and unlocked achievements, then run the startup evaluation."""
    cfg = config or AppConfig()
    logger.debug("State file: %s", cfg.state_path)
    logger.debug("Achievements file: %s", cfg.achievements_path)

    state_storage = StateStorage(cfg.state_path)
    achievement_storage = AchievementStorage(cfg.achievements_path)

    store = TripStore(state_storage.load(), storage=state_storage)
    tracker = AchievementTracker(achievement_storage.load(), storage=achievement_storage)
    tracker.attach(store)
    tracker.check(store.trips)
    return ChecklistSession(config=cfg, store=store, tracker=tracker)
