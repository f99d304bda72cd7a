"""Tests for achievement tracking and session wiring."""

from trip_checklist.app.achievement_tracker import AchievementTracker
from trip_checklist.app.bootstrap import bootstrap_session
from trip_checklist.app.config import AppConfig
from trip_checklist.app.store import TripStore
from trip_checklist.models.item import TripItem
from trip_checklist.persistence.storage import AchievementStorage


def _session(tmp_path):
    return bootstrap_session(AppConfig(data_dir=tmp_path))


def test_config_paths(tmp_path):
    cfg = AppConfig(data_dir=tmp_path)
    assert cfg.state_path == tmp_path / "app_state.json"
    assert cfg.achievements_path == tmp_path / "unlocked_achievements.json"


def test_first_trip_unlocks_first_suitcase(tmp_path):
    session = _session(tmp_path)
    assert session.tracker.unlocked == set()

    session.store.add_trip("Paris", "airplane")
    assert session.tracker.unlocked == {1}
    assert AchievementStorage(session.config.achievements_path).load() == {1}


def test_packing_small_trip_unlocks_badges(tmp_path):
    session = _session(tmp_path)
    store = session.store
    trip = store.add_trip("Paris", "airplane")
    clothes = store.categories[1]
    items = [TripItem(title=f"Item {i}", category=clothes) for i in range(4)]
    for item in items:
        store.add_item(trip.id, item)
    assert session.tracker.unlocked == {1, 3}

    for item in items:
        store.toggle_item(trip.id, item.id)
    assert {1, 2, 3, 5} <= session.tracker.unlocked
    assert session.tracker.unlocked.isdisjoint({9, 10, 11, 12})


def test_unlocks_survive_deleting_trips(tmp_path):
    session = _session(tmp_path)
    trip = session.store.add_trip("Paris")
    session.store.delete_trip(trip.id)
    assert session.tracker.is_unlocked(1)

    reloaded = _session(tmp_path)
    assert reloaded.store.trips == []
    assert reloaded.tracker.is_unlocked(1)


def test_state_persists_between_sessions(tmp_path):
    session = _session(tmp_path)
    trip = session.store.add_trip("Paris")
    session.store.archive_trip(trip.id)

    reloaded = _session(tmp_path)
    assert [t.title for t in reloaded.store.archived_trips()] == ["Paris"]


def test_startup_evaluation_catches_up(tmp_path):
    session = _session(tmp_path)
    session.store.add_trip("Paris")
    # Simulate a lost achievements file.
    session.config.achievements_path.unlink()

    reloaded = _session(tmp_path)
    assert reloaded.tracker.unlocked == {1}


def test_tracker_notifies_only_new_ids():
    store = TripStore()
    seen = []
    tracker = AchievementTracker(on_unlock=seen.append)
    tracker.attach(store)
    store.add_trip("A")
    store.add_trip("B")
    assert seen == [{1}]


def test_tracker_progress_and_definitions():
    tracker = AchievementTracker({1, 13})
    assert tracker.progress() == (2, 15)
    assert [a.id for a in tracker.unlocked_definitions()] == [1, 13]
    assert len(tracker.locked_definitions()) == 13
    assert tracker.check([]) == set()
