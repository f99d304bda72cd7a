from datetime import date

from scripts.dump_trips import format_achievements, format_trip, main
from trip_checklist.app.achievement_tracker import AchievementTracker
from trip_checklist.app.bootstrap import bootstrap_session
from trip_checklist.app.config import AppConfig
from trip_checklist.models.category import TripCategory
from trip_checklist.models.constants import Importance
from trip_checklist.models.item import TripItem
from trip_checklist.models.trip import Trip


def _trip() -> Trip:
    docs = TripCategory(name="Documents", icon="doc.text")
    return Trip(
        title="Oslo",
        start_date=date(2025, 2, 1),
        end_date=date(2025, 2, 3),
        items=[
            TripItem(title="Passport", category=docs, importance=Importance.HIGH, is_checked=True,
                     weight_kg=0.1),
            TripItem(title="Tickets", category=docs, quantity=2, note="print both"),
        ],
    )


def test_format_trip_lists_grouped_items():
    text = format_trip(_trip())
    lines = text.splitlines()
    assert lines[0] == "Oslo [In progress] (2025-02-01 - 2025-02-03)"
    assert "Packed 1/2 (50%)" in lines[1]
    assert "  Documents (1/2)" in lines
    assert "    [ ] Tickets x2 (medium)" in lines
    assert "        note: print both" in lines
    assert lines.index("    [ ] Tickets x2 (medium)") < lines.index("    [x] Passport (high)")


def test_format_trip_only_remaining():
    text = format_trip(_trip(), only_remaining=True)
    assert "Passport" not in text
    assert "Tickets" in text


def test_format_achievements():
    text = format_achievements(AchievementTracker({1}))
    assert text.splitlines()[0] == "Collected 1 of 15 awards"
    assert "[*]  1. First Suitcase" in text


def test_format_achievements_lists_catalog_in_id_order():
    lines = format_achievements(AchievementTracker({13, 2})).splitlines()[1:]
    ids = [int(line.split("]")[1].split(".")[0]) for line in lines]
    assert ids == list(range(1, 16))
    assert lines[1].startswith("  [*]  2.")
    assert lines[12].startswith("  [*] 13.")
    assert lines[0].startswith("  [ ]  1.")


def test_main_prints_trips_and_history(tmp_path, capsys):
    session = bootstrap_session(AppConfig(data_dir=tmp_path))
    active = session.store.add_trip("Active trip")
    old = session.store.add_trip("Old trip")
    session.store.archive_trip(old.id)
    assert active.title == "Active trip"

    main(["--data-dir", str(tmp_path), "--achievements"])
    out = capsys.readouterr().out
    assert "Active trip [New]" in out
    assert "Old trip" not in out
    assert "Collected 1 of 15 awards" in out

    main(["--data-dir", str(tmp_path), "--history"])
    out = capsys.readouterr().out
    assert "Old trip [New]" in out
    assert "Active trip" not in out


def test_main_empty_data_dir(tmp_path, capsys):
    main(["--data-dir", str(tmp_path / "fresh")])
    assert "No trips yet" in capsys.readouterr().out
