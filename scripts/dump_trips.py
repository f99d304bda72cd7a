"""Print the saved checklists, grouped by category, and achievement progress.

Usage:
    python -m scripts.dump_trips [--data-dir PATH] [--history] [--only-remaining]
                                 [--achievements] [--verbose]
"""

import argparse
import logging
from pathlib import Path

from trip_checklist.app.achievement_tracker import AchievementTracker
from trip_checklist.app.bootstrap import bootstrap_session
from trip_checklist.app.config import AppConfig
from trip_checklist.engine.grouping import group_trip
from trip_checklist.models.achievement import ACHIEVEMENTS
from trip_checklist.models.trip import Trip


def _format_dates(trip: Trip) -> str:
    if trip.start_date and trip.end_date:
        return f"{trip.start_date.isoformat()} - {trip.end_date.isoformat()}"
    if trip.start_date:
        return f"from {trip.start_date.isoformat()}"
    return ""


def format_trip(trip: Trip, only_remaining: bool = False) -> str:
    """Render one trip header plus its grouped items."""
    lines: list[str] = []
    dates = _format_dates(trip)
    header = f"{trip.title} [{trip.status.display_name}]"
    if dates:
        header = f"{header} ({dates})"
    lines.append(header)
    lines.append(
        f"  Packed {trip.completed_item_count}/{trip.total_item_count} ({trip.progress_percent}%)"
        f" | {trip.packed_weight_kg:.1f}/{trip.total_weight_kg:.1f} kg"
        f" | {trip.category_count} categories"
    )

    for category, items in group_trip(trip, only_remaining=only_remaining):
        done = sum(1 for item in items if item.is_checked)
        lines.append(f"  {category.name} ({done}/{len(items)})")
        for item in items:
            mark = "x" if item.is_checked else " "
            qty = f" x{item.quantity}" if item.quantity > 1 else ""
            lines.append(f"    [{mark}] {item.title}{qty} ({item.importance.value})")
            if item.has_note:
                lines.append(f"        note: {item.note}")
    return "\n".join(lines)


def format_achievements(tracker: AchievementTracker) -> str:
    unlocked, total = tracker.progress()
    lines = [f"Collected {unlocked} of {total} awards"]
    for definition in ACHIEVEMENTS:
        mark = "*" if tracker.is_unlocked(definition.id) else " "
        lines.append(f"  [{mark}] {definition.id:>2}. {definition.title} - {definition.description}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Dump saved trip checklists")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Directory holding app_state.json (default: ~/.trip_checklist)")
    parser.add_argument("--history", action="store_true",
                        help="Show archived trips instead of active ones")
    parser.add_argument("--only-remaining", action="store_true",
                        help="Hide items that are already packed")
    parser.add_argument("--achievements", action="store_true",
                        help="Also list achievement progress")
    parser.add_argument("--verbose", action="store_true",
                        help="Log storage activity to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.data_dir is not None and args.data_dir.exists() and not args.data_dir.is_dir():
        parser.error(f"--data-dir is not a directory: {args.data_dir}")

    config = AppConfig() if args.data_dir is None else AppConfig(data_dir=args.data_dir)
    session = bootstrap_session(config)
    store = session.store

    trips = store.archived_trips() if args.history else store.active_trips()
    if not trips:
        print("No history yet" if args.history else "No trips yet")
    for trip in trips:
        print(format_trip(trip, only_remaining=args.only_remaining))
        print()

    if args.achievements:
        print(format_achievements(session.tracker))


if __name__ == "__main__":
    main()
