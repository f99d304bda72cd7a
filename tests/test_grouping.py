"""Tests for checklist item ordering and category grouping."""

from trip_checklist.engine.grouping import group_items, group_trip, sort_items
from trip_checklist.models.category import TripCategory
from trip_checklist.models.constants import Importance
from trip_checklist.models.item import TripItem
from trip_checklist.models.trip import Trip


CLOTHES = TripCategory(name="Clothes", icon="tshirt", id="clothes")
DOCS = TripCategory(name="Documents", icon="doc.text", id="docs")
GEAR = TripCategory(name="gear", icon="bag", id="gear")


def _item(title, importance=Importance.MEDIUM, checked=False, category=CLOTHES):
    return TripItem(title=title, category=category, importance=importance, is_checked=checked)


def _titles(groups):
    return [[item.title for item in items] for _cat, items in groups]


def test_only_remaining_drops_checked_and_orders_low_first():
    items = [
        _item("B", Importance.HIGH),
        _item("A", Importance.LOW),
        _item("C", Importance.MEDIUM, checked=True),
    ]
    groups = group_items(items, only_remaining=True)
    assert _titles(groups) == [["A", "B"]]


def test_checked_items_sort_after_unchecked():
    items = [
        _item("C", Importance.LOW, checked=True),
        _item("B", Importance.HIGH),
        _item("A", Importance.MEDIUM),
    ]
    assert [i.title for i in sort_items(items)] == ["A", "B", "C"]
    assert _titles(group_items(items)) == [["A", "B", "C"]]


def test_titles_compare_case_insensitively():
    items = [_item("banana"), _item("Apple"), _item("cherry")]
    assert [i.title for i in sort_items(items)] == ["Apple", "banana", "cherry"]


def test_groups_sorted_by_case_sensitive_category_name():
    items = [
        _item("Charger", category=GEAR),
        _item("Passport", category=DOCS),
        _item("Socks", category=CLOTHES),
    ]
    groups = group_items(items)
    # Uppercase names sort before lowercase ones.
    assert [cat.name for cat, _items in groups] == ["Clothes", "Documents", "gear"]


def test_grouping_uses_category_identity():
    renamed = TripCategory(name="Clothing", icon="tshirt", id="clothes")
    items = [_item("Shirt"), _item("Pants", category=renamed)]
    groups = group_items(items)
    assert len(groups) == 1
    assert {i.title for i in groups[0][1]} == {"Shirt", "Pants"}


def test_grouping_is_deterministic():
    items = [
        _item("Zip", Importance.HIGH, category=DOCS),
        _item("alpha", Importance.LOW, category=GEAR),
        _item("Beta", Importance.LOW, category=CLOTHES, checked=True),
        _item("beta", Importance.LOW, category=CLOTHES),
    ]
    first = group_items(items)
    second = group_items(list(reversed(items)))
    assert [c.id for c, _ in first] == [c.id for c, _ in second]
    assert _titles(first) == _titles(second)


def test_group_trip_and_empty_input():
    trip = Trip(title="Empty")
    assert group_trip(trip) == []
    trip.items.append(_item("Hat", checked=True))
    assert group_trip(trip, only_remaining=True) == []
    assert len(group_trip(trip)) == 1
