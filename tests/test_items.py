import pytest

from billsplit.services.items import (
    ScannedItem,
    ScanResult,
    apply_item_assignments,
    assigned_totals,
    drop_participant,
    expand_quantities,
    toggle_assignment,
)
from billsplit.services.split import BillDetails, Participant


ITEMS = [
    ScannedItem(id="pizza", name="Supreme Pizza", price=25.5),
    ScannedItem(id="bread", name="Garlic Bread", price=8.0),
    ScannedItem(id="coke", name="Coke (Large)", price=4.5),
    ScannedItem(id="wings", name="Chicken Wings", price=12.0),
]


def test_toggle_assignment_adds_and_removes():
    assignments = toggle_assignment({}, "pizza", "1")
    assignments = toggle_assignment(assignments, "pizza", "2")
    assert assignments == {"pizza": ["1", "2"]}

    assignments = toggle_assignment(assignments, "pizza", "1")
    assert assignments == {"pizza": ["2"]}

    assignments = toggle_assignment(assignments, "pizza", "2")
    assert assignments == {}


def test_toggle_assignment_returns_new_mapping():
    original = {"pizza": ["1"]}

    toggle_assignment(original, "pizza", "2")

    assert original == {"pizza": ["1"]}


def test_drop_participant_releases_items():
    assignments = {"pizza": ["1", "2"], "coke": ["2"], "wings": ["3"]}

    result = drop_participant(assignments, "2")

    assert result == {"pizza": ["1"], "wings": ["3"]}
    assert assignments["coke"] == ["2"]


def test_assigned_totals_split_shared_items():
    assignments = {"pizza": ["1", "2", "3"], "bread": ["1"], "wings": ["2", "3"]}

    totals = assigned_totals(ITEMS, assignments)

    assert totals["1"] == pytest.approx(8.5 + 8.0)
    assert totals["2"] == pytest.approx(8.5 + 6.0)
    assert totals["3"] == pytest.approx(8.5 + 6.0)
    assert sum(totals.values()) == pytest.approx(25.5 + 8.0 + 12.0)


def test_apply_item_assignments_falls_back_to_manual_amount():
    participants = [
        Participant(id="1", name="Mina", ordered_amount=3, paid_amount=50),
        Participant(id="2", name="Hossam", ordered_amount=7),
    ]

    updated = apply_item_assignments(participants, ITEMS, {"coke": ["1"]})

    assert updated == [
        Participant(id="1", name="Mina", ordered_amount=4.5, paid_amount=50),
        Participant(id="2", name="Hossam", ordered_amount=7),
    ]
    assert participants[0].ordered_amount == 3


def test_expand_quantities():
    items = [
        ScannedItem(id="burger", name="Burger", price=10.5, quantity=2),
        ScannedItem(id="fries", name="Fries", price=3.0),
    ]

    flat = expand_quantities(items)

    assert [item.id for item in flat] == ["burger-1", "burger-2", "fries"]
    assert all(item.quantity == 1 for item in flat)
    assert sum(item.price for item in flat) == pytest.approx(24.0)


def test_scan_result_bill_details():
    scan = ScanResult(items=ITEMS, subtotal=50.0, delivery=5.0, tax=4.5, service=3.0, total=62.5)

    assert scan.bill_details() == BillDetails(delivery=5.0, tax=4.5, service=3.0)
