from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping, Sequence

from billsplit.services.split import BillDetails, Participant

# item id -> ids of the participants sharing it
Assignments = dict[str, list[str]]


@dataclass(slots=True)
class ScannedItem:
    id: str
    name: str
    price: float
    quantity: int = 1


@dataclass(slots=True)
class ScanResult:
    items: list[ScannedItem] = field(default_factory=list)
    subtotal: float = 0.0
    delivery: float = 0.0
    tax: float = 0.0
    service: float = 0.0
    total: float = 0.0

    def bill_details(self) -> BillDetails:
        return BillDetails(delivery=self.delivery, tax=self.tax, service=self.service)


def expand_quantities(items: Iterable[ScannedItem]) -> list[ScannedItem]:
    """Flatten items so that each entry stands for exactly one unit.

    ``price`` is the unit price. Copies of a multi-unit item get ``-1``,
    ``-2``... appended to the id so each can be assigned separately.
    """
    flat: list[ScannedItem] = []
    for item in items:
        if item.quantity <= 1:
            flat.append(replace(item, quantity=1))
            continue
        for n in range(1, item.quantity + 1):
            flat.append(ScannedItem(id=f"{item.id}-{n}", name=item.name, price=item.price, quantity=1))
    return flat


def toggle_assignment(assignments: Mapping[str, Sequence[str]], item_id: str, participant_id: str) -> Assignments:
    result: Assignments = {key: list(value) for key, value in assignments.items()}
    current = result.get(item_id, [])

    if participant_id in current:
        current = [pid for pid in current if pid != participant_id]
    else:
        current = [*current, participant_id]

    if current:
        result[item_id] = current
    else:
        result.pop(item_id, None)
    return result


def drop_participant(assignments: Mapping[str, Sequence[str]], participant_id: str) -> Assignments:
    result: Assignments = {}
    for item_id, assignees in assignments.items():
        remaining = [pid for pid in assignees if pid != participant_id]
        if remaining:
            result[item_id] = remaining
    return result


def assigned_totals(items: Iterable[ScannedItem], assignments: Mapping[str, Sequence[str]]) -> dict[str, float]:
    totals: dict[str, float] = {}
    for item in items:
        assignees = assignments.get(item.id) or []
        if not assignees:
            continue
        portion = item.price / len(assignees)
        for participant_id in assignees:
            totals[participant_id] = totals.get(participant_id, 0.0) + portion
    return totals


def apply_item_assignments(
    participants: Iterable[Participant],
    items: Iterable[ScannedItem],
    assignments: Mapping[str, Sequence[str]],
) -> list[Participant]:
    """Return copies of ``participants`` with ordered amounts taken from assigned items.

    Participants without any assigned items keep the amount they entered by hand.
    """
    totals = assigned_totals(items, assignments)
    updated: list[Participant] = []
    for p in participants:
        shared_total = totals.get(p.id, 0.0)
        ordered = shared_total if shared_total > 0 else p.ordered_amount
        updated.append(Participant(id=p.id, name=p.name, ordered_amount=ordered, paid_amount=p.paid_amount))
    return updated
