from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(slots=True)
class Participant:
    id: str
    name: str
    ordered_amount: float = 0.0
    paid_amount: float = 0.0


@dataclass(slots=True)
class BillDetails:
    delivery: float = 0.0
    tax: float = 0.0
    service: float = 0.0

    @property
    def total_fees(self) -> float:
        return self.delivery + self.tax + self.service


@dataclass(slots=True)
class ParticipantResult(Participant):
    subtotal_share: float = 0.0
    tax_share: float = 0.0
    service_share: float = 0.0
    delivery_share: float = 0.0
    total_owed: float = 0.0
    # paid_amount - total_owed; positive means the participant is owed money
    net_balance: float = 0.0


def share_ratio(ordered_amount: float, total_ordered: float) -> float:
    if total_ordered > 0:
        return ordered_amount / total_ordered
    return 0.0


def calculate_splits(participants: Sequence[Participant], bill: BillDetails) -> list[ParticipantResult]:
    """Allocate the bill's shared fees among participants.

    Tax and service follow each participant's share of the total ordered
    amount, delivery is split evenly per head.
    """
    participant_count = len(participants)
    if participant_count == 0:
        return []

    total_ordered = sum(p.ordered_amount for p in participants)
    delivery_share = bill.delivery / participant_count

    results: list[ParticipantResult] = []
    for p in participants:
        ratio = share_ratio(p.ordered_amount, total_ordered)
        tax_share = bill.tax * ratio
        service_share = bill.service * ratio
        total_owed = p.ordered_amount + tax_share + service_share + delivery_share

        results.append(
            ParticipantResult(
                id=p.id,
                name=p.name,
                ordered_amount=p.ordered_amount,
                paid_amount=p.paid_amount,
                subtotal_share=p.ordered_amount,
                tax_share=tax_share,
                service_share=service_share,
                delivery_share=delivery_share,
                total_owed=total_owed,
                net_balance=p.paid_amount - total_owed,
            )
        )
    return results
