from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from billsplit.config import get_settings
from billsplit.services.split import BillDetails, Participant


@dataclass(slots=True)
class BillTotals:
    total_ordered: float
    total_fees: float
    total_bill: float
    total_paid: float
    # total_paid - total_bill, equal to the sum of every net balance
    difference: float
    is_paid_matched: bool
    is_target_matched: bool


def summarize_bill(
    participants: Sequence[Participant],
    bill: BillDetails,
    target_total: Optional[float] = None,
    tolerance: Optional[float] = None,
) -> BillTotals:
    """Check what the group paid against the bill and, if known, the receipt total."""
    if tolerance is None:
        tolerance = get_settings().match_tolerance

    total_ordered = sum(p.ordered_amount for p in participants)
    total_fees = bill.total_fees
    total_bill = total_ordered + total_fees
    total_paid = sum(p.paid_amount for p in participants)

    if target_total:
        is_target_matched = abs(target_total - total_bill) < tolerance
    else:
        is_target_matched = True

    return BillTotals(
        total_ordered=total_ordered,
        total_fees=total_fees,
        total_bill=total_bill,
        total_paid=total_paid,
        difference=total_paid - total_bill,
        is_paid_matched=abs(total_paid - total_bill) < tolerance,
        is_target_matched=is_target_matched,
    )
