from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from billsplit.config import get_settings
from billsplit.logging import get_logger
from billsplit.services.split import ParticipantResult
from billsplit.utils.money import round_amount


@dataclass(slots=True)
class Settlement:
    from_name: str
    to_name: str
    amount: float


def calculate_settlements(
    results: Sequence[ParticipantResult],
    epsilon: float | None = None,
    places: int | None = None,
) -> list[Settlement]:
    """Greedily match the largest debts against the largest credits.

    Balances within ``epsilon`` of zero count as settled. Money the group is
    short (or holds in excess) is reported in the log but never invented as a
    transfer.
    """
    settings = get_settings()
    if epsilon is None:
        epsilon = settings.settle_epsilon
    if places is None:
        places = settings.amount_places

    # local [name, balance] pairs; the caller's results are never touched
    debtors = [[r.name, r.net_balance] for r in results if r.net_balance < -epsilon]
    creditors = [[r.name, r.net_balance] for r in results if r.net_balance > epsilon]

    debtors.sort(key=lambda x: x[1])
    creditors.sort(key=lambda x: x[1], reverse=True)

    settlements: list[Settlement] = []
    i, j = 0, 0

    while i < len(creditors) and j < len(debtors):
        creditor = creditors[i]
        debtor = debtors[j]

        amount = min(creditor[1], abs(debtor[1]))
        if amount > 0:
            settlements.append(Settlement(from_name=debtor[0], to_name=creditor[0], amount=round_amount(amount, places)))

        creditor[1] -= amount
        debtor[1] += amount

        if creditor[1] < epsilon:
            i += 1
        if debtor[1] > -epsilon:
            j += 1

    # every participant skipped or advanced under epsilon may leave up to epsilon behind
    _report_residue(debtors[j:], creditors[i:], epsilon * len(results))
    return settlements


def _report_residue(debtors: list[list], creditors: list[list], tolerance: float) -> None:
    outstanding = sum(-balance for _, balance in debtors)
    unclaimed = sum(balance for _, balance in creditors)

    log = get_logger(__name__)
    if outstanding > tolerance:
        log.warning(
            "settlement.unfunded",
            outstanding=round_amount(outstanding),
            debtors=[name for name, _ in debtors],
        )
    if unclaimed > tolerance:
        log.warning(
            "settlement.unclaimed_credit",
            unclaimed=round_amount(unclaimed),
            creditors=[name for name, _ in creditors],
        )
