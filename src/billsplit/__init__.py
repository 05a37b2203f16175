"""Bill splitting: fair shares of shared fees and minimal settlement plans."""

from billsplit.services.settlement import Settlement, calculate_settlements
from billsplit.services.split import BillDetails, Participant, ParticipantResult, calculate_splits

__all__ = [
    "BillDetails",
    "Participant",
    "ParticipantResult",
    "Settlement",
    "calculate_settlements",
    "calculate_splits",
]
