from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP


def round_amount(value: float, places: int = 2) -> float:
    """Round half away from zero, so 10.125 becomes 10.13."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
