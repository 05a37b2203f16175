"""JSON interchange for the bill splitting value records.

Field names follow the camelCase convention of the web clients
(``orderedAmount``, ``netBalance``, ``from``/``to``).
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated, Iterable
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from billsplit.services.items import ScannedItem, ScanResult
from billsplit.services.settlement import Settlement
from billsplit.services.split import BillDetails, Participant, ParticipantResult

Amount = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class DuplicateParticipantError(ValueError):
    pass


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParticipantPayload(_Payload):
    id: str
    name: str
    ordered_amount: Amount = 0.0
    paid_amount: Amount = 0.0


class BillPayload(_Payload):
    delivery: Amount = 0.0
    tax: Amount = 0.0
    service: Amount = 0.0


class ParticipantResultPayload(ParticipantPayload):
    subtotal_share: float
    tax_share: float
    service_share: float
    delivery_share: float
    total_owed: float
    net_balance: float


class SettlementPayload(_Payload):
    from_name: str = Field(alias="from")
    to_name: str = Field(alias="to")
    amount: Amount


class ScannedItemPayload(_Payload):
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    price: Amount
    quantity: int = Field(1, ge=1)


class ScanResultPayload(_Payload):
    items: list[ScannedItemPayload] = Field(default_factory=list)
    subtotal: Amount = 0.0
    delivery: Amount = 0.0
    tax: Amount = 0.0
    service: Amount = 0.0
    total: Amount = 0.0


_participants_adapter = TypeAdapter(list[ParticipantPayload])
_results_adapter = TypeAdapter(list[ParticipantResultPayload])
_settlements_adapter = TypeAdapter(list[SettlementPayload])


def load_participants(data: str | bytes) -> list[Participant]:
    payloads = _participants_adapter.validate_json(data)

    seen: set[str] = set()
    for payload in payloads:
        if payload.id in seen:
            raise DuplicateParticipantError(f"Duplicate participant id: {payload.id}")
        seen.add(payload.id)

    return [Participant(**payload.model_dump()) for payload in payloads]


def load_bill(data: str | bytes) -> BillDetails:
    return BillDetails(**BillPayload.model_validate_json(data).model_dump())


def load_scan_result(data: str | bytes) -> ScanResult:
    payload = ScanResultPayload.model_validate_json(data)
    return ScanResult(
        items=[ScannedItem(**item.model_dump()) for item in payload.items],
        subtotal=payload.subtotal,
        delivery=payload.delivery,
        tax=payload.tax,
        service=payload.service,
        total=payload.total,
    )


def dump_results(results: Iterable[ParticipantResult]) -> str:
    payloads = [ParticipantResultPayload.model_validate(asdict(r)) for r in results]
    return _results_adapter.dump_json(payloads, by_alias=True).decode()


def load_results(data: str | bytes) -> list[ParticipantResult]:
    return [ParticipantResult(**payload.model_dump()) for payload in _results_adapter.validate_json(data)]


def dump_settlements(settlements: Iterable[Settlement]) -> str:
    payloads = [SettlementPayload.model_validate(asdict(s)) for s in settlements]
    return _settlements_adapter.dump_json(payloads, by_alias=True).decode()


def load_settlements(data: str | bytes) -> list[Settlement]:
    return [Settlement(**payload.model_dump()) for payload in _settlements_adapter.validate_json(data)]
