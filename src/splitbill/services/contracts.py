"""Typed payload contracts for BillService results.

Payloads are validated against these models before they leave the
service layer so a renamed key fails fast in tests.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class SplitResultData(BaseModel):
    """Payload contract for ``BillService.split_evenly``."""

    amount: int
    people_count: int
    share: int


class PeopleResultData(BaseModel):
    """Payload contract for ``BillService.get_people``."""

    paid_by: str
    people: list[str]
    count: int


class Debt(BaseModel):
    """One person's share owed back to the payer."""

    person: str
    amount: int


class SettlementResultData(BaseModel):
    """Payload contract for ``BillService.settle``."""

    paid_by: str
    share: int
    debts: list[Debt]
    total_owed: int
