"""BillService — checked wrappers around the Bill domain model.

Pipeline per operation: COERCE → COMPUTE → RESPOND.
Domain exceptions become ``ServiceResult(ok=False)``; nothing is raised
to the caller and nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from splitbill.domain.bill import Bill
from splitbill.domain.errors import BillError, InvalidAmountError
from splitbill.domain.types import ErrorCode
from splitbill.services.contracts import (
    PeopleResultData,
    SettlementResultData,
    SplitResultData,
    dump_validated,
)
from splitbill.services.result import ServiceResult

logger = logging.getLogger(__name__)

BillInput = Bill | Mapping[str, Any]


def _error_result(op: str, exc: BillError) -> ServiceResult:
    detail: dict[str, Any] = {}
    if isinstance(exc, InvalidAmountError):
        detail["amount"] = exc.amount
    return ServiceResult.failure(op, str(exc.code), str(exc), detail)


class BillService:
    """Computes splits and settlements for bills.

    Stateless; one instance may be shared across callers.

    Usage::

        result = BillService().split_evenly(
            {"amount": 100000, "paid_by": "A", "people": ["A", "B", "C"]}
        )
        if result.ok:
            share = result.data["share"]  # 33333
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def split_evenly(self, bill: BillInput) -> ServiceResult:
        """Per-person share of the bill, payer included in the head count."""
        op = "split_evenly"
        parsed = self._coerce(bill, op)
        if isinstance(parsed, ServiceResult):
            return parsed

        try:
            share = parsed.split_evenly()
        except BillError as exc:
            logger.debug("%s rejected: %s", op, exc.code)
            return _error_result(op, exc)

        logger.debug("%s: %d among %d -> %d", op, parsed.amount, len(parsed.people), share)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                SplitResultData,
                {"amount": parsed.amount, "people_count": len(parsed.people), "share": share},
            ),
        )

    def get_people(self, bill: BillInput) -> ServiceResult:
        """Everyone who owes the payer, in group order."""
        op = "get_people"
        parsed = self._coerce(bill, op)
        if isinstance(parsed, ServiceResult):
            return parsed

        people = parsed.get_people()
        warnings: list[str] = []
        if parsed.paid_by and parsed.paid_by not in parsed.people:
            warnings.append(f"Payer {parsed.paid_by!r} is not a member of the group")

        logger.debug("%s: %d of %d owe %r", op, len(people), len(parsed.people), parsed.paid_by)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                PeopleResultData,
                {"paid_by": parsed.paid_by, "people": people, "count": len(people)},
            ),
            warnings=warnings,
        )

    def settle(self, bill: BillInput) -> ServiceResult:
        """What each non-payer owes the payer under an even split.

        One debt per entry of ``get_people()``; duplicate names produce
        duplicate debts. The truncation remainder is not assigned.
        """
        op = "settle"
        parsed = self._coerce(bill, op)
        if isinstance(parsed, ServiceResult):
            return parsed

        try:
            share = parsed.split_evenly()
        except BillError as exc:
            logger.debug("%s rejected: %s", op, exc.code)
            return _error_result(op, exc)

        debts = [{"person": person, "amount": share} for person in parsed.get_people()]
        total_owed = share * len(debts)

        logger.debug("%s: %d debts totalling %d to %r", op, len(debts), total_owed, parsed.paid_by)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                SettlementResultData,
                {
                    "paid_by": parsed.paid_by,
                    "share": share,
                    "debts": debts,
                    "total_owed": total_owed,
                },
            ),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _coerce(bill: BillInput, op: str) -> Bill | ServiceResult:
        """Return *bill* as a Bill, or an INVALID_BILL result if it does not validate."""
        if isinstance(bill, Bill):
            return bill
        try:
            return Bill.model_validate(dict(bill))
        except ValidationError as exc:
            logger.debug("%s rejected: invalid bill (%d errors)", op, exc.error_count())
            return ServiceResult.failure(
                op,
                str(ErrorCode.INVALID_BILL),
                f"Invalid bill: {exc.error_count()} validation error(s)",
                {"errors": exc.errors(include_url=False, include_context=False)},
            )
