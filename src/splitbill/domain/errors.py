"""Domain exceptions raised by Bill operations.

Each exception carries a class-level :class:`ErrorCode` so the service
layer can convert it into a ServiceError without a lookup table.
"""

from __future__ import annotations

from typing import ClassVar

from splitbill.domain.types import ErrorCode


class BillError(ValueError):
    """Base class for invalid bill operations."""

    code: ClassVar[ErrorCode]


class InvalidAmountError(BillError):
    """The bill amount is zero or negative."""

    code = ErrorCode.INVALID_AMOUNT

    def __init__(self, amount: int) -> None:
        self.amount = amount
        msg = f"Amount must not be zero or negative (got {amount})"
        super().__init__(msg)


class EmptyGroupError(BillError, ZeroDivisionError):
    """A per-person split was requested for a group with no people.

    Also a ZeroDivisionError: the group size is the divisor.
    """

    code = ErrorCode.EMPTY_GROUP

    def __init__(self) -> None:
        super().__init__("Cannot split a bill among an empty group")
