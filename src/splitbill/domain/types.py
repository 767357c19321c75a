"""Error classification enums.

Codes are stable strings so they can be matched by callers and
serialized inside a ServiceResult.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable error codes for bill operations."""

    INVALID_AMOUNT = "INVALID_AMOUNT"
    EMPTY_GROUP = "EMPTY_GROUP"
    INVALID_BILL = "INVALID_BILL"
