"""ServiceResult and ServiceError: what BillService hands back.

Every BillService method returns a ServiceResult. A zero or negative
amount, an empty group, or a mapping that is not a valid bill all come
back as ``ok=False`` with an ``error.code`` from
:class:`splitbill.domain.types.ErrorCode`; none of them is raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a bill operation failed.

    ``detail`` carries the offending input where one exists: the
    ``amount`` for INVALID_AMOUNT, the pydantic ``errors`` list for
    INVALID_BILL.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of ``split_evenly``, ``get_people`` or ``settle``.

    Attributes:
        ok: Whether the operation produced a payload.
        op: Operation name, e.g. ``"settle"``.
        data: Payload matching the operation's contract model.
        warnings: Non-fatal notes, e.g. a payer outside the group.
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Build an ``ok=False`` result with an empty payload."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
