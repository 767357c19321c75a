"""Bill model — an amount, the person who paid it, and the group.

Pure value object. Both queries are read-only and return new,
caller-owned results; a Bill is never mutated after construction.

The even split uses integer division and leaves any remainder
unaccounted for: 100000 among three people is 33333 each.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, Field, Strict, field_validator

from splitbill.domain.errors import EmptyGroupError, InvalidAmountError

Money = int  # smallest unit the caller chooses (cents, whole units, ...)
Person = str
People = tuple[Annotated[Person, Strict()], ...]


class Bill(BaseModel):
    """A shared bill already paid by one person.

    All three fields are required.

    Attributes:
        amount: Total amount including tax, in integer units.
        paid_by: The person who paid. ``""`` means nobody in the group.
        people: Everyone in the group, the payer included if present.
            Order is kept and duplicates are allowed.
    """

    model_config = {"frozen": True}

    amount: Money = Field(strict=True)
    paid_by: Person = Field(strict=True)
    people: People

    @field_validator("people", mode="before")
    @classmethod
    def check_people_ordered(cls, value: Any) -> Any:
        # Sets and other unordered iterables would scramble group order.
        if not isinstance(value, (list, tuple)):
            msg = f"people must be a list or tuple, got {type(value).__name__}"
            raise ValueError(msg)
        return value

    def split_evenly(self) -> Money:
        """Return each person's share: ``amount // len(people)``.

        The payer counts as one of the people. Raises
        :class:`InvalidAmountError` when ``amount <= 0`` and
        :class:`EmptyGroupError` when there is nobody to split among.
        """
        if self.amount <= 0:
            raise InvalidAmountError(self.amount)
        if not self.people:
            raise EmptyGroupError()
        return self.amount // len(self.people)

    def get_people(self) -> list[Person]:
        """Everyone in the group except the payer, in group order."""
        return [person for person in self.people if person != self.paid_by]
