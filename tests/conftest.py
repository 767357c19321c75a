"""Shared pytest fixtures for splitbill tests."""

from __future__ import annotations

import pytest

from splitbill.domain.bill import Bill
from splitbill.services.bill import BillService


@pytest.fixture
def service() -> BillService:
    """A fresh BillService."""
    return BillService()


@pytest.fixture
def five_way_bill() -> Bill:
    """100000 paid by A, split among A..E."""
    return Bill(amount=100000, paid_by="A", people=["A", "B", "C", "D", "E"])


@pytest.fixture
def empty_group_bill() -> Bill:
    """A bill nobody can share."""
    return Bill(amount=1000000, paid_by="", people=[])
