"""
Unit tests for summary statistics.
"""
from datetime import date

import pytest

from core.aggregate import compute_max_value, compute_total_value, summarize
from core.schema import Purchase, TransactionSummary


def purchase(amount, description="Item"):
    return Purchase(description=description, amount=amount, date=date(2020, 1, 1))


def test_empty_collection():
    """Test statistics over no transactions are all zero."""
    summary = summarize([])
    assert summary == TransactionSummary(count=0, total=0.0, maximum=0.0)


def test_summary_values():
    """Test count, total and maximum."""
    summary = summarize([purchase(3.5), purchase(10.0), purchase(2.25)])
    assert summary.count == 3
    assert summary.total == pytest.approx(15.75)
    assert summary.maximum == 10.0


def test_total_and_max_ignore_order():
    """Test total and maximum do not depend on order."""
    items = [purchase(1.1), purchase(7.0), purchase(0.4)]
    assert compute_total_value(items) == pytest.approx(compute_total_value(list(reversed(items))))
    assert compute_max_value(items) == compute_max_value(list(reversed(items)))


def test_max_is_floored_at_zero():
    """Test all-negative amounts report a maximum of 0.0."""
    assert compute_max_value([purchase(-5.0), purchase(-1.0)]) == 0.0
    assert compute_total_value([purchase(-5.0), purchase(-1.0)]) == -6.0
