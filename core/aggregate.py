"""
Summary statistics over merged transactions.
"""
from typing import Iterable, Sequence

from core.schema import Purchase, TransactionSummary


def compute_total_value(transactions: Iterable[Purchase]) -> float:
    """Sum of all amounts; 0.0 for no transactions."""
    total = 0.0
    for purchase in transactions:
        total += purchase.amount
    return total


def compute_max_value(transactions: Iterable[Purchase]) -> float:
    """
    Largest amount, compared against a floor of 0.0.

    An empty collection, or one holding only negative amounts, reports 0.0
    rather than the true maximum. Existing reports depend on this floor.
    """
    maximum = 0.0
    for purchase in transactions:
        maximum = max(maximum, purchase.amount)
    return maximum


def summarize(transactions: Sequence[Purchase]) -> TransactionSummary:
    """Count, total and maximum of the given transactions."""
    return TransactionSummary(
        count=len(transactions),
        total=compute_total_value(transactions),
        maximum=compute_max_value(transactions),
    )
