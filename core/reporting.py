"""
Reporting of summary statistics on the transaction channel.
"""
import locale
import logging

from core.schema import TransactionSummary


def format_currency(value: float) -> str:
    """
    Format an amount as currency using the process locale.

    Falls back to ``$1,234.56`` when the active locale defines no currency
    (e.g. the ``C`` locale).
    """
    try:
        return locale.currency(value, grouping=True)
    except ValueError:
        sign = "-" if value < 0 else ""
        return f"{sign}${abs(value):,.2f}"


def summary_lines(summary: TransactionSummary):
    """The three report lines, in order."""
    return [
        f"{summary.count} transactions imported",
        f"total value: {format_currency(summary.total)}",
        f"max value: {format_currency(summary.maximum)}",
    ]


def report_summary(summary: TransactionSummary, log) -> None:
    """Emit the summary as info events on the transaction channel."""
    for line in summary_lines(summary):
        log.log_transaction(logging.INFO, line)
