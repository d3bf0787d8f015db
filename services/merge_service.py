"""
Transaction merge service.
Reads the configured files in order, merges their transactions and reports
summary statistics.
"""
from typing import Optional, Sequence

from core.aggregate import summarize
from core.config import Settings, get_settings
from core.ingestion import merge_files
from core.logger import setup_logger
from core.reporting import report_summary
from core.schema import MergeResult

logger = setup_logger(__name__)


class MergeService:
    """Service for merging transaction files and reporting on them."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize merge service."""
        self.settings = settings or get_settings()

    def merge(self, file_names: Sequence[str], log) -> MergeResult:
        """
        Read and merge the given files without reporting.

        Args:
            file_names: Input files, processed in this order
            log: Event sink exposing log_operational and log_transaction

        Returns:
            MergeResult with transactions, per-file reports and summary
        """
        transactions, reports = merge_files(
            file_names,
            log,
            delimiter=self.settings.delimiter,
            date_format=self.settings.date_format,
            encoding=self.settings.encoding,
        )
        return MergeResult(
            transactions=transactions,
            reports=reports,
            summary=summarize(transactions),
        )

    def run(self, log, file_names: Optional[Sequence[str]] = None) -> MergeResult:
        """
        Merge the files and report summary statistics.

        Missing files and unparsable lines are logged as warnings; the
        summary is always reported, even over no transactions.

        Args:
            log: Event sink exposing log_operational and log_transaction
            file_names: Input files; defaults to the configured input files

        Returns:
            MergeResult with transactions, per-file reports and summary
        """
        files = list(file_names) if file_names is not None else list(self.settings.input_files)
        result = self.merge(files, log)

        skipped = sum(1 for report in result.reports if not report.found)
        logger.debug(
            f"Merged {len(result.transactions)} transactions from {len(files)} files "
            f"({skipped} missing, {len(result.failures)} failures)"
        )

        report_summary(result.summary, log)
        return result
