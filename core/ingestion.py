"""
Reading transaction files.
Each file is opened through a scope guard and read line by line; failures
are logged and returned as FailureKind values, never raised.
"""
import logging
import os
from contextlib import contextmanager
from typing import IO, Iterator, List, Optional, Sequence, Tuple

from core.parsing import DEFAULT_DATE_FORMAT, DEFAULT_DELIMITER, parse_line
from core.schema import FailureKind, FileReport, ParseFailure, Purchase


@contextmanager
def open_reader(file_name: str, report: FileReport, log, encoding: str = "utf-8") -> Iterator[Optional[IO[str]]]:
    """
    Open a file for sequential text reading and release it exactly once.

    Yields None when the file cannot be opened; the failure is already
    recorded on ``report``. A failure while closing is logged as a warning
    and never propagated.
    """
    reader = None
    try:
        reader = open(file_name, "r", encoding=encoding)
    except FileNotFoundError:
        report.found = False
        _fail(report, log, FailureKind.FILE_NOT_FOUND, f"file {file_name} does not exist - skip")
    except OSError as e:
        _fail(report, log, FailureKind.IO_ERROR, f"problem reading file {file_name}: {e}")

    try:
        yield reader
    finally:
        if reader is not None:
            try:
                reader.close()
            except OSError as e:
                _fail(report, log, FailureKind.CLOSE_ERROR, f"cannot close reader used to access {file_name}: {e}")


def _fail(report: FileReport, log, kind: FailureKind, message: str) -> None:
    report.failures.append(ParseFailure(kind=kind, message=message, file_name=report.file_name))
    log.log_operational(logging.WARNING, message)


def read_transactions(
    file_name: str,
    log,
    delimiter: str = DEFAULT_DELIMITER,
    date_format: str = DEFAULT_DATE_FORMAT,
    encoding: str = "utf-8",
) -> FileReport:
    """
    Read all transactions from one file.

    Lines are parsed independently: a bad line is logged and skipped, an
    I/O or decode error stops reading this file only. Purchases parsed
    before such an error are kept.

    Args:
        file_name: Path to the delimited text file
        log: Event sink exposing log_operational and log_transaction
        delimiter: Field separator
        date_format: strptime pattern for the date field
        encoding: Text encoding of the file

    Returns:
        FileReport with the purchases in line order and every failure met
    """
    file_name = os.fspath(file_name)
    report = FileReport(file_name=file_name)
    log.log_operational(logging.INFO, f"import data from {file_name}")

    with open_reader(file_name, report, log, encoding=encoding) as reader:
        if reader is None:
            return report
        try:
            for line_number, line in enumerate(reader, start=1):
                report.lines_read = line_number
                outcome = parse_line(
                    line,
                    delimiter=delimiter,
                    date_format=date_format,
                    file_name=file_name,
                    line_number=line_number,
                )
                if outcome.ok:
                    report.records.append(outcome.record)
                    log.log_transaction(logging.DEBUG, f"imported transaction {outcome.record}")
                else:
                    report.failures.append(outcome.failure)
                    log.log_operational(logging.WARNING, outcome.failure.message)
        except (OSError, UnicodeDecodeError) as e:
            _fail(report, log, FailureKind.IO_ERROR, f"problem reading file {file_name}: {e}")

    return report


def merge_files(
    file_names: Sequence[str],
    log,
    delimiter: str = DEFAULT_DELIMITER,
    date_format: str = DEFAULT_DATE_FORMAT,
    encoding: str = "utf-8",
) -> Tuple[List[Purchase], List[FileReport]]:
    """
    Read every file in the given order and concatenate their purchases.

    Returns:
        Tuple of (purchases in file-then-line order, one report per file)
    """
    transactions: List[Purchase] = []
    reports: List[FileReport] = []
    for file_name in file_names:
        report = read_transactions(
            file_name,
            log,
            delimiter=delimiter,
            date_format=date_format,
            encoding=encoding,
        )
        transactions.extend(report.records)
        reports.append(report)
    return transactions, reports
