"""
Logging configuration for transaction merging.

Two channels are used:
- operational: file access, missing files and parse/read errors, written to
  a plain-text log, a CSV log and the console
- transaction: per-record import trace and the final summary, console only
"""
import logging
import os
import sys
from typing import List, Optional

OPERATIONAL_CHANNEL = "merge_transactions.file"
TRANSACTION_CHANNEL = "merge_transactions.transaction"

SIMPLE_FORMAT = "%(levelname)s - %(message)s"
CSV_FORMAT = "%(asctime)s,%(levelname)s,%(message)s"
CSV_DATE_FORMAT = "%d-%m-%Y"


def _resolve_level(level: str) -> int:
    """Numeric level for a level name; INFO when the name is unknown."""
    numeric = logging.getLevelName(level.strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env LOG_LEVEL or INFO.

    Returns:
        Configured logger instance
    """
    numeric_level = _resolve_level(level or os.getenv("LOG_LEVEL", "INFO"))

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Avoid duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(numeric_level)

        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


class TransactionLog:
    """
    Two-channel event sink, created at process start and closed at the end.

    Usable as a context manager; ``close()`` flushes and detaches every
    handler it attached.
    """

    def __init__(
        self,
        text_log_path: Optional[str] = "logs.txt",
        csv_log_path: Optional[str] = "logs.csv",
        level: str = "DEBUG",
        console: bool = True,
    ):
        """
        Build both channels.

        Args:
            text_log_path: Plain-text operational log, None to disable
            csv_log_path: CSV operational log (date,level,message), None to disable
            level: Lowest severity accepted by both channels
            console: Whether both channels also write to stdout
        """
        self.level = _resolve_level(level)
        self.operational = logging.getLogger(OPERATIONAL_CHANNEL)
        self.transaction = logging.getLogger(TRANSACTION_CHANNEL)
        self._handlers: List[logging.Handler] = []

        simple = logging.Formatter(SIMPLE_FORMAT)

        if text_log_path:
            self._attach(self.operational, logging.FileHandler(text_log_path, mode="a", encoding="utf-8"), simple)
        if csv_log_path:
            self._attach(
                self.operational,
                logging.FileHandler(csv_log_path, mode="a", encoding="utf-8"),
                logging.Formatter(CSV_FORMAT, datefmt=CSV_DATE_FORMAT)
            )
        if console:
            self._attach(self.operational, logging.StreamHandler(sys.stdout), simple)
            self._attach(self.transaction, logging.StreamHandler(sys.stdout), simple)

        self.operational.setLevel(self.level)
        self.transaction.setLevel(self.level)
        # Each channel writes only to its own sinks
        self.operational.propagate = False
        self.transaction.propagate = False
        self.closed = False

    def _attach(self, logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
        handler.setLevel(self.level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        self._handlers.append(handler)

    def log_operational(self, level: int, message: str) -> None:
        self.operational.log(level, message)

    def log_transaction(self, level: int, message: str) -> None:
        self.transaction.log(level, message)

    def close(self) -> None:
        """Flush and detach every handler this context attached."""
        if self.closed:
            return
        for handler in self._handlers:
            self.operational.removeHandler(handler)
            self.transaction.removeHandler(handler)
            handler.flush()
            handler.close()
        self._handlers = []
        self.closed = True

    def __enter__(self) -> "TransactionLog":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
