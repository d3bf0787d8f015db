"""
Pydantic models for parsed transactions, parse outcomes and summaries.
"""
import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Purchase(BaseModel):
    """A single imported transaction."""
    model_config = ConfigDict(frozen=True)

    description: str
    amount: float
    date: datetime.date

    def __str__(self) -> str:
        return (
            f"Purchase(description={self.description}, "
            f"amount={self.amount}, "
            f"date={self.date.strftime('%d-%m-%Y')})"
        )


class FailureKind(str, Enum):
    """Closed set of failures met while reading transaction files."""
    FILE_NOT_FOUND = "file_not_found"
    IO_ERROR = "io_error"
    DATE_FORMAT = "date_format"
    NUMBER_FORMAT = "number_format"
    MALFORMED_LINE = "malformed_line"
    UNCLASSIFIED = "unclassified"
    CLOSE_ERROR = "close_error"


class ParseFailure(BaseModel):
    """Classified failure with enough context to diagnose it."""
    kind: FailureKind
    message: str
    file_name: Optional[str] = None
    line: Optional[str] = None
    line_number: Optional[int] = Field(None, ge=1)


class ParseOutcome(BaseModel):
    """
    Result of parsing one line.
    Exactly one of ``record`` and ``failure`` is set.
    """
    record: Optional[Purchase] = None
    failure: Optional[ParseFailure] = None

    @model_validator(mode="after")
    def check_exclusive(self):
        if (self.record is None) == (self.failure is None):
            raise ValueError("Exactly one of record and failure must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.record is not None


class FileReport(BaseModel):
    """What a single input file contributed."""
    file_name: str
    found: bool = True
    lines_read: int = 0
    records: List[Purchase] = Field(default_factory=list)
    failures: List[ParseFailure] = Field(default_factory=list)


class TransactionSummary(BaseModel):
    """Aggregate statistics over the merged transactions."""
    count: int = 0
    total: float = 0.0
    maximum: float = 0.0


class MergeResult(BaseModel):
    """Merged transactions with per-file reports and the summary."""
    transactions: List[Purchase] = Field(default_factory=list)
    reports: List[FileReport] = Field(default_factory=list)
    summary: TransactionSummary = Field(default_factory=TransactionSummary)

    @property
    def failures(self) -> List[ParseFailure]:
        return [failure for report in self.reports for failure in report.failures]
