"""
Transaction line parsing.
Turns one delimited line into a Purchase or a classified failure.
"""
import re
from datetime import date, datetime
from typing import List, Optional

from core.exceptions import DateFormatError, MalformedLineError, NumberFormatError
from core.schema import FailureKind, ParseFailure, ParseOutcome, Purchase

DEFAULT_DELIMITER = ","
DEFAULT_DATE_FORMAT = "%d-%m-%Y"

# description, amount, date
FIELD_COUNT = 3

# Plain decimal: optional sign, digits with an optional '.' fraction, optional exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def split_fields(line: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """
    Split a raw line into positional fields.

    Raises:
        MalformedLineError: If fewer than three fields are present
    """
    fields = line.rstrip("\r\n").split(delimiter)
    if len(fields) < FIELD_COUNT:
        raise MalformedLineError(
            f"expected {FIELD_COUNT} fields, found {len(fields)}",
            details={"fields": len(fields)}
        )
    return fields


def parse_amount(value: str) -> float:
    """
    Parse a locale-independent decimal amount (e.g. ``3.50``).

    Raises:
        NumberFormatError: If the value is not a decimal number
    """
    if not DECIMAL_PATTERN.fullmatch(value.strip()):
        raise NumberFormatError(
            f"cannot parse amount from {value!r}",
            details={"value": value}
        )
    return float(value)


def parse_date(value: str, date_format: str = DEFAULT_DATE_FORMAT) -> date:
    """
    Parse a calendar date, ``dd-MM-yyyy`` by default.

    Raises:
        DateFormatError: If the value does not match the pattern
    """
    try:
        return datetime.strptime(value.strip(), date_format).date()
    except ValueError as e:
        raise DateFormatError(
            f"cannot parse date from {value!r}",
            details={"value": value, "format": date_format}
        ) from e


def _describe(file_name: Optional[str], line_number: Optional[int]) -> str:
    if file_name is None:
        return ""
    if line_number is None:
        return f" (file {file_name})"
    return f" (file {file_name}, line {line_number})"


def parse_line(
    line: str,
    delimiter: str = DEFAULT_DELIMITER,
    date_format: str = DEFAULT_DATE_FORMAT,
    file_name: Optional[str] = None,
    line_number: Optional[int] = None,
) -> ParseOutcome:
    """
    Parse one line into a Purchase.

    Never raises: every failure is returned as a classified ParseFailure
    carrying the file name and the raw line.

    Args:
        line: Raw line text, with or without its terminator
        delimiter: Field separator
        date_format: strptime pattern for the date field
        file_name: Source file, used in diagnostics
        line_number: 1-based line number, used in diagnostics

    Returns:
        ParseOutcome holding either the record or the failure
    """
    raw = line.rstrip("\r\n")
    where = _describe(file_name, line_number)

    def failed(kind: FailureKind, message: str) -> ParseOutcome:
        return ParseOutcome(
            failure=ParseFailure(
                kind=kind,
                message=message,
                file_name=file_name,
                line=raw,
                line_number=line_number,
            )
        )

    try:
        fields = split_fields(raw, delimiter)
        purchase = Purchase(
            description=fields[0],
            amount=parse_amount(fields[1]),
            date=parse_date(fields[2], date_format),
        )
        return ParseOutcome(record=purchase)
    except MalformedLineError as e:
        return failed(
            FailureKind.MALFORMED_LINE,
            f"malformed line{where} - {e.message}: {raw}"
        )
    except NumberFormatError:
        return failed(
            FailureKind.NUMBER_FORMAT,
            f"cannot parse amount from string{where} - please check whether syntax is correct: {raw}"
        )
    except DateFormatError:
        return failed(
            FailureKind.DATE_FORMAT,
            f"cannot parse date from string{where} - please check whether syntax is correct: {raw}"
        )
    except Exception as e:
        return failed(
            FailureKind.UNCLASSIFIED,
            f"exception reading data{where}: {e}, line: {raw}"
        )
