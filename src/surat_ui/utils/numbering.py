"""
Reference number and date formatting helpers.

A letter's reference number (nomor surat) is generated by the backend
in the form ``{sequence}/{category}/{company}/{month}/{year}``, for
example ``13/SP/AOS/X/2025``. The helpers here only read and render
those numbers; they never allocate a sequence.

Dates are rendered the Indonesian way: day, month name, year.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone

ROMAN_MONTHS = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII")

MONTHS_LONG = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)
MONTHS_SHORT = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")

_FIELD_SEPARATOR = "/"
_FIELD_COUNT = 5
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True, slots=True)
class ReferenceNumber:
    """
    The parsed components of a reference number.

    sequence and year are NaN (a float) when the corresponding field
    is not numeric; parsing only checks the field count.
    """

    sequence: int | float
    category_code: str
    company_code: str
    month_roman: str
    year: int | float

    @property
    def is_numeric(self) -> bool:
        """True when both sequence and year parsed as integers."""
        return isinstance(self.sequence, int) and isinstance(self.year, int)

    def __str__(self) -> str:
        return format_reference_number(self)


def month_to_roman(month: int) -> str:
    """
    Return the Roman numeral for a month number.

    Months outside 1..12 fall back to "I".
    """
    if isinstance(month, int) and 1 <= month <= 12:
        return ROMAN_MONTHS[month - 1]
    return "I"


def parse_int(text: str) -> int | float:
    """
    Parse the leading integer of text, or return NaN.

    Leading whitespace and a sign are accepted and trailing characters
    are ignored, so "13abc" gives 13 while "abc" gives NaN.
    """
    match = _LEADING_INT.match(text or "")
    if not match:
        return math.nan
    return int(match.group(1))


def parse_reference_number(text: str | None) -> ReferenceNumber | None:
    """
    Split a reference number into its five fields.

    Args:
        text: A string such as "13/SP/AOS/X/2025".

    Returns:
        ReferenceNumber, or None unless the string has exactly five
        "/"-separated fields.
    """
    if not text:
        return None
    parts = text.split(_FIELD_SEPARATOR)
    if len(parts) != _FIELD_COUNT:
        return None
    sequence, category_code, company_code, month_roman, year = parts
    return ReferenceNumber(
        sequence=parse_int(sequence),
        category_code=category_code,
        company_code=company_code,
        month_roman=month_roman,
        year=parse_int(year),
    )


def format_reference_number(ref: ReferenceNumber) -> str:
    """Join a ReferenceNumber back into its display form."""
    return _FIELD_SEPARATOR.join(
        [
            _format_number(ref.sequence),
            ref.category_code,
            ref.company_code,
            ref.month_roman,
            _format_number(ref.year),
        ]
    )


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(int(value))


def parse_iso(value: str | date | None) -> datetime | None:
    """
    Parse an ISO 8601 date or datetime string.

    Accepts a trailing "Z" for UTC. date and datetime objects pass
    through (dates become midnight datetimes).

    Returns:
        datetime if parsing succeeds, None otherwise.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date_long(value: str | date | None) -> str:
    """Render a date as "5 Januari 2025"; unparseable input is returned as-is."""
    parsed = parse_iso(value)
    if parsed is None:
        return _passthrough(value)
    return f"{parsed.day} {MONTHS_LONG[parsed.month - 1]} {parsed.year}"


def format_date_short(value: str | date | None) -> str:
    """Render a date as "5 Jan 2025"; unparseable input is returned as-is."""
    parsed = parse_iso(value)
    if parsed is None:
        return _passthrough(value)
    return f"{parsed.day} {MONTHS_SHORT[parsed.month - 1]} {parsed.year}"


def format_date_for_input(value: str | date | None) -> str:
    """
    Render a date as "YYYY-MM-DD" for an HTML date input.

    Timezone-aware datetimes are converted to UTC first, so the value
    is the UTC calendar date of the instant.
    """
    parsed = parse_iso(value)
    if parsed is None:
        return _passthrough(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def _passthrough(value: str | date | None) -> str:
    return "" if value is None else str(value)
