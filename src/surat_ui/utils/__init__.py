"""Utility functions shared across the letter UI package."""

from surat_ui.utils.letter_helpers import matches_query
from surat_ui.utils.numbering import (
    ReferenceNumber,
    format_date_for_input,
    format_date_long,
    format_date_short,
    format_reference_number,
    month_to_roman,
    parse_int,
    parse_iso,
    parse_reference_number,
)

__all__ = [
    "ReferenceNumber",
    "format_date_for_input",
    "format_date_long",
    "format_date_short",
    "format_reference_number",
    "matches_query",
    "month_to_roman",
    "parse_int",
    "parse_iso",
    "parse_reference_number",
]
