"""Helper functions for filtering letters locally."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from surat_ui.models.letter import Letter


def matches_query(letter: "Letter", query: str) -> bool:
    """
    Check if a letter matches the search query.

    Performs case-insensitive substring matching against the reference
    number, subject, recipient, company and category names.

    Returns:
        True if query matches any searchable term, or if query is empty.
    """
    normalized = (query or "").strip().lower()
    if not normalized:
        return True
    return any(normalized in value for value in letter.searchable_terms())
