"""
Data models and serialization helpers for the letter UI.

This package provides:
- Letter domain models (Letter, Company, Category, User, ReportSummary)
- The API response envelope and the letter filter
- ListPager, the client-side pagination state machine

Reflex-compatible view models live in models.reflex_models and are not
imported here so the domain models stay usable without Reflex.
"""

from surat_ui.models.common import ApiResponse, LetterFilter
from surat_ui.models.letter import (
    ALL,
    ROLE_ADMIN,
    ROLE_SUPER_ADMIN,
    Category,
    Company,
    CountRow,
    Letter,
    LetterDraft,
    ReportSummary,
    User,
    deserialize_category,
    deserialize_company,
    deserialize_letter,
    deserialize_user,
    serialize_letter,
    serialize_user,
)
from surat_ui.models.pagination import (
    DEFAULT_PAGE_SIZE,
    ELLIPSIS,
    PAGE_SIZE_OPTIONS,
    ListPager,
)

__all__ = [
    "ALL",
    "ApiResponse",
    "Category",
    "Company",
    "CountRow",
    "DEFAULT_PAGE_SIZE",
    "ELLIPSIS",
    "Letter",
    "LetterDraft",
    "LetterFilter",
    "ListPager",
    "PAGE_SIZE_OPTIONS",
    "ROLE_ADMIN",
    "ROLE_SUPER_ADMIN",
    "ReportSummary",
    "User",
    "deserialize_category",
    "deserialize_company",
    "deserialize_letter",
    "deserialize_user",
    "serialize_letter",
    "serialize_user",
]
