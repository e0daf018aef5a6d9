"""
Letter domain models and serialization helpers.

This module defines the records exchanged with the REST API. The API
speaks Indonesian field names (nomor_surat, perusahaan_id, perihal...);
the dataclasses use English attribute names and the deserialize_*
functions do the mapping:

    Letter
    ├── reference_number (nomor_surat, parsed via ReferenceNumber)
    ├── company (perusahaan_id / perusahaan_nama / perusahaan_kode)
    └── category (kategori_id / kategori_nama / kategori_kode)

Company and Category supply the short codes used in reference numbers.
"""

from dataclasses import asdict, dataclass, field, replace
from typing import Any, List, Mapping

from surat_ui.utils import (
    ReferenceNumber,
    format_date_long,
    format_date_short,
    parse_reference_number,
)

ROLE_ADMIN = "admin"
ROLE_SUPER_ADMIN = "super_admin"

COMPANY_ACTIVE = "aktif"
COMPANY_INACTIVE = "tidak_aktif"
COMPANY_STATUSES = (COMPANY_ACTIVE, COMPANY_INACTIVE)

# Value used by filter selects for "no restriction"
ALL = "all"


@dataclass(slots=True)
class Company:
    """An organization letters are issued on behalf of (perusahaan)."""

    id: int
    name: str
    code: str
    status: str = COMPANY_ACTIVE
    created_at: str = ""

    @property
    def is_active(self) -> bool:
        return self.status == COMPANY_ACTIVE


@dataclass(slots=True)
class Category:
    """A letter classification (kategori) contributing a short code."""

    id: int
    name: str
    code: str
    created_at: str = ""


@dataclass(slots=True)
class User:
    """An authenticated user of the system."""

    id: int
    name: str
    email: str
    role: str = ROLE_ADMIN
    company_id: int | None = None
    company_name: str | None = None
    created_at: str = ""

    @property
    def is_super_admin(self) -> bool:
        return self.role == ROLE_SUPER_ADMIN


@dataclass(slots=True)
class Letter:
    """Primary dataclass for letters (surat)."""

    id: int
    reference_number: str
    company_id: int
    category_id: int
    subject: str
    recipient: str
    letter_date: str
    created_by: int | None = None
    created_at: str = ""
    evidence_file: str | None = None
    company_name: str = ""
    company_code: str = ""
    category_name: str = ""
    category_code: str = ""
    created_by_name: str = ""

    @property
    def reference(self) -> ReferenceNumber | None:
        """The parsed reference number, or None when malformed."""
        return parse_reference_number(self.reference_number)

    @property
    def year(self) -> int | None:
        """Year of the letter date, taken from the ISO date prefix."""
        try:
            return int(self.letter_date[:4])
        except (TypeError, ValueError):
            return None

    @property
    def month(self) -> int | None:
        """Month of the letter date, taken from the ISO date prefix."""
        try:
            return int(self.letter_date[5:7])
        except (TypeError, ValueError):
            return None

    def formatted_date(self) -> str:
        """Return the letter date in long form ("5 Januari 2025")."""
        return format_date_long(self.letter_date) if self.letter_date else "-"

    def formatted_short_date(self) -> str:
        """Return the letter date in short form ("5 Jan 2025")."""
        return format_date_short(self.letter_date) if self.letter_date else "-"

    def with_changes(self, **changes: Any) -> "Letter":
        """Return a copy with the given attributes replaced."""
        return replace(self, **changes)

    def searchable_terms(self) -> List[str]:
        """Return the terms that should be matched when filtering."""
        terms = [
            self.reference_number,
            self.subject,
            self.recipient,
            self.company_name,
            self.category_name,
        ]
        return [value.lower() for value in terms if value]


@dataclass(slots=True)
class LetterDraft:
    """Fields submitted when creating a letter; the number is assigned server-side."""

    company_id: int
    category_id: int
    subject: str
    recipient: str
    letter_date: str

    def missing_fields(self) -> List[str]:
        """Return the names of required fields that are empty."""
        missing = []
        for name in ("company_id", "category_id", "subject", "recipient", "letter_date"):
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing

    def to_payload(self) -> dict:
        return {
            "perusahaan_id": self.company_id,
            "kategori_id": self.category_id,
            "perihal": self.subject.strip(),
            "tujuan": self.recipient.strip(),
            "tanggal": self.letter_date,
        }


@dataclass(slots=True)
class CountRow:
    """One row of a grouped count (letters per company or category)."""

    name: str
    count: int


@dataclass(slots=True)
class ReportSummary:
    """Summary report (laporan) for a filter."""

    letters: List[Letter] = field(default_factory=list)
    total: int = 0
    by_company: List[CountRow] = field(default_factory=list)
    by_category: List[CountRow] = field(default_factory=list)


@dataclass(slots=True)
class DashboardStats:
    """
    Figures shown on the dashboard (/surat/stats).

    Attributes:
        total_letters: Letters visible to the user.
        letters_this_month: Letters dated in the current calendar month.
        total_companies: Companies visible to the user.
        monthly: Letter counts for the last twelve months, oldest first.
        by_company: Letter counts per company.
        recent: The most recent letters, newest first.
    """

    total_letters: int = 0
    letters_this_month: int = 0
    total_companies: int = 0
    monthly: List[CountRow] = field(default_factory=list)
    by_company: List[CountRow] = field(default_factory=list)
    recent: List[Letter] = field(default_factory=list)


def serialize_letter(letter: Letter) -> dict:
    """Convert a Letter into a JSON-compatible dictionary for view state."""
    data = asdict(letter)
    data["formatted_date"] = letter.formatted_date()
    data["formatted_short_date"] = letter.formatted_short_date()
    return data


def deserialize_letter(payload: Mapping[str, Any]) -> Letter:
    """Convert an API letter record into a Letter dataclass."""
    return Letter(
        id=int(payload["id"]),
        reference_number=payload.get("nomor_surat") or "",
        company_id=_as_int(payload.get("perusahaan_id")),
        category_id=_as_int(payload.get("kategori_id")),
        subject=payload.get("perihal") or "",
        recipient=payload.get("tujuan") or "",
        letter_date=payload.get("tanggal") or "",
        created_by=payload.get("created_by"),
        created_at=payload.get("created_at") or "",
        evidence_file=payload.get("bukti_file"),
        company_name=payload.get("perusahaan_nama") or "",
        company_code=payload.get("perusahaan_kode") or "",
        category_name=payload.get("kategori_nama") or "",
        category_code=payload.get("kategori_kode") or "",
        created_by_name=payload.get("created_by_name") or "",
    )


def deserialize_company(payload: Mapping[str, Any]) -> Company:
    """Convert an API perusahaan record into a Company."""
    return Company(
        id=int(payload["id"]),
        name=payload.get("nama") or "",
        code=payload.get("kode") or "",
        status=payload.get("status") or COMPANY_ACTIVE,
        created_at=payload.get("created_at") or "",
    )


def deserialize_category(payload: Mapping[str, Any]) -> Category:
    """Convert an API kategori record into a Category."""
    return Category(
        id=int(payload["id"]),
        name=payload.get("nama") or "",
        code=payload.get("kode") or "",
        created_at=payload.get("created_at") or "",
    )


def deserialize_user(payload: Mapping[str, Any]) -> User:
    """Convert an API user record into a User."""
    company_id = payload.get("perusahaan_id")
    return User(
        id=int(payload["id"]),
        name=payload.get("name") or "",
        email=payload.get("email") or "",
        role=payload.get("role") or ROLE_ADMIN,
        company_id=int(company_id) if company_id is not None else None,
        company_name=payload.get("perusahaan_nama"),
        created_at=payload.get("created_at") or "",
    )


def serialize_company(company: Company) -> dict:
    """Convert a Company into the API's create/update payload."""
    return {"nama": company.name, "kode": company.code, "status": company.status}


def serialize_category(category: Category) -> dict:
    """Convert a Category into the API's create/update payload."""
    return {"nama": category.name, "kode": category.code}


def serialize_user(user: User) -> dict:
    """Convert a User back into the API's field names."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "perusahaan_id": user.company_id,
        "perusahaan_nama": user.company_name,
        "created_at": user.created_at,
    }


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
