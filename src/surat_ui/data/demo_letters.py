"""Fixture companies, categories, users and letters for the demo service."""

import copy
from dataclasses import dataclass, field
from typing import Dict, List

from surat_ui.models.letter import (
    ROLE_ADMIN,
    ROLE_SUPER_ADMIN,
    Category,
    Company,
    Letter,
    User,
)
from surat_ui.utils import month_to_roman

DEMO_PASSWORD = "admin123"

DEMO_COMPANIES = [
    Company(id=1, name="PT. EZRA", code="EP", created_at="2024-01-02T08:00:00Z"),
    Company(id=2, name="CV. ALFA OMEGA", code="AOS", created_at="2024-01-02T08:00:00Z"),
    Company(id=3, name="CV. STIGMA PRATAMA", code="SP", created_at="2024-01-02T08:00:00Z"),
]

DEMO_CATEGORIES = [
    Category(id=1, name="Penawaran", code="SP", created_at="2024-01-02T08:00:00Z"),
    Category(id=2, name="Pencairan", code="PC", created_at="2024-01-02T08:00:00Z"),
    Category(id=3, name="Lain-lain", code="LL", created_at="2024-01-02T08:00:00Z"),
]

DEMO_USERS = [
    User(
        id=1,
        name="Super Admin",
        email="superadmin@example.com",
        role=ROLE_SUPER_ADMIN,
        created_at="2024-01-02T08:00:00Z",
    ),
    User(
        id=2,
        name="Admin PT EZRA",
        email="admin@example.com",
        role=ROLE_ADMIN,
        company_id=1,
        company_name="PT. EZRA",
        created_at="2024-01-02T08:00:00Z",
    ),
]

# (company_id, category_id, subject, recipient, date)
_LETTER_ROWS = [
    (1, 1, "Penawaran harga pengadaan laptop", "PT. Sinar Jaya", "2024-11-04"),
    (2, 2, "Pencairan termin pertama", "Bank Mandiri", "2024-12-16"),
    (1, 3, "Undangan rapat koordinasi", "Seluruh karyawan", "2025-01-06"),
    (3, 1, "Penawaran jasa konsultasi", "Dinas Pekerjaan Umum", "2025-02-10"),
    (2, 1, "Penawaran pengadaan server", "PT. Data Prima", "2025-03-03"),
    (1, 2, "Pencairan dana operasional", "Bank BRI", "2025-03-21"),
    (3, 3, "Pemberitahuan libur nasional", "Seluruh karyawan", "2025-04-01"),
    (2, 3, "Permohonan izin lokasi", "Kantor Kecamatan", "2025-05-12"),
    (1, 1, "Penawaran perawatan jaringan", "PT. Mitra Abadi", "2025-06-02"),
    (3, 2, "Pencairan termin kedua", "Bank BNI", "2025-07-14"),
    (2, 1, "Penawaran lisensi perangkat lunak", "PT. Kreasi Digital", "2025-08-18"),
    (1, 3, "Surat keterangan kerja", "Budi Santoso", "2025-09-09"),
    (3, 1, "Penawaran pengadaan printer", "Sekolah Harapan", "2025-10-01"),
]


def _build_letters() -> list[Letter]:
    companies = {company.id: company for company in DEMO_COMPANIES}
    categories = {category.id: category for category in DEMO_CATEGORIES}
    sequences: dict[tuple[int, int, int], int] = {}
    letters = []
    for index, (company_id, category_id, subject, recipient, letter_date) in enumerate(
        _LETTER_ROWS, start=1
    ):
        company = companies[company_id]
        category = categories[category_id]
        year, month = int(letter_date[:4]), int(letter_date[5:7])
        key = (company_id, category_id, year)
        sequences[key] = sequences.get(key, 0) + 1
        letters.append(
            Letter(
                id=index,
                reference_number=(
                    f"{sequences[key]}/{category.code}/{company.code}/"
                    f"{month_to_roman(month)}/{year}"
                ),
                company_id=company_id,
                category_id=category_id,
                subject=subject,
                recipient=recipient,
                letter_date=letter_date,
                created_by=1,
                created_at=f"{letter_date}T09:00:00Z",
                company_name=company.name,
                company_code=company.code,
                category_name=category.name,
                category_code=category.code,
                created_by_name="Super Admin",
            )
        )
    return letters


DEMO_LETTERS = _build_letters()


@dataclass
class DemoStore:
    """
    Mutable copy of the fixtures that demo services work on.

    Services built over the same store see each other's changes, the way
    browser tabs share one backend.
    """

    letters: List[Letter] = field(default_factory=list)
    companies: List[Company] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)
    users: List[User] = field(default_factory=list)
    passwords: Dict[int, str] = field(default_factory=dict)


def new_demo_store() -> DemoStore:
    """Return a fresh deep copy of the fixtures."""
    return DemoStore(
        letters=copy.deepcopy(DEMO_LETTERS),
        companies=copy.deepcopy(DEMO_COMPANIES),
        categories=copy.deepcopy(DEMO_CATEGORIES),
        users=copy.deepcopy(DEMO_USERS),
        passwords={user.id: DEMO_PASSWORD for user in DEMO_USERS},
    )
