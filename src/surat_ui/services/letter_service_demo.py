"""
Demo implementation of LetterService using in-memory data.

This service is useful for:
- Local development without the REST API
- Testing views with realistic data
- Demonstrating the application offline

It mirrors the REST API's behaviour closely enough for the views:
admins only see their own company, filters combine, and new letters
get the next sequence number for their company/category/year.
"""

import copy
from datetime import date
from typing import Callable, List

from surat_ui.data.demo_letters import DemoStore, new_demo_store
from surat_ui.lib import logs
from surat_ui.models.common import ApiResponse, LetterFilter
from surat_ui.models.letter import (
    COMPANY_ACTIVE,
    Category,
    Company,
    CountRow,
    DashboardStats,
    Letter,
    LetterDraft,
    ReportSummary,
    User,
)
from surat_ui.services.letter_service import (
    LetterService,
    catalog_entry_error,
    password_change_error,
)
from surat_ui.session import Session
from surat_ui.utils import matches_query, month_to_roman, parse_iso
from surat_ui.utils.numbering import MONTHS_SHORT

LOG = logs.logger(__file__)

_UNAUTHORIZED = "Sesi tidak valid, silakan login kembali"
_NOT_FOUND = "Surat tidak ditemukan"
_SUPER_ADMIN_ONLY = "Akses ditolak. Hanya Super Admin yang dapat mengelola perusahaan"

RECENT_LETTERS = 5


class DemoLetterService(LetterService):
    """
    In-memory letter service backed by fixture data.

    By default each instance works on its own copy of the fixtures; pass
    a shared DemoStore to keep mutations across instances.
    """

    def __init__(
        self,
        session: Session | None = None,
        store: DemoStore | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize with fixture data.

        Args:
            session: Session used to authorize calls.
            store: Backing store, used as-is so services built over the
                   same store share mutations. None gives a private copy
                   of the fixtures.
            today: Clock for the dashboard's "this month" figures.
        """
        super().__init__(session)
        self._store = store if store is not None else new_demo_store()
        self._today = today

    @property
    def _letters(self) -> List[Letter]:
        return self._store.letters

    @property
    def _companies(self) -> List[Company]:
        return self._store.companies

    @property
    def _categories(self) -> List[Category]:
        return self._store.categories

    # Authentication

    def login(self, email: str, password: str) -> ApiResponse[User]:
        normalized = (email or "").strip().lower()
        user = next((user for user in self._store.users if user.email.lower() == normalized), None)
        if user is None or password != self._store.passwords.get(user.id):
            LOG.info("Demo login rejected for %s", normalized)
            return ApiResponse.failure("Email atau password salah")
        self.session.start(f"demo-token-{user.id}", copy.copy(user))
        return ApiResponse.ok(copy.copy(user))

    def logout(self) -> ApiResponse[None]:
        self.session.end()
        return ApiResponse.ok(message="Logout berhasil")

    def profile(self) -> ApiResponse[User]:
        user = self._session_user()
        if user is None:
            return ApiResponse.failure(_UNAUTHORIZED)
        self.session.update_user(copy.copy(user))
        return ApiResponse.ok(copy.copy(user))

    def update_profile(self, name: str, email: str) -> ApiResponse[User]:
        user = self._session_user()
        if user is None:
            return ApiResponse.failure(_UNAUTHORIZED)
        name, email = (name or "").strip(), (email or "").strip()
        if not name or not email:
            return ApiResponse.failure("Nama dan email wajib diisi")
        taken = any(
            other.email.lower() == email.lower() and other.id != user.id
            for other in self._store.users
        )
        if taken:
            return ApiResponse.failure("Email sudah digunakan")
        user.name = name
        user.email = email
        self.session.update_user(copy.copy(user))
        LOG.info("Demo profile updated for user %s", user.id)
        return ApiResponse.ok(copy.copy(user), message="Profil berhasil diperbarui")

    def change_password(
        self, current_password: str, new_password: str, confirm_password: str
    ) -> ApiResponse[None]:
        user = self._session_user()
        if user is None:
            return ApiResponse.failure(_UNAUTHORIZED)
        error = password_change_error(current_password, new_password, confirm_password)
        if error:
            return ApiResponse.failure(error)
        if self._store.passwords.get(user.id) != current_password:
            return ApiResponse.failure("Password saat ini salah")
        self._store.passwords[user.id] = new_password
        return ApiResponse.ok(message="Password berhasil diubah")

    # Letters

    def list_letters(self, letter_filter: LetterFilter | None = None) -> ApiResponse[List[Letter]]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        letters = self._apply_filter(letter_filter or LetterFilter())
        # Newest first, as the API orders them
        letters.sort(key=_newest_first, reverse=True)
        response = ApiResponse.ok(letters)
        response.total = len(letters)
        return response

    def get_letter(self, letter_id: int) -> ApiResponse[Letter]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        letter = self._find(letter_id)
        if letter is None:
            return ApiResponse.failure(_NOT_FOUND)
        return ApiResponse.ok(copy.copy(letter))

    def create_letter(self, draft: LetterDraft) -> ApiResponse[Letter]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        if draft.missing_fields():
            return ApiResponse.failure("Semua field wajib diisi")
        scope = self.session.company_scope
        if scope is not None and draft.company_id != scope:
            return ApiResponse.failure("Anda hanya dapat membuat surat untuk perusahaan Anda")

        company = _by_id(self._companies, draft.company_id)
        category = _by_id(self._categories, draft.category_id)
        letter_date = parse_iso(draft.letter_date)
        if company is None or category is None or letter_date is None:
            return ApiResponse.failure("Data surat tidak valid")

        sequence = self._next_sequence(company.id, category.id, letter_date.year)
        user = self.session.user
        letter = Letter(
            id=max((letter.id for letter in self._letters), default=0) + 1,
            reference_number=(
                f"{sequence}/{category.code}/{company.code}/"
                f"{month_to_roman(letter_date.month)}/{letter_date.year}"
            ),
            company_id=company.id,
            category_id=category.id,
            subject=draft.subject.strip(),
            recipient=draft.recipient.strip(),
            letter_date=letter_date.date().isoformat(),
            created_by=user.id if user else None,
            company_name=company.name,
            company_code=company.code,
            category_name=category.name,
            category_code=category.code,
            created_by_name=user.name if user else "",
        )
        self._letters.append(letter)
        LOG.info("Demo letter created: %s", letter.reference_number)
        return ApiResponse.ok(copy.copy(letter), message="Surat berhasil ditambahkan")

    def update_letter(self, letter_id: int, subject: str, recipient: str) -> ApiResponse[Letter]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        if not (subject or "").strip() or not (recipient or "").strip():
            return ApiResponse.failure("Perihal dan tujuan wajib diisi")
        letter = self._find(letter_id)
        if letter is None:
            return ApiResponse.failure(_NOT_FOUND)
        letter.subject = subject.strip()
        letter.recipient = recipient.strip()
        return ApiResponse.ok(copy.copy(letter), message="Surat berhasil diperbarui")

    def delete_letter(self, letter_id: int) -> ApiResponse[None]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        letter = self._find(letter_id)
        if letter is None:
            return ApiResponse.failure(_NOT_FOUND)
        self._letters.remove(letter)
        return ApiResponse.ok(message="Surat berhasil dihapus")

    def available_years(self) -> ApiResponse[List[int]]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        years = {letter.year for letter in self._scoped_letters() if letter.year}
        return ApiResponse.ok(sorted(years, reverse=True))

    def get_stats(self) -> ApiResponse[DashboardStats]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        letters = sorted(self._scoped_letters(), key=_newest_first, reverse=True)
        today = self._today()
        months = _last_twelve_months(today)
        monthly = {month: 0 for month in months}
        for letter in letters:
            key = (letter.year, letter.month)
            if key in monthly:
                monthly[key] += 1
        return ApiResponse.ok(
            DashboardStats(
                total_letters=len(letters),
                letters_this_month=monthly[(today.year, today.month)],
                total_companies=len(self.visible_companies(list(self._companies))),
                monthly=[
                    CountRow(name=f"{MONTHS_SHORT[month - 1]} {year}", count=monthly[(year, month)])
                    for year, month in months
                ],
                by_company=_count_by(letters, lambda letter: letter.company_name),
                recent=[copy.copy(letter) for letter in letters[:RECENT_LETTERS]],
            )
        )

    # Companies

    def list_companies(self, active_only: bool = False) -> ApiResponse[List[Company]]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        companies = [
            copy.copy(company)
            for company in self._companies
            if company.is_active or not active_only
        ]
        return ApiResponse.ok(self.visible_companies(companies))

    def create_company(
        self, name: str, code: str, status: str = COMPANY_ACTIVE
    ) -> ApiResponse[Company]:
        denied = self._require_super_admin()
        if denied:
            return denied
        error = catalog_entry_error(name, code, status) or self._duplicate_code(
            self._companies, code, "Kode perusahaan sudah digunakan"
        )
        if error:
            return ApiResponse.failure(error)
        company = Company(
            id=_next_id(self._companies),
            name=name.strip(),
            code=code.strip().upper(),
            status=status,
            created_at=self._today().isoformat(),
        )
        self._companies.append(company)
        LOG.info("Demo company created: %s", company.code)
        return ApiResponse.ok(copy.copy(company), message="Perusahaan berhasil ditambahkan")

    def update_company(
        self, company_id: int, name: str, code: str, status: str = COMPANY_ACTIVE
    ) -> ApiResponse[Company]:
        denied = self._require_super_admin()
        if denied:
            return denied
        company = _by_id(self._companies, company_id)
        if company is None:
            return ApiResponse.failure("Perusahaan tidak ditemukan")
        error = catalog_entry_error(name, code, status) or self._duplicate_code(
            self._companies, code, "Kode perusahaan sudah digunakan", exclude_id=company_id
        )
        if error:
            return ApiResponse.failure(error)
        company.name = name.strip()
        company.code = code.strip().upper()
        company.status = status
        # Letters and users carry the joined company name and code
        for letter in self._letters:
            if letter.company_id == company_id:
                letter.company_name = company.name
                letter.company_code = company.code
        for user in self._store.users:
            if user.company_id == company_id:
                user.company_name = company.name
        return ApiResponse.ok(copy.copy(company), message="Perusahaan berhasil diubah")

    def delete_company(self, company_id: int) -> ApiResponse[None]:
        denied = self._require_super_admin()
        if denied:
            return denied
        company = _by_id(self._companies, company_id)
        if company is None:
            return ApiResponse.failure("Perusahaan tidak ditemukan")
        if any(letter.company_id == company_id for letter in self._letters):
            return ApiResponse.failure("Perusahaan masih memiliki surat dan tidak dapat dihapus")
        self._companies.remove(company)
        return ApiResponse.ok(message="Perusahaan berhasil dihapus")

    # Categories

    def list_categories(self) -> ApiResponse[List[Category]]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        return ApiResponse.ok([copy.copy(category) for category in self._categories])

    def create_category(self, name: str, code: str) -> ApiResponse[Category]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        error = catalog_entry_error(name, code) or self._duplicate_code(
            self._categories, code, "Kode kategori sudah digunakan"
        )
        if error:
            return ApiResponse.failure(error)
        category = Category(
            id=_next_id(self._categories),
            name=name.strip(),
            code=code.strip().upper(),
            created_at=self._today().isoformat(),
        )
        self._categories.append(category)
        LOG.info("Demo category created: %s", category.code)
        return ApiResponse.ok(copy.copy(category), message="Kategori berhasil ditambahkan")

    def update_category(self, category_id: int, name: str, code: str) -> ApiResponse[Category]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        category = _by_id(self._categories, category_id)
        if category is None:
            return ApiResponse.failure("Kategori tidak ditemukan")
        error = catalog_entry_error(name, code) or self._duplicate_code(
            self._categories, code, "Kode kategori sudah digunakan", exclude_id=category_id
        )
        if error:
            return ApiResponse.failure(error)
        category.name = name.strip()
        category.code = code.strip().upper()
        for letter in self._letters:
            if letter.category_id == category_id:
                letter.category_name = category.name
                letter.category_code = category.code
        return ApiResponse.ok(copy.copy(category), message="Kategori berhasil diubah")

    def delete_category(self, category_id: int) -> ApiResponse[None]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        category = _by_id(self._categories, category_id)
        if category is None:
            return ApiResponse.failure("Kategori tidak ditemukan")
        if any(letter.category_id == category_id for letter in self._letters):
            return ApiResponse.failure("Kategori masih digunakan oleh surat dan tidak dapat dihapus")
        self._categories.remove(category)
        return ApiResponse.ok(message="Kategori berhasil dihapus")

    # Reports

    def get_report(self, letter_filter: LetterFilter | None = None) -> ApiResponse[ReportSummary]:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        letter_filter = letter_filter or LetterFilter()
        # The report ignores free-text search
        letters = self._apply_filter(
            LetterFilter(
                company_id=letter_filter.company_id,
                category_id=letter_filter.category_id,
                year=letter_filter.year,
                month=letter_filter.month,
            )
        )
        letters.sort(key=_newest_first)
        return ApiResponse.ok(
            ReportSummary(
                letters=letters,
                total=len(letters),
                by_company=_count_by(letters, lambda letter: letter.company_name),
                by_category=_count_by(letters, lambda letter: letter.category_name),
            )
        )

    def _session_user(self) -> User | None:
        """Return the stored record of the logged-in user."""
        if not self.session.is_authenticated or self.session.user is None:
            return None
        return _by_id(self._store.users, self.session.user.id)

    def _require_super_admin(self) -> ApiResponse[None] | None:
        if not self.session.is_authenticated:
            return ApiResponse.failure(_UNAUTHORIZED)
        if not self.session.is_super_admin:
            return ApiResponse.failure(_SUPER_ADMIN_ONLY)
        return None

    @staticmethod
    def _duplicate_code(entries, code: str, error: str, exclude_id: int | None = None) -> str | None:
        normalized = code.strip().upper()
        if any(entry.code.upper() == normalized and entry.id != exclude_id for entry in entries):
            return error
        return None

    def _scoped_letters(self) -> List[Letter]:
        scope = self.session.company_scope
        return [
            letter for letter in self._letters if scope is None or letter.company_id == scope
        ]

    def _apply_filter(self, letter_filter: LetterFilter) -> List[Letter]:
        """Filter letters by company scope and the given filter."""
        return [
            copy.copy(letter)
            for letter in self._scoped_letters()
            if matches_query(letter, letter_filter.search)
            and letter_filter.company_id in (None, letter.company_id)
            and letter_filter.category_id in (None, letter.category_id)
            and letter_filter.year in (None, letter.year)
            and letter_filter.month in (None, letter.month)
        ]

    def _find(self, letter_id: int) -> Letter | None:
        return next(
            (letter for letter in self._scoped_letters() if letter.id == letter_id), None
        )

    def _next_sequence(self, company_id: int, category_id: int, year: int) -> int:
        sequences = [
            letter.reference.sequence
            for letter in self._letters
            if letter.company_id == company_id
            and letter.category_id == category_id
            and letter.year == year
            and letter.reference is not None
            and letter.reference.is_numeric
        ]
        return max(sequences, default=0) + 1


def _newest_first(letter: Letter):
    return (letter.letter_date, letter.id)


def _by_id(entries, entry_id: int):
    return next((entry for entry in entries if entry.id == entry_id), None)


def _next_id(entries) -> int:
    return max((entry.id for entry in entries), default=0) + 1


def _last_twelve_months(today: date) -> List[tuple[int, int]]:
    """Return (year, month) pairs for the twelve months ending at today, oldest first."""
    months = []
    year, month = today.year, today.month
    for _ in range(12):
        months.append((year, month))
        year, month = (year, month - 1) if month > 1 else (year - 1, 12)
    return list(reversed(months))


def _count_by(letters: List[Letter], key) -> List[CountRow]:
    counts: dict[str, int] = {}
    for letter in letters:
        name = key(letter)
        counts[name] = counts.get(name, 0) + 1
    return [
        CountRow(name=name, count=count)
        for name, count in sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    ]
