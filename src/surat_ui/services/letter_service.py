"""
Abstract base class defining the letter data access contract.

Every operation returns an ApiResponse instead of raising, so views can
treat `success == False` as a user-visible failure without wrapping each
call. Implementations:

- DemoLetterService: In-memory fixtures for development/testing
- LetterServiceImpl: The REST API over httpx
"""

from abc import ABC, abstractmethod
from typing import List

from surat_ui.models.common import ApiResponse, LetterFilter
from surat_ui.models.letter import (
    COMPANY_ACTIVE,
    COMPANY_STATUSES,
    Category,
    Company,
    DashboardStats,
    Letter,
    LetterDraft,
    ReportSummary,
    User,
)
from surat_ui.session import Session

MIN_PASSWORD_LENGTH = 6


class LetterService(ABC):
    """
    Abstract base class for letter data access.

    Attributes:
        session: The session whose token authorizes requests.
    """

    def __init__(self, session: Session | None = None) -> None:
        self.session = session if session is not None else Session()

    # Authentication

    @abstractmethod
    def login(self, email: str, password: str) -> ApiResponse[User]:
        """Authenticate and start the session on success."""

    @abstractmethod
    def logout(self) -> ApiResponse[None]:
        """End the session; the local session is cleared even on failure."""

    @abstractmethod
    def profile(self) -> ApiResponse[User]:
        """Fetch the current user's profile and refresh the session copy."""

    @abstractmethod
    def update_profile(self, name: str, email: str) -> ApiResponse[User]:
        """Change the current user's name and email."""

    @abstractmethod
    def change_password(
        self, current_password: str, new_password: str, confirm_password: str
    ) -> ApiResponse[None]:
        """Change the current user's password."""

    # Letters

    @abstractmethod
    def list_letters(self, letter_filter: LetterFilter | None = None) -> ApiResponse[List[Letter]]:
        """
        Return every letter matching the filter (no server-side paging).

        Args:
            letter_filter: Search text, company, category and year filter.
        """

    @abstractmethod
    def get_letter(self, letter_id: int) -> ApiResponse[Letter]:
        """Return a single letter."""

    @abstractmethod
    def create_letter(self, draft: LetterDraft) -> ApiResponse[Letter]:
        """Create a letter; the reference number is assigned by the backend."""

    @abstractmethod
    def update_letter(self, letter_id: int, subject: str, recipient: str) -> ApiResponse[Letter]:
        """Update the editable fields (subject and recipient) of a letter."""

    @abstractmethod
    def delete_letter(self, letter_id: int) -> ApiResponse[None]:
        """Delete a letter."""

    @abstractmethod
    def available_years(self) -> ApiResponse[List[int]]:
        """Return the years that have letters, newest first."""

    @abstractmethod
    def get_stats(self) -> ApiResponse[DashboardStats]:
        """Return the dashboard figures for the session user's scope."""

    # Lookups

    @abstractmethod
    def list_companies(self, active_only: bool = False) -> ApiResponse[List[Company]]:
        """Return the companies visible to the session user."""

    @abstractmethod
    def create_company(
        self, name: str, code: str, status: str = COMPANY_ACTIVE
    ) -> ApiResponse[Company]:
        """Create a company (super admins only)."""

    @abstractmethod
    def update_company(
        self, company_id: int, name: str, code: str, status: str = COMPANY_ACTIVE
    ) -> ApiResponse[Company]:
        """Update a company's name, code and status (super admins only)."""

    @abstractmethod
    def delete_company(self, company_id: int) -> ApiResponse[None]:
        """Delete a company (super admins only)."""

    @abstractmethod
    def list_categories(self) -> ApiResponse[List[Category]]:
        """Return all letter categories."""

    @abstractmethod
    def create_category(self, name: str, code: str) -> ApiResponse[Category]:
        """Create a letter category."""

    @abstractmethod
    def update_category(self, category_id: int, name: str, code: str) -> ApiResponse[Category]:
        """Update a category's name and code."""

    @abstractmethod
    def delete_category(self, category_id: int) -> ApiResponse[None]:
        """Delete a letter category."""

    # Reports

    @abstractmethod
    def get_report(self, letter_filter: LetterFilter | None = None) -> ApiResponse[ReportSummary]:
        """Return the summary report for the filter (year/month/company/category)."""

    def visible_companies(self, companies: List[Company]) -> List[Company]:
        """Restrict a company list to the session user's scope."""
        scope = self.session.company_scope
        if scope is None:
            return companies
        return [company for company in companies if company.id == scope]


def catalog_entry_error(name: str, code: str, status: str = COMPANY_ACTIVE) -> str | None:
    """
    Validate a company or category form before it is sent.

    Returns:
        The user-visible error, or None when the entry is valid.
    """
    if not (name or "").strip() or not (code or "").strip():
        return "Nama dan kode wajib diisi"
    if status not in COMPANY_STATUSES:
        return "Status tidak valid"
    return None


def password_change_error(
    current_password: str, new_password: str, confirm_password: str
) -> str | None:
    """
    Validate a password change before it is sent.

    Returns:
        The user-visible error, or None when the change may be submitted.
    """
    if not current_password or not new_password or not confirm_password:
        return "Semua field password harus diisi"
    if len(new_password) < MIN_PASSWORD_LENGTH:
        return f"Password baru minimal {MIN_PASSWORD_LENGTH} karakter"
    if new_password != confirm_password:
        return "Password baru dan konfirmasi tidak sama"
    return None
