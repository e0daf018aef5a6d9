"""
Reflex state management for the letter numbering UI.

State hierarchy:
- AuthState: session lifecycle, login form and the role-gated menu
- LookupState: companies, categories and years for selects
- LetterState: filtered, paginated letter list with edit/delete
- NewLetterState: form that creates a letter
- ReportState: summary report per company and category
- CatalogState: create/edit/delete dialogs for categories and companies
- DashboardState: headline figures and recent letters
- ProfileState: profile and password forms

Each browser tab owns its own Session (kept in a backend var) and builds
a letter service bound to it for every event.
"""

import asyncio

import reflex as rx

from surat_ui import config
from surat_ui.letter_list import LetterListController, ReportController
from surat_ui.lib import logs
from surat_ui.models.common import ALL, LetterFilter
from surat_ui.models.letter import COMPANY_ACTIVE, LetterDraft
from surat_ui.models.pagination import ELLIPSIS, PAGE_SIZE_OPTIONS
from surat_ui.models.reflex_models import (
    CategoryModel,
    CompanyModel,
    CountRowModel,
    LetterModel,
    MenuItemModel,
    to_category_model,
    to_company_model,
    to_count_row_model,
    to_letter_model,
    to_menu_item_model,
)
from surat_ui.navigation import can_open, menu_for
from surat_ui.services import get_letter_service
from surat_ui.services.letter_service import LetterService
from surat_ui.session import Session
from surat_ui.utils.numbering import MONTHS_LONG, format_date_for_input

LOG = logs.logger(__file__)

LOGIN_ROUTE = "/login"
HOME_ROUTE = "/"
LETTERS_ROUTE = "/surat"
PROFILE_ROUTE = "/profil"

MONTH_OPTIONS = [(str(index), name) for index, name in enumerate(MONTHS_LONG, start=1)]
PAGE_SIZE_CHOICES = [str(size) for size in PAGE_SIZE_OPTIONS]


class AuthState(rx.State):
    """
    Session lifecycle and login form.

    The token and profile live in a backend var so they never reach the
    browser; the view only sees the user's name, role and menu.
    """

    _session_data: dict = {}

    logged_in: bool = False
    user_name: str = ""
    user_email: str = ""
    user_role: str = ""
    user_company: str = ""
    is_super_admin: bool = False
    menu_items: list[MenuItemModel] = []

    login_email: str = ""
    login_password: str = ""
    login_error: str = ""
    is_submitting: bool = False

    @rx.var
    def role_label(self) -> str:
        return "Super Admin" if self.is_super_admin else "Admin"

    def set_login_email(self, value: str):
        self.login_email = value

    def set_login_password(self, value: str):
        self.login_password = value

    @rx.event
    def login(self):
        """Authenticate with the login form and open the dashboard."""
        email = self.login_email.strip()
        if not email or not self.login_password:
            self.login_error = "Email dan password wajib diisi"
            return
        self.is_submitting = True
        try:
            service = self._service()
            response = service.login(email, self.login_password)
        finally:
            self.is_submitting = False
        if not response.success:
            self.login_error = response.error_text
            return
        self._sync_session(service)
        self.login_password = ""
        self.login_error = ""
        return rx.redirect(HOME_ROUTE)

    @rx.event
    def logout(self):
        """End the session both remotely and locally."""
        service = self._service()
        service.logout()
        self._sync_session(service)
        return rx.redirect(LOGIN_ROUTE)

    @rx.event
    def require_login(self):
        """Page guard: send anonymous visitors to the login page."""
        if not self._session().is_authenticated:
            return rx.redirect(LOGIN_ROUTE)

    @rx.event
    def require_super_admin(self):
        """Page guard for pages only super admins may open."""
        session = self._session()
        if not session.is_authenticated:
            return rx.redirect(LOGIN_ROUTE)
        if not can_open(session.user, "data-perusahaan"):
            return [rx.toast.error("Halaman ini khusus Super Admin"), rx.redirect(HOME_ROUTE)]

    @rx.event
    def redirect_if_logged_in(self):
        if self._session().is_authenticated:
            return rx.redirect(HOME_ROUTE)

    def _session(self) -> Session:
        return Session.from_dict(self._session_data)

    def _service(self, session: Session | None = None) -> LetterService:
        return get_letter_service(session=session or self._session())

    def _sync_session(self, service: LetterService) -> bool:
        """
        Copy the service's session back into state.

        Returns:
            False when the session has ended (logout or expired token).
        """
        session = service.session
        self._session_data = session.to_dict()
        user = session.user
        self.logged_in = session.is_authenticated
        self.user_name = user.name if user else ""
        self.user_email = user.email if user else ""
        self.user_role = user.role if user else ""
        self.user_company = (user.company_name or "") if user else ""
        self.is_super_admin = session.is_super_admin
        self.menu_items = [to_menu_item_model(item) for item in menu_for(user)]
        return session.is_authenticated


class LookupState(AuthState):
    """Companies, categories and years used by selects and catalog pages."""

    companies: list[CompanyModel] = []
    categories: list[CategoryModel] = []
    years: list[str] = []
    lookup_error: str = ""

    @rx.event
    def load_lookups(self):
        """Load the lookup lists; cached by the HTTP service."""
        service = self._service()
        companies = service.list_companies()
        categories = service.list_categories()
        years = service.available_years()
        if not self._sync_session(service):
            return rx.redirect(LOGIN_ROUTE)
        errors = [r.error_text for r in (companies, categories, years) if not r.success]
        if errors:
            LOG.warning("Lookup load failed: %s", errors)
            self.lookup_error = errors[0]
            return rx.toast.error(self.lookup_error)
        self.lookup_error = ""
        self.companies = [to_company_model(company) for company in companies.data or []]
        self.categories = [to_category_model(category) for category in categories.data or []]
        self.years = [str(year) for year in years.data or []]


class LetterState(LookupState):
    """
    Letter list with filters, pagination and edit/delete dialogs.

    The full result set stays in the backend controller; only the
    visible page is pushed to the browser.
    """

    _controller: LetterListController | None = None

    # Filter form
    search: str = ""
    company_filter: str = ALL
    category_filter: str = ALL
    year_filter: str = ALL
    month_filter: str = ALL

    # Visible page
    letters: list[LetterModel] = []
    page_labels: list[str] = []
    current_page: int = 1
    current_page_label: str = "1"
    total_pages: int = 1
    total_items: int = 0
    row_offset: int = 0
    page_size: str = str(config.PAGE_SIZE)
    has_previous: bool = False
    has_next: bool = False
    summary_text: str = ""
    page_text: str = ""
    is_loading: bool = False
    error_message: str = ""

    # Edit dialog
    edit_open: bool = False
    edit_id: int = 0
    edit_reference: str = ""
    edit_subject: str = ""
    edit_recipient: str = ""

    # Delete dialog
    delete_open: bool = False
    delete_id: int = 0
    delete_reference: str = ""

    @rx.var
    def is_empty(self) -> bool:
        """Check if empty state should be shown."""
        return not self.is_loading and self.total_items == 0

    @rx.var
    def has_filters(self) -> bool:
        return bool(self.search.strip()) or any(
            value != ALL
            for value in (self.company_filter, self.category_filter, self.year_filter, self.month_filter)
        )

    @rx.event
    def on_load(self):
        """Guard the page, then load lookups and the first page of letters."""
        if not self._session().is_authenticated:
            return rx.redirect(LOGIN_ROUTE)
        self.is_loading = True
        return [LookupState.load_lookups, LetterState.fetch_letters]

    @rx.event(background=True)
    async def fetch_letters(self):
        """
        Fetch letters for the current filter form.

        Runs in the background so slow responses don't block the UI.
        Only the latest fetch is applied; earlier ones are discarded.
        """
        async with self:
            controller = self._get_controller()
            request = controller.change_filter(self._form_filter())
            service = self._service()
            self.is_loading = True
            self._sync_view()

        response = await asyncio.get_running_loop().run_in_executor(
            None, service.list_letters, request.letter_filter
        )

        async with self:
            controller = self._get_controller()
            if not controller.is_current(request):
                # Superseded; the controller logs and drops it
                controller.complete(request, response)
                return
            self.is_loading = False
            if not self._sync_session(service):
                return rx.redirect(LOGIN_ROUTE)
            if not controller.complete(request, response):
                self.error_message = controller.error or ""
                self._sync_view()
                return rx.toast.error(self.error_message)
            self.error_message = ""
            self._sync_view()

    @rx.event
    def set_search(self, value: str):
        self.search = value
        return LetterState.fetch_letters

    @rx.event
    def set_company_filter(self, value: str):
        self.company_filter = value
        return LetterState.fetch_letters

    @rx.event
    def set_category_filter(self, value: str):
        self.category_filter = value
        return LetterState.fetch_letters

    @rx.event
    def set_year_filter(self, value: str):
        self.year_filter = value
        return LetterState.fetch_letters

    @rx.event
    def set_month_filter(self, value: str):
        self.month_filter = value
        return LetterState.fetch_letters

    @rx.event
    def reset_filters(self):
        self.search = ""
        self.company_filter = ALL
        self.category_filter = ALL
        self.year_filter = ALL
        self.month_filter = ALL
        return LetterState.fetch_letters

    @rx.event
    def go_to_page(self, label: str):
        """Jump to a page label; the ellipsis and bad labels do nothing."""
        if label == ELLIPSIS or not str(label).isdigit():
            return
        self._get_controller().go_to_page(int(label))
        self._sync_view()

    @rx.event
    def previous_page(self):
        self._get_controller().go_to_page(self.current_page - 1)
        self._sync_view()

    @rx.event
    def next_page(self):
        self._get_controller().go_to_page(self.current_page + 1)
        self._sync_view()

    @rx.event
    def set_page_size(self, value: str):
        if not value.isdigit():
            return
        self._get_controller().set_page_size(int(value))
        self._sync_view()

    # Edit flow

    @rx.event
    def start_edit(self, letter_id: int):
        letter = self._find_letter(letter_id)
        if letter is None:
            return
        self.edit_id = letter.id
        self.edit_reference = letter.reference_number
        self.edit_subject = letter.subject
        self.edit_recipient = letter.recipient
        self.edit_open = True

    def set_edit_subject(self, value: str):
        self.edit_subject = value

    def set_edit_recipient(self, value: str):
        self.edit_recipient = value

    @rx.event
    def set_edit_open(self, is_open: bool):
        self.edit_open = is_open

    @rx.event
    def save_edit(self):
        """Send the edit and patch the local list without refetching."""
        subject = self.edit_subject.strip()
        recipient = self.edit_recipient.strip()
        if not subject or not recipient:
            return rx.toast.error("Perihal dan tujuan wajib diisi")
        service = self._service()
        response = service.update_letter(self.edit_id, subject, recipient)
        if not self._sync_session(service):
            return rx.redirect(LOGIN_ROUTE)
        if not response.success:
            LOG.warning("Update of letter %s failed: %s", self.edit_id, response.error_text)
            return rx.toast.error(response.error_text)
        controller = self._get_controller()
        if response.data is not None:
            controller.apply_update(response.data)
        else:
            controller.apply_edit(self.edit_id, subject, recipient)
        self.edit_open = False
        self._sync_view()
        return rx.toast.success(response.message or "Surat berhasil diperbarui")

    # Delete flow

    @rx.event
    def confirm_delete(self, letter_id: int):
        letter = self._find_letter(letter_id)
        if letter is None:
            return
        self.delete_id = letter.id
        self.delete_reference = letter.reference_number
        self.delete_open = True

    @rx.event
    def set_delete_open(self, is_open: bool):
        self.delete_open = is_open

    @rx.event
    def delete_letter(self):
        """Delete the confirmed letter and drop it from the local list."""
        service = self._service()
        response = service.delete_letter(self.delete_id)
        if not self._sync_session(service):
            return rx.redirect(LOGIN_ROUTE)
        self.delete_open = False
        if not response.success:
            LOG.warning("Delete of letter %s failed: %s", self.delete_id, response.error_text)
            return rx.toast.error(response.error_text)
        self._get_controller().apply_delete(self.delete_id)
        self._sync_view()
        return rx.toast.success(response.message or "Surat berhasil dihapus")

    def _get_controller(self) -> LetterListController:
        if self._controller is None:
            self._controller = LetterListController()
        return self._controller

    def _form_filter(self) -> LetterFilter:
        return LetterFilter.from_form(
            search=self.search,
            company=self.company_filter,
            category=self.category_filter,
            year=self.year_filter,
            month=self.month_filter,
        )

    def _find_letter(self, letter_id: int):
        return next(
            (letter for letter in self._get_controller().pager.items if letter.id == letter_id),
            None,
        )

    def _sync_view(self) -> None:
        """Push the controller's visible page into frontend vars."""
        controller = self._get_controller()
        pager = controller.pager
        self.letters = [to_letter_model(letter) for letter in controller.visible_letters]
        self.page_labels = [str(label) for label in controller.page_labels()]
        self.current_page = pager.current_page
        self.current_page_label = str(pager.current_page)
        self.total_pages = pager.total_pages
        self.total_items = pager.total_items
        self.row_offset = pager.first_index - 1 if pager.total_items else 0
        self.page_size = str(pager.page_size)
        self.has_previous = pager.has_previous
        self.has_next = pager.has_next
        self.summary_text = controller.summary_text()
        self.page_text = controller.page_text()


class NewLetterState(LookupState):
    """Form that creates a letter; the number comes back from the server."""

    company_id: str = ""
    category_id: str = ""
    subject: str = ""
    recipient: str = ""
    letter_date: str = ""
    created_number: str = ""
    form_error: str = ""
    is_saving: bool = False

    @rx.event
    def on_load(self):
        session = self._session()
        if not session.is_authenticated:
            return rx.redirect(LOGIN_ROUTE)
        self._clear_form()
        self.created_number = ""
        # Admins can only create letters for their own company
        if session.company_scope is not None:
            self.company_id = str(session.company_scope)
        return LookupState.load_lookups

    def set_company_id(self, value: str):
        self.company_id = value

    def set_category_id(self, value: str):
        self.category_id = value

    def set_subject(self, value: str):
        self.subject = value

    def set_recipient(self, value: str):
        self.recipient = value

    def set_letter_date(self, value: str):
        self.letter_date = value

    @rx.event
    def submit(self):
        """Create the letter and show the assigned reference number."""
        if not all((self.company_id, self.category_id, self.subject.strip(),
                    self.recipient.strip(), self.letter_date)):
            self.form_error = "Semua field wajib diisi"
            return
        draft = LetterDraft(
            company_id=int(self.company_id),
            category_id=int(self.category_id),
            subject=self.subject,
            recipient=self.recipient,
            letter_date=format_date_for_input(self.letter_date),
        )
        self.is_saving = True
        try:
            service = self._service()
            response = service.create_letter(draft)
        finally:
            self.is_saving = False
        if not self._sync_session(service):
            return rx.redirect(LOGIN_ROUTE)
        if not response.success:
            self.form_error = response.error_text
            return rx.toast.error(self.form_error)
        self.form_error = ""
        self.created_number = response.data.reference_number if response.data else ""
        scope = service.session.company_scope
        self._clear_form()
        if scope is not None:
            self.company_id = str(scope)
        LOG.info("Letter created: %s", self.created_number)
        return rx.toast.success(f"Surat berhasil dibuat: {self.created_number}")

    def _clear_form(self) -> None:
        self.company_id = ""
        self.category_id = ""
        self.subject = ""
        self.recipient = ""
        self.letter_date = ""
        self.form_error = ""


class ReportState(LookupState):
    """Summary report filtered by company, category, year and month."""

    company_filter: str = ALL
    category_filter: str = ALL
    year_filter: str = ALL
    month_filter: str = ALL

    total: int = 0
    by_company: list[CountRowModel] = []
    by_category: list[CountRowModel] = []
    letters: list[LetterModel] = []
    is_loading: bool = False
    error_message: str = ""

    _report_controller: ReportController | None = None

    @rx.event
    def on_load(self):
        if not self._session().is_authenticated:
            return rx.redirect(LOGIN_ROUTE)
        return [LookupState.load_lookups, ReportState.load_report]

    @rx.event
    def set_company_filter(self, value: str):
        self.company_filter = value
        return ReportState.load_report

    @rx.event
    def set_category_filter(self, value: str):
        self.category_filter = value
        return ReportState.load_report

    @rx.event
    def set_year_filter(self, value: str):
        self.year_filter = value
        return ReportState.load_report

    @rx.event
    def set_month_filter(self, value: str):
        self.month_filter = value
        return ReportState.load_report

    @rx.event(background=True)
    async def load_report(self):
        """
        Fetch the report for the current filters.

        Only the latest fetch is applied; a slow response for an earlier
        filter is discarded and a failure keeps the last good report.
        """
        async with self:
            controller = self._get_report_controller()
            request = controller.request(
                LetterFilter.from_form(
                    company=self.company_filter,
                    category=self.category_filter,
                    year=self.year_filter,
                    month=self.month_filter,
                )
            )
            service = self._service()
            self.is_loading = True

        response = await asyncio.get_running_loop().run_in_executor(
            None, service.get_report, request.letter_filter
        )

        async with self:
            controller = self._get_report_controller()
            if not controller.is_current(request):
                controller.complete(request, response)
                return
            self.is_loading = False
            if not self._sync_session(service):
                return rx.redirect(LOGIN_ROUTE)
            if not controller.complete(request, response):
                self.error_message = controller.error or ""
                return rx.toast.error(self.error_message)
            report = controller.summary
            self.error_message = ""
            self.total = report.total
            self.by_company = [to_count_row_model(row) for row in report.by_company]
            self.by_category = [to_count_row_model(row) for row in report.by_category]
            self.letters = [to_letter_model(letter) for letter in report.letters]

    def _get_report_controller(self) -> ReportController:
        if self._report_controller is None:
            self._report_controller = ReportController()
        return self._report_controller


class CatalogState(LookupState):
    """
    Create, edit and delete dialogs for categories and companies.

    An edit id of 0 means the dialog creates a new entry. After every
    successful change the lookups are reloaded from the service.
    """

    # Category dialog
    category_dialog_open: bool = False
    category_edit_id: int = 0
    category_form_name: str = ""
    category_form_code: str = ""
    category_delete_open: bool = False
    category_delete_id: int = 0
    category_delete_name: str = ""

    # Company dialog
    company_dialog_open: bool = False
    company_edit_id: int = 0
    company_form_name: str = ""
    company_form_code: str = ""
    company_form_status: str = COMPANY_ACTIVE
    company_delete_open: bool = False
    company_delete_id: int = 0
    company_delete_name: str = ""

    @rx.var
    def category_dialog_title(self) -> str:
        return "Edit Kategori" if self.category_edit_id else "Tambah Kategori"

    @rx.var
    def company_dialog_title(self) -> str:
        return "Edit Perusahaan" if self.company_edit_id else "Tambah Perusahaan"

    # Categories

    @rx.event
    def open_new_category(self):
        self.category_edit_id = 0
        self.category_form_name = ""
        self.category_form_code = ""
        self.category_dialog_open = True

    @rx.event
    def open_edit_category(self, category_id: int):
        category = next((item for item in self.categories if item.id == category_id), None)
        if category is None:
            return
        self.category_edit_id = category.id
        self.category_form_name = category.name
        self.category_form_code = category.code
        self.category_dialog_open = True

    def set_category_form_name(self, value: str):
        self.category_form_name = value

    def set_category_form_code(self, value: str):
        self.category_form_code = value.upper()

    @rx.event
    def set_category_dialog_open(self, is_open: bool):
        self.category_dialog_open = is_open

    @rx.event
    def save_category(self):
        service = self._service()
        if self.category_edit_id:
            response = service.update_category(
                self.category_edit_id, self.category_form_name, self.category_form_code
            )
        else:
            response = service.create_category(self.category_form_name, self.category_form_code)
        return self._after_change(service, response, "category_dialog_open", "Kategori disimpan")

    @rx.event
    def confirm_delete_category(self, category_id: int):
        category = next((item for item in self.categories if item.id == category_id), None)
        if category is None:
            return
        self.category_delete_id = category.id
        self.category_delete_name = category.name
        self.category_delete_open = True

    @rx.event
    def set_category_delete_open(self, is_open: bool):
        self.category_delete_open = is_open

    @rx.event
    def delete_category(self):
        service = self._service()
        response = service.delete_category(self.category_delete_id)
        return self._after_change(service, response, "category_delete_open", "Kategori dihapus")

    # Companies

    @rx.event
    def open_new_company(self):
        self.company_edit_id = 0
        self.company_form_name = ""
        self.company_form_code = ""
        self.company_form_status = COMPANY_ACTIVE
        self.company_dialog_open = True

    @rx.event
    def open_edit_company(self, company_id: int):
        company = next((item for item in self.companies if item.id == company_id), None)
        if company is None:
            return
        self.company_edit_id = company.id
        self.company_form_name = company.name
        self.company_form_code = company.code
        self.company_form_status = company.status
        self.company_dialog_open = True

    def set_company_form_name(self, value: str):
        self.company_form_name = value

    def set_company_form_code(self, value: str):
        self.company_form_code = value.upper()

    def set_company_form_status(self, value: str):
        self.company_form_status = value

    @rx.event
    def set_company_dialog_open(self, is_open: bool):
        self.company_dialog_open = is_open

    @rx.event
    def save_company(self):
        service = self._service()
        if self.company_edit_id:
            response = service.update_company(
                self.company_edit_id,
                self.company_form_name,
                self.company_form_code,
                self.company_form_status,
            )
        else:
            response = service.create_company(
                self.company_form_name, self.company_form_code, self.company_form_status
            )
        return self._after_change(service, response, "company_dialog_open", "Perusahaan disimpan")

    @rx.event
    def confirm_delete_company(self, company_id: int):
        company = next((item for item in self.companies if item.id == company_id), None)
        if company is None:
            return
        self.company_delete_id = company.id
        self.company_delete_name = company.name
        self.company_delete_open = True

    @rx.event
    def set_company_delete_open(self, is_open: bool):
        self.company_delete_open = is_open

    @rx.event
    def delete_company(self):
        service = self._service()
        response = service.delete_company(self.company_delete_id)
        return self._after_change(service, response, "company_delete_open", "Perusahaan dihapus")

    def _after_change(self, service: LetterService, response, dialog_var: str, done: str):
        """Close the dialog and reload the lookups, or report the failure."""
        if not self._sync_session(service):
            return rx.redirect(LOGIN_ROUTE)
        if not response.success:
            LOG.warning("Catalog change failed: %s", response.error_text)
            return rx.toast.error(response.error_text)
        setattr(self, dialog_var, False)
        return [LookupState.load_lookups, rx.toast.success(response.message or done)]


class DashboardState(AuthState):
    """Headline figures and the most recent letters."""

    total_letters: int = 0
    letters_this_month: int = 0
    total_companies: int = 0
    monthly: list[CountRowModel] = []
    by_company: list[CountRowModel] = []
    recent: list[LetterModel] = []
    is_loading: bool = False

    @rx.event
    def on_load(self):
        if not self._session().is_authenticated:
            return rx.redirect(LOGIN_ROUTE)
        self.is_loading = True
        return DashboardState.load_stats

    @rx.event
    def load_stats(self):
        service = self._service()
        response = service.get_stats()
        self.is_loading = False
        if not self._sync_session(service):
            return rx.redirect(LOGIN_ROUTE)
        if not response.success or response.data is None:
            LOG.warning("Dashboard load failed: %s", response.error_text)
            return rx.toast.error("Gagal memuat data dashboard")
        stats = response.data
        self.total_letters = stats.total_letters
        self.letters_this_month = stats.letters_this_month
        self.total_companies = stats.total_companies
        self.monthly = [to_count_row_model(row) for row in stats.monthly]
        self.by_company = [to_count_row_model(row) for row in stats.by_company]
        self.recent = [to_letter_model(letter) for letter in stats.recent]


class ProfileState(AuthState):
    """Profile form and password change form."""

    profile_name: str = ""
    profile_email: str = ""
    is_saving_profile: bool = False

    current_password: str = ""
    new_password: str = ""
    confirm_password: str = ""
    password_error: str = ""
    is_saving_password: bool = False

    @rx.event
    def on_load(self):
        """Refresh the profile from the service and fill the form."""
        if not self._session().is_authenticated:
            return rx.redirect(LOGIN_ROUTE)
        service = self._service()
        response = service.profile()
        if not self._sync_session(service):
            return rx.redirect(LOGIN_ROUTE)
        if not response.success:
            LOG.warning("Profile load failed: %s", response.error_text)
        self.profile_name = self.user_name
        self.profile_email = self.user_email
        self._clear_passwords()

    def set_profile_name(self, value: str):
        self.profile_name = value

    def set_profile_email(self, value: str):
        self.profile_email = value

    def set_current_password(self, value: str):
        self.current_password = value

    def set_new_password(self, value: str):
        self.new_password = value

    def set_confirm_password(self, value: str):
        self.confirm_password = value

    @rx.event
    def save_profile(self):
        self.is_saving_profile = True
        try:
            service = self._service()
            response = service.update_profile(self.profile_name, self.profile_email)
        finally:
            self.is_saving_profile = False
        if not self._sync_session(service):
            return rx.redirect(LOGIN_ROUTE)
        if not response.success:
            return rx.toast.error(response.error_text)
        self.profile_name = self.user_name
        self.profile_email = self.user_email
        return rx.toast.success(response.message or "Profil berhasil diperbarui")

    @rx.event
    def change_password(self):
        self.is_saving_password = True
        try:
            service = self._service()
            response = service.change_password(
                self.current_password, self.new_password, self.confirm_password
            )
        finally:
            self.is_saving_password = False
        if not self._sync_session(service):
            return rx.redirect(LOGIN_ROUTE)
        if not response.success:
            self.password_error = response.error_text
            return rx.toast.error(self.password_error)
        self._clear_passwords()
        return rx.toast.success(response.message or "Password berhasil diubah")

    def _clear_passwords(self) -> None:
        self.current_password = ""
        self.new_password = ""
        self.confirm_password = ""
        self.password_error = ""
