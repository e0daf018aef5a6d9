"""
Fetch pipelines for the letter list and the report.

The list view reacts to three kinds of events, each an explicit call:

    change_filter(f) -> FetchRequest      filter changed, go back to page 1
    refresh()        -> FetchRequest      same filter, keep the page
    complete(request, response) -> bool   a fetch finished

The caller performs the fetch between the two steps. Fetches may
overlap; only the most recently issued request is applied, so a slow
response for a superseded filter can never overwrite newer results.
A failed response leaves the pager at its last good state.

ReportController applies the same ordering to report fetches.
"""

from dataclasses import dataclass
from typing import List

from surat_ui import config
from surat_ui.lib import logs
from surat_ui.models.common import ApiResponse, LetterFilter
from surat_ui.models.letter import Letter, ReportSummary
from surat_ui.models.pagination import ListPager, PageLabel
from surat_ui.services.letter_service import LetterService

LOG = logs.logger(__file__)


@dataclass(frozen=True, slots=True)
class FetchRequest:
    """A fetch issued by the controller; token orders requests."""

    token: int
    letter_filter: LetterFilter


class LetterListController:
    """
    Owns the letter pager and decides which fetch results to apply.

    Attributes:
        pager: Pagination over the letters matching the active filter.
        letter_filter: The active filter.
        error: Text of the last failed fetch, cleared on success.
    """

    def __init__(self, page_size: int = config.PAGE_SIZE) -> None:
        self.pager: ListPager[Letter] = ListPager(page_size=page_size)
        self.letter_filter = LetterFilter()
        self.error: str | None = None
        self.loaded = False
        self._latest_token = 0

    def change_filter(self, letter_filter: LetterFilter) -> FetchRequest:
        """Switch to a new filter; a different filter restarts at page 1."""
        if letter_filter != self.letter_filter:
            self.letter_filter = letter_filter
            self.pager.reset()
        return self.refresh()

    def refresh(self) -> FetchRequest:
        """Issue a fetch for the active filter, superseding earlier ones."""
        self._latest_token += 1
        return FetchRequest(token=self._latest_token, letter_filter=self.letter_filter)

    def is_current(self, request: FetchRequest) -> bool:
        return request.token == self._latest_token

    def complete(self, request: FetchRequest, response: ApiResponse[List[Letter]]) -> bool:
        """
        Apply a finished fetch.

        Returns:
            True when the response replaced the result set; False when it
            was stale or failed.
        """
        if not self.is_current(request):
            LOG.info(
                "Discarding stale letter fetch %s (latest %s)", request.token, self._latest_token
            )
            return False
        if not response.success:
            self.error = response.error_text
            LOG.warning("Letter fetch %s failed: %s", request.token, self.error)
            return False
        self.pager.set_full_result(response.data or [])
        self.error = None
        self.loaded = True
        LOG.info(
            "Letter fetch %s applied: %s letters, page %s/%s",
            request.token,
            self.pager.total_items,
            self.pager.current_page,
            self.pager.total_pages,
        )
        return True

    def load(self, service: LetterService, letter_filter: LetterFilter | None = None) -> bool:
        """Fetch synchronously with service and apply the result."""
        request = self.change_filter(letter_filter) if letter_filter else self.refresh()
        return self.complete(request, service.list_letters(request.letter_filter))

    # Navigation

    def go_to_page(self, page: int) -> None:
        self.pager.go_to_page(page)

    def set_page_size(self, page_size: int) -> None:
        self.pager.set_page_size(page_size)

    # Local mutations after a successful API call

    def apply_update(self, letter: Letter) -> None:
        """Replace the record with the same id, keeping the page."""
        self.pager.replace_item(lambda item: item.id == letter.id, lambda _: letter)

    def apply_edit(self, letter_id: int, subject: str, recipient: str) -> None:
        """Apply an edit whose response did not echo the record."""
        self.pager.replace_item(
            lambda item: item.id == letter_id,
            lambda item: item.with_changes(subject=subject, recipient=recipient),
        )

    def apply_delete(self, letter_id: int) -> None:
        """Remove a deleted letter, stepping back a page if it emptied this one."""
        self.pager.remove_item(lambda item: item.id == letter_id)

    # Derived view data

    @property
    def visible_letters(self) -> List[Letter]:
        return self.pager.visible_slice

    def page_labels(self) -> List[PageLabel]:
        return self.pager.page_number_labels()

    def summary_text(self) -> str:
        """Return e.g. "Menampilkan 11-20 dari 23 surat"."""
        pager = self.pager
        return f"Menampilkan {pager.first_index}-{pager.last_index} dari {pager.total_items} surat"

    def page_text(self) -> str:
        """Return e.g. "Halaman 2 dari 3"."""
        return f"Halaman {self.pager.current_page} dari {self.pager.total_pages}"


class ReportController:
    """
    Orders report fetches the same way LetterListController orders list fetches.

    Attributes:
        summary: The last report that was applied, or None before the first.
        error: Text of the last failed fetch, cleared on success.
    """

    def __init__(self) -> None:
        self.summary: ReportSummary | None = None
        self.error: str | None = None
        self._latest_token = 0

    def request(self, letter_filter: LetterFilter) -> FetchRequest:
        """Issue a report fetch for letter_filter, superseding earlier ones."""
        self._latest_token += 1
        return FetchRequest(token=self._latest_token, letter_filter=letter_filter)

    def is_current(self, request: FetchRequest) -> bool:
        return request.token == self._latest_token

    def complete(self, request: FetchRequest, response: ApiResponse[ReportSummary]) -> bool:
        """
        Apply a finished report fetch.

        Returns:
            True when the response replaced the summary; False when it was
            stale or failed.
        """
        if not self.is_current(request):
            LOG.info(
                "Discarding stale report fetch %s (latest %s)", request.token, self._latest_token
            )
            return False
        if not response.success or response.data is None:
            self.error = response.error_text
            LOG.warning("Report fetch %s failed: %s", request.token, self.error)
            return False
        self.summary = response.data
        self.error = None
        LOG.info("Report fetch %s applied: %s letters", request.token, self.summary.total)
        return True
