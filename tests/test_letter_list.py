"""Tests for the letter list fetch pipeline."""

from unittest.mock import MagicMock

from conftest import make_letter
from surat_ui.letter_list import LetterListController, ReportController
from surat_ui.models.common import ApiResponse, LetterFilter
from surat_ui.models.letter import CountRow, ReportSummary


def _letters(count: int):
    return [make_letter(i) for i in range(1, count + 1)]


class TestLastRequestWins:
    """Tests for ordering of overlapping fetches."""

    def test_stale_response_is_discarded(self):
        """A slow response for an old filter never overwrites newer results."""
        controller = LetterListController(page_size=10)
        old = controller.change_filter(LetterFilter(search="lama"))
        new = controller.change_filter(LetterFilter(search="baru"))

        assert controller.complete(new, ApiResponse.ok(_letters(3)))
        assert not controller.complete(old, ApiResponse.ok(_letters(30)))

        assert controller.pager.total_items == 3

    def test_stale_response_before_latest_is_also_discarded(self):
        """Out-of-order completion: the old one arrives first and is ignored."""
        controller = LetterListController()
        old = controller.refresh()
        new = controller.refresh()

        assert not controller.complete(old, ApiResponse.ok(_letters(30)))
        assert not controller.loaded
        assert controller.complete(new, ApiResponse.ok(_letters(5)))
        assert controller.pager.total_items == 5

    def test_tokens_increase(self):
        controller = LetterListController()
        first = controller.refresh()
        second = controller.change_filter(LetterFilter(year=2025))

        assert second.token > first.token
        assert controller.is_current(second)
        assert not controller.is_current(first)


class TestFilterChanges:
    """Tests for page handling when the filter changes."""

    def test_new_filter_returns_to_first_page(self):
        controller = LetterListController(page_size=10)
        controller.complete(controller.refresh(), ApiResponse.ok(_letters(30)))
        controller.go_to_page(3)

        request = controller.change_filter(LetterFilter(company_id=2))
        controller.complete(request, ApiResponse.ok(_letters(30)))

        assert controller.pager.current_page == 1
        assert request.letter_filter == LetterFilter(company_id=2)

    def test_same_filter_keeps_page(self):
        """Refetching with an unchanged filter keeps the position."""
        controller = LetterListController(page_size=10)
        controller.complete(controller.refresh(), ApiResponse.ok(_letters(30)))
        controller.go_to_page(3)

        request = controller.change_filter(LetterFilter())
        controller.complete(request, ApiResponse.ok(_letters(30)))

        assert controller.pager.current_page == 3


class TestFailures:
    """Tests for failed fetches."""

    def test_failure_keeps_last_good_result(self):
        controller = LetterListController(page_size=10)
        controller.complete(controller.refresh(), ApiResponse.ok(_letters(23)))
        controller.go_to_page(2)

        applied = controller.complete(controller.refresh(), ApiResponse.failure("Network error"))

        assert not applied
        assert controller.error == "Network error"
        assert controller.pager.total_items == 23
        assert controller.pager.current_page == 2

    def test_success_clears_error(self):
        controller = LetterListController()
        controller.complete(controller.refresh(), ApiResponse.failure("boom"))

        controller.complete(controller.refresh(), ApiResponse.ok(_letters(1)))

        assert controller.error is None
        assert controller.loaded


class TestLoad:
    """Tests for the synchronous load helper."""

    def test_load_calls_service_with_filter(self):
        service = MagicMock()
        service.list_letters.return_value = ApiResponse.ok(_letters(4))
        controller = LetterListController()

        assert controller.load(service, LetterFilter(search="x"))

        service.list_letters.assert_called_once_with(LetterFilter(search="x"))
        assert [letter.id for letter in controller.visible_letters] == [1, 2, 3, 4]


class TestLocalMutations:
    """Tests for edits and deletes applied without refetching."""

    def test_delete_last_item_on_last_page(self):
        controller = LetterListController(page_size=10)
        controller.complete(controller.refresh(), ApiResponse.ok(_letters(21)))
        controller.go_to_page(3)

        controller.apply_delete(21)

        assert controller.pager.current_page == 2
        assert [letter.id for letter in controller.visible_letters] == list(range(11, 21))

    def test_apply_edit_changes_only_target(self):
        controller = LetterListController()
        controller.complete(controller.refresh(), ApiResponse.ok(_letters(3)))

        controller.apply_edit(2, "Baru", "Penerima")

        letters = {letter.id: letter for letter in controller.visible_letters}
        assert (letters[2].subject, letters[2].recipient) == ("Baru", "Penerima")
        assert letters[1].subject == "Perihal 1"

    def test_apply_update_replaces_record(self):
        controller = LetterListController()
        controller.complete(controller.refresh(), ApiResponse.ok(_letters(3)))

        controller.apply_update(make_letter(3, subject="Diubah"))

        assert controller.visible_letters[2].subject == "Diubah"


class TestText:
    """Tests for summary and page text."""

    def test_summary_and_page_text(self):
        controller = LetterListController(page_size=10)
        controller.complete(controller.refresh(), ApiResponse.ok(_letters(23)))
        controller.go_to_page(2)

        assert controller.summary_text() == "Menampilkan 11-20 dari 23 surat"
        assert controller.page_text() == "Halaman 2 dari 3"
        assert controller.page_labels() == [1, 2, 3]


def _report(total: int) -> ReportSummary:
    return ReportSummary(
        letters=_letters(total),
        total=total,
        by_company=[CountRow(name="PT. EZRA", count=total)],
    )


class TestReportController:
    """Tests for ordering of overlapping report fetches."""

    def test_stale_report_is_discarded(self):
        """A slow report for an earlier year never replaces the newer one."""
        controller = ReportController()
        old = controller.request(LetterFilter(year=2024))
        new = controller.request(LetterFilter(year=2025))

        assert controller.complete(new, ApiResponse.ok(_report(4)))
        assert not controller.complete(old, ApiResponse.ok(_report(9)))

        assert controller.summary.total == 4

    def test_stale_report_arriving_first_is_ignored(self):
        controller = ReportController()
        old = controller.request(LetterFilter(month=1))
        new = controller.request(LetterFilter(month=2))

        assert not controller.complete(old, ApiResponse.ok(_report(9)))
        assert controller.summary is None
        assert controller.complete(new, ApiResponse.ok(_report(2)))
        assert controller.summary.total == 2

    def test_request_carries_filter(self):
        controller = ReportController()

        request = controller.request(LetterFilter(company_id=3))

        assert request.letter_filter.company_id == 3
        assert controller.is_current(request)

    def test_failure_keeps_last_good_report(self):
        controller = ReportController()
        controller.complete(controller.request(LetterFilter()), ApiResponse.ok(_report(5)))

        applied = controller.complete(
            controller.request(LetterFilter(year=2025)), ApiResponse.failure("Network error")
        )

        assert not applied
        assert controller.error == "Network error"
        assert controller.summary.total == 5

    def test_success_clears_error(self):
        controller = ReportController()
        controller.complete(controller.request(LetterFilter()), ApiResponse.failure("boom"))

        controller.complete(controller.request(LetterFilter()), ApiResponse.ok(_report(1)))

        assert controller.error is None
