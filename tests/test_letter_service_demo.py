"""Tests for the in-memory demo letter service."""

from datetime import date

import pytest

from surat_ui.data.demo_letters import (
    DEMO_COMPANIES,
    DEMO_LETTERS,
    DEMO_PASSWORD,
    DEMO_USERS,
    new_demo_store,
)
from surat_ui.models.common import LetterFilter
from surat_ui.models.letter import COMPANY_INACTIVE, LetterDraft
from surat_ui.services import get_letter_service
from surat_ui.services.letter_service_demo import DemoLetterService
from surat_ui.session import Session


class TestAuthentication:
    """Tests for login and logout."""

    def test_login_starts_session(self):
        session = Session()
        service = DemoLetterService(session)

        response = service.login("SuperAdmin@example.com ", DEMO_PASSWORD)

        assert response.success
        assert session.is_authenticated
        assert session.is_super_admin

    def test_wrong_password_is_rejected(self):
        session = Session()
        response = DemoLetterService(session).login("admin@example.com", "salah")

        assert not response.success
        assert not session.is_authenticated

    def test_logout_ends_session(self, super_admin_service):
        super_admin_service.logout()

        assert not super_admin_service.session.is_authenticated

    def test_profile_returns_session_user(self, admin_service, admin):
        assert admin_service.profile().data == admin

    def test_anonymous_calls_fail(self):
        service = DemoLetterService(Session())

        assert not service.list_letters().success
        assert not service.list_categories().success


class TestListing:
    """Tests for letter listing and filtering."""

    def test_super_admin_sees_all_letters_newest_first(self, super_admin_service):
        response = super_admin_service.list_letters()

        assert response.success
        assert response.total == len(DEMO_LETTERS)
        dates = [letter.letter_date for letter in response.data]
        assert dates == sorted(dates, reverse=True)

    def test_admin_is_scoped_to_company(self, admin_service):
        letters = admin_service.list_letters().data

        assert letters
        assert {letter.company_id for letter in letters} == {1}

    def test_search_matches_recipient(self, super_admin_service):
        letters = super_admin_service.list_letters(LetterFilter(search="bank")).data

        assert len(letters) == 3
        assert all("bank" in letter.recipient.lower() for letter in letters)

    def test_filters_combine(self, super_admin_service):
        letters = super_admin_service.list_letters(
            LetterFilter(company_id=1, category_id=1, year=2025)
        ).data

        assert [letter.reference_number for letter in letters] == ["1/SP/EP/VI/2025"]

    def test_month_filter(self, super_admin_service):
        letters = super_admin_service.list_letters(LetterFilter(year=2025, month=3)).data

        assert {letter.month for letter in letters} == {3}
        assert len(letters) == 2

    def test_results_are_copies(self, super_admin_service):
        """Mutating a listed letter must not change the store."""
        letter = super_admin_service.list_letters().data[0]
        letter.subject = "changed"

        assert super_admin_service.get_letter(letter.id).data.subject != "changed"


class TestMutations:
    """Tests for create, update and delete."""

    def test_create_assigns_next_sequence(self, super_admin_service):
        response = super_admin_service.create_letter(
            LetterDraft(
                company_id=1,
                category_id=1,
                subject="Penawaran baru",
                recipient="PT. Baru",
                letter_date="2025-10-20",
            )
        )

        assert response.success
        assert response.data.reference_number == "2/SP/EP/X/2025"
        assert response.data.company_name == "PT. EZRA"

    def test_create_requires_all_fields(self, super_admin_service):
        response = super_admin_service.create_letter(
            LetterDraft(company_id=1, category_id=1, subject=" ", recipient="x", letter_date="2025-01-01")
        )

        assert not response.success

    def test_admin_cannot_create_for_other_company(self, admin_service):
        response = admin_service.create_letter(
            LetterDraft(company_id=2, category_id=1, subject="a", recipient="b", letter_date="2025-01-01")
        )

        assert not response.success

    def test_update_changes_subject_and_recipient(self, super_admin_service):
        response = super_admin_service.update_letter(1, " Perihal baru ", "Tujuan baru")

        assert response.success
        assert response.data.subject == "Perihal baru"
        assert super_admin_service.get_letter(1).data.recipient == "Tujuan baru"

    def test_update_requires_text(self, super_admin_service):
        assert not super_admin_service.update_letter(1, "", "x").success

    def test_delete_removes_letter(self, super_admin_service):
        assert super_admin_service.delete_letter(1).success

        assert not super_admin_service.get_letter(1).success
        assert super_admin_service.list_letters().total == len(DEMO_LETTERS) - 1

    def test_admin_cannot_delete_other_company_letter(self, admin_service):
        other = next(letter for letter in DEMO_LETTERS if letter.company_id != 1)

        assert not admin_service.delete_letter(other.id).success

    def test_fixtures_are_not_mutated(self, super_admin_service):
        super_admin_service.delete_letter(1)

        assert any(letter.id == 1 for letter in DEMO_LETTERS)


class TestLookupsAndReport:
    """Tests for lookup lists and the summary report."""

    def test_years_descending(self, super_admin_service):
        assert super_admin_service.available_years().data == [2025, 2024]

    def test_admin_sees_only_own_company(self, admin_service):
        companies = admin_service.list_companies().data

        assert [company.id for company in companies] == [1]

    def test_report_counts(self, super_admin_service):
        report = super_admin_service.get_report().data

        assert report.total == len(DEMO_LETTERS)
        assert [(row.name, row.count) for row in report.by_company] == [
            ("PT. EZRA", 5),
            ("CV. ALFA OMEGA", 4),
            ("CV. STIGMA PRATAMA", 4),
        ]
        assert [(row.name, row.count) for row in report.by_category] == [
            ("Penawaran", 6),
            ("Lain-lain", 4),
            ("Pencairan", 3),
        ]

    def test_report_ignores_search(self, super_admin_service):
        report = super_admin_service.get_report(LetterFilter(search="bank", year=2024)).data

        assert report.total == 2


class TestCompanies:
    """Tests for company management."""

    def test_create_company(self, super_admin_service):
        response = super_admin_service.create_company(" PT. Baru ", "pb")

        assert response.success
        assert (response.data.name, response.data.code) == ("PT. Baru", "PB")
        assert response.data.id == len(DEMO_COMPANIES) + 1
        assert "PB" in [company.code for company in super_admin_service.list_companies().data]

    def test_duplicate_code_is_rejected(self, super_admin_service):
        response = super_admin_service.create_company("PT. Lain", "ep")

        assert not response.success
        assert response.error == "Kode perusahaan sudah digunakan"

    def test_name_and_code_required(self, super_admin_service):
        assert not super_admin_service.create_company(" ", "XX").success
        assert not super_admin_service.create_company("PT. X", "").success

    def test_invalid_status_is_rejected(self, super_admin_service):
        assert not super_admin_service.create_company("PT. X", "X", status="arsip").success

    def test_admin_cannot_manage_companies(self, admin_service):
        assert not admin_service.create_company("PT. X", "X").success
        assert not admin_service.update_company(1, "PT. X", "EP").success
        assert not admin_service.delete_company(1).success

    def test_update_company_renames_letters(self, super_admin_service):
        response = super_admin_service.update_company(2, "CV. ALFA", "AOS", COMPANY_INACTIVE)

        assert response.success
        assert not response.data.is_active
        letters = super_admin_service.list_letters(LetterFilter(company_id=2)).data
        assert {letter.company_name for letter in letters} == {"CV. ALFA"}
        assert 2 not in [company.id for company in super_admin_service.list_companies(active_only=True).data]

    def test_update_may_keep_own_code(self, super_admin_service):
        assert super_admin_service.update_company(1, "PT. EZRA Baru", "EP").success

    def test_update_to_taken_code_is_rejected(self, super_admin_service):
        assert not super_admin_service.update_company(1, "PT. EZRA", "AOS").success

    def test_company_with_letters_cannot_be_deleted(self, super_admin_service):
        response = super_admin_service.delete_company(1)

        assert not response.success
        assert any(company.id == 1 for company in super_admin_service.list_companies().data)

    def test_delete_unused_company(self, super_admin_service):
        created = super_admin_service.create_company("PT. Sementara", "TMP").data

        assert super_admin_service.delete_company(created.id).success
        assert not super_admin_service.delete_company(created.id).success

    def test_fixtures_are_not_mutated(self, super_admin_service):
        super_admin_service.update_company(1, "Diganti", "EP")

        assert DEMO_COMPANIES[0].name == "PT. EZRA"


class TestCategories:
    """Tests for category management."""

    def test_admin_can_create_category(self, admin_service):
        response = admin_service.create_category("Undangan", "und")

        assert response.success
        assert response.data.code == "UND"
        assert len(admin_service.list_categories().data) == 4

    def test_duplicate_code_is_rejected(self, super_admin_service):
        assert not super_admin_service.create_category("Penawaran Lagi", "SP").success

    def test_update_category_renames_letters(self, super_admin_service):
        assert super_admin_service.update_category(3, "Lainnya", "LL").success

        letters = super_admin_service.list_letters(LetterFilter(category_id=3)).data
        assert {letter.category_name for letter in letters} == {"Lainnya"}

    def test_missing_category(self, super_admin_service):
        assert not super_admin_service.update_category(99, "X", "X").success
        assert not super_admin_service.delete_category(99).success

    def test_category_in_use_cannot_be_deleted(self, super_admin_service):
        assert not super_admin_service.delete_category(1).success

    def test_delete_unused_category(self, super_admin_service):
        created = super_admin_service.create_category("Undangan", "UND").data

        assert super_admin_service.delete_category(created.id).success
        assert created.id not in [category.id for category in super_admin_service.list_categories().data]

    def test_new_category_code_is_used_in_numbers(self, super_admin_service):
        category = super_admin_service.create_category("Undangan", "UND").data

        letter = super_admin_service.create_letter(
            LetterDraft(company_id=1, category_id=category.id, subject="s", recipient="r", letter_date="2025-02-03")
        ).data

        assert letter.reference_number == "1/UND/EP/II/2025"


class TestProfile:
    """Tests for profile updates and password changes."""

    def test_update_profile_refreshes_session(self, admin_service):
        response = admin_service.update_profile(" Admin Baru ", "baru@example.com")

        assert response.success
        assert admin_service.session.user.name == "Admin Baru"
        assert admin_service.profile().data.email == "baru@example.com"

    def test_update_profile_rejects_taken_email(self, admin_service):
        response = admin_service.update_profile("Admin", "superadmin@example.com")

        assert not response.success
        assert admin_service.session.user.email == "admin@example.com"

    def test_update_profile_requires_fields(self, admin_service):
        assert not admin_service.update_profile("", "a@x").success

    def test_change_password_then_login(self):
        store = new_demo_store()
        service = DemoLetterService(Session(), store=store)
        service.login("admin@example.com", DEMO_PASSWORD)

        response = service.change_password(DEMO_PASSWORD, "rahasia1", "rahasia1")

        assert response.success
        fresh = DemoLetterService(Session(), store=store)
        assert not fresh.login("admin@example.com", DEMO_PASSWORD).success
        assert fresh.login("admin@example.com", "rahasia1").success

    @pytest.mark.parametrize(
        "current, new, confirm, error",
        [
            ("", "rahasia1", "rahasia1", "Semua field password harus diisi"),
            (DEMO_PASSWORD, "abc", "abc", "Password baru minimal 6 karakter"),
            (DEMO_PASSWORD, "rahasia1", "rahasia2", "Password baru dan konfirmasi tidak sama"),
            ("salah123", "rahasia1", "rahasia1", "Password saat ini salah"),
        ],
    )
    def test_change_password_validation(self, admin_service, current, new, confirm, error):
        assert admin_service.change_password(current, new, confirm).error == error

    def test_fixture_users_are_not_mutated(self, admin_service):
        admin_service.update_profile("Diganti", "diganti@example.com")

        assert DEMO_USERS[1].name == "Admin PT EZRA"


class TestStats:
    """Tests for the dashboard figures."""

    def test_totals_and_recent(self, super_admin_service):
        stats = super_admin_service.get_stats().data

        assert stats.total_letters == len(DEMO_LETTERS)
        assert stats.total_companies == len(DEMO_COMPANIES)
        assert len(stats.recent) == 5
        assert stats.recent[0].letter_date == max(letter.letter_date for letter in DEMO_LETTERS)

    def test_monthly_counts_last_twelve_months(self, super_admin):
        service = DemoLetterService(
            Session(token="t", user=super_admin), today=lambda: date(2025, 3, 15)
        )

        stats = service.get_stats().data

        assert len(stats.monthly) == 12
        assert stats.monthly[0].name == "Apr 2024"
        assert stats.monthly[-1].name == "Mar 2025"
        assert stats.letters_this_month == 2
        assert sum(row.count for row in stats.monthly) == 6

    def test_admin_stats_are_scoped(self, admin_service):
        stats = admin_service.get_stats().data

        assert stats.total_companies == 1
        assert [row.name for row in stats.by_company] == ["PT. EZRA"]

    def test_anonymous_is_rejected(self):
        assert not DemoLetterService(Session()).get_stats().success

class TestRegistry:
    """Tests for the service factory."""

    def test_demo_services_share_letters(self, super_admin):
        first = get_letter_service("demo", Session(token="t", user=super_admin))
        second = get_letter_service("demo", Session(token="t", user=super_admin))
        created = first.create_letter(
            LetterDraft(company_id=3, category_id=2, subject="s", recipient="r", letter_date="2025-11-03")
        ).data

        assert second.get_letter(created.id).success
        second.delete_letter(created.id)

    def test_demo_services_share_categories(self, admin):
        first = get_letter_service("demo", Session(token="t", user=admin))
        second = get_letter_service("demo", Session(token="t", user=admin))
        created = first.create_category("Bersama", "BSM").data

        assert created.id in [category.id for category in second.list_categories().data]
        second.delete_category(created.id)

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            get_letter_service("nope")
