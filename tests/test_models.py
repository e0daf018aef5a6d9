"""Tests for domain models, API envelopes and filters."""

import pytest

from conftest import make_letter
from surat_ui.models.common import ApiResponse, LetterFilter
from surat_ui.models.letter import (
    Category,
    Company,
    LetterDraft,
    deserialize_company,
    deserialize_letter,
    deserialize_user,
    serialize_category,
    serialize_company,
    serialize_letter,
    serialize_user,
)
from surat_ui.models.reflex_models import to_company_model, to_letter_model


class TestLetter:
    """Tests for the Letter dataclass."""

    def test_derived_fields(self):
        letter = make_letter(1, reference_number="13/SP/AOS/X/2025", letter_date="2025-10-06")

        assert letter.reference.company_code == "AOS"
        assert (letter.year, letter.month) == (2025, 10)
        assert letter.formatted_date() == "6 Oktober 2025"
        assert letter.formatted_short_date() == "6 Okt 2025"

    def test_empty_date(self):
        letter = make_letter(1, letter_date="")

        assert letter.year is None
        assert letter.formatted_date() == "-"

    def test_malformed_reference(self):
        assert make_letter(1, reference_number="bad-format").reference is None

    def test_with_changes_returns_copy(self):
        letter = make_letter(1)
        changed = letter.with_changes(subject="Baru")

        assert changed.subject == "Baru"
        assert letter.subject == "Perihal 1"

    def test_serialize_adds_display_dates(self):
        data = serialize_letter(make_letter(1, letter_date="2025-01-05"))

        assert data["formatted_date"] == "5 Januari 2025"
        assert data["formatted_short_date"] == "5 Jan 2025"


class TestDeserialization:
    """Tests for mapping API records to dataclasses."""

    def test_letter(self):
        letter = deserialize_letter(
            {
                "id": "3",
                "nomor_surat": "1/PC/EP/II/2025",
                "perusahaan_id": "1",
                "kategori_id": 2,
                "perihal": "Pencairan",
                "tujuan": "Bank",
                "tanggal": "2025-02-01",
                "bukti_file": None,
            }
        )

        assert letter.id == 3
        assert letter.company_id == 1
        assert letter.category_id == 2
        assert letter.evidence_file is None

    def test_company_defaults_to_active(self):
        company = deserialize_company({"id": 1, "nama": "PT. EZRA", "kode": "EP"})

        assert company.is_active

    def test_user_round_trip(self, admin):
        assert deserialize_user(serialize_user(admin)) == admin


class TestLetterDraft:
    """Tests for the create-letter draft."""

    def test_missing_fields(self):
        draft = LetterDraft(company_id=1, category_id=None, subject=" ", recipient="x", letter_date="")

        assert draft.missing_fields() == ["category_id", "subject", "letter_date"]

    def test_payload_uses_api_names(self):
        draft = LetterDraft(company_id=1, category_id=2, subject=" a ", recipient="b ", letter_date="2025-01-01")

        assert draft.to_payload() == {
            "perusahaan_id": 1,
            "kategori_id": 2,
            "perihal": "a",
            "tujuan": "b",
            "tanggal": "2025-01-01",
        }


class TestApiResponse:
    """Tests for the response envelope."""

    def test_success_payload(self):
        response = ApiResponse.from_payload({"success": True, "data": [1], "total": 1})

        assert response.success
        assert response.data == [1]
        assert response.total == 1

    def test_failure_payload(self):
        response = ApiResponse.from_payload({"success": False, "error": "Nope"})

        assert not response.success
        assert response.error_text == "Nope"

    @pytest.mark.parametrize("payload", [None, [], "text"])
    def test_invalid_payload(self, payload):
        assert ApiResponse.from_payload(payload).error == "Invalid response"


class TestLetterFilter:
    """Tests for the list filter."""

    def test_from_form_treats_all_as_none(self):
        letter_filter = LetterFilter.from_form(search=" x ", company="all", category="2", year="2025", month="all")

        assert letter_filter == LetterFilter(search="x", category_id=2, year=2025)

    def test_to_params(self):
        params = LetterFilter(search="x", company_id=1, month=3).to_params()

        assert params == {"search": "x", "perusahaan": "1", "bulan": "3"}

    def test_empty(self):
        assert LetterFilter.from_form().is_empty
        assert not LetterFilter(year=2025).is_empty


class TestCatalogPayloads:
    """Tests for company and category request bodies."""

    def test_company_payload(self):
        company = Company(id=4, name="PT. Baru", code="PB", status="tidak_aktif")

        assert serialize_company(company) == {"nama": "PT. Baru", "kode": "PB", "status": "tidak_aktif"}

    def test_category_payload(self):
        assert serialize_category(Category(id=1, name="Penawaran", code="SP")) == {
            "nama": "Penawaran",
            "kode": "SP",
        }


class TestViewModels:
    """Tests for the conversion into Reflex view models."""

    def test_evidence_file_link(self):
        letter = make_letter(1, evidence_file="https://files.example.com/bukti/1.pdf")

        assert to_letter_model(letter).evidence_file == "https://files.example.com/bukti/1.pdf"

    def test_missing_evidence_file_is_empty(self):
        letter = deserialize_letter(
            {"id": 3, "nomor_surat": "1/SP/EP/I/2025", "tanggal": "2025-01-05", "bukti_file": None}
        )

        model = to_letter_model(letter)

        assert model.evidence_file == ""
        assert model.formatted_short_date == "5 Jan 2025"

    def test_company_model_has_string_value(self):
        model = to_company_model(Company(id=2, name="CV. ALFA OMEGA", code="AOS"))

        assert model.value == "2"
        assert model.status == "aktif"
