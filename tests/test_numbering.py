"""Tests for reference number and date formatting."""

import math
from datetime import date, datetime, timezone

import pytest

from surat_ui.utils import (
    ReferenceNumber,
    format_date_for_input,
    format_date_long,
    format_date_short,
    format_reference_number,
    month_to_roman,
    parse_int,
    parse_iso,
    parse_reference_number,
)


class TestMonthToRoman:
    """Tests for month_to_roman."""

    @pytest.mark.parametrize(
        "month, expected",
        [(1, "I"), (4, "IV"), (9, "IX"), (10, "X"), (12, "XII")],
    )
    def test_valid_months(self, month, expected):
        assert month_to_roman(month) == expected

    def test_october_is_not_december(self):
        assert month_to_roman(10) != "XII"

    @pytest.mark.parametrize("month", [0, 13, -1, None, "3"])
    def test_out_of_range_falls_back_to_first_month(self, month):
        assert month_to_roman(month) == "I"


class TestParseReferenceNumber:
    """Tests for parse_reference_number."""

    def test_well_formed_number(self):
        ref = parse_reference_number("13/SP/AOS/X/2025")

        assert ref == ReferenceNumber(
            sequence=13,
            category_code="SP",
            company_code="AOS",
            month_roman="X",
            year=2025,
        )
        assert ref.is_numeric

    @pytest.mark.parametrize("text", ["bad-format", "", None, "1/SP/AOS/X", "1/SP/AOS/X/2025/extra"])
    def test_wrong_field_count_is_none(self, text):
        assert parse_reference_number(text) is None

    def test_non_numeric_fields_parse_as_nan(self):
        """Five fields are enough; numeric fields that fail become NaN."""
        ref = parse_reference_number("abc/SP/AOS/X/year")

        assert ref is not None
        assert math.isnan(ref.sequence)
        assert math.isnan(ref.year)
        assert not ref.is_numeric
        assert format_reference_number(ref) == "NaN/SP/AOS/X/NaN"

    def test_format_round_trip(self):
        assert str(parse_reference_number("7/PC/EP/III/2024")) == "7/PC/EP/III/2024"


class TestParseInt:
    """Tests for the tolerant leading-integer parse."""

    @pytest.mark.parametrize("text, expected", [("13", 13), (" 42", 42), ("13abc", 13), ("-3", -3)])
    def test_leading_integer(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "x1"])
    def test_no_integer_gives_nan(self, text):
        assert math.isnan(parse_int(text))


class TestDateFormatting:
    """Tests for the Indonesian date formatters."""

    def test_long_format(self):
        assert format_date_long("2025-01-05") == "5 Januari 2025"
        assert format_date_long("2025-08-17T10:00:00") == "17 Agustus 2025"

    def test_short_format(self):
        assert format_date_short("2025-01-05") == "5 Jan 2025"
        assert format_date_short(date(2024, 12, 31)) == "31 Des 2024"

    def test_input_format(self):
        assert format_date_for_input("2025-01-05") == "2025-01-05"
        assert format_date_for_input(datetime(2025, 3, 9, 14, 30)) == "2025-03-09"

    def test_input_format_uses_utc_calendar_date(self):
        """An instant late on the 5th in UTC+7 is still the 5th in UTC."""
        assert format_date_for_input("2025-01-05T23:30:00+07:00") == "2025-01-05"
        assert format_date_for_input("2025-01-06T02:00:00+07:00") == "2025-01-05"

    @pytest.mark.parametrize("formatter", [format_date_long, format_date_short, format_date_for_input])
    def test_unparseable_input_passes_through(self, formatter):
        assert formatter("not a date") == "not a date"
        assert formatter(None) == ""

    def test_parse_iso_accepts_zulu(self):
        assert parse_iso("2025-01-05T00:00:00Z") == datetime(2025, 1, 5, tzinfo=timezone.utc)
