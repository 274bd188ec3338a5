"""Tests for receipt field extraction."""

from datetime import date
from decimal import Decimal

import pytest

from receipt_intake.errors import ISSUE_AMBIGUOUS_DATE, AmbiguousField, ExtractionFailure
from receipt_intake.extractors import (
    ReceiptFieldExtractor,
    parse_amount,
    parse_date,
    require_usable_text,
)


@pytest.fixture
def extractor():
    return ReceiptFieldExtractor()


class TestParseHelpers:
    """Tests for amount and date parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("85,00", Decimal("85.00")),
            ("85.00", Decimal("85.00")),
            ("1.234,56", Decimal("1234.56")),
            ("1,234.56", Decimal("1234.56")),
            ("12.345.678,90", Decimal("12345678.90")),
        ],
    )
    def test_parse_amount(self, raw, expected):
        """The last separator is decimal, the rest are grouping."""
        assert parse_amount(raw) == expected

    def test_parse_amount_rejects_garbage(self):
        """Strings without two decimals are ambiguous."""
        with pytest.raises(AmbiguousField):
            parse_amount("85")

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("28.12.2024", date(2024, 12, 28)),
            ("05/03/2024", date(2024, 3, 5)),
            ("2024-12-28", date(2024, 12, 28)),
        ],
    )
    def test_parse_date(self, raw, expected):
        """Dates are read day-first or ISO."""
        assert parse_date(raw) == expected

    def test_parse_date_invalid_calendar_date(self):
        """February 31st is not a date."""
        with pytest.raises(AmbiguousField) as excinfo:
            parse_date("31.02.2024")
        assert excinfo.value.issue_code == ISSUE_AMBIGUOUS_DATE


class TestRequireUsableText:
    """Tests for the no-text guard."""

    @pytest.mark.parametrize("lines", [None, [], ["", "   "], "\n\n"])
    def test_no_text(self, lines):
        """Missing or blank OCR output is an extraction failure."""
        with pytest.raises(ExtractionFailure):
            require_usable_text(lines)

    def test_string_is_split(self):
        """A single string is treated as newline-separated lines."""
        assert require_usable_text("A\nB") == ["A", "B"]

    def test_can_extract(self, extractor):
        """can_extract mirrors the guard."""
        assert extractor.can_extract(["STARBUCKS"])
        assert not extractor.can_extract([])


class TestReceiptFieldExtractor:
    """Tests for the pattern-based extractor."""

    def test_name(self, extractor):
        """Extractor reports its name."""
        assert extractor.name == "ocr_heuristic"

    def test_coffee_receipt(self, extractor, coffee_lines):
        """Complete extraction of a simple slip."""
        fields = extractor.extract(coffee_lines, "USD")

        assert fields.merchant == "STARBUCKS"
        assert fields.date == date(2024, 12, 28)
        assert fields.total == Decimal("85.00")
        assert fields.currency == "TRY"
        assert fields.date_pattern == "day_month_year"
        assert fields.amount_pattern == "plain"
        assert fields.issues == ()

    def test_merchant_first_non_empty_line(self, extractor):
        """Leading blank lines are skipped and the merchant is trimmed."""
        fields = extractor.extract(["", "   ", "  KAHVE DÜNYASI  ", "10,00"], "TRY")
        assert fields.merchant == "KAHVE DÜNYASI"

    def test_date_pattern_priority(self, extractor):
        """Day-first dates win over ISO dates regardless of position."""
        fields = extractor.extract(["SHOP", "2024-01-05", "28.12.2024"], "TRY")
        assert fields.date == date(2024, 12, 28)

    def test_iso_date_fallback(self, extractor):
        """ISO dates are used when no day-first date exists."""
        fields = extractor.extract(["SHOP", "2024-01-05 14:30"], "TRY")
        assert fields.date == date(2024, 1, 5)
        assert fields.date_pattern == "iso"

    def test_invalid_date_is_absent(self, extractor):
        """An impossible date yields no date, not a later candidate."""
        fields = extractor.extract(["SHOP", "31.02.2024", "2024-01-05", "10,00"], "TRY")

        assert fields.date is None
        assert ISSUE_AMBIGUOUS_DATE in fields.issues

    def test_grouped_amount_priority(self, extractor):
        """Grouped thousands win over an earlier plain amount."""
        fields = extractor.extract(["SHOP", "EKMEK 12,50", "TOPLAM 1.234,56"], "TRY")
        assert fields.total == Decimal("1234.56")
        assert fields.amount_pattern == "grouped"

    def test_first_plain_amount_wins(self, extractor):
        """Among plain amounts the first in document order is the total."""
        fields = extractor.extract(["SHOP", "SU 5,00", "TOPLAM 15,00"], "TRY")
        assert fields.total == Decimal("5.00")

    def test_date_is_not_an_amount(self, extractor):
        """Fragments of a date are never read as the total."""
        fields = extractor.extract(["SHOP", "28.12.2024", "TOPLAM 7.50"], "TRY")
        assert fields.total == Decimal("7.50")

    def test_no_amount(self, extractor):
        """Receipts without amounts have no total."""
        fields = extractor.extract(["SHOP", "TEŞEKKÜRLER"], "TRY")
        assert fields.total is None
        assert fields.vat_amount is None

    def test_vat_and_base_amount(self, extractor):
        """VAT line gives rate, amount and the net base."""
        lines = ["MIGROS", "28.12.2024", "TOPLAM 118,00", "KDV %18 : 18,00"]
        fields = extractor.extract(lines, "TRY")

        assert fields.total == Decimal("118.00")
        assert fields.vat_rate == Decimal("18")
        assert fields.vat_amount == Decimal("18.00")
        assert fields.base_amount == Decimal("100.00")

    def test_vat_not_larger_than_total(self, extractor):
        """A VAT candidate at or above the total is ignored."""
        fields = extractor.extract(["SHOP", "TOPLAM 10,00", "KDV 18 25,00"], "TRY")
        assert fields.vat_amount is None
        assert fields.base_amount is None

    @pytest.mark.parametrize(
        "marker,expected",
        [("TL", "TRY"), ("₺", "TRY"), ("EUR", "EUR"), ("€", "EUR"), ("USD", "USD"), ("GBP", "GBP")],
    )
    def test_currency_markers(self, extractor, marker, expected):
        """Printed currency overrides the reference."""
        fields = extractor.extract(["SHOP", f"12,00 {marker}"], "JPY")
        assert fields.currency == expected

    @pytest.mark.parametrize(
        "line,expected",
        [("85,00TL", "TRY"), ("85,00EUR", "EUR"), ("TOPLAM:85,00USD", "USD")],
    )
    def test_currency_code_glued_to_amount(self, extractor, line, expected):
        """Codes written straight after the amount are recognized."""
        fields = extractor.extract(["STARBUCKS", "28.12.2024", line], "JPY")
        assert fields.currency == expected

    def test_currency_code_inside_word_ignored(self, extractor):
        """Letters around a code mean it is part of a word."""
        fields = extractor.extract(["ATLAS KITAPEVI", "SEURAT", "12,00"], "JPY")
        assert fields.currency == "JPY"

    def test_reference_currency_fallback(self, extractor):
        """Without a marker the reference currency is used."""
        fields = extractor.extract(["SHOP", "12,00"], "TRY")
        assert fields.currency == "TRY"

    def test_fuel_receipt(self, extractor, fuel_lines):
        """Volume amount does not beat the grouped total."""
        fields = extractor.extract(fuel_lines, "TRY")

        assert fields.merchant == "SHELL"
        assert fields.total == Decimal("1500.00")
        assert fields.date == date(2024, 12, 28)
