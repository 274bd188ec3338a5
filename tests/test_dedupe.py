"""Tests for dedupe module - duplicate fingerprint generation."""

from datetime import date
from decimal import Decimal

import pytest

from receipt_intake.extractors import ReceiptFieldExtractor
from receipt_intake.schemas.dedupe import (
    FINGERPRINT_LENGTH,
    canonical_fingerprint_string,
    fingerprint,
    is_fingerprint,
)
from receipt_intake.schemas.receipt import ExtractedFields


class TestCanonicalString:
    """Tests for the hashed canonical form."""

    def test_basic(self):
        """Merchant, UTC midnight epoch, two-decimal total and currency."""
        canonical = canonical_fingerprint_string(
            "STARBUCKS", date(2024, 12, 28), Decimal("85"), "TRY"
        )
        assert canonical == "STARBUCKS|1735344000|85.00|TRY"

    def test_sentinels(self):
        """Missing fields use fixed placeholders."""
        assert canonical_fingerprint_string(None, None, None, "EUR") == "unknown|0|0.00|EUR"

    def test_amount_normalization(self):
        """Amount is normalized to 2 decimal places."""
        d = date(2024, 1, 1)
        forms = [Decimal("35.7"), "35.70", 35.70, "35,70"]
        canonicals = {canonical_fingerprint_string("A", d, total, "TRY") for total in forms}
        assert canonicals == {"A|1704067200|35.70|TRY"}


class TestFingerprint:
    """Tests for the SHA-256 fingerprint."""

    def _fields(self, **overrides):
        values = {
            "currency": "TRY",
            "merchant": "STARBUCKS",
            "date": date(2024, 12, 28),
            "total": Decimal("85.00"),
        }
        values.update(overrides)
        return ExtractedFields(**values)

    def test_format(self):
        """64 lowercase hex characters."""
        fp = fingerprint(self._fields(), "TRY")

        assert len(fp) == FINGERPRINT_LENGTH
        assert fp == fp.lower()
        assert is_fingerprint(fp)

    def test_deterministic(self):
        """Same fields always hash the same."""
        assert fingerprint(self._fields(), "TRY") == fingerprint(self._fields(), "TRY")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"total": Decimal("85.01")},
            {"date": date(2024, 12, 29)},
            {"merchant": "STARBUCKS KADIKOY"},
        ],
    )
    def test_any_key_field_changes_fingerprint(self, overrides):
        """Merchant, date and total all feed the hash."""
        assert fingerprint(self._fields(**overrides), "TRY") != fingerprint(self._fields(), "TRY")

    def test_reference_currency_feeds_hash(self):
        """The reference currency is part of the key."""
        assert fingerprint(self._fields(), "EUR") != fingerprint(self._fields(), "TRY")

    def test_detected_currency_ignored(self):
        """A currency read off the slip does not change the key."""
        assert fingerprint(self._fields(currency="USD"), "TRY") == fingerprint(self._fields(), "TRY")

    def test_ignores_non_key_fields(self):
        """VAT and issues do not affect the fingerprint."""
        noisy = self._fields(vat_amount=Decimal("7.73"), issues=("ambiguous_field:date",))
        assert fingerprint(noisy, "TRY") == fingerprint(self._fields(), "TRY")

    def test_all_fields_missing(self):
        """Even an empty extraction has a valid fingerprint."""
        fp = fingerprint(ExtractedFields(currency="TRY"), "TRY")
        assert is_fingerprint(fp)

    def test_stable_under_ocr_noise(self, coffee_lines):
        """Extra noise lines do not change the fingerprint."""
        extractor = ReceiptFieldExtractor()
        clean = extractor.extract(coffee_lines, "TRY")
        noisy = extractor.extract(coffee_lines + ["  IYI   GUNLER ", "TESEKKURLER"], "TRY")

        assert fingerprint(clean, "TRY") == fingerprint(noisy, "TRY")

    @pytest.mark.parametrize("noise", ["PUAN 10 TL", "PUAN 10TL", "WWW.CAFE$NERO.COM", "€"])
    def test_stable_under_currency_marker_noise(self, noise):
        """Currency markers on unrelated lines do not change the fingerprint."""
        extractor = ReceiptFieldExtractor()
        lines = ["CAFE NERO", "28.12.2024", "85,00"]
        clean = extractor.extract(lines, "EUR")
        noisy = extractor.extract(lines + [noise], "EUR")

        assert fingerprint(clean, "EUR") == fingerprint(noisy, "EUR")


class TestIsFingerprint:
    """Tests for fingerprint shape check."""

    @pytest.mark.parametrize("value", [None, "", "abc", "G" * 64, "A" * 64, "a" * 63])
    def test_rejects(self, value):
        """Wrong length or alphabet is rejected."""
        assert not is_fingerprint(value)

    def test_accepts(self):
        """Lowercase hex of the right length is accepted."""
        assert is_fingerprint("0123456789abcdef" * 4)
