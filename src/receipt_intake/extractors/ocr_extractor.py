"""
OCR text heuristics extractor.

Extracts receipt fields from recognized text lines using fixed patterns.
Priority order is part of the contract: first pattern class wins, and within
a class the first match in document order wins.

Supported formats:
- Dates: dd.MM.yyyy, dd/MM/yyyy, yyyy-MM-dd
- Amounts: 1.234,56 / 1,234.56 (grouped), 85,00 / 85.00 (plain)
- VAT: KDV %8 : 12,50, KDV 18 20.00, VAT 20% 3.50
- Currency: TL, ₺, TRY, EUR, €, USD, $, GBP, £
"""

import logging
import re
from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..errors import AmbiguousField
from ..schemas.receipt import ExtractedFields
from .base import BaseExtractor

logger = logging.getLogger(__name__)

# Date patterns (ordered by priority)
DATE_PATTERNS = [
    # 28.12.2024, 28/12/2024
    (re.compile(r"(?<!\d)\d{2}[./]\d{2}[./]\d{4}(?!\d)"), "day_month_year"),
    # ISO format: 2024-12-28
    (re.compile(r"(?<!\d)\d{4}-\d{2}-\d{2}(?!\d)"), "iso"),
]

# Format masks a matched date must parse under
DATE_FORMATS = ("%d.%m.%Y", "%d/%m/%Y", "%Y-%m-%d")

# A number glued to more digits or separators (dates, ids) is not an amount
_AMOUNT_START = r"(?<![\d.,])"
_AMOUNT_END = r"(?!\d|[.,]\d)"

# Amount patterns (ordered by priority)
AMOUNT_PATTERNS = [
    # Grouped thousands: 1.234,56 or 1,234.56
    (
        re.compile(
            _AMOUNT_START + r"(?:\d{1,3}(?:\.\d{3})+,\d{2}|\d{1,3}(?:,\d{3})+\.\d{2})" + _AMOUNT_END
        ),
        "grouped",
    ),
    # Plain: 85,00 or 85.00
    (re.compile(_AMOUNT_START + r"\d+[.,]\d{2}" + _AMOUNT_END), "plain"),
]

# VAT lines: rate then amount
VAT_PATTERN = re.compile(
    r"\b(?:KDV|VAT)\s*%?\s*(\d{1,2})\s*%?\s*[:=]?\s*\*?\s*(\d+[.,]\d{2})(?!\d)",
    re.IGNORECASE,
)

# Letter codes may be glued to digits ("85,00TL") but not to other letters
_CODE = r"(?<![^\W\d_]){}(?![^\W\d_])"

# Currency markers (first hit in list order wins)
CURRENCY_PATTERNS = [
    (re.compile(r"₺"), "TRY"),
    (re.compile(_CODE.format("TRY")), "TRY"),
    (re.compile(_CODE.format("TL")), "TRY"),
    (re.compile(_CODE.format("EUR")), "EUR"),
    (re.compile(r"€"), "EUR"),
    (re.compile(_CODE.format("USD")), "USD"),
    (re.compile(r"\$"), "USD"),
    (re.compile(_CODE.format("GBP")), "GBP"),
    (re.compile(r"£"), "GBP"),
]


def parse_amount(amount_str: str) -> Decimal:
    """
    Parse a matched amount to Decimal.

    The last separator is the decimal separator; every other separator is
    thousands grouping.

    Raises:
        AmbiguousField: If the string is not a number
    """
    cleaned = amount_str.strip()
    if len(cleaned) < 4 or cleaned[-3] not in ".,":
        raise AmbiguousField("total", amount_str, "expected two decimal digits")
    integer_part = re.sub(r"[.,]", "", cleaned[:-3])
    try:
        return Decimal(f"{integer_part}.{cleaned[-2:]}")
    except InvalidOperation as e:
        raise AmbiguousField("total", amount_str, "not a number") from e


def parse_date(date_str: str) -> date:
    """
    Parse a matched date string under the supported format masks.

    Raises:
        AmbiguousField: If no mask yields a calendar date (e.g. 31.02.2024)
    """
    for date_format in DATE_FORMATS:
        try:
            return datetime.strptime(date_str, date_format).date()
        except ValueError:
            continue
    raise AmbiguousField("date", date_str, "not a calendar date")


class ReceiptFieldExtractor(BaseExtractor):
    """
    Extract receipt fields from OCR lines using pattern matching.

    Heuristics:
    - Merchant is the first non-empty line
    - Date and total are the first plausible matches
    - VAT is the last rate/amount pair smaller than the total
    """

    @property
    def name(self) -> str:
        return "ocr_heuristic"

    def extract(self, lines: Sequence[str], reference_currency: str) -> ExtractedFields:
        """Extract receipt fields using pattern matching."""
        text = "\n".join(lines)
        issues: list[str] = []

        merchant = self._extract_merchant(lines)

        date_result = self._extract_date(text, issues)
        amount_result = self._extract_amount(text, issues)
        total = amount_result["amount"] if amount_result else None

        vat_result = self._extract_vat(text, total) if total is not None else None

        currency = self._extract_currency(text) or reference_currency

        fields = ExtractedFields(
            currency=currency,
            merchant=merchant,
            date=date_result["date"] if date_result else None,
            total=total,
            vat_amount=vat_result["amount"] if vat_result else None,
            vat_rate=vat_result["rate"] if vat_result else None,
            base_amount=(total - vat_result["amount"]) if vat_result else None,
            date_pattern=date_result["pattern_type"] if date_result else None,
            amount_pattern=amount_result["pattern_type"] if amount_result else None,
            issues=tuple(issues),
        )

        logger.debug(
            "Extracted merchant=%r date=%s total=%s currency=%s vat=%s",
            fields.merchant,
            fields.date,
            fields.total,
            fields.currency,
            fields.vat_amount,
        )
        return fields

    def _extract_merchant(self, lines: Sequence[str]) -> Optional[str]:
        """First non-empty, trimmed line."""
        for line in lines:
            stripped = line.strip()
            if stripped:
                return stripped
        return None

    def _extract_date(self, content: str, issues: list[str]) -> dict[str, Any] | None:
        """
        Extract the receipt date.

        The first pattern that matches anywhere decides; its first match is
        the only candidate. A candidate that is not a real calendar date
        means "no date", not a fallback to the next pattern.
        """
        for pattern, pattern_type in DATE_PATTERNS:
            match = pattern.search(content)
            if not match:
                continue
            try:
                parsed = parse_date(match.group(0))
            except AmbiguousField as e:
                logger.debug("Ignoring date candidate: %s", e)
                issues.append(e.issue_code)
                return None
            return {
                "date": parsed,
                "match": match.group(0),
                "position": match.start(),
                "pattern_type": pattern_type,
            }
        return None

    def _extract_amount(self, content: str, issues: list[str]) -> dict[str, Any] | None:
        """
        Extract the total amount.

        First plausible amount on the receipt, grouped-thousands amounts
        taking priority over plain ones.
        """
        for pattern, pattern_type in AMOUNT_PATTERNS:
            match = pattern.search(content)
            if not match:
                continue
            try:
                amount = parse_amount(match.group(0))
            except AmbiguousField as e:
                logger.debug("Ignoring amount candidate: %s", e)
                issues.append(e.issue_code)
                return None
            return {
                "amount": amount,
                "match": match.group(0),
                "position": match.start(),
                "pattern_type": pattern_type,
            }
        return None

    def _extract_vat(self, content: str, total: Decimal) -> dict[str, Any] | None:
        """Extract VAT rate and amount; the last plausible line wins."""
        found = None
        for match in VAT_PATTERN.finditer(content):
            try:
                rate = Decimal(match.group(1))
                amount = parse_amount(match.group(2))
            except (AmbiguousField, InvalidOperation):
                continue
            # VAT must be smaller than the total it is part of
            if amount < total:
                found = {"rate": rate, "amount": amount, "match": match.group(0)}
        return found

    def _extract_currency(self, content: str) -> Optional[str]:
        """Detect the currency printed on the receipt."""
        for pattern, currency in CURRENCY_PATTERNS:
            if pattern.search(content):
                return currency
        return None
