"""
Duplicate fingerprint generation (CRITICAL).

This module defines THE deterministic fingerprint function for receipts.
This is the ONLY way to compute duplicate keys in the system.

Canonical string:
    {merchant|unknown}|{epoch seconds of date|0}|{total with 2 decimals|0.00}|{currency}

Fingerprint:
    SHA256(canonical string), 64 lowercase hex characters

The fingerprint must be:
- Stable: Same merchant/date/total/currency always produce the same key,
  whatever OCR noise sits elsewhere on the slip
- Coarse: It is meant to catch re-scans of the same physical receipt
- Opaque: Callers use it as a lookup key only; the index of prior
  fingerprints belongs to the persistent receipt store
"""

import calendar
import hashlib
from datetime import date
from decimal import Decimal
from typing import Optional

from .receipt import ExtractedFields

# ============================================================================
# SSOT Constants for Fingerprint Generation
# ============================================================================

FINGERPRINT_SEPARATOR = "|"

# Sentinels for missing fields
UNKNOWN_MERCHANT = "unknown"
UNKNOWN_DATE = "0"
UNKNOWN_TOTAL = "0.00"

FINGERPRINT_LENGTH = 64


def _date_to_epoch_seconds(value: date) -> int:
    """Seconds since the epoch of the date at 00:00 UTC."""
    return calendar.timegm(value.timetuple())


def _normalize_total(total: Decimal | str | float) -> str:
    """
    Normalize total to 2 decimal places with dot separator.

    Args:
        total: Amount in various formats

    Returns:
        Normalized amount string
    """
    if isinstance(total, str):
        total = Decimal(total.replace(",", "."))
    elif isinstance(total, float):
        total = Decimal(str(total))
    elif not isinstance(total, Decimal):
        raise ValueError(f"total must be Decimal, str, or float, got: {type(total)}")
    return f"{total:.2f}"


def canonical_fingerprint_string(
    merchant: Optional[str],
    receipt_date: Optional[date],
    total: Decimal | str | float | None,
    currency: str,
) -> str:
    """
    Build the canonical string hashed into a fingerprint.

    Examples:
        >>> canonical_fingerprint_string("STARBUCKS", date(2024, 12, 28), Decimal("85"), "TRY")
        'STARBUCKS|1735344000|85.00|TRY'
        >>> canonical_fingerprint_string(None, None, None, "TRY")
        'unknown|0|0.00|TRY'
    """
    parts = [
        merchant if merchant else UNKNOWN_MERCHANT,
        str(_date_to_epoch_seconds(receipt_date)) if receipt_date else UNKNOWN_DATE,
        _normalize_total(total) if total is not None else UNKNOWN_TOTAL,
        currency,
    ]
    return FINGERPRINT_SEPARATOR.join(parts)


def fingerprint(fields: ExtractedFields, reference_currency: str) -> str:
    """
    Compute the duplicate fingerprint of extracted receipt fields.

    The currency part is always the caller's reference currency. A currency
    marker detected on the slip is display data only: stray markers on
    unrelated lines must not change the key.

    Args:
        fields: Extracted receipt fields
        reference_currency: ISO 4217 code from the user's preferences

    Returns:
        64-character lowercase hex SHA256 hash
    """
    canonical = canonical_fingerprint_string(
        merchant=fields.merchant,
        receipt_date=fields.date,
        total=fields.total,
        currency=reference_currency,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def is_fingerprint(value: Optional[str]) -> bool:
    """Check if a string looks like a receipt fingerprint."""
    if not value or len(value) != FINGERPRINT_LENGTH:
        return False
    return all(c in "0123456789abcdef" for c in value)
