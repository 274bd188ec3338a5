"""
SSOT (Single Source of Truth) schemas for the pipeline.

These canonical schemas are the ONLY models used across all modules.
No duplicated "near-same" models allowed.
"""

from .dedupe import (
    FINGERPRINT_LENGTH,
    FINGERPRINT_SEPARATOR,
    UNKNOWN_DATE,
    UNKNOWN_MERCHANT,
    UNKNOWN_TOTAL,
    canonical_fingerprint_string,
    fingerprint,
    is_fingerprint,
)
from .receipt import (
    ExtractedFields,
    ReceiptRecord,
    ReceiptStatus,
    ScoreResult,
)

__all__ = [
    # Receipt (canonical pipeline schema)
    "ExtractedFields",
    "ScoreResult",
    "ReceiptRecord",
    "ReceiptStatus",
    # Dedupe
    "fingerprint",
    "canonical_fingerprint_string",
    "is_fingerprint",
    "FINGERPRINT_LENGTH",
    "FINGERPRINT_SEPARATOR",
    "UNKNOWN_MERCHANT",
    "UNKNOWN_DATE",
    "UNKNOWN_TOTAL",
]
