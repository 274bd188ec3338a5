"""
Canonical receipt intake objects (SSOT).

These are THE data types that flow through the pipeline:
ExtractedFields and ScoreResult are produced by the extractor and the scorer,
ReceiptRecord is the single output aggregate. Records are immutable; any
re-classification produces a new record.
"""

import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class ReceiptStatus(str, Enum):
    """
    Receipt status state machine.

    PROCESSING: Internal, OCR/intake in progress
    NEW: High confidence, accepted pending the application's own promotion policy
    PENDING_REVIEW: Uncertain extraction or classification, user must confirm
    APPROVED: User confirmed (terminal)
    REJECTED: User rejected (terminal)
    ERROR: No usable text
    """

    PROCESSING = "processing"
    NEW = "new"
    PENDING_REVIEW = "pending_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (ReceiptStatus.APPROVED, ReceiptStatus.REJECTED)


@dataclass(frozen=True)
class ExtractedFields:
    """
    Fields parsed from the raw OCR lines.

    Every field is independently optional; absence is never an error.
    Amounts use Decimal with dot as decimal separator.
    """

    currency: str
    merchant: Optional[str] = None
    date: Optional[datetime.date] = None
    total: Optional[Decimal] = None

    # Tax details
    vat_amount: Optional[Decimal] = None
    vat_rate: Optional[Decimal] = None  # As percentage, e.g. 20 for 20%
    base_amount: Optional[Decimal] = None

    # Which pattern produced the value (debug / confidence hints)
    date_pattern: Optional[str] = None
    amount_pattern: Optional[str] = None

    issues: tuple[str, ...] = ()

    @property
    def has_core_fields(self) -> bool:
        """Merchant and total are both present."""
        return self.merchant is not None and self.total is not None


@dataclass(frozen=True)
class ScoreResult:
    """
    Category scoring outcome.

    confidence is bounded to [0.0, 1.0]; requires_review is derived from the
    scorer's fixed review threshold and must not be recomputed by callers.
    """

    category_id: str
    score: int
    confidence: float
    requires_review: bool

    # Keywords that fired for the winning category, e.g. "merchant:starbucks"
    matches: tuple[str, ...] = ()
    # Runner-up categories (id, score), best first
    alternatives: tuple[tuple[str, int], ...] = ()
    # Raw score of every catalog category
    scores: dict[str, int] = field(default_factory=dict, compare=False)


def _decimal_to_number(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


def _number_to_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    return Decimal(str(value))


@dataclass(frozen=True)
class ReceiptRecord:
    """
    CANONICAL output of the intake pipeline.

    Created once per OCR input and never mutated in place.
    """

    fields: Optional[ExtractedFields]
    category_id: Optional[str]
    confidence: float
    status: ReceiptStatus
    duplicate_fingerprint: Optional[str]
    requires_review: bool

    error: Optional[str] = None
    instrument_type: Optional[str] = None
    issues: tuple[str, ...] = ()

    # Side-channel flag, never affects status
    is_duplicate: bool = False

    # Currency the record was processed under; serialized when there are no fields
    reference_currency: Optional[str] = None

    @property
    def merchant(self) -> Optional[str]:
        return self.fields.merchant if self.fields else None

    @property
    def total(self) -> Optional[Decimal]:
        return self.fields.total if self.fields else None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary (camelCase wire names)."""
        fields = self.fields
        return {
            "merchant": fields.merchant if fields else None,
            "date": fields.date.isoformat() if fields and fields.date else None,
            "total": _decimal_to_number(fields.total) if fields else None,
            "currency": fields.currency if fields else self.reference_currency,
            "vatAmount": _decimal_to_number(fields.vat_amount) if fields else None,
            "vatRate": _decimal_to_number(fields.vat_rate) if fields else None,
            "baseAmount": _decimal_to_number(fields.base_amount) if fields else None,
            "categoryId": self.category_id,
            "confidence": self.confidence,
            "status": self.status.value,
            "duplicateFingerprint": self.duplicate_fingerprint,
            "requiresReview": self.requires_review,
            "isDuplicate": self.is_duplicate,
            "error": self.error,
            "instrumentType": self.instrument_type,
            "issues": list(self.issues),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ReceiptRecord":
        """Deserialize from dictionary."""
        status = ReceiptStatus(data["status"])
        fields = None
        if status not in (ReceiptStatus.ERROR, ReceiptStatus.PROCESSING):
            fields = ExtractedFields(
                currency=data["currency"],
                merchant=data.get("merchant"),
                date=datetime.date.fromisoformat(data["date"]) if data.get("date") else None,
                total=_number_to_decimal(data.get("total")),
                vat_amount=_number_to_decimal(data.get("vatAmount")),
                vat_rate=_number_to_decimal(data.get("vatRate")),
                base_amount=_number_to_decimal(data.get("baseAmount")),
            )

        return cls(
            fields=fields,
            category_id=data.get("categoryId"),
            confidence=float(data.get("confidence", 0.0)),
            status=status,
            duplicate_fingerprint=data.get("duplicateFingerprint"),
            requires_review=bool(data.get("requiresReview", True)),
            error=data.get("error"),
            instrument_type=data.get("instrumentType"),
            issues=tuple(data.get("issues", [])),
            is_duplicate=bool(data.get("isDuplicate", False)),
            reference_currency=data.get("currency") if fields is None else None,
        )
