"""
Receipt status state machine.

    PROCESSING -> NEW | PENDING_REVIEW | APPROVED | ERROR
    NEW        -> APPROVED | REJECTED
    PENDING_REVIEW -> APPROVED | REJECTED
    APPROVED, REJECTED: terminal
    ERROR: terminal for this record; a new OCR input produces a new record
"""

import dataclasses
import logging
from typing import Optional

from ..catalog import InstrumentRule
from ..errors import (
    ISSUE_INSTRUMENT_PREFIX,
    ISSUE_MISSING_MERCHANT,
    ISSUE_MISSING_TOTAL,
    InvalidTransitionError,
)
from ..schemas.receipt import ExtractedFields, ReceiptRecord, ReceiptStatus, ScoreResult

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[ReceiptStatus, frozenset[ReceiptStatus]] = {
    ReceiptStatus.PROCESSING: frozenset(
        {
            ReceiptStatus.NEW,
            ReceiptStatus.PENDING_REVIEW,
            ReceiptStatus.APPROVED,
            ReceiptStatus.ERROR,
        }
    ),
    ReceiptStatus.NEW: frozenset({ReceiptStatus.APPROVED, ReceiptStatus.REJECTED}),
    ReceiptStatus.PENDING_REVIEW: frozenset({ReceiptStatus.APPROVED, ReceiptStatus.REJECTED}),
    ReceiptStatus.APPROVED: frozenset(),
    ReceiptStatus.REJECTED: frozenset(),
    ReceiptStatus.ERROR: frozenset(),
}

# How much human attention an intake outcome demands
_REVIEW_LEVEL = {
    ReceiptStatus.NEW: 0,
    ReceiptStatus.PENDING_REVIEW: 1,
}


def can_transition(source: ReceiptStatus, target: ReceiptStatus) -> bool:
    """Check if a status transition is allowed."""
    return target in ALLOWED_TRANSITIONS[source]


def transition(record: ReceiptRecord, target: ReceiptStatus, **changes) -> ReceiptRecord:
    """
    Move a record to a new status.

    Returns a new record; the input record is left untouched.

    Raises:
        InvalidTransitionError: If the transition is not allowed
    """
    if not can_transition(record.status, target):
        raise InvalidTransitionError(record.status.value, target.value)
    logger.debug("Receipt status %s -> %s", record.status.value, target.value)
    return dataclasses.replace(record, status=target, **changes)


def at_least(status: ReceiptStatus, floor: ReceiptStatus) -> ReceiptStatus:
    """The stricter of two intake outcomes (NEW < PENDING_REVIEW)."""
    if _REVIEW_LEVEL[status] >= _REVIEW_LEVEL[floor]:
        return status
    return floor


def resolve_status(
    fields: ExtractedFields,
    score: ScoreResult,
    instrument: Optional[InstrumentRule] = None,
) -> tuple[ReceiptStatus, list[str]]:
    """
    Decide the intake status of a receipt with usable text.

    Rules (in order):
    1. Missing merchant or total: PENDING_REVIEW, whatever the confidence
    2. Scorer requires review (confidence below threshold): PENDING_REVIEW
    3. Otherwise: NEW
    4. A detected payment instrument raises the outcome to at least PENDING_REVIEW

    Returns:
        Tuple of (status, issue codes that drove the decision)
    """
    issues: list[str] = []
    if fields.merchant is None:
        issues.append(ISSUE_MISSING_MERCHANT)
    if fields.total is None:
        issues.append(ISSUE_MISSING_TOTAL)

    if issues:
        status = ReceiptStatus.PENDING_REVIEW
    elif score.requires_review:
        status = ReceiptStatus.PENDING_REVIEW
    else:
        status = ReceiptStatus.NEW

    if instrument is not None:
        issues.append(f"{ISSUE_INSTRUMENT_PREFIX}{instrument.name}")
        status = at_least(status, ReceiptStatus.PENDING_REVIEW)

    return status, issues
