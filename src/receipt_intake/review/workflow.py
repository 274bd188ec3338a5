"""
Review workflow management.
"""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Optional

from ..catalog import OTHER_CATEGORY_ID, KeywordCatalog
from ..intake.state_machine import transition
from ..schemas.receipt import ReceiptRecord, ReceiptStatus

logger = logging.getLogger(__name__)

# Confidence of a category the user picked or confirmed
USER_CONFIRMED_CONFIDENCE = 1.0


class ReviewDecision(str, Enum):
    """User's decision during review."""

    APPROVED = "APPROVED"  # Accept (optionally with a corrected category)
    REJECTED = "REJECTED"  # Reject (not an expense)


class ReviewWorkflow:
    """
    Applies user decisions to intake records.

    Responsibilities:
    - List records awaiting a decision
    - Move NEW / PENDING_REVIEW records to APPROVED or REJECTED
    - Apply a corrected category on approval

    Records are never modified in place; every decision returns a new record.
    """

    def __init__(self, catalog: Optional[KeywordCatalog] = None):
        """Initialize with the catalog used to validate corrected categories."""
        self.catalog = catalog

    def pending(self, records: Iterable[ReceiptRecord]) -> list[ReceiptRecord]:
        """Records that still need a user decision (PENDING_REVIEW first, then NEW)."""
        awaiting = [
            r for r in records if r.status in (ReceiptStatus.PENDING_REVIEW, ReceiptStatus.NEW)
        ]
        return sorted(awaiting, key=lambda r: r.status != ReceiptStatus.PENDING_REVIEW)

    def apply(
        self,
        record: ReceiptRecord,
        decision: ReviewDecision,
        category_id: Optional[str] = None,
    ) -> ReceiptRecord:
        """
        Record a review decision.

        Args:
            record: Record in NEW or PENDING_REVIEW status
            decision: User's decision
            category_id: Corrected category (approval only)

        Returns:
            New record in APPROVED or REJECTED status

        Raises:
            InvalidTransitionError: If the record is terminal, in ERROR or still processing
            ValueError: If the corrected category is unknown
        """
        if decision == ReviewDecision.REJECTED:
            logger.info("Receipt rejected (fingerprint=%s)", record.duplicate_fingerprint)
            return transition(record, ReceiptStatus.REJECTED, requires_review=False)

        changes: dict = {"requires_review": False}
        if category_id is not None and category_id != record.category_id:
            self._check_category(category_id)
            logger.info("Category corrected: %s -> %s", record.category_id, category_id)
            changes["category_id"] = category_id
            changes["confidence"] = USER_CONFIRMED_CONFIDENCE
        elif record.status == ReceiptStatus.PENDING_REVIEW:
            # The user looked at the suggestion and kept it
            changes["confidence"] = USER_CONFIRMED_CONFIDENCE

        return transition(record, ReceiptStatus.APPROVED, **changes)

    def _check_category(self, category_id: str) -> None:
        if self.catalog is None or category_id == OTHER_CATEGORY_ID:
            return
        if category_id not in self.catalog:
            raise ValueError(f"Unknown category: {category_id}")


def approve_all(
    workflow: ReviewWorkflow,
    records: Iterable[ReceiptRecord],
) -> list[ReceiptRecord]:
    """
    Approve every NEW record, leaving the rest untouched.

    This is the bulk "accept high-confidence receipts" action; records that
    need review keep their status.
    """
    result = []
    for record in records:
        if record.status == ReceiptStatus.NEW:
            result.append(workflow.apply(record, ReviewDecision.APPROVED))
        else:
            result.append(record)
    return result
