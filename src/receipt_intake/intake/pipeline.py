"""
Synchronous intake pipeline.

raw OCR lines -> normalizer -> {field extractor, category scorer}
              -> duplicate fingerprint -> status -> ReceiptRecord

The pipeline holds no mutable state: one instance can process independent
receipts concurrently.
"""

import dataclasses
import logging
from collections.abc import Sequence
from typing import Optional

from ..catalog import OTHER_CATEGORY_ID, KeywordCatalog, default_catalog, load_catalog
from ..confidence import CategoryScorer
from ..config import IntakeConfig
from ..errors import ISSUE_CLASSIFICATION_INDETERMINATE, ExtractionFailure
from ..extractors import BaseExtractor, ReceiptFieldExtractor, require_usable_text
from ..schemas.dedupe import fingerprint
from ..schemas.receipt import ReceiptRecord, ReceiptStatus
from .state_machine import resolve_status, transition

logger = logging.getLogger(__name__)


class ReceiptIntake:
    """
    Turns one receipt's OCR lines into a ReceiptRecord.

    Responsibilities:
    - Map missing text to the ERROR status
    - Extract fields and score categories
    - Apply payment-instrument overrides
    - Compute the duplicate fingerprint
    - Resolve the review status
    """

    def __init__(
        self,
        catalog: KeywordCatalog,
        extractor: Optional[BaseExtractor] = None,
        merchant_zone_lines: int = 5,
    ):
        self.catalog = catalog
        self.scorer = CategoryScorer(catalog)
        self.extractor = extractor or ReceiptFieldExtractor()
        self.merchant_zone_lines = merchant_zone_lines

    @classmethod
    def from_config(cls, config: IntakeConfig) -> "ReceiptIntake":
        """Build a pipeline from configuration (custom catalog if configured)."""
        catalog = load_catalog(config.catalog_path) if config.catalog_path else default_catalog()
        return cls(catalog, merchant_zone_lines=config.merchant_zone_lines)

    def process(
        self,
        lines: Optional[Sequence[str]],
        reference_currency: str,
    ) -> ReceiptRecord:
        """
        Process OCR output into a record.

        Never raises for missing data; total absence of text yields a record
        with ERROR status and no fields or category.
        """
        record = ReceiptRecord(
            fields=None,
            category_id=None,
            confidence=0.0,
            status=ReceiptStatus.PROCESSING,
            duplicate_fingerprint=None,
            requires_review=True,
            reference_currency=reference_currency,
        )

        try:
            lines = require_usable_text(lines)
        except ExtractionFailure as e:
            logger.warning("Receipt intake failed: %s", e)
            return transition(
                record,
                ReceiptStatus.ERROR,
                requires_review=False,
                error=f"extraction_failure: {e}",
            )

        fields = self.extractor.extract(lines, reference_currency)
        score = self.scorer.categorize_lines(lines, self.merchant_zone_lines)
        instrument = self.catalog.detect_instrument("\n".join(lines))

        category_id = score.category_id
        if instrument is not None:
            logger.info(
                "Payment instrument '%s' detected; forcing category %s",
                instrument.name,
                instrument.category_id,
            )
            category_id = instrument.category_id

        status, status_issues = resolve_status(fields, score, instrument)

        issues = list(fields.issues) + status_issues
        if category_id == OTHER_CATEGORY_ID:
            issues.append(ISSUE_CLASSIFICATION_INDETERMINATE)

        record = transition(
            record,
            status,
            fields=fields,
            category_id=category_id,
            confidence=score.confidence,
            duplicate_fingerprint=fingerprint(fields, reference_currency),
            requires_review=status == ReceiptStatus.PENDING_REVIEW,
            instrument_type=instrument.name if instrument else None,
            issues=tuple(issues),
        )

        logger.info(
            "Receipt processed: merchant=%r category=%s confidence=%.2f status=%s",
            fields.merchant,
            record.category_id,
            record.confidence,
            record.status.value,
        )
        return record

    def reclassify(
        self,
        record: ReceiptRecord,
        lines: Optional[Sequence[str]],
        reference_currency: str,
    ) -> ReceiptRecord:
        """
        Re-run intake for an existing record.

        Terminal records (APPROVED, REJECTED) are returned unchanged; anything
        else is replaced by a new record. The duplicate flag is carried over.
        """
        if record.status.is_terminal:
            logger.info("Not reclassifying receipt in terminal status %s", record.status.value)
            return record

        fresh = self.process(lines, reference_currency)
        return dataclasses.replace(fresh, is_duplicate=record.is_duplicate)
