"""
Async intake service.

Wraps the synchronous pipeline with the two suspending collaborator calls:
the OCR text producer and the duplicate-fingerprint store. No timeout is
imposed here; callers wrap ``ingest`` in their own ``asyncio.wait_for`` and
cancel it when the user navigates away.
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional, Union

from ..schemas.receipt import ReceiptRecord, ReceiptStatus
from ..state_store import FingerprintStore
from .pipeline import ReceiptIntake

logger = logging.getLogger(__name__)


class OcrTextSource(ABC):
    """
    OCR collaborator.

    Returns the recognized lines top to bottom, or None (or an empty list)
    when recognition failed.
    """

    @abstractmethod
    async def recognize(self) -> Optional[Sequence[str]]:
        pass


class StaticTextSource(OcrTextSource):
    """OCR source over text that was already recognized."""

    def __init__(self, lines: Optional[Sequence[str]]):
        self.lines = lines

    async def recognize(self) -> Optional[Sequence[str]]:
        return self.lines


class ReceiptIntakeService:
    """
    Orchestrates OCR, intake and duplicate lookup for one receipt at a time.

    Duplicate matches never change the status; they only set
    ``record.is_duplicate`` so the caller can ask the user to confirm or
    discard.
    """

    def __init__(
        self,
        intake: ReceiptIntake,
        store: FingerprintStore,
        reference_currency: str,
    ):
        self.intake = intake
        self.store = store
        self.reference_currency = reference_currency

    async def ingest(
        self,
        source: Union[OcrTextSource, Sequence[str], None],
        reference_currency: Optional[str] = None,
    ) -> ReceiptRecord:
        """
        Recognize, process and check one receipt for duplicates.

        Args:
            source: OCR collaborator or already recognized lines
            reference_currency: Overrides the service default for this receipt

        Returns:
            The new ReceiptRecord (with is_duplicate set)
        """
        currency = reference_currency or self.reference_currency

        if isinstance(source, OcrTextSource):
            lines = await source.recognize()
        else:
            lines = source

        record = self.intake.process(lines, currency)
        if record.status == ReceiptStatus.ERROR or not record.duplicate_fingerprint:
            return record

        is_duplicate = await self.store.contains(record.duplicate_fingerprint)
        if is_duplicate:
            logger.info(
                "Duplicate receipt detected (fingerprint=%s...)",
                record.duplicate_fingerprint[:16],
            )
        return dataclasses.replace(record, is_duplicate=is_duplicate)

    async def register(self, record: ReceiptRecord) -> None:
        """Record the fingerprint of an accepted receipt in the store."""
        if record.status == ReceiptStatus.ERROR or not record.duplicate_fingerprint:
            logger.debug("Not registering receipt without fingerprint")
            return
        await self.store.add(record.duplicate_fingerprint)
