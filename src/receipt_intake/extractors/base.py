"""
Base extractor interface.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

from ..errors import ExtractionFailure
from ..schemas.receipt import ExtractedFields


def require_usable_text(lines: Optional[Sequence[str]]) -> list[str]:
    """
    Return the OCR lines if any of them carries text.

    Raises:
        ExtractionFailure: If the OCR collaborator produced nothing usable
    """
    if lines is None:
        raise ExtractionFailure("OCR produced no output")
    if isinstance(lines, str):
        lines = lines.splitlines()
    line_list = [str(line) for line in lines]
    if not any(line.strip() for line in line_list):
        raise ExtractionFailure("OCR output contains no text")
    return line_list


class BaseExtractor(ABC):
    """
    Base class for receipt field extractors.

    Extractors never raise for missing or malformed fields: every field of
    ExtractedFields is independently optional.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Extractor name for logging and provenance."""
        pass

    def can_extract(self, lines: Optional[Sequence[str]]) -> bool:
        """Check if there is any text to extract from."""
        try:
            require_usable_text(lines)
        except ExtractionFailure:
            return False
        return True

    @abstractmethod
    def extract(self, lines: Sequence[str], reference_currency: str) -> ExtractedFields:
        """
        Extract receipt fields from OCR lines.

        Args:
            lines: OCR text lines, top to bottom
            reference_currency: Currency used when the receipt shows none

        Returns:
            ExtractedFields with whatever could be parsed
        """
        pass
