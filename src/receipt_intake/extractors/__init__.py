"""
Receipt field extractors.

Provides:
- ReceiptFieldExtractor: OCR text heuristics (merchant, date, total, VAT, currency)
- BaseExtractor: Interface for custom extractors
- require_usable_text: Guard mapping empty OCR output to ExtractionFailure
"""

from .base import BaseExtractor, require_usable_text
from .ocr_extractor import ReceiptFieldExtractor, parse_amount, parse_date

__all__ = [
    "BaseExtractor",
    "ReceiptFieldExtractor",
    "require_usable_text",
    "parse_amount",
    "parse_date",
]
