"""
Receipt intake module.

Provides:
- ReceiptIntake: Synchronous pipeline from OCR lines to ReceiptRecord
- ReceiptIntakeService: Async wrapper awaiting OCR and fingerprint lookup
- Status state machine helpers
"""

from .pipeline import ReceiptIntake
from .service import OcrTextSource, ReceiptIntakeService, StaticTextSource
from .state_machine import (
    ALLOWED_TRANSITIONS,
    at_least,
    can_transition,
    resolve_status,
    transition,
)

__all__ = [
    "ReceiptIntake",
    "ReceiptIntakeService",
    "OcrTextSource",
    "StaticTextSource",
    "ALLOWED_TRANSITIONS",
    "can_transition",
    "transition",
    "at_least",
    "resolve_status",
]
