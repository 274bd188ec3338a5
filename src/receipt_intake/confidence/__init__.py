"""
Category scoring module.

Applies the keyword catalog to token zones, picks the best category and
derives a confidence score and the review flag.
"""

from .scorer import REVIEW_THRESHOLD, CategoryScorer, confidence_for

__all__ = [
    "CategoryScorer",
    "REVIEW_THRESHOLD",
    "confidence_for",
]
