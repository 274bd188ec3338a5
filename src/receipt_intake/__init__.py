"""
Receipt OCR text → Fields → Category → Duplicate key → Review status

A deterministic, testable intake pipeline that turns the recognized text of a
photographed receipt into a structured record with a category, a confidence
score, a duplicate fingerprint and a review status.
"""

__version__ = "0.1.0"
