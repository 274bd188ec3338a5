"""
Text normalization module.

Folds locale-specific letters to their base Latin form, tokenizes text and
derives the zone token sets (merchant header, line items) used for scoring.
"""

from .text import (
    CHAR_FOLD_TABLE,
    COMPANY_SUFFIXES,
    ITEMS_ZONE_HEADER_LINES,
    ITEMS_ZONE_STOP_KEYWORDS,
    MIN_TOKEN_LENGTH,
    items_zone_tokens,
    normalize,
    normalize_merchant,
    tokenize,
    top_line_tokens,
)

__all__ = [
    "CHAR_FOLD_TABLE",
    "COMPANY_SUFFIXES",
    "ITEMS_ZONE_HEADER_LINES",
    "ITEMS_ZONE_STOP_KEYWORDS",
    "MIN_TOKEN_LENGTH",
    "normalize",
    "tokenize",
    "normalize_merchant",
    "top_line_tokens",
    "items_zone_tokens",
]
