"""
Text normalizer for receipt OCR output.

Folding uses a fixed letter table rather than Unicode decomposition; the
dotless ı has no decomposition.
"""

import re
from collections.abc import Iterable, Sequence
from itertools import groupby

# Locale letters mapped to their base Latin equivalents.
# Both cases are listed because folding runs before lowercasing
# ("İ".lower() would otherwise produce "i" + combining dot).
CHAR_FOLD_TABLE = {
    "ı": "i",
    "İ": "i",
    "I": "i",
    "ş": "s",
    "Ş": "s",
    "ğ": "g",
    "Ğ": "g",
    "ç": "c",
    "Ç": "c",
    "ö": "o",
    "Ö": "o",
    "ü": "u",
    "Ü": "u",
}

_FOLD_TRANSLATION = str.maketrans(CHAR_FOLD_TABLE)

# Legal-entity abbreviations stripped from merchant names
COMPANY_SUFFIXES = [
    "A.Ş.", "A.Ş", "AŞ.", "AŞ",
    "LTD.", "LTD", "LİMİTED", "LIMITED",
    "TİC.", "TİC", "TIC.", "TIC",
    "SAN.", "SAN", "SANAYİ", "SANAYI",
    "ŞTİ.", "ŞTİ", "STI.", "STI",
    "A.O.", "A.O",
]

# Totals / payment markers that close the line-items zone
ITEMS_ZONE_STOP_KEYWORDS = [
    "toplam", "genel toplam", "tutar", "odenecek", "odeme",
    "kdv", "nakit", "pos", "kart", "kredi", "banka",
]

# Lines at the top of the items zone that belong to the header
ITEMS_ZONE_HEADER_LINES = 3

MIN_TOKEN_LENGTH = 2


def normalize(text: str) -> str:
    """Fold locale letters and lowercase. Idempotent."""
    if not text:
        return ""
    return text.translate(_FOLD_TRANSLATION).lower()


def tokenize(text: str) -> frozenset[str]:
    """Normalize and split text into a set of unique tokens (min 2 chars, no digits)."""
    # Any non-letter splits: whitespace, punctuation, symbols and every kind
    # of digit ("²", "½" included)
    fragments = (
        "".join(chars) for is_letter, chars in groupby(normalize(text), key=str.isalpha) if is_letter
    )
    return frozenset(f for f in fragments if len(f) >= MIN_TOKEN_LENGTH)


def _suffix_pattern() -> re.Pattern:
    # Longest suffix first so "a.s." wins over "a.s"
    suffixes = sorted({normalize(s) for s in COMPANY_SUFFIXES}, key=len, reverse=True)
    alternation = "|".join(re.escape(s) for s in suffixes)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)")


_SUFFIX_RE = _suffix_pattern()
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_merchant(merchant: str) -> str:
    """Normalize a merchant name and strip corporate suffixes."""
    result = _SUFFIX_RE.sub(" ", normalize(merchant))
    return _WHITESPACE_RE.sub(" ", result).strip()


def top_line_tokens(lines: Sequence[str], count: int = 5) -> frozenset[str]:
    """Tokens of the first ``count`` lines (merchant header region)."""
    return tokenize(" ".join(lines[:count]))


def items_zone_tokens(lines: Iterable[str]) -> frozenset[str]:
    """
    Tokens of the line-item region.

    Lines are collected until the first one containing a stop keyword
    (totals/payment markers). The first collected lines are header noise and
    are discarded; with fewer header lines than that the zone is empty.
    """
    collected: list[str] = []
    for line in lines:
        normalized_line = normalize(line)
        if any(keyword in normalized_line for keyword in ITEMS_ZONE_STOP_KEYWORDS):
            break
        collected.append(line)

    zone = collected[ITEMS_ZONE_HEADER_LINES:]
    if not zone:
        return frozenset()
    return tokenize(" ".join(zone))
