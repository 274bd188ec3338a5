"""
Keyword catalog types.

A catalog is an immutable value built once by the caller and handed to the
scorer. Nothing in the pipeline reads a module-level catalog instance.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from ..errors import CatalogError
from ..normalizer import normalize

# Scoring weights (part of the catalog contract)
MERCHANT_WEIGHT = 8
PRODUCT_WEIGHT = 4
PRODUCT_ITEMS_ZONE_WEIGHT = 6
GENERAL_WEIGHT = 2
NEGATIVE_WEIGHT = -8

OTHER_CATEGORY_ID = "other"


@dataclass(frozen=True)
class CategoryDefinition:
    """One category with its four weighted keyword lists."""

    id: str
    merchant: tuple[str, ...] = ()  # +8
    product: tuple[str, ...] = ()  # +4, +6 in items zone
    general: tuple[str, ...] = ()  # +2
    negative: tuple[str, ...] = ()  # -8


@dataclass(frozen=True)
class PriorityRule:
    """
    Conflict rule applied after keyword scoring.

    When any trigger token is present and none of the suppressor tokens are,
    ``boost`` is added to every category in ``boosted`` and subtracted from
    every category in ``penalized``.
    """

    name: str
    triggers: tuple[str, ...]
    suppressors: tuple[str, ...] = ()
    boosted: tuple[str, ...] = ()
    penalized: tuple[str, ...] = ()
    boost: int = 5


@dataclass(frozen=True)
class InstrumentRule:
    """
    Detects a payment instrument that forces a category and mandatory review.

    Keywords are matched on word boundaries of the normalized text; patterns
    are regular expressions matched case-insensitively against the raw text.
    """

    name: str
    category_id: str
    keywords: tuple[str, ...] = ()
    patterns: tuple[str, ...] = ()
    _compiled: tuple[re.Pattern, ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = [
            re.compile(rf"(?<!\w){re.escape(normalize(keyword))}(?!\w)")
            for keyword in self.keywords
        ]
        compiled.extend(re.compile(pattern, re.IGNORECASE) for pattern in self.patterns)
        object.__setattr__(self, "_compiled", tuple(compiled))

    def matches(self, raw_text: str) -> bool:
        """Check if the rule fires on the given receipt text."""
        normalized = normalize(raw_text)
        keyword_count = len(self.keywords)
        for index, pattern in enumerate(self._compiled):
            target = normalized if index < keyword_count else raw_text
            if pattern.search(target):
                return True
        return False


class KeywordCatalog:
    """
    Read-only table of category definitions.

    Iteration yields categories in declaration order, which is also the
    tie-break order of the scorer. Lookup by id is a dict access.
    """

    def __init__(
        self,
        categories: Iterable[CategoryDefinition],
        priority_rules: Iterable[PriorityRule] = (),
        instrument_rules: Iterable[InstrumentRule] = (),
    ):
        self._categories = tuple(categories)
        by_id: dict[str, CategoryDefinition] = {}
        for category in self._categories:
            if not category.id:
                raise CatalogError("Category id must not be empty")
            if category.id == OTHER_CATEGORY_ID:
                raise CatalogError(f"'{OTHER_CATEGORY_ID}' is reserved for unclassified receipts")
            if category.id in by_id:
                raise CatalogError(f"Duplicate category id: {category.id}")
            by_id[category.id] = category
        self._by_id: Mapping[str, CategoryDefinition] = MappingProxyType(by_id)
        self._priority_rules = tuple(priority_rules)
        self._instrument_rules = tuple(instrument_rules)

        for rule in self._priority_rules:
            for category_id in (*rule.boosted, *rule.penalized):
                if category_id not in by_id:
                    raise CatalogError(
                        f"Priority rule '{rule.name}' references unknown category: {category_id}"
                    )
        for instrument in self._instrument_rules:
            if instrument.category_id not in by_id:
                raise CatalogError(
                    f"Instrument rule '{instrument.name}' references unknown category: "
                    f"{instrument.category_id}"
                )

    def __iter__(self) -> Iterator[CategoryDefinition]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    @property
    def categories(self) -> tuple[CategoryDefinition, ...]:
        return self._categories

    @property
    def category_ids(self) -> tuple[str, ...]:
        return tuple(category.id for category in self._categories)

    @property
    def priority_rules(self) -> tuple[PriorityRule, ...]:
        return self._priority_rules

    @property
    def instrument_rules(self) -> tuple[InstrumentRule, ...]:
        return self._instrument_rules

    def get(self, category_id: str) -> Optional[CategoryDefinition]:
        """Find a category by id."""
        return self._by_id.get(category_id)

    def detect_instrument(self, raw_text: str) -> Optional[InstrumentRule]:
        """Return the first instrument rule that fires on the text, if any."""
        for instrument in self._instrument_rules:
            if instrument.matches(raw_text):
                return instrument
        return None
