"""
Category scoring implementation.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..catalog import (
    GENERAL_WEIGHT,
    MERCHANT_WEIGHT,
    NEGATIVE_WEIGHT,
    OTHER_CATEGORY_ID,
    PRODUCT_ITEMS_ZONE_WEIGHT,
    PRODUCT_WEIGHT,
    CategoryDefinition,
    KeywordCatalog,
    PriorityRule,
)
from ..errors import ClassificationIndeterminate
from ..normalizer import items_zone_tokens, normalize, tokenize, top_line_tokens
from ..schemas.receipt import ScoreResult

logger = logging.getLogger(__name__)

# Below this confidence a receipt must be reviewed. Fixed; callers must not
# substitute their own threshold.
REVIEW_THRESHOLD = 0.8

# Reverse containment (token inside keyword) ignores shorter tokens,
# otherwise fragments like "tl" would hit "little caesars".
MIN_REVERSE_MATCH_LENGTH = 3

ALTERNATIVES_COUNT = 2


def confidence_for(score: int, signal_count: int) -> float:
    """
    Map a winning score to a confidence value.

    Staircase:
    - score <= 0: 0.0
    - one positive signal: 0.5, or 0.6 when it carries merchant weight
    - two or more corroborating signals: 0.9, or 0.95 from score 20 up
    """
    if score <= 0 or signal_count <= 0:
        return 0.0
    if signal_count >= 2:
        return 0.95 if score >= 20 else 0.9
    if score >= MERCHANT_WEIGHT:
        return 0.6
    return 0.5


@dataclass(frozen=True)
class _PreparedKeyword:
    """A catalog keyword split into its normalized token parts."""

    keyword: str
    normalized: str
    parts: frozenset[str]

    def found_in(self, tokens: frozenset[str]) -> bool:
        """Every part of the keyword is contained in some token."""
        if not self.parts:
            return False
        return all(any(part in token for token in tokens) for part in self.parts)

    def found_in_either_direction(self, tokens: frozenset[str]) -> bool:
        """Keyword in token, or a (long enough) token inside the keyword."""
        if self.found_in(tokens):
            return True
        return any(
            len(token) >= MIN_REVERSE_MATCH_LENGTH and token in self.normalized
            for token in tokens
        )


def _prepare(keywords: Iterable[str]) -> tuple[_PreparedKeyword, ...]:
    # Spelling variants ("menu", "menü") collapse to the first listed keyword
    prepared: dict[str, _PreparedKeyword] = {}
    for keyword in keywords:
        normalized = normalize(keyword)
        if normalized not in prepared:
            prepared[normalized] = _PreparedKeyword(
                keyword=keyword, normalized=normalized, parts=tokenize(keyword)
            )
    return tuple(prepared.values())


@dataclass
class _CategoryScore:
    category_id: str
    score: int = 0
    signals: int = 0
    matches: list[str] = field(default_factory=list)


class CategoryScorer:
    """
    Weighted keyword scorer.

    Scoring per category (every keyword counts once; spellings that
    normalize to the same text count as one keyword):
    - merchant keyword in the merchant zone (either direction): +8
    - product keyword in the items zone: +6, elsewhere in the text: +4
    - general keyword anywhere: +2
    - negative keyword anywhere: -8

    Priority rules adjust the totals afterwards. The highest score wins;
    ties go to the first-declared category. Without any positive score the
    result is the "other" sentinel.
    """

    def __init__(self, catalog: KeywordCatalog):
        """Initialize scorer with an immutable catalog."""
        self.catalog = catalog
        self._prepared = {
            category.id: (
                _prepare(category.merchant),
                _prepare(category.product),
                _prepare(category.general),
                _prepare(category.negative),
            )
            for category in catalog
        }

    def categorize(
        self,
        merchant_tokens: Iterable[str],
        general_tokens: Iterable[str],
        items_zone_tokens: Iterable[str] = (),
    ) -> ScoreResult:
        """
        Score every catalog category and pick the winner.

        Args:
            merchant_tokens: Tokens of the merchant zone (top lines)
            general_tokens: Tokens of the whole receipt text
            items_zone_tokens: Tokens of the line-items zone

        Returns:
            ScoreResult for the best category, or "other"
        """
        merchant_set = frozenset(merchant_tokens)
        general_set = frozenset(general_tokens)
        items_set = frozenset(items_zone_tokens)
        combined = merchant_set | general_set | items_set

        results = [
            self.score_category(category, merchant_set, general_set, items_set, combined)
            for category in self.catalog
        ]
        for rule in self.catalog.priority_rules:
            self._apply_priority_rule(rule, results, combined)

        scores = {result.category_id: result.score for result in results}

        try:
            winner = self._select_winner(results)
        except ClassificationIndeterminate:
            logger.debug("No category scored above zero; using '%s'", OTHER_CATEGORY_ID)
            return ScoreResult(
                category_id=OTHER_CATEGORY_ID,
                score=0,
                confidence=0.0,
                requires_review=True,
                scores=scores,
            )

        confidence = confidence_for(winner.score, winner.signals)
        ranked = sorted(
            (r for r in results if r is not winner and r.score > 0),
            key=lambda r: -r.score,
        )
        alternatives = tuple((r.category_id, r.score) for r in ranked[:ALTERNATIVES_COUNT])

        logger.debug(
            "Categorized as %s (score=%d, signals=%d, confidence=%.2f)",
            winner.category_id,
            winner.score,
            winner.signals,
            confidence,
        )

        return ScoreResult(
            category_id=winner.category_id,
            score=winner.score,
            confidence=confidence,
            requires_review=confidence < REVIEW_THRESHOLD,
            matches=tuple(winner.matches),
            alternatives=alternatives,
            scores=scores,
        )

    def categorize_lines(self, lines: Sequence[str], merchant_zone_lines: int = 5) -> ScoreResult:
        """Derive the three token zones from raw lines and categorize."""
        return self.categorize(
            merchant_tokens=top_line_tokens(lines, merchant_zone_lines),
            general_tokens=tokenize(" ".join(lines)),
            items_zone_tokens=items_zone_tokens(lines),
        )

    def score_category(
        self,
        category: CategoryDefinition,
        merchant_tokens: frozenset[str],
        general_tokens: frozenset[str],
        items_tokens: frozenset[str],
        combined_tokens: frozenset[str],
    ) -> _CategoryScore:
        """Compute the keyword score of a single category."""
        merchant, product, general, negative = self._prepared[category.id]
        result = _CategoryScore(category_id=category.id)

        # 1. Merchant keywords (+8)
        for keyword in merchant:
            if keyword.found_in_either_direction(merchant_tokens):
                result.score += MERCHANT_WEIGHT
                result.signals += 1
                result.matches.append(f"merchant:{keyword.keyword}")

        # 2. Product keywords (+6 in items zone, +4 elsewhere)
        for keyword in product:
            if keyword.found_in(items_tokens):
                result.score += PRODUCT_ITEMS_ZONE_WEIGHT
                result.signals += 1
                result.matches.append(f"product_items:{keyword.keyword}")
            elif keyword.found_in(general_tokens):
                result.score += PRODUCT_WEIGHT
                result.signals += 1
                result.matches.append(f"product:{keyword.keyword}")

        # 3. General keywords (+2)
        for keyword in general:
            if keyword.found_in(combined_tokens):
                result.score += GENERAL_WEIGHT
                result.signals += 1
                result.matches.append(f"general:{keyword.keyword}")

        # 4. Negative keywords (-8)
        for keyword in negative:
            if keyword.found_in(combined_tokens):
                result.score += NEGATIVE_WEIGHT
                result.matches.append(f"negative:{keyword.keyword}")

        return result

    @staticmethod
    def _term_present(term: str, tokens: frozenset[str]) -> bool:
        normalized = normalize(term)
        if normalized in tokens:
            return True
        # Short terms ("lt") only count as whole tokens
        return len(normalized) > 2 and any(normalized in token for token in tokens)

    def _apply_priority_rule(
        self,
        rule: PriorityRule,
        results: list[_CategoryScore],
        tokens: frozenset[str],
    ) -> None:
        triggered = any(self._term_present(t, tokens) for t in rule.triggers)
        suppressed = any(self._term_present(t, tokens) for t in rule.suppressors)
        if not triggered or suppressed:
            return

        for result in results:
            if result.category_id in rule.boosted:
                result.score += rule.boost
                result.matches.append(f"priority:{rule.name}")
            elif result.category_id in rule.penalized:
                result.score -= rule.boost
                result.matches.append(f"penalty:{rule.name}")

    @staticmethod
    def _select_winner(results: list[_CategoryScore]) -> _CategoryScore:
        """Highest score wins, first-declared on ties."""
        best: _CategoryScore | None = None
        for result in results:
            if best is None or result.score > best.score:
                best = result
        if best is None or best.score <= 0:
            raise ClassificationIndeterminate("No category scored above zero")
        return best
