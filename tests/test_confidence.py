"""Tests for category scoring and confidence."""

import pytest

from receipt_intake.catalog import OTHER_CATEGORY_ID, CategoryDefinition, KeywordCatalog
from receipt_intake.confidence import REVIEW_THRESHOLD, CategoryScorer, confidence_for


class TestConfidenceStaircase:
    """Tests for score to confidence mapping."""

    @pytest.mark.parametrize(
        "score,signals,expected",
        [
            (0, 0, 0.0),
            (-8, 1, 0.0),
            (2, 1, 0.5),
            (6, 1, 0.5),
            (8, 1, 0.6),
            (10, 2, 0.9),
            (20, 3, 0.95),
        ],
    )
    def test_values(self, score, signals, expected):
        """Each step of the staircase."""
        assert confidence_for(score, signals) == expected

    def test_single_signal_stays_below_threshold(self):
        """One keyword alone never clears the review threshold."""
        assert confidence_for(100, 1) < REVIEW_THRESHOLD

    def test_bounded(self):
        """Confidence stays within [0, 1]."""
        for score in (-50, 0, 1, 8, 19, 20, 500):
            for signals in (0, 1, 2, 10):
                assert 0.0 <= confidence_for(score, signals) <= 1.0


class TestKeywordWeights:
    """Tests for the per-list weights."""

    def test_merchant_weight(self, small_catalog):
        """Merchant keyword in the merchant zone scores +8."""
        result = CategoryScorer(small_catalog).categorize({"beanery"}, {"beanery"})
        assert result.category_id == "coffee"
        assert result.score == 8
        assert "merchant:beanery" in result.matches

    def test_merchant_reverse_containment(self, small_catalog):
        """A merchant token inside the keyword also counts."""
        result = CategoryScorer(small_catalog).categorize({"bean"}, {"bean"})
        assert result.category_id == "coffee"
        assert result.score == 8

    def test_short_token_no_reverse_match(self, small_catalog):
        """Two-letter tokens do not match inside longer keywords."""
        result = CategoryScorer(small_catalog).categorize({"be"}, {"be"})
        assert result.category_id == OTHER_CATEGORY_ID

    def test_product_items_zone_weight(self, small_catalog):
        """Product keyword in the items zone scores +6."""
        result = CategoryScorer(small_catalog).categorize(set(), {"espresso"}, {"espresso"})
        assert result.scores["coffee"] == 6
        assert "product_items:espresso" in result.matches

    def test_product_elsewhere_weight(self, small_catalog):
        """Product keyword outside the items zone scores +4."""
        result = CategoryScorer(small_catalog).categorize(set(), {"espresso"})
        assert result.scores["coffee"] == 4

    def test_general_weight(self, small_catalog):
        """General keyword scores +2."""
        result = CategoryScorer(small_catalog).categorize(set(), {"cafe"})
        assert result.scores["coffee"] == 2
        assert result.confidence == 0.5

    def test_negative_weight(self, small_catalog):
        """Negative keyword scores -8."""
        result = CategoryScorer(small_catalog).categorize(set(), {"fuel", "cafe"})
        assert result.scores["coffee"] == -6

    def test_keyword_counts_once(self, small_catalog):
        """A keyword present in several tokens still counts once."""
        result = CategoryScorer(small_catalog).categorize(set(), {"cafe", "cafes", "minicafe"})
        assert result.scores["coffee"] == 2

    def test_spelling_variants_count_once(self):
        """Keywords that normalize to the same text score as one keyword."""
        catalog = KeywordCatalog([CategoryDefinition("food", general=("menu", "menü", "MENÜ"))])
        result = CategoryScorer(catalog).categorize(set(), {"menu"})

        assert result.score == 2
        assert result.matches == ("general:menu",)

    def test_default_catalog_menu_variants(self, catalog):
        """'menu' and 'menü' in the default catalog fire once."""
        result = CategoryScorer(catalog).categorize(set(), {"menu"})
        assert result.scores["food_drink"] == 2


class TestWinnerSelection:
    """Tests for picking the category."""

    def test_negative_only_category_never_wins(self, small_catalog):
        """A category with only negative evidence is not selected."""
        result = CategoryScorer(small_catalog).categorize(set(), {"fuel"})
        assert result.category_id == OTHER_CATEGORY_ID
        assert result.scores["coffee"] == -8

    def test_all_non_positive_is_other(self):
        """When every category scores <= 0 the result is other with zero confidence."""
        catalog = KeywordCatalog(
            [
                CategoryDefinition("a", negative=("foo",)),
                CategoryDefinition("b", negative=("foo",)),
            ]
        )
        result = CategoryScorer(catalog).categorize({"foo"}, {"foo"})

        assert result.category_id == OTHER_CATEGORY_ID
        assert result.score == 0
        assert result.confidence == 0.0
        assert result.requires_review is True

    def test_tie_goes_to_first_declared(self):
        """Equal scores resolve to catalog order."""
        catalog = KeywordCatalog(
            [
                CategoryDefinition("first", merchant=("acme",)),
                CategoryDefinition("second", merchant=("acme",)),
            ]
        )
        result = CategoryScorer(catalog).categorize({"acme"}, {"acme"})

        assert result.category_id == "first"
        assert result.alternatives == (("second", 8),)

    def test_empty_input(self, catalog):
        """No tokens at all is other."""
        result = CategoryScorer(catalog).categorize(set(), set())
        assert result.category_id == OTHER_CATEGORY_ID

    def test_deterministic(self, catalog, market_lines):
        """Same lines always give the same result."""
        scorer = CategoryScorer(catalog)
        assert scorer.categorize_lines(market_lines) == scorer.categorize_lines(market_lines)


class TestReviewThreshold:
    """Tests for the 0.8 review boundary."""

    def test_single_merchant_signal_requires_review(self, catalog):
        """Merchant alone gives 0.6, below the threshold."""
        result = CategoryScorer(catalog).categorize({"starbucks"}, {"starbucks"})

        assert result.category_id == "food_drink"
        assert result.score == 8
        assert result.confidence == 0.6
        assert result.requires_review is True

    def test_two_signals_clear_threshold(self, catalog):
        """A corroborating general keyword lifts confidence to 0.9."""
        result = CategoryScorer(catalog).categorize({"starbucks"}, {"starbucks", "menu"})

        assert result.category_id == "food_drink"
        assert result.score == 10
        assert result.confidence == 0.9
        assert result.requires_review is False

    def test_requires_review_matches_threshold(self, catalog, market_lines, fuel_lines, coffee_lines):
        """requires_review is exactly confidence < 0.8."""
        scorer = CategoryScorer(catalog)
        for lines in (market_lines, fuel_lines, coffee_lines):
            result = scorer.categorize_lines(lines)
            assert result.requires_review == (result.confidence < REVIEW_THRESHOLD)


class TestPriorityRules:
    """Tests for fuel and coffee conflict rules."""

    def test_fuel_boosts_transport(self, catalog, fuel_lines):
        """Fuel terms add to transport and penalize food."""
        result = CategoryScorer(catalog).categorize_lines(fuel_lines)

        assert result.category_id == "transport"
        assert result.score == 27
        assert result.confidence == 0.95
        assert "priority:fuel" in result.matches

    def test_coffee_suppresses_fuel(self, catalog):
        """Coffee terms cancel the fuel rule."""
        result = CategoryScorer(catalog).categorize({"latte"}, {"latte", "lt"})

        # Both rules are suppressed: only keyword weights remain
        assert result.scores["transport"] == -4
        assert result.scores["food_drink"] == -4

    def test_short_fuel_term_needs_whole_token(self, catalog):
        """'lt' inside another word does not trigger the fuel rule."""
        result = CategoryScorer(catalog).categorize(set(), {"salt"})

        assert result.category_id == "transport"
        assert result.scores["transport"] == 4
        assert "priority:fuel" not in result.matches


class TestRealReceipts:
    """Scoring whole receipts."""

    def test_market_receipt(self, catalog, market_lines):
        """Supermarket receipt lands in market with high confidence."""
        result = CategoryScorer(catalog).categorize_lines(market_lines)

        assert result.category_id == "market"
        assert result.confidence == 0.95
        assert "merchant:migros" in result.matches

    def test_coffee_receipt(self, catalog, coffee_lines):
        """Merchant-only coffee receipt needs review."""
        result = CategoryScorer(catalog).categorize_lines(coffee_lines)

        assert result.category_id == "food_drink"
        assert result.confidence == 0.6
