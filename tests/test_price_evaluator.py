"""
Tests for price tiering and value for money.

Usage:
    pytest tests/test_price_evaluator.py -v
"""

import pytest

from unhyped.scoring.price_evaluator import PriceEvaluator
from unhyped.scoring.result_models import MarketComparison, ValueAssessment


class TestPriceRange:

    def setup_method(self):
        self.evaluator = PriceEvaluator()

    @pytest.mark.parametrize("price,label", [
        (14.99, "Budget ($0-$15)"),
        (15.0, "Budget ($0-$15)"),
        (15.01, "Affordable ($15-$30)"),
        (45.0, "Mid-range ($30-$60)"),
        (100.0, "Premium ($60-$100)"),
        (150.0, "Luxury ($100+)"),
    ])
    def test_labels_inclusive_upper_bound(self, price, label):
        assert self.evaluator.price_range(price) == label

    @pytest.mark.parametrize("price,tier", [
        (20.0, MarketComparison.BELOW_MARKET),
        (25.0, MarketComparison.MARKET_RATE),
        (50.0, MarketComparison.MARKET_RATE),
        (75.0, MarketComparison.ABOVE_MARKET),
        (120.0, MarketComparison.PREMIUM),
    ])
    def test_market_tiers_independent_of_labels(self, price, tier):
        assert self.evaluator.market_comparison(price) == tier


class TestValueAssessment:

    def setup_method(self):
        self.evaluator = PriceEvaluator()

    def test_excellent(self):
        # 87 / 1.5 = 58
        assert self.evaluator.value_assessment(15.0, 87) == ValueAssessment.EXCELLENT

    def test_good_fair_poor(self):
        # value = 60 / (price / 10)
        assert self.evaluator.value_assessment(90.0, 60) == ValueAssessment.GOOD    # 6.67
        assert self.evaluator.value_assessment(120.0, 60) == ValueAssessment.FAIR   # 5.0
        assert self.evaluator.value_assessment(200.0, 60) == ValueAssessment.POOR   # 3.0

    def test_free_product_is_excellent(self):
        assert self.evaluator.value_assessment(0.0, 10) == ValueAssessment.EXCELLENT


class TestPriceVsIngredients:

    def setup_method(self):
        self.evaluator = PriceEvaluator()

    def test_cheap_product_capped(self):
        # 87 * 0.8 / 15 * 100 = 464 -> 100
        assert self.evaluator.price_vs_ingredients(15.0, 87) == 100

    def test_expensive_product(self):
        # 50 * 0.8 / 80 * 100 = 50
        assert self.evaluator.price_vs_ingredients(80.0, 50) == 50

    def test_price_floor(self):
        # price below 1 is treated as 1: 0.5 * 0.8 * 100 = 40
        assert self.evaluator.price_vs_ingredients(0.25, 0.5) == 40


class TestAnalyze:

    def setup_method(self):
        self.evaluator = PriceEvaluator()

    def test_parsed_price(self):
        analysis = self.evaluator.analyze("$14.99", 87)
        assert analysis.numeric_price == 14.99
        assert analysis.price_range == "Budget ($0-$15)"
        assert analysis.market_comparison == MarketComparison.BELOW_MARKET
        assert analysis.value_assessment == ValueAssessment.EXCELLENT

    def test_unparseable_price(self):
        analysis = self.evaluator.analyze("Price Not Available", 87)
        assert analysis.price_range == "Price Not Available"
        assert analysis.value_assessment == ValueAssessment.UNKNOWN
        assert analysis.price_vs_ingredients == 50
        assert analysis.market_comparison == MarketComparison.MARKET_RATE
        assert analysis.numeric_price is None

    def test_empty_price(self):
        analysis = self.evaluator.analyze("", 87)
        assert analysis.price_range == ""
        assert analysis.value_assessment == ValueAssessment.UNKNOWN
