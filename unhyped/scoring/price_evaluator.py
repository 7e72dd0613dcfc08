"""
Price Evaluator (Deterministic)
===============================

Maps a free-text price to a range label, a market tier and a
value-for-money assessment relative to ingredient quality.

The price-vs-ingredients score is a rough proxy (expected price =
quality * 0.8), not a calibrated economic model.

Usage:
    evaluator = PriceEvaluator()
    analysis = evaluator.analyze("$14.99", ingredient_quality_score=87)
"""

import logging
from typing import Optional

from ..data.price_parser import extract_numeric_price
from .result_models import MarketComparison, PriceAnalysis, ValueAssessment
from .scoring_config import PriceConfig, clamp_score

logger = logging.getLogger(__name__)


class PriceEvaluator:
    """Price tiering and value-for-money assessment."""

    def __init__(self, config: Optional[PriceConfig] = None):
        self.config = config or PriceConfig()

    def analyze(self, price_text: str, ingredient_quality: int) -> PriceAnalysis:
        """
        Unparseable price -> range = original text, value unknown,
        price_vs_ingredients 50, market_rate. Never raises.
        """
        cfg = self.config
        price = extract_numeric_price(price_text)
        if price is None:
            logger.debug("Unparseable price %r, using neutral price analysis", price_text)
            return PriceAnalysis(
                price_range=price_text or "",
                value_assessment=ValueAssessment.UNKNOWN,
                price_vs_ingredients=cfg.unknown_price_score,
                market_comparison=MarketComparison.MARKET_RATE,
            )

        return PriceAnalysis(
            price_range=self.price_range(price),
            value_assessment=self.value_assessment(price, ingredient_quality),
            price_vs_ingredients=self.price_vs_ingredients(price, ingredient_quality),
            market_comparison=self.market_comparison(price),
            numeric_price=price,
        )

    # =========================================================================
    # STEP FUNCTIONS (independent boundaries)
    # =========================================================================

    def price_range(self, price: float) -> str:
        for upper, label in self.config.range_labels:
            if price <= upper:
                return label
        return self.config.top_range_label

    def market_comparison(self, price: float) -> MarketComparison:
        for upper, tier in self.config.market_tiers:
            if price <= upper:
                return MarketComparison(tier)
        return MarketComparison(self.config.top_market_tier)

    def value_assessment(self, price: float, ingredient_quality: int) -> ValueAssessment:
        """
        value = quality / (price / 10)
        >= 8 excellent, >= 6 good, >= 4 fair, else poor.
        A free product has unbounded value.
        """
        cfg = self.config
        if price <= 0:
            value = float("inf")
        else:
            value = ingredient_quality / (price / cfg.value_price_divisor)

        for threshold, assessment in cfg.value_thresholds:
            if value >= threshold:
                return ValueAssessment(assessment)
        return ValueAssessment(cfg.lowest_value)

    def price_vs_ingredients(self, price: float, ingredient_quality: int) -> int:
        """clamp(round(quality * 0.8 / max(price, 1) * 100))"""
        cfg = self.config
        expected_price = ingredient_quality * cfg.expected_price_factor
        ratio = expected_price / max(price, cfg.min_price_floor)
        return clamp_score(ratio * 100)
