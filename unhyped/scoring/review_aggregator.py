"""
Review Aggregator (Deterministic)
=================================

Judges a pre-tallied review distribution: natural spread vs suspiciously
one-sided, and how much the reviews can be trusted.

Ratios come from the sentiment breakdown sum; the credibility count
threshold comes from ``total_reviews``. The two are never reconciled.

Usage:
    aggregator = ReviewAggregator()
    analysis = aggregator.analyze(review_summary)   # or analyze(None)
"""

import logging
from typing import Optional

from ..data.data_models import ReviewSummary
from .result_models import Credibility, ReviewAnalysis
from .scoring_config import ReviewConfig

logger = logging.getLogger(__name__)


class ReviewAggregator:
    """Review authenticity and credibility from a sentiment distribution."""

    def __init__(self, config: Optional[ReviewConfig] = None):
        self.config = config or ReviewConfig()

    def analyze(self, reviews: Optional[ReviewSummary]) -> ReviewAnalysis:
        """
        Absent (or zero reviews) -> count 0, authenticity 50, credibility
        low. Absence of reviews is a weak negative, hence "low" rather
        than "unknown".
        """
        if reviews is None or reviews.total_reviews == 0:
            return ReviewAnalysis(
                review_count=0,
                sentiment_distribution={"positive": 0, "negative": 0, "neutral": 0},
                review_authenticity_score=self.config.absent_authenticity,
                common_concerns=[],
                review_credibility=Credibility.LOW,
            )

        breakdown = reviews.sentiment_breakdown
        authenticity = self.authenticity_score(breakdown.positive, breakdown.negative, breakdown.neutral)
        credibility = self.credibility(reviews.total_reviews, authenticity)

        if breakdown.total != reviews.total_reviews:
            logger.debug(
                "Sentiment breakdown sums to %d but total_reviews is %d",
                breakdown.total, reviews.total_reviews,
            )

        return ReviewAnalysis(
            review_count=reviews.total_reviews,
            sentiment_distribution=breakdown.to_dict(),
            review_authenticity_score=authenticity,
            common_concerns=list(reviews.common_negatives),
            review_credibility=credibility,
        )

    def authenticity_score(self, positive: int, negative: int, neutral: int) -> int:
        """
        positive_ratio > 0.9 or negative_ratio > 0.8 -> 30
        0.4 <= positive_ratio <= 0.8 and 0.1 <= negative_ratio <= 0.4 -> 85
        otherwise -> 60 (an empty breakdown is neutral: 50)
        """
        cfg = self.config
        total = positive + negative + neutral
        if total == 0:
            return cfg.absent_authenticity

        positive_ratio = positive / total
        negative_ratio = negative / total

        if positive_ratio > cfg.one_sided_positive or negative_ratio > cfg.one_sided_negative:
            return cfg.one_sided_authenticity

        pos_low, pos_high = cfg.natural_positive_range
        neg_low, neg_high = cfg.natural_negative_range
        if pos_low <= positive_ratio <= pos_high and neg_low <= negative_ratio <= neg_high:
            return cfg.natural_authenticity

        return cfg.default_authenticity

    def credibility(self, total_reviews: int, authenticity: int) -> Credibility:
        for min_reviews, min_authenticity, level in self.config.credibility_thresholds:
            if total_reviews >= min_reviews and authenticity >= min_authenticity:
                return Credibility(level)
        return Credibility.LOW
