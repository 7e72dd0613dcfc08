"""
Tests for the review distribution analysis.

Usage:
    pytest tests/test_review_aggregator.py -v
"""

from unhyped.data.data_models import ReviewSummary, SentimentBreakdown
from unhyped.scoring.result_models import Credibility
from unhyped.scoring.review_aggregator import ReviewAggregator


def make_summary(positive: int, negative: int, neutral: int, total: int = None, **kwargs) -> ReviewSummary:
    """Helper to create a review summary; total defaults to the breakdown sum."""
    if total is None:
        total = positive + negative + neutral
    return ReviewSummary(
        total_reviews=total,
        sentiment_breakdown=SentimentBreakdown(positive=positive, negative=negative, neutral=neutral),
        **kwargs,
    )


class TestDistribution:

    def setup_method(self):
        self.aggregator = ReviewAggregator()

    def test_natural_spread(self):
        """89/23/44: positive 0.571, negative 0.147 -> 85, high credibility."""
        analysis = self.aggregator.analyze(make_summary(89, 23, 44, common_negatives=["greasy", "sticky"]))
        assert analysis.review_count == 156
        assert analysis.review_authenticity_score == 85
        assert analysis.review_credibility == Credibility.HIGH
        assert analysis.common_concerns == ["greasy", "sticky"]
        assert analysis.sentiment_distribution == {"positive": 89, "negative": 23, "neutral": 44}

    def test_one_sided_positive(self):
        """84/2/1: positive 0.966 > 0.9 -> 30, credibility low."""
        analysis = self.aggregator.analyze(make_summary(84, 2, 1))
        assert analysis.review_authenticity_score == 30
        assert analysis.review_credibility == Credibility.LOW

    def test_one_sided_negative(self):
        assert self.aggregator.authenticity_score(1, 9, 0) == 30

    def test_neither_band(self):
        # positive 0.85: not one-sided, not natural
        assert self.aggregator.authenticity_score(85, 10, 5) == 60

    def test_band_edges_inclusive(self):
        # positive exactly 0.8, negative exactly 0.1
        assert self.aggregator.authenticity_score(8, 1, 1) == 85

    def test_medium_credibility(self):
        analysis = self.aggregator.analyze(make_summary(7, 0, 3))
        assert analysis.review_authenticity_score == 60
        assert analysis.review_credibility == Credibility.MEDIUM


class TestAbsentReviews:

    def setup_method(self):
        self.aggregator = ReviewAggregator()

    def test_none(self):
        analysis = self.aggregator.analyze(None)
        assert analysis.review_count == 0
        assert analysis.review_authenticity_score == 50
        assert analysis.review_credibility == Credibility.LOW
        assert analysis.common_concerns == []

    def test_zero_reviews_treated_as_absent(self):
        analysis = self.aggregator.analyze(ReviewSummary())
        assert analysis.review_authenticity_score == 50
        assert analysis.review_credibility == Credibility.LOW


class TestTotalsNotReconciled:

    def test_credibility_uses_total_reviews(self):
        """Ratios from the breakdown (natural), count from total_reviews (3)."""
        analysis = ReviewAggregator().analyze(make_summary(89, 23, 44, total=3))
        assert analysis.review_count == 3
        assert analysis.review_authenticity_score == 85
        assert analysis.review_credibility == Credibility.LOW
