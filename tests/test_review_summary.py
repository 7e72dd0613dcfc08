"""
Tests for review sentiment tallying.

Covers:
- Sentiment: star rating first, keyword vote otherwise
- Key phrase extraction
- Summary aggregation: breakdown, average rating, common phrases

Usage:
    pytest tests/test_review_summary.py -v
"""

import pytest

from unhyped.data.data_models import InvalidRecordError
from unhyped.reviews import (
    ReviewRecord,
    ReviewSignalExtractor,
    ReviewSummaryBuilder,
    Sentiment,
)


# ============================================================================
# TEST DATA
# ============================================================================

def make_review(content: str, rating: float = None, author: str = "user") -> ReviewRecord:
    """Helper to create a review."""
    return ReviewRecord(content=content, rating=rating, author=author, source="sephora")


REVIEWS = [
    make_review("Love this moisturizer, so hydrating and gentle", 5.0, "R001"),
    make_review("Very hydrating, my dry skin loves it", 4.0, "R002"),
    make_review("Broke me out, too harsh and drying", 1.0, "R003"),
    make_review("Harsh scent, drying on my cheeks", 2.0, "R004"),
    make_review("It's fine", 3.0, "R005"),
    make_review("Amazing results, highly recommend", None, "R006"),
]


class TestSentiment:

    def setup_method(self):
        self.extractor = ReviewSignalExtractor()

    @pytest.mark.parametrize("rating,expected", [
        (5.0, Sentiment.POSITIVE),
        (4.0, Sentiment.POSITIVE),
        (3.0, Sentiment.NEUTRAL),
        (2.0, Sentiment.NEGATIVE),
        (1.0, Sentiment.NEGATIVE),
    ])
    def test_rating_wins(self, rating, expected):
        assert self.extractor.classify_sentiment("I hate it, terrible", rating) == expected

    def test_keyword_vote_without_rating(self):
        assert self.extractor.classify_sentiment("Amazing, I recommend it") == Sentiment.POSITIVE
        assert self.extractor.classify_sentiment("Awful, total waste") == Sentiment.NEGATIVE

    def test_keyword_tie_is_neutral(self):
        assert self.extractor.classify_sentiment("Good texture but bad smell") == Sentiment.NEUTRAL
        assert self.extractor.classify_sentiment("") == Sentiment.NEUTRAL

    def test_key_phrases(self):
        phrases = self.extractor.extract_key_phrases("Gentle on sensitive skin, no acne so far")
        assert phrases == ["gentle", "acne", "sensitive skin"]


class TestSummaryBuilder:

    def setup_method(self):
        self.builder = ReviewSummaryBuilder()

    def test_breakdown(self):
        summary = self.builder.build(REVIEWS)
        assert summary.total_reviews == 6
        assert summary.sentiment_breakdown.to_dict() == {"positive": 3, "negative": 2, "neutral": 1}

    def test_average_rating_ignores_unrated(self):
        assert self.builder.build(REVIEWS).average_rating == pytest.approx(3.0)

    def test_common_phrases(self):
        summary = self.builder.build(REVIEWS)
        assert summary.common_positives == ["hydrating"]
        assert summary.common_negatives == ["drying", "harsh"]

    def test_empty(self):
        summary = self.builder.build([])
        assert summary.total_reviews == 0
        assert summary.average_rating is None

    def test_report_samples(self):
        builder = ReviewSummaryBuilder(sample_size=2)
        report = builder.build_report(REVIEWS)
        assert report["total_reviews"] == 6
        assert [r["author"] for r in report["recent_reviews"]] == ["R005", "R006"]
        assert [r["author"] for r in report["top_helpful_reviews"]] == ["R001", "R002"]
        assert report["recent_reviews"][1]["sentiment"] == "positive"

    def test_report_empty(self):
        report = self.builder.build_report([])
        assert report["recent_reviews"] == []
        assert report["top_helpful_reviews"] == []


class TestReviewRecord:

    def test_from_dict_aliases(self):
        review = ReviewRecord.from_dict({"body": "Great", "rating": "4", "platform": "amazon"})
        assert review.content == "Great"
        assert review.rating == 4.0
        assert review.source == "amazon"
        assert review.helpful_count == 0

    @pytest.mark.parametrize("raw", ["N/A", "", "not rated", None])
    def test_unparseable_rating_becomes_none(self, raw):
        review = ReviewRecord.from_dict({"content": "love it", "rating": raw})
        assert review.rating is None

    def test_lenient_helpful_count(self):
        assert ReviewRecord.from_dict({"content": "ok", "helpful_count": "12"}).helpful_count == 12
        assert ReviewRecord.from_dict({"content": "ok", "helpful_count": "N/A"}).helpful_count == 0

    def test_verified_purchase_string(self):
        review = ReviewRecord.from_dict({"content": "ok", "verified_purchase": "false"})
        assert review.verified_purchase is False

    @pytest.mark.parametrize("item", ["great stuff", 5, ["love it"]])
    def test_non_object_rejected(self, item):
        with pytest.raises(InvalidRecordError, match="object"):
            ReviewRecord.from_dict(item)


class TestTopHelpful:

    def test_sorted_by_helpful_count(self):
        reviews = [
            ReviewRecord(content="Fine", rating=3.0, author="A", helpful_count=2),
            ReviewRecord(content="Love it", rating=5.0, author="B", helpful_count=40),
            ReviewRecord(content="Meh", rating=2.0, author="C", helpful_count=0),
            ReviewRecord(content="Great", rating=4.0, author="D", helpful_count=40),
        ]
        report = ReviewSummaryBuilder(sample_size=3).build_report(reviews)
        assert [r["author"] for r in report["top_helpful_reviews"]] == ["B", "D", "A"]
        assert [r["author"] for r in report["recent_reviews"]] == ["B", "C", "D"]
