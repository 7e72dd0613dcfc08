"""
Review Summary Builder
======================

Tallies individual reviews into the ReviewSummary consumed by the reality
check: sentiment breakdown, average rating and the phrases that come back
in positive / negative reviews.

Usage:
    builder = ReviewSummaryBuilder()
    summary = builder.build(reviews)            # ReviewSummary
    report = builder.build_report(reviews)      # dict with sample reviews
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from ..data.data_models import ReviewSummary, SentimentBreakdown
from .review_models import ReviewRecord, ReviewSignal, Sentiment
from .review_signals import ReviewSignalExtractor

logger = logging.getLogger(__name__)


class ReviewSummaryBuilder:
    """
    Aggregates ReviewSignal objects into a ReviewSummary.

    A phrase is "common" when it appears in at least ``min_phrase_count``
    reviews of the same sentiment; at most ``max_phrases`` are kept, most
    frequent first.
    """

    def __init__(
        self,
        extractor: Optional[ReviewSignalExtractor] = None,
        min_phrase_count: int = 2,
        max_phrases: int = 10,
        sample_size: int = 5,
    ):
        self.extractor = extractor or ReviewSignalExtractor()
        self.min_phrase_count = min_phrase_count
        self.max_phrases = max_phrases
        self.sample_size = sample_size

    def build(self, reviews: Sequence[ReviewRecord]) -> ReviewSummary:
        signals = [self.extractor.extract(r) for r in reviews]
        return self._summarize(signals)

    def build_report(self, reviews: Sequence[ReviewRecord]) -> Dict[str, Any]:
        """Summary plus the most recent and the most helpful reviews."""
        signals = [self.extractor.extract(r) for r in reviews]
        report = self._summarize(signals).to_dict()
        report["recent_reviews"] = [s.to_dict() for s in signals[-self.sample_size:]] if signals else []
        # stable sort keeps input order among equal helpful counts
        helpful = sorted(signals, key=lambda s: s.review.helpful_count, reverse=True)
        report["top_helpful_reviews"] = [s.to_dict() for s in helpful[: self.sample_size]]
        return report

    def _summarize(self, signals: List[ReviewSignal]) -> ReviewSummary:
        if not signals:
            return ReviewSummary()

        counts = Counter(s.sentiment for s in signals)
        ratings = [s.review.rating for s in signals if s.review.rating is not None]
        average_rating = sum(ratings) / len(ratings) if ratings else None

        summary = ReviewSummary(
            total_reviews=len(signals),
            sentiment_breakdown=SentimentBreakdown(
                positive=counts[Sentiment.POSITIVE],
                negative=counts[Sentiment.NEGATIVE],
                neutral=counts[Sentiment.NEUTRAL],
            ),
            common_positives=self.common_phrases(signals, Sentiment.POSITIVE),
            common_negatives=self.common_phrases(signals, Sentiment.NEGATIVE),
            average_rating=average_rating,
        )
        logger.debug(
            "Review summary: %d reviews, breakdown=%s",
            summary.total_reviews, summary.sentiment_breakdown.to_dict(),
        )
        return summary

    def common_phrases(self, signals: Sequence[ReviewSignal], sentiment: Sentiment) -> List[str]:
        phrase_counts: Counter = Counter()
        for signal in signals:
            if signal.sentiment == sentiment:
                phrase_counts.update(signal.key_phrases)

        # Counter keeps first-seen order; sorted() is stable on ties
        frequent = [(p, c) for p, c in phrase_counts.items() if c >= self.min_phrase_count]
        frequent.sort(key=lambda item: item[1], reverse=True)
        return [phrase for phrase, _ in frequent[: self.max_phrases]]
