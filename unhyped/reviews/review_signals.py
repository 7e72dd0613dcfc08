"""
Review Signal Extractor (Deterministic)
=======================================

Per-review sentiment and skincare key phrases using keyword lexicons.
No ML sentiment model: fast, explainable, reproducible.

Usage:
    extractor = ReviewSignalExtractor()
    signal = extractor.extract(review)
"""

import logging
from typing import List, Optional

from .review_models import ReviewRecord, ReviewSignal, Sentiment

logger = logging.getLogger(__name__)


# =============================================================================
# SENTIMENT LEXICON
# =============================================================================
# Used only when the review carries no star rating.
# Keywords are matched case-insensitively as substrings.

POSITIVE_KEYWORDS: List[str] = [
    "love", "amazing", "great", "excellent", "recommend",
    "best", "good", "works", "effective",
]

NEGATIVE_KEYWORDS: List[str] = [
    "hate", "terrible", "awful", "bad", "broke out",
    "irritating", "allergic", "waste",
]

# Star thresholds when a rating is present
POSITIVE_RATING = 4.0
NEGATIVE_RATING = 2.0


# =============================================================================
# SKINCARE KEY PHRASES
# =============================================================================

KEY_PHRASES: List[str] = [
    "moisturizing", "hydrating", "drying", "irritating", "gentle", "harsh",
    "breaking out", "acne", "sensitive skin", "oily skin", "dry skin",
    "absorption", "texture", "scent", "results", "glow",
]


class ReviewSignalExtractor:
    """Sentiment + key phrase extraction for individual reviews."""

    def classify_sentiment(self, content: str, rating: Optional[float] = None) -> Sentiment:
        """
        Rating wins when present (>= 4 positive, <= 2 negative, else
        neutral). Otherwise a keyword vote; ties are neutral.
        """
        if rating is not None:
            if rating >= POSITIVE_RATING:
                return Sentiment.POSITIVE
            if rating <= NEGATIVE_RATING:
                return Sentiment.NEGATIVE
            return Sentiment.NEUTRAL

        text = (content or "").lower()
        positive = sum(1 for keyword in POSITIVE_KEYWORDS if keyword in text)
        negative = sum(1 for keyword in NEGATIVE_KEYWORDS if keyword in text)

        if positive > negative:
            return Sentiment.POSITIVE
        if negative > positive:
            return Sentiment.NEGATIVE
        return Sentiment.NEUTRAL

    def extract_key_phrases(self, content: str) -> List[str]:
        text = (content or "").lower()
        return [phrase for phrase in KEY_PHRASES if phrase in text]

    def extract(self, review: ReviewRecord) -> ReviewSignal:
        return ReviewSignal(
            review=review,
            sentiment=self.classify_sentiment(review.content, review.rating),
            key_phrases=self.extract_key_phrases(review.content),
        )
