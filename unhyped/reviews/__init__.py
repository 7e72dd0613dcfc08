"""
Unhyped Review Intelligence
===========================

Deterministic sentiment tallying of collected reviews. No ML sentiment
model: keyword lexicons only.

Modules:
    review_models   - ReviewRecord, ReviewSignal, Sentiment
    review_signals  - Per-review sentiment + skincare key phrases
    review_summary  - Aggregation into the ReviewSummary used by the reality check
"""

from .review_models import ReviewRecord, ReviewSignal, Sentiment
from .review_signals import ReviewSignalExtractor, POSITIVE_KEYWORDS, NEGATIVE_KEYWORDS, KEY_PHRASES
from .review_summary import ReviewSummaryBuilder
