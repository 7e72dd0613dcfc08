"""
Review Data Models
==================

Individual reviews collected from product pages and forums, and the
per-review signals extracted from them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..data.data_models import InvalidRecordError, _flag, _optional_float


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass
class ReviewRecord:
    """A single review as collected by a scraper."""
    content: str
    rating: Optional[float] = None     # 1-5 stars, None for forum posts
    author: str = ""
    date: Optional[str] = None
    source: str = "unknown"            # sephora, reddit, amazon, ...
    helpful_count: int = 0
    verified_purchase: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReviewRecord":
        """Unparseable ratings ("N/A", "") become None."""
        if not isinstance(data, dict):
            raise InvalidRecordError(f"Review must be an object, got: {data!r}")
        helpful = _optional_float(data.get("helpful_count"))
        return cls(
            content=str(data.get("content") or data.get("body") or ""),
            rating=_optional_float(data.get("rating")),
            author=str(data.get("author") or ""),
            date=data.get("date"),
            source=str(data.get("source") or data.get("platform") or "unknown"),
            helpful_count=int(helpful) if helpful and helpful > 0 else 0,
            verified_purchase=_flag(data, "verified_purchase"),
        )


@dataclass
class ReviewSignal:
    """Deterministic signals extracted from one review."""
    review: ReviewRecord
    sentiment: Sentiment
    key_phrases: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.review.content,
            "rating": self.review.rating,
            "author": self.review.author,
            "date": self.review.date,
            "source": self.review.source,
            "helpful_count": self.review.helpful_count,
            "sentiment": self.sentiment.value,
            "key_phrases": list(self.key_phrases),
        }
