"""
Unhyped Data Models
===================

Dataclasses for the records consumed by the reality check. They are the
data contract with the scraper collaborators (product pages, short-form
video pages, review pages): the engine never parses HTML, it only reads
these already-normalized records.

Models:
    - ProductRecord: Product page facts (name, platform, price text, rating, ingredients)
    - IngredientList: Raw ingredient text + ordered parsed names
    - SocialRecord: Short-form video post (caption, hashtags, codes, engagement)
    - ReviewSummary: Pre-tallied sentiment distribution
    - UserProfile: Skin type and concerns for the personal fit report

Every model exposes ``from_dict`` (scraper JSON shape) and ``to_dict``.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class InvalidRecordError(ValueError):
    """Raised when an input record is missing required data or is inconsistent."""


class SkinType(str, Enum):
    """Skin types supported by the personal fit report."""
    OILY = "oily"
    DRY = "dry"
    COMBINATION = "combination"
    SENSITIVE = "sensitive"
    NORMAL = "normal"


_INGREDIENT_SEPARATOR = re.compile(r"[,;\n]")


def _optional_float(value: Any) -> Optional[float]:
    """Parse a rating-like value ("4.5", 4.5, None) into a float or None."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _optional_count(data: Dict[str, Any], key: str) -> Optional[int]:
    """Read a non-negative engagement counter."""
    value = data.get(key)
    if value is None:
        return None
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise InvalidRecordError(f"'{key}' must be an integer, got: {value!r}")
    if count < 0:
        raise InvalidRecordError(f"'{key}' cannot be negative, got: {count}")
    return count


_TRUE_FLAGS = ("true", "1", "yes", "on")
_FALSE_FLAGS = ("false", "0", "no", "off", "")


def _flag(data: Dict[str, Any], key: str) -> bool:
    """Read a boolean flag that scrapers may emit as a bool, 0/1 or a string."""
    value = data.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_FLAGS:
            return True
        if text in _FALSE_FLAGS:
            return False
    raise InvalidRecordError(f"'{key}' must be a boolean, got: {value!r}")


def _string_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key) or []
    if isinstance(value, str):
        raise InvalidRecordError(f"'{key}' must be a list, got a string")
    return [str(item) for item in value]


def _require(data: Dict[str, Any], key: str, record: str) -> Any:
    if key not in data or data[key] is None:
        raise InvalidRecordError(f"{record} is missing required field '{key}'")
    return data[key]


@dataclass(frozen=True)
class IngredientList:
    """
    Ingredient list of a product.

    ``parsed`` keeps the label order; names are compared case-insensitively
    by the analyzers, deduplication is not required.
    """
    raw: str = ""
    parsed: List[str] = field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: str) -> "IngredientList":
        """Split raw INCI text on commas / semicolons / newlines."""
        names = [
            part.strip().rstrip(".").strip()
            for part in _INGREDIENT_SEPARATOR.split(raw or "")
        ]
        return cls(raw=raw or "", parsed=[name for name in names if name])

    @classmethod
    def from_dict(cls, data: Any) -> "IngredientList":
        if data is None:
            return cls()
        if isinstance(data, str):
            return cls.from_raw(data)
        if isinstance(data, list):
            return cls(raw=", ".join(str(i) for i in data), parsed=[str(i) for i in data])
        raw = data.get("raw", "") or ""
        parsed = data.get("parsed")
        if parsed is None:
            return cls.from_raw(raw)
        return cls(raw=raw, parsed=[str(i) for i in parsed])

    def to_dict(self) -> Dict[str, Any]:
        return {"raw": self.raw, "parsed": list(self.parsed)}

    def __len__(self) -> int:
        return len(self.parsed)


@dataclass(frozen=True)
class ProductRecord:
    """Product page facts. Read-only for the engine."""
    name: str
    platform: str = "generic"
    price: str = ""                          # free text, e.g. "$14.99"
    rating: Optional[float] = None           # 0-5
    ingredients: IngredientList = field(default_factory=IngredientList)
    url: Optional[str] = None
    reviews: List[str] = field(default_factory=list)   # visible review snippets

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductRecord":
        """
        Build from the product scraper JSON.

        Raises:
            InvalidRecordError: name is missing or rating is out of range
        """
        name = str(_require(data, "name", "Product")).strip()
        if not name:
            raise InvalidRecordError("Product name cannot be empty")
        rating = _optional_float(data.get("rating"))
        if rating is not None and not 0 <= rating <= 5:
            raise InvalidRecordError(f"Product rating must be within 0-5, got: {rating}")
        price = data.get("price")
        return cls(
            name=name,
            platform=str(data.get("platform") or "generic").lower(),
            price="" if price is None else str(price),
            rating=rating,
            ingredients=IngredientList.from_dict(data.get("ingredients")),
            url=data.get("url"),
            reviews=_string_list(data, "reviews"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "platform": self.platform,
            "price": self.price,
            "rating": self.rating,
            "ingredients": self.ingredients.to_dict(),
            "url": self.url,
            "reviews": list(self.reviews),
        }


@dataclass(frozen=True)
class SocialRecord:
    """
    Short-form video post, normalized by the collector.

    Hashtags and mentions are lowercase without their prefix. Engagement
    counters are None when the page did not expose them.
    """
    username: str = ""
    caption: str = ""
    hashtags: List[str] = field(default_factory=list)
    mentions: List[str] = field(default_factory=list)
    affiliate_codes: List[str] = field(default_factory=list)
    promotional_keywords: List[str] = field(default_factory=list)
    paid_promotion_detected: bool = False
    likes: Optional[int] = None
    views: Optional[int] = None
    comments: Optional[int] = None
    shares: Optional[int] = None
    video_url: Optional[str] = None
    posting_date: Optional[str] = None
    source: str = "tiktok"

    def __post_init__(self):
        for counter in ("likes", "views", "comments", "shares"):
            value = getattr(self, counter)
            if value is not None and value < 0:
                raise InvalidRecordError(f"'{counter}' cannot be negative, got: {value}")

    @property
    def engagement_rate(self) -> Optional[float]:
        """likes / views when both are present and non-zero."""
        if not self.likes or not self.views:
            return None
        return self.likes / self.views

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_source: str = "tiktok") -> "SocialRecord":
        """Build from the video scraper JSON (``TikTokVideoData`` shape)."""
        return cls(
            username=str(data.get("username") or ""),
            caption=str(data.get("caption") or ""),
            hashtags=[h.lstrip("#").lower() for h in _string_list(data, "hashtags")],
            mentions=[m.lstrip("@").lower() for m in _string_list(data, "mentions")],
            affiliate_codes=_string_list(data, "affiliate_codes"),
            promotional_keywords=_string_list(data, "promotional_keywords"),
            paid_promotion_detected=_flag(data, "paid_promotion_detected"),
            likes=_optional_count(data, "likes"),
            views=_optional_count(data, "views"),
            comments=_optional_count(data, "comments"),
            shares=_optional_count(data, "shares"),
            video_url=data.get("video_url"),
            posting_date=data.get("posting_date"),
            source=str(data.get("source") or default_source),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "caption": self.caption,
            "hashtags": list(self.hashtags),
            "mentions": list(self.mentions),
            "affiliate_codes": list(self.affiliate_codes),
            "promotional_keywords": list(self.promotional_keywords),
            "paid_promotion_detected": self.paid_promotion_detected,
            "likes": self.likes,
            "views": self.views,
            "comments": self.comments,
            "shares": self.shares,
            "video_url": self.video_url,
            "posting_date": self.posting_date,
            "source": self.source,
        }


@dataclass(frozen=True)
class SentimentBreakdown:
    """Pre-tallied sentiment counts."""
    positive: int = 0
    negative: int = 0
    neutral: int = 0

    def __post_init__(self):
        for name in ("positive", "negative", "neutral"):
            if getattr(self, name) < 0:
                raise InvalidRecordError(f"Sentiment count '{name}' cannot be negative")

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral

    def to_dict(self) -> Dict[str, int]:
        return {"positive": self.positive, "negative": self.negative, "neutral": self.neutral}


@dataclass(frozen=True)
class ReviewSummary:
    """
    Review distribution for a product.

    ``sentiment_breakdown`` is expected to sum to ``total_reviews`` but the
    two are never reconciled: ratios come from the breakdown, the
    credibility threshold from ``total_reviews``.
    """
    total_reviews: int = 0
    sentiment_breakdown: SentimentBreakdown = field(default_factory=SentimentBreakdown)
    common_negatives: List[str] = field(default_factory=list)
    common_positives: List[str] = field(default_factory=list)
    average_rating: Optional[float] = None

    def __post_init__(self):
        if self.total_reviews < 0:
            raise InvalidRecordError(f"total_reviews cannot be negative, got: {self.total_reviews}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReviewSummary":
        breakdown = data.get("sentiment_breakdown") or {}
        return cls(
            total_reviews=_optional_count(data, "total_reviews") or 0,
            sentiment_breakdown=SentimentBreakdown(
                positive=_optional_count(breakdown, "positive") or 0,
                negative=_optional_count(breakdown, "negative") or 0,
                neutral=_optional_count(breakdown, "neutral") or 0,
            ),
            common_negatives=_string_list(data, "common_negatives"),
            common_positives=_string_list(data, "common_positives"),
            average_rating=_optional_float(data.get("average_rating")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_reviews": self.total_reviews,
            "sentiment_breakdown": self.sentiment_breakdown.to_dict(),
            "common_negatives": list(self.common_negatives),
            "common_positives": list(self.common_positives),
            "average_rating": self.average_rating,
        }


@dataclass(frozen=True)
class UserProfile:
    """Skin profile used to personalize ingredient warnings."""
    skin_type: SkinType = SkinType.NORMAL
    concerns: List[str] = field(default_factory=list)
    age_range: Optional[str] = None
    allergies: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProfile":
        """
        Raises:
            InvalidRecordError: unknown skin type
        """
        raw_skin = str(data.get("skin_type") or "normal").lower()
        try:
            skin_type = SkinType(raw_skin)
        except ValueError:
            raise InvalidRecordError(
                f"Unknown skin_type '{raw_skin}', expected one of "
                f"{', '.join(s.value for s in SkinType)}"
            )
        return cls(
            skin_type=skin_type,
            concerns=[c.lower() for c in _string_list(data, "concerns")],
            age_range=data.get("age_range"),
            allergies=[a.lower() for a in _string_list(data, "allergies")],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skin_type": self.skin_type.value,
            "concerns": list(self.concerns),
            "age_range": self.age_range,
            "allergies": list(self.allergies),
        }
