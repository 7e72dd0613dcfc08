"""
Caption Signal Extractor (Deterministic)
========================================

Extracts promotion signals from a short-form video caption using a
keyword lexicon and regex patterns. No ML, fast, explainable.

Signals:
    - hashtags / mentions (lowercased, prefix removed)
    - affiliate-code-like tokens ("GLOW20", "use code BEAUTY", "link in bio")
    - promotional keywords ("sponsored", "use my code", "limited time", ...)
    - paid promotion flag (keyword, code or disclosure hashtag)

Usage:
    extractor = CaptionSignalExtractor()
    record = extractor.build_record(caption, username="glowgirl", likes=2543, views=45231)
"""

import logging
import re
from typing import Iterable, List, Optional

from ..data.data_models import SocialRecord

logger = logging.getLogger(__name__)


# =============================================================================
# PROMOTION LEXICON
# =============================================================================
# Matched case-insensitively on word boundaries ("ad" must not match "made").

PROMOTIONAL_KEYWORDS: List[str] = [
    "sponsored", "ad", "paid", "partnership", "collab", "gifted",
    "discount", "code", "link", "affiliate", "promo", "sale",
    "swipe up", "link in bio", "use my code", "get yours",
    "limited time", "exclusive", "special offer",
]

# Hashtags that disclose a paid partnership
PAID_DISCLOSURE_HASHTAGS: List[str] = ["ad", "sponsored", "partnership", "paid"]

HASHTAG_PATTERN = re.compile(r"#([\w\u00c0-\u024f\u1e00-\u1eff]+)")
MENTION_PATTERN = re.compile(r"@([\w\u00c0-\u024f\u1e00-\u1eff.]+)")

# (pattern, group) - group 0 keeps the whole match
AFFILIATE_PATTERNS = [
    (re.compile(r"\b[A-Z]{2,}\d{1,3}\b"), 0),                 # GLOW20
    (re.compile(r"\b[A-Z]+\d+\b"), 0),                        # SAVE2024
    (re.compile(r"\buse\s+code\s+([A-Z0-9]+)", re.IGNORECASE), 1),
    (re.compile(r"\bpromo\s+code\s+([A-Z0-9]+)", re.IGNORECASE), 1),
    (re.compile(r"\blink\s+in\s+bio\b", re.IGNORECASE), 0),
]

_KEYWORD_PATTERNS = [
    (keyword, re.compile(r"\b" + r"\s+".join(re.escape(w) for w in keyword.split()) + r"\b", re.IGNORECASE))
    for keyword in PROMOTIONAL_KEYWORDS
]


def _unique(items: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for item in items:
        if item and item not in seen:
            seen.add(item)
            result.append(item)
    return result


def find_promotional_keywords(text: Optional[str]) -> List[str]:
    """Lexicon keywords present in ``text``, in lexicon order."""
    if not text:
        return []
    return [keyword for keyword, pattern in _KEYWORD_PATTERNS if pattern.search(text)]


class CaptionSignalExtractor:
    """Deterministic caption parser producing a normalized SocialRecord."""

    def extract_hashtags(self, caption: str) -> List[str]:
        return _unique(tag.lower() for tag in HASHTAG_PATTERN.findall(caption or ""))

    def extract_mentions(self, caption: str) -> List[str]:
        return _unique(m.lower().rstrip(".") for m in MENTION_PATTERN.findall(caption or ""))

    def extract_affiliate_codes(self, caption: str) -> List[str]:
        """Code-like tokens, uppercased and deduplicated in order of appearance."""
        if not caption:
            return []
        codes = []
        for pattern, group in AFFILIATE_PATTERNS:
            for match in pattern.finditer(caption):
                codes.append(match.group(group).upper())
        return _unique(codes)

    def is_paid_promotion(
        self,
        keywords: List[str],
        affiliate_codes: List[str],
        hashtags: List[str],
    ) -> bool:
        return bool(
            keywords
            or affiliate_codes
            or any(tag in PAID_DISCLOSURE_HASHTAGS for tag in hashtags)
        )

    def build_record(
        self,
        caption: str,
        username: str = "",
        hashtags: Optional[List[str]] = None,
        likes: Optional[int] = None,
        views: Optional[int] = None,
        comments: Optional[int] = None,
        shares: Optional[int] = None,
        video_url: Optional[str] = None,
        posting_date: Optional[str] = None,
        source: str = "tiktok",
    ) -> SocialRecord:
        """
        Build a SocialRecord from a caption.

        Hashtags given explicitly (e.g. from the page's tag list) are merged
        with the ones found in the caption.
        """
        tags = _unique(
            [h.lstrip("#").lower() for h in (hashtags or [])] + self.extract_hashtags(caption)
        )
        codes = self.extract_affiliate_codes(caption)
        keywords = find_promotional_keywords(caption)
        paid = self.is_paid_promotion(keywords, codes, tags)

        logger.debug(
            "Caption signals for @%s: %d hashtags, %d codes, %d keywords, paid=%s",
            username, len(tags), len(codes), len(keywords), paid,
        )

        return SocialRecord(
            username=username,
            caption=caption or "",
            hashtags=tags,
            mentions=self.extract_mentions(caption),
            affiliate_codes=codes,
            promotional_keywords=keywords,
            paid_promotion_detected=paid,
            likes=likes,
            views=views,
            comments=comments,
            shares=shares,
            video_url=video_url,
            posting_date=posting_date,
            source=source,
        )
