"""
Unhyped Social Signals
======================

Deterministic extraction of promotion signals from short-form video
captions. Produces the SocialRecord consumed by the reality check.

Modules:
    caption_signals - hashtags, mentions, affiliate codes, promotional keywords
"""

from .caption_signals import (
    CaptionSignalExtractor,
    PROMOTIONAL_KEYWORDS,
    PAID_DISCLOSURE_HASHTAGS,
    find_promotional_keywords,
)

__all__ = [
    "CaptionSignalExtractor",
    "PROMOTIONAL_KEYWORDS",
    "PAID_DISCLOSURE_HASHTAGS",
    "find_promotional_keywords",
]
