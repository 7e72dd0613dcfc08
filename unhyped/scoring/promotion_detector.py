"""
Promotion Detector (Deterministic)
==================================

Scores a short-form video post for sponsorship signals.

Rule-based by design: every point of ``sponsored_content_probability`` is
traceable to a concrete textual signal (paid flag, affiliate code,
promotional keyword, disclosure hashtag), which is what the red flags and
recommendations shown to the user rely on.

Usage:
    detector = PromotionDetector()
    analysis = detector.analyze(social_record)   # or analyze(None)
"""

import logging
from typing import List, Optional, Sequence

from ..data.data_models import SocialRecord
from ..social.caption_signals import find_promotional_keywords
from .result_models import Credibility, SocialAnalysis
from .scoring_config import PromotionConfig

logger = logging.getLogger(__name__)


class PromotionDetector:
    """Sponsorship and credibility signals of a social post."""

    def __init__(self, config: Optional[PromotionConfig] = None):
        self.config = config or PromotionConfig()

    def analyze(self, social: Optional[SocialRecord]) -> SocialAnalysis:
        """
        Analyze a social record; absence yields the neutral result.

        Absent -> has_social_data=False, probability 0, hashtag
        authenticity 50, credibility unknown.
        """
        cfg = self.config
        if social is None:
            return SocialAnalysis(
                has_social_data=False,
                promotional_detected=False,
                affiliate_codes_found=0,
                hashtag_authenticity=cfg.absent_authenticity,
                influencer_credibility=Credibility.UNKNOWN,
                sponsored_content_probability=0,
            )

        keywords = self.promotional_keywords(social)
        disclosures = self.disclosure_hashtags(social.hashtags)
        probability = self.sponsored_probability(
            paid_flag=social.paid_promotion_detected,
            affiliate_codes=len(social.affiliate_codes),
            keyword_count=len(keywords),
            disclosure_count=len(disclosures),
        )

        analysis = SocialAnalysis(
            has_social_data=True,
            promotional_detected=social.paid_promotion_detected,
            affiliate_codes_found=len(social.affiliate_codes),
            hashtag_authenticity=self.hashtag_authenticity(social.hashtags),
            influencer_credibility=self.influencer_credibility(social),
            sponsored_content_probability=probability,
            promotional_keywords_found=keywords,
            disclosure_hashtags=disclosures,
            engagement_rate=social.engagement_rate,
        )
        logger.debug(
            "Social @%s: probability=%d hashtags=%d credibility=%s",
            social.username, probability, analysis.hashtag_authenticity,
            analysis.influencer_credibility.value,
        )
        return analysis

    # =========================================================================
    # SIGNALS
    # =========================================================================

    def hashtag_authenticity(self, hashtags: Sequence[str]) -> int:
        """
        spammy > organic -> 30, organic > spammy -> 85, else 60.

        A hashtag counts as spammy / organic when it contains one of the
        tokens (so "skincareroutine" is organic). No hashtag at all -> 75.
        """
        cfg = self.config
        if not hashtags:
            return cfg.no_hashtag_authenticity

        tags = [tag.lower() for tag in hashtags]
        spammy = sum(1 for tag in tags if any(token in tag for token in cfg.spammy_tokens))
        organic = sum(1 for tag in tags if any(token in tag for token in cfg.organic_tokens))

        if spammy > organic:
            return cfg.spammy_authenticity
        if organic > spammy:
            return cfg.organic_authenticity
        return cfg.mixed_authenticity

    def influencer_credibility(self, social: SocialRecord) -> Credibility:
        """
        Engagement-rate proxy (likes / views). Heuristic, not verified.
        """
        rate = social.engagement_rate
        if rate is None:
            return Credibility.UNKNOWN
        for threshold, level in self.config.engagement_thresholds:
            if rate > threshold:
                return Credibility(level)
        return Credibility.LOW

    def promotional_keywords(self, social: SocialRecord) -> List[str]:
        """Keywords reported by the collector plus those found in the caption."""
        found = [k.lower() for k in social.promotional_keywords]
        for keyword in find_promotional_keywords(social.caption):
            if keyword not in found:
                found.append(keyword)
        return found

    def disclosure_hashtags(self, hashtags: Sequence[str]) -> List[str]:
        """Hashtags exactly equal to a disclosure tag (each occurrence counts)."""
        return [tag.lower() for tag in hashtags if tag.lower() in self.config.disclosure_hashtags]

    def sponsored_probability(
        self,
        paid_flag: bool,
        affiliate_codes: int,
        keyword_count: int,
        disclosure_count: int,
    ) -> int:
        """
        FORMULA (additive, capped at 100):
            +40 paid flag
            +30 at least one affiliate code
            +20 at least one promotional keyword
            +10 per disclosure hashtag
        """
        cfg = self.config
        probability = 0
        if paid_flag:
            probability += cfg.paid_flag_points
        if affiliate_codes > 0:
            probability += cfg.affiliate_code_points
        if keyword_count > 0:
            probability += cfg.promotional_keyword_points
        probability += disclosure_count * cfg.disclosure_hashtag_points
        return min(cfg.max_probability, probability)
