"""
Tests for the sponsorship signals of a social post.

Usage:
    pytest tests/test_promotion_detector.py -v
"""

import pytest

from unhyped.data.data_models import SocialRecord
from unhyped.scoring.promotion_detector import PromotionDetector
from unhyped.scoring.result_models import Credibility


# ============================================================================
# TEST DATA
# ============================================================================

def make_post(**overrides) -> SocialRecord:
    """Helper to create a social record."""
    data = {
        "username": "skincare_sarah",
        "caption": "",
        "hashtags": [],
        "affiliate_codes": [],
        "promotional_keywords": [],
        "paid_promotion_detected": False,
    }
    data.update(overrides)
    return SocialRecord(**data)


AUTHENTIC_POST = make_post(
    caption="Been using this for 3 months, my dry skin finally feels normal",
    hashtags=["skincare", "dryskin", "cerave", "routine", "skincaretips"],
    likes=2543,
    views=45231,
)

SPONSORED_POST = make_post(
    username="beauty_deals",
    caption="Obsessed with this! Use my code BEAUTY20 for a discount",
    hashtags=["ad", "sponsored", "skincare", "affiliate", "gifted", "promo", "discount"],
    affiliate_codes=["BEAUTY20"],
    promotional_keywords=["use my code", "discount"],
    paid_promotion_detected=True,
    likes=120,
    views=15000,
)


class TestAbsentSocial:

    def test_neutral_result(self):
        analysis = PromotionDetector().analyze(None)
        assert analysis.has_social_data is False
        assert analysis.promotional_detected is False
        assert analysis.affiliate_codes_found == 0
        assert analysis.hashtag_authenticity == 50
        assert analysis.influencer_credibility == Credibility.UNKNOWN
        assert analysis.sponsored_content_probability == 0


class TestSponsoredProbability:

    def setup_method(self):
        self.detector = PromotionDetector()

    def test_flag_code_and_two_disclosures(self):
        """40 (flag) + 30 (code) + 2 x 10 (#ad, #sponsored) = 90."""
        post = make_post(
            hashtags=["ad", "sponsored", "skincare"],
            affiliate_codes=["GLOW20"],
            paid_promotion_detected=True,
        )
        analysis = self.detector.analyze(post)
        assert analysis.sponsored_content_probability == 90
        assert analysis.disclosure_hashtags == ["ad", "sponsored"]

    def test_capped_at_100(self):
        analysis = self.detector.analyze(SPONSORED_POST)
        assert analysis.sponsored_content_probability == 100

    def test_keyword_points_counted_once(self):
        assert self.detector.sponsored_probability(False, 0, keyword_count=5, disclosure_count=0) == 20

    def test_affiliate_points_counted_once(self):
        assert self.detector.sponsored_probability(False, 3, 0, 0) == 30

    def test_caption_keywords_detected(self):
        post = make_post(caption="Huge SALE this week, link in bio")
        assert self.detector.promotional_keywords(post) == ["link", "sale", "link in bio"]
        assert self.detector.analyze(post).sponsored_content_probability == 20

    def test_keywords_match_whole_words_only(self):
        post = make_post(caption="Made with love, no additives")
        assert self.detector.promotional_keywords(post) == []

    def test_organic_post_has_no_probability(self):
        assert self.detector.analyze(AUTHENTIC_POST).sponsored_content_probability == 0


class TestHashtagAuthenticity:

    def setup_method(self):
        self.detector = PromotionDetector()

    def test_organic_majority(self):
        assert self.detector.hashtag_authenticity(AUTHENTIC_POST.hashtags) == 85

    def test_spammy_majority(self):
        assert self.detector.hashtag_authenticity(["ad", "promo", "skincare"]) == 30

    def test_tie_is_mixed(self):
        assert self.detector.hashtag_authenticity(["ad", "skincare"]) == 60

    def test_unrelated_hashtags_are_mixed(self):
        assert self.detector.hashtag_authenticity(["fyp", "viral"]) == 60

    def test_no_hashtags(self):
        assert self.detector.hashtag_authenticity([]) == 75


class TestInfluencerCredibility:

    def setup_method(self):
        self.detector = PromotionDetector()

    @pytest.mark.parametrize("likes,views,expected", [
        (600, 10000, Credibility.HIGH),
        (500, 10000, Credibility.MEDIUM),
        (250, 10000, Credibility.MEDIUM),
        (200, 10000, Credibility.LOW),
    ])
    def test_engagement_thresholds(self, likes, views, expected):
        post = make_post(likes=likes, views=views)
        assert self.detector.influencer_credibility(post) == expected

    def test_unknown_without_views(self):
        assert self.detector.influencer_credibility(make_post(likes=10)) == Credibility.UNKNOWN

    def test_authentic_post_engagement(self):
        analysis = self.detector.analyze(AUTHENTIC_POST)
        assert analysis.influencer_credibility == Credibility.HIGH
        assert analysis.engagement_rate == pytest.approx(2543 / 45231)
