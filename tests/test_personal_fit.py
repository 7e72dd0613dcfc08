"""
Tests for the personal fit report (match and trust scores).

Usage:
    pytest tests/test_personal_fit.py -v
"""

import json

import pytest

from unhyped.data.data_models import IngredientList, ProductRecord, SkinType, UserProfile
from unhyped.scoring.personal_fit import PersonalFitAnalyzer


def make_product(**overrides) -> ProductRecord:
    data = {
        "name": "Glow Potion Night Cream",
        "platform": "sephora",
        "price": "$32.00",
        "rating": 4.7,
        "ingredients": IngredientList(parsed=["Water", "Coconut Oil", "Fragrance", "Niacinamide", "Limonene"]),
        "reviews": ["Loved it"],
    }
    data.update(overrides)
    return ProductRecord(**data)


class TestReport:

    def setup_method(self):
        self.analyzer = PersonalFitAnalyzer()

    def test_normal_skin(self):
        report = self.analyzer.report(make_product(), UserProfile())
        assert report.brand == "Glow"
        assert report.price == 32.0
        assert report.safe_ingredients == ["Water", "Niacinamide"]
        assert [f.name for f in report.flagged_ingredients] == ["Coconut Oil", "Fragrance", "Limonene"]
        # 100 - 25 - 25 - 15
        assert report.match_score == 35
        assert report.trust_score == 100
        assert report.paid_promotions_detected is False
        assert report.reviews_summary == "Loved it..."
        assert report.analysis_summary == {
            "total_ingredients": 5,
            "flagged_count": 3,
            "user_skin_type": "normal",
            "user_concerns": [],
        }

    def test_sensitive_skin_multiplier(self):
        # 100 - 1.5 * 65 = 2.5, rounded half up
        profile = UserProfile(skin_type=SkinType.SENSITIVE)
        report = self.analyzer.report(make_product(), profile)
        assert report.match_score == 3
        assert report.flagged_ingredients[1].recommendation == "Especially avoid due to sensitive skin"

    def test_match_score_never_negative(self):
        product = make_product(ingredients=IngredientList(parsed=[
            "Fragrance", "Parfum", "Coconut Oil", "Formaldehyde", "SD Alcohol",
        ]))
        report = self.analyzer.report(product, UserProfile(skin_type=SkinType.SENSITIVE))
        assert report.match_score == 0

    def test_no_ingredients(self):
        report = self.analyzer.report(make_product(ingredients=IngredientList()), UserProfile())
        assert report.match_score == 0
        assert report.flagged_ingredients == []

    def test_no_reviews(self):
        report = self.analyzer.report(make_product(reviews=[]), UserProfile())
        assert report.reviews_summary == "No reviews found"

    def test_summary_truncated(self):
        report = self.analyzer.report(make_product(reviews=["x" * 500]), UserProfile())
        assert report.reviews_summary == "x" * 200 + "..."

    def test_to_dict_is_json_ready(self):
        report = self.analyzer.report(make_product(), UserProfile(), handle="@glow.code")
        decoded = json.loads(json.dumps(report.to_dict()))
        assert decoded["paid_promotions_detected"] is True
        assert decoded["flagged_ingredients"][0]["severity"] == "high"


class TestTrustScore:

    def setup_method(self):
        self.analyzer = PersonalFitAnalyzer()

    @pytest.mark.parametrize("handle,price,rating,expected", [
        (None, 32.0, None, 100),
        ("@sarah", 32.0, None, 85),
        ("@glow.code", 32.0, None, 70),
        ("@glow.code", 32.0, 4.7, 80),
        (None, 3.5, None, 90),
        (None, 150.0, None, 100),
        ("@sarah", 150.0, None, 90),
        (None, 32.0, 2.5, 75),
        ("@promo_affiliate", 3.5, 2.0, 35),
    ])
    def test_adjustments(self, handle, price, rating, expected):
        assert self.analyzer.trust_score(handle, price, rating) == expected

    def test_unknown_price_not_adjusted(self):
        assert self.analyzer.trust_score(None, 0.0, None) == 100


class TestPaidPromotion:

    @pytest.mark.parametrize("handle,expected", [
        ("@glow.code", True),
        ("@SponsoredBeauty", True),
        ("@linkinbio_deals", True),
        ("@sarah", False),
        ("", False),
        (None, False),
    ])
    def test_handle_pattern(self, handle, expected):
        assert PersonalFitAnalyzer.paid_promotion(handle) is expected
