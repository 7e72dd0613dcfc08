"""
Tests for the red flag / green flag / recommendation rules.

Usage:
    pytest tests/test_insight_rules.py -v
"""

from dataclasses import replace

from unhyped.scoring.insight_rules import (
    GREEN_FLAG_RULES,
    RECOMMENDATION_RULES,
    RED_FLAG_RULES,
    InsightContext,
    generate_insights,
)
from unhyped.scoring.result_models import (
    BrandRecognition,
    Credibility,
    IngredientAnalysis,
    MarketComparison,
    PriceAnalysis,
    ProductAnalysis,
    ReviewAnalysis,
    SocialAnalysis,
    ValueAssessment,
)


# ============================================================================
# TEST DATA
# ============================================================================

def make_context(**overrides) -> InsightContext:
    """Helper: a context where no rule fires, except the overridden parts."""
    ctx = InsightContext(
        product=ProductAnalysis(
            product_name="Glow Potion",
            platform="generic",
            brand="Glow",
            availability_score=50,
            brand_recognition=BrandRecognition.UNKNOWN,
            price_reasonableness=85,
        ),
        social=SocialAnalysis(
            has_social_data=False,
            promotional_detected=False,
            affiliate_codes_found=0,
            hashtag_authenticity=50,
            influencer_credibility=Credibility.UNKNOWN,
            sponsored_content_probability=0,
        ),
        ingredient=IngredientAnalysis(
            total_ingredients=4,
            beneficial_ingredients=[],
            potentially_harmful=[],
            ingredient_quality_score=30,
            ingredient_authenticity=75,
        ),
        review=ReviewAnalysis(
            review_count=40,
            sentiment_distribution={"positive": 20, "negative": 10, "neutral": 10},
            review_authenticity_score=60,
            common_concerns=[],
            review_credibility=Credibility.MEDIUM,
        ),
        price=PriceAnalysis(
            price_range="Affordable ($15-$30)",
            value_assessment=ValueAssessment.FAIR,
            price_vs_ingredients=50,
            market_comparison=MarketComparison.MARKET_RATE,
        ),
    )
    return replace(ctx, **overrides)


class TestQuietContext:

    def test_no_rule_fires(self):
        assert generate_insights(make_context()) == ([], [], [])

    def test_rule_counts(self):
        assert len(RED_FLAG_RULES) == 5
        assert len(GREEN_FLAG_RULES) == 5
        assert len(RECOMMENDATION_RULES) == 4


class TestRedFlags:

    def test_sponsored_and_affiliate(self):
        base = make_context()
        ctx = make_context(social=replace(
            base.social, has_social_data=True, promotional_detected=True, affiliate_codes_found=2,
        ))
        red, green, recs = generate_insights(ctx)
        assert red == [
            "Sponsored content detected - may be biased promotion",
            "2 affiliate codes found - financial incentive present",
        ]
        assert green == []
        assert recs == ["Research product independently before purchasing - sponsored content detected"]

    def test_irritating_ingredients_and_patch_test(self):
        base = make_context()
        ctx = make_context(ingredient=replace(
            base.ingredient, potentially_harmful=["Fragrance", "Mineral Oil"],
        ))
        red, _, recs = generate_insights(ctx)
        assert red == ["Contains potentially irritating ingredients: Fragrance, Mineral Oil"]
        assert recs == ["Patch test recommended due to potentially irritating ingredients"]

    def test_fake_review_pattern(self):
        base = make_context()
        ctx = make_context(review=replace(base.review, review_authenticity_score=30))
        red, _, _ = generate_insights(ctx)
        assert red == ["Review patterns suggest possible fake reviews"]

    def test_absent_reviews_do_not_look_fake(self):
        """Absent reviews score exactly 50, which is not below the threshold."""
        base = make_context()
        ctx = make_context(review=replace(base.review, review_authenticity_score=50))
        red, _, _ = generate_insights(ctx)
        assert red == []

    def test_poor_value(self):
        base = make_context()
        ctx = make_context(price=replace(base.price, value_assessment=ValueAssessment.POOR))
        red, _, _ = generate_insights(ctx)
        assert red == ["Poor value for money - high price relative to ingredient quality"]


class TestGreenFlags:

    def test_all_green_flags_in_order(self):
        base = make_context()
        ctx = make_context(
            social=replace(base.social, has_social_data=True),
            ingredient=replace(base.ingredient, beneficial_ingredients=["Niacinamide", "Glycerin"]),
            product=replace(base.product, brand_recognition=BrandRecognition.WELL_KNOWN),
            review=replace(base.review, review_credibility=Credibility.HIGH),
            price=replace(base.price, value_assessment=ValueAssessment.GOOD),
        )
        _, green, _ = generate_insights(ctx)
        assert green == [
            "No promotional content detected - likely genuine recommendation",
            "Contains beneficial ingredients: Niacinamide, Glycerin",
            "Product from well-established brand",
            "Reviews appear authentic and credible",
            "Good value for money based on ingredient quality",
        ]

    def test_emerging_brand_not_established(self):
        base = make_context()
        ctx = make_context(product=replace(base.product, brand_recognition=BrandRecognition.EMERGING))
        _, green, _ = generate_insights(ctx)
        assert green == []


class TestRecommendations:

    def test_few_reviews(self):
        base = make_context()
        ctx = make_context(review=replace(base.review, review_count=9))
        _, _, recs = generate_insights(ctx)
        assert recs == ["Look for more reviews from multiple sources before deciding"]

    def test_premium_price(self):
        base = make_context()
        ctx = make_context(price=replace(base.price, market_comparison=MarketComparison.PREMIUM))
        _, _, recs = generate_insights(ctx)
        assert recs == ["Consider if premium price is justified by your specific skincare needs"]

    def test_rules_do_not_suppress_each_other(self):
        """Sponsored content still gets the ingredient green flag."""
        base = make_context()
        ctx = make_context(
            social=replace(base.social, has_social_data=True, promotional_detected=True),
            ingredient=replace(base.ingredient, beneficial_ingredients=["Retinol"]),
        )
        red, green, _ = generate_insights(ctx)
        assert "Sponsored content detected - may be biased promotion" in red
        assert green == ["Contains beneficial ingredients: Retinol"]
