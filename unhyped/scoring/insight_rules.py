"""
Insight rules: red flags, green flags and recommendations.

Each rule is a pure function ``(InsightContext) -> Optional[str]``. Rules
are evaluated in declaration order, every rule runs, and no rule
suppresses another.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .result_models import (
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
from .scoring_config import InsightConfig


@dataclass(frozen=True)
class InsightContext:
    product: ProductAnalysis
    social: SocialAnalysis
    ingredient: IngredientAnalysis
    review: ReviewAnalysis
    price: PriceAnalysis
    config: InsightConfig = field(default_factory=InsightConfig)


InsightRule = Callable[[InsightContext], Optional[str]]


# =============================================================================
# RED FLAGS
# =============================================================================

def sponsored_content(ctx: InsightContext) -> Optional[str]:
    if ctx.social.promotional_detected:
        return "Sponsored content detected - may be biased promotion"
    return None


def affiliate_codes(ctx: InsightContext) -> Optional[str]:
    count = ctx.social.affiliate_codes_found
    if count > 0:
        return f"{count} affiliate codes found - financial incentive present"
    return None


def irritating_ingredients(ctx: InsightContext) -> Optional[str]:
    if ctx.ingredient.potentially_harmful:
        return f"Contains potentially irritating ingredients: {', '.join(ctx.ingredient.potentially_harmful)}"
    return None


def fake_review_pattern(ctx: InsightContext) -> Optional[str]:
    if ctx.review.review_authenticity_score < ctx.config.fake_review_authenticity:
        return "Review patterns suggest possible fake reviews"
    return None


def poor_value(ctx: InsightContext) -> Optional[str]:
    if ctx.price.value_assessment == ValueAssessment.POOR:
        return "Poor value for money - high price relative to ingredient quality"
    return None


# =============================================================================
# GREEN FLAGS
# =============================================================================

def genuine_recommendation(ctx: InsightContext) -> Optional[str]:
    if ctx.social.has_social_data and not ctx.social.promotional_detected:
        return "No promotional content detected - likely genuine recommendation"
    return None


def beneficial_ingredients(ctx: InsightContext) -> Optional[str]:
    if ctx.ingredient.beneficial_ingredients:
        return f"Contains beneficial ingredients: {', '.join(ctx.ingredient.beneficial_ingredients)}"
    return None


def established_brand(ctx: InsightContext) -> Optional[str]:
    if ctx.product.brand_recognition == BrandRecognition.WELL_KNOWN:
        return "Product from well-established brand"
    return None


def credible_reviews(ctx: InsightContext) -> Optional[str]:
    if ctx.review.review_credibility == Credibility.HIGH:
        return "Reviews appear authentic and credible"
    return None


def good_value(ctx: InsightContext) -> Optional[str]:
    if ctx.price.value_assessment in (ValueAssessment.EXCELLENT, ValueAssessment.GOOD):
        return "Good value for money based on ingredient quality"
    return None


# =============================================================================
# RECOMMENDATIONS
# =============================================================================

def research_independently(ctx: InsightContext) -> Optional[str]:
    if ctx.social.promotional_detected:
        return "Research product independently before purchasing - sponsored content detected"
    return None


def patch_test(ctx: InsightContext) -> Optional[str]:
    if ctx.ingredient.potentially_harmful:
        return "Patch test recommended due to potentially irritating ingredients"
    return None


def more_reviews(ctx: InsightContext) -> Optional[str]:
    if ctx.review.review_count < ctx.config.few_reviews:
        return "Look for more reviews from multiple sources before deciding"
    return None


def premium_price(ctx: InsightContext) -> Optional[str]:
    if ctx.price.market_comparison == MarketComparison.PREMIUM:
        return "Consider if premium price is justified by your specific skincare needs"
    return None


RED_FLAG_RULES: Tuple[InsightRule, ...] = (
    sponsored_content,
    affiliate_codes,
    irritating_ingredients,
    fake_review_pattern,
    poor_value,
)

GREEN_FLAG_RULES: Tuple[InsightRule, ...] = (
    genuine_recommendation,
    beneficial_ingredients,
    established_brand,
    credible_reviews,
    good_value,
)

RECOMMENDATION_RULES: Tuple[InsightRule, ...] = (
    research_independently,
    patch_test,
    more_reviews,
    premium_price,
)


def apply_rules(rules: Tuple[InsightRule, ...], ctx: InsightContext) -> List[str]:
    """Run every rule in order and keep the messages that fired."""
    messages = []
    for rule in rules:
        message = rule(ctx)
        if message is not None:
            messages.append(message)
    return messages


def generate_insights(ctx: InsightContext) -> Tuple[List[str], List[str], List[str]]:
    """(red_flags, green_flags, recommendations)"""
    return (
        apply_rules(RED_FLAG_RULES, ctx),
        apply_rules(GREEN_FLAG_RULES, ctx),
        apply_rules(RECOMMENDATION_RULES, ctx),
    )
