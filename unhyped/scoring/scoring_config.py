"""
Thresholds and weights for the Unhyped reality check.

Every calibration constant of the engine lives here.

PHILOSOPHY:
- All thresholds are explicit and documented
- No "magic number" inside the analyzers
- Tunable without touching the scoring logic

Step functions are written as ``(threshold, value)`` tuples, scanned in
order; the first matching threshold wins.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class IngredientConfig:
    """
    INGREDIENT scoring.

    QUALITY:
        round(beneficial_ratio * 70 + (1 - harmful_ratio) * 30)
        +10 when at least one beneficial and no harmful ingredient.
        Empty list -> 0.

    AUTHENTICITY (plausibility of a real INCI list):
        base 75, +10 for a plausible length, +10 when the list starts
        with water/aqua, +5 when a known preservative is present.
        Empty list -> 50 (absent, not implausible).
    """
    beneficial_weight: float = 70.0
    harmless_weight: float = 30.0
    clean_formula_bonus: int = 10
    empty_quality: int = 0

    authenticity_base: int = 75
    empty_authenticity: int = 50
    plausible_count_range: Tuple[int, int] = (5, 50)
    plausible_count_bonus: int = 10
    water_base_bonus: int = 10
    water_base_names: Tuple[str, ...] = ("water", "aqua")
    preservative_bonus: int = 5

    # Names shorter than this are parsing noise
    min_name_length: int = 3


@dataclass(frozen=True)
class PromotionConfig:
    """
    SOCIAL promotion detection.

    HASHTAGS:
        Substring match against spammy / organic tokens.
        spammy > organic -> 30, organic > spammy -> 85, else 60.

    SPONSORED PROBABILITY (additive, capped at 100):
        +40 paid flag, +30 affiliate code, +20 promotional keyword,
        +10 per disclosure hashtag.

    CREDIBILITY (coarse heuristic, not a verified signal):
        likes / views > 0.05 high, > 0.02 medium, else low.
    """
    spammy_tokens: Tuple[str, ...] = ("ad", "sponsored", "promo", "affiliate", "linkinbio")
    organic_tokens: Tuple[str, ...] = ("skincare", "beauty", "selfcare", "routine", "review")
    disclosure_hashtags: Tuple[str, ...] = ("ad", "sponsored", "promo", "affiliate", "gifted")

    spammy_authenticity: int = 30
    organic_authenticity: int = 85
    mixed_authenticity: int = 60
    no_hashtag_authenticity: int = 75
    absent_authenticity: int = 50

    paid_flag_points: int = 40
    affiliate_code_points: int = 30
    promotional_keyword_points: int = 20
    disclosure_hashtag_points: int = 10
    max_probability: int = 100

    # (engagement_rate strictly above, credibility)
    engagement_thresholds: Tuple[Tuple[float, str], ...] = (
        (0.05, "high"),
        (0.02, "medium"),
    )


@dataclass(frozen=True)
class ReviewConfig:
    """
    REVIEW distribution analysis.

    AUTHENTICITY:
        positive_ratio > 0.9 or negative_ratio > 0.8 -> 30 (one-sided)
        0.4 <= pos <= 0.8 and 0.1 <= neg <= 0.4 -> 85 (natural spread)
        otherwise -> 60

    CREDIBILITY (count from total_reviews, authenticity from the ratios):
        >= 20 reviews and authenticity >= 70 -> high
        >= 5 reviews and authenticity >= 50 -> medium
        otherwise -> low (absence of reviews is a weak negative)
    """
    absent_authenticity: int = 50

    one_sided_positive: float = 0.9
    one_sided_negative: float = 0.8
    one_sided_authenticity: int = 30

    natural_positive_range: Tuple[float, float] = (0.4, 0.8)
    natural_negative_range: Tuple[float, float] = (0.1, 0.4)
    natural_authenticity: int = 85

    default_authenticity: int = 60

    # (min_reviews, min_authenticity, credibility)
    credibility_thresholds: Tuple[Tuple[int, int, str], ...] = (
        (20, 70, "high"),
        (5, 50, "medium"),
    )


@dataclass(frozen=True)
class PriceConfig:
    """
    PRICE evaluation (USD, inclusive upper bounds).

    The range label and the market comparison are two independent step
    functions with their own boundaries.

    VALUE FOR MONEY:
        value = ingredient_quality / (price / 10)

    PRICE VS INGREDIENTS (rough proxy, not an economic model):
        expected = quality * 0.8
        score = clamp(round(expected / max(price, 1) * 100))
    """
    range_labels: Tuple[Tuple[float, str], ...] = (
        (15, "Budget ($0-$15)"),
        (30, "Affordable ($15-$30)"),
        (60, "Mid-range ($30-$60)"),
        (100, "Premium ($60-$100)"),
    )
    top_range_label: str = "Luxury ($100+)"

    market_tiers: Tuple[Tuple[float, str], ...] = (
        (20, "below_market"),
        (50, "market_rate"),
        (100, "above_market"),
    )
    top_market_tier: str = "premium"

    # (value >= threshold, assessment)
    value_thresholds: Tuple[Tuple[float, str], ...] = (
        (8, "excellent"),
        (6, "good"),
        (4, "fair"),
    )
    lowest_value: str = "poor"
    value_price_divisor: float = 10.0

    expected_price_factor: float = 0.8
    min_price_floor: float = 1.0

    unknown_price_score: int = 50


@dataclass(frozen=True)
class ProductConfig:
    """
    PRODUCT legitimacy.

    AVAILABILITY: static per-platform constant.
    PRICE REASONABLENESS: independent step function over the parsed price.
    """
    availability_by_platform: Tuple[Tuple[str, int], ...] = (
        ("amazon", 90),
        ("sephora", 85),
        ("oliveyoung", 70),
        ("yesstyle", 65),
    )
    default_availability: int = 50

    price_reasonableness: Tuple[Tuple[float, int], ...] = (
        (15, 95),
        (30, 85),
        (60, 70),
        (100, 50),
    )
    top_price_reasonableness: int = 30
    unknown_price_reasonableness: int = 50


@dataclass(frozen=True)
class VerdictConfig:
    """
    Composite score and verdict.

    Social is weighted highest: promotional bias is the dominant
    authenticity risk.
    """
    weights: Tuple[Tuple[str, float], ...] = (
        ("product", 0.20),
        ("social", 0.30),
        ("ingredient", 0.25),
        ("review", 0.15),
        ("price", 0.10),
    )

    # Substituted for a component whose input is absent
    neutral_social_score: int = 75
    neutral_review_score: int = 75

    sponsored_override: int = 70
    authentic_threshold: int = 70

    high_confidence_score: int = 80
    medium_confidence_score: int = 60


@dataclass(frozen=True)
class InsightConfig:
    """Thresholds used by the insight rules."""
    fake_review_authenticity: int = 50
    few_reviews: int = 10


@dataclass(frozen=True)
class PersonalFitConfig:
    """
    Personal fit report (match and trust scores).

    MATCH: start at 100, subtract a penalty per flagged ingredient,
    multiplied for sensitive skin.

    TRUST: start at 100, adjusted by the influencer handle, the price and
    the rating, clamped to [0, 100].
    """
    severity_penalties: Tuple[Tuple[str, int], ...] = (
        ("high", 25),
        ("medium", 15),
        ("low", 5),
    )
    sensitive_multiplier: float = 1.5

    promo_handle_tokens: Tuple[str, ...] = ("ad", "sponsored", "discount", "code", "link", "affiliate")
    promo_handle_penalty: int = -30
    handle_penalty: int = -15

    cheap_price: float = 5.0
    cheap_price_penalty: int = -10
    premium_price: float = 100.0
    premium_price_bonus: int = 5

    low_rating: float = 3.0
    low_rating_penalty: int = -25
    high_rating: float = 4.5
    high_rating_bonus: int = 10

    summary_length: int = 200


@dataclass
class ScoringConfig:
    """
    Global configuration of the reality check.

    Aggregates every component configuration.
    Single entry point for calibration.
    """
    ingredient: IngredientConfig = field(default_factory=IngredientConfig)
    promotion: PromotionConfig = field(default_factory=PromotionConfig)
    review: ReviewConfig = field(default_factory=ReviewConfig)
    price: PriceConfig = field(default_factory=PriceConfig)
    product: ProductConfig = field(default_factory=ProductConfig)
    verdict: VerdictConfig = field(default_factory=VerdictConfig)
    insight: InsightConfig = field(default_factory=InsightConfig)
    personal_fit: PersonalFitConfig = field(default_factory=PersonalFitConfig)

    min_score: int = 0
    max_score: int = 100

    @property
    def weights(self) -> Dict[str, float]:
        return dict(self.verdict.weights)

    def validate(self) -> bool:
        """Check configuration consistency."""
        total_weight = sum(weight for _, weight in self.verdict.weights)
        assert abs(total_weight - 1.0) < 1e-9, \
            f"Sum of weights ({total_weight}) != 1.0"
        names = [name for name, _ in self.verdict.weights]
        assert sorted(names) == sorted(("product", "social", "ingredient", "review", "price")), \
            f"Unexpected weight components: {names}"
        low, high = self.ingredient.plausible_count_range
        assert low <= high, f"Invalid plausible ingredient count range: {low}-{high}"
        return True


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive scores (round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    """Round and clamp a score to [low, high]."""
    return max(low, min(high, round_half_up(value)))


DEFAULT_CONFIG = ScoringConfig()
