"""
Unhyped Reality Check Engine - deterministic authenticity verdict.

Fuses product metadata, social promotion signals, ingredient facts, review
distribution and price into a bounded score (0-100), a verdict, a
confidence level and human-readable rationale.

PHILOSOPHY:
- No ML, no learned weights
- Every score is REPRODUCIBLE with the same inputs
- Every score is EXPLAINABLE with a calculation trace
- Missing inputs degrade to documented neutral values, never to errors

ARCHITECTURE:
- Five leaf analyzers (ingredient, promotion, review, price, product)
- RealityCheckEngine: runs them, weights the components, derives the
  verdict and confidence, and applies the insight rules
- AnalysisResult: frozen result tree + component trace

USAGE:
    from unhyped.scoring import RealityCheckEngine

    engine = RealityCheckEngine()
    result = engine.analyze_product(product, social=post, reviews=summary)

    print(result.reality_score)
    print(result.overall_verdict)
    print(result.get_explanation())
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..data.config import Settings, get_settings
from ..data.data_models import ProductRecord, ReviewSummary, SocialRecord
from .ingredient_classifier import IngredientClassifier
from .insight_rules import InsightContext, generate_insights
from .price_evaluator import PriceEvaluator
from .product_profiler import ProductProfiler
from .promotion_detector import PromotionDetector
from .review_aggregator import ReviewAggregator
from .reference_data import IngredientKnowledgeBase, default_knowledge_base, load_knowledge_base
from .result_models import (
    AnalysisResult,
    ComponentScore,
    ConfidenceLevel,
    IngredientAnalysis,
    PriceAnalysis,
    ProductAnalysis,
    ReviewAnalysis,
    SocialAnalysis,
    Verdict,
)
from .scoring_config import DEFAULT_CONFIG, ScoringConfig, clamp_score

logger = logging.getLogger(__name__)

BatchItem = Union[
    ProductRecord,
    Tuple[ProductRecord],
    Tuple[ProductRecord, Optional[SocialRecord]],
    Tuple[ProductRecord, Optional[SocialRecord], Optional[ReviewSummary]],
]


class RealityCheckEngine:
    """
    Reality check orchestrator - 100% deterministic.

    Components and weights:
    - PRODUCT (20%): availability and price reasonableness
    - SOCIAL (30%): sponsorship probability and hashtag authenticity
    - INGREDIENT (25%): quality and list plausibility
    - REVIEW (15%): distribution authenticity
    - PRICE (10%): price vs ingredient quality

    CRITICAL RULE:
    A paid promotion (or sponsored probability > 70) is always
    "likely_sponsored", whatever the score.

    The engine only holds immutable configuration, so one instance can
    serve concurrent calls.
    """

    def __init__(
        self,
        knowledge_base: Optional[IngredientKnowledgeBase] = None,
        config: Optional[ScoringConfig] = None,
    ):
        """
        Args:
            knowledge_base: Reference tables. If None, the bundled tables.
            config: Scoring configuration. If None, DEFAULT_CONFIG.
        """
        self.config = config or DEFAULT_CONFIG
        self.config.validate()
        self.knowledge_base = knowledge_base or default_knowledge_base()

        self.ingredients = IngredientClassifier(self.knowledge_base, self.config.ingredient)
        self.promotion = PromotionDetector(self.config.promotion)
        self.reviews = ReviewAggregator(self.config.review)
        self.prices = PriceEvaluator(self.config.price)
        self.products = ProductProfiler(self.knowledge_base, self.config.product)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "RealityCheckEngine":
        """
        Build an engine from the environment settings.

        Uses the UNHYPED_KNOWLEDGE_BASE file when set, the bundled tables
        otherwise.
        """
        settings = settings or get_settings()
        knowledge_base = None
        if settings.engine.knowledge_base_path:
            knowledge_base = load_knowledge_base(settings.engine.knowledge_base_path)
        return cls(knowledge_base=knowledge_base)

    # =========================================================================
    # MAIN ENTRY POINT
    # =========================================================================

    def analyze_product(
        self,
        product: ProductRecord,
        social: Optional[SocialRecord] = None,
        reviews: Optional[ReviewSummary] = None,
    ) -> AnalysisResult:
        """
        Run the full reality check of one product.

        Args:
            product: Product page facts (required).
            social: Short-form video post, if one was collected.
            reviews: Review distribution, if one was collected.

        Returns:
            AnalysisResult, always fully populated.
        """
        logger.info(
            "Analyzing %s (platform=%s, social=%s, reviews=%s)",
            product.name, product.platform, social is not None, reviews is not None,
        )

        ingredient_analysis = self.ingredients.analyze(product.ingredients.parsed)
        social_analysis = self.promotion.analyze(social)
        review_analysis = self.reviews.analyze(reviews)
        price_analysis = self.prices.analyze(product.price, ingredient_analysis.ingredient_quality_score)
        product_analysis = self.products.analyze(product)

        component_scores = self.compute_components(
            product_analysis, social_analysis, ingredient_analysis, review_analysis, price_analysis,
        )
        reality_score = self.weighted_score(component_scores)
        verdict = self.determine_verdict(reality_score, social_analysis)
        confidence = self.determine_confidence(reality_score, social_analysis)

        red_flags, green_flags, recommendations = generate_insights(InsightContext(
            product=product_analysis,
            social=social_analysis,
            ingredient=ingredient_analysis,
            review=review_analysis,
            price=price_analysis,
            config=self.config.insight,
        ))

        result = AnalysisResult(
            product_analysis=product_analysis,
            social_analysis=social_analysis,
            ingredient_analysis=ingredient_analysis,
            review_analysis=review_analysis,
            price_analysis=price_analysis,
            reality_score=reality_score,
            confidence_level=confidence,
            overall_verdict=verdict,
            red_flags=red_flags,
            green_flags=green_flags,
            recommendations=recommendations,
            analysis_timestamp=datetime.now(timezone.utc).isoformat(),
            data_sources=self.data_sources(product, social, review_analysis),
            component_scores=component_scores,
        )

        logger.info(
            "Reality check for %s: score=%d verdict=%s confidence=%s",
            product.name, reality_score, verdict.value, confidence.value,
            extra={"product": product.name, "score": reality_score, "verdict": verdict.value},
        )
        return result

    def analyze_batch(self, items: Iterable[BatchItem]) -> List[AnalysisResult]:
        """
        Analyze several products and sort by reality score (highest first).

        Each item is a ProductRecord or a (product, social, reviews) tuple
        where trailing elements may be omitted.
        """
        results = []
        for item in items:
            if isinstance(item, ProductRecord):
                results.append(self.analyze_product(item))
            else:
                results.append(self.analyze_product(*item))

        results.sort(key=lambda r: r.reality_score, reverse=True)
        return results

    # =========================================================================
    # COMPONENT SCORES
    # =========================================================================

    def compute_components(
        self,
        product: ProductAnalysis,
        social: SocialAnalysis,
        ingredient: IngredientAnalysis,
        review: ReviewAnalysis,
        price: PriceAnalysis,
    ) -> Dict[str, ComponentScore]:
        """
        FORMULAS:
            product    = avg(availability, price_reasonableness)
            social     = avg(100 - sponsored_probability, hashtag_authenticity)
                         or 75 without social data
            ingredient = avg(quality, authenticity)
            review     = review authenticity, or 75 without reviews
            price      = price_vs_ingredients
        """
        cfg = self.config.verdict
        weights = self.config.weights

        product_score = (product.availability_score + product.price_reasonableness) / 2
        if social.has_social_data:
            social_score = ((100 - social.sponsored_content_probability) + social.hashtag_authenticity) / 2
            social_explanation = (
                f"  Sponsored probability: {social.sponsored_content_probability}\n"
                f"  Hashtag authenticity: {social.hashtag_authenticity}\n"
                f"  -> avg(100 - {social.sponsored_content_probability}, {social.hashtag_authenticity})"
            )
        else:
            social_score = cfg.neutral_social_score
            social_explanation = f"  No social data -> neutral {cfg.neutral_social_score}"

        ingredient_score = (ingredient.ingredient_quality_score + ingredient.ingredient_authenticity) / 2
        if review.review_count > 0:
            review_score = review.review_authenticity_score
            review_explanation = (
                f"  {review.review_count} reviews, distribution {review.sentiment_distribution}\n"
                f"  -> authenticity {review.review_authenticity_score}"
            )
        else:
            review_score = cfg.neutral_review_score
            review_explanation = f"  No reviews -> neutral {cfg.neutral_review_score}"

        return {
            "product": ComponentScore(
                name="product",
                score=product_score,
                weight=weights["product"],
                details={
                    "availability_score": product.availability_score,
                    "price_reasonableness": product.price_reasonableness,
                    "brand_recognition": product.brand_recognition,
                },
                explanation=(
                    f"  Platform: {product.platform} -> availability {product.availability_score}\n"
                    f"  Price reasonableness: {product.price_reasonableness}\n"
                    f"  Brand: {product.brand} ({product.brand_recognition.value})"
                ),
            ),
            "social": ComponentScore(
                name="social",
                score=social_score,
                weight=weights["social"],
                details={
                    "has_social_data": social.has_social_data,
                    "sponsored_content_probability": social.sponsored_content_probability,
                    "hashtag_authenticity": social.hashtag_authenticity,
                },
                explanation=social_explanation,
            ),
            "ingredient": ComponentScore(
                name="ingredient",
                score=ingredient_score,
                weight=weights["ingredient"],
                details={
                    "total_ingredients": ingredient.total_ingredients,
                    "quality": ingredient.ingredient_quality_score,
                    "authenticity": ingredient.ingredient_authenticity,
                },
                explanation=(
                    f"  {ingredient.total_ingredients} ingredients, "
                    f"{len(ingredient.beneficial_ingredients)} beneficial, "
                    f"{len(ingredient.potentially_harmful)} potentially harmful\n"
                    f"  Quality {ingredient.ingredient_quality_score}, "
                    f"authenticity {ingredient.ingredient_authenticity}"
                ),
            ),
            "review": ComponentScore(
                name="review",
                score=review_score,
                weight=weights["review"],
                details={
                    "review_count": review.review_count,
                    "review_authenticity_score": review.review_authenticity_score,
                    "review_credibility": review.review_credibility,
                },
                explanation=review_explanation,
            ),
            "price": ComponentScore(
                name="price",
                score=price.price_vs_ingredients,
                weight=weights["price"],
                details={
                    "price_range": price.price_range,
                    "value_assessment": price.value_assessment,
                    "market_comparison": price.market_comparison,
                },
                explanation=(
                    f"  {price.price_range}, {price.market_comparison.value}\n"
                    f"  Value: {price.value_assessment.value}, "
                    f"price vs ingredients {price.price_vs_ingredients}"
                ),
            ),
        }

    def weighted_score(self, components: Dict[str, ComponentScore]) -> int:
        """sum(component * weight), rounded and clamped to [0, 100]."""
        total = sum(comp.weighted for comp in components.values())
        return clamp_score(total, self.config.min_score, self.config.max_score)

    # =========================================================================
    # VERDICT & CONFIDENCE
    # =========================================================================

    def determine_verdict(self, reality_score: int, social: SocialAnalysis) -> Verdict:
        """
        promotional or sponsored probability > 70 -> likely_sponsored
        (overrides the score); else score >= 70 -> authentic; else suspicious.
        """
        cfg = self.config.verdict
        if social.promotional_detected or social.sponsored_content_probability > cfg.sponsored_override:
            return Verdict.LIKELY_SPONSORED
        if reality_score >= cfg.authentic_threshold:
            return Verdict.AUTHENTIC
        return Verdict.SUSPICIOUS

    def determine_confidence(self, reality_score: int, social: SocialAnalysis) -> ConfidenceLevel:
        cfg = self.config.verdict
        if social.has_social_data and reality_score > cfg.high_confidence_score:
            return ConfidenceLevel.HIGH
        if social.has_social_data or reality_score > cfg.medium_confidence_score:
            return ConfidenceLevel.MEDIUM
        return ConfidenceLevel.LOW

    @staticmethod
    def data_sources(
        product: ProductRecord,
        social: Optional[SocialRecord],
        review: ReviewAnalysis,
    ) -> List[str]:
        sources = [product.platform]
        if social is not None:
            sources.append(social.source)
        if review.review_count > 0:
            sources.append("reviews")
        return sources


def analyze_product(
    product: ProductRecord,
    social: Optional[SocialRecord] = None,
    reviews: Optional[ReviewSummary] = None,
) -> AnalysisResult:
    """One-shot analysis with the default knowledge base and configuration."""
    return RealityCheckEngine().analyze_product(product, social, reviews)
