"""
Personal Fit Report
===================

Per-user view of a product: which ingredients conflict with the user's
skin profile, how well the product matches, and how much the influencer
recommending it can be trusted.

Scores:
    match_score  - 100 minus a severity penalty per flagged ingredient
                   (x1.5 for sensitive skin), floored at 0; 0 without ingredients
    trust_score  - 100 adjusted by the influencer handle, price and rating,
                   clamped to [0, 100]

Usage:
    analyzer = PersonalFitAnalyzer()
    report = analyzer.report(product, profile, handle="@glow.discount")
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..data.data_models import ProductRecord, SkinType, UserProfile
from ..data.price_parser import extract_numeric_price
from .ingredient_classifier import IngredientClassifier
from .product_profiler import ProductProfiler
from .reference_data import IngredientKnowledgeBase, default_knowledge_base
from .result_models import FlaggedIngredient
from .scoring_config import PersonalFitConfig, clamp_score, round_half_up

logger = logging.getLogger(__name__)

PAID_HANDLE_PATTERN = re.compile(r"ad|sponsored|discount|code|link|affiliate|promo", re.IGNORECASE)


@dataclass(frozen=True)
class PersonalFitReport:
    """Personal fit of one product for one user."""
    product_name: str
    brand: str
    price: float
    rating: Optional[float]
    reviews_summary: str
    safe_ingredients: List[str]
    flagged_ingredients: List[FlaggedIngredient]
    match_score: int
    trust_score: int
    paid_promotions_detected: bool
    analysis_summary: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_name": self.product_name,
            "brand": self.brand,
            "price": self.price,
            "rating": self.rating,
            "reviews_summary": self.reviews_summary,
            "safe_ingredients": list(self.safe_ingredients),
            "flagged_ingredients": [f.to_dict() for f in self.flagged_ingredients],
            "match_score": self.match_score,
            "trust_score": self.trust_score,
            "paid_promotions_detected": self.paid_promotions_detected,
            "analysis_summary": dict(self.analysis_summary),
        }


class PersonalFitAnalyzer:
    """Builds PersonalFitReport instances; holds only read-only state."""

    def __init__(
        self,
        knowledge_base: Optional[IngredientKnowledgeBase] = None,
        config: Optional[PersonalFitConfig] = None,
    ):
        self.knowledge_base = knowledge_base or default_knowledge_base()
        self.config = config or PersonalFitConfig()
        self.classifier = IngredientClassifier(self.knowledge_base)
        self.profiler = ProductProfiler(self.knowledge_base)

    def report(
        self,
        product: ProductRecord,
        profile: UserProfile,
        handle: Optional[str] = None,
    ) -> PersonalFitReport:
        ingredients = product.ingredients.parsed
        safe, flagged = self.classifier.flag_ingredients(ingredients, profile)
        price = extract_numeric_price(product.price) or 0.0

        report = PersonalFitReport(
            product_name=product.name,
            brand=self.profiler.extract_brand(product.name, product.url),
            price=price,
            rating=product.rating,
            reviews_summary=self.summarize_reviews(product.reviews),
            safe_ingredients=safe,
            flagged_ingredients=flagged,
            match_score=self.match_score(flagged, len(ingredients), profile),
            trust_score=self.trust_score(handle, price, product.rating),
            paid_promotions_detected=self.paid_promotion(handle),
            analysis_summary={
                "total_ingredients": len(ingredients),
                "flagged_count": len(flagged),
                "user_skin_type": profile.skin_type.value,
                "user_concerns": list(profile.concerns),
            },
        )
        logger.info(
            "Personal fit for %s: match=%d trust=%d flagged=%d",
            product.name, report.match_score, report.trust_score, len(flagged),
        )
        return report

    # =========================================================================
    # SCORES
    # =========================================================================

    def match_score(
        self,
        flagged: Sequence[FlaggedIngredient],
        total_ingredients: int,
        profile: UserProfile,
    ) -> int:
        cfg = self.config
        if total_ingredients == 0:
            return 0

        penalties = dict(cfg.severity_penalties)
        multiplier = cfg.sensitive_multiplier if profile.skin_type == SkinType.SENSITIVE else 1.0

        score = 100.0
        for ingredient in flagged:
            score -= penalties.get(ingredient.severity, 0) * multiplier
        return max(0, round_half_up(score))

    def trust_score(self, handle: Optional[str], price: float, rating: Optional[float]) -> int:
        cfg = self.config
        score = 100

        if handle:
            lowered = handle.lower()
            if any(token in lowered for token in cfg.promo_handle_tokens):
                score += cfg.promo_handle_penalty
            else:
                score += cfg.handle_penalty

        if price > 0:
            if price < cfg.cheap_price:
                score += cfg.cheap_price_penalty
            elif price > cfg.premium_price:
                score += cfg.premium_price_bonus

        if rating is not None:
            if rating < cfg.low_rating:
                score += cfg.low_rating_penalty
            elif rating > cfg.high_rating:
                score += cfg.high_rating_bonus

        return clamp_score(score)

    @staticmethod
    def paid_promotion(handle: Optional[str]) -> bool:
        return bool(handle) and PAID_HANDLE_PATTERN.search(handle) is not None

    def summarize_reviews(self, reviews: Sequence[str]) -> str:
        if not reviews:
            return "No reviews found"
        return " ".join(reviews)[: self.config.summary_length] + "..."
