"""
Reality Check Result Models
===========================

Outputs of the analyzers and of the orchestrator. Every result is created
fresh per analysis call and never mutated afterwards (frozen dataclasses).

Every numeric score is an int in [0, 100]. Every enum field is populated
even when the matching optional input was absent.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Verdict(str, Enum):
    """Overall verdict of a reality check."""
    AUTHENTIC = "authentic"
    SUSPICIOUS = "suspicious"
    LIKELY_SPONSORED = "likely_sponsored"


class ConfidenceLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Credibility(str, Enum):
    """Influencer or review credibility."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class BrandRecognition(str, Enum):
    WELL_KNOWN = "well_known"
    EMERGING = "emerging"
    UNKNOWN = "unknown"


class ValueAssessment(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    UNKNOWN = "unknown"


class MarketComparison(str, Enum):
    BELOW_MARKET = "below_market"
    MARKET_RATE = "market_rate"
    ABOVE_MARKET = "above_market"
    PREMIUM = "premium"


def _plain(value: Any) -> Any:
    """Convert enums / nested results into JSON-ready values."""
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


# =============================================================================
# PER-AXIS RESULTS
# =============================================================================

@dataclass(frozen=True)
class FlaggedIngredient:
    """An ingredient found in the issue table."""
    name: str
    issue: str
    severity: str
    recommendation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "issue": self.issue,
            "severity": self.severity,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class IngredientAnalysis:
    total_ingredients: int
    beneficial_ingredients: List[str]
    potentially_harmful: List[str]
    ingredient_quality_score: int
    ingredient_authenticity: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_ingredients": self.total_ingredients,
            "beneficial_ingredients": list(self.beneficial_ingredients),
            "potentially_harmful": list(self.potentially_harmful),
            "ingredient_quality_score": self.ingredient_quality_score,
            "ingredient_authenticity": self.ingredient_authenticity,
        }


@dataclass(frozen=True)
class SocialAnalysis:
    """
    Promotion signals of a social post.

    ``promotional_keywords_found`` and ``disclosure_hashtags`` keep the
    concrete text behind ``sponsored_content_probability``.
    """
    has_social_data: bool
    promotional_detected: bool
    affiliate_codes_found: int
    hashtag_authenticity: int
    influencer_credibility: Credibility
    sponsored_content_probability: int
    promotional_keywords_found: List[str] = field(default_factory=list)
    disclosure_hashtags: List[str] = field(default_factory=list)
    engagement_rate: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "has_social_data": self.has_social_data,
            "promotional_detected": self.promotional_detected,
            "affiliate_codes_found": self.affiliate_codes_found,
            "hashtag_authenticity": self.hashtag_authenticity,
            "influencer_credibility": self.influencer_credibility.value,
            "sponsored_content_probability": self.sponsored_content_probability,
            "promotional_keywords_found": list(self.promotional_keywords_found),
            "disclosure_hashtags": list(self.disclosure_hashtags),
            "engagement_rate": self.engagement_rate,
        }


@dataclass(frozen=True)
class ReviewAnalysis:
    review_count: int
    sentiment_distribution: Dict[str, int]
    review_authenticity_score: int
    common_concerns: List[str]
    review_credibility: Credibility

    def to_dict(self) -> Dict[str, Any]:
        return {
            "review_count": self.review_count,
            "sentiment_distribution": dict(self.sentiment_distribution),
            "review_authenticity_score": self.review_authenticity_score,
            "common_concerns": list(self.common_concerns),
            "review_credibility": self.review_credibility.value,
        }


@dataclass(frozen=True)
class PriceAnalysis:
    price_range: str
    value_assessment: ValueAssessment
    price_vs_ingredients: int
    market_comparison: MarketComparison
    numeric_price: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "price_range": self.price_range,
            "value_assessment": self.value_assessment.value,
            "price_vs_ingredients": self.price_vs_ingredients,
            "market_comparison": self.market_comparison.value,
            "numeric_price": self.numeric_price,
        }


@dataclass(frozen=True)
class ProductAnalysis:
    product_name: str
    platform: str
    brand: str
    availability_score: int
    brand_recognition: BrandRecognition
    price_reasonableness: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "product_name": self.product_name,
            "platform": self.platform,
            "brand": self.brand,
            "availability_score": self.availability_score,
            "brand_recognition": self.brand_recognition.value,
            "price_reasonableness": self.price_reasonableness,
        }


# =============================================================================
# COMPOSITE RESULT
# =============================================================================

@dataclass(frozen=True)
class ComponentScore:
    """
    One axis of the composite score.

    Contains the axis score, its weight, the intermediate values and a
    textual explanation.
    """
    name: str
    score: float
    weight: float
    details: Dict[str, Any] = field(default_factory=dict)
    explanation: str = ""

    @property
    def weighted(self) -> float:
        """Contribution of this axis to the reality score."""
        return self.score * self.weight

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "score": self.score,
            "weight": self.weight,
            "weighted": round(self.weighted, 2),
            "details": _plain(self.details),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """
    Complete reality check of one product.

    Contains everything needed to:
    1. Decide (overall_verdict, reality_score, confidence_level)
    2. Understand the score (component_scores, get_explanation())
    3. Act (red_flags, green_flags, recommendations)
    """
    product_analysis: ProductAnalysis
    social_analysis: SocialAnalysis
    ingredient_analysis: IngredientAnalysis
    review_analysis: ReviewAnalysis
    price_analysis: PriceAnalysis
    reality_score: int
    confidence_level: ConfidenceLevel
    overall_verdict: Verdict
    red_flags: List[str]
    green_flags: List[str]
    recommendations: List[str]
    analysis_timestamp: str
    data_sources: List[str]
    component_scores: Dict[str, ComponentScore] = field(default_factory=dict)

    def to_dict(self, include_components: bool = False) -> Dict[str, Any]:
        """JSON report. Field names match the published report format."""
        report = {
            "reality_score": self.reality_score,
            "confidence_level": self.confidence_level.value,
            "overall_verdict": self.overall_verdict.value,
            "product_analysis": self.product_analysis.to_dict(),
            "social_analysis": self.social_analysis.to_dict(),
            "ingredient_analysis": self.ingredient_analysis.to_dict(),
            "review_analysis": self.review_analysis.to_dict(),
            "price_analysis": self.price_analysis.to_dict(),
            "red_flags": list(self.red_flags),
            "green_flags": list(self.green_flags),
            "recommendations": list(self.recommendations),
            "analysis_timestamp": self.analysis_timestamp,
            "data_sources": list(self.data_sources),
        }
        if include_components:
            report["component_scores"] = {
                name: comp.to_dict() for name, comp in self.component_scores.items()
            }
        return report

    def get_explanation(self) -> str:
        """Full calculation trace."""
        lines = [
            "=== UNHYPED REALITY CHECK ===",
            f"Product: {self.product_analysis.product_name}",
            f"Reality Score: {self.reality_score}/100",
            f"Verdict: {self.overall_verdict.value.upper()}",
            f"Confidence: {self.confidence_level.value}",
            f"Sources: {', '.join(self.data_sources)}",
            "",
            "--- COMPONENTS ---",
        ]

        for name, comp in self.component_scores.items():
            lines.append(
                f"\n{name.upper()} ({comp.score:g} x {comp.weight:.2f} = {comp.weighted:.2f}):"
            )
            if comp.explanation:
                lines.append(comp.explanation)

        for title, items in (
            ("RED FLAGS", self.red_flags),
            ("GREEN FLAGS", self.green_flags),
            ("RECOMMENDATIONS", self.recommendations),
        ):
            if items:
                lines.append(f"\n--- {title} ---")
                lines.extend(f"  - {item}" for item in items)

        return "\n".join(lines)
