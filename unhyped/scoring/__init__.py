"""
Unhyped Scoring Module
======================

Deterministic reality check of beauty product recommendations.

Components:
    - IngredientClassifier: issue lookup, quality and list plausibility
    - PromotionDetector: sponsorship probability of a social post
    - ReviewAggregator: review distribution authenticity and credibility
    - PriceEvaluator: price tier and value for money
    - ProductProfiler: brand recognition, availability, price reasonableness
    - RealityCheckEngine: weighted composite score, verdict, confidence, insights
    - PersonalFitAnalyzer: per-user match and trust scores

PHILOSOPHY:
    Rule-based and explainable. Every score traces back to a concrete signal.

Usage:
    from unhyped.scoring import RealityCheckEngine

    engine = RealityCheckEngine()
    result = engine.analyze_product(product, social, reviews)

    print(result.reality_score, result.overall_verdict.value)
"""

from .ingredient_classifier import IngredientClassifier, select_recommendation
from .insight_rules import InsightContext, generate_insights
from .personal_fit import PersonalFitAnalyzer, PersonalFitReport
from .price_evaluator import PriceEvaluator
from .product_profiler import ProductProfiler
from .promotion_detector import PromotionDetector
from .reality_check import RealityCheckEngine, analyze_product
from .reference_data import (
    IngredientKnowledgeBase,
    IngredientReferenceEntry,
    KnowledgeBaseError,
    Severity,
    default_knowledge_base,
    load_knowledge_base,
)
from .result_models import (
    AnalysisResult,
    BrandRecognition,
    ComponentScore,
    ConfidenceLevel,
    Credibility,
    FlaggedIngredient,
    IngredientAnalysis,
    MarketComparison,
    PriceAnalysis,
    ProductAnalysis,
    ReviewAnalysis,
    SocialAnalysis,
    ValueAssessment,
    Verdict,
)
from .review_aggregator import ReviewAggregator
from .scoring_config import DEFAULT_CONFIG, ScoringConfig

__all__ = [
    # Engine
    "RealityCheckEngine",
    "analyze_product",
    "AnalysisResult",
    "ComponentScore",
    "Verdict",
    "ConfidenceLevel",
    "ScoringConfig",
    "DEFAULT_CONFIG",
    # Analyzers
    "IngredientClassifier",
    "select_recommendation",
    "PromotionDetector",
    "ReviewAggregator",
    "PriceEvaluator",
    "ProductProfiler",
    "InsightContext",
    "generate_insights",
    # Sub-results
    "ProductAnalysis",
    "SocialAnalysis",
    "IngredientAnalysis",
    "ReviewAnalysis",
    "PriceAnalysis",
    "FlaggedIngredient",
    "BrandRecognition",
    "Credibility",
    "MarketComparison",
    "ValueAssessment",
    # Reference data
    "IngredientKnowledgeBase",
    "IngredientReferenceEntry",
    "KnowledgeBaseError",
    "Severity",
    "default_knowledge_base",
    "load_knowledge_base",
    # Personal fit
    "PersonalFitAnalyzer",
    "PersonalFitReport",
]
