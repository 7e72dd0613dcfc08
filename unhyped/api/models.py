"""
Unhyped API Models
==================

Pydantic models for API request/response serialization.
Request bodies use the scraper JSON shapes; responses use the report
field names.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union
from enum import Enum


class VerdictEnum(str, Enum):
    AUTHENTIC = "authentic"
    SUSPICIOUS = "suspicious"
    LIKELY_SPONSORED = "likely_sponsored"


class ConfidenceEnum(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SkinTypeEnum(str, Enum):
    OILY = "oily"
    DRY = "dry"
    COMBINATION = "combination"
    SENSITIVE = "sensitive"
    NORMAL = "normal"


# =============================================================================
# REQUESTS
# =============================================================================

class IngredientsModel(BaseModel):
    """Raw ingredient text and parsed names."""
    raw: str = ""
    parsed: Optional[List[str]] = None


class ProductModel(BaseModel):
    """Product page record."""
    name: str = Field(min_length=1)
    platform: str = "generic"
    price: str = ""
    rating: Optional[Union[float, str]] = None
    ingredients: IngredientsModel = Field(default_factory=IngredientsModel)
    url: Optional[str] = None
    reviews: List[str] = Field(default_factory=list)


class SocialModel(BaseModel):
    """Short-form video post record."""
    username: str = ""
    caption: str = ""
    hashtags: List[str] = Field(default_factory=list)
    mentions: List[str] = Field(default_factory=list)
    affiliate_codes: List[str] = Field(default_factory=list)
    promotional_keywords: List[str] = Field(default_factory=list)
    paid_promotion_detected: bool = False
    likes: Optional[int] = Field(default=None, ge=0)
    views: Optional[int] = Field(default=None, ge=0)
    comments: Optional[int] = Field(default=None, ge=0)
    shares: Optional[int] = Field(default=None, ge=0)
    video_url: Optional[str] = None
    posting_date: Optional[str] = None
    source: Optional[str] = None


class SentimentBreakdownModel(BaseModel):
    positive: int = Field(default=0, ge=0)
    negative: int = Field(default=0, ge=0)
    neutral: int = Field(default=0, ge=0)


class ReviewSummaryModel(BaseModel):
    """Pre-tallied review distribution."""
    total_reviews: int = Field(default=0, ge=0)
    sentiment_breakdown: SentimentBreakdownModel = Field(default_factory=SentimentBreakdownModel)
    common_negatives: List[str] = Field(default_factory=list)
    common_positives: List[str] = Field(default_factory=list)
    average_rating: Optional[float] = None


class RealityCheckRequest(BaseModel):
    product: ProductModel
    social: Optional[SocialModel] = None
    reviews: Optional[ReviewSummaryModel] = None
    include_components: bool = False


class UserProfileModel(BaseModel):
    skin_type: SkinTypeEnum = SkinTypeEnum.NORMAL
    concerns: List[str] = Field(default_factory=list)
    age_range: Optional[str] = None
    allergies: List[str] = Field(default_factory=list)


class PersonalFitRequest(BaseModel):
    product: ProductModel
    profile: UserProfileModel
    handle: Optional[str] = None


# =============================================================================
# RESPONSES
# =============================================================================

class ProductAnalysisModel(BaseModel):
    product_name: str
    platform: str
    brand: str
    availability_score: int
    brand_recognition: str
    price_reasonableness: int


class SocialAnalysisModel(BaseModel):
    has_social_data: bool
    promotional_detected: bool
    affiliate_codes_found: int
    hashtag_authenticity: int
    influencer_credibility: str
    sponsored_content_probability: int
    promotional_keywords_found: List[str] = Field(default_factory=list)
    disclosure_hashtags: List[str] = Field(default_factory=list)
    engagement_rate: Optional[float] = None


class IngredientAnalysisModel(BaseModel):
    total_ingredients: int
    beneficial_ingredients: List[str]
    potentially_harmful: List[str]
    ingredient_quality_score: int
    ingredient_authenticity: int


class ReviewAnalysisModel(BaseModel):
    review_count: int
    sentiment_distribution: Dict[str, int]
    review_authenticity_score: int
    common_concerns: List[str]
    review_credibility: str


class PriceAnalysisModel(BaseModel):
    price_range: str
    value_assessment: str
    price_vs_ingredients: int
    market_comparison: str
    numeric_price: Optional[float] = None


class ComponentScoreModel(BaseModel):
    """Score component detail."""
    name: str
    score: float
    weight: float
    weighted: float
    details: Dict[str, Any] = Field(default_factory=dict)


class RealityCheckResponse(BaseModel):
    """Full reality check report."""
    reality_score: int = Field(ge=0, le=100)
    confidence_level: ConfidenceEnum
    overall_verdict: VerdictEnum
    product_analysis: ProductAnalysisModel
    social_analysis: SocialAnalysisModel
    ingredient_analysis: IngredientAnalysisModel
    review_analysis: ReviewAnalysisModel
    price_analysis: PriceAnalysisModel
    red_flags: List[str]
    green_flags: List[str]
    recommendations: List[str]
    analysis_timestamp: str
    data_sources: List[str]
    component_scores: Optional[Dict[str, ComponentScoreModel]] = None


class FlaggedIngredientModel(BaseModel):
    name: str
    issue: str
    severity: str
    recommendation: str


class PersonalFitResponse(BaseModel):
    product_name: str
    brand: str
    price: float
    rating: Optional[float] = None
    reviews_summary: str
    safe_ingredients: List[str]
    flagged_ingredients: List[FlaggedIngredientModel]
    match_score: int = Field(ge=0, le=100)
    trust_score: int = Field(ge=0, le=100)
    paid_promotions_detected: bool
    analysis_summary: Dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    knowledge_base_entries: int
    environment: str
