"""
Unhyped Data Module
===================

Input records for the reality check and application configuration.

Modules:
    data_models   - ProductRecord, SocialRecord, ReviewSummary, UserProfile
    price_parser  - Numeric price extraction from free text
    config        - Environment-based settings (python-dotenv)
"""

from .data_models import (
    IngredientList,
    InvalidRecordError,
    ProductRecord,
    ReviewSummary,
    SentimentBreakdown,
    SkinType,
    SocialRecord,
    UserProfile,
)
from .price_parser import extract_numeric_price
from .config import Settings, get_settings

__all__ = [
    "IngredientList",
    "InvalidRecordError",
    "ProductRecord",
    "ReviewSummary",
    "SentimentBreakdown",
    "SkinType",
    "SocialRecord",
    "UserProfile",
    "extract_numeric_price",
    "Settings",
    "get_settings",
]
