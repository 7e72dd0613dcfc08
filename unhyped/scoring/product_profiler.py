"""
Product Profiler (Deterministic)
================================

Product legitimacy from the platform, the brand and the price.

Usage:
    profiler = ProductProfiler(knowledge_base)
    analysis = profiler.analyze(product)
    brand = profiler.extract_brand(product.name, product.url)
"""

import logging
from typing import Optional

from ..data.data_models import ProductRecord
from ..data.price_parser import extract_numeric_price
from .reference_data import IngredientKnowledgeBase
from .result_models import BrandRecognition, ProductAnalysis
from .scoring_config import ProductConfig

logger = logging.getLogger(__name__)


class ProductProfiler:
    """Brand recognition, availability and price reasonableness."""

    def __init__(self, knowledge_base: IngredientKnowledgeBase, config: Optional[ProductConfig] = None):
        self.kb = knowledge_base
        self.config = config or ProductConfig()
        self._availability = dict(self.config.availability_by_platform)

    def analyze(self, product: ProductRecord) -> ProductAnalysis:
        return ProductAnalysis(
            product_name=product.name,
            platform=product.platform,
            brand=self.extract_brand(product.name, product.url),
            availability_score=self.availability_score(product.platform),
            brand_recognition=self.brand_recognition(product.name),
            price_reasonableness=self.price_reasonableness(product.price),
        )

    def brand_recognition(self, product_name: str) -> BrandRecognition:
        """
        Substring match of the lowercased name against the well-known list,
        then against the emerging list.
        """
        name = product_name.lower()
        if any(brand in name for brand in self.kb.well_known_brands):
            return BrandRecognition.WELL_KNOWN
        if any(brand in name for brand in self.kb.emerging_brands):
            return BrandRecognition.EMERGING
        return BrandRecognition.UNKNOWN

    def availability_score(self, platform: str) -> int:
        return self._availability.get((platform or "").lower(), self.config.default_availability)

    def price_reasonableness(self, price_text: str) -> int:
        cfg = self.config
        price = extract_numeric_price(price_text)
        if price is None:
            return cfg.unknown_price_reasonableness
        for upper, score in cfg.price_reasonableness:
            if price <= upper:
                return score
        return cfg.top_price_reasonableness

    def extract_brand(self, product_name: str, url: Optional[str] = None) -> str:
        """
        Brand display name.

        1. A catalog brand contained in the product name
        2. A store label when the URL belongs to a known store
        3. The first word of the name when longer than 2 characters
        4. "Unknown"
        """
        name = (product_name or "").lower()
        for brand in self.kb.brand_catalog:
            if brand.lower() in name:
                return brand

        host = (url or "").lower()
        for fragment, label in self.kb.store_brands:
            if fragment in host:
                return label

        words = (product_name or "").split()
        if words and len(words[0]) > 2:
            return words[0]
        return "Unknown"
