"""
Ingredient Classifier (Deterministic)
=====================================

Classifies an ingredient list against the knowledge base:

- Issue lookup: flags ingredients present in the issue table, with a
  recommendation tailored to the user's skin profile.
- Beneficial / harmful token match: substring match against two
  canonical lists, independent from the issue table. The two lookups can
  disagree and an ingredient can match both lists; that ambiguity is kept.

Known limitation: an ingredient absent from the issue table is reported as
"safe", which only means "no known issue", not a positive safety claim.

Usage:
    classifier = IngredientClassifier(knowledge_base)
    analysis = classifier.analyze(product.ingredients.parsed)
    safe, flagged = classifier.flag_ingredients(parsed, profile)
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..data.data_models import SkinType, UserProfile
from .reference_data import IngredientKnowledgeBase, Severity
from .result_models import FlaggedIngredient, IngredientAnalysis
from .scoring_config import IngredientConfig, clamp_score, round_half_up

logger = logging.getLogger(__name__)


# Issue categories driving the tailored recommendations
COMEDOGENIC = "Comedogenic"
DRYING = "Drying"


def select_recommendation(
    ingredient: str,
    issue: str,
    severity: str,
    profile: Optional[UserProfile] = None,
) -> str:
    """
    Pick the warning shown for a flagged ingredient.

    Priority:
        1. skin-type text (sensitive + high, oily + comedogenic oil,
           dry + drying)
        2. concern text overrides it (acne + comedogenic,
           sensitivity + high)
        3. otherwise a generic "avoid due to <issue>" message
    """
    severity = Severity(severity)
    recommendation = f"Consider avoiding due to {issue.lower()}"
    if profile is None:
        return recommendation

    skin_type = profile.skin_type
    if skin_type == SkinType.SENSITIVE and severity == Severity.HIGH:
        recommendation = "Especially avoid due to sensitive skin"
    elif skin_type == SkinType.OILY and "oil" in ingredient.lower() and issue == COMEDOGENIC:
        recommendation = "May worsen oily skin concerns"
    elif skin_type == SkinType.DRY and issue == DRYING:
        recommendation = "May worsen dry skin concerns"

    concerns = [c.lower() for c in profile.concerns]
    if "acne" in concerns and issue == COMEDOGENIC:
        recommendation = "May trigger acne breakouts"
    elif "sensitivity" in concerns and severity == Severity.HIGH:
        recommendation = "High risk for sensitive skin reactions"

    return recommendation


class IngredientClassifier:
    """
    Ingredient quality and plausibility scorer - 100% deterministic.

    QUALITY (0-100): share of beneficial vs harmful ingredients.
    AUTHENTICITY (0-100): does the list look like a real INCI list.
    """

    def __init__(self, knowledge_base: IngredientKnowledgeBase, config: Optional[IngredientConfig] = None):
        self.kb = knowledge_base
        self.config = config or IngredientConfig()

    # =========================================================================
    # ISSUE LOOKUP
    # =========================================================================

    def flag_ingredients(
        self,
        ingredients: Sequence[str],
        profile: Optional[UserProfile] = None,
    ) -> Tuple[List[str], List[FlaggedIngredient]]:
        """
        Split ingredients into (safe, flagged).

        Names shorter than ``min_name_length`` are parsing noise and
        appear in neither list.
        """
        safe: List[str] = []
        flagged: List[FlaggedIngredient] = []

        for ingredient in ingredients:
            name = ingredient.strip()
            if len(name) < self.config.min_name_length:
                continue

            entry = self.kb.lookup(name)
            if entry is None:
                safe.append(name)
                continue

            flagged.append(FlaggedIngredient(
                name=name,
                issue=entry.issue,
                severity=entry.severity.value,
                recommendation=select_recommendation(name, entry.issue, entry.severity, profile),
            ))

        logger.debug("Ingredient lookup: %d safe, %d flagged", len(safe), len(flagged))
        return safe, flagged

    # =========================================================================
    # TOKEN LISTS
    # =========================================================================

    def find_beneficial(self, ingredients: Sequence[str]) -> List[str]:
        """Ingredients containing a beneficial token (case-insensitive)."""
        return [i for i in ingredients if self._matches(i, self.kb.beneficial)]

    def find_harmful(self, ingredients: Sequence[str]) -> List[str]:
        """Ingredients containing a potentially harmful token (case-insensitive)."""
        return [i for i in ingredients if self._matches(i, self.kb.harmful)]

    @staticmethod
    def _matches(ingredient: str, tokens: Sequence[str]) -> bool:
        lowered = ingredient.lower()
        return any(token in lowered for token in tokens)

    # =========================================================================
    # SCORES
    # =========================================================================

    def quality_score(self, beneficial_count: int, harmful_count: int, total: int) -> int:
        """
        FORMULA:
            round(beneficial/total * 70 + (1 - harmful/total) * 30)
            +10 if beneficial > 0 and harmful == 0
            clamped to [0, 100]; 0 for an empty list.
        """
        cfg = self.config
        if total <= 0:
            return cfg.empty_quality

        beneficial_ratio = beneficial_count / total
        harmful_ratio = harmful_count / total
        score = round_half_up(
            beneficial_ratio * cfg.beneficial_weight + (1 - harmful_ratio) * cfg.harmless_weight
        )
        if beneficial_count > 0 and harmful_count == 0:
            score += cfg.clean_formula_bonus
        return clamp_score(score)

    def authenticity_score(self, ingredients: Sequence[str]) -> int:
        """
        FORMULA:
            base 75
            +10 if 5 <= count <= 50
            +10 if first ingredient is water / aqua
            +5 if a known preservative is present
            capped at 100; 50 for an empty list.
        """
        cfg = self.config
        if not ingredients:
            return cfg.empty_authenticity

        score = cfg.authenticity_base
        low, high = cfg.plausible_count_range
        if low <= len(ingredients) <= high:
            score += cfg.plausible_count_bonus

        if ingredients[0].strip().lower() in cfg.water_base_names:
            score += cfg.water_base_bonus

        preservatives = set(self.kb.preservatives)
        if any(i.strip().lower() in preservatives for i in ingredients):
            score += cfg.preservative_bonus

        return clamp_score(score)

    def analyze(self, ingredients: Sequence[str]) -> IngredientAnalysis:
        """Engine-facing analysis of a parsed ingredient list."""
        ingredients = list(ingredients)
        beneficial = self.find_beneficial(ingredients)
        harmful = self.find_harmful(ingredients)

        return IngredientAnalysis(
            total_ingredients=len(ingredients),
            beneficial_ingredients=beneficial,
            potentially_harmful=harmful,
            ingredient_quality_score=self.quality_score(len(beneficial), len(harmful), len(ingredients)),
            ingredient_authenticity=self.authenticity_score(ingredients),
        )
