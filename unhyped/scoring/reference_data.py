"""
Ingredient & Brand Knowledge Base
=================================

Static reference data consumed by the analyzers: the ingredient issue
table, the beneficial / harmful token lists, preservatives and
the brand lists.

The knowledge base is an immutable value injected into the engine
(constructor parameter), never a module-level singleton, so tests can
substitute fixtures. It is loaded once and never mutated.

Usage:
    kb = default_knowledge_base()
    kb = load_knowledge_base("data/ingredients.json")  # override issue table
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Severity of a known ingredient issue."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class KnowledgeBaseError(ValueError):
    """Raised when a reference file cannot be read or is malformed."""


@dataclass(frozen=True)
class IngredientReferenceEntry:
    """Known issue for one ingredient (keyed by lowercase name)."""
    issue: str       # e.g. "Comedogenic", "Irritant", "Drying"
    severity: Severity


# =============================================================================
# BUILT-IN REFERENCE DATA
# =============================================================================
# Absence from the issue table means "no known issue", not a positive
# safety claim.

DEFAULT_ISSUES: Dict[str, Tuple[str, str]] = {
    # Comedogenic
    "coconut oil": ("Comedogenic", "high"),
    "cocoa butter": ("Comedogenic", "high"),
    "isopropyl myristate": ("Comedogenic", "high"),
    "isopropyl palmitate": ("Comedogenic", "high"),
    "wheat germ oil": ("Comedogenic", "high"),
    "flaxseed oil": ("Comedogenic", "medium"),
    "palm oil": ("Comedogenic", "medium"),
    "soybean oil": ("Comedogenic", "medium"),
    "algae extract": ("Comedogenic", "medium"),
    "laureth-4": ("Comedogenic", "high"),
    "myristyl myristate": ("Comedogenic", "high"),
    "lanolin": ("Comedogenic", "low"),
    # Irritants
    "fragrance": ("Irritant", "high"),
    "parfum": ("Irritant", "high"),
    "sodium lauryl sulfate": ("Irritant", "high"),
    "methylisothiazolinone": ("Irritant", "high"),
    "menthol": ("Irritant", "medium"),
    "eucalyptus oil": ("Irritant", "medium"),
    "peppermint oil": ("Irritant", "medium"),
    "limonene": ("Irritant", "medium"),
    "linalool": ("Irritant", "medium"),
    "citral": ("Irritant", "medium"),
    "lemon extract": ("Irritant", "medium"),
    "sodium laureth sulfate": ("Irritant", "low"),
    "benzyl alcohol": ("Irritant", "low"),
    # Drying
    "alcohol denat": ("Drying", "high"),
    "alcohol denat.": ("Drying", "high"),
    "sd alcohol": ("Drying", "high"),
    "isopropyl alcohol": ("Drying", "high"),
    "witch hazel": ("Drying", "medium"),
    "benzoyl peroxide": ("Drying", "medium"),
    # Sensitizers / controversial preservatives
    "formaldehyde": ("Sensitizer", "high"),
    "dmdm hydantoin": ("Sensitizer", "high"),
    "methylparaben": ("Endocrine concern", "low"),
    "propylparaben": ("Endocrine concern", "medium"),
    "butylparaben": ("Endocrine concern", "medium"),
    "oxybenzone": ("Endocrine concern", "medium"),
    # Occlusives
    "mineral oil": ("Occlusive", "low"),
    "petrolatum": ("Occlusive", "low"),
}

BENEFICIAL_TOKENS: Tuple[str, ...] = (
    "niacinamide", "hyaluronic acid", "vitamin c", "retinol", "ceramide",
    "glycerin", "salicylic acid", "lactic acid", "peptides", "squalane",
    "vitamin e", "allantoin", "panthenol", "zinc oxide", "titanium dioxide",
)

HARMFUL_TOKENS: Tuple[str, ...] = (
    "alcohol denat", "sodium lauryl sulfate", "formaldehyde", "parabens",
    "phthalates", "mineral oil", "petrolatum", "artificial fragrance",
)

PRESERVATIVES: Tuple[str, ...] = (
    "phenoxyethanol", "ethylhexylglycerin", "benzyl alcohol",
)

WELL_KNOWN_BRANDS: Tuple[str, ...] = (
    "cerave", "the ordinary", "neutrogena", "olay", "clinique", "l'oreal",
    "nivea", "aveeno", "eucerin", "la roche posay", "vichy", "skinceuticals",
    "drunk elephant", "paula's choice", "cosrx", "innisfree", "laneige",
)

EMERGING_BRANDS: Tuple[str, ...] = (
    "beauty of joseon", "round lab", "anua", "skin1004", "torriden",
    "isntree", "axis-y", "purito", "krave beauty", "the inkey list",
    "glow recipe", "summer fridays", "some by mi", "haruharu",
)

# Display names used to extract a brand from a product title
BRAND_CATALOG: Tuple[str, ...] = (
    "CeraVe", "The Ordinary", "Neutrogena", "Olay", "L'Oreal", "Maybelline",
    "Clinique", "Estee Lauder", "Lancome", "SK-II", "Shiseido", "COSRX",
    "Some By Mi", "Innisfree", "The Face Shop", "Etude House", "Laneige",
    "Sulwhasoo", "Drunk Elephant", "Paula's Choice", "Cetaphil", "Aveeno",
)

# (url fragment, store label)
STORE_BRANDS: Tuple[Tuple[str, str], ...] = (
    ("oliveyoung", "Olive Young"),
    ("amazon", "Amazon Brand"),
    ("yesstyle", "YesStyle Brand"),
)


@dataclass(frozen=True)
class IngredientKnowledgeBase:
    """
    Read-only reference tables shared by every analysis.

    ``issues`` is wrapped in a MappingProxyType so concurrent analyses can
    share one instance without locking.
    """
    issues: Mapping[str, IngredientReferenceEntry] = field(default_factory=dict)
    beneficial: Tuple[str, ...] = BENEFICIAL_TOKENS
    harmful: Tuple[str, ...] = HARMFUL_TOKENS
    preservatives: Tuple[str, ...] = PRESERVATIVES
    well_known_brands: Tuple[str, ...] = WELL_KNOWN_BRANDS
    emerging_brands: Tuple[str, ...] = EMERGING_BRANDS
    brand_catalog: Tuple[str, ...] = BRAND_CATALOG
    store_brands: Tuple[Tuple[str, str], ...] = STORE_BRANDS

    def __post_init__(self):
        normalized = {key.lower(): value for key, value in self.issues.items()}
        object.__setattr__(self, "issues", MappingProxyType(normalized))

    def lookup(self, ingredient: str) -> Optional[IngredientReferenceEntry]:
        """Case-insensitive lookup in the issue table."""
        return self.issues.get(ingredient.strip().lower())


def parse_issue_table(raw: Mapping[str, Any]) -> Dict[str, IngredientReferenceEntry]:
    """
    Build an issue table from ``{name: {"issue": ..., "severity": ...}}``.

    Raises:
        KnowledgeBaseError: entry is not an object or severity is unknown
    """
    table: Dict[str, IngredientReferenceEntry] = {}
    for name, entry in raw.items():
        if not isinstance(entry, Mapping) or "issue" not in entry:
            raise KnowledgeBaseError(f"Invalid entry for ingredient '{name}': {entry!r}")
        try:
            severity = Severity(str(entry.get("severity", "low")).lower())
        except ValueError:
            raise KnowledgeBaseError(
                f"Unknown severity for ingredient '{name}': {entry.get('severity')!r}"
            )
        table[name.lower()] = IngredientReferenceEntry(issue=str(entry["issue"]), severity=severity)
    return table


def default_knowledge_base() -> IngredientKnowledgeBase:
    """Knowledge base built from the bundled tables."""
    issues = {
        name: IngredientReferenceEntry(issue=issue, severity=Severity(severity))
        for name, (issue, severity) in DEFAULT_ISSUES.items()
    }
    return IngredientKnowledgeBase(issues=issues)


def load_knowledge_base(path: Union[str, Path]) -> IngredientKnowledgeBase:
    """
    Load an issue table from a JSON file on top of the built-in token lists.

    The file maps lowercase ingredient names to ``{"issue", "severity"}``.
    Optional top-level keys ``_beneficial``, ``_harmful``, ``_preservatives``,
    ``_well_known_brands`` and ``_emerging_brands`` replace the corresponding built-in lists.

    Raises:
        KnowledgeBaseError: file missing, not JSON, or malformed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise KnowledgeBaseError(f"Cannot read knowledge base {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise KnowledgeBaseError(f"Invalid JSON in knowledge base {path}: {e}") from e

    if not isinstance(raw, dict):
        raise KnowledgeBaseError(f"Knowledge base {path} must be a JSON object")

    overrides = {}
    for key in ("beneficial", "harmful", "preservatives",
                "well_known_brands", "emerging_brands"):
        value = raw.pop(f"_{key}", None)
        if value is None:
            continue
        if not isinstance(value, list):
            raise KnowledgeBaseError(f"'_{key}' must be a list in {path}")
        overrides[key] = tuple(str(v).lower() for v in value)

    kb = IngredientKnowledgeBase(issues=parse_issue_table(raw), **overrides)
    logger.info(
        "Loaded knowledge base from %s (%d ingredient issues)", path, len(kb.issues),
    )
    return kb
