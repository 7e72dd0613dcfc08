"""
Unhyped CLI
===========

Command-line interface for the reality check.

Commands:
    analyze  - Reality check of a product (+ optional social post and reviews)
    fit      - Personal fit report for a skin profile
    caption  - Extract promotion signals from a video caption

Input files are the JSON records produced by the scrapers. ``--reviews``
accepts either a pre-tallied summary or a list of individual reviews.

Usage:
    python -m unhyped.orchestrator.cli analyze --product product.json --social post.json
    python -m unhyped.orchestrator.cli analyze --product product.json --reviews reviews.json --json
    python -m unhyped.orchestrator.cli fit --product product.json --profile profile.json --handle @glow.code
    python -m unhyped.orchestrator.cli caption "Obsessed! Use code GLOW20 #ad #skincare"
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from ..data.config import get_settings
from ..data.data_models import InvalidRecordError, ProductRecord, ReviewSummary, SocialRecord, UserProfile
from ..reviews import ReviewRecord, ReviewSummaryBuilder
from ..scoring import PersonalFitAnalyzer, RealityCheckEngine
from ..social import CaptionSignalExtractor
from .logging_config import setup_logging_from_settings

logger = logging.getLogger(__name__)

# JSONDecodeError, InvalidRecordError and KnowledgeBaseError are ValueErrors
INPUT_ERRORS = (OSError, ValueError)


def _load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_reviews(path: str) -> ReviewSummary:
    """A summary object, or a list of reviews tallied on the fly."""
    data = _load_json(path)
    if isinstance(data, list):
        reviews = [ReviewRecord.from_dict(item) for item in data]
        return ReviewSummaryBuilder().build(reviews)
    if not isinstance(data, dict):
        raise InvalidRecordError(f"Reviews must be a list or a summary object, got: {data!r}")
    return ReviewSummary.from_dict(data)


def _bar(score: float, width: int = 20) -> str:
    filled = int(max(0, min(100, score)) / 100 * width)
    return "█" * filled + "░" * (width - filled)


def _write_output(payload: dict, output: Optional[str]):
    if output:
        with open(output, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        logger.info("Report saved to %s", output)


def cmd_analyze(args) -> int:
    """Reality check of one product."""
    try:
        product = ProductRecord.from_dict(_load_json(args.product))
        social = None
        if args.social:
            social = SocialRecord.from_dict(
                _load_json(args.social),
                default_source=get_settings().engine.social_source,
            )
        reviews = load_reviews(args.reviews) if args.reviews else None
        engine = RealityCheckEngine.from_settings()
    except INPUT_ERRORS as e:
        logger.error("Cannot load input: %s", e)
        print(f"ERROR: {e}")
        return 1

    result = engine.analyze_product(product, social=social, reviews=reviews)
    report = result.to_dict(include_components=args.verbose)

    if args.json:
        print(json.dumps(report, indent=2))
        _write_output(report, args.output)
        return 0

    print("=" * 60)
    print(f"REALITY CHECK: {product.name}")
    print("=" * 60)
    print()
    print(f"Reality Score: {result.reality_score}/100")
    print(f"Verdict: {result.overall_verdict.value}")
    print(f"Confidence: {result.confidence_level.value}")
    print(f"Sources: {', '.join(result.data_sources)}")
    print()

    print("Component Scores:")
    for name, comp in result.component_scores.items():
        print(f"  {name:12} [{_bar(comp.score)}] {comp.score:g} (x{comp.weight:.2f})")
        if comp.details and args.verbose:
            for key, value in comp.details.items():
                value = getattr(value, "value", value)
                print(f"    - {key}: {value}")
    print()

    for title, icon, items in (
        ("Red flags", "✗", result.red_flags),
        ("Green flags", "✓", result.green_flags),
        ("Recommendations", "→", result.recommendations),
    ):
        if items:
            print(f"{title}:")
            for item in items:
                print(f"  {icon} {item}")
            print()

    if args.explain:
        print(result.get_explanation())

    _write_output(report, args.output)
    return 0


def cmd_fit(args) -> int:
    """Personal fit report."""
    try:
        product = ProductRecord.from_dict(_load_json(args.product))
        profile = UserProfile.from_dict(_load_json(args.profile))
        engine = RealityCheckEngine.from_settings()
    except INPUT_ERRORS as e:
        logger.error("Cannot load input: %s", e)
        print(f"ERROR: {e}")
        return 1

    report = PersonalFitAnalyzer(engine.knowledge_base).report(product, profile, handle=args.handle)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    print("=" * 60)
    print(f"PERSONAL FIT: {report.product_name} ({report.brand})")
    print("=" * 60)
    print()
    print(f"Skin type: {profile.skin_type.value}, concerns: {', '.join(profile.concerns) or 'none'}")
    print()

    if report.flagged_ingredients:
        print(f"⚠ {len(report.flagged_ingredients)} potentially problematic ingredients:")
        for ingredient in report.flagged_ingredients:
            print(f"  • {ingredient.name}: {ingredient.issue} ({ingredient.severity})")
            print(f"    → {ingredient.recommendation}")
    else:
        print("✓ No problematic ingredients found in the knowledge base")
    print()

    print(f"Match Score: [{_bar(report.match_score)}] {report.match_score}/100")
    print(f"Trust Score: [{_bar(report.trust_score)}] {report.trust_score}/100")
    if report.paid_promotions_detected:
        print("Paid promotion detected - extra scrutiny recommended")
    return 0


def cmd_caption(args) -> int:
    """Promotion signals of a caption."""
    record = CaptionSignalExtractor().build_record(args.text, username=args.username or "")

    if args.json:
        print(json.dumps(record.to_dict(), indent=2))
        return 0

    print(f"Hashtags: {', '.join(record.hashtags) or '-'}")
    print(f"Mentions: {', '.join(record.mentions) or '-'}")
    print(f"Affiliate codes: {', '.join(record.affiliate_codes) or '-'}")
    print(f"Promotional keywords: {', '.join(record.promotional_keywords) or '-'}")
    print(f"Paid promotion: {'Yes' if record.paid_promotion_detected else 'No'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unhyped",
        description="Unhyped - reality check for beauty product recommendations",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Reality check of a product")
    analyze_parser.add_argument(
        "--product",
        required=True,
        help="Product record JSON file",
    )
    analyze_parser.add_argument(
        "--social",
        help="Social post record JSON file",
    )
    analyze_parser.add_argument(
        "--reviews",
        help="Review summary (or list of reviews) JSON file",
    )
    analyze_parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the full calculation trace",
    )
    analyze_parser.add_argument(
        "--output",
        help="Save the JSON report to this file",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # fit command
    fit_parser = subparsers.add_parser("fit", help="Personal fit report")
    fit_parser.add_argument(
        "--product",
        required=True,
        help="Product record JSON file",
    )
    fit_parser.add_argument(
        "--profile",
        required=True,
        help="User profile JSON file (skin_type, concerns)",
    )
    fit_parser.add_argument(
        "--handle",
        help="Influencer handle recommending the product",
    )
    fit_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # caption command
    caption_parser = subparsers.add_parser("caption", help="Extract promotion signals from a caption")
    caption_parser.add_argument(
        "text",
        help="Caption text",
    )
    caption_parser.add_argument(
        "--username",
        help="Author handle",
    )
    caption_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging_from_settings(verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "analyze": cmd_analyze,
        "fit": cmd_fit,
        "caption": cmd_caption,
    }

    handler = commands.get(args.command)
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
