"""
Unhyped Orchestrator
====================

Entry points around the reality check engine.

Modules:
    cli            - argparse command-line interface (analyze, fit, caption)
    logging_config - JSON / human logging with file rotation
"""

from .logging_config import JSONFormatter, setup_logging, setup_logging_from_settings
