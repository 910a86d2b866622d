#!/usr/bin/env python3
"""
Grow the outfit corpus from the wardrobe catalog.

Usage:
    PYTHONPATH=src python src/generate_outfits.py
    PYTHONPATH=src python src/generate_outfits.py data/wardrobe.json data/outfits.json
    generate-outfits --dry-run --log-level DEBUG

Tuning knobs (TARGET_OUTFITS, QUOTA_*, MIN_COMBO_SCORE) are read from the
environment or a .env file, see config.settings.
"""

import argparse
import os
import sys
from typing import List, Optional

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.settings import get_settings
from core.logging import configure_logging, get_logger
from core.runtime import ensure_cli_environment
from services.outfit_engine import OutfitEngine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-outfits",
        description="Generate new outfits and append them to the outfit corpus",
    )
    parser.add_argument("wardrobe", nargs="?", default=None,
                        help="Wardrobe JSON (default: WARDROBE_PATH or ./src/data/wardrobe.json)")
    parser.add_argument("outfits", nargs="?", default=None,
                        help="Outfit corpus JSON, rewritten in place (default: OUTFITS_PATH or ./src/data/outfits.json)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Generate and select without writing the corpus")
    parser.add_argument("--log-level", default=None,
                        help="Minimum log level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--json-logs", action="store_true",
                        help="Emit JSON log lines")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    ensure_cli_environment()

    args = build_parser().parse_args(argv)
    settings = get_settings()

    configure_logging(
        json_logs=args.json_logs or settings.json_logs,
        log_level=args.log_level or settings.log_level,
    )
    logger = get_logger("generate_outfits")

    report = OutfitEngine(settings).run(args.wardrobe, args.outfits, dry_run=args.dry_run)
    logger.info(
        "Outfit generation finished",
        selected=report.selected,
        target=report.target,
        total=report.total_outfits,
        written=report.written,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
