#!/usr/bin/env python3
"""
Label images with a cloud vision API.

Usage:
    # Pick the provider from the environment (MICROSOFT_API_KEY -> microsoft)
    python annotate.py 'photos/*.jpg'

    # Force a provider and dump raw responses
    python annotate.py --api google -v 'photos/*.jpg' 'scans/*.png'
"""

import argparse
import logging
import sys

from annotator.factory import AnnotatorRegistry
from annotator.runner import run
from core.config import (
    AUTO_PROVIDER,
    DEFAULT_TIMEOUT,
    MICROSOFT_API_KEY_ENV_VAR,
    PROVIDER_CHOICES,
    load_provider_config,
)
from core.errors import FatalConfig

logger = logging.getLogger("annotate")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Print labels for image files using Google Cloud Vision or "
        "Microsoft Computer Vision",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Providers:
  google     Batched label detection, labels ranked by confidence
  microsoft  One request per file, full JSON response ({MICROSOFT_API_KEY_ENV_VAR} required)
  auto       microsoft if {MICROSOFT_API_KEY_ENV_VAR} is set, google otherwise

Examples:
  python annotate.py 'photos/*.jpg'
  python annotate.py --api google -v 'photos/*.jpg' 'scans/*.png'
        """,
    )
    parser.add_argument(
        "--api",
        "-a",
        type=str.lower,
        choices=PROVIDER_CHOICES,
        default=AUTO_PROVIDER,
        help="Which API to use: google, microsoft or auto-detect (default: auto)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Seconds to wait for each API call (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument("patterns", nargs="*", metavar="PATTERN", help="Image file glob pattern")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the labeling pipeline."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.patterns:
        parser.print_help(sys.stderr)
        return 0

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_provider_config(api=args.api, verbose=args.verbose, timeout=args.timeout)
        annotator = AnnotatorRegistry.create(config)
        annotator.authenticate()
    except FatalConfig as e:
        logger.error(str(e))
        return 1

    logger.info(f"Using: {annotator.name}")
    summary = run(annotator, args.patterns)
    logger.info(
        f"Done! Printed: {summary.printed}, Failed: {summary.failed}, Skipped: {summary.skipped}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
