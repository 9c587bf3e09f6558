#!/usr/bin/env python3
"""
vizcap - capture poster and visual elements from HTML files as PNG images

Usage:
    vizcap                       # capture every articles/*.html
    vizcap articles/01.html      # capture specific files
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..config import Config
from ..diagnostics import get_logger, set_log_level
from ..errors import NoInputError
from ..runner import run
from ..targets import resolve_targets

logger = get_logger(__name__)

# Root of a source checkout, searched for articles/ before the cwd. In a
# regular (non-editable) install this is site-packages and only the cwd
# lookup can match.
SCRIPT_DIR = Path(__file__).resolve().parent.parent.parent


def print_banner():
    print("╔═══════════════════════════════════════╗")
    print("║      📷 Visual Capture Tool           ║")
    print("╚═══════════════════════════════════════╝")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vizcap",
        description="Capture elements with poster-/visual-/code-/logo-/brand- ids from HTML files as PNG images",
    )
    parser.add_argument("files", nargs="*", help="HTML files to capture (default: articles/*.html)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def _configure_logging(args):
    if args.verbose:
        set_log_level("DEBUG")
    elif args.quiet:
        set_log_level("ERROR")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args)

    print_banner()

    try:
        config = Config.from_env()
        targets = resolve_targets(
            args.files,
            script_dir=SCRIPT_DIR,
            cwd=os.getcwd(),
            articles_dir=config.articles_dir,
            extensions=config.extensions,
        )
    except NoInputError as e:
        print(f"\n❌ {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\nFound {len(targets)} file(s) to process")

    try:
        report = run(targets, config)
    except Exception as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if report.load_failures:
        print(f"⚠️  {len(report.load_failures)} file(s) could not be loaded")
    print("🎉 All captures complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
