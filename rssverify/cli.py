"""Command-line entry point for the RSS feed verifier."""

import argparse
import sys
from pathlib import Path
from typing import Sequence

from rssverify import __version__
from rssverify.config import get_settings
from rssverify.logging import setup_logging
from rssverify.runner import Reporter, run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rss-verify",
        description="Recursively verify RSS feed files under a directory.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        help="directory to search (default: RSS_VERIFY_FEED_DIR or ./feed)",
    )
    parser.add_argument(
        "--ext",
        dest="extensions",
        action="append",
        metavar="SUFFIX",
        help="feed file suffix to match; repeatable (default: .xml and .rss)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="override RSS_VERIFY_LOG_LEVEL",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, verify the feed tree and return the exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level)

    root = args.root or settings.feed_dir
    extensions = args.extensions or settings.feed_extensions
    return run(root, extensions, Reporter(sys.stdout))
