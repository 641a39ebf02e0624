"""Batch verification of feed files and reporting of the outcome."""

import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from pydantic import BaseModel, ConfigDict

from rssverify.discovery import discover_feed_files
from rssverify.errors import DiscoveryError, DocumentParseError, FeedReadError
from rssverify.rss.parser import parse_feed
from rssverify.validation import ValidationResult, validate_document

logger = logging.getLogger(__name__)


class FileOutcome(BaseModel):
    """Verification outcome of one feed file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    result: ValidationResult | None = None
    failure: str | None = None

    @property
    def passed(self) -> bool:
        return self.failure is None


def read_feed_bytes(path: Path) -> bytes:
    """Read a feed file, wrapping OS errors in FeedReadError."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FeedReadError(f"error reading file: {e}") from e


def verify_file(path: Path) -> FileOutcome:
    """Read, parse and validate one feed file.

    Read and parse failures become a failed outcome; the rule set only runs
    on documents that parsed.
    """
    try:
        document = parse_feed(read_feed_bytes(path))
    except FeedReadError as e:
        return FileOutcome(path=path, failure=str(e))
    except DocumentParseError as e:
        return FileOutcome(path=path, failure=f"invalid XML in {path}: {e}")

    result = validate_document(document)
    if not result.valid:
        return FileOutcome(
            path=path, result=result, failure=f"error in {path}: {result}"
        )
    return FileOutcome(path=path, result=result)


class Reporter:
    """Writes human-readable verification progress to a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream or sys.stdout

    def _write(self, line: str) -> None:
        print(line, file=self._stream)

    def started(self, path: Path) -> None:
        self._write(f"Verifying {path}...")

    def finished(self, outcome: FileOutcome) -> None:
        if outcome.passed:
            self._write(f"RSS file verification passed for {outcome.path}!")
        else:
            self._write(f"Validation failed: {outcome.failure}")

    def discovery_failed(self, error: DiscoveryError) -> None:
        self._write(f"Error walking the path: {error}")


def verify_tree(
    root: Path, extensions: Iterable[str], reporter: Reporter | None = None
) -> list[FileOutcome]:
    """
    Verify every feed file under root in discovery order.

    Args:
        root: Directory to search recursively
        extensions: Feed file suffixes to accept
        reporter: Receives progress for each file as it is checked

    Returns:
        One outcome per discovered file

    Raises:
        DiscoveryError: If the directory tree cannot be walked
    """
    outcomes = []
    for path in discover_feed_files(root, extensions):
        if reporter:
            reporter.started(path)
        outcome = verify_file(path)
        if not outcome.passed:
            logger.info(
                f"Feed failed verification: {path}", extra={"feed_path": path}
            )
        if reporter:
            reporter.finished(outcome)
        outcomes.append(outcome)
    return outcomes


def run(root: Path, extensions: Iterable[str], reporter: Reporter | None = None) -> int:
    """Verify a directory tree and return the process exit code.

    Returns 0 when every file passed (including when none were found),
    1 when discovery failed or any file failed.
    """
    reporter = reporter or Reporter()
    try:
        outcomes = verify_tree(root, extensions, reporter)
    except DiscoveryError as e:
        logger.error(f"Could not walk feed directory {root}: {e}")
        reporter.discovery_failed(e)
        return 1

    failed = sum(not outcome.passed for outcome in outcomes)
    logger.info(f"Verified {len(outcomes)} feed files, {failed} failed")
    return 1 if failed else 0
