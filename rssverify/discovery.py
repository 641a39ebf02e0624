"""Recursive discovery of feed files under a directory."""

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator

from rssverify.errors import DiscoveryError

logger = logging.getLogger(__name__)


def _walk(directory: Path, suffixes: tuple[str, ...]) -> Iterator[Path]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise DiscoveryError(str(e)) from e

    for entry in entries:
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(path, suffixes)
        elif entry.name.endswith(suffixes):
            logger.debug(f"Found feed file: {path}", extra={"feed_path": path})
            yield path


def discover_feed_files(root: Path, extensions: Iterable[str]) -> Iterator[Path]:
    """
    Yield feed files found under root, depth first in name order.

    Directory symlinks are not followed and suffix matching is case-sensitive.

    Args:
        root: Directory to search
        extensions: File name suffixes to accept, e.g. ".xml"

    Yields:
        Paths of matching files in a stable order

    Raises:
        DiscoveryError: If root or one of its subdirectories cannot be listed
    """
    root = Path(root)
    if not root.is_dir():
        raise DiscoveryError(f"{root}: not a directory")
    yield from _walk(root, tuple(extensions))
