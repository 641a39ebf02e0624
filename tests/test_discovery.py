"""Tests for feed file discovery."""

import pytest

from rssverify.discovery import discover_feed_files
from rssverify.errors import DiscoveryError

EXTENSIONS = [".xml", ".rss"]


def touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("<rss/>")
    return path


def test_finds_feed_files_recursively_in_name_order(tmp_path):
    touch(tmp_path / "b.xml")
    touch(tmp_path / "a" / "z.rss")
    touch(tmp_path / "a" / "nested" / "deep.xml")
    touch(tmp_path / "c.rss")

    found = list(discover_feed_files(tmp_path, EXTENSIONS))

    assert found == [
        tmp_path / "a" / "nested" / "deep.xml",
        tmp_path / "a" / "z.rss",
        tmp_path / "b.xml",
        tmp_path / "c.rss",
    ]


def test_skips_other_suffixes(tmp_path):
    touch(tmp_path / "notes.txt")
    touch(tmp_path / "feed.XML")
    touch(tmp_path / "feed.xml.bak")
    touch(tmp_path / "feed.xml")

    assert list(discover_feed_files(tmp_path, EXTENSIONS)) == [tmp_path / "feed.xml"]


def test_directories_with_feed_suffix_are_descended_not_reported(tmp_path):
    touch(tmp_path / "archive.xml" / "inner.rss")

    assert list(discover_feed_files(tmp_path, EXTENSIONS)) == [
        tmp_path / "archive.xml" / "inner.rss"
    ]


def test_custom_extensions(tmp_path):
    touch(tmp_path / "feed.xml")
    touch(tmp_path / "feed.atom")

    assert list(discover_feed_files(tmp_path, [".atom"])) == [tmp_path / "feed.atom"]


def test_empty_directory(tmp_path):
    assert list(discover_feed_files(tmp_path, EXTENSIONS)) == []


def test_missing_root_raises(tmp_path):
    with pytest.raises(DiscoveryError):
        list(discover_feed_files(tmp_path / "missing", EXTENSIONS))


def test_file_root_raises(tmp_path):
    with pytest.raises(DiscoveryError):
        list(discover_feed_files(touch(tmp_path / "feed.xml"), EXTENSIONS))
