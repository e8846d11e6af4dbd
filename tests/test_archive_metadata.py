"""Tests for reading the info.xml descriptor."""

import logging

import pytest

from src.archive_metadata import ArchiveMetadata, load_archive_metadata
from src.archive_tree import ArchiveTree


def _load(path) -> ArchiveMetadata:
    with ArchiveTree(path) as tree:
        return load_archive_metadata(tree)


def test_reads_all_fields(make_archive) -> None:
    """Verify that every attribute of the info element is read."""
    path = make_archive(
        {
            "info.xml": (
                '<info name="jsoup" version="1.8.1" baseUrl="http://jsoup.org/apidocs"'
                ' projectUrl="http://jsoup.org" javadocUrlPattern="{baseUrl}{full}" />'
            )
        }
    )
    meta = _load(path)
    assert meta == ArchiveMetadata(
        name="jsoup",
        version="1.8.1",
        base_url="http://jsoup.org/apidocs/",
        project_url="http://jsoup.org",
        javadoc_url_pattern="{baseUrl}{full}",
    )


def test_base_url_slash_not_doubled(make_archive) -> None:
    """Verify that a base URL already ending in a slash is kept as is."""
    meta = _load(make_archive({"info.xml": '<info baseUrl="http://x/" />'}))
    assert meta.base_url == "http://x/"


def test_empty_attributes_are_absent(make_archive) -> None:
    """Verify that empty strings are treated as unset."""
    meta = _load(make_archive({"info.xml": '<info name="" baseUrl="" version="2" />'}))
    assert meta.name is None
    assert meta.base_url is None
    assert meta.version == "2"


def test_missing_info_file(make_archive) -> None:
    """Verify that an archive without info.xml has no metadata."""
    assert _load(make_archive({"java/lang/String.xml": "<class/>"})) == ArchiveMetadata()


def test_wrong_root_element(make_archive) -> None:
    """Verify that an info.xml without an info element has no metadata."""
    assert _load(make_archive({"info.xml": '<about name="x"/>'})) == ArchiveMetadata()


def test_malformed_info_is_absent(make_archive, caplog: pytest.LogCaptureFixture) -> None:
    """Verify that unparseable info.xml is logged and treated as missing."""
    with caplog.at_level(logging.WARNING):
        meta = _load(make_archive({"info.xml": "<info name='x'"}))
    assert meta == ArchiveMetadata()
    assert "malformed" in caplog.text
