"""Logic for reading the optional info.xml descriptor of an archive."""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from src.archive_tree import ArchiveTree
from src.entry_path import INFO_ENTRY_PATH
from src.leaf import Leaf

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveMetadata:
    """Describes the library an archive documents. Every field is optional."""

    name: str | None = None
    version: str | None = None
    base_url: str | None = None  # always ends with "/"
    project_url: str | None = None
    javadoc_url_pattern: str | None = None


def load_archive_metadata(tree: ArchiveTree) -> ArchiveMetadata:
    """Read the descriptor from an open archive.

    A missing or unparseable info.xml, or one without an ``info`` root
    element, yields metadata with every field unset.
    """
    if not tree.exists(INFO_ENTRY_PATH):
        return ArchiveMetadata()

    try:
        document = Leaf.parse(tree.read(INFO_ENTRY_PATH))
    except ET.ParseError as e:
        logger.warning("Ignoring malformed %s in %s: %s", INFO_ENTRY_PATH, tree.path, e)
        return ArchiveMetadata()

    return metadata_from_leaf(document)


def metadata_from_leaf(document: Leaf) -> ArchiveMetadata:
    """Build metadata from a parsed info.xml document."""
    info = document.select_first("/info")
    if info is None:
        return ArchiveMetadata()

    base_url = _non_empty(info.attribute("baseUrl"))
    if base_url and not base_url.endswith("/"):
        base_url += "/"

    return ArchiveMetadata(
        name=_non_empty(info.attribute("name")),
        version=_non_empty(info.attribute("version")),
        base_url=base_url,
        project_url=_non_empty(info.attribute("projectUrl")),
        javadoc_url_pattern=_non_empty(info.attribute("javadocUrlPattern")),
    )


def _non_empty(value: str) -> str | None:
    return value or None
