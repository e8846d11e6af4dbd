"""A ZIP file of Javadoc class records plus its optional descriptor."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from src.archive_metadata import ArchiveMetadata, load_archive_metadata
from src.archive_tree import ArchiveTree
from src.class_info import ClassInfo
from src.class_info_xml_parser import parse_class_info
from src.class_name import ClassName
from src.entry_path import class_name_from_entry_path, is_class_entry
from src.errors import MalformedClassRecordError
from src.find_class_entry import find_class_entry
from src.javadoc_url import default_javadoc_url, expand_url_pattern
from src.leaf import Leaf

logger = logging.getLogger(__name__)


class JavadocArchive:
    """Read-only access to one Javadoc ZIP file.

    No file handle is kept open: every operation opens the ZIP, reads what
    it needs and closes it again. Two instances over the same file (after
    resolving symlinks) compare equal.
    """

    def __init__(self, path: Path | str) -> None:
        """Open the archive once to read its info.xml descriptor.

        Raises ArchiveReadError if the file cannot be read as a ZIP.
        """
        self.path = Path(path).resolve()
        with self._open() as tree:
            self.metadata: ArchiveMetadata = load_archive_metadata(tree)
        logger.debug("Loaded archive %s (%s)", self.path, self.metadata.name)

    @property
    def name(self) -> str | None:
        return self.metadata.name

    @property
    def version(self) -> str | None:
        return self.metadata.version

    @property
    def base_url(self) -> str | None:
        return self.metadata.base_url

    @property
    def project_url(self) -> str | None:
        return self.metadata.project_url

    def class_names(self) -> list[ClassName]:
        """Return the name of every class in the archive, in no particular order."""
        with self._open() as tree:
            return [
                class_name_from_entry_path(p) for p in tree.walk() if is_class_entry(p)
            ]

    def class_info(self, full_name: str) -> ClassInfo | None:
        """Load a class's record by its fully-qualified name.

        Returns None if the archive has no entry for the class. Raises
        MalformedClassRecordError if the entry exists but cannot be parsed.
        """
        with self._open() as tree:
            entry = find_class_entry(tree, full_name)
            if entry is None:
                return None
            data = tree.read(entry)

        try:
            document = Leaf.parse(data)
        except ET.ParseError as e:
            raise MalformedClassRecordError(entry, str(e)) from e

        return parse_class_info(
            document,
            self,
            entry_path=entry,
            fallback_name=class_name_from_entry_path(entry),
        )

    def url_for(self, name: ClassName, *, frames: bool = False) -> str | None:
        """Return the URL of a class's Javadoc page, or None if unknown.

        A javadocUrlPattern in info.xml takes precedence over the standard
        layout under the base URL.
        """
        pattern = self.metadata.javadoc_url_pattern
        if pattern is not None:
            return expand_url_pattern(pattern, self.base_url, name.full_name)
        if self.base_url is None:
            return None
        return default_javadoc_url(self.base_url, name, frames=frames)

    def _open(self) -> ArchiveTree:
        return ArchiveTree(self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JavadocArchive):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"JavadocArchive({str(self.path)!r})"
