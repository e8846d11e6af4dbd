"""Search and lookup across a set of loaded Javadoc archives."""

import logging
from collections import defaultdict
from pathlib import Path

from src.class_info import ClassInfo
from src.class_name import ClassName
from src.javadoc_archive import JavadocArchive

logger = logging.getLogger(__name__)

DEFAULT_ARCHIVE_GLOB = "*.zip"


class JavadocLibrary:
    """Answers class name queries against every loaded archive.

    The class names of each archive are indexed when it is added. Class
    records themselves are read from the archive on every lookup.
    """

    def __init__(self, archives: list[JavadocArchive] | None = None) -> None:
        self._archives: list[JavadocArchive] = []
        self._class_names: dict[JavadocArchive, list[ClassName]] = {}
        self._by_full_name: dict[str, JavadocArchive] = {}
        self._full_names_lower: dict[str, str] = {}
        self._by_simple_name: dict[str, set[str]] = defaultdict(set)
        for archive in archives or []:
            self.add(archive)

    @classmethod
    def from_directory(
        cls, directory: Path | str, pattern: str = DEFAULT_ARCHIVE_GLOB
    ) -> "JavadocLibrary":
        """Load every archive in a directory that matches a glob pattern."""
        directory = Path(directory)
        if not directory.is_dir():
            msg = f"Javadoc directory not found: {directory}"
            raise FileNotFoundError(msg)

        library = cls()
        for path in sorted(directory.glob(pattern)):
            library.add_archive(path)
        logger.info(
            "Loaded %d archive(s) with %d classes from %s",
            len(library.archives),
            len(library._by_full_name),
            directory,
        )
        return library

    @property
    def archives(self) -> list[JavadocArchive]:
        return list(self._archives)

    def add_archive(self, path: Path | str) -> JavadocArchive:
        """Open an archive file and add it to the library."""
        return self.add(JavadocArchive(path))

    def add(self, archive: JavadocArchive) -> JavadocArchive:
        """Add an archive, ignoring it if the same file is already loaded."""
        for existing in self._archives:
            if existing == archive:
                logger.debug("Archive already loaded: %s", archive.path)
                return existing

        names = archive.class_names()
        self._archives.append(archive)
        self._class_names[archive] = names
        self._index(archive, names)
        logger.info("Indexed %d classes from %s", len(names), archive.path)
        return archive

    def remove_archive(self, path: Path | str) -> bool:
        """Unload the archive backed by a file. Returns False if it was not loaded."""
        resolved = Path(path).resolve()
        removed = [a for a in self._archives if a.path == resolved]
        if not removed:
            return False

        self._archives.remove(removed[0])
        del self._class_names[removed[0]]
        self._by_full_name.clear()
        self._full_names_lower.clear()
        self._by_simple_name.clear()
        for archive in self._archives:
            self._index(archive, self._class_names[archive])
        logger.info("Unloaded archive %s", resolved)
        return True

    def _index(self, archive: JavadocArchive, names: list[ClassName]) -> None:
        for name in names:
            full_name = name.full_name
            if full_name in self._by_full_name:
                # first archive loaded wins
                continue
            self._by_full_name[full_name] = archive
            self._full_names_lower.setdefault(full_name.lower(), full_name)
            self._by_simple_name[name.simple_name.lower()].add(full_name)

    def search(self, query: str) -> list[str]:
        """Find the fully-qualified names matching a query.

        A dotted query naming a known fully-qualified class yields just that
        class. Any other query is matched against simple class names. Matching is
        case-insensitive and an empty list means nothing matched.
        """
        query = query.strip()
        if not query:
            return []

        if "." in query:
            full_name = self._full_names_lower.get(query.lower())
            if full_name is not None:
                return [full_name]

        return sorted(self._by_simple_name.get(query.lower(), ()))

    def get_class_info(self, full_name: str) -> ClassInfo | None:
        """Load a class's info by its exact fully-qualified name, or None."""
        archive = self._by_full_name.get(full_name)
        if archive is not None:
            return archive.class_info(full_name)

        for archive in self._archives:
            info = archive.class_info(full_name)
            if info is not None:
                return info
        return None
