"""Logic for locating the archive entry that documents a class."""

from collections.abc import Iterator

from src.archive_tree import ArchiveTree
from src.entry_path import EXTENSION, is_class_entry


def candidate_entry_paths(full_name: str) -> Iterator[str]:
    """Yield possible entry paths for a name, most nested package first.

    ``java.util.Map.Entry`` -> ``/java/util/Map/Entry.xml``,
    ``/java/util/Map.Entry.xml``, ``/java/util.Map.Entry.xml``, ...
    """
    segments = full_name.split(".")
    for i in range(len(segments), 0, -1):
        directories = "".join("/" + s for s in segments[:i])
        nested = "".join("." + s for s in segments[i:])
        yield f"{directories}{nested}{EXTENSION}"


def find_class_entry(tree: ArchiveTree, full_name: str) -> str | None:
    """Return the first candidate class entry that exists, or None."""
    for path in candidate_entry_paths(full_name):
        if is_class_entry(path) and tree.exists(path):
            return path
    return None
