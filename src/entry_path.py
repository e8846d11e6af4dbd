"""Conversion between archive entry paths and class names."""

from src.class_name import ClassName

EXTENSION = ".xml"
INFO_FILE_NAME = "info" + EXTENSION
INFO_ENTRY_PATH = "/" + INFO_FILE_NAME


def is_class_entry(path: str) -> bool:
    """Check if an archive entry holds a class record."""
    return path.endswith(EXTENSION) and path != INFO_ENTRY_PATH


def class_name_from_entry_path(path: str) -> ClassName:
    """Build a class name from an entry path.

    ``/java/util/Map.Entry.xml`` -> package ``java.util``, outer classes
    ``("Map",)``, simple name ``Entry``.
    """
    directory, _, file_name = path.strip("/").rpartition("/")
    package = directory.replace("/", ".") or None

    # nested classes are encoded as dotted file name segments
    parts = file_name[: -len(EXTENSION)].split(".")
    return ClassName(package, tuple(parts[:-1]), parts[-1])


def entry_path_for(name: ClassName) -> str:
    """Return the entry path that documents a class name."""
    directory = ""
    if name.package_name:
        directory = "/" + name.package_name.replace(".", "/")
    return f"{directory}/{name.outer_and_simple}{EXTENSION}"
