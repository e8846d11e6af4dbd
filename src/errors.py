"""Exception types raised while reading Javadoc archives."""


class JavadocError(Exception):
    """Base class for Javadoc archive failures."""


class ArchiveReadError(JavadocError, OSError):
    """The archive file could not be opened or is corrupt at the ZIP level."""


class MalformedClassRecordError(JavadocError, ValueError):
    """A class entry exists in the archive but its XML record cannot be parsed."""

    def __init__(self, entry_path: str, reason: str) -> None:
        """Record which entry failed and why."""
        super().__init__(f"{entry_path}: {reason}")
        self.entry_path = entry_path
        self.reason = reason
