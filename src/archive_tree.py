"""Read-only directory view over a ZIP archive."""

import zipfile
import zlib
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType

from src.errors import ArchiveReadError


class ArchiveTree:
    """Opens a ZIP file for the duration of a ``with`` block.

    Entry paths are absolute within the archive (``/java/util/Map.xml``),
    regardless of how the ZIP stores them.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._zip: zipfile.ZipFile | None = None

    def __enter__(self) -> "ArchiveTree":
        try:
            self._zip = zipfile.ZipFile(self.path)
        except (OSError, zipfile.BadZipFile) as e:
            msg = f"Cannot open archive {self.path}: {e}"
            raise ArchiveReadError(msg) from e
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._zip is not None:
            self._zip.close()
            self._zip = None

    @property
    def zip(self) -> zipfile.ZipFile:
        if self._zip is None:
            msg = "Archive tree used outside of a 'with' block"
            raise RuntimeError(msg)
        return self._zip

    def walk(self) -> Iterator[str]:
        """Yield the path of every file entry, in every directory."""
        for info in self.zip.infolist():
            if not info.is_dir():
                yield _absolute(info.filename)

    def exists(self, path: str) -> bool:
        """Check if a file entry exists."""
        try:
            self.zip.getinfo(_relative(path))
        except KeyError:
            return False
        return True

    def read(self, path: str) -> bytes:
        """Read the contents of a file entry."""
        try:
            return self.zip.read(_relative(path))
        except (
            OSError,
            EOFError,
            RuntimeError,  # encrypted entry
            NotImplementedError,  # unsupported compression method
            zipfile.BadZipFile,
            zlib.error,
        ) as e:
            msg = f"Cannot read {path} from {self.path}: {e}"
            raise ArchiveReadError(msg) from e


def _absolute(name: str) -> str:
    return "/" + name.replace("\\", "/").lstrip("/")


def _relative(path: str) -> str:
    return path.lstrip("/")
