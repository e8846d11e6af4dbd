from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.archive_builder import ArchiveBuilder


@pytest.fixture
def make_archive(tmp_path: Path) -> ArchiveBuilder:
    """Provide a builder that writes ZIP archives into the pytest tmp_path."""
    return ArchiveBuilder(tmp_path)
