"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from src.deep_merge import deep_merge
from src.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    merged = deep_merge({"nested": {"x": 1, "y": 2}}, {"nested": {"y": 3, "z": 4}})
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3]}) == {"arr": [3]}


def test_deep_merge_leaves_base_untouched() -> None:
    """Verify that merging does not modify nested dictionaries of the base."""
    base = {"nested": {"x": 1}}
    deep_merge(base, {"nested": {"x": 2}})
    assert base == {"nested": {"x": 1}}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing file falls back to defaults."""
    assert load_config(str(tmp_path / "nope.yml")) == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump({"archives": {"directory": "/srv/javadocs"}, "urls": {"frames": True}})
    )

    loaded = load_config(str(config_file))
    assert loaded["archives"]["directory"] == "/srv/javadocs"
    assert loaded["archives"]["pattern"] == "*.zip"  # Default
    assert loaded["urls"]["frames"] is True
    assert DEFAULT_CONFIG["archives"]["directory"] == "javadocs"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a YAML list at the root is rejected."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="mapping"):
        load_config(str(config_file))
