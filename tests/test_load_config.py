"""Tests for settings loading and merging."""

from pathlib import Path

import pytest
import yaml

from restdoc.deep_merge import deep_merge
from restdoc.errors import InvalidConfigError
from restdoc.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"tag_handlers": {"x": "param", "y": "generic"}}
    update = {"tag_handlers": {"y": "query"}}
    merged = deep_merge(base, update)
    assert merged == {"tag_handlers": {"x": "param", "y": "query"}}


def test_deep_merge_inherit_tags_additive() -> None:
    """Verify that the inherit tag list is merged additively."""
    merged = deep_merge(
        {"inherit_tags": ["inheritdoc"]}, {"inherit_tags": ["a", "inheritdoc"]}
    )
    assert merged["inherit_tags"] == ["inheritdoc", "a"]


def test_deep_merge_arrays_replace() -> None:
    """Verify that other arrays are replaced."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3]}) == {"arr": [3]}


def test_load_config_defaults() -> None:
    """Verify defaults are returned as an independent copy."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["tag_handlers"]["x"] = "param"
    assert "x" not in DEFAULT_CONFIG["tag_handlers"]


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user settings override defaults."""
    config_file = tmp_path / "restdoc.yml"
    config_data = {
        "max_parent_depth": 5,
        "inherit_tags": ["inheritDoc"],
        "tag_handlers": {"filter": "query"},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    depth = 5
    assert loaded["max_parent_depth"] == depth
    assert loaded["inherit_tags"] == ["inheritdoc", "inheritDoc"]
    assert loaded["tag_handlers"] == {"filter": "query"}


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify a missing file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_rejects_bad_values(tmp_path: Path) -> None:
    """Verify invalid settings are reported."""
    config_file = tmp_path / "restdoc.yml"
    config_file.write_text(yaml.dump({"max_parent_depth": -1}))
    with pytest.raises(InvalidConfigError):
        load_config(str(config_file))

    config_file.write_text(yaml.dump(["not", "a", "mapping"]))
    with pytest.raises(InvalidConfigError):
        load_config(str(config_file))
