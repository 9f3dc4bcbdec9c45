"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from sync_readme.deep_merge import deep_merge
from sync_readme.load_config import load_config, std_kinds_from_config
from sync_readme.symbol_kind import SymbolKind


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    merged = deep_merge({"nested": {"x": 1, "y": 2}}, {"nested": {"y": 3, "z": 4}})
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3, 4]}) == {"arr": [3, 4]}


def test_deep_merge_std_roots_additive() -> None:
    """Verify that the std_roots list is extended, without duplicates."""
    merged = deep_merge({"std_roots": ["std", "core"]}, {"std_roots": ["core", "x"]})
    assert merged["std_roots"] == ["std", "core", "x"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["links"]["docs_host"] == "https://docs.rs"
    assert config["fences"]["annotate_rust"] is True


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing file falls back to defaults."""
    assert load_config(tmp_path / "absent.yml") == load_config()


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / ".sync-readme.yml"
    config_data = {
        "links": {"version": "0.3.0", "std_roots": ["mystd"]},
        "fences": {"annotate_rust": False},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(config_file)
    assert loaded["links"]["version"] == "0.3.0"
    assert loaded["links"]["docs_host"] == "https://docs.rs"  # Default
    assert "std" in loaded["links"]["std_roots"]  # Default
    assert "mystd" in loaded["links"]["std_roots"]  # Added
    assert loaded["fences"]["annotate_rust"] is False


def test_load_config_does_not_leak_between_calls(tmp_path: Path) -> None:
    """Verify mutating a loaded config leaves the defaults intact."""
    config = load_config()
    config["links"]["std_roots"].append("leak")
    assert "leak" not in load_config()["links"]["std_roots"]


def test_std_kinds_from_config() -> None:
    """Verify configured kinds extend the built-in map and bad ones are skipped."""
    config = load_config()
    config["std_kinds"] = {"std::sync::Once": "struct", "std::bad": "nonsense"}
    kinds = std_kinds_from_config(config)
    assert kinds["std::sync::Once"] is SymbolKind.STRUCT
    assert kinds["std::vec::Vec"] is SymbolKind.STRUCT
    assert "std::bad" not in kinds
