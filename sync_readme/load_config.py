"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from sync_readme.deep_merge import deep_merge
from sync_readme.std_kinds import STD_KINDS
from sync_readme.symbol_kind import SymbolKind

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".sync-readme.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "links": {
        "docs_host": "https://docs.rs",
        "version": "latest",
        "std_host": "https://doc.rust-lang.org",
        "std_channel": "stable",
        "std_roots": ["std", "core", "alloc", "proc_macro", "test"],
    },
    # Extra standard library items, e.g. {"std::sync::Once": "struct"}
    "std_kinds": {},
    "fences": {
        "annotate_rust": True,
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
            logger.info("Loaded configuration from %s", p)
        else:
            logger.debug("No configuration at %s, using defaults", p)
    return config


def std_kinds_from_config(config: dict[str, Any]) -> dict[str, SymbolKind]:
    """Return the built-in std kind map extended with configured entries."""
    kinds = dict(STD_KINDS)
    for path, keyword in (config.get("std_kinds") or {}).items():
        try:
            kinds[str(path)] = SymbolKind(keyword)
        except ValueError:
            logger.warning(
                "Ignoring std_kinds entry %s: unknown kind %r", path, keyword
            )
    return kinds
