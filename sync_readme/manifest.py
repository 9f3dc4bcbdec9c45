"""Discovery and reading of the Cargo manifest of the crate to document."""

import logging
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from sync_readme.errors import ManifestError, ManifestNotFoundError

logger = logging.getLogger(__name__)

MANIFEST_FILE_NAME = "Cargo.toml"
DEFAULT_README = "README.md"
DEFAULT_LIB_PATH = "src/lib.rs"
DEFAULT_BIN_PATH = "src/main.rs"


class PreferDocFrom(Enum):
    """Which target's entry point provides the documentation."""

    BIN = "bin"
    LIB = "lib"


def find_manifest(start: Path) -> Path:
    """Return the nearest Cargo.toml in start or any of its parents."""
    cur = start.resolve()
    for directory in (cur, *cur.parents):
        candidate = directory / MANIFEST_FILE_NAME
        if candidate.is_file():
            logger.info("Using manifest %s", candidate)
            return candidate
    msg = f"cannot find {MANIFEST_FILE_NAME} in {start} or any parent directory"
    raise ManifestNotFoundError(msg)


class Manifest:
    """A parsed Cargo.toml."""

    def __init__(self, path: Path, data: dict[str, Any]) -> None:
        """Initialize from the manifest path and its parsed content."""
        self.path = path
        self.root = path.parent
        self.data = data

    @classmethod
    def load(cls, path: Path) -> "Manifest":
        """Parse a manifest file."""
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"cannot parse {path}: {exc}"
            raise ManifestError(msg) from exc
        return cls(path, data)

    @property
    def package(self) -> dict[str, Any]:
        """The [package] table; workspace-only manifests are rejected."""
        package = self.data.get("package")
        if package is None:
            if "workspace" in self.data:
                msg = (
                    f"{self.path} is a workspace manifest; workspaces are not "
                    "supported, run the command from a member crate"
                )
                raise ManifestError(msg)
            msg = f"{self.path} has no [package] section"
            raise ManifestError(msg)
        return package

    def crate_name(self) -> str | None:
        """Return the package name."""
        name = self.package.get("name")
        return name if isinstance(name, str) else None

    def readme(self) -> Path:
        """Return the README path declared by the package, or README.md."""
        readme = self.package.get("readme")
        # `readme = false` and `readme.workspace = true` fall back to the default.
        if isinstance(readme, str):
            return self.root / readme
        return self.root / DEFAULT_README

    def entry_point(self, prefer_doc_from: PreferDocFrom | None = None) -> Path | None:
        """Choose the source file holding the crate documentation.

        Without a preference the single existing entry point is used; a crate
        with both a library and a binary needs an explicit preference.
        """
        lib = self._lib_path()
        bin_ = self._bin_path()
        if prefer_doc_from is PreferDocFrom.LIB:
            return lib if lib.is_file() else None
        if prefer_doc_from is PreferDocFrom.BIN:
            return bin_ if bin_.is_file() else None

        existing = [p for p in (lib, bin_) if p.is_file()]
        if len(existing) == 1:
            logger.info("Reading documentation from %s", existing[0])
            return existing[0]
        return None

    def _lib_path(self) -> Path:
        lib = self.data.get("lib") or {}
        return self.root / lib.get("path", DEFAULT_LIB_PATH)

    def _bin_path(self) -> Path:
        bins = self.data.get("bin") or []
        if bins and isinstance(bins[0], dict) and bins[0].get("path"):
            return self.root / bins[0]["path"]
        return self.root / DEFAULT_BIN_PATH
