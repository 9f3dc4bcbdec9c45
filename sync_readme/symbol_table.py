"""Lookup table of classified declarations."""

import logging

from sync_readme.symbol_entry import SymbolEntry

logger = logging.getLogger(__name__)


class SymbolTable:
    """Maps qualified paths to declarations; the first declaration wins."""

    def __init__(self) -> None:
        """Initialize an empty table."""
        self.entries: dict[tuple[str, ...], SymbolEntry] = {}
        self.by_name: dict[str, list[SymbolEntry]] = {}

    def __len__(self) -> int:
        """Return the number of distinct qualified paths."""
        return len(self.entries)

    def __contains__(self, path: object) -> bool:
        """Check whether a qualified path is declared."""
        return path in self.entries

    def add(self, entry: SymbolEntry) -> bool:
        """Record a declaration unless its qualified path is already taken."""
        path = entry.qualified_path
        if path in self.entries:
            logger.debug("Ignoring duplicate declaration of %s", "::".join(path))
            return False
        self.entries[path] = entry
        self.by_name.setdefault(entry.name, []).append(entry)
        return True

    def get(self, path: tuple[str, ...]) -> SymbolEntry | None:
        """Return the declaration at an exact qualified path."""
        return self.entries.get(path)

    def lookup(self, path: tuple[str, ...]) -> SymbolEntry | None:
        """Resolve a link path to a declaration.

        Tries the exact qualified path, then falls back to the bare name:
        a top-level declaration first, else the first nested one declared.
        """
        if not path:
            return None
        exact = self.entries.get(path)
        if exact is not None:
            return exact
        candidates = self.by_name.get(path[-1], [])
        for entry in candidates:
            if not entry.module_path:
                return entry
        return candidates[0] if candidates else None
