"""Data models for classified source declarations."""

from dataclasses import dataclass
from enum import Enum

from sync_readme.symbol_kind import SymbolKind


class Visibility(Enum):
    """Whether an item shows up in the crate's public documentation."""

    PUBLIC = "public"
    PRIVATE = "private"


@dataclass(frozen=True)
class SymbolEntry:
    """A declaration found by the classifier."""

    name: str
    kind: SymbolKind
    visibility: Visibility
    module_path: tuple[str, ...] = ()  # enclosing inline modules, outermost first

    @property
    def qualified_path(self) -> tuple[str, ...]:
        """Module path plus the item name."""
        return (*self.module_path, self.name)
