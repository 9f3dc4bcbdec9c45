"""Syntactic kinds of Rust items and their rustdoc page conventions."""

from enum import Enum


class SymbolKind(Enum):
    """Kind of a declared item, valued by its declaring keyword."""

    STRUCT = "struct"
    ENUM = "enum"
    TRAIT = "trait"
    FUNCTION = "fn"
    MODULE = "mod"
    MACRO = "macro"
    CONST = "const"
    STATIC = "static"
    TYPE_ALIAS = "type"
    UNION = "union"

    @property
    def page_prefix(self) -> str:
        """Prefix rustdoc uses for the item's page file name."""
        return _PAGE_PREFIXES[self]

    @property
    def is_type_like(self) -> bool:
        """Whether the item can own associated items (methods, variants)."""
        return self in {
            SymbolKind.STRUCT,
            SymbolKind.ENUM,
            SymbolKind.UNION,
            SymbolKind.TRAIT,
        }

    def page(self, name: str) -> str:
        """Return the rustdoc page of an item, relative to its module."""
        if self is SymbolKind.MODULE:
            return f"{name}/index.html"
        return f"{self.page_prefix}.{name}.html"


_PAGE_PREFIXES = {
    SymbolKind.STRUCT: "struct",
    SymbolKind.ENUM: "enum",
    SymbolKind.TRAIT: "trait",
    SymbolKind.FUNCTION: "fn",
    SymbolKind.MODULE: "index",
    SymbolKind.MACRO: "macro",
    SymbolKind.CONST: "constant",
    SymbolKind.STATIC: "static",
    SymbolKind.TYPE_ALIAS: "type",
    SymbolKind.UNION: "union",
}
