"""Shallow structural scan of Rust source for module-level declarations."""

import logging
import re

from sync_readme.mask_source import mask_source
from sync_readme.symbol_entry import SymbolEntry, Visibility
from sync_readme.symbol_kind import SymbolKind
from sync_readme.symbol_table import SymbolTable

logger = logging.getLogger(__name__)

DECL_PATTERN = r"""
    (?:^|(?<=[;{}\]]))\s*
    (?P<decl>
        (?P<vis>pub(?:\s*\([^)]*\))?\s+)?
        (?:(?:default|const|async|unsafe|safe|auto|extern)\s+)*
        (?:
            (?P<macro>macro_rules\s*!\s*)
            | (?P<kw>struct|enum|trait|fn|mod|const|static|type|union)\s+(?:mut\s+)?
        )
        (?P<name>(?:r\#)?[A-Za-z_]\w*)
    )
"""

TOKEN_RE = re.compile(
    r"(?P<export>\#\s*\[\s*macro_export\b[^\]]*\])"
    r"|(?P<open>\{)|(?P<close>\})|(?P<semi>;)"
    r"|" + DECL_PATTERN,
    re.MULTILINE | re.VERBOSE,
)


def classify_symbols(source_text: str) -> SymbolTable:
    """Build the symbol table of a source file.

    Only the crate root and inline `mod name { ... }` bodies are scanned for
    declarations; bodies of functions, impls, traits and types are skipped.
    Macros are not expanded.
    """
    table = SymbolTable()
    masked = mask_source(source_text)

    depth = 0
    modules: list[tuple[str, int]] = []  # (name, depth of its body)
    pending_mod: str | None = None
    pending_export = False

    for m in TOKEN_RE.finditer(masked):
        if m.group("export"):
            pending_export = True
        elif m.group("open"):
            depth += 1
            if pending_mod is not None:
                modules.append((pending_mod, depth))
                pending_mod = None
        elif m.group("close"):
            depth = max(depth - 1, 0)
            while modules and depth < modules[-1][1]:
                modules.pop()
        elif m.group("semi"):
            pending_mod = None
        elif m.group("decl"):
            module_depth = modules[-1][1] if modules else 0
            if depth == module_depth:
                module_path = tuple(name for name, _ in modules)
                entry = _entry_for(m, module_path, pending_export)
                if entry is not None:
                    table.add(entry)
                    if entry.kind is SymbolKind.MODULE:
                        pending_mod = entry.name
            pending_export = False

    logger.debug("Classified %d declarations", len(table))
    return table


def _entry_for(
    m: re.Match, module_path: tuple[str, ...], exported: bool
) -> SymbolEntry | None:
    """Turn a declaration match into a symbol entry."""
    name = m.group("name").removeprefix("r#")
    if name == "_":
        return None

    if m.group("macro"):
        if exported:
            # #[macro_export] places the macro at the crate root.
            return SymbolEntry(name, SymbolKind.MACRO, Visibility.PUBLIC)
        return SymbolEntry(name, SymbolKind.MACRO, Visibility.PRIVATE, module_path)

    vis = (m.group("vis") or "").strip()
    visibility = Visibility.PUBLIC if vis == "pub" else Visibility.PRIVATE
    return SymbolEntry(name, SymbolKind(m.group("kw")), visibility, module_path)
