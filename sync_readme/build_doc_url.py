"""Utilities for building rustdoc URLs on docs.rs and doc.rust-lang.org."""

from collections.abc import Sequence
from typing import Any

from sync_readme.symbol_kind import SymbolKind


def crate_item_url(
    crate_name: str,
    module_path: Sequence[str],
    page: str,
    links: dict[str, Any],
) -> str:
    """Build the docs.rs URL of a page of the crate being documented."""
    # docs.rs/<crate>/<version>/<crate_ident>/<modules...>/<page>
    crate_ident = crate_name.replace("-", "_")
    parts = [
        links["docs_host"].rstrip("/"),
        crate_name,
        links["version"],
        crate_ident,
        *module_path,
        page,
    ]
    return "/".join(parts)


def std_item_url(
    root: str,
    module_path: Sequence[str],
    page: str,
    links: dict[str, Any],
) -> str:
    """Build the doc.rust-lang.org URL of a standard library page."""
    parts = [
        links["std_host"].rstrip("/"),
        links["std_channel"],
        root,
        *module_path,
        page,
    ]
    return "/".join(parts)


def std_search_url(root: str, path: Sequence[str], links: dict[str, Any]) -> str:
    """Build a rustdoc search URL for a standard library item of unknown kind."""
    base = std_item_url(root, (), "", links)
    return f"{base}?search={'::'.join(path)}"


def associated_anchor(owner_kind: SymbolKind, name: str) -> str:
    """Guess the rustdoc anchor of an item nested in a type or trait."""
    if owner_kind is SymbolKind.ENUM and name[:1].isupper():
        return f"variant.{name}"
    if name.isupper():
        return f"associatedconstant.{name}"
    if owner_kind is SymbolKind.TRAIT:
        return f"tymethod.{name}"
    return f"method.{name}"
