"""Logic for rewriting intra-doc links to external documentation URLs."""

import logging
import re
from typing import Any

from sync_readme.build_doc_url import (
    associated_anchor,
    crate_item_url,
    std_item_url,
    std_search_url,
)
from sync_readme.code_fence import CodeFence, open_fence
from sync_readme.doc_block import DocBlock, DocLine
from sync_readme.link_target import (
    CrateIntraLink,
    StdIntraLink,
    parse_link_target,
)
from sync_readme.load_config import load_config, std_kinds_from_config
from sync_readme.symbol_entry import Visibility
from sync_readme.symbol_kind import SymbolKind
from sync_readme.symbol_table import SymbolTable
from sync_readme.sync_warning import SyncWarning, WarningKind
from sync_readme.with_warnings import WithWarnings

logger = logging.getLogger(__name__)

# Inline code spans are matched so that links inside them are left alone.
INLINE_LINK_OR_CODE_RE = re.compile(
    r"(?P<code>`+).+?(?P=code)"
    r"|\[(?P<text>(?:[^\[\]\\]|\\.|\[[^\]]*\])*)\]"
    r"\((?P<dest><[^<>\n]*>|(?:[^()\s]|\([^()\s]*\))+)(?P<title>\s+(?:\"[^\"]*\"|'[^']*'))?\)"
)


def resolve_links(
    doc_block: DocBlock,
    symbol_table: SymbolTable,
    crate_name: str,
    *,
    config: dict[str, Any] | None = None,
) -> WithWarnings[DocBlock]:
    """Rewrite `crate::` and `::std::` inline links of a documentation block.

    Links outside fenced code and inline code spans are considered. Any other
    destination, and reference-style links, are kept as written.
    """
    resolver = _LinkResolver(symbol_table, crate_name, config or load_config())
    lines: list[DocLine] = []
    fence: CodeFence | None = None

    for line in doc_block.lines:
        if fence is not None:
            if fence.closes(line.text):
                fence = None
            lines.append(line)
            continue
        fence = open_fence(line.text)
        if fence is not None:
            lines.append(line)
            continue
        text = INLINE_LINK_OR_CODE_RE.sub(resolver.rewrite, line.text)
        lines.append(DocLine(text, hidden=line.hidden))

    return WithWarnings(DocBlock(lines=lines, crlf=doc_block.crlf), resolver.warnings)


class _LinkResolver:
    """Resolves link destinations, accumulating warnings."""

    def __init__(
        self, symbol_table: SymbolTable, crate_name: str, config: dict[str, Any]
    ) -> None:
        """Initialize with the symbol table and link settings."""
        self.symbol_table = symbol_table
        self.crate_name = crate_name
        self.links = config["links"]
        self.std_roots = set(self.links["std_roots"])
        self.std_kinds = std_kinds_from_config(config)
        self.warnings: list[SyncWarning] = []

    def rewrite(self, m: re.Match) -> str:
        """Substitution callback for INLINE_LINK_OR_CODE_RE."""
        if m.group("code"):
            return m.group(0)

        dest = m.group("dest")
        if dest.startswith("<") and dest.endswith(">"):
            dest = dest[1:-1]

        target = parse_link_target(dest)
        if isinstance(target, CrateIntraLink):
            url = self._resolve_crate(target, dest)
        elif isinstance(target, StdIntraLink):
            url = self._resolve_std(target, dest)
        else:
            url = None

        if url is None:
            return m.group(0)
        logger.debug("Rewrote %s to %s", dest, url)
        return f"[{m.group('text')}]({url}{m.group('title') or ''})"

    def _resolve_crate(self, target: CrateIntraLink, dest: str) -> str | None:
        path = target.path
        entry = self.symbol_table.get(path)
        if entry is None:
            url = self._resolve_crate_associated(path)
            if url is not None:
                return url
            entry = self.symbol_table.lookup(path)

        if entry is None:
            self.warnings.append(
                SyncWarning(
                    WarningKind.UNRESOLVED_INTRA_LINK,
                    f"cannot resolve intra-link {dest}: no declaration of "
                    f"{path[-1]} found in the entry point",
                )
            )
            return None

        if entry.visibility is Visibility.PRIVATE:
            self.warnings.append(
                SyncWarning(
                    WarningKind.PRIVATE_ITEM_LINK,
                    f"intra-link {dest} points to a private item, which is not "
                    "part of the published documentation",
                )
            )

        url = crate_item_url(
            self.crate_name, path[:-1], entry.kind.page(path[-1]), self.links
        )
        return _with_fragment(url, target.fragment)

    def _resolve_crate_associated(self, path: tuple[str, ...]) -> str | None:
        """Resolve `Owner::item` where Owner is a type or trait of the crate."""
        if len(path) < 2:  # noqa: PLR2004
            return None
        owner_path = path[:-1]
        owner = self.symbol_table.get(owner_path) or self.symbol_table.lookup(
            owner_path
        )
        if owner is None or not owner.kind.is_type_like:
            return None
        url = crate_item_url(
            self.crate_name,
            owner_path[:-1],
            owner.kind.page(owner_path[-1]),
            self.links,
        )
        return f"{url}#{associated_anchor(owner.kind, path[-1])}"

    def _resolve_std(self, target: StdIntraLink, dest: str) -> str | None:
        root = target.crate_name
        if root not in self.std_roots:
            self.warnings.append(
                SyncWarning(
                    WarningKind.UNRECOGNIZED_STD_ROOT,
                    f"cannot resolve {dest}: {root} is not a standard library crate",
                )
            )
            return None

        path = target.path
        if not path:
            return _with_fragment(
                std_item_url(root, (), "index.html", self.links), target.fragment
            )

        kind = self._std_kind(root, path)
        if kind is not None:
            url = std_item_url(root, path[:-1], kind.page(path[-1]), self.links)
            return _with_fragment(url, target.fragment)

        owner_kind = self._std_kind(root, path[:-1]) if len(path) > 1 else None
        if owner_kind is not None and owner_kind.is_type_like:
            url = std_item_url(
                root, path[:-2], owner_kind.page(path[-2]), self.links
            )
            return f"{url}#{associated_anchor(owner_kind, path[-1])}"

        return std_search_url(root, path, self.links)

    def _std_kind(self, root: str, path: tuple[str, ...]) -> SymbolKind | None:
        return self.std_kinds.get("::".join((root, *path)))


def _with_fragment(url: str, fragment: str) -> str:
    """Append a link fragment, if any."""
    return f"{url}#{fragment}" if fragment else url
