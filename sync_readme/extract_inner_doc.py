"""Logic for extracting the inner documentation block of a Rust source file."""

import logging

from sync_readme.code_fence import CodeFence, open_fence
from sync_readme.doc_block import DocBlock, DocLine
from sync_readme.errors import NoDocumentationError

logger = logging.getLogger(__name__)

INNER_DOC_PREFIX = "//!"


def extract_inner_doc(
    source_text: str,
    *,
    show_hidden: bool = False,
    crlf: bool = False,
    annotate_rust: bool = True,
) -> DocBlock:
    """Extract the leading `//!` documentation of a source file.

    Blank lines, attributes and plain comments may precede or interleave the
    documentation; the first other line ends the block. Hidden lines of Rust
    examples are dropped unless show_hidden is set.
    """
    lines: list[DocLine] = []
    fence: CodeFence | None = None
    attr_depth = 0
    hidden_count = 0

    for raw in source_text.split("\n"):
        line = raw[:-1] if crlf and raw.endswith("\r") else raw
        stripped = line.strip()

        if attr_depth > 0:
            attr_depth += stripped.count("[") - stripped.count("]")
            continue

        if stripped.startswith(INNER_DOC_PREFIX):
            text = _strip_doc_prefix(line)
            doc_line, fence = _classify_doc_line(text, fence, annotate_rust)
            if doc_line.hidden:
                hidden_count += 1
                if not show_hidden:
                    continue
            lines.append(doc_line)
            continue

        if stripped.startswith(("#[", "#![")):
            attr_depth = stripped.count("[") - stripped.count("]")
            continue

        if not stripped or _is_plain_comment(stripped):
            continue

        break

    if not lines and hidden_count == 0:
        raise NoDocumentationError

    logger.debug(
        "Extracted %d documentation lines (%d hidden, %s)",
        len(lines),
        hidden_count,
        "kept" if show_hidden else "dropped",
    )
    return DocBlock(lines=lines, crlf=crlf)


def _strip_doc_prefix(line: str) -> str:
    """Remove the `//!` prefix and a single following space."""
    text = line.lstrip()[len(INNER_DOC_PREFIX) :]
    if text.startswith(" "):
        text = text[1:]
    return text


def _classify_doc_line(
    text: str, fence: CodeFence | None, annotate_rust: bool
) -> tuple[DocLine, CodeFence | None]:
    """Tag one documentation line and return the updated fence state."""
    if fence is None:
        opened = open_fence(text)
        if opened is None:
            return DocLine(text), None
        if annotate_rust and opened.is_rust:
            cr = "\r" if text.endswith("\r") else ""
            text = opened.rust_opening() + cr
        return DocLine(text), opened

    if fence.closes(text):
        return DocLine(text), None

    if fence.is_rust and _is_hidden(text):
        return DocLine(text, hidden=True), fence
    return DocLine(text), fence


def _is_hidden(text: str) -> bool:
    """Apply rustdoc's hidden-line rule: a lone `#` or `# ` prefix."""
    t = text.lstrip()
    return t.rstrip("\r") == "#" or t.startswith("# ")


def _is_plain_comment(stripped: str) -> bool:
    """Check for a regular `//` comment, which is not documentation."""
    if not stripped.startswith("//"):
        return False
    # `///` is outer documentation for the next item, `////` is a comment.
    return not stripped.startswith("///") or stripped.startswith("////")
