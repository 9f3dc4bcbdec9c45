"""Blank out Rust comments and literals so structural scans see only code."""

import re

RAW_STRING_START_RE = re.compile(r'b?r(#*)"')
CHAR_LITERAL_RE = re.compile(
    r"b?'(?:\\(?:x[0-9a-fA-F]{2}|u\{[0-9a-fA-F]{1,6}\}|.)|[^\\'\n])'"
)


def mask_source(text: str) -> str:
    """Replace comments, strings and char literals with spaces.

    Newlines are kept so offsets and line numbers stay valid.
    """
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        end = _literal_end(text, i)
        if end > i:
            out.append(_blank(text[i:end]))
            i = end
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


def _literal_end(text: str, i: int) -> int:
    """Return the end of a comment or literal starting at i, or i if none does."""
    if text.startswith("//", i):
        end = text.find("\n", i)
        return len(text) if end == -1 else end

    if text.startswith("/*", i):
        return _block_comment_end(text, i)

    prev_is_ident = i > 0 and (text[i - 1].isalnum() or text[i - 1] == "_")

    m = RAW_STRING_START_RE.match(text, i)
    if m and not prev_is_ident:
        closing = '"' + m.group(1)
        end = text.find(closing, m.end())
        return len(text) if end == -1 else end + len(closing)

    if text[i] == '"':
        return _string_end(text, i + 1)

    if text[i] in "'b" and not prev_is_ident:
        m = CHAR_LITERAL_RE.match(text, i)
        if m:
            return m.end()

    return i


def _block_comment_end(text: str, i: int) -> int:
    """Find the end of a (possibly nested) block comment."""
    depth = 0
    j = i
    n = len(text)
    while j < n:
        if text.startswith("/*", j):
            depth += 1
            j += 2
        elif text.startswith("*/", j):
            depth -= 1
            j += 2
            if depth == 0:
                return j
        else:
            j += 1
    return n


def _string_end(text: str, j: int) -> int:
    """Find the end of a string literal whose body starts at j."""
    n = len(text)
    while j < n:
        if text[j] == "\\":
            j += 2
        elif text[j] == '"':
            return j + 1
        else:
            j += 1
    return n


def _blank(s: str) -> str:
    """Blank every character except newlines."""
    return re.sub(r"[^\n]", " ", s)
