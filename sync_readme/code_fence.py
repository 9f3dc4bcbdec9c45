"""Helpers for tracking fenced code blocks in Markdown text."""

import re
from dataclasses import dataclass

FENCE_RE = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")

# Code block attributes understood by rustdoc. A fence whose info string only
# holds these (or nothing) is a Rust example.
RUSTDOC_ATTRIBUTES = {
    "rust",
    "ignore",
    "should_panic",
    "no_run",
    "compile_fail",
    "test_harness",
    "allow_fail",
    "standalone_crate",
}
EDITION_RE = re.compile(r"^edition\d{4}$")


@dataclass(frozen=True)
class CodeFence:
    """An open fenced code block."""

    indent: str
    marker: str
    info: str

    @property
    def is_rust(self) -> bool:
        """Whether rustdoc treats this block as Rust code."""
        tokens = [t for t in re.split(r"[\s,]+", self.info) if t]
        return all(
            t in RUSTDOC_ATTRIBUTES
            or t.startswith("ignore-")
            or EDITION_RE.match(t)
            for t in tokens
        )

    def closes(self, line: str) -> bool:
        """Check whether a line closes this fence."""
        m = FENCE_RE.match(line.rstrip("\r"))
        if not m:
            return False
        fence = m.group("fence")
        return (
            fence[0] == self.marker[0]
            and len(fence) >= len(self.marker)
            and not m.group("info").strip()
        )

    def rust_opening(self) -> str:
        """Render the opening line annotated for Markdown highlighting."""
        return f"{self.indent}{self.marker}rust"


def open_fence(line: str) -> CodeFence | None:
    """Return the fence a line opens, or None when it is not an opening fence."""
    m = FENCE_RE.match(line.rstrip("\r"))
    if not m:
        return None
    fence = m.group("fence")
    info = m.group("info").strip()
    if fence[0] == "`" and "`" in info:
        # Backtick fences cannot carry backticks in their info string.
        return None
    return CodeFence(indent=m.group("indent"), marker=fence, info=info)
