"""Data models and parsing for Markdown link destinations."""

import re
from dataclasses import dataclass

IDENT_RE = re.compile(r"^(?:r#)?[A-Za-z_]\w*$")
CRATE_PREFIX = "crate::"
STD_PREFIX = "::"


@dataclass(frozen=True)
class CrateIntraLink:
    """A `crate::path` destination."""

    path: tuple[str, ...]
    fragment: str = ""


@dataclass(frozen=True)
class StdIntraLink:
    """A `::root::path` destination, root being a standard library crate."""

    crate_name: str
    path: tuple[str, ...]
    fragment: str = ""


@dataclass(frozen=True)
class ExternalOrOpaque:
    """Any other destination; never rewritten."""

    raw: str


LinkTarget = CrateIntraLink | StdIntraLink | ExternalOrOpaque


def parse_link_target(dest: str) -> LinkTarget:
    """Classify a link destination."""
    target, _, fragment = dest.partition("#")
    # rustdoc accepts `foo()` for functions and `foo!` for macros.
    target = target.removesuffix("()").removesuffix("!")

    if target.startswith(CRATE_PREFIX):
        segments = _segments(target[len(CRATE_PREFIX) :])
        if segments:
            return CrateIntraLink(segments, fragment)
    elif target.startswith(STD_PREFIX):
        segments = _segments(target[len(STD_PREFIX) :])
        if segments:
            return StdIntraLink(segments[0], segments[1:], fragment)

    return ExternalOrOpaque(dest)


def _segments(path: str) -> tuple[str, ...]:
    """Split a `::` path, returning () when any segment is not an identifier."""
    parts = path.split("::")
    if not all(IDENT_RE.match(p) for p in parts):
        return ()
    return tuple(p.removeprefix("r#") for p in parts)
