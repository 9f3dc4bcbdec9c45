"""Marker literals delimiting the synchronized region of a README."""

from enum import Enum

MARKER = "<!-- cargo-sync-readme -->"
START_MARKER = "<!-- cargo-sync-readme start -->"
END_MARKER = "<!-- cargo-sync-readme end -->"


class MarkerKind(Enum):
    """The three markers recognized in a README."""

    BARE = MARKER
    START = START_MARKER
    END = END_MARKER


def marker_kind(line: str) -> MarkerKind | None:
    """Return the marker a line consists of, or None for any other line."""
    stripped = line.strip()
    for kind in MarkerKind:
        if stripped == kind.value:
            return kind
    return None
