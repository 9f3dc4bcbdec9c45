"""Data models for the region of a README that receives documentation."""

from dataclasses import dataclass
from enum import Enum


class SpanKind(Enum):
    """How the documentation is spliced in."""

    INSERT = "insert"  # a bare marker, replaced by a fresh start/end block
    REPLACE = "replace"  # an existing start..end block


@dataclass(frozen=True)
class MarkerSpan:
    """Character offsets of the marker lines, terminators excluded."""

    kind: SpanKind
    start: int
    end: int
    first_line: int
    last_line: int
