"""Data models for non-fatal anomalies found while synchronizing."""

from dataclasses import dataclass
from enum import Enum


class WarningKind(Enum):
    """Categories of recoverable anomalies."""

    UNRESOLVED_INTRA_LINK = "unresolved-intra-link"
    UNRECOGNIZED_STD_ROOT = "unrecognized-std-root"
    PRIVATE_ITEM_LINK = "private-item-link"
    MULTIPLE_MARKERS = "multiple-markers"
    UNMATCHED_END_MARKER = "unmatched-end-marker"
    UNMATCHED_START_MARKER = "unmatched-start-marker"


@dataclass(frozen=True)
class SyncWarning:
    """A warning accumulated during a run; never dropped."""

    kind: WarningKind
    message: str

    def __str__(self) -> str:
        """Render the warning the way the CLI prints it."""
        return f"warning: {self.message}"
