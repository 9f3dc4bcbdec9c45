"""Data model for the outcome of a synchronization."""

from dataclasses import dataclass, field

from sync_readme.sync_warning import SyncWarning


@dataclass
class TransformResult:
    """New README content and the warnings produced along the way."""

    text: str
    warnings: list[SyncWarning] = field(default_factory=list)

    def is_synchronized(self, old_text: str) -> bool:
        """Check whether the README on disk already matches."""
        return old_text == self.text
