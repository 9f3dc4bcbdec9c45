"""Container pairing a value with the warnings produced while computing it."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from sync_readme.sync_warning import SyncWarning

T = TypeVar("T")


@dataclass
class WithWarnings(Generic[T]):
    """A value plus an ordered list of warnings."""

    value: T
    warnings: list[SyncWarning] = field(default_factory=list)
