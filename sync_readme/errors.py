"""Fatal errors that abort a synchronization run before anything is written."""


class SyncReadmeError(Exception):
    """Base class for all fatal errors."""


class ExtractError(SyncReadmeError):
    """The documentation could not be extracted from the source file."""


class NoDocumentationError(ExtractError):
    """The source file has no leading inner documentation block."""

    def __init__(self) -> None:
        """Initialize with the standard message."""
        super().__init__(
            "the entry point has no inner documentation (//! lines) to synchronize"
        )


class TransformError(SyncReadmeError):
    """The README could not be transformed."""


class NoMarkerFoundError(TransformError):
    """The README contains no usable marker."""

    def __init__(self) -> None:
        """Initialize with the standard message."""
        super().__init__(
            "cannot find the <!-- cargo-sync-readme --> marker in the README; "
            "add it where the documentation should be synchronized"
        )


class UnterminatedStartMarkerError(TransformError):
    """A start marker has no end marker after it."""

    def __init__(self, line: int) -> None:
        """Initialize with the 1-based line of the dangling start marker."""
        self.line = line
        super().__init__(
            f"the start marker on line {line} has no matching end marker"
        )


class ManifestError(SyncReadmeError):
    """The Cargo manifest is missing or unusable."""


class ManifestNotFoundError(ManifestError):
    """No Cargo.toml was found in the directory or any of its parents."""


class EntryPointNotFoundError(ManifestError):
    """Neither a library nor a binary entry point could be chosen."""
