"""Finite-state scan of a README for the synchronization markers."""

import logging
from collections.abc import Iterator
from enum import Enum, auto

from sync_readme.code_fence import CodeFence, open_fence
from sync_readme.errors import NoMarkerFoundError, UnterminatedStartMarkerError
from sync_readme.marker_span import MarkerSpan, SpanKind
from sync_readme.markers import MarkerKind, marker_kind
from sync_readme.sync_warning import SyncWarning, WarningKind
from sync_readme.with_warnings import WithWarnings

logger = logging.getLogger(__name__)


class MarkerState(Enum):
    """States of the marker scanner."""

    SEEKING = auto()
    FOUND_BARE = auto()
    FOUND_START = auto()
    CLOSED = auto()


class MarkerScanner:
    """Consumes marker occurrences in document order and picks the span to use.

    The first usable span wins. Every marker after it, end markers without a
    start, and start markers without an end are reported as warnings. A start
    marker that is never closed falls back to a bare marker seen after it.
    """

    def __init__(self) -> None:
        """Initialize the scanner in the SEEKING state."""
        self.state = MarkerState.SEEKING
        self.warnings: list[SyncWarning] = []
        self._start = 0
        self._start_line = 0
        self._span: MarkerSpan | None = None
        self._pending_bare: MarkerSpan | None = None

    def feed(self, kind: MarkerKind, start: int, end: int, line: int) -> None:
        """Advance the state machine with one marker line."""
        if self.state is MarkerState.SEEKING:
            if kind is MarkerKind.BARE:
                self._span = MarkerSpan(SpanKind.INSERT, start, end, line, line)
                self.state = MarkerState.FOUND_BARE
            elif kind is MarkerKind.START:
                self._open(start, line)
            else:
                self._warn(
                    WarningKind.UNMATCHED_END_MARKER,
                    f"ignoring end marker on line {line}: no start marker before it",
                )
        elif self.state is MarkerState.FOUND_START:
            if kind is MarkerKind.END:
                self._span = MarkerSpan(
                    SpanKind.REPLACE, self._start, end, self._start_line, line
                )
                self.state = MarkerState.CLOSED
                if self._pending_bare is not None:
                    self._warn_duplicate(MarkerKind.BARE, self._pending_bare.first_line)
            elif kind is MarkerKind.START:
                self._warn(
                    WarningKind.UNMATCHED_START_MARKER,
                    f"ignoring start marker on line {self._start_line}: "
                    f"another start marker follows on line {line}",
                )
                self._open(start, line)
            elif self._pending_bare is None:
                self._pending_bare = MarkerSpan(
                    SpanKind.INSERT, start, end, line, line
                )
            else:
                self._warn_duplicate(kind, line)
        else:
            self._warn_duplicate(kind, line)

    def finish(self) -> MarkerSpan:
        """Return the chosen span, or raise when there is none."""
        if self.state is MarkerState.FOUND_START:
            if self._pending_bare is None:
                raise UnterminatedStartMarkerError(self._start_line)
            self._warn(
                WarningKind.UNMATCHED_START_MARKER,
                f"ignoring start marker on line {self._start_line}: no end marker "
                f"follows it, using the marker on line {self._pending_bare.first_line}",
            )
            self._span = self._pending_bare
            self.state = MarkerState.FOUND_BARE
        if self._span is None:
            raise NoMarkerFoundError
        return self._span

    def _open(self, start: int, line: int) -> None:
        self._start = start
        self._start_line = line
        self.state = MarkerState.FOUND_START

    def _warn_duplicate(self, kind: MarkerKind, line: int) -> None:
        span = self._span
        used = f"line {span.first_line}" if span else f"line {self._start_line}"
        self._warn(
            WarningKind.MULTIPLE_MARKERS,
            f"ignoring {kind.name.lower()} marker on line {line}: "
            f"the README is synchronized at {used}",
        )

    def _warn(self, kind: WarningKind, message: str) -> None:
        logger.debug(message)
        self.warnings.append(SyncWarning(kind, message))


def scan_markers(text: str) -> WithWarnings[MarkerSpan]:
    """Locate the region of a README to synchronize.

    Markers only count on a line of their own and outside fenced code blocks.
    When a fence opened inside a start..end region is still open at the end of
    the document, the region is scanned again without tracking its fences, so
    an unbalanced fence in synchronized documentation cannot hide the end
    marker.
    """
    scanner, fence = _scan(text, fences_in_region=True)
    if fence is not None and scanner.state is MarkerState.FOUND_START:
        logger.debug("Unclosed code fence in the synchronized region")
        scanner, _ = _scan(text, fences_in_region=False)
    return WithWarnings(scanner.finish(), scanner.warnings)


def _scan(
    text: str, *, fences_in_region: bool
) -> tuple[MarkerScanner, CodeFence | None]:
    """Feed every marker line to a new scanner; return it and any open fence."""
    scanner = MarkerScanner()
    fence: CodeFence | None = None

    for line, start, end, raw in _iter_lines(text):
        if fences_in_region or scanner.state is not MarkerState.FOUND_START:
            if fence is not None:
                if fence.closes(raw):
                    fence = None
                continue
            fence = open_fence(raw)
            if fence is not None:
                continue

        kind = marker_kind(raw)
        if kind is not None:
            scanner.feed(kind, start, end, line)

    return scanner, fence


def _iter_lines(text: str) -> Iterator[tuple[int, int, int, str]]:
    """Yield (line number, content start, content end, raw line) per line."""
    pos = 0
    for number, raw in enumerate(text.split("\n"), 1):
        content_end = pos + len(raw) - (1 if raw.endswith("\r") else 0)
        yield number, pos, content_end, raw
        pos += len(raw) + 1
