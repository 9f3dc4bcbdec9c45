"""Logic for splicing documentation into a README."""

import logging

from sync_readme.doc_block import DocBlock
from sync_readme.marker_span import SpanKind
from sync_readme.render_synced_region import render_synced_region
from sync_readme.scan_markers import scan_markers
from sync_readme.with_warnings import WithWarnings

logger = logging.getLogger(__name__)


def transform_readme(readme_text: str, doc_block: DocBlock) -> WithWarnings[str]:
    """Return the README with the documentation block spliced in.

    Everything outside the marker lines (and the region between start and end
    markers) is kept byte for byte.
    """
    scan = scan_markers(readme_text)
    span = scan.value
    if span.kind is SpanKind.INSERT:
        logger.info("Inserting documentation at the marker on line %d", span.first_line)
    else:
        logger.info(
            "Replacing documentation on lines %d-%d", span.first_line, span.last_line
        )

    region = render_synced_region(doc_block)
    text = readme_text[: span.start] + region + readme_text[span.end :]
    return WithWarnings(text, scan.warnings)
