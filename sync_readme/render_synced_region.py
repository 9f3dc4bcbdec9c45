"""Utility for rendering the delimited documentation block."""

from sync_readme.doc_block import DocBlock
from sync_readme.markers import END_MARKER, START_MARKER


def render_synced_region(doc_block: DocBlock) -> str:
    """Wrap documentation between the start and end markers."""
    lines = [START_MARKER, ""]
    if doc_block.lines:
        lines.extend(doc_block.texts())
        lines.append("")
    lines.append(END_MARKER)
    return doc_block.newline.join(lines)
