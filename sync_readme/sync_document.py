"""Core pipeline: source documentation in, synchronized README out."""

from typing import Any

from sync_readme.classify_symbols import classify_symbols
from sync_readme.extract_inner_doc import extract_inner_doc
from sync_readme.load_config import load_config
from sync_readme.resolve_links import resolve_links
from sync_readme.transform_readme import transform_readme
from sync_readme.transform_result import TransformResult


def sync_document(
    source_text: str,
    readme_text: str,
    crate_name: str,
    *,
    show_hidden: bool = False,
    crlf: bool = False,
    config: dict[str, Any] | None = None,
) -> TransformResult:
    """Synchronize the inner documentation of source_text into readme_text.

    Raises ExtractError or TransformError when there is nothing to extract or
    nowhere to put it; every other anomaly is returned as a warning.
    """
    config = config or load_config()
    doc = extract_inner_doc(
        source_text,
        show_hidden=show_hidden,
        crlf=crlf,
        annotate_rust=config["fences"]["annotate_rust"],
    )
    symbols = classify_symbols(source_text)
    resolved = resolve_links(doc, symbols, crate_name, config=config)
    transformed = transform_readme(readme_text, resolved.value)
    return TransformResult(
        text=transformed.value,
        warnings=[*resolved.warnings, *transformed.warnings],
    )
