"""Tests for inner documentation extraction."""

import pytest

from sync_readme.errors import NoDocumentationError
from sync_readme.extract_inner_doc import extract_inner_doc

FENCED = "//! ```\n//! # use foo::Bar;\n//! let x = 1;\n//! #\n//! ```\n"


def test_extracts_leading_inner_doc() -> None:
    """Verify prefix stripping and that the block ends at the first code line."""
    src = "//! # Title\n//!\n//! Some text.\n\nuse std::fmt;\n//! not part\n"
    doc = extract_inner_doc(src)
    assert doc.texts() == ["# Title", "", "Some text."]


def test_hidden_lines_dropped_by_default() -> None:
    """Verify that hidden lines in Rust examples are omitted."""
    doc = extract_inner_doc(FENCED)
    assert doc.texts() == ["```rust", "let x = 1;", "```"]


def test_hidden_lines_kept_when_requested() -> None:
    """Verify that show_hidden keeps hidden lines verbatim and tags them."""
    doc = extract_inner_doc(FENCED, show_hidden=True)
    assert doc.texts() == ["```rust", "# use foo::Bar;", "let x = 1;", "#", "```"]
    assert [line.hidden for line in doc.lines] == [False, True, False, True, False]


def test_hidden_rule_only_applies_in_rust_fences() -> None:
    """Verify prose and non-Rust code blocks keep their `#` lines."""
    src = "//! # Heading\n//! ```text\n//! # not hidden\n//! ```\n"
    doc = extract_inner_doc(src)
    assert doc.texts() == ["# Heading", "```text", "# not hidden", "```"]


def test_double_hash_is_not_hidden() -> None:
    """Verify that rustdoc's `##` escape is kept."""
    src = "//! ```\n//! ## kept\n//! ```\n"
    assert extract_inner_doc(src).texts() == ["```rust", "## kept", "```"]


def test_rustdoc_attributes_annotated_as_rust() -> None:
    """Verify rustdoc-only fence attributes become a `rust` annotation."""
    src = "//! ```no_run\n//! run();\n//! ```\n"
    assert extract_inner_doc(src).texts()[0] == "```rust"
    assert extract_inner_doc(src, annotate_rust=False).texts()[0] == "```no_run"


def test_skips_attributes_and_comments() -> None:
    """Verify attributes (including multi-line ones) and comments are skipped."""
    src = (
        "// Copyright notice\n"
        "#![deny(missing_docs)]\n"
        "\n"
        "//! Doc.\n"
        "#![cfg_attr(\n"
        "    docsrs,\n"
        "    feature(doc_cfg)\n"
        ")]\n"
        "//! More.\n"
        "pub fn f() {}\n"
    )
    assert extract_inner_doc(src).texts() == ["Doc.", "More."]


def test_outer_doc_ends_block() -> None:
    """Verify `///` documentation belongs to the next item, not the module."""
    src = "//! Module doc.\n/// Item doc.\npub struct S;\n"
    assert extract_inner_doc(src).texts() == ["Module doc."]


def test_no_documentation_raises() -> None:
    """Verify a missing or late inner doc block is fatal."""
    with pytest.raises(NoDocumentationError):
        extract_inner_doc("pub fn f() {}\n")
    with pytest.raises(NoDocumentationError):
        extract_inner_doc("fn main() {}\n//! too late\n")


def test_crlf_rendering() -> None:
    """Verify CRLF sources are split cleanly and joined with CRLF."""
    src = "//! a\r\n//! b\r\n"
    doc = extract_inner_doc(src, crlf=True)
    assert doc.texts() == ["a", "b"]
    assert doc.render() == "a\r\nb"


def test_without_crlf_existing_bytes_are_kept() -> None:
    """Verify carriage returns are left alone when CRLF mode is off."""
    doc = extract_inner_doc("//! a\r\n//! b\r\n")
    assert doc.texts() == ["a\r", "b\r"]
    assert doc.render() == "a\r\nb\r"
