"""Tests for intra-link rewriting."""

from typing import Any

from sync_readme.classify_symbols import classify_symbols
from sync_readme.deep_merge import deep_merge
from sync_readme.doc_block import DocBlock, DocLine
from sync_readme.load_config import load_config
from sync_readme.resolve_links import resolve_links
from sync_readme.sync_warning import WarningKind
from sync_readme.with_warnings import WithWarnings

SOURCE = """\
pub struct Foo;
pub enum Shape { Circle }
pub trait Draw { fn draw(&self); }
pub fn run() {}
pub mod net { pub struct Client; }
struct Secret;
#[macro_export]
macro_rules! shout { () => {} }
pub const MAX: u8 = 1;
"""
DOCS = "https://docs.rs/my-crate/latest/my_crate"
STD = "https://doc.rust-lang.org/stable"


def _resolve(
    *texts: str, config: dict[str, Any] | None = None, crlf: bool = False
) -> WithWarnings[DocBlock]:
    block = DocBlock([DocLine(t) for t in texts], crlf=crlf)
    return resolve_links(block, classify_symbols(SOURCE), "my-crate", config=config)


def _line(text: str, **kwargs: Any) -> str:
    return _resolve(text, **kwargs).value.texts()[0]


def test_struct_link_resolves() -> None:
    """Verify a struct link encodes `struct` in its page name."""
    result = _resolve("See [Foo](crate::Foo).")
    assert result.value.texts() == [f"See [Foo]({DOCS}/struct.Foo.html)."]
    assert result.warnings == []


def test_unresolved_link_is_kept_with_one_warning() -> None:
    """Verify an unknown symbol leaves the link alone and warns once."""
    result = _resolve("See [Nope](crate::Nope).")
    assert result.value.texts() == ["See [Nope](crate::Nope)."]
    assert [w.kind for w in result.warnings] == [WarningKind.UNRESOLVED_INTRA_LINK]


def test_each_unresolved_occurrence_warns() -> None:
    """Verify warnings are per link occurrence."""
    result = _resolve("[a](crate::A) and [b](crate::B)")
    assert len(result.warnings) == 2


def test_kind_specific_pages() -> None:
    """Verify functions, modules, macros and constants."""
    assert _line("[run](crate::run())") == f"[run]({DOCS}/fn.run.html)"
    assert _line("[net](crate::net)") == f"[net]({DOCS}/net/index.html)"
    assert _line("[shout!](crate::shout!)") == f"[shout!]({DOCS}/macro.shout.html)"
    assert _line("[MAX](crate::MAX)") == f"[MAX]({DOCS}/constant.MAX.html)"


def test_nested_module_items() -> None:
    """Verify module path segments end up in the URL."""
    assert (
        _line("[Client](crate::net::Client)")
        == f"[Client]({DOCS}/net/struct.Client.html)"
    )


def test_associated_items() -> None:
    """Verify methods, variants and trait methods get an anchor on the owner."""
    assert (
        _line("[new](crate::Foo::new)")
        == f"[new]({DOCS}/struct.Foo.html#method.new)"
    )
    assert (
        _line("[Circle](crate::Shape::Circle)")
        == f"[Circle]({DOCS}/enum.Shape.html#variant.Circle)"
    )
    assert (
        _line("[draw](crate::Draw::draw)")
        == f"[draw]({DOCS}/trait.Draw.html#tymethod.draw)"
    )


def test_fragment_and_title_are_kept() -> None:
    """Verify link fragments and titles survive the rewrite."""
    assert (
        _line("[Foo](crate::Foo#examples)") == f"[Foo]({DOCS}/struct.Foo.html#examples)"
    )
    assert (
        _line('[Foo](crate::Foo "The Foo")')
        == f'[Foo]({DOCS}/struct.Foo.html "The Foo")'
    )


def test_code_in_link_text() -> None:
    """Verify links whose text is inline code are rewritten."""
    assert _line("[`Foo`](crate::Foo)") == f"[`Foo`]({DOCS}/struct.Foo.html)"


def test_private_item_warns() -> None:
    """Verify links to private items are rewritten but flagged."""
    result = _resolve("[Secret](crate::Secret)")
    assert result.value.texts() == [f"[Secret]({DOCS}/struct.Secret.html)"]
    assert [w.kind for w in result.warnings] == [WarningKind.PRIVATE_ITEM_LINK]


def test_std_links() -> None:
    """Verify known, associated and unknown standard library items."""
    assert _line("[Vec](::std::vec::Vec)") == f"[Vec]({STD}/std/vec/struct.Vec.html)"
    assert (
        _line("[is_some](::std::option::Option::is_some)")
        == f"[is_some]({STD}/std/option/enum.Option.html#method.is_some)"
    )
    assert (
        _line("[t](::core::mem::transmute)")
        == f"[t]({STD}/core/?search=mem::transmute)"
    )
    assert _line("[std](::std)") == f"[std]({STD}/std/index.html)"


def test_unrecognized_std_root() -> None:
    """Verify links to other crates are kept and flagged."""
    result = _resolve("[S](::serde::Serialize)")
    assert result.value.texts() == ["[S](::serde::Serialize)"]
    assert [w.kind for w in result.warnings] == [WarningKind.UNRECOGNIZED_STD_ROOT]


def test_configured_std_kinds_and_roots() -> None:
    """Verify configuration extends the std kind map and root allow-list."""
    config = deep_merge(
        load_config(),
        {
            "std_kinds": {"std::sync::Once": "struct"},
            "links": {"std_roots": ["mystd"], "version": "1.2.3"},
        },
    )
    assert (
        _line("[Once](::std::sync::Once)", config=config)
        == f"[Once]({STD}/std/sync/struct.Once.html)"
    )
    assert (
        _line("[T](::mystd::Thing)", config=config)
        == f"[T]({STD}/mystd/?search=Thing)"
    )
    assert (
        _line("[Foo](crate::Foo)", config=config)
        == "[Foo](https://docs.rs/my-crate/1.2.3/my_crate/struct.Foo.html)"
    )


def test_untouched_destinations() -> None:
    """Verify reference-style links, code and external links are left alone."""
    texts = [
        "[Foo] is great.",
        "[Foo]: crate::Foo",
        "`[Foo](crate::Foo)`",
        "[site](https://example.com)",
        "```rust",
        "[Foo](crate::Foo)",
        "```",
    ]
    result = _resolve(*texts)
    assert result.value.texts() == texts
    assert result.warnings == []


def test_line_tags_and_newlines_preserved() -> None:
    """Verify hidden tags and the CRLF setting carry over."""
    block = DocBlock(
        [DocLine("[Foo](crate::Foo)"), DocLine("# hidden", hidden=True)], crlf=True
    )
    result = resolve_links(block, classify_symbols(SOURCE), "my-crate")
    assert result.value.crlf is True
    assert [line.hidden for line in result.value.lines] == [False, True]
