"""Kinds of well-known standard library items.

Standard library sources are not parsed, so exact pages are only known for
the items listed here (plus any added through the `std_kinds` setting).
Other items fall back to a rustdoc search URL.
"""

from sync_readme.symbol_kind import SymbolKind

STD_KINDS: dict[str, SymbolKind] = {
    # Modules
    "std::collections": SymbolKind.MODULE,
    "std::fmt": SymbolKind.MODULE,
    "std::fs": SymbolKind.MODULE,
    "std::io": SymbolKind.MODULE,
    "std::iter": SymbolKind.MODULE,
    "std::mem": SymbolKind.MODULE,
    "std::ops": SymbolKind.MODULE,
    "std::path": SymbolKind.MODULE,
    "std::sync": SymbolKind.MODULE,
    "std::thread": SymbolKind.MODULE,
    "core::fmt": SymbolKind.MODULE,
    "core::iter": SymbolKind.MODULE,
    "alloc::vec": SymbolKind.MODULE,
    # Structs
    "std::vec::Vec": SymbolKind.STRUCT,
    "std::string::String": SymbolKind.STRUCT,
    "std::boxed::Box": SymbolKind.STRUCT,
    "std::rc::Rc": SymbolKind.STRUCT,
    "std::sync::Arc": SymbolKind.STRUCT,
    "std::sync::Mutex": SymbolKind.STRUCT,
    "std::sync::RwLock": SymbolKind.STRUCT,
    "std::cell::Cell": SymbolKind.STRUCT,
    "std::cell::RefCell": SymbolKind.STRUCT,
    "std::collections::HashMap": SymbolKind.STRUCT,
    "std::collections::HashSet": SymbolKind.STRUCT,
    "std::collections::BTreeMap": SymbolKind.STRUCT,
    "std::collections::BTreeSet": SymbolKind.STRUCT,
    "std::collections::VecDeque": SymbolKind.STRUCT,
    "std::path::Path": SymbolKind.STRUCT,
    "std::path::PathBuf": SymbolKind.STRUCT,
    "std::fs::File": SymbolKind.STRUCT,
    "std::time::Duration": SymbolKind.STRUCT,
    "std::time::Instant": SymbolKind.STRUCT,
    "std::fmt::Formatter": SymbolKind.STRUCT,
    "std::io::Error": SymbolKind.STRUCT,
    "std::marker::PhantomData": SymbolKind.STRUCT,
    "alloc::vec::Vec": SymbolKind.STRUCT,
    "alloc::string::String": SymbolKind.STRUCT,
    "alloc::boxed::Box": SymbolKind.STRUCT,
    "core::marker::PhantomData": SymbolKind.STRUCT,
    "core::time::Duration": SymbolKind.STRUCT,
    "core::fmt::Formatter": SymbolKind.STRUCT,
    # Enums
    "std::option::Option": SymbolKind.ENUM,
    "std::result::Result": SymbolKind.ENUM,
    "std::cmp::Ordering": SymbolKind.ENUM,
    "std::borrow::Cow": SymbolKind.ENUM,
    "std::io::ErrorKind": SymbolKind.ENUM,
    "core::option::Option": SymbolKind.ENUM,
    "core::result::Result": SymbolKind.ENUM,
    "core::cmp::Ordering": SymbolKind.ENUM,
    # Traits
    "std::fmt::Debug": SymbolKind.TRAIT,
    "std::fmt::Display": SymbolKind.TRAIT,
    "std::clone::Clone": SymbolKind.TRAIT,
    "std::marker::Copy": SymbolKind.TRAIT,
    "std::marker::Send": SymbolKind.TRAIT,
    "std::marker::Sync": SymbolKind.TRAIT,
    "std::default::Default": SymbolKind.TRAIT,
    "std::iter::Iterator": SymbolKind.TRAIT,
    "std::iter::IntoIterator": SymbolKind.TRAIT,
    "std::convert::From": SymbolKind.TRAIT,
    "std::convert::Into": SymbolKind.TRAIT,
    "std::convert::TryFrom": SymbolKind.TRAIT,
    "std::convert::AsRef": SymbolKind.TRAIT,
    "std::error::Error": SymbolKind.TRAIT,
    "std::hash::Hash": SymbolKind.TRAIT,
    "std::cmp::PartialEq": SymbolKind.TRAIT,
    "std::cmp::Eq": SymbolKind.TRAIT,
    "std::cmp::PartialOrd": SymbolKind.TRAIT,
    "std::cmp::Ord": SymbolKind.TRAIT,
    "std::ops::Deref": SymbolKind.TRAIT,
    "std::ops::Drop": SymbolKind.TRAIT,
    "std::ops::Fn": SymbolKind.TRAIT,
    "std::ops::FnMut": SymbolKind.TRAIT,
    "std::ops::FnOnce": SymbolKind.TRAIT,
    "std::io::Read": SymbolKind.TRAIT,
    "std::io::Write": SymbolKind.TRAIT,
    "std::str::FromStr": SymbolKind.TRAIT,
    "core::fmt::Debug": SymbolKind.TRAIT,
    "core::fmt::Display": SymbolKind.TRAIT,
    "core::iter::Iterator": SymbolKind.TRAIT,
    "core::future::Future": SymbolKind.TRAIT,
    "std::future::Future": SymbolKind.TRAIT,
    # Functions
    "std::mem::swap": SymbolKind.FUNCTION,
    "std::mem::replace": SymbolKind.FUNCTION,
    "std::mem::take": SymbolKind.FUNCTION,
    "std::mem::drop": SymbolKind.FUNCTION,
    "std::thread::spawn": SymbolKind.FUNCTION,
    "std::process::exit": SymbolKind.FUNCTION,
    "std::iter::once": SymbolKind.FUNCTION,
    "std::iter::repeat": SymbolKind.FUNCTION,
    "core::mem::swap": SymbolKind.FUNCTION,
    # Macros
    "std::println": SymbolKind.MACRO,
    "std::print": SymbolKind.MACRO,
    "std::eprintln": SymbolKind.MACRO,
    "std::format": SymbolKind.MACRO,
    "std::write": SymbolKind.MACRO,
    "std::writeln": SymbolKind.MACRO,
    "std::assert": SymbolKind.MACRO,
    "std::assert_eq": SymbolKind.MACRO,
    "core::write": SymbolKind.MACRO,
    "alloc::format": SymbolKind.MACRO,
    # Constants and type aliases
    "std::f64::consts::PI": SymbolKind.CONST,
    "std::f32::consts::PI": SymbolKind.CONST,
    "std::io::Result": SymbolKind.TYPE_ALIAS,
    "std::fmt::Result": SymbolKind.TYPE_ALIAS,
    "core::fmt::Result": SymbolKind.TYPE_ALIAS,
}
