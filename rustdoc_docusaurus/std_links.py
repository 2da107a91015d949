"""Fixed URL tables for the Rust standard library and docs.rs."""

STD_DOCS_ROOT = "https://doc.rust-lang.org"
DOCS_RS_ROOT = "https://docs.rs"

DEFAULT_STD_CRATES = ("std", "core", "alloc")

# Path segments of implementation-detail modules that never appear in public
# rustdoc URLs. Heuristic; overridable through `links.internal_modules`.
DEFAULT_INTERNAL_MODULES = ("bounded", "unbounded", "inner", "private", "imp")

_RESULT_URL = f"{STD_DOCS_ROOT}/std/result/enum.Result.html"
_OPTION_URL = f"{STD_DOCS_ROOT}/std/option/enum.Option.html"

# Aliases and core re-exports that read better as the canonical std page.
CANONICAL_REDIRECTS: dict[str, str] = {
    "core::fmt::Result": _RESULT_URL,
    "std::fmt::Result": _RESULT_URL,
    "core::result::Result": _RESULT_URL,
    "core::option::Option": _OPTION_URL,
}

# Last resort for bare names with no path-table entry.
COMMON_STD_TYPES: dict[str, str] = {
    "String": f"{STD_DOCS_ROOT}/std/string/struct.String.html",
    "Vec": f"{STD_DOCS_ROOT}/std/vec/struct.Vec.html",
    "Option": _OPTION_URL,
    "Result": _RESULT_URL,
    "Box": f"{STD_DOCS_ROOT}/std/boxed/struct.Box.html",
    "Rc": f"{STD_DOCS_ROOT}/std/rc/struct.Rc.html",
    "Arc": f"{STD_DOCS_ROOT}/std/sync/struct.Arc.html",
    "HashMap": f"{STD_DOCS_ROOT}/std/collections/struct.HashMap.html",
    "HashSet": f"{STD_DOCS_ROOT}/std/collections/struct.HashSet.html",
    "BTreeMap": f"{STD_DOCS_ROOT}/std/collections/struct.BTreeMap.html",
    "BTreeSet": f"{STD_DOCS_ROOT}/std/collections/struct.BTreeSet.html",
    "Mutex": f"{STD_DOCS_ROOT}/std/sync/struct.Mutex.html",
    "RwLock": f"{STD_DOCS_ROOT}/std/sync/struct.RwLock.html",
    "Cell": f"{STD_DOCS_ROOT}/std/cell/struct.Cell.html",
    "RefCell": f"{STD_DOCS_ROOT}/std/cell/struct.RefCell.html",
    "Path": f"{STD_DOCS_ROOT}/std/path/struct.Path.html",
    "PathBuf": f"{STD_DOCS_ROOT}/std/path/struct.PathBuf.html",
}

# Names that are enums in std even though they do not end in `Error`.
STD_ENUM_NAMES = frozenset({"Option", "Result"})
