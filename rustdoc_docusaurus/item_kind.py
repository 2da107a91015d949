"""The closed set of rustdoc item kinds and the per-kind lookup tables."""

from enum import Enum


class ItemKind(Enum):
    """Kind of a documented item, as reported by rustdoc."""

    MODULE = "module"
    STRUCT = "struct"
    ENUM = "enum"
    FUNCTION = "function"
    TRAIT = "trait"
    CONSTANT = "constant"
    TYPE_ALIAS = "type_alias"
    REEXPORT = "reexport"
    IMPL = "impl"
    FIELD = "field"
    VARIANT = "variant"
    MACRO = "macro"
    PROC_MACRO = "proc_macro"
    STATIC = "static"
    PRIMITIVE = "primitive"
    OTHER = "other"


# rustdoc spells the same kind differently across format versions and between
# `index[*].inner` keys and `paths[*].kind` values.
_RUSTDOC_TAGS: dict[str, ItemKind] = {
    "module": ItemKind.MODULE,
    "struct": ItemKind.STRUCT,
    "union": ItemKind.STRUCT,
    "enum": ItemKind.ENUM,
    "function": ItemKind.FUNCTION,
    "fn": ItemKind.FUNCTION,
    "trait": ItemKind.TRAIT,
    "trait_alias": ItemKind.TRAIT,
    "constant": ItemKind.CONSTANT,
    "assoc_const": ItemKind.CONSTANT,
    "type_alias": ItemKind.TYPE_ALIAS,
    "typedef": ItemKind.TYPE_ALIAS,
    "use": ItemKind.REEXPORT,
    "import": ItemKind.REEXPORT,
    "impl": ItemKind.IMPL,
    "struct_field": ItemKind.FIELD,
    "variant": ItemKind.VARIANT,
    "macro": ItemKind.MACRO,
    "proc_macro": ItemKind.PROC_MACRO,
    "proc_attribute": ItemKind.PROC_MACRO,
    "proc_derive": ItemKind.PROC_MACRO,
    "static": ItemKind.STATIC,
    "primitive": ItemKind.PRIMITIVE,
}

RENDERABLE_KINDS = frozenset(
    {
        ItemKind.STRUCT,
        ItemKind.ENUM,
        ItemKind.FUNCTION,
        ItemKind.TRAIT,
        ItemKind.MODULE,
        ItemKind.CONSTANT,
        ItemKind.TYPE_ALIAS,
    }
)

# Filename prefix of a local item page, e.g. `struct.Foo.md`.
_FILE_PREFIXES: dict[ItemKind, str] = {
    ItemKind.FUNCTION: "fn.",
    ItemKind.STRUCT: "struct.",
    ItemKind.ENUM: "enum.",
    ItemKind.TRAIT: "trait.",
    ItemKind.CONSTANT: "constant.",
    ItemKind.TYPE_ALIAS: "type.",
}

# Kind tag used in rustdoc-generated HTML file names, e.g. `enum.Option.html`.
_URL_TAGS: dict[ItemKind, str] = {
    ItemKind.STRUCT: "struct",
    ItemKind.ENUM: "enum",
    ItemKind.TRAIT: "trait",
    ItemKind.FUNCTION: "fn",
    ItemKind.TYPE_ALIAS: "type",
    ItemKind.CONSTANT: "constant",
    ItemKind.MACRO: "macro",
    ItemKind.STATIC: "static",
}

_TITLE_LABELS: dict[ItemKind, str] = {
    ItemKind.FUNCTION: "Function",
    ItemKind.STRUCT: "Struct",
    ItemKind.ENUM: "Enum",
    ItemKind.TRAIT: "Trait",
    ItemKind.CONSTANT: "Constant",
    ItemKind.TYPE_ALIAS: "Type",
    ItemKind.MODULE: "Module",
}

# Sidebar/overview category and CSS class of each kind.
_CATEGORIES: dict[ItemKind, tuple[str, str]] = {
    ItemKind.MODULE: ("Modules", "rust-mod"),
    ItemKind.MACRO: ("Macros", "rust-macro"),
    ItemKind.PROC_MACRO: ("Macros", "rust-macro"),
    ItemKind.STRUCT: ("Structs", "rust-struct"),
    ItemKind.FIELD: ("Structs", "rust-struct"),
    ItemKind.ENUM: ("Enums", "rust-struct"),
    ItemKind.VARIANT: ("Enums", "rust-struct"),
    ItemKind.TRAIT: ("Traits", "rust-trait"),
    ItemKind.FUNCTION: ("Functions", "rust-fn"),
    ItemKind.TYPE_ALIAS: ("Type Aliases", "rust-type"),
    ItemKind.CONSTANT: ("Constants", "rust-constant"),
    ItemKind.STATIC: ("Statics", "rust-static"),
}

CATEGORY_ORDER = [
    "Modules",
    "Macros",
    "Structs",
    "Enums",
    "Traits",
    "Functions",
    "Type Aliases",
    "Constants",
    "Statics",
    "Primitives",
]


def kind_from_tag(tag: str) -> ItemKind:
    """Map a rustdoc kind tag to an ItemKind, falling back to OTHER."""
    return _RUSTDOC_TAGS.get(tag.lower(), ItemKind.OTHER)


def is_renderable_kind(kind: ItemKind) -> bool:
    """Check if items of this kind get a page of their own."""
    return kind in RENDERABLE_KINDS


def file_prefix(kind: ItemKind) -> str:
    """Return the page filename prefix for a kind (empty for modules)."""
    return _FILE_PREFIXES.get(kind, "")


def url_tag(kind: ItemKind) -> str | None:
    """Return the rustdoc HTML kind tag, or None when rustdoc has no page for it."""
    return _URL_TAGS.get(kind)


def title_label(kind: ItemKind) -> str:
    """Return the page title word for a kind, e.g. `Struct`."""
    return _TITLE_LABELS.get(kind, "")


def category_of(kind: ItemKind) -> tuple[str, str]:
    """Return the (category label, CSS class) pair for a kind."""
    return _CATEGORIES.get(kind, ("Primitives", "rust-item"))
