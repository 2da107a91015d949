"""Rendering of crate index and module overview pages."""

from rustdoc_docusaurus.build_module_hierarchy import PATH_SEP
from rustdoc_docusaurus.build_sidebars import is_leaf_item
from rustdoc_docusaurus.crate_docs import CrateDocs
from rustdoc_docusaurus.item_info import ItemInfo
from rustdoc_docusaurus.item_kind import (
    CATEGORY_ORDER,
    ItemKind,
    category_of,
    file_prefix,
)
from rustdoc_docusaurus.page_ref import PageRef
from rustdoc_docusaurus.render_frontmatter import render_frontmatter
from rustdoc_docusaurus.rewrite_doc_links import rewrite_doc_links
from rustdoc_docusaurus.sanitize_docs import first_paragraph, sanitize_docs

RESTRICTED_MARKER = " 🔒"


def render_module_page(docs: CrateDocs, page: PageRef) -> str:
    """Render a module overview (or the crate index) in Markdown."""
    module_key = page.module_key
    is_crate = module_key == docs.crate_name
    name = module_key.rsplit(PATH_SEP, 1)[-1]
    title = f"Crate {name}" if is_crate else f"Module {name}"

    parts: list[str] = [
        render_frontmatter(title, name, page.sidebar_key),
        f"# {'Crate' if is_crate else 'Module'} `{module_key}`",
        "",
    ]
    if is_crate and docs.store.crate_version:
        parts += [f"Version {docs.store.crate_version}", ""]

    module_item = docs.module_item(module_key)
    if module_item and module_item.docs:
        parts += [render_docs(docs, module_item), ""]

    parts += _render_reexports(docs, module_key)
    parts += _render_modules(docs, module_key)
    parts += _render_items(docs, module_key)

    return "\n".join(parts).rstrip() + "\n"


def visibility_marker(item: ItemInfo) -> str:
    """Return the marker shown after the name of a non-public item."""
    return "" if item.is_public else RESTRICTED_MARKER


def render_docs(docs: CrateDocs, item: ItemInfo) -> str:
    """Render an item's docs with intra-doc links resolved."""
    text = sanitize_docs(item.docs)
    return rewrite_doc_links(
        text,
        item.links,
        lambda path, target_id: docs.resolve(path, target_id, item),
    )


def render_summary(docs: CrateDocs, item: ItemInfo) -> str:
    """Render the first paragraph of an item's docs on one line."""
    return rewrite_doc_links(
        first_paragraph(item.docs),
        item.links,
        lambda path, target_id: docs.resolve(path, target_id, item),
    )


def _render_reexports(docs: CrateDocs, module_key: str) -> list[str]:
    lines = []
    for item_id, item in docs.modules.get(module_key, []):
        edge = item.reexport
        if item.kind is not ItemKind.REEXPORT or edge is None:
            continue
        statement = f"pub use {edge.source}{'::*' if edge.is_glob else ''};"
        url = docs.resolve(edge.source, item_id) if not edge.is_glob else None
        lines.append(f"- [`{statement}`]({url})" if url else f"- `{statement}`")
    if not lines:
        return []
    return ["## Re-exports", "", *lines, ""]


def _render_modules(docs: CrateDocs, module_key: str) -> list[str]:
    lines = []
    for child in docs.hierarchy.get(module_key, []):
        child_item = docs.module_item(child)
        label = child.rsplit(PATH_SEP, 1)[-1]
        entry = f"- [{label}]({docs.module_link(child)})"
        if child_item:
            entry += visibility_marker(child_item)
        summary = render_summary(docs, child_item) if child_item else ""
        lines.append(f"{entry}: {summary}" if summary else entry)

    own = set(docs.hierarchy.get(module_key, []))
    for name, full_path in docs.reexported_modules.get(module_key, []):
        if full_path in own:
            continue
        lines.append(f"- [{name}]({docs.module_link(full_path)}) (re-exported)")

    if not lines:
        return []
    return ["## Modules", "", *lines, ""]


def _render_items(docs: CrateDocs, module_key: str) -> list[str]:
    groups: dict[str, list[str]] = {}
    for _, item in docs.modules.get(module_key, []):
        if not is_leaf_item(item):
            continue
        label, _ = category_of(item.kind)
        link = docs.page_link(module_key, f"{file_prefix(item.kind)}{item.name}")
        entry = f"- [{item.name}]({link}){visibility_marker(item)}"
        summary = render_summary(docs, item)
        groups.setdefault(label, []).append(f"{entry}: {summary}" if summary else entry)

    parts: list[str] = []
    for label in CATEGORY_ORDER:
        if label in groups:
            parts += [f"## {label}", "", *groups[label], ""]
    return parts
