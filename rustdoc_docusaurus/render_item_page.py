"""Rendering of leaf item pages (structs, enums, traits, functions, ...)."""

from rustdoc_docusaurus.build_module_hierarchy import PATH_SEP
from rustdoc_docusaurus.crate_docs import CrateDocs
from rustdoc_docusaurus.item_kind import title_label
from rustdoc_docusaurus.page_ref import PageRef
from rustdoc_docusaurus.render_frontmatter import render_frontmatter
from rustdoc_docusaurus.render_module_page import render_docs, visibility_marker


def render_item_page(docs: CrateDocs, page: PageRef) -> str:
    """Render a leaf item page in Markdown."""
    item = docs.store.get(page.item_id) if page.item_id else None
    if item is None or not item.name:
        msg = f"Page does not refer to a documented item: {page}"
        raise ValueError(msg)

    label = title_label(item.kind)
    title = f"{label} {item.name}"
    parts: list[str] = [
        render_frontmatter(title, item.name, page.sidebar_key),
        _breadcrumb(docs, page.module_key),
        "",
        f"# {label} `{item.name}`{visibility_marker(item)}",
        "",
    ]

    # Items copied in by a glob re-export keep pointing at their definition.
    entry = docs.store.path_of(item.id)
    owner = tuple(page.module_key.split(PATH_SEP))
    if entry is not None and entry.path[:-1] != owner:
        canonical = entry.joined()
        url = docs.resolve(canonical, item.id)
        source = f"[`{canonical}`]({url})" if url else f"`{canonical}`"
        parts += [f"Re-exported from {source}.", ""]

    if item.docs:
        parts += [render_docs(docs, item), ""]

    return "\n".join(parts).rstrip() + "\n"


def _breadcrumb(docs: CrateDocs, module_key: str) -> str:
    """Render `crate::module::path` with each segment linked to its overview."""
    segments = module_key.split(PATH_SEP)
    links = []
    for i, segment in enumerate(segments):
        key = PATH_SEP.join(segments[: i + 1])
        links.append(f"[{segment}]({docs.module_link(key)})")
    return f"**{'::'.join(links)}**"
