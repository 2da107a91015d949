"""Logic for building every sidebar one crate's pages can display."""

import logging

from rustdoc_docusaurus.build_module_hierarchy import PATH_SEP
from rustdoc_docusaurus.conversion_context import ConversionContext
from rustdoc_docusaurus.group_by_module import ModuleBuckets
from rustdoc_docusaurus.item_info import ItemInfo
from rustdoc_docusaurus.item_kind import (
    CATEGORY_ORDER,
    ItemKind,
    category_of,
    file_prefix,
)
from rustdoc_docusaurus.link_context import normalize_crate_name
from rustdoc_docusaurus.sidebar_item import (
    SidebarCategory,
    SidebarDoc,
    SidebarLink,
    SidebarNode,
)
from rustdoc_docusaurus.sidebar_key import SidebarKeys, SidebarRole, sidebar_prefix

logger = logging.getLogger(__name__)

BACK_LINK_LABEL = "← Go back"
BACK_LINK_CLASS = "rust-sidebar-back-link"
CRATES_LABEL = "Crates"


def is_leaf_item(item: ItemInfo) -> bool:
    """Check if an item in a bucket gets a page inside its module."""
    return bool(item.name) and item.kind not in (ItemKind.MODULE, ItemKind.REEXPORT)


def crate_title(keys: SidebarKeys, crate_version: str | None) -> SidebarDoc:
    """Build the clickable crate name and version heading."""
    return SidebarDoc(
        id=keys.doc_id("index"),
        label=keys.crate_name,
        custom_props={
            "rustCrateTitle": True,
            "crateName": keys.crate_name,
            "version": crate_version or "",
        },
    )


def build_all_sidebars(
    modules: ModuleBuckets,
    hierarchy: dict[str, list[str]],
    crate_name: str,
    crate_version: str | None,
    ctx: ConversionContext,
) -> dict[str, list[SidebarNode]]:
    """Build the sidebar set for one crate, keyed by navigation context.

    The crate index shows the workspace crates; a module overview shows its
    parent's contents; an item page shows its own module's contents.
    """
    keys = SidebarKeys(sidebar_prefix(ctx.base_path), crate_name)
    title = crate_title(keys, crate_version)
    sidebars: dict[str, list[SidebarNode]] = {
        keys.entry(): _entry_sidebar(keys, title, ctx),
    }

    sections: dict[str, list[SidebarNode]] = {}

    def section(module_key: str) -> list[SidebarNode]:
        if module_key not in sections:
            sections[module_key] = _module_section(
                keys, module_key, modules, hierarchy
            )
        return sections[module_key]

    for module_key in sorted(modules):
        has_children = bool(hierarchy.get(module_key))
        has_leaves = any(is_leaf_item(item) for _, item in modules[module_key])

        is_root = module_key == crate_name
        if has_children or has_leaves or is_root:
            sidebars[keys.key(module_key, SidebarRole.CHILDREN)] = [
                title,
                *_wrap(keys, module_key, section(module_key), inline=is_root),
            ]
        if has_leaves:
            sidebars[keys.key(module_key, SidebarRole.LEAF)] = [
                title,
                *_wrap(keys, module_key, section(module_key), inline=False),
            ]

    logger.debug("Built %d sidebars for %s", len(sidebars), crate_name)
    return sidebars


def _entry_sidebar(
    keys: SidebarKeys, title: SidebarDoc, ctx: ConversionContext
) -> list[SidebarNode]:
    nodes: list[SidebarNode] = []
    if ctx.sidebar_root_link:
        nodes.append(
            SidebarLink(
                href=ctx.sidebar_root_link,
                label=BACK_LINK_LABEL,
                class_name=BACK_LINK_CLASS,
            )
        )
    nodes.append(title)

    # normalized name -> name as configured
    crates: dict[str, str] = {}
    for name in (*ctx.workspace_crates, keys.crate_name):
        crates.setdefault(normalize_crate_name(name), name.strip())
    if len(crates) > 1:
        nodes.append(
            SidebarCategory(
                label=CRATES_LABEL,
                items=[
                    SidebarDoc(
                        id="/".join(p for p in (keys.prefix, doc_dir, "index") if p),
                        label=label,
                    )
                    for doc_dir, label in sorted(crates.items())
                ],
                collapsed=ctx.sidebar_collapsed,
            )
        )
    return nodes


def _module_section(
    keys: SidebarKeys,
    module_key: str,
    modules: ModuleBuckets,
    hierarchy: dict[str, list[str]],
) -> list[SidebarNode]:
    groups: dict[str, list[SidebarNode]] = {}
    modules_label, modules_css = category_of(ItemKind.MODULE)
    for child in hierarchy.get(module_key, []):
        groups.setdefault(modules_label, []).append(
            SidebarDoc(
                id=keys.module_index(child),
                label=child.rsplit(PATH_SEP, 1)[-1],
                class_name=modules_css,
            )
        )

    for _, item in modules.get(module_key, []):
        if not is_leaf_item(item):
            continue
        label, css = category_of(item.kind)
        groups.setdefault(label, []).append(
            SidebarDoc(
                id=keys.item_doc(module_key, f"{file_prefix(item.kind)}{item.name}"),
                label=str(item.name),
                class_name=css,
            )
        )

    return [
        SidebarCategory(label=label, items=groups[label])
        for label in CATEGORY_ORDER
        if label in groups
    ]


def _wrap(
    keys: SidebarKeys, module_key: str, nodes: list[SidebarNode], *, inline: bool
) -> list[SidebarNode]:
    if inline:
        return list(nodes)
    return [
        SidebarCategory(
            label=f"In {module_key}",
            items=list(nodes),
            link=keys.module_index(module_key),
        )
    ]
