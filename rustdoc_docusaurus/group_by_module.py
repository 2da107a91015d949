"""Logic for assigning items to the modules whose pages list them."""

import logging

from rustdoc_docusaurus.build_module_hierarchy import (
    PATH_SEP,
    build_module_hierarchy,
)
from rustdoc_docusaurus.item_info import ItemInfo
from rustdoc_docusaurus.item_kind import ItemKind, is_renderable_kind
from rustdoc_docusaurus.item_store import ItemStore
from rustdoc_docusaurus.resolve_reexport_chain import resolve_reexport_chain

logger = logging.getLogger(__name__)

ModuleBuckets = dict[str, list[tuple[str, ItemInfo]]]


def assign_modules(
    store: ItemStore, *, include_private: bool = False
) -> tuple[ModuleBuckets, dict[str, list[str]]]:
    """Group items by module and return the buckets with their hierarchy.

    Every module, including ones that only contain submodules, ends up with a
    bucket so that it gets an index page and a sidebar entry.
    """
    modules = group_by_module(store, include_private=include_private)
    crate_name = store.crate_name

    for item_id, item in store.index.items():
        if item.kind is ItemKind.MODULE:
            entry = store.path_of(item_id)
            if entry:
                modules.setdefault(entry.joined(), [])

    for parent in build_module_hierarchy(modules, crate_name):
        modules.setdefault(parent, [])

    # Recomputed from the final key set rather than patched.
    hierarchy = build_module_hierarchy(modules, crate_name)
    return modules, hierarchy


def group_by_module(
    store: ItemStore, *, include_private: bool = False
) -> ModuleBuckets:
    """Bucket every visible renderable item under its owning module path."""
    modules: ModuleBuckets = {}

    for item_id, item in store.index.items():
        if item_id == store.root_id:
            continue
        if not _visible(item, include_private) or not is_renderable_kind(item.kind):
            continue
        entry = store.path_of(item_id)
        if entry is None or not entry.path:
            logger.debug("Skipping %s: no path information", item_id)
            continue
        if len(entry.path) > 1:
            module_path = PATH_SEP.join(entry.path[:-1])
        else:
            module_path = entry.path[0]
        modules.setdefault(module_path, []).append((item_id, item))

    _add_reexports(store, modules, include_private)

    for key, items in modules.items():
        modules[key] = _sorted_unique(items)
    return modules


def _add_reexports(
    store: ItemStore, modules: ModuleBuckets, include_private: bool
) -> None:
    """List re-exports in their module and expand glob re-exports of modules."""
    for module_id, module_item in store.index.items():
        if module_item.kind is not ItemKind.MODULE:
            continue
        entry = store.path_of(module_id)
        if entry is None:
            continue
        module_path = entry.joined()

        for member_id in module_item.members:
            member = store.get(member_id)
            if member is None or member.kind is not ItemKind.REEXPORT:
                continue
            if not _visible(member, include_private):
                continue

            modules.setdefault(module_path, []).append((member_id, member))

            edge = member.reexport
            if edge is None or not edge.is_glob or edge.target_id is None:
                continue
            if edge.target_id == module_id:
                continue  # pub use self::*;
            _expand_glob(
                store, modules, module_path, edge.target_id, include_private
            )


def _expand_glob(
    store: ItemStore,
    modules: ModuleBuckets,
    module_path: str,
    target_id: str,
    include_private: bool,
) -> None:
    resolved = resolve_reexport_chain(store, target_id)
    if resolved is None:
        return
    resolved_id, source_module = resolved
    if source_module.kind is not ItemKind.MODULE:
        return

    source_entry = store.path_of(resolved_id)
    if source_entry and module_path.startswith(source_entry.joined() + PATH_SEP):
        # Glob of an ancestor module would re-import this module itself.
        return

    for source_member_id in source_module.members:
        source_member = store.get(source_member_id)
        if source_member is None:
            continue
        if not _visible(source_member, include_private):
            continue
        # Nested re-exports are not renderable; submodules keep their own pages.
        if not is_renderable_kind(source_member.kind):
            continue
        if source_member.kind is ItemKind.MODULE:
            continue
        modules[module_path].append((source_member_id, source_member))


def _visible(item: ItemInfo, include_private: bool) -> bool:
    return include_private or item.is_public


def _sorted_unique(items: list[tuple[str, ItemInfo]]) -> list[tuple[str, ItemInfo]]:
    """Sort by item name (stable) and keep the first entry for each id."""
    seen: set[str] = set()
    unique = []
    for item_id, item in sorted(items, key=lambda pair: pair[1].name or ""):
        if item_id in seen:
            continue
        seen.add(item_id)
        unique.append((item_id, item))
    return unique
