"""Logic for deciding which pages exist and which sidebar each displays."""

import logging

from rustdoc_docusaurus.build_module_hierarchy import parent_of
from rustdoc_docusaurus.build_sidebars import is_leaf_item
from rustdoc_docusaurus.group_by_module import ModuleBuckets
from rustdoc_docusaurus.item_kind import file_prefix
from rustdoc_docusaurus.page_ref import PageRef
from rustdoc_docusaurus.sidebar_key import SidebarKeys, SidebarRole, module_dir

logger = logging.getLogger(__name__)

INDEX_PAGE = "index"


def page_path(module_key: str, crate_name: str, page_name: str) -> str:
    """Return a page path relative to the crate directory, without extension."""
    directory = module_dir(module_key, crate_name)
    return f"{directory}/{page_name}" if directory else page_name


def build_page_map(modules: ModuleBuckets, keys: SidebarKeys) -> dict[str, PageRef]:
    """Map every output page path to the module or item it renders."""
    crate_name = keys.crate_name
    pages: dict[str, PageRef] = {
        INDEX_PAGE: PageRef(crate_name, None, keys.entry()),
    }

    for module_key in sorted(modules):
        if module_key != crate_name:
            parent = parent_of(module_key)
            if parent is None:
                sidebar = keys.entry()
            else:
                sidebar = keys.key(parent, SidebarRole.CHILDREN)
            pages.setdefault(
                page_path(module_key, crate_name, INDEX_PAGE),
                PageRef(module_key, None, sidebar),
            )

        leaf_sidebar = keys.key(module_key, SidebarRole.LEAF)
        for item_id, item in modules[module_key]:
            if not is_leaf_item(item):
                continue
            path = page_path(
                module_key, crate_name, f"{file_prefix(item.kind)}{item.name}"
            )
            if path in pages:
                logger.debug("Duplicate page %s for %s; keeping first", path, item_id)
                continue
            pages[path] = PageRef(module_key, item_id, leaf_sidebar)

    return pages
