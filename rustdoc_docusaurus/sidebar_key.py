"""Naming of Docusaurus doc ids and sidebar keys for one crate."""

from dataclasses import dataclass
from enum import Enum

from rustdoc_docusaurus.build_module_hierarchy import PATH_SEP

DOCS_DIR = "docs"


class SidebarRole(Enum):
    """Which navigation context a sidebar serves."""

    ENTRY = "entry"  # the crate index page
    CHILDREN = "children"  # overview pages of a module's child modules
    LEAF = "leaf"  # item pages inside a module


def sidebar_prefix(base_path: str) -> str:
    """Return the doc id prefix for a base path, relative to `docs/`."""
    parts = [p for p in base_path.split("/") if p]
    if parts and parts[0] == DOCS_DIR:
        parts = parts[1:]
    return "/".join(parts)


def module_dir(module_key: str, crate_name: str) -> str:
    """Return a module's directory relative to the crate output directory."""
    parts = module_key.split(PATH_SEP)
    if parts[0] == crate_name:
        parts = parts[1:]
    return "/".join(parts)


@dataclass(frozen=True)
class SidebarKeys:
    """Doc ids and sidebar keys, derived consistently from one prefix."""

    prefix: str
    crate_name: str

    def doc_id(self, *parts: str) -> str:
        """Join non-empty parts under the prefix and crate directory."""
        return "/".join(p for p in (self.prefix, self.crate_name, *parts) if p)

    def module_index(self, module_key: str) -> str:
        return self.doc_id(module_dir(module_key, self.crate_name), "index")

    def item_doc(self, module_key: str, page_name: str) -> str:
        return self.doc_id(module_dir(module_key, self.crate_name), page_name)

    def key(self, module_key: str, role: SidebarRole) -> str:
        """Return the sidebar key a page in the given context displays."""
        base = self.doc_id(module_dir(module_key, self.crate_name))
        base = base.replace("/", "_").replace(".", "_")
        is_root = module_key == self.crate_name
        if role is SidebarRole.ENTRY:
            return base
        if role is SidebarRole.CHILDREN:
            return f"{base}_modules" if is_root else f"{base}_children"
        return f"{base}_items" if is_root else base

    def entry(self) -> str:
        return self.key(self.crate_name, SidebarRole.ENTRY)
