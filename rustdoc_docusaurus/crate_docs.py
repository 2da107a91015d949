"""Data model bundling everything computed for one crate before rendering."""

from dataclasses import dataclass, field

from rustdoc_docusaurus.build_page_map import INDEX_PAGE, page_path
from rustdoc_docusaurus.group_by_module import ModuleBuckets
from rustdoc_docusaurus.item_info import ItemInfo
from rustdoc_docusaurus.item_kind import ItemKind
from rustdoc_docusaurus.item_store import ItemStore
from rustdoc_docusaurus.link_context import LinkContext
from rustdoc_docusaurus.resolve_link import resolve_link
from rustdoc_docusaurus.sidebar_key import SidebarKeys, module_dir


@dataclass(frozen=True)
class CrateDocs:
    """Read-only inputs shared by every page of one crate."""

    store: ItemStore
    modules: ModuleBuckets
    hierarchy: dict[str, list[str]]
    reexported_modules: dict[str, list[tuple[str, str]]]
    keys: SidebarKeys
    link_ctx: LinkContext
    module_items: dict[str, str] = field(default_factory=dict)  # path -> item id

    @classmethod
    def create(
        cls,
        store: ItemStore,
        modules: ModuleBuckets,
        hierarchy: dict[str, list[str]],
        reexported_modules: dict[str, list[tuple[str, str]]],
        keys: SidebarKeys,
        link_ctx: LinkContext,
    ) -> "CrateDocs":
        """Bundle the inputs and index module items by their path."""
        module_items = {store.crate_name: store.root_id}
        for item_id, entry in store.paths.items():
            item = store.get(item_id)
            if item is not None and item.kind is ItemKind.MODULE:
                module_items.setdefault(entry.joined(), item_id)
        return cls(
            store=store,
            modules=modules,
            hierarchy=hierarchy,
            reexported_modules=reexported_modules,
            keys=keys,
            link_ctx=link_ctx,
            module_items=module_items,
        )

    @property
    def crate_name(self) -> str:
        return self.keys.crate_name

    def module_item(self, module_key: str) -> ItemInfo | None:
        """Return the module item documenting a module path, if any."""
        item_id = self.module_items.get(module_key)
        return self.store.get(item_id) if item_id else None

    def module_link(self, module_key: str) -> str:
        """Return the route of a module overview page."""
        directory = module_dir(module_key, self.crate_name)
        parts = [self.link_ctx.base_path, self.crate_name]
        if directory:
            parts.append(directory)
        return "/".join(parts)

    def page_link(self, module_key: str, page_name: str) -> str:
        """Return the route of a page inside a module."""
        if page_name == INDEX_PAGE:
            return self.module_link(module_key)
        path = page_path(module_key, self.crate_name, page_name)
        return f"{self.link_ctx.base_path}/{self.crate_name}/{path}"

    def resolve(
        self, full_path: str, item_id: str, current_item: ItemInfo | None = None
    ) -> str | None:
        """Resolve a reference from a page of this crate."""
        return resolve_link(full_path, item_id, self.store, self.link_ctx, current_item)
