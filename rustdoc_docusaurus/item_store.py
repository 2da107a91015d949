"""Read-only view over one crate's rustdoc graph."""

from dataclasses import dataclass, field

from rustdoc_docusaurus.item_info import ItemInfo
from rustdoc_docusaurus.path_entry import PathEntry

UNKNOWN_CRATE = "unknown"


@dataclass(frozen=True)
class ItemStore:
    """Flat id-keyed tables for items, their canonical paths, and origin crates.

    Items refer to each other by id only, so re-export cycles are plain edges.
    """

    root_id: str
    index: dict[str, ItemInfo]
    paths: dict[str, PathEntry] = field(default_factory=dict)
    external_crates: dict[int, str] = field(default_factory=dict)  # crate_id -> name
    crate_version: str | None = None
    format_version: int | None = None

    def get(self, item_id: str) -> ItemInfo | None:
        """Return the item with the given id, if it is in the index."""
        return self.index.get(item_id)

    def path_of(self, item_id: str) -> PathEntry | None:
        """Return the path-table entry for an id, if any."""
        return self.paths.get(item_id)

    @property
    def root_item(self) -> ItemInfo | None:
        """Return the crate root module item."""
        return self.index.get(self.root_id)

    @property
    def crate_name(self) -> str:
        """Return the crate name taken from the root item."""
        root = self.root_item
        if root and root.name:
            return root.name
        return UNKNOWN_CRATE

    def crate_name_of(self, entry: PathEntry) -> str:
        """Return the real crate name an entry originates from."""
        if entry.is_local:
            return self.crate_name
        fallback = entry.path[0] if entry.path else UNKNOWN_CRATE
        return self.external_crates.get(entry.crate_id, fallback)
