"""Data model for one entry of rustdoc's `paths` table."""

from dataclasses import dataclass

from rustdoc_docusaurus.item_kind import ItemKind

LOCAL_CRATE_ID = 0


@dataclass(frozen=True)
class PathEntry:
    """Represents the canonical location of an item."""

    path: tuple[str, ...]  # e.g. ("my_crate", "net", "TcpStream")
    crate_id: int
    kind: ItemKind

    @property
    def is_local(self) -> bool:
        """Check if the item is defined in the crate being converted."""
        return self.crate_id == LOCAL_CRATE_ID

    def joined(self) -> str:
        """Return the `::`-joined path."""
        return "::".join(self.path)
