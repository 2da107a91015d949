"""Data models for representing rustdoc items."""

from dataclasses import dataclass, field
from enum import Enum

from rustdoc_docusaurus.item_kind import ItemKind
from rustdoc_docusaurus.reexport_edge import ReexportEdge


class Visibility(Enum):
    """Visibility of an item as far as the generated docs are concerned."""

    PUBLIC = "public"
    RESTRICTED = "restricted"  # pub(crate), pub(in path), or private


@dataclass(frozen=True)
class ItemInfo:
    """Represents a documented item (module, struct, function, etc.)."""

    id: str
    name: str | None
    kind: ItemKind
    visibility: Visibility = Visibility.PUBLIC
    docs: str | None = None
    span_filename: str | None = None  # e.g. /home/me/crate/src/net/tcp.rs
    members: tuple[str, ...] = ()  # module children, in declaration order
    reexport: ReexportEdge | None = None
    links: dict[str, str] = field(default_factory=dict, hash=False, compare=False)

    @property
    def is_public(self) -> bool:
        """Check if the item is publicly visible."""
        return self.visibility is Visibility.PUBLIC
