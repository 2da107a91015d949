"""Logic for following `pub use` chains to the item they finally name."""

import logging

from rustdoc_docusaurus.item_info import ItemInfo
from rustdoc_docusaurus.item_kind import ItemKind
from rustdoc_docusaurus.item_store import ItemStore

logger = logging.getLogger(__name__)

MAX_REEXPORT_DEPTH = 10


def resolve_reexport_chain(
    store: ItemStore,
    item_id: str,
    max_depth: int = MAX_REEXPORT_DEPTH,
) -> tuple[str, ItemInfo] | None:
    """Follow re-exports starting at item_id until a non-re-export item is found.

    Returns None when the chain is circular, deeper than max_depth, or leads
    to an id missing from the index.
    """
    end = _walk_chain(store, item_id, max_depth)
    if end is None or end[1] is None:
        return None
    return end[0], end[1]


def external_reexport_target(
    store: ItemStore,
    item_id: str,
    max_depth: int = MAX_REEXPORT_DEPTH,
) -> str | None:
    """Return the id a re-export chain ends at when it leaves the local index.

    This is how `pub use other_crate::Thing;` looks: the final target has a
    path-table entry but no index entry.
    """
    end = _walk_chain(store, item_id, max_depth)
    if end is None or end[1] is not None or end[0] == item_id:
        return None
    return end[0]


def _walk_chain(
    store: ItemStore, item_id: str, max_depth: int
) -> tuple[str, ItemInfo | None] | None:
    """Return the last id reached and its item (None if not in the index)."""
    visited: set[str] = set()
    current = item_id
    depth = 0
    while True:
        if depth > max_depth:
            logger.debug("Re-export chain from %s exceeds depth %d", item_id, max_depth)
            return None
        if current in visited:
            logger.debug("Circular re-export chain through %s", current)
            return None
        visited.add(current)

        item = store.get(current)
        if item is None:
            return current, None
        edge = item.reexport
        if item.kind is not ItemKind.REEXPORT or edge is None:
            return current, item
        if edge.target_id is None:
            # Re-export of something rustdoc could not resolve at all.
            return None
        current = edge.target_id
        depth += 1
