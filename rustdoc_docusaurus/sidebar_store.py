"""Logic for accumulating sidebars from several crates in one JSON file."""

import json
import logging
from pathlib import Path
from typing import Any

from rustdoc_docusaurus.build_sidebars import (
    BACK_LINK_CLASS,
    BACK_LINK_LABEL,
    CRATES_LABEL,
)
from rustdoc_docusaurus.sidebar_item import (
    SidebarCategory,
    SidebarDoc,
    SidebarLink,
    SidebarNode,
    sidebar_node_from_dict,
    sidebar_to_list,
)

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION = 1
ROOT_SIDEBAR_KEY = "rootRustSidebar"


class SidebarStore:
    """Manages the persisted sidebar set shared by every crate of a workspace."""

    def __init__(self, path: str, current_config_hash: str) -> None:
        """Initialize the store with a storage path and current configuration hash."""
        self.path = Path(path)
        self.current_config_hash = current_config_hash
        self.sidebars: dict[str, list[SidebarNode]] = {}
        self.crates: dict[str, dict[str, Any]] = {}  # name -> {doc_id, version}
        self.meta: dict[str, Any] = {
            "schema_version": CURRENT_SCHEMA_VERSION,
            "config_hash": current_config_hash,
        }

    def load(self) -> None:
        """Load previously written sidebars from disk."""
        if not self.path.exists():
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.exception("Error loading sidebars from %s", self.path)
            return

        schema_ver = data.get("meta", {}).get("schema_version", 0)
        if schema_ver != CURRENT_SCHEMA_VERSION:
            logger.warning(
                "Schema version mismatch (%s != %s). Ignoring stored sidebars.",
                schema_ver,
                CURRENT_SCHEMA_VERSION,
            )
            return

        self.meta = data.get("meta", {})
        self.crates = dict(data.get("crates", {}))
        for key, nodes in data.get("sidebars", {}).items():
            # Always recomputed from the crate registry.
            if key == ROOT_SIDEBAR_KEY:
                continue
            self.sidebars[key] = [sidebar_node_from_dict(n) for n in nodes]

        if self.meta.get("config_hash") != self.current_config_hash:
            logger.info("Stored sidebars were built with a different configuration.")

    def register_crate(
        self, name: str, doc_id: str, version: str | None = None
    ) -> None:
        """Record a converted crate for the cross-crate root sidebar."""
        self.crates[name] = {"doc_id": doc_id, "version": version or ""}

    def merge(self, sidebars: dict[str, list[SidebarNode]]) -> None:
        """Merge a run's sidebars; keys from this run replace stored ones."""
        for key, nodes in sidebars.items():
            if key == ROOT_SIDEBAR_KEY:
                continue
            self.sidebars[key] = nodes

    def root_sidebar(
        self, root_link: str | None = None, *, collapsed: bool = False
    ) -> list[SidebarNode]:
        """Build the cross-crate root sidebar from the crate registry."""
        nodes: list[SidebarNode] = []
        if root_link:
            nodes.append(
                SidebarLink(
                    href=root_link, label=BACK_LINK_LABEL, class_name=BACK_LINK_CLASS
                )
            )
        nodes.append(
            SidebarCategory(
                label=CRATES_LABEL,
                items=[
                    SidebarDoc(id=info["doc_id"], label=name)
                    for name, info in sorted(self.crates.items())
                ],
                collapsed=collapsed,
            )
        )
        return nodes

    def all_sidebars(
        self, root_link: str | None = None, *, collapsed: bool = False
    ) -> dict[str, list[SidebarNode]]:
        """Return stored sidebars plus a freshly computed root sidebar."""
        result = dict(sorted(self.sidebars.items()))
        result[ROOT_SIDEBAR_KEY] = self.root_sidebar(root_link, collapsed=collapsed)
        return result

    def to_json(
        self, root_link: str | None = None, *, collapsed: bool = False
    ) -> dict[str, Any]:
        """Serialize sidebars in the plain Docusaurus shape."""
        return {
            key: sidebar_to_list(nodes)
            for key, nodes in self.all_sidebars(root_link, collapsed=collapsed).items()
        }

    def save(self, root_link: str | None = None, *, collapsed: bool = False) -> None:
        """Save the store to disk, recomputing the root sidebar."""
        self.meta["config_hash"] = self.current_config_hash
        self.meta["schema_version"] = CURRENT_SCHEMA_VERSION

        if not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)

        self.path.write_text(
            json.dumps(
                {
                    "meta": self.meta,
                    "crates": self.crates,
                    "sidebars": self.to_json(root_link, collapsed=collapsed),
                },
                indent=2,
                sort_keys=True,
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )
