"""Tests for persisting and merging sidebars across crates."""

import json
from pathlib import Path

from rustdoc_docusaurus.sidebar_item import SidebarCategory, SidebarDoc
from rustdoc_docusaurus.sidebar_store import (
    CURRENT_SCHEMA_VERSION,
    ROOT_SIDEBAR_KEY,
    SidebarStore,
)
from rustdoc_docusaurus.sidebars_to_ts import sidebars_to_ts


def _doc(doc_id: str) -> SidebarDoc:
    return SidebarDoc(id=doc_id, label=doc_id.rsplit("/", 1)[-1])


def test_save_load_roundtrip(tmp_path: Path) -> None:
    """Test sidebars survive a save and reload."""
    store_file = tmp_path / "sidebars-rust.json"
    store = SidebarStore(str(store_file), "hash123")
    store.register_crate("alpha", "alpha/index", "1.0.0")
    store.merge({"alpha": [_doc("alpha/index")]})
    store.save()

    reloaded = SidebarStore(str(store_file), "hash123")
    reloaded.load()

    assert reloaded.sidebars == {"alpha": [_doc("alpha/index")]}
    assert reloaded.crates == {"alpha": {"doc_id": "alpha/index", "version": "1.0.0"}}
    assert reloaded.meta["config_hash"] == "hash123"


def test_merge_keeps_untouched_keys(tmp_path: Path) -> None:
    """Test a second crate's run keeps the first crate's sidebars."""
    store_file = tmp_path / "sidebars-rust.json"
    first = SidebarStore(str(store_file), "h")
    first.register_crate("alpha", "alpha/index")
    first.merge({"alpha": [_doc("alpha/index")], "alpha_items": [_doc("alpha/x")]})
    first.save()

    second = SidebarStore(str(store_file), "h")
    second.load()
    second.register_crate("beta", "beta/index")
    second.merge({"beta": [_doc("beta/index")], "alpha_items": [_doc("alpha/y")]})
    second.save()

    data = json.loads(store_file.read_text(encoding="utf-8"))
    assert set(data["sidebars"]) == {"alpha", "alpha_items", "beta", ROOT_SIDEBAR_KEY}
    assert data["sidebars"]["alpha_items"][0]["id"] == "alpha/y"


def test_root_sidebar_recomputed_from_registry(tmp_path: Path) -> None:
    """Test the stored root sidebar is never read back."""
    store_file = tmp_path / "sidebars-rust.json"
    store_file.write_text(
        json.dumps(
            {
                "meta": {"schema_version": CURRENT_SCHEMA_VERSION},
                "crates": {"alpha": {"doc_id": "alpha/index", "version": ""}},
                "sidebars": {ROOT_SIDEBAR_KEY: [{"type": "doc", "id": "stale"}]},
            }
        ),
        encoding="utf-8",
    )

    store = SidebarStore(str(store_file), "h")
    store.load()
    store.register_crate("beta", "beta/index")

    assert ROOT_SIDEBAR_KEY not in store.sidebars
    root = store.all_sidebars("https://example.com")[ROOT_SIDEBAR_KEY]
    back, crates = root
    assert back.href == "https://example.com"
    assert isinstance(crates, SidebarCategory)
    assert [doc.id for doc in crates.items] == ["alpha/index", "beta/index"]


def test_schema_mismatch_is_ignored(tmp_path: Path, caplog) -> None:
    """Test a store from another schema version is not loaded."""
    store_file = tmp_path / "sidebars-rust.json"
    store_file.write_text(
        json.dumps(
            {
                "meta": {"schema_version": 0},
                "sidebars": {"old": [{"type": "doc", "id": "old", "label": "old"}]},
            }
        ),
        encoding="utf-8",
    )

    store = SidebarStore(str(store_file), "h")
    store.load()

    assert store.sidebars == {}
    assert "Schema version mismatch" in caplog.text


def test_missing_file_is_empty(tmp_path: Path) -> None:
    """Test loading without a file leaves the store empty."""
    store = SidebarStore(str(tmp_path / "none.json"), "h")
    store.load()

    assert store.sidebars == {}
    assert store.crates == {}


def test_sidebars_to_ts() -> None:
    """Test the TypeScript export carries both sidebars."""
    sidebars = {
        "demo": [{"type": "doc", "id": "demo/index", "label": "demo"}],
        ROOT_SIDEBAR_KEY: [{"type": "category", "label": "Crates", "items": []}],
    }

    ts = sidebars_to_ts(sidebars, ROOT_SIDEBAR_KEY)

    assert "export const rustSidebars: Record<string, any[]> = {" in ts
    assert '"demo/index"' in ts
    assert "export const rootRustSidebar" in ts
    root_json = ts.split("export const rootRustSidebar: SidebarsConfig[string] = ")[1]
    assert json.loads(root_json.rstrip().rstrip(";")) == sidebars[ROOT_SIDEBAR_KEY]
