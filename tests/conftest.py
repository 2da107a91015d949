"""Shared fixtures for building small rustdoc JSON documents."""

from typing import Any

import pytest

from rustdoc_docusaurus.item_store import ItemStore
from rustdoc_docusaurus.load_rustdoc_json import parse_rustdoc


class CrateBuilder:
    """Builds a rustdoc JSON document one item at a time."""

    def __init__(self, name: str = "demo", version: str | None = "0.1.0") -> None:
        self.name = name
        self.version = version
        self.index: dict[str, dict[str, Any]] = {}
        self.paths: dict[str, dict[str, Any]] = {}
        self.external_crates: dict[str, dict[str, Any]] = {}
        self._module_paths: dict[int, list[str]] = {}
        self._next_id = 0
        self.root = self.module(name)

    def _new_id(self) -> int:
        item_id = self._next_id
        self._next_id += 1
        return item_id

    def _add_member(self, parent: int | None, item_id: int) -> None:
        if parent is not None:
            self.index[str(parent)]["inner"]["module"]["items"].append(item_id)

    def module(
        self,
        name: str,
        parent: int | None = None,
        *,
        public: bool = True,
        docs: str | None = None,
    ) -> int:
        """Add a module under parent (or the crate root when parent is None)."""
        item_id = self._new_id()
        path = [*self._module_paths[parent], name] if parent is not None else [name]
        self._module_paths[item_id] = path
        self.index[str(item_id)] = {
            "id": item_id,
            "name": name,
            "visibility": "public" if public else "crate",
            "docs": docs,
            "links": {},
            "inner": {"module": {"is_crate": parent is None, "items": []}},
        }
        self.paths[str(item_id)] = {"crate_id": 0, "path": path, "kind": "module"}
        self._add_member(parent, item_id)
        return item_id

    def item(
        self,
        kind: str,
        name: str,
        parent: int,
        *,
        public: bool = True,
        docs: str | None = None,
        links: dict[str, int] | None = None,
        with_path: bool = True,
        span: str | None = None,
    ) -> int:
        """Add a non-module item of the given rustdoc kind tag."""
        item_id = self._new_id()
        raw: dict[str, Any] = {
            "id": item_id,
            "name": name,
            "visibility": "public" if public else "default",
            "docs": docs,
            "links": links or {},
            "inner": {kind: {}},
        }
        if span:
            raw["span"] = {"filename": span, "begin": [1, 0], "end": [2, 0]}
        self.index[str(item_id)] = raw
        if with_path:
            self.paths[str(item_id)] = {
                "crate_id": 0,
                "path": [*self._module_paths[parent], name],
                "kind": kind,
            }
        self._add_member(parent, item_id)
        return item_id

    def reexport(
        self,
        parent: int,
        source: str,
        name: str,
        target: int | None,
        *,
        glob: bool = False,
        public: bool = True,
    ) -> int:
        """Add a `pub use source;` item to parent."""
        item_id = self._new_id()
        self.index[str(item_id)] = {
            "id": item_id,
            "name": None,
            "visibility": "public" if public else "default",
            "docs": None,
            "links": {},
            "inner": {
                "use": {"source": source, "name": name, "id": target, "is_glob": glob}
            },
        }
        self._add_member(parent, item_id)
        return item_id

    def external(
        self, crate_id: int, crate_name: str, path: list[str], kind: str
    ) -> int:
        """Add a path-table entry for an item defined in another crate."""
        item_id = self._new_id()
        self.external_crates[str(crate_id)] = {"name": crate_name}
        self.paths[str(item_id)] = {"crate_id": crate_id, "path": path, "kind": kind}
        return item_id

    def to_json(self) -> dict[str, Any]:
        return {
            "root": self.root,
            "crate_version": self.version,
            "format_version": 39,
            "index": self.index,
            "paths": self.paths,
            "external_crates": self.external_crates,
        }

    def store(self) -> ItemStore:
        return parse_rustdoc(self.to_json())


@pytest.fixture
def make_crate() -> type[CrateBuilder]:
    """Return the builder class so tests can choose the crate name."""
    return CrateBuilder


@pytest.fixture
def crate() -> CrateBuilder:
    """Return a builder for an empty crate named `demo`."""
    return CrateBuilder()
