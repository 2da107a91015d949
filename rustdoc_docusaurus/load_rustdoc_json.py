"""Logic for loading rustdoc JSON output into an ItemStore."""

import json
import logging
from pathlib import Path
from typing import Any

from rustdoc_docusaurus.item_info import ItemInfo, Visibility
from rustdoc_docusaurus.item_kind import ItemKind, kind_from_tag
from rustdoc_docusaurus.item_store import ItemStore
from rustdoc_docusaurus.path_entry import PathEntry
from rustdoc_docusaurus.reexport_edge import ReexportEdge

logger = logging.getLogger(__name__)


class RustdocLoadError(Exception):
    """Raised when a rustdoc JSON file cannot be read or understood."""


def load_rustdoc_json(path: Path) -> ItemStore:
    """Load and parse a rustdoc JSON file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Failed to read file: {path}"
        raise RustdocLoadError(msg) from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"Failed to parse JSON from: {path}"
        raise RustdocLoadError(msg) from e
    if not isinstance(data, dict):
        msg = f"Not a rustdoc JSON document: {path}"
        raise RustdocLoadError(msg)

    store = parse_rustdoc(data, source=path)
    logger.info(
        "Loaded crate: %s (format version: %s)",
        store.crate_name,
        store.format_version,
    )
    return store


def parse_rustdoc(data: dict[str, Any], source: Path | None = None) -> ItemStore:
    """Build an ItemStore from an already-decoded rustdoc JSON document."""
    root_id = data.get("root")
    index = {
        str(item_id): _parse_item(str(item_id), raw)
        for item_id, raw in (data.get("index") or {}).items()
        if isinstance(raw, dict)
    }
    if root_id is None or str(root_id) not in index:
        where = f" in {source}" if source else ""
        msg = f"Root item not found in index{where}"
        raise RustdocLoadError(msg)

    paths: dict[str, PathEntry] = {}
    for item_id, summary in (data.get("paths") or {}).items():
        if not isinstance(summary, dict) or not summary.get("path"):
            continue
        paths[str(item_id)] = PathEntry(
            path=tuple(str(p) for p in summary["path"]),
            crate_id=int(summary.get("crate_id") or 0),
            kind=kind_from_tag(str(summary.get("kind") or "")),
        )

    external_crates = {
        int(crate_id): str(info.get("name"))
        for crate_id, info in (data.get("external_crates") or {}).items()
        if isinstance(info, dict) and info.get("name")
    }

    return ItemStore(
        root_id=str(root_id),
        index=index,
        paths=paths,
        external_crates=external_crates,
        crate_version=data.get("crate_version"),
        format_version=data.get("format_version"),
    )


def _parse_item(item_id: str, raw: dict[str, Any]) -> ItemInfo:
    tag, payload = _inner_of(raw)
    kind = kind_from_tag(tag)

    members: tuple[str, ...] = ()
    reexport = None
    if kind is ItemKind.MODULE:
        members = tuple(str(m) for m in (payload.get("items") or []))
    elif kind is ItemKind.REEXPORT:
        target = payload.get("id")
        reexport = ReexportEdge(
            source=str(payload.get("source") or ""),
            name=str(payload.get("name") or ""),
            target_id=str(target) if target is not None else None,
            is_glob=bool(payload.get("is_glob", payload.get("glob", False))),
        )

    span = raw.get("span")
    span_filename = None
    if isinstance(span, dict) and span.get("filename"):
        span_filename = str(span["filename"])

    links = {
        str(text): str(target)
        for text, target in (raw.get("links") or {}).items()
        if target is not None
    }

    return ItemInfo(
        id=item_id,
        name=raw.get("name"),
        kind=kind,
        visibility=_visibility_of(raw.get("visibility")),
        docs=raw.get("docs"),
        span_filename=span_filename,
        members=members,
        reexport=reexport,
        links=links,
    )


def _inner_of(raw: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Return (kind tag, payload) for both old and new rustdoc layouts."""
    inner = raw.get("inner")
    # Format versions before 25 carry a separate "kind" string.
    kind = raw.get("kind")
    if isinstance(kind, str):
        return kind, inner if isinstance(inner, dict) else {}
    if isinstance(inner, dict) and inner:
        tag, payload = next(iter(inner.items()))
        return str(tag), payload if isinstance(payload, dict) else {}
    if isinstance(inner, str):
        return inner, {}
    return "", {}


def _visibility_of(raw: object) -> Visibility:
    if raw == "public":
        return Visibility.PUBLIC
    return Visibility.RESTRICTED
