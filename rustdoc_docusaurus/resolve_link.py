"""Logic for turning a type reference into an internal route or external URL."""

import logging

from rustdoc_docusaurus.build_module_hierarchy import PATH_SEP
from rustdoc_docusaurus.item_info import ItemInfo
from rustdoc_docusaurus.item_kind import ItemKind, file_prefix, url_tag
from rustdoc_docusaurus.item_store import ItemStore
from rustdoc_docusaurus.link_context import LinkContext, normalize_crate_name
from rustdoc_docusaurus.path_entry import PathEntry
from rustdoc_docusaurus.resolve_reexport_chain import (
    external_reexport_target,
    resolve_reexport_chain,
)
from rustdoc_docusaurus.std_links import (
    CANONICAL_REDIRECTS,
    COMMON_STD_TYPES,
    DOCS_RS_ROOT,
    STD_DOCS_ROOT,
    STD_ENUM_NAMES,
)

logger = logging.getLogger(__name__)

MAX_LINK_DEPTH = 10
CRATE_PLACEHOLDER = "$crate"


def resolve_link(
    full_path: str,
    item_id: str,
    store: ItemStore,
    ctx: LinkContext,
    current_item: ItemInfo | None = None,
    depth: int = 0,
) -> str | None:
    """Resolve a reference to a link destination, or None for plain text.

    full_path is the path as written at the reference site; the path table
    wins whenever it has an entry for item_id.
    """
    if depth >= MAX_LINK_DEPTH:
        logger.debug("Link depth exceeded for %s", full_path)
        return None

    entry = store.path_of(item_id)
    if entry is not None and depth == 0:
        path = entry.joined()
    else:
        path = _expand_crate_placeholder(full_path, store, current_item)
    segments = [s for s in path.split(PATH_SEP) if s]
    if not segments:
        return None

    is_local = entry.is_local if entry is not None else item_id in store.index

    if is_local:
        item = store.get(item_id)
        if item is not None:
            if item.kind is ItemKind.REEXPORT:
                return _resolve_local_reexport(
                    item_id, store, ctx, current_item, depth
                )
            return _local_link(segments, item, entry, store, ctx)
        # Local per the path table but not documented here; treat as external.

    if len(segments) == 1:
        return _single_segment_link(
            segments[0], item_id, store, ctx, current_item, depth
        )

    crate = segments[0]
    if crate in ctx.std_crates:
        return _std_link(segments, entry, ctx)

    if entry is not None:
        crate = store.crate_name_of(entry)
    if ctx.is_workspace_crate(crate):
        return _sibling_link(segments, normalize_crate_name(crate), entry, ctx)
    return _docs_rs_link(segments, crate, entry, ctx)


def _expand_crate_placeholder(
    full_path: str, store: ItemStore, current_item: ItemInfo | None
) -> str:
    if CRATE_PLACEHOLDER not in full_path:
        return full_path
    crate = store.crate_name
    if current_item is not None:
        current_entry = store.path_of(current_item.id)
        if current_entry is not None:
            crate = store.crate_name_of(current_entry)
    return full_path.replace(CRATE_PLACEHOLDER, crate)


def _resolve_local_reexport(
    item_id: str,
    store: ItemStore,
    ctx: LinkContext,
    current_item: ItemInfo | None,
    depth: int,
) -> str | None:
    resolved = resolve_reexport_chain(store, item_id)
    if resolved is None:
        external_id = external_reexport_target(store, item_id)
        external_entry = store.path_of(external_id) if external_id else None
        if external_id is None or external_entry is None:
            logger.debug("Unresolved re-export chain from %s", item_id)
            return None
        return resolve_link(
            external_entry.joined(), external_id, store, ctx, current_item, depth + 1
        )
    target_id, target = resolved
    target_entry = store.path_of(target_id)
    if target_entry is not None:
        target_path = target_entry.joined()
    else:
        target_path = target.name or ""
    return resolve_link(target_path, target_id, store, ctx, current_item, depth + 1)


def _local_link(
    segments: list[str],
    item: ItemInfo,
    entry: PathEntry | None,
    store: ItemStore,
    ctx: LinkContext,
) -> str:
    crate = segments[0] if len(segments) > 1 else store.crate_name
    name = segments[-1]

    if item.kind is ItemKind.MODULE and len(segments) == 1:
        return f"{ctx.base_path}/{crate}"

    module_path = _module_path_of(item, entry)
    if module_path is None:
        # Nothing better than the crate root.
        return f"{ctx.base_path}/{crate}"

    prefix = file_prefix(item.kind)
    if module_path:
        return f"{ctx.base_path}/{crate}/{module_path}/{prefix}{name}"
    return f"{ctx.base_path}/{crate}/{prefix}{name}"


def _module_path_of(item: ItemInfo, entry: PathEntry | None) -> str | None:
    """Return the `/`-joined module path of an item, "" for the crate root."""
    if entry is not None:
        return "/".join(entry.path[1:-1])
    return module_path_from_span(item.span_filename)


def module_path_from_span(span_filename: str | None) -> str | None:
    """Guess a module path from a source file name like `…/src/net/tcp.rs`."""
    if not span_filename:
        return None
    src_idx = span_filename.rfind("/src/")
    if src_idx == -1:
        return None
    after_src = span_filename[src_idx + len("/src/") :]
    rs_idx = after_src.rfind(".rs")
    if rs_idx == -1:
        return None
    module_path = after_src[:rs_idx]
    if module_path in ("lib", "main"):
        return ""
    if module_path.endswith("/mod"):
        module_path = module_path[: -len("/mod")]
    return module_path


def _std_link(
    segments: list[str], entry: PathEntry | None, ctx: LinkContext
) -> str:
    redirect = CANONICAL_REDIRECTS.get(PATH_SEP.join(segments))
    if redirect:
        return redirect

    crate, name = segments[0], segments[-1]
    modules = ctx.public_module_parts(segments[1:-1])
    tag = url_tag(entry.kind) if entry is not None else None
    if tag is None:
        tag = _guess_std_tag(name)

    parts = [STD_DOCS_ROOT, crate, *modules, f"{tag}.{name}.html"]
    return "/".join(p for p in parts if p)


def _guess_std_tag(name: str) -> str:
    if name.endswith("Error") or name in STD_ENUM_NAMES:
        return "enum"
    return "struct"


def _sibling_link(
    segments: list[str], crate: str, entry: PathEntry | None, ctx: LinkContext
) -> str:
    name = segments[-1]
    modules = ctx.public_module_parts(segments[1:-1])
    kind = entry.kind if entry is not None else ItemKind.STRUCT
    if kind is ItemKind.MODULE:
        prefix = ""
    else:
        prefix = file_prefix(kind) or file_prefix(ItemKind.STRUCT)
    parts = [ctx.base_path, crate, *modules, f"{prefix}{name}"]
    return "/".join(parts)


def _docs_rs_link(
    segments: list[str], crate: str, entry: PathEntry | None, ctx: LinkContext
) -> str:
    name = segments[-1]
    modules = ctx.public_module_parts(segments[1:-1])
    tag = url_tag(entry.kind) if entry is not None else None
    page = f"{tag or 'struct'}.{name}.html"
    return "/".join([DOCS_RS_ROOT, crate, "latest", crate, *modules, page])


def _single_segment_link(
    name: str,
    item_id: str,
    store: ItemStore,
    ctx: LinkContext,
    current_item: ItemInfo | None,
    depth: int,
) -> str | None:
    entry = store.path_of(item_id)
    if entry is not None and entry.joined() != name:
        return resolve_link(
            entry.joined(), item_id, store, ctx, current_item, depth + 1
        )
    return COMMON_STD_TYPES.get(name)
