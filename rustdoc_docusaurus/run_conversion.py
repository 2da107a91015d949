"""Orchestration logic for converting rustdoc JSON to Docusaurus Markdown."""

import argparse
from pathlib import Path
from typing import Any

from rustdoc_docusaurus.build_page_map import build_page_map
from rustdoc_docusaurus.build_reexported_modules import build_reexported_modules
from rustdoc_docusaurus.build_sidebars import build_all_sidebars
from rustdoc_docusaurus.compute_config_hash import compute_config_hash
from rustdoc_docusaurus.conversion_context import ConfigError, ConversionContext
from rustdoc_docusaurus.crate_docs import CrateDocs
from rustdoc_docusaurus.group_by_module import assign_modules
from rustdoc_docusaurus.item_store import ItemStore
from rustdoc_docusaurus.load_config import (
    apply_cli_overrides,
    context_from_config,
    load_config,
)
from rustdoc_docusaurus.load_rustdoc_json import RustdocLoadError, load_rustdoc_json
from rustdoc_docusaurus.sidebar_item import SidebarNode
from rustdoc_docusaurus.sidebar_key import SidebarKeys, sidebar_prefix
from rustdoc_docusaurus.sidebar_store import ROOT_SIDEBAR_KEY, SidebarStore
from rustdoc_docusaurus.sidebars_to_ts import sidebars_to_ts
from rustdoc_docusaurus.write_pages import write_pages

SIDEBAR_TS_NAME = "sidebars-rust.ts"


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the full conversion pipeline."""
    if not args.input.is_file():
        msg = f"Input file not found: {args.input}"
        raise SystemExit(msg)

    config, ctx = _init_config(args)
    try:
        store = load_rustdoc_json(args.input)
    except RustdocLoadError as e:
        raise SystemExit(str(e)) from e

    crate_name = store.crate_name
    modules, hierarchy = assign_modules(store, include_private=ctx.include_private)
    keys = SidebarKeys(sidebar_prefix(ctx.base_path), crate_name)
    pages = build_page_map(modules, keys)
    sidebars = build_all_sidebars(
        modules, hierarchy, crate_name, store.crate_version, ctx
    )

    if args.dry_run:
        print(
            f"Dry run: {len(pages)} pages and {len(sidebars)} sidebars "
            f"for crate {crate_name}"
        )
        return 0

    out_root = args.output.resolve()
    out_root.mkdir(parents=True, exist_ok=True)

    docs = CrateDocs.create(
        store=store,
        modules=modules,
        hierarchy=hierarchy,
        reexported_modules=build_reexported_modules(
            store, include_private=ctx.include_private
        ),
        keys=keys,
        link_ctx=ctx.link_context(),
    )
    written = write_pages(docs, pages, out_root)

    ts_path = _save_sidebars(store, keys, sidebars, config, ctx, out_root)

    print(f"Generated {written} Markdown pages into: {out_root / crate_name}")
    print(f"Sidebars written to: {ts_path}")
    return 0


def _init_config(args: argparse.Namespace) -> tuple[dict[str, Any], ConversionContext]:
    """Load, merge and validate the configuration before any work starts."""
    try:
        config = apply_cli_overrides(load_config(args.config), args)
        ctx = context_from_config(config)
    except ConfigError as e:
        raise SystemExit(str(e)) from e
    return config, ctx


def _save_sidebars(
    store: ItemStore,
    keys: SidebarKeys,
    sidebars: dict[str, list[SidebarNode]],
    config: dict[str, Any],
    ctx: ConversionContext,
    out_root: Path,
) -> Path:
    """Merge this crate's sidebars into the shared store and export them."""
    output = (config.get("sidebar") or {}).get("output")
    ts_path = Path(output) if output else out_root / SIDEBAR_TS_NAME

    sidebar_store = SidebarStore(
        str(ts_path.with_suffix(".json")), compute_config_hash(config)
    )
    sidebar_store.load()
    sidebar_store.register_crate(
        store.crate_name, keys.doc_id("index"), store.crate_version
    )
    sidebar_store.merge(sidebars)
    sidebar_store.save(ctx.sidebar_root_link, collapsed=ctx.sidebar_collapsed)

    serialized = sidebar_store.to_json(
        ctx.sidebar_root_link, collapsed=ctx.sidebar_collapsed
    )
    ts_path.parent.mkdir(parents=True, exist_ok=True)
    ts_path.write_text(sidebars_to_ts(serialized, ROOT_SIDEBAR_KEY), encoding="utf-8")
    return ts_path
