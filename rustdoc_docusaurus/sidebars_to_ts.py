"""Rendering of the merged sidebars as a TypeScript module for Docusaurus."""

import json
from typing import Any

HEADER = "// Generated by rustdoc-docusaurus. Do not edit by hand.\n"


def sidebars_to_ts(sidebars: dict[str, list[dict[str, Any]]], root_key: str) -> str:
    """Render serialized sidebars as `sidebars-rust.ts` source.

    The file exports every sidebar as `rustSidebars` and the cross-crate root
    sidebar separately as `rootRustSidebar`, so `sidebars.ts` can spread both.
    """
    body = json.dumps(sidebars, indent=2, ensure_ascii=False)
    root = json.dumps(sidebars.get(root_key, []), indent=2, ensure_ascii=False)
    return (
        HEADER
        + "import type {SidebarsConfig} from '@docusaurus/plugin-content-docs';\n\n"
        + f"export const rustSidebars: Record<string, any[]> = {body};\n\n"
        + f"export const rootRustSidebar: SidebarsConfig[string] = {root};\n"
    )
