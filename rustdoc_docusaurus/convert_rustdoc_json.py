"""Convert rustdoc JSON output to Docusaurus-compatible Markdown.

This module reads the JSON written by `cargo rustdoc -- --output-format json`
and generates one Markdown page per module and per public item, plus the
sidebars Docusaurus needs to browse them. Several crates of one workspace can
be converted into the same output; their sidebars are merged.
"""

import argparse
import logging
from pathlib import Path

from rustdoc_docusaurus.run_conversion import run_conversion


def main() -> int:
    """Run the conversion process."""
    ap = argparse.ArgumentParser(
        description="Convert rustdoc JSON to Docusaurus Markdown and sidebars.",
    )
    ap.add_argument(
        "input",
        type=Path,
        help="rustdoc JSON file (e.g. target/doc/my_crate.json)",
    )
    ap.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("target/doc-md"),
        help="Output directory (default: target/doc-md)",
    )
    ap.add_argument(
        "--include-private",
        action="store_true",
        help="Include non-public items",
    )
    ap.add_argument(
        "--base-path",
        default=None,
        help="Route prefix of the generated docs in the site (e.g. /docs/api)",
    )
    ap.add_argument(
        "--workspace-crates",
        default=None,
        help="Comma-separated crates converted in the same build; "
        "links to them stay inside the site",
    )
    ap.add_argument(
        "--sidebarconfig-collapsed",
        action="store_true",
        help="Collapse the crate categories in the sidebars",
    )
    ap.add_argument(
        "--sidebar-output",
        type=Path,
        default=None,
        help="Path of the generated sidebars TypeScript file "
        "(default: <output>/sidebars-rust.ts)",
    )
    ap.add_argument(
        "--sidebar-root-link",
        default=None,
        help="URL of the 'Go back' link at the top of crate sidebars",
    )
    ap.add_argument(
        "--config",
        default=None,
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve everything and report counts without writing files",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
