"""Logic for loading conversion settings from YAML and the command line."""

import argparse
import copy
from pathlib import Path
from typing import Any

import yaml

from rustdoc_docusaurus.conversion_context import ConfigError, ConversionContext
from rustdoc_docusaurus.deep_merge import deep_merge
from rustdoc_docusaurus.std_links import DEFAULT_INTERNAL_MODULES, DEFAULT_STD_CRATES

DEFAULT_CONFIG: dict[str, Any] = {
    "base_path": "",
    "include_private": False,
    "workspace_crates": [],
    "sidebar": {
        "collapsed": False,
        "root_link": None,
        "output": None,
    },
    "links": {
        "std_crates": list(DEFAULT_STD_CRATES),
        "internal_modules": list(DEFAULT_INTERNAL_MODULES),
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {p}"
            raise ConfigError(msg)
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(user_config, dict):
            msg = f"Config file must contain a mapping: {p}"
            raise ConfigError(msg)
        config = deep_merge(config, user_config)
    return config


def apply_cli_overrides(
    config: dict[str, Any], args: argparse.Namespace
) -> dict[str, Any]:
    """Overlay command-line flags that were given onto the configuration."""
    overrides: dict[str, Any] = {}
    if getattr(args, "base_path", None) is not None:
        overrides["base_path"] = args.base_path
    if getattr(args, "include_private", False):
        overrides["include_private"] = True
    if getattr(args, "workspace_crates", None):
        overrides["workspace_crates"] = parse_crate_list(args.workspace_crates)
    sidebar: dict[str, Any] = {}
    if getattr(args, "sidebarconfig_collapsed", False):
        sidebar["collapsed"] = True
    if getattr(args, "sidebar_root_link", None):
        sidebar["root_link"] = args.sidebar_root_link
    if getattr(args, "sidebar_output", None):
        sidebar["output"] = str(args.sidebar_output)
    if sidebar:
        overrides["sidebar"] = sidebar
    return deep_merge(config, overrides)


def parse_crate_list(value: str) -> list[str]:
    """Split a comma-separated crate list, ignoring blanks."""
    return [name.strip() for name in value.split(",") if name.strip()]


def context_from_config(config: dict[str, Any]) -> ConversionContext:
    """Build a validated ConversionContext from a merged configuration."""
    sidebar = config.get("sidebar") or {}
    links = config.get("links") or {}
    workspace_crates = config.get("workspace_crates") or []
    if not isinstance(workspace_crates, list):
        msg = "workspace_crates must be a list of crate names"
        raise ConfigError(msg)
    ctx = ConversionContext(
        include_private=bool(config.get("include_private", False)),
        base_path=str(config.get("base_path") or ""),
        workspace_crates=tuple(workspace_crates),
        sidebar_collapsed=bool(sidebar.get("collapsed", False)),
        sidebar_root_link=sidebar.get("root_link"),
        internal_modules=tuple(links.get("internal_modules", DEFAULT_INTERNAL_MODULES)),
        std_crates=tuple(links.get("std_crates", DEFAULT_STD_CRATES)),
    )
    ctx.validate()
    return ctx
