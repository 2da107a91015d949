"""Per-run conversion settings and their up-front validation."""

import re
from dataclasses import dataclass

from rustdoc_docusaurus.link_context import LinkContext
from rustdoc_docusaurus.std_links import DEFAULT_INTERNAL_MODULES, DEFAULT_STD_CRATES

CRATE_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class ConfigError(ValueError):
    """Raised when conversion settings are malformed."""


@dataclass(frozen=True)
class ConversionContext:
    """Settings for converting one crate, passed explicitly to every stage."""

    include_private: bool = False
    base_path: str = ""
    workspace_crates: tuple[str, ...] = ()
    sidebar_collapsed: bool = False
    sidebar_root_link: str | None = None
    internal_modules: tuple[str, ...] = DEFAULT_INTERNAL_MODULES
    std_crates: tuple[str, ...] = DEFAULT_STD_CRATES

    def validate(self) -> None:
        """Reject malformed settings before any conversion work starts."""
        for name in self.workspace_crates:
            if not isinstance(name, str) or not CRATE_NAME_RE.match(name):
                msg = f"Invalid workspace crate name: {name!r}"
                raise ConfigError(msg)
        for segment in self.internal_modules:
            if not isinstance(segment, str) or not segment:
                msg = f"Invalid internal module segment: {segment!r}"
                raise ConfigError(msg)

    def link_context(self) -> LinkContext:
        """Build the read-only context for the link resolver."""
        return LinkContext.create(
            base_path=self.base_path,
            workspace_crates=self.workspace_crates,
            internal_modules=self.internal_modules,
            std_crates=self.std_crates,
        )
