"""Read-only configuration threaded through every link resolution."""

from dataclasses import dataclass

from rustdoc_docusaurus.std_links import DEFAULT_INTERNAL_MODULES, DEFAULT_STD_CRATES


def normalize_crate_name(name: str) -> str:
    """Treat `foo-bar` and `foo_bar` as the same crate."""
    return name.strip().replace("-", "_")


@dataclass(frozen=True)
class LinkContext:
    """Configuration for one conversion run's link resolver."""

    base_path: str = ""
    workspace_crates: frozenset[str] = frozenset()  # normalized names
    internal_modules: tuple[str, ...] = DEFAULT_INTERNAL_MODULES
    std_crates: tuple[str, ...] = DEFAULT_STD_CRATES

    @classmethod
    def create(
        cls,
        base_path: str = "",
        workspace_crates: list[str] | tuple[str, ...] = (),
        internal_modules: list[str] | tuple[str, ...] = DEFAULT_INTERNAL_MODULES,
        std_crates: list[str] | tuple[str, ...] = DEFAULT_STD_CRATES,
    ) -> "LinkContext":
        """Build a context, normalizing workspace crate names."""
        base_path = base_path.strip("/")
        return cls(
            base_path=f"/{base_path}" if base_path else "",
            workspace_crates=frozenset(
                normalize_crate_name(c) for c in workspace_crates
            ),
            internal_modules=tuple(internal_modules),
            std_crates=tuple(std_crates),
        )

    def is_workspace_crate(self, crate_name: str) -> bool:
        """Check whether a crate is a sibling converted in the same build."""
        return normalize_crate_name(crate_name) in self.workspace_crates

    def public_module_parts(self, parts: list[str] | tuple[str, ...]) -> list[str]:
        """Drop implementation-detail segments from a module path."""
        return [p for p in parts if p not in self.internal_modules]
