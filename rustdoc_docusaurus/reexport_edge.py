"""Data model for a `pub use` re-export edge."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReexportEdge:
    """Represents where a re-export item points."""

    source: str  # path as written, e.g. `crate::other::Thing`
    name: str
    target_id: str | None  # None when rustdoc could not resolve the target
    is_glob: bool = False
