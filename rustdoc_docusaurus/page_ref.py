"""Data model for one output page."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageRef:
    """Represents a page to render: a module overview or a leaf item page."""

    module_key: str
    item_id: str | None  # None for module overview pages
    sidebar_key: str  # value of `displayed_sidebar`

    @property
    def is_module_page(self) -> bool:
        return self.item_id is None
