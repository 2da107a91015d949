"""Data models for Docusaurus sidebar entries."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SidebarDoc:
    """A link to a generated page, by Docusaurus doc id."""

    id: str
    label: str
    class_name: str | None = None
    custom_props: dict[str, Any] | None = None

    def to_dict(self, *, nested: bool = False) -> dict[str, Any]:
        """Convert to the Docusaurus sidebar item shape."""
        data: dict[str, Any] = {"type": "doc", "id": self.id, "label": self.label}
        if self.class_name:
            data["className"] = self.class_name
        if self.custom_props:
            data["customProps"] = self.custom_props
        return data


@dataclass
class SidebarLink:
    """A link to an arbitrary URL."""

    href: str
    label: str
    class_name: str | None = None

    def to_dict(self, *, nested: bool = False) -> dict[str, Any]:
        """Convert to the Docusaurus sidebar item shape."""
        data: dict[str, Any] = {"type": "link", "label": self.label, "href": self.href}
        if self.class_name:
            data["className"] = self.class_name
        return data


@dataclass
class SidebarCategory:
    """A labelled group of sidebar entries, optionally linked to a doc."""

    label: str
    items: list["SidebarNode"] = field(default_factory=list)
    collapsed: bool = False
    link: str | None = None  # doc id

    def to_dict(self, *, nested: bool = False) -> dict[str, Any]:
        """Convert to the Docusaurus sidebar item shape.

        Nested categories are always expanded; only top-level ones honour
        `collapsed`.
        """
        data: dict[str, Any] = {"type": "category", "label": self.label}
        if self.link:
            data["link"] = {"type": "doc", "id": self.link}
        data["items"] = [item.to_dict(nested=True) for item in self.items]
        if nested:
            data["collapsible"] = False
        else:
            data["collapsed"] = self.collapsed
        return data


SidebarNode = SidebarDoc | SidebarLink | SidebarCategory


def sidebar_node_from_dict(data: dict[str, Any]) -> SidebarNode:
    """Rebuild a sidebar node from its serialized form."""
    node_type = data.get("type")
    if node_type == "link":
        return SidebarLink(
            href=str(data.get("href", "")),
            label=str(data.get("label", "")),
            class_name=data.get("className"),
        )
    if node_type == "category":
        link = data.get("link")
        return SidebarCategory(
            label=str(data.get("label", "")),
            items=[sidebar_node_from_dict(item) for item in data.get("items", [])],
            collapsed=bool(data.get("collapsed", False)),
            link=link.get("id") if isinstance(link, dict) else None,
        )
    return SidebarDoc(
        id=str(data.get("id", "")),
        label=str(data.get("label", "")),
        class_name=data.get("className"),
        custom_props=data.get("customProps"),
    )


def sidebar_to_list(nodes: list[SidebarNode]) -> list[dict[str, Any]]:
    """Serialize a top-level sidebar."""
    return [node.to_dict() for node in nodes]
