"""Rendering of the YAML front matter block of a Docusaurus page."""

from typing import Any

import yaml


def render_frontmatter(title: str, sidebar_label: str, displayed_sidebar: str) -> str:
    """Render front matter selecting the page's title and sidebar."""
    data: dict[str, Any] = {
        "title": title,
        "sidebar_label": sidebar_label,
        "displayed_sidebar": displayed_sidebar,
    }
    body = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return f"---\n{body}---\n"
