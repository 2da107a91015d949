"""Logic for rendering and writing every page of one crate."""

import logging
from pathlib import Path

from rustdoc_docusaurus.crate_docs import CrateDocs
from rustdoc_docusaurus.page_ref import PageRef
from rustdoc_docusaurus.render_item_page import render_item_page
from rustdoc_docusaurus.render_module_page import render_module_page

logger = logging.getLogger(__name__)


def render_page(docs: CrateDocs, page: PageRef) -> str:
    """Render one page of the page map."""
    if page.is_module_page:
        return render_module_page(docs, page)
    return render_item_page(docs, page)


def write_pages(docs: CrateDocs, pages: dict[str, PageRef], out_root: Path) -> int:
    """Write all pages under `<out_root>/<crate>/` and return the count."""
    crate_root = out_root / docs.crate_name
    written = 0
    for path, page in sorted(pages.items()):
        md = render_page(docs, page)
        out_file = crate_root / f"{path}.md"
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(md, encoding="utf-8")
        logger.debug("Wrote %s", out_file)
        written += 1
    return written
