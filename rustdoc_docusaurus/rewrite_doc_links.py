"""Logic for rewriting rustdoc intra-doc links to resolved destinations."""

import re
from collections.abc import Callable

INLINE_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")  # [text](Target)
REFERENCE_LINK_RE = re.compile(r"\[([^\]]+)\]\[([^\]]+)\]")  # [text][Target]
SHORTCUT_LINK_RE = re.compile(r"(?<![\]\\])\[([^\[\]]+)\](?![\(\[:])")  # [Target]
FENCE_RE = re.compile(r"^(?:```|~~~).*?^(?:```|~~~)[^\n]*$", re.MULTILINE | re.DOTALL)

Resolver = Callable[[str, str], str | None]  # (link text, item id) -> destination


def rewrite_doc_links(text: str, links: dict[str, str], resolve: Resolver) -> str:
    """Rewrite intra-doc links in Markdown; unresolvable ones become plain text.

    links maps the link target exactly as written in the docs to an item id,
    as rustdoc records it. Fenced code blocks are not touched.
    """
    if not text:
        return ""
    if not links:
        return text

    out = []
    pos = 0
    for m in FENCE_RE.finditer(text):
        out.append(_rewrite_prose(text[pos : m.start()], links, resolve))
        out.append(m.group(0))
        pos = m.end()
    out.append(_rewrite_prose(text[pos:], links, resolve))
    return "".join(out)


def _rewrite_prose(text: str, links: dict[str, str], resolve: Resolver) -> str:
    def destination(target: str) -> str | None:
        item_id = links.get(target)
        if item_id is None:
            return None
        return resolve(target.strip("`"), item_id)

    def repl_labelled(m: re.Match) -> str:
        label, target = m.group(1), m.group(2)
        if target not in links:
            return m.group(0)
        url = destination(target)
        return f"[{label}]({url})" if url else label

    def repl_shortcut(m: re.Match) -> str:
        target = m.group(1)
        if target not in links:
            return m.group(0)
        url = destination(target)
        return f"[{target}]({url})" if url else target

    text = INLINE_LINK_RE.sub(repl_labelled, text)
    text = REFERENCE_LINK_RE.sub(repl_labelled, text)
    return SHORTCUT_LINK_RE.sub(repl_shortcut, text)
