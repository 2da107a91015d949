"""Logic for making rustdoc Markdown safe to embed in MDX pages."""

import re

BLOCK_TAGS = frozenset({"details", "summary", "div", "table", "pre", "blockquote"})
OPEN_TAG_RE = re.compile(r"^<([A-Za-z]+)[\s>]")
TAG_SPLIT_RE = re.compile(r"(<[^>]*>)")
FENCE_PREFIXES = ("```", "~~~")


def sanitize_docs(docs: str | None) -> str:
    """Put block-level HTML tags on their own lines, surrounded by blank lines.

    MDX parses an HTML block as JSX only when it is separated from Markdown;
    indented lines inside such a block are flattened. Code fences are left as is.
    """
    if not docs:
        return ""

    lines = docs.splitlines()
    result: list[str] = []
    in_fence = False
    i = 0
    while i < len(lines):
        line = lines[i]
        stripped = line.strip()
        if stripped.startswith(FENCE_PREFIXES):
            in_fence = not in_fence
        m = None if in_fence else OPEN_TAG_RE.match(stripped)
        if m is None or m.group(1).lower() not in BLOCK_TAGS:
            result.append(line)
            i += 1
            continue

        closing = f"</{m.group(1)}>"
        if result and result[-1]:
            result.append("")
        result.extend(_split_tags(stripped))
        i += 1
        if closing not in stripped:
            while i < len(lines):
                inner = lines[i].strip()
                i += 1
                if closing in inner:
                    result.extend(_split_tags(inner))
                    break
                result.append(inner)
        if i < len(lines) and lines[i].strip():
            result.append("")

    return "\n".join(result)


def _split_tags(line: str) -> list[str]:
    """Split `<details><summary>Title</summary>` into one tag or text per line."""
    return [part for part in TAG_SPLIT_RE.split(line) if part.strip()]


def first_paragraph(docs: str | None) -> str:
    """Return the first paragraph of docs joined onto one line."""
    if not docs:
        return ""
    paragraph = []
    for line in docs.strip().splitlines():
        if not line.strip():
            break
        paragraph.append(line.strip())
    return " ".join(paragraph)
