import re
import urllib.parse
from typing import Dict, List

from app.schemas.blog import TableOfContents, TocEntry

HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
FENCE_PATTERN = re.compile(r"^[ \t]*(```|~~~)")
LINK_PATTERN = re.compile(r"\[([^\]]*)\]\([^)]*\)")
# Punctuation dropped from anchors; "#" survives and gets percent-encoded.
ANCHOR_STRIP_PATTERN = re.compile(r"[/?!:\[\]`.,()*\"';{}+=<>~$|\\^&@]")


def generate_toc(markdown: str, maxdepth: int = 2) -> TableOfContents:
    """
    Build a linked outline of the markdown headings up to ``maxdepth``.

    Returns the outline both as a markdown bullet list and as structured
    entries. Headings inside fenced code blocks are ignored.
    """
    entries = _collect_headings(markdown or "", maxdepth)
    if not entries:
        return TableOfContents(content="", json=[])

    top_level = min(entry.lvl for entry in entries)
    lines = [
        f"{'  ' * (entry.lvl - top_level)}- [{entry.content}](#{entry.slug})"
        for entry in entries
    ]
    return TableOfContents(content="\n".join(lines), json=entries)


def slugify(text: str) -> str:
    slug = text.strip().lower()
    slug = re.sub(r"<[^>]*>", "", slug)
    slug = ANCHOR_STRIP_PATTERN.sub("", slug)
    slug = re.sub(r"\s", "-", slug)
    return urllib.parse.quote(slug, safe="-_")


def _collect_headings(markdown: str, maxdepth: int) -> List[TocEntry]:
    entries: List[TocEntry] = []
    seen: Dict[str, int] = {}
    in_fence = False

    for line in markdown.splitlines():
        if FENCE_PATTERN.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        match = HEADING_PATTERN.match(line)
        if not match:
            continue

        level = len(match.group(1))
        if level > maxdepth:
            continue

        text = LINK_PATTERN.sub(r"\1", match.group(2)).strip()
        base_slug = slugify(text)
        count = seen.get(base_slug, 0)
        seen[base_slug] = count + 1
        slug = f"{base_slug}-{count}" if count else base_slug

        entries.append(
            TocEntry(content=text, slug=slug, lvl=level, i=len(entries), seen=count)
        )

    return entries
