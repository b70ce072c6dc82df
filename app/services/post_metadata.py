from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import pendulum

from app.schemas.blog import Author, TableOfContents
from app.services.toc import generate_toc
from app.utils import calculate_reading_time

DEFAULT_TOC_DEPTH = 2

# locale -> (pendulum format, pendulum locale)
DATE_FORMATS = {
    "en-IN": ("D MMMM YYYY", "en"),
    "en-GB": ("D MMMM YYYY", "en"),
    "en-US": ("MMMM D, YYYY", "en"),
}


def resolve_media_url(reference: Optional[str], origin: str) -> Optional[str]:
    """Turn a CMS media path into an absolute URL; absolute URLs pass through."""
    if not reference:
        return None
    if "http" in reference:
        return reference
    return f"{origin}{reference}"


def media_reference(value: Any) -> Optional[str]:
    """Pull the url out of an upload relation, which may be a dict or a bare string."""
    if isinstance(value, dict):
        return value.get("url") or None
    if isinstance(value, str):
        return value or None
    return None


def parse_post_date(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return pendulum.instance(value)
    if not value:
        return None
    try:
        parsed = pendulum.parse(str(value), strict=False)
    except (ValueError, TypeError, OverflowError):
        return None
    if isinstance(parsed, pendulum.DateTime):
        return parsed
    if isinstance(parsed, pendulum.Date):
        # date-only strings come back as pendulum.Date
        return pendulum.datetime(parsed.year, parsed.month, parsed.day)
    return None


def post_datetime(value: Any, now: Optional[datetime] = None) -> datetime:
    parsed = parse_post_date(value)
    if parsed is not None:
        return parsed
    return now or pendulum.now("UTC")


def format_post_date(moment: datetime, locale: str = "en-IN") -> str:
    """Long month name, numeric day and year, e.g. "1 March 2024" for en-IN."""
    fmt, pendulum_locale = DATE_FORMATS.get(locale, DATE_FORMATS["en-IN"])
    return pendulum.instance(moment).format(fmt, locale=pendulum_locale)


def derive_reading_time(explicit: Union[str, int, float, None], markdown: str) -> str:
    if explicit:
        if isinstance(explicit, str):
            return explicit
        return f"{explicit:g} min read"
    return calculate_reading_time(markdown)


def toc_depth(value: Any) -> int:
    try:
        depth = int(value)
    except (TypeError, ValueError):
        return DEFAULT_TOC_DEPTH
    return depth if depth > 0 else DEFAULT_TOC_DEPTH


def build_toc(markdown: str, depth: int) -> TableOfContents:
    toc = generate_toc(markdown, maxdepth=depth)
    # anchors keep an encoded "#" that the front end cannot resolve
    return TableOfContents(content=toc.content.replace("%23", ""), json=toc.json_)


def normalize_authors(
    raw_authors: Optional[List[Dict[str, Any]]],
    origin: str,
    default_name: str = "",
) -> List[Author]:
    authors = []
    for raw in raw_authors or []:
        if not isinstance(raw, dict):
            continue
        authors.append(
            Author(
                author=raw.get("author") or default_name,
                author_id=str(raw.get("author_id") or ""),
                position=raw.get("position") or "",
                author_url=raw.get("author_url") or "#",
                author_image_url=resolve_media_url(
                    media_reference(raw.get("author_image_url")), origin
                ),
                username=raw.get("username") or "",
            )
        )
    return authors
