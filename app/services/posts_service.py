import logging
from datetime import datetime
from typing import Iterable, List, Optional

import pendulum

from app.schemas.blog import PostDetail, PostSummary
from app.services.post_metadata import (
    build_toc,
    derive_reading_time,
    format_post_date,
    media_reference,
    normalize_authors,
    post_datetime,
    resolve_media_url,
    toc_depth,
)
from app.services.rich_text import convert_rich_text_to_markdown
from app.settings import Settings

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, settings: Settings):
        self.repo = repo
        self.settings = settings

    async def get_post(self, slug: str, preview: bool = False) -> Optional[PostDetail]:
        logger.info(f"Fetching post '{slug}', preview: {preview}")
        try:
            docs = await self.repo.find_by_slug(slug, draft=preview)

            if not docs and not preview:
                logger.info(f"No post found for slug '{slug}'")
                return None

            if not docs:
                logger.info(f"No draft found for '{slug}', trying published version")
                docs = await self.repo.find_by_slug(slug)
                if not docs:
                    logger.info(f"No published version of '{slug}' either")
                    return None

            doc = docs[0]
            logger.debug(
                f"Found post '{doc.get('title')}' with status {doc.get('_status') or 'published'}"
            )
        except Exception as e:
            logger.error(f"Error fetching CMS post by slug '{slug}': {e}")
            return None

        try:
            post = normalize_post(doc, self.settings, include_toc=True)
        except Exception as e:
            logger.error(f"Error processing post '{slug}': {e}")
            return None

        logger.debug(f"Processed post '{post.slug}' ({post.title})")
        return post

    async def list_posts(
        self,
        limit: Optional[int] = None,
        tags: Optional[Iterable[str]] = None,
        current_post_slug: Optional[str] = None,
    ) -> List[PostSummary]:
        try:
            docs = await self.repo.list_published_posts()
        except Exception as e:
            logger.error(f"Error fetching all CMS posts: {e}")
            return []

        now = pendulum.now("UTC")
        dated = []
        for doc in docs:
            if not isinstance(doc, dict):
                logger.warning(f"Skipping malformed post record: {doc!r}")
                continue
            try:
                post = normalize_post(doc, self.settings, now=now)
            except Exception as e:
                logger.warning(f"Skipping post '{doc.get('slug')}': {e}")
                continue
            if current_post_slug is not None and post.slug == current_post_slug:
                continue
            dated.append((post_datetime(doc.get("date"), now), post))

        dated.sort(key=lambda pair: pair[0], reverse=True)
        posts = [post for _, post in dated]

        wanted = set(tags or [])
        if wanted:
            posts = [post for post in posts if wanted.intersection(post.tags)]

        if limit:
            posts = posts[:limit]

        return posts

    async def list_slugs(self) -> List[str]:
        try:
            docs = await self.repo.list_published_slugs()
        except Exception as e:
            logger.error(f"Error fetching CMS post slugs: {e}")
            return []

        slugs = [
            doc["slug"] for doc in docs if isinstance(doc, dict) and doc.get("slug")
        ]
        logger.debug(f"Found {len(slugs)} published slugs")
        return slugs


def normalize_post(
    doc: dict,
    settings: Settings,
    include_toc: bool = False,
    now: Optional[datetime] = None,
) -> PostSummary:
    """
    Build the front-end view of a raw CMS post.

    The list view (``include_toc=False``) defaults missing titles and author
    names to empty strings; the detail view uses readable placeholders and adds
    the table of contents and the raw rich text.
    """
    now = now or pendulum.now("UTC")
    origin = settings.CMS_URL.rstrip("/")
    slug = doc.get("slug") or ""

    markdown = convert_rich_text_to_markdown(doc.get("content"))
    depth = toc_depth(doc.get("toc_depth"))
    moment = post_datetime(doc.get("date"), now)
    path = f"{settings.BLOG_PATH_PREFIX}/{slug}"

    fields = {
        "id": _optional_str(doc.get("id")),
        "slug": slug,
        "title": doc.get("title") or ("Untitled Post" if include_toc else ""),
        "description": doc.get("description") or "",
        "date": str(doc.get("date") or now.isoformat()),
        "formattedDate": format_post_date(moment, settings.DATE_LOCALE),
        "readingTime": derive_reading_time(doc.get("readingTime"), markdown),
        "launchweek": _optional_str(doc.get("launchweek")),
        "authors": normalize_authors(
            doc.get("authors"),
            origin,
            default_name="Unknown Author" if include_toc else "",
        ),
        "toc_depth": depth,
        "thumb": resolve_media_url(media_reference(doc.get("thumb")), origin),
        "image": resolve_media_url(media_reference(doc.get("image")), origin),
        "url": path,
        "path": path,
        "isCMS": True,
        "tags": list(doc.get("tags") or []),
        "content": markdown,
        "createdAt": _optional_str(doc.get("createdAt")),
        "updatedAt": _optional_str(doc.get("updatedAt")),
    }

    if not include_toc:
        return PostSummary(**fields)

    return PostDetail(
        **fields,
        source=markdown,
        richContent=doc.get("content"),
        toc=build_toc(markdown, depth),
    )


def _optional_str(value) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)
