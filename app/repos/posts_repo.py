import logging
from typing import Any, Dict, List

import httpx

from app.settings import Settings

logger = logging.getLogger(__name__)

PUBLISHED_FILTER = {"where[_status][equals]": "published"}


class CMSRequestError(Exception):
    """Raised when the CMS answers with a non-success status."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code
        self.body = body


class CMSPostsRepo:
    """Read-only access to the Payload CMS posts collection."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings

    async def list_published_posts(self) -> List[dict]:
        return await self._find_posts(
            {"depth": 2, "draft": "false", **PUBLISHED_FILTER}
        )

    async def list_published_slugs(self) -> List[dict]:
        return await self._find_posts(
            {"limit": 100, "depth": 1, "draft": "false", **PUBLISHED_FILTER}
        )

    async def find_by_slug(self, slug: str, draft: bool = False) -> List[dict]:
        params: Dict[str, Any] = {"where[slug][equals]": slug, "depth": 2}
        if draft:
            params["draft"] = "true"
        return await self._find_posts(params)

    async def _find_posts(self, params: Dict[str, Any]) -> List[dict]:
        url = self.settings.posts_api_url
        logger.debug(f"Requesting {url} with {params}")

        response = await self.client.get(
            url, params=params, headers=self.settings.cms_headers
        )
        if response.is_error:
            logger.error(
                f"CMS responded {response.status_code} {response.reason_phrase}: {response.text}"
            )
            raise CMSRequestError(response.status_code, response.text)

        docs = response.json().get("docs") or []
        logger.debug(f"CMS responded with {len(docs)} posts")
        return docs
