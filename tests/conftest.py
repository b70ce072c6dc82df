import pytest

from app.settings import Settings


def rich_text(*blocks):
    return {"root": {"type": "root", "children": list(blocks)}}


def text_node(text: str) -> dict:
    return {"type": "text", "text": text}


def heading(text: str, tag: str = "h2") -> dict:
    return {"type": "heading", "tag": tag, "children": [text_node(text)]}


def paragraph(*texts: str) -> dict:
    return {"type": "paragraph", "children": [text_node(t) for t in texts]}


def make_doc(slug: str, **overrides) -> dict:
    doc = {
        "id": f"id-{slug}",
        "title": slug.replace("-", " ").title(),
        "slug": slug,
        "description": f"About {slug}",
        "content": rich_text(heading("Intro"), paragraph("Some words here.")),
        "date": "2024-01-01T00:00:00.000Z",
        "tags": [],
        "createdAt": "2023-12-30T10:00:00.000Z",
        "updatedAt": "2023-12-31T10:00:00.000Z",
        "_status": "published",
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def cms_settings() -> Settings:
    return Settings(CMS_URL="http://cms.example", PAYLOAD_API_KEY="")


class FakeRepo:
    """
    In-memory stand-in for CMSPostsRepo.
    Drafts and published docs are kept apart so preview lookups can be tested.
    """

    def __init__(self, published=None, drafts=None, error: Exception | None = None):
        self.published = list(published or [])
        self.drafts = list(drafts or [])
        self.error = error
        self.calls = []

    async def list_published_posts(self):
        self.calls.append("list_published_posts")
        self._maybe_raise()
        return list(self.published)

    async def list_published_slugs(self):
        self.calls.append("list_published_slugs")
        self._maybe_raise()
        return list(self.published)

    async def find_by_slug(self, slug: str, draft: bool = False):
        self.calls.append(("find_by_slug", slug, draft))
        self._maybe_raise()
        source = self.drafts if draft else self.published
        return [doc for doc in source if doc.get("slug") == slug]

    def _maybe_raise(self):
        if self.error is not None:
            raise self.error


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None, slugs=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._slugs = slugs or []
        self.calls = []

    async def list_posts(self, limit=None, tags=None, current_post_slug=None):
        self.calls.append(("list_posts", limit, tags, current_post_slug))
        return self._list_posts_return

    async def get_post(self, slug: str, preview: bool = False):
        self.calls.append(("get_post", slug, preview))
        return self._get_post_return

    async def list_slugs(self):
        return self._slugs
