import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app import dependencies as deps
from app.schemas.blog import PostDetail, PostSummary
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
async def list_posts(
    limit: Optional[int] = Query(None, ge=1),
    tags: Optional[List[str]] = Query(None),
    exclude: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get published posts, newest first."""
    try:
        return await service.list_posts(
            limit=limit, tags=tags, current_post_slug=exclude
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/slugs", response_model=List[str])
async def list_post_slugs(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return await service.list_slugs()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing post slugs: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve slugs")


@router.get("/posts/{slug}", response_model=PostDetail)
async def get_post(
    slug: str,
    preview: bool = False,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = await service.get_post(slug, preview=preview)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
