import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI

from app.routers import posts
from app.security import get_api_key
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="CMS Posts API", description="Blog posts from Payload CMS")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Using CMS at {settings.CMS_URL}")
    logger.info(f"CMS API key configured: {bool(settings.PAYLOAD_API_KEY)}")
    app.state.http_client = httpx.AsyncClient()

    try:
        yield
    finally:
        await app.state.http_client.aclose()
        logger.info("CMS HTTP client closed")


app.router.lifespan_context = lifespan

app.include_router(posts.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "CMS Posts API is running"}
