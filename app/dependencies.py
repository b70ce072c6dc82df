import httpx
from fastapi import Depends, Request

from app.repos.posts_repo import CMSPostsRepo
from app.services.posts_service import PostsService
from app.settings import Settings, settings


def get_settings() -> Settings:
    return settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_posts_repo(
    client=Depends(get_http_client),
    current_settings: Settings = Depends(get_settings),
):
    return CMSPostsRepo(client, current_settings)


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(repo=repo, settings=current_settings)
