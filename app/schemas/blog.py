from typing import Any, List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Author(BaseModel):
    author: str = ""
    author_id: str = ""
    position: str = ""
    author_url: str = "#"
    author_image_url: Optional[str] = None
    username: str = ""


class TocEntry(BaseModel):
    content: str
    slug: str
    lvl: int
    i: int = 0
    seen: int = 0


class TableOfContents(BaseModel):
    content: str = ""
    json_: List[TocEntry] = Field(default_factory=list, alias="json")

    model_config = ConfigDict(populate_by_name=True)


class PostSummary(BaseModel):
    id: Optional[str] = None
    slug: str
    title: str
    description: str = ""
    date: str
    formattedDate: str
    readingTime: str
    launchweek: Optional[str] = None
    authors: List[Author] = Field(default_factory=list)
    toc_depth: int = 2
    thumb: Optional[str] = None
    image: Optional[str] = None
    url: str
    path: str
    isCMS: bool = True
    tags: List[str] = Field(default_factory=list)
    content: str = ""
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None


class PostDetail(PostSummary):
    source: str = ""
    richContent: Any = None
    toc: TableOfContents = Field(default_factory=TableOfContents)
