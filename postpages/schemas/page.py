from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from postpages.schemas.post import PostRecord


class SeriesPosition(BaseModel):
    slug: str
    title: str
    display_title: str
    order: float
    part: int
    is_current: bool = False


class Suggestion(BaseModel):
    slug: str
    title: str
    score: int


class PostPage(BaseModel):
    post: PostRecord
    series_posts: List[SeriesPosition] = Field(default_factory=list)
    suggestions: List[Suggestion] = Field(default_factory=list)
    other_langs: List[str] = Field(default_factory=list)
    source_url: Optional[str] = None


class PagePath(BaseModel):
    lang: str
    slug: str


class BuildManifest(BaseModel):
    built_at: datetime
    paths: List[PagePath] = Field(default_factory=list)
