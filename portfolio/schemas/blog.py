from typing import Dict, Optional

from pydantic import BaseModel, Field


class Post(BaseModel):
    slug: str
    metadata: Dict[str, str] = Field(default_factory=dict)
    content: str = ""  # Markup body without the front matter


class PostSummary(BaseModel):
    slug: str
    title: str
    summary: Optional[str] = None
    publishedAt: Optional[str] = None
    readingTime: Optional[str] = None
    metadata: Dict[str, str] = Field(default_factory=dict)


class PostDetail(PostSummary):
    content: str
