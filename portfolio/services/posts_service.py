import datetime
import logging
from typing import List, Optional

from portfolio.schemas.blog import Post, PostDetail, PostSummary
from portfolio.services.content_parser import parse_content
from portfolio.services.content_scanner import scan_content_dir
from portfolio.utils import calculate_reading_time, derive_title

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, content_dir, extension: str = ".mdx"):
        self.content_dir = content_dir
        self.extension = extension

    def list_all(self) -> List[Post]:
        """All posts, newest ``publishedAt`` first.

        Dates are compared as plain strings, so a malformed date sorts
        wherever its characters put it. Posts without a date come last.
        """
        posts = [
            build_post(slug, raw)
            for slug, raw in scan_content_dir(self.content_dir, self.extension)
        ]
        posts.sort(key=lambda p: p.metadata.get("publishedAt", ""), reverse=True)
        return posts

    def find_by_slug(self, slug: str) -> Optional[Post]:
        return next((post for post in self.list_all() if post.slug == slug), None)

    def list_posts(self) -> List[PostSummary]:
        return [PostSummary(**_summary_fields(post)) for post in self.list_all()]

    def get_post(self, slug: str) -> Optional[PostDetail]:
        post = self.find_by_slug(slug)
        if not post:
            return None
        return PostDetail(**_summary_fields(post), content=post.content)


def build_post(slug: str, raw: str) -> Post:
    metadata, content = parse_content(raw)
    published_at = metadata.get("publishedAt")
    if published_at is not None and not is_iso_date(published_at):
        logger.warning(
            f"Post {slug} has malformed publishedAt {published_at!r}, "
            "keeping it as-is"
        )
    return Post(slug=slug, metadata=metadata, content=content)


def is_iso_date(value: str) -> bool:
    """True for a real ``YYYY-MM-DD`` calendar date."""
    if len(value) != 10:
        return False
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _summary_fields(post: Post) -> dict:
    return {
        "slug": post.slug,
        "title": derive_title(post.metadata, post.slug),
        "summary": post.metadata.get("summary"),
        "publishedAt": post.metadata.get("publishedAt"),
        "readingTime": calculate_reading_time(post.content),
        "metadata": post.metadata,
    }
