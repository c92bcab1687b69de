import datetime
import logging
import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional, Sequence

from portfolio.schemas.blog import Post
from portfolio.schemas.sitemap import SitemapEntry

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
DEFAULT_STATIC_ROUTES = ("", "/insights")


class SitemapService:
    def __init__(
        self,
        posts_service,
        base_url: str,
        insights_path: str = "/insights",
        static_routes: Sequence[str] = DEFAULT_STATIC_ROUTES,
    ):
        self.posts_service = posts_service
        self.base_url = base_url
        self.insights_path = insights_path
        self.static_routes = static_routes

    def entries(self) -> List[SitemapEntry]:
        return build_sitemap(
            self.posts_service.list_all(),
            self.base_url,
            insights_path=self.insights_path,
            static_routes=self.static_routes,
        )

    def xml(self) -> str:
        return render_sitemap_xml(self.entries())


def build_sitemap(
    posts: Iterable[Post],
    base_url: str,
    insights_path: str = "/insights",
    static_routes: Sequence[str] = DEFAULT_STATIC_ROUTES,
    today: Optional[datetime.date] = None,
) -> List[SitemapEntry]:
    """
    Static routes stamped with today's date, followed by one entry per post
    stamped with its ``publishedAt``.
    """
    base_url = base_url.rstrip("/")
    today_str = (today or datetime.date.today()).isoformat()

    routes = [
        SitemapEntry(url=f"{base_url}{route}", lastModified=today_str)
        for route in static_routes
    ]
    blogs = [
        SitemapEntry(
            url=f"{base_url}{insights_path}/{post.slug}",
            lastModified=post.metadata.get("publishedAt"),
        )
        for post in posts
    ]
    logger.debug(f"Built sitemap with {len(routes)} routes and {len(blogs)} posts")
    return routes + blogs


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.url
        if entry.lastModified:
            ET.SubElement(url, "lastmod").text = entry.lastModified
    body = ET.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'
