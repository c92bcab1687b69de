from fastapi import Depends

from portfolio.services.posts_service import PostsService
from portfolio.services.sitemap_service import SitemapService
from portfolio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_service(current_settings: Settings = Depends(get_settings)):
    return PostsService(
        content_dir=current_settings.CONTENT_DIR,
        extension=current_settings.CONTENT_EXTENSION,
    )


def get_sitemap_service(
    posts_service=Depends(get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    return SitemapService(
        posts_service,
        base_url=current_settings.site_url,
        insights_path=current_settings.INSIGHTS_PATH,
        static_routes=current_settings.STATIC_ROUTES,
    )
