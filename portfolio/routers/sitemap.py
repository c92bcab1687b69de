import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from portfolio import dependencies as deps
from portfolio.errors import FilesystemError
from portfolio.schemas.sitemap import SitemapEntry
from portfolio.services.sitemap_service import SitemapService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sitemap", response_model=List[SitemapEntry])
def list_sitemap_entries(
    service: SitemapService = Depends(deps.get_sitemap_service),
):
    try:
        return service.entries()
    except FilesystemError as e:
        logger.error(f"Content directory unavailable for sitemap: {e}")
        raise HTTPException(status_code=503, detail="Content unavailable")
    except Exception as e:
        logger.error(f"Unexpected error building sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")


@router.get("/sitemap.xml")
def get_sitemap_xml(service: SitemapService = Depends(deps.get_sitemap_service)):
    """
    Serve the sitemap document for crawlers
    """
    try:
        body = service.xml()
    except FilesystemError as e:
        logger.error(f"Content directory unavailable for sitemap: {e}")
        raise HTTPException(status_code=503, detail="Content unavailable")
    except Exception as e:
        logger.error(f"Unexpected error building sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")

    return Response(content=body, media_type="application/xml")
