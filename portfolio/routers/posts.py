import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from portfolio import dependencies as deps
from portfolio.errors import FilesystemError
from portfolio.schemas.blog import PostDetail, PostSummary
from portfolio.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except FilesystemError as e:
        logger.error(f"Content directory unavailable: {e}")
        raise HTTPException(status_code=503, detail="Content unavailable")
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except FilesystemError as e:
        logger.error(f"Content directory unavailable while reading {slug}: {e}")
        raise HTTPException(status_code=503, detail="Content unavailable")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
