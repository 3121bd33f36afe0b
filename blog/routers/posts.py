import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from blog import dependencies as deps
from blog.rendering.pages import render_index, render_post
from blog.schemas.site import SiteMetadata
from blog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(
    service: PostsService = Depends(deps.get_posts_service),
    site: SiteMetadata = Depends(deps.get_site_metadata),
):
    """Home page: every post, newest first."""
    try:
        return render_index(service.list_posts(), site)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/{slug:path}/", response_class=HTMLResponse)
def post_page(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
    site: SiteMetadata = Depends(deps.get_site_metadata),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return render_post(post, site, service.tag_slugs())
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
