import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from blog import dependencies as deps
from blog.rendering.pages import render_tag_index, render_tags_page
from blog.schemas.blog import TagPageContext, TagQueryResult, TagsPageData
from blog.schemas.site import SiteMetadata
from blog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tags/", response_class=HTMLResponse)
def tag_index(
    service: PostsService = Depends(deps.get_posts_service),
    site: SiteMetadata = Depends(deps.get_site_metadata),
):
    """Every tag with its post count."""
    try:
        return render_tag_index(service.list_tags(), site)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering tag index: {e}")
        raise HTTPException(status_code=500, detail="Failed to render tags")


@router.get("/tags/{tag}/", response_class=HTMLResponse)
def tag_page(
    tag: str,
    service: PostsService = Depends(deps.get_posts_service),
    site: SiteMetadata = Depends(deps.get_site_metadata),
):
    """Posts carrying a tag, newest first."""
    try:
        resolved = service.find_tag(tag)
        if not resolved:
            raise HTTPException(status_code=404, detail="Tag not found")
        result = service.posts_by_tag(resolved)
        data = TagsPageData(site=site, collection=result.to_collection())
        context = TagPageContext(tag=resolved, slug=service.tag_slugs()[resolved])
        return render_tags_page(context, data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render tag page")


@router.get("/api/tags/{tag}", response_model=TagQueryResult)
def query_tag(tag: str, service: PostsService = Depends(deps.get_posts_service)):
    """Raw query result for a tag: ``{totalCount, edges: [{node}]}``."""
    try:
        return service.posts_by_tag(tag)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error querying tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to query tag")
