import logging

from blog.repos.posts_repo import FilesystemPostsRepo
from blog.services.content_parser import ContentParser
from blog.services.posts_service import PostsService
from blog.services.site_builder import SiteBuilder
from blog.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    service = PostsService(
        repo=FilesystemPostsRepo(settings.CONTENT_DIR),
        parser=ContentParser(excerpt_length=settings.EXCERPT_LENGTH),
    )
    try:
        SiteBuilder(service, settings.site_metadata, settings.OUTPUT_DIR).build()
        logger.info("Build completed successfully.")
    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        raise SystemExit(1)
