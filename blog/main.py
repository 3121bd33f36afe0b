import logging

from fastapi import FastAPI

from blog.routers import images, posts, tags
from blog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.SITE_TITLE, description=settings.SITE_DESCRIPTION)

app.include_router(images.router)
app.include_router(tags.router)
# catch-all post route, keep last
app.include_router(posts.router)


@app.get("/health")
async def health():
    return {"message": f"{settings.SITE_TITLE} is running"}
