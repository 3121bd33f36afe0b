import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from blog import dependencies as deps
from blog.services.image_service import get_image_from_dirs
from blog.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def get_image_roots(current_settings: Settings = Depends(deps.get_settings)):
    return [current_settings.ASSETS_DIR, current_settings.CONTENT_DIR]


@router.get("/images/{image_path:path}")
def get_image(image_path: str, roots=Depends(get_image_roots)):
    """
    Serve images from the assets and content directories
    """
    image_data, content_type = get_image_from_dirs(image_path, roots)

    if not image_data or not content_type:
        raise HTTPException(status_code=404, detail="Image not found")

    headers = {
        "Content-Length": str(len(image_data)),
        "Accept-Ranges": "bytes",
    }

    return Response(content=image_data, media_type=content_type, headers=headers)
