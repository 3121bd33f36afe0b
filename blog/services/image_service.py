import logging
import re
from pathlib import Path
from typing import Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = r"png|jpg|jpeg|gif|svg|webp"


def get_image_from_dirs(
    image_path: str, roots: Iterable[str]
) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Look up an image under the first root directory that has it
    """
    for root in roots:
        base = Path(root).resolve()
        candidate = (base / image_path).resolve()
        if not candidate.is_relative_to(base):
            logger.warning(f"Rejected image path outside {base}: {image_path}")
            return None, None
        if not candidate.is_file():
            continue
        try:
            return candidate.read_bytes(), get_content_type_from_filename(
                candidate.name
            )
        except OSError as e:
            logger.error(f"Error reading image {candidate}: {e}")
            return None, None

    logger.warning(f"Image not found: {image_path}")
    return None, None


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    else:
        return "application/octet-stream"


def process_image_references(content: str, base_url: str, doc_dir: str = "") -> str:
    """
    Point markdown image references at the images endpoint
    """
    absolute_path_pattern = re.compile(r"!\[\s*(.*?)\s*\]\(\s*/img/([^)\s]+)\s*\)")
    relative_path_pattern = re.compile(
        r"!\[\s*(.*?)\s*\]\(\s*(?:\./)?([^)\s:/][^)\s:]*\.(?:"
        + IMAGE_EXTENSIONS
        + r"))\s*\)",
        re.IGNORECASE,
    )

    content = absolute_path_pattern.sub(r"![\1](" + base_url + r"/\2)", content)

    prefix = f"{base_url}/{doc_dir.strip('/')}" if doc_dir.strip("/") else base_url
    content = relative_path_pattern.sub(
        lambda m: f"![{m.group(1)}]({prefix}/{m.group(2)})", content
    )

    return content
