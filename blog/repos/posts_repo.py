import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


class FilesystemPostsRepo:
    def __init__(self, content_dir):
        self.root = Path(content_dir)

    def list_blog_docs(self) -> List[dict]:
        if not self.root.is_dir():
            logger.warning(f"Content directory not found: {self.root}")
            return []

        return [
            self._to_doc(path)
            for path in sorted(self.root.rglob("*"))
            if path.is_file() and path.suffix.lower() in MARKDOWN_SUFFIXES
        ]

    def get_blog_doc(self, slug: str) -> Optional[dict]:
        wanted = normalize_slug(slug)
        for doc in self.list_blog_docs():
            if doc["slug"] == wanted:
                return doc
        return None

    def _to_doc(self, path: Path) -> dict:
        relative = path.relative_to(self.root)
        return {
            "_id": relative.as_posix(),
            "path": str(path),
            "slug": slug_from_path(relative),
        }


def slug_from_path(relative: Path) -> str:
    """``hello/index.md`` -> ``/hello/``, ``notes/today.md`` -> ``/notes/today/``."""
    parts = list(relative.with_suffix("").parts)
    if parts and parts[-1] == "index":
        parts = parts[:-1]
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"


def normalize_slug(slug: str) -> str:
    stripped = slug.strip("/")
    return f"/{stripped}/" if stripped else "/"
