import html
import logging
import re
from pathlib import Path

import markdown

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


class ContentParser:
    def __init__(self, excerpt_length: int = 140):
        self.excerpt_length = excerpt_length

    def get_markdown_content(self, doc: dict) -> str | None:
        """Read the raw markdown (front-matter included) behind a document."""
        path = doc.get("path")
        if not path:
            return None
        try:
            return Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning(f"Markdown file vanished: {path}")
            return None
        except UnicodeDecodeError:
            logger.warning(f"Markdown file is not valid utf-8, decoding lossily: {path}")
            return Path(path).read_bytes().decode("utf-8", errors="ignore")

    def to_html(self, body: str) -> str:
        return markdown.markdown(body, extensions=MARKDOWN_EXTENSIONS)

    def excerpt(self, rendered_html: str) -> str:
        """Plain-text summary of a rendered body, pruned on a word boundary."""
        text = html.unescape(_TAG_RE.sub("", rendered_html))
        text = _WHITESPACE_RE.sub(" ", text).strip()
        return prune(text, self.excerpt_length)


def prune(text: str, length: int, ending: str = "…") -> str:
    if len(text) <= length:
        return text
    cut = text[: length + 1]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    else:
        cut = cut[:length]
    return cut.rstrip(" ,.;:!?-") + ending
