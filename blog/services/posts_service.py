import datetime
import hashlib
import logging
import posixpath
import re
from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Optional

import frontmatter
from pydantic import ValidationError

from blog.schemas.blog import Post, PostEdge, TagQueryResult, TagSummary
from blog.services.image_service import process_image_references
from blog.settings import settings

logger = logging.getLogger(__name__)

IMAGES_URL = "/images"


class PostsService:
    def __init__(
        self,
        repo,
        parser,
        date_format: str = settings.DATE_FORMAT,
        tag_limit: int = settings.TAG_QUERY_LIMIT,
    ):
        self.repo = repo
        self.parser = parser
        self.date_format = date_format
        self.tag_limit = tag_limit
        self._posts: Optional[List[Post]] = None

    def list_posts(self) -> List[Post]:
        # parsed once per service instance; one instance serves one request or build
        if self._posts is None:
            self._posts = self._load_posts()
        return list(self._posts)

    def _load_posts(self) -> List[Post]:
        posts = []
        for doc in self.repo.list_blog_docs():
            post_data = parse_post_data(
                doc, parser=self.parser, date_format=self.date_format
            )
            if post_data:
                posts.append(post_data)

        # newest first, undated posts last
        posts.sort(key=lambda p: p["slug"])
        posts.sort(key=lambda p: p["sortKey"] or "", reverse=True)
        return [post for post in map(_to_post, posts) if post]

    def get_post(self, slug: str) -> Optional[Post]:
        doc = self.repo.get_blog_doc(slug)
        if not doc:
            return None
        post_data = parse_post_data(
            doc, parser=self.parser, date_format=self.date_format
        )
        if not post_data:
            return None
        return _to_post(post_data)

    def posts_by_tag(self, tag: str, limit: Optional[int] = None) -> TagQueryResult:
        limit = self.tag_limit if limit is None else limit
        matching = [post for post in self.list_posts() if tag in post.tags][:limit]
        logger.debug(f"Tag {tag!r} matched {len(matching)} posts")
        return TagQueryResult(
            totalCount=len(matching),
            edges=[PostEdge(node=post) for post in matching],
        )

    def list_tags(self) -> List[TagSummary]:
        counts = Counter(tag for post in self.list_posts() for tag in post.tags)
        slugs = assign_tag_slugs(counts)
        return [
            TagSummary(tag=tag, slug=slugs[tag], totalCount=count)
            for tag, count in sorted(counts.items())
        ]

    def tag_slugs(self) -> Dict[str, str]:
        return {summary.tag: summary.slug for summary in self.list_tags()}

    def find_tag(self, tag_or_slug: str) -> Optional[str]:
        """Resolve a tag slug, or failing that the raw tag, to the tag as written."""
        summaries = self.list_tags()
        for summary in summaries:
            if summary.slug == tag_or_slug:
                return summary.tag
        for summary in summaries:
            if summary.tag == tag_or_slug:
                return summary.tag
        return None


def parse_post_data(doc: dict, *, parser, date_format: str) -> Optional[dict]:
    """Parse frontmatter and return standardized post data"""
    slug = doc.get("slug", "")
    try:
        raw = parser.get_markdown_content(doc)
        if not raw:
            logger.warning(f"No markdown content found for post {slug}")
            return None

        parsed = frontmatter.loads(raw)
        metadata = parsed.metadata or {}

        doc_dir = posixpath.dirname(doc.get("_id", ""))
        body = process_image_references(parsed.content, IMAGES_URL, doc_dir)
        rendered = parser.to_html(body)

        return {
            "slug": slug,
            "title": _optional_str(metadata.get("title")),
            "date": _format_date(metadata.get("date"), date_format),
            "description": _optional_str(metadata.get("description")),
            "excerpt": parser.excerpt(rendered),
            "tags": _normalize_tags(metadata.get("tags")),
            "html": rendered,
            "sortKey": _sort_key(metadata.get("date")),
        }
    except Exception as e:
        logger.warning(f"Failed to parse post {slug}: {e}")
        return None


def _to_post(post_data: dict) -> Optional[Post]:
    try:
        return Post(**{k: v for k, v in post_data.items() if k != "sortKey"})
    except ValidationError as e:
        logger.warning(f"Skipping invalid post {post_data.get('slug')}: {e}")
        return None


def kebab_case(value: str) -> str:
    """``"Type Script"`` -> ``"type-script"``, ``"fooBar"`` -> ``"foo-bar"``."""
    value = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", value)
    words = re.findall(r"[^\W_]+", value)
    return "-".join(word.lower() for word in words)


def assign_tag_slugs(tags: Iterable[str]) -> Dict[str, str]:
    """Map each tag to a unique, non-empty route segment.

    Tags keep their kebab-case form unless it is empty or shared with another
    tag; those get a short digest of the raw tag appended instead.
    """
    groups = defaultdict(list)
    for tag in set(tags):
        groups[kebab_case(tag)].append(tag)

    slugs = {}
    for base, members in groups.items():
        if base and len(members) == 1:
            slugs[members[0]] = base
            continue
        for tag in members:
            slugs[tag] = f"{base or 'tag'}-{_tag_digest(tag)}"
    return slugs


def tag_slug(tag: str) -> str:
    return assign_tag_slugs([tag])[tag]


def _tag_digest(tag: str) -> str:
    return hashlib.sha1(tag.encode("utf-8")).hexdigest()[:8]


def _optional_str(value) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item]
    return [str(value)]


def _parse_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value
    if isinstance(value, str):
        try:
            return datetime.datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def _format_date(value, date_format: str) -> str:
    if value is None:
        return ""
    parsed = _parse_date(value)
    if parsed is None:
        return str(value)
    return parsed.strftime(date_format)


def _sort_key(value) -> Optional[str]:
    parsed = _parse_date(value)
    if parsed is None:
        return None
    if isinstance(parsed, datetime.datetime) and parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return parsed.isoformat()
