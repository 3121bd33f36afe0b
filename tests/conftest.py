import textwrap

from blog.schemas.blog import Post, PostEdge, TagQueryResult, TagSummary
from blog.services.content_parser import ContentParser
from blog.services.posts_service import assign_tag_slugs


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, docs):
        self.docs = docs

    def list_blog_docs(self):
        return list(self.docs)

    def get_blog_doc(self, slug):
        wanted = "/" + slug.strip("/") + "/"
        for doc in self.docs:
            if doc.get("slug") == wanted:
                return doc
        return None


class FakeParser(ContentParser):
    """
    Content parser that serves markdown from memory instead of disk.
    """

    def __init__(self, content_by_id: dict[str, str], excerpt_length: int = 140):
        super().__init__(excerpt_length=excerpt_length)
        self.content_by_id = content_by_id

    def get_markdown_content(self, doc: dict) -> str | None:
        raw = self.content_by_id.get(doc.get("_id"))
        if raw is None:
            return None
        return textwrap.dedent(raw).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, posts=None, get_post_return=None, error=None):
        self.posts = posts or []
        self._get_post_return = get_post_return
        self.error = error
        self.tag_queries = []

    def _maybe_fail(self):
        if self.error:
            raise self.error

    def list_posts(self):
        self._maybe_fail()
        return list(self.posts)

    def get_post(self, slug: str):
        self._maybe_fail()
        return self._get_post_return

    def posts_by_tag(self, tag: str, limit=None):
        self._maybe_fail()
        self.tag_queries.append(tag)
        matching = [p for p in self.posts if tag in p.tags]
        return TagQueryResult(
            totalCount=len(matching), edges=[PostEdge(node=p) for p in matching]
        )

    def list_tags(self):
        self._maybe_fail()
        counts = {}
        for post in self.posts:
            for tag in post.tags:
                counts[tag] = counts.get(tag, 0) + 1
        slugs = assign_tag_slugs(counts)
        return [
            TagSummary(tag=tag, slug=slugs[tag], totalCount=count)
            for tag, count in sorted(counts.items())
        ]

    def tag_slugs(self):
        return {summary.tag: summary.slug for summary in self.list_tags()}

    def find_tag(self, tag_or_slug: str):
        summaries = self.list_tags()
        for summary in summaries:
            if summary.slug == tag_or_slug:
                return summary.tag
        for summary in summaries:
            if summary.tag == tag_or_slug:
                return summary.tag
        return None


def make_post(slug="/hello/", **overrides) -> Post:
    data = {
        "slug": slug,
        "title": "Hello",
        "date": "May 01, 2020",
        "description": None,
        "excerpt": "Hello excerpt",
        "tags": [],
    }
    data.update(overrides)
    return Post(**data)


def doc_for(relative: str, slug: str) -> dict:
    return {"_id": relative, "path": relative, "slug": slug}


def write_post(root, relative: str, markdown: str):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(markdown).lstrip(), encoding="utf-8")
    return path
