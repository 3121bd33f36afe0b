"""Page-level renderers.

Every function here is a pure mapping from query results to an HTML
document; nothing reads the filesystem or touches shared state, so pages
can be rendered in any order (or concurrently) by the caller.
"""

import datetime
from typing import Dict, Iterable, List, Optional

from markupsafe import Markup

from blog.rendering.post_card import render_post_card
from blog.rendering.templates import render
from blog.schemas.blog import Post, TagPageContext, TagsPageData, TagSummary
from blog.schemas.site import SiteMetadata
from blog.services.posts_service import tag_slug

ROOT_PATH = "/"
TAGS_INDEX_PATH = "/tags/"


def tag_path(slug: str) -> str:
    return f"{TAGS_INDEX_PATH}{slug}/"


def tag_header(total_count: int, tag: str) -> str:
    """``1 post for tag "x"``; zero and anything above one are plural."""
    plural = "" if total_count == 1 else "s"
    return f'{total_count} post{plural} for tag "{tag}"'


def render_layout(
    location: str,
    title: str,
    body,
    page_title: Optional[str] = None,
    description: Optional[str] = None,
) -> str:
    return render(
        "layout.html",
        location=location,
        is_root=location == ROOT_PATH,
        title=title,
        page_title=page_title,
        description=description,
        body=Markup(body),
        year=datetime.date.today().year,
    )


def render_tags_page(
    context: TagPageContext, data: TagsPageData, location: Optional[str] = None
) -> str:
    collection = data.collection
    header = tag_header(collection.totalCount, context.tag)
    # no re-sorting here: the query layer already ordered by date
    cards = [render_post_card(post, post.display_title) for post in collection.posts]
    body = render(
        "tags.html", header=header, cards=cards, tags_index=TAGS_INDEX_PATH
    )
    return render_layout(
        location or tag_path(context.slug or tag_slug(context.tag)),
        data.site.title,
        body,
        page_title=header,
    )


def render_tag_index(tags: Iterable[TagSummary], site: SiteMetadata) -> str:
    entries = [
        {"tag": t.tag, "path": tag_path(t.slug), "totalCount": t.totalCount}
        for t in tags
    ]
    body = render("tag_index.html", tags=entries)
    return render_layout(TAGS_INDEX_PATH, site.title, body, page_title="Tags")


def render_index(posts: List[Post], site: SiteMetadata) -> str:
    cards = [render_post_card(post, post.display_title) for post in posts]
    body = render("index.html", site=site, cards=cards, tags_index=TAGS_INDEX_PATH)
    return render_layout(
        ROOT_PATH, site.title, body, page_title="All posts", description=site.description
    )


def render_post(
    post: Post, site: SiteMetadata, tag_slugs: Optional[Dict[str, str]] = None
) -> str:
    tag_slugs = tag_slugs or {}
    tags = [
        {"tag": tag, "path": tag_path(tag_slugs.get(tag) or tag_slug(tag))}
        for tag in post.tags
    ]
    body = render(
        "post.html",
        post=post,
        title=post.display_title,
        content=Markup(post.html),
        tags=tags,
    )
    return render_layout(
        post.slug,
        site.title,
        body,
        page_title=post.display_title,
        description=post.description or post.excerpt,
    )
