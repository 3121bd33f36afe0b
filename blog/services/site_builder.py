import logging
from pathlib import Path
from typing import List

from blog.rendering.pages import (
    render_index,
    render_post,
    render_tag_index,
    render_tags_page,
    tag_path,
)
from blog.schemas.blog import TagPageContext, TagsPageData
from blog.schemas.site import SiteMetadata

logger = logging.getLogger(__name__)


class SiteBuilder:
    """Write every page of the blog as ``<route>/index.html`` under an output dir."""

    def __init__(self, service, site: SiteMetadata, output_dir):
        self.service = service
        self.site = site
        self.output_dir = Path(output_dir)
        self._routes = set()

    def build(self) -> List[Path]:
        self._routes = set()
        written = []
        posts = self.service.list_posts()
        tags = self.service.list_tags()
        tag_slugs = {summary.tag: summary.slug for summary in tags}

        written.append(self._write("/", render_index(posts, self.site)))

        for post in posts:
            html = render_post(post, self.site, tag_slugs)
            written.append(self._write(post.slug, html))

        written.append(self._write("/tags/", render_tag_index(tags, self.site)))

        for summary in tags:
            result = self.service.posts_by_tag(summary.tag)
            data = TagsPageData(site=self.site, collection=result.to_collection())
            context = TagPageContext(tag=summary.tag, slug=summary.slug)
            written.append(
                self._write(tag_path(summary.slug), render_tags_page(context, data))
            )

        logger.info(
            f"Built {len(written)} pages ({len(posts)} posts, {len(tags)} tags) into {self.output_dir}"
        )
        return written

    def _write(self, route: str, html: str) -> Path:
        parts = [part for part in route.strip("/").split("/") if part]
        key = "/".join(parts)
        if key in self._routes:
            raise ValueError(f"Route {route!r} would overwrite an existing page")
        self._routes.add(key)

        target = self.output_dir.joinpath(*parts, "index.html")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        logger.debug(f"Wrote {target}")
        return target
