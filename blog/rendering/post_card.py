from markupsafe import Markup

from blog.rendering.templates import render
from blog.schemas.blog import Post


def card_body(post: Post) -> str:
    """Authored description when present, otherwise the generated excerpt."""
    return post.description or post.excerpt or ""


def render_post_card(post: Post, title: str) -> Markup:
    # description/excerpt are trusted HTML; sanitizing happens upstream
    return Markup(
        render("post_card.html", post=post, title=title, body=Markup(card_body(post)))
    )
