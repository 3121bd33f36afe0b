from fastapi import Depends

from blog.repos.posts_repo import FilesystemPostsRepo
from blog.schemas.site import SiteMetadata
from blog.services.content_parser import ContentParser
from blog.services.posts_service import PostsService
from blog.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_site_metadata(current_settings: Settings = Depends(get_settings)) -> SiteMetadata:
    return current_settings.site_metadata


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(current_settings.CONTENT_DIR)


def get_content_parser(current_settings: Settings = Depends(get_settings)):
    return ContentParser(excerpt_length=current_settings.EXCERPT_LENGTH)


def get_posts_service(
    repo=Depends(get_posts_repo),
    parser=Depends(get_content_parser),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(
        repo=repo,
        parser=parser,
        date_format=current_settings.DATE_FORMAT,
        tag_limit=current_settings.TAG_QUERY_LIMIT,
    )
