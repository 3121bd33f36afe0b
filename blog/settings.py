from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from blog.schemas.site import Author, SiteMetadata, Social


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content/blog"
    ASSETS_DIR: str = "content/assets"
    OUTPUT_DIR: str = "public"

    # Query layer
    DATE_FORMAT: str = "%B %d, %Y"
    TAG_QUERY_LIMIT: int = 2000
    EXCERPT_LENGTH: int = 140

    # Logging
    LOG_LEVEL: str = "INFO"

    # Site metadata
    SITE_TITLE: str = "Lucas Pacheco's Blog"
    SITE_DESCRIPTION: str = (
        "Text repository built along my journey in the technology world."
    )
    SITE_URL: str = "https://lucaspacheco.dev/"
    AUTHOR_NAME: str = "Lucas Pacheco"
    AUTHOR_SUMMARY: str = "always curious and excited with about technologies."
    SOCIAL_TWITTER: str = "lucaspsilveiras"

    @property
    def site_metadata(self) -> SiteMetadata:
        return SiteMetadata(
            title=self.SITE_TITLE,
            description=self.SITE_DESCRIPTION,
            siteUrl=self.SITE_URL,
            author=Author(name=self.AUTHOR_NAME, summary=self.AUTHOR_SUMMARY),
            social=Social(twitter=self.SOCIAL_TWITTER),
        )


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
