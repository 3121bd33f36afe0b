from pathlib import Path

from blog.settings import Settings, choose_env_file


def test_site_metadata_uses_environment():
    s = Settings(
        SITE_TITLE="My Blog",
        SITE_URL="https://example.com/",
        AUTHOR_NAME="Ada",
        AUTHOR_SUMMARY="writes things",
        SOCIAL_TWITTER="ada",
    )

    site = s.site_metadata

    assert site.title == "My Blog"
    assert site.siteUrl == "https://example.com/"
    assert site.author.name == "Ada"
    assert site.author.summary == "writes things"
    assert site.social.twitter == "ada"


def test_query_defaults():
    s = Settings()
    assert s.TAG_QUERY_LIMIT == 2000
    assert s.DATE_FORMAT == "%B %d, %Y"
    assert s.EXCERPT_LENGTH == 140


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CONTENT_DIR", "/srv/posts")
    monkeypatch.setenv("TAG_QUERY_LIMIT", "10")

    s = Settings()

    assert s.CONTENT_DIR == "/srv/posts"
    assert s.TAG_QUERY_LIMIT == 10


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
