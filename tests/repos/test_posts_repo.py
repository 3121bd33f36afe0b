from pathlib import Path

from blog.repos.posts_repo import FilesystemPostsRepo, normalize_slug, slug_from_path
from tests.conftest import write_post


def test_list_blog_docs_finds_markdown_recursively(tmp_path):
    write_post(tmp_path, "hello-world/index.md", "# hi")
    write_post(tmp_path, "notes/today.markdown", "# today")
    write_post(tmp_path, "hello-world/salty_egg.jpg", "not markdown")

    docs = FilesystemPostsRepo(tmp_path).list_blog_docs()

    assert [d["slug"] for d in docs] == ["/hello-world/", "/notes/today/"]
    assert docs[0]["_id"] == "hello-world/index.md"
    assert Path(docs[0]["path"]) == tmp_path / "hello-world" / "index.md"


def test_list_blog_docs_missing_dir_returns_empty(tmp_path):
    repo = FilesystemPostsRepo(tmp_path / "nope")

    assert repo.list_blog_docs() == []


def test_get_blog_doc_accepts_slug_with_or_without_slashes(tmp_path):
    write_post(tmp_path, "hello-world/index.md", "# hi")
    repo = FilesystemPostsRepo(tmp_path)

    assert repo.get_blog_doc("hello-world")["slug"] == "/hello-world/"
    assert repo.get_blog_doc("/hello-world/")["slug"] == "/hello-world/"
    assert repo.get_blog_doc("missing") is None


def test_slug_from_path():
    assert slug_from_path(Path("a/index.md")) == "/a/"
    assert slug_from_path(Path("a/b.md")) == "/a/b/"
    assert slug_from_path(Path("c.md")) == "/c/"
    assert slug_from_path(Path("index.md")) == "/"


def test_normalize_slug():
    assert normalize_slug("foo") == "/foo/"
    assert normalize_slug("/foo/bar") == "/foo/bar/"
    assert normalize_slug("/") == "/"
