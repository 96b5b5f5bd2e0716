"""Unit tests for core/vault.py"""

import logging

import pytest

from nodig.core.models import Document, Page
from nodig.core.vault import (
    discover_files,
    load_documents,
    page_from_document,
    pages_from_documents,
    parse_vault,
    url_from_path,
)


@pytest.mark.parametrize("rel,expected", [
    ("index.md", "/"),
    ("blog/index.md", "/blog/"),
    ("blog/post.md", "/blog/post"),
    ("About.md", "/About"),
    ("myindex.md", "/myindex"),
    ("docs\\guide.md", "/docs/guide"),
])
def test_url_from_path(rel, expected):
    """url is '/' + path without .md; only a final literal 'index' segment is dropped."""
    assert url_from_path(rel) == expected


@pytest.mark.parametrize("rel,expected", [
    ("folder/subfolder/Page Name.md", "/folder/subfolder/page-name"),
    ("Blog/Index.md", "/blog/"),
])
def test_url_from_path_slugified(rel, expected):
    """With slugify=True, segments are slugged before index stripping."""
    assert url_from_path(rel, slugify=True) == expected


def test_discover_files(vault):
    """discover_files finds *.md recursively and skips other suffixes, including .MD."""
    names = sorted(p.relative_to(vault).as_posix() for p in discover_files(vault))
    assert names == ["About.md", "blog/First Post.md", "blog/index.md", "index.md"]


def test_discover_files_skips_directories(tmp_path):
    """A directory whose name ends in .md is not a page."""
    (tmp_path / "folder.md").mkdir()
    (tmp_path / "folder.md" / "inner.md").write_text("x")
    assert [p.name for p in discover_files(tmp_path)] == ["inner.md"]


def test_load_documents(vault):
    """Documents carry forward-slash relative paths and raw text including frontmatter."""
    docs = {d.path: d for d in load_documents(vault)}
    assert set(docs) == {"About.md", "blog/First Post.md", "blog/index.md", "index.md"}
    assert docs["index.md"].raw_text.startswith("---\ntitle: Home")


def test_page_from_document():
    """page_from_document strips frontmatter and derives the url."""
    page = page_from_document(Document(path="blog/index.md", raw_text="---\ntitle: Blog\n---\n\nHello\n"))
    assert page == Page(url="/blog/", path="blog/index.md", content="Hello", frontmatter={"title": "Blog"})


def test_parse_vault(vault):
    """parse_vault returns one page per markdown file with url, content, and frontmatter."""
    pages = {p.url: p for p in parse_vault(vault)}
    assert set(pages) == {"/", "/About", "/blog/", "/blog/First Post"}
    assert pages["/"].frontmatter == {"title": "Home"}
    assert "Welcome" in pages["/"].content
    assert pages["/blog/First Post"].frontmatter == {"tags": ["writing"]}


def test_parse_vault_empty(tmp_path, caplog):
    """An empty vault yields no pages and logs it."""
    caplog.set_level(logging.INFO, logger="nodig")
    assert parse_vault(tmp_path) == []
    assert "No markdown files" in caplog.text


def test_pages_from_documents_warns_on_collision(caplog):
    """Two paths slugging to the same url are reported."""
    docs = [Document(path="My Note.md", raw_text="a"), Document(path="my-note.md", raw_text="b")]
    pages = pages_from_documents(docs, slugify=True)
    assert [p.url for p in pages] == ["/my-note", "/my-note"]
    assert "URL collision" in caplog.text


def test_load_documents_decode_error_propagates(tmp_path):
    """Unreadable content surfaces to the caller."""
    (tmp_path / "bad.md").write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(UnicodeDecodeError):
        load_documents(tmp_path)


def test_parse_vault_non_string_frontmatter_keys(tmp_path):
    """Valid YAML with numeric or boolean keys still yields a page."""
    (tmp_path / "year.md").write_text("---\n2024: launched\ntrue: yes\n---\nbody")
    [page] = parse_vault(tmp_path)
    assert page.frontmatter == {"2024": "launched", "True": True}
    assert page.content == "body"
