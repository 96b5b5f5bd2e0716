"""Shared fixtures for core unit tests"""

import pytest


VAULT_FILES = {
    "index.md": "---\ntitle: Home\n---\nWelcome to the [[About]] page.\n",
    "About.md": "# About\n\nBack to [[index|home]].\n",
    "blog/index.md": "---\ntitle: Blog\n---\nPosts: [[blog/First Post]]\n",
    "blog/First Post.md": "---\ntags:\n  - writing\n---\nFirst! See [[About]]. #draft\n",
    "assets/notes.txt": "not markdown",
    "upper.MD": "ignored: suffix match is case-sensitive",
}


@pytest.fixture(name="vault")
def vault_fixture(tmp_path):
    """A small vault with nested folders, index pages, and a non-markdown file."""
    root = tmp_path / "vault"
    for rel, text in VAULT_FILES.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root
