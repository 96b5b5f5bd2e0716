"""Vault loading: file discovery, document reads, and url derivation"""

import logging
import re
from pathlib import Path

from nodig.core.frontmatter import parse_frontmatter
from nodig.core.models import Document, Page
from nodig.core.utils.slug import slugify_url


logger = logging.getLogger(__name__)


def discover_files(root: Path) -> list[Path]:
    """Return every *.md file under root (case-sensitive suffix) in filesystem order."""
    return [p for p in Path(root).rglob('*') if p.name.endswith('.md') and p.is_file()]


def url_from_path(rel_path: str, slugify: bool = False) -> str:
    """Derive a page url: '/' + path without .md, a final 'index' segment dropped.

    blog/index.md -> /blog/, index.md -> /, a/Note.md -> /a/Note
    """
    rel = rel_path.replace('\\', '/')
    rel = slugify_url(rel) if slugify else re.sub(r'\.md$', '', rel)
    head, _, last = rel.rpartition('/')
    if last == 'index':
        rel = f"{head}/" if head else ''
    return '/' + rel


def load_documents(root: Path) -> list[Document]:
    """Read every markdown file under root. I/O and decode errors propagate."""
    root = Path(root)
    return [
        Document(path=p.relative_to(root).as_posix(), raw_text=p.read_text(encoding='utf-8'))
        for p in discover_files(root)
    ]


def page_from_document(doc: Document, slugify: bool = False) -> Page:
    """Split frontmatter from a Document and attach its derived url."""
    parsed = parse_frontmatter(doc.raw_text)
    return Page(
        url=url_from_path(doc.path, slugify),
        path=doc.path,
        content=parsed.content,
        frontmatter=parsed.frontmatter,
    )


def pages_from_documents(docs: list[Document], slugify: bool = False) -> list[Page]:
    """Convert documents to pages, warning when two paths share a url."""
    pages = [page_from_document(d, slugify) for d in docs]
    seen: dict[str, str] = {}
    for page in pages:
        if page.url in seen:
            logger.warning("URL collision: %s and %s both map to %s", seen[page.url], page.path, page.url)
        else:
            seen[page.url] = page.path
    return pages


def parse_vault(root: Path, slugify: bool = False) -> list[Page]:
    """Load all pages under root. Order follows the filesystem walk; sort downstream if needed."""
    docs = load_documents(root)
    if not docs:
        logger.info("No markdown files found under %s", root)
    return pages_from_documents(docs, slugify)
