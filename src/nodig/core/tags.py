"""Hashtag extraction from note bodies and frontmatter"""

import re
from typing import Any, Iterable

from nodig.core.models import Page, TagIndex


TAG_RE = re.compile(r'(?<!\S)#([A-Za-z0-9\-_]+)')


def extract_tags(content: str) -> list[str]:
    """Return inline #tag names in order of appearance, duplicates included."""
    return TAG_RE.findall(content)


def frontmatter_tags(frontmatter: dict[str, Any]) -> list[str]:
    """Return tags declared in frontmatter; accepts a list or a single string."""
    raw = frontmatter.get('tags')
    if raw is None:
        return []
    values = raw if isinstance(raw, list) else [raw]
    return [str(v).strip().lstrip('#') for v in values if v is not None and str(v).strip()]


def build_tag_index(pages: Iterable[Page]) -> TagIndex:
    """Map each tag to the urls of pages carrying it (frontmatter + inline), deduplicated."""
    index: TagIndex = {}
    for page in pages:
        for tag in dict.fromkeys(frontmatter_tags(page.frontmatter) + extract_tags(page.content)):
            index.setdefault(tag, []).append(page.url)
    return index
