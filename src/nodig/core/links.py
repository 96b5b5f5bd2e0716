"""Wikilink and embed resolution: [[...]] / ![[...]] -> HTML link and image markup

Embeds are rewritten before plain wikilinks because ``![[x]]`` contains
``[[x]]``. Targets may not contain brackets or pipes, so unterminated or
nested syntax never matches and passes through untouched.
"""

import re
from html import escape

from nodig.core.utils.slug import slugify_url


IMAGE_EXTENSIONS = ('png', 'jpg', 'jpeg', 'gif', 'svg', 'webp', 'avif')

IMAGE_EMBED_RE = re.compile(
    r'!\[\[([^\[\]|]+\.(?:' + '|'.join(IMAGE_EXTENSIONS) + r'))\]\]',
    re.IGNORECASE,
)
EMBED_RE = re.compile(r'!\[\[([^\[\]|]+)\]\]')
WIKILINK_RE = re.compile(r'(?<!!)\[\[([^\[\]|]+)(?:\|([^\[\]]+))?\]\]')

_EXTENSION_RE = re.compile(r'\.[^./\\\s]+$')


def _image(match: re.Match) -> str:
    target = match.group(1)
    return f'<img src="/{slugify_url(target.strip())}" alt="{escape(target)}" />'


def _embed(match: re.Match) -> str:
    name = _EXTENSION_RE.sub('', match.group(1).strip())
    return f'<a href="/{slugify_url(name)}">{name}</a>'


def _wikilink(match: re.Match) -> str:
    target, alias = match.group(1), match.group(2)
    text = (alias or target).strip()
    return f'<a href="/{slugify_url(target.strip())}">{text}</a>'


def find_wikilinks(text: str) -> list[tuple[str, str | None]]:
    """Return (target, alias) pairs for plain wikilinks in order; embeds are excluded."""
    return [
        (m.group(1).strip(), m.group(2).strip() if m.group(2) else None)
        for m in WIKILINK_RE.finditer(text)
    ]


def resolve_links(content: str) -> str:
    """Rewrite image embeds, note embeds, then wikilinks into HTML markup."""
    content = IMAGE_EMBED_RE.sub(_image, content)
    content = EMBED_RE.sub(_embed, content)
    return WIKILINK_RE.sub(_wikilink, content)
