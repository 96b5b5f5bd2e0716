"""Backlink indexing: reverse map from link target to the documents linking it"""

from typing import Callable, Iterable, Optional

from nodig.core.links import find_wikilinks
from nodig.core.models import BacklinkIndex


def _text(doc) -> str:
    """Accept Document (raw_text) or Page-like objects (content)."""
    text = getattr(doc, 'raw_text', None)
    return text if text is not None else doc.content


def extract_backlinks(
    documents: Iterable,
    key: Optional[Callable[[str], str]] = None,
    ) -> BacklinkIndex:
    """Index plain wikilinks across documents as {target: [source paths]}.

    Targets are keyed by their trimmed text unless ``key`` is given, in which
    case every target passes through it (e.g. ``slugify_url`` for url-space
    matching). Embeds are not counted. Sources keep insertion order and repeat
    when a document links the same target more than once.
    """
    index: BacklinkIndex = {}
    for doc in documents:
        for target, _alias in find_wikilinks(_text(doc)):
            name = key(target) if key else target
            index.setdefault(name, []).append(doc.path)
    return index
