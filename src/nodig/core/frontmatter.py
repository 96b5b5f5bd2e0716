"""Frontmatter extraction: YAML header -> mapping, remainder -> body"""

import logging
import re
from typing import Any

import yaml

from nodig.core.models import ParsedDocument


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)


def _lenient_parse(block: str) -> dict[str, Any]:
    """Split each 'key: value' line on its first colon; lines without a key are dropped."""
    data: dict[str, Any] = {}
    for line in block.splitlines():
        key, sep, value = line.partition(':')
        key = key.strip()
        if sep and key:
            data[key] = value.strip()
    return data


def _decode(block: str) -> tuple[dict[str, Any], bool]:
    """Return (mapping, used_fallback) for a frontmatter block."""
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        logger.debug("YAML frontmatter rejected, using key: value fallback: %s", e)
        return _lenient_parse(block), True
    if data is None:
        return {}, False
    if not isinstance(data, dict):
        logger.debug("YAML frontmatter is a %s, not a mapping; using key: value fallback", type(data).__name__)
        return _lenient_parse(block), True
    # YAML keys such as 2024, true or dates decode to non-str types
    return {str(k): v for k, v in data.items()}, False


def parse_frontmatter(text: str) -> ParsedDocument:
    """Split raw markdown into frontmatter and trimmed body. Never raises on bad YAML."""
    m = FRONTMATTER_RE.match(text)
    if not m:
        return ParsedDocument(frontmatter={}, content=text.strip())
    frontmatter, used_fallback = _decode(m.group(1))
    return ParsedDocument(
        frontmatter=frontmatter,
        content=text[m.end():].strip(),
        used_fallback=used_fallback,
    )
