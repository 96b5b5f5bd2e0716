"""Slug generation for link targets and page urls"""

import re


def slugify_url(text: str) -> str:
    """Convert a link target to a lowercase, hyphenated url path; '/' separators are kept."""
    text = re.sub(r'\.md$', '', text, flags=re.IGNORECASE)
    text = re.sub(r'[^A-Za-z0-9\-_\s/]', '', text)
    text = re.sub(r'\s+', '-', text)
    text = re.sub(r'-+', '-', text)
    text = re.sub(r'/+', '/', text)
    return text.lower()
