"""Data models for the vault -> page pipeline"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, Field


BacklinkIndex = dict[str, list[str]]
TagIndex = dict[str, list[str]]


@dataclass(frozen=True)
class Document:
    """Raw source file; path is vault-relative with forward slashes."""
    path:     str
    raw_text: str


@dataclass(frozen=True)
class ParsedDocument:
    """Frontmatter/body split of a document; not persisted."""
    frontmatter:   dict[str, Any] = field(default_factory=dict)
    content:       str = ""
    used_fallback: bool = False     # True when lenient key: value parsing replaced YAML


class Page(BaseModel):
    """Public output contract: one page handed to the renderer."""
    url:         str
    path:        str                # vault-relative source path
    content:     str
    frontmatter: dict[str, Any] = {}


class NavNode(BaseModel):
    """Navigation tree node; path is set only for nodes backed by a real file."""
    name:     str
    path:     Optional[str] = None
    children: list["NavNode"] = Field(default_factory=list)


class BuildResult(BaseModel):
    """Everything a renderer needs from one build."""
    pages:      list[Page] = Field(default_factory=list)
    navigation: list[NavNode] = Field(default_factory=list)
    backlinks:  BacklinkIndex = Field(default_factory=dict)
    tags:       TagIndex = Field(default_factory=dict)
