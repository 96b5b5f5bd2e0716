"""Navigation tree construction from flat vault-relative paths"""

from typing import Iterable

from nodig.core.models import NavNode


def _child(siblings: list[NavNode], name: str) -> NavNode:
    """Return the sibling named name, appending a new folder node if absent."""
    for node in siblings:
        if node.name == name:
            return node
    node = NavNode(name=name)
    siblings.append(node)
    return node


def build_navigation_tree(paths: Iterable[str]) -> list[NavNode]:
    """Build a folder-mirroring forest; siblings keep first-seen order, leaves keep the input path."""
    roots: list[NavNode] = []
    for original in paths:
        segments = [s for s in original.replace('\\', '/').split('/') if s]
        if not segments:
            continue
        siblings = roots
        for i, segment in enumerate(segments):
            node = _child(siblings, segment)
            if i == len(segments) - 1 and node.path is None:
                node.path = original
            siblings = node.children
    return roots
