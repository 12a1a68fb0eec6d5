"""Predicate-driven search over a :class:`~resize.scraper.tree.Document`."""

from __future__ import annotations

from typing import Callable, Optional

from resize.scraper.tree import ELEMENT, Document

Matcher = Callable[[Document, int], bool]


def by_tag(tag: str) -> Matcher:
    """Match elements whose tag name is *tag*."""
    tag = tag.lower()

    def _match(doc: Document, handle: int) -> bool:
        node = doc[handle]
        return node.kind == ELEMENT and node.tag == tag

    return _match


def by_attr(key: str, value: str) -> Matcher:
    """Match elements whose attribute *key* equals *value* exactly."""

    def _match(doc: Document, handle: int) -> bool:
        node = doc[handle]
        return node.kind == ELEMENT and node.attrs.get(key) == value

    return _match


def _walk(doc: Document, root: int, matcher: Matcher, first: bool) -> list[int]:
    matched: list[int] = []
    for handle in doc.descendants(root):
        if matcher(doc, handle):
            matched.append(handle)
            if first:
                break
    return matched


def find_first(doc: Document, root: int, matcher: Matcher) -> Optional[int]:
    """Return the first preorder match under *root* (inclusive), or ``None``."""
    matched = _walk(doc, root, matcher, first=True)
    return matched[0] if matched else None


def find_all(doc: Document, root: int, matcher: Matcher) -> list[int]:
    """Return every preorder match under *root* (inclusive).

    A match does not prune its subtree: nested matches are reported too.
    """
    return _walk(doc, root, matcher, first=False)
