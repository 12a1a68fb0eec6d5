"""Arena-backed, read-only document tree.

BeautifulSoup does the HTML parsing; the resulting soup is immediately
flattened into a :class:`Document` whose nodes refer to each other by integer
handle (index into ``Document.nodes``) instead of by object reference.  Parent,
child and sibling navigation all go through the arena.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from resize.scraper.errors import DocumentParseError

ROOT = 0

DOCUMENT = "document"
ELEMENT = "element"
TEXT = "text"


@dataclass
class Node:
    kind: str
    tag: str = ""
    attrs: dict[str, str] = field(default_factory=dict)
    data: str = ""
    parent: Optional[int] = None
    children: list[int] = field(default_factory=list)
    prev_sibling: Optional[int] = None
    next_sibling: Optional[int] = None


@dataclass
class Document:
    nodes: list[Node] = field(default_factory=list)

    def __getitem__(self, handle: int) -> Node:
        return self.nodes[handle]

    def __len__(self) -> int:
        return len(self.nodes)

    def attr(self, handle: int, key: str) -> str:
        """Return attribute *key* of the node, or ``""`` when absent."""
        return self.nodes[handle].attrs.get(key, "")

    def class_tokens(self, handle: int) -> set[str]:
        return set(self.attr(handle, "class").split())

    def ancestors(self, handle: int) -> Iterator[int]:
        """Yield *handle* itself, then its parent, grandparent, … up to the root."""
        current: Optional[int] = handle
        while current is not None:
            yield current
            current = self.nodes[current].parent

    def following_siblings(self, handle: int) -> Iterator[int]:
        current = self.nodes[handle].next_sibling
        while current is not None:
            yield current
            current = self.nodes[current].next_sibling

    def descendants(self, handle: int) -> Iterator[int]:
        """Preorder, depth-first walk of the subtree rooted at *handle*.

        The root is yielded first and children are visited in document order.
        An explicit stack keeps deeply nested pages clear of the recursion
        limit.
        """
        stack = [handle]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self.nodes[current].children))

    def _append(self, node: Node) -> int:
        handle = len(self.nodes)
        self.nodes.append(node)
        if node.parent is not None:
            siblings = self.nodes[node.parent].children
            if siblings:
                node.prev_sibling = siblings[-1]
                self.nodes[siblings[-1]].next_sibling = handle
            siblings.append(handle)
        return handle


def _flatten(soup: BeautifulSoup) -> Document:
    doc = Document()
    doc._append(Node(kind=DOCUMENT))

    # (soup element, parent handle); children pushed reversed so they pop in
    # document order and sibling links come out in order too.
    stack: list[tuple[object, int]] = [(child, ROOT) for child in reversed(soup.contents)]
    while stack:
        element, parent = stack.pop()
        if isinstance(element, Tag):
            attrs = {key: _attr_value(value) for key, value in element.attrs.items()}
            handle = doc._append(
                Node(kind=ELEMENT, tag=element.name.lower(), attrs=attrs, parent=parent)
            )
            stack.extend((child, handle) for child in reversed(element.contents))
        elif isinstance(element, PreformattedString):
            # comments, doctype, CDATA, processing instructions
            continue
        elif isinstance(element, NavigableString):
            doc._append(Node(kind=TEXT, data=str(element), parent=parent))
    return doc


def _attr_value(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def parse_document(html: str) -> Document:
    """Parse *html* into an arena :class:`Document`.

    Raises:
        DocumentParseError: If the parser rejects the markup.
    """
    try:
        soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
    except ParserRejectedMarkup as exc:
        raise DocumentParseError("Could not parse page markup", {"reason": str(exc)}) from exc
    return _flatten(soup)


def text(doc: Document, handle: int) -> str:
    """Return the whitespace-normalised text content of a node.

    Every descendant text node is joined in document order by single spaces,
    whitespace runs are collapsed and both ends are trimmed.
    """
    parts = [doc[h].data for h in doc.descendants(handle) if doc[h].kind == TEXT]
    return " ".join(" ".join(parts).split())
