"""Locate the instance-type table relative to its anchor element.

The page is laid out as a run of sibling ``div.section`` blocks::

    <div class="section title-wrapper">
      ... <h2 id="instance-type-matrix">Instance Type Matrix</h2> ...
    </div>
    <div class="section table-wrapper">
      <table> ... </table>
    </div>

The anchor id is the only stable handle, so we climb from it to the header
block and then walk forward to the table block.
"""

from __future__ import annotations

from resize.scraper.errors import AnchorNotFound, SectionHeaderNotFound, TableWrapperNotFound
from resize.scraper.search import by_attr, find_first
from resize.scraper.tree import ROOT, Document

MATRIX_ANCHOR_ID = "instance-type-matrix"

HEADER_CLASSES = ("section", "title-wrapper")
TABLE_CLASSES = ("section", "table-wrapper")


def _has_classes(doc: Document, handle: int, classes: tuple[str, ...]) -> bool:
    return doc.class_tokens(handle).issuperset(classes)


def locate_section(doc: Document, anchor_id: str = MATRIX_ANCHOR_ID) -> int:
    """Return the handle of the table-wrapper block that follows *anchor_id*.

    The header search checks the anchor itself before its parent, so an anchor
    that carries the header classes is its own header.

    Raises:
        AnchorNotFound: No element has ``id == anchor_id``.
        SectionHeaderNotFound: Neither the anchor nor any ancestor carries
            the ``section title-wrapper`` classes.
        TableWrapperNotFound: No later sibling of the header carries the
            ``section table-wrapper`` classes.
    """
    anchor = find_first(doc, ROOT, by_attr("id", anchor_id))
    if anchor is None:
        raise AnchorNotFound(anchor_id)

    header = next(
        (h for h in doc.ancestors(anchor) if _has_classes(doc, h, HEADER_CLASSES)), None
    )
    if header is None:
        raise SectionHeaderNotFound(anchor_id, HEADER_CLASSES)

    wrapper = next(
        (h for h in doc.following_siblings(header) if _has_classes(doc, h, TABLE_CLASSES)),
        None,
    )
    if wrapper is None:
        raise TableWrapperNotFound(TABLE_CLASSES)
    return wrapper
