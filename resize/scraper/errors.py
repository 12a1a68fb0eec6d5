"""Exception hierarchy for catalog scraping failures.

Every error carries a ``context`` dict with the values needed to diagnose a
change in the source page (offending text, expected vs. actual counts, the
anchor that was searched for).  The context is rendered into the message so
a log line alone is enough to see what broke.
"""

from __future__ import annotations

from typing import Any


class ScraperError(Exception):
    """Base class for every failure raised while building the catalog."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({details})"


# ---------------------------------------------------------------------------
# Transport / document
# ---------------------------------------------------------------------------

class FetchError(ScraperError):
    """The HTTP transport failed before a response was received.

    The underlying ``httpx`` error is chained as ``__cause__``.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__("Failed to fetch instance types page", {"url": url, "reason": reason})


class BadStatus(ScraperError):
    """The server answered with a non-success status code."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(
            "Bad response from AWS", {"status_code": status_code, "url": url}
        )


class DocumentParseError(ScraperError):
    """The response body could not be parsed into a document tree."""


# ---------------------------------------------------------------------------
# Page layout
# ---------------------------------------------------------------------------

class LayoutError(ScraperError):
    """The page parsed, but its structure no longer matches expectations."""


class AnchorNotFound(LayoutError):
    def __init__(self, anchor_id: str) -> None:
        self.anchor_id = anchor_id
        super().__init__("No node with the anchor id", {"anchor_id": anchor_id})


class SectionHeaderNotFound(LayoutError):
    def __init__(self, anchor_id: str, classes: tuple[str, ...]) -> None:
        self.anchor_id = anchor_id
        self.classes = classes
        super().__init__(
            "Malformed HTML: no ancestor of the anchor carries the header classes",
            {"anchor_id": anchor_id, "classes": " ".join(classes)},
        )


class TableWrapperNotFound(LayoutError):
    def __init__(self, classes: tuple[str, ...]) -> None:
        self.classes = classes
        super().__init__(
            "Malformed HTML: no sibling after the header carries the table classes",
            {"classes": " ".join(classes)},
        )


class TableTooSmall(LayoutError):
    def __init__(self, expected_min: int, actual: int) -> None:
        self.expected_min = expected_min
        self.actual = actual
        super().__init__(
            "Malformed HTML: could not find the instance type table",
            {"expected_min": expected_min, "actual": actual},
        )


# ---------------------------------------------------------------------------
# Row contents
# ---------------------------------------------------------------------------

class RowParseError(ScraperError):
    """A table row could not be converted into an InstanceType."""


class ColumnCountMismatch(RowParseError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected {expected} columns, got {actual}",
            {"expected": expected, "actual": actual},
        )


class NumericParseError(RowParseError):
    def __init__(self, field: str, text: str) -> None:
        self.field = field
        self.text = text
        super().__init__(
            f"Expected number for {field}, got '{text}'", {"field": field, "text": text}
        )


class EmptyFieldError(RowParseError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Expected a value for {field}, got an empty cell", {"field": field})
