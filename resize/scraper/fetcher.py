"""Fetch the EC2 instance-types page and scrape it into a catalog.

The instance-type matrix is not available from the EC2 API, so it is
scraped from the public marketing page.  Every call performs a full fetch
and a full parse; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import httpx

from resize.config import settings
from resize.scraper.errors import BadStatus, FetchError, ScraperError, TableTooSmall
from resize.scraper.locator import locate_section
from resize.scraper.models import InstanceType, RawPage
from resize.scraper.rows import parse_row
from resize.scraper.search import by_tag, find_all
from resize.scraper.tree import parse_document

logger = logging.getLogger(__name__)

# one header row plus at least two data rows
MIN_TABLE_ROWS = 3


class FetchStage(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    PARSING = "parsing"
    LOCATING_SECTION = "locating_section"
    ENUMERATING_ROWS = "enumerating_rows"
    PARSING_ROWS = "parsing_rows"
    DONE = "done"


def default_client() -> httpx.Client:
    """Build the client used when the caller does not inject one.

    Connection-level retries live in the transport; the scraper itself never
    retries.
    """
    return httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.request_timeout,
        follow_redirects=True,
        transport=httpx.HTTPTransport(retries=settings.http_retries),
    )


def fetch_page(client: httpx.Client, url: str) -> RawPage:
    """GET *url* with *client* and return a :class:`RawPage`.

    Raises:
        FetchError: The transport failed (DNS, connect, read, timeout, …).
        BadStatus: The server answered with a non-2xx status.
    """
    logger.debug("stage=%s url=%s", FetchStage.FETCHING.value, url)
    try:
        response = client.get(url)
    except httpx.HTTPError as exc:
        raise FetchError(url, str(exc) or type(exc).__name__) from exc

    logger.info("GET %s -> HTTP %d", url, response.status_code)
    if not response.is_success:
        raise BadStatus(response.status_code, url)
    return RawPage(url=url, html=response.text, status_code=response.status_code)


def parse_catalog(html: str) -> list[InstanceType]:
    """Scrape an already-fetched instance-types page.

    The first enumerated row is dropped as the table header; it is not
    inspected.
    """
    stage = FetchStage.PARSING
    try:
        logger.debug("stage=%s", stage.value)
        doc = parse_document(html)

        stage = FetchStage.LOCATING_SECTION
        logger.debug("stage=%s", stage.value)
        section = locate_section(doc)

        stage = FetchStage.ENUMERATING_ROWS
        logger.debug("stage=%s", stage.value)
        rows = find_all(doc, section, by_tag("tr"))
        if len(rows) < MIN_TABLE_ROWS:
            raise TableTooSmall(MIN_TABLE_ROWS, len(rows))

        stage = FetchStage.PARSING_ROWS
        logger.debug("stage=%s rows=%d", stage.value, len(rows) - 1)
        types = [parse_row(doc, row) for row in rows[1:]]
    except ScraperError as exc:
        logger.warning("Instance type scrape failed while %s: %s", stage.value, exc)
        raise

    logger.debug("stage=%s", FetchStage.DONE.value)
    return types


def fetch_catalog(
    client: Optional[httpx.Client] = None, url: Optional[str] = None
) -> list[InstanceType]:
    """Fetch the instance-types page and return its catalog in page order.

    Args:
        client: HTTP client to use.  When ``None`` a default client is built
            from settings and closed afterwards.
        url: Page to scrape; defaults to ``settings.instance_types_url``.

    Raises:
        ScraperError: Any fetch, layout or row failure.  No partial catalog is
            ever returned.
    """
    url = url or settings.instance_types_url
    if client is None:
        with default_client() as owned:
            return fetch_catalog(owned, url)

    logger.debug("stage=%s", FetchStage.IDLE.value)
    try:
        raw = fetch_page(client, url)
    except ScraperError as exc:
        logger.warning("Instance type scrape failed while %s: %s", FetchStage.FETCHING.value, exc)
        raise

    types = parse_catalog(raw.html)
    logger.info("Scraped %d instance types from %s", len(types), url)
    return types
