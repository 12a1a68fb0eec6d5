"""Scraper package — EC2 instance-type catalog fetch & table parsing."""

from resize.scraper.errors import ScraperError
from resize.scraper.fetcher import fetch_catalog, fetch_page, parse_catalog
from resize.scraper.models import InstanceType, RawPage

__all__ = [
    "fetch_catalog",
    "fetch_page",
    "parse_catalog",
    "InstanceType",
    "RawPage",
    "ScraperError",
]
