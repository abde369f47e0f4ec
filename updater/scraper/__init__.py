"""Scraper package: page/archive fetch & link extraction."""

from updater.scraper.extractor import extract_links
from updater.scraper.fetcher import HttpFetcher, fetch_archive, fetch_url
from updater.scraper.models import DownloadedArchive, RawPage

__all__ = [
    "fetch_url",
    "fetch_archive",
    "extract_links",
    "HttpFetcher",
    "RawPage",
    "DownloadedArchive",
]
