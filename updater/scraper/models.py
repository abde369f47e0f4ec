"""Data models for the fetch layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single page fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class DownloadedArchive:
    """Archive bytes plus the URL they were finally served from.

    ``final_url`` differs from ``url`` when the download redirected; the
    on-disk filename is derived from it.
    """

    url: str
    final_url: str
    content: bytes
