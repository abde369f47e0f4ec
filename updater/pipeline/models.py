"""Result types and injected capabilities for the update pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Protocol

from updater.errors import CleanupWarning, UpdaterError
from updater.install.manifest import VersionCheck
from updater.scraper.models import DownloadedArchive, RawPage


class FetcherProtocol(Protocol):
    def fetch_page(self, url: str) -> RawPage: ...

    def fetch_archive(self, url: str) -> DownloadedArchive: ...


class FileSystemProtocol(Protocol):
    def write_bytes(self, path: Path, data: bytes) -> None: ...

    def delete(self, path: Path) -> None: ...


class UpdateState(str, Enum):
    UPDATED = "updated"
    ALREADY_CURRENT = "already_current"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    # Only produced by dry runs.
    UPDATE_AVAILABLE = "update_available"


@dataclass
class UpdateResult:
    """Terminal state of one pipeline run plus whatever was learned on the way."""

    state: UpdateState
    links: List[str] = field(default_factory=list)
    archive_link: Optional[str] = None
    download_url: Optional[str] = None
    archive_path: Optional[Path] = None
    version: Optional[VersionCheck] = None
    written: List[Path] = field(default_factory=list)
    error: Optional[UpdaterError] = None
    warnings: List[CleanupWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.state is not UpdateState.FAILED

    @property
    def reason(self) -> str:
        """Human-readable failure reason (empty unless ``FAILED``)."""
        return str(self.error) if self.error is not None else ""
