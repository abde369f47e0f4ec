"""Exception hierarchy for the updater.

Every fatal error derives from :class:`UpdaterError` so the pipeline and the
CLI can catch one type.  :class:`NoLocalVersionError` is informational: the
version comparator turns it into a ``NOT_INSTALLED`` status rather than
letting it escape.
"""

from __future__ import annotations

from pathlib import Path


class UpdaterError(Exception):
    """Base exception for updater operations."""


class FetchError(UpdaterError):
    """Raised when a page or archive cannot be fetched (transport error or non-200)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class InvalidPatternError(UpdaterError):
    """Raised when the configured archive name pattern is not a valid regex."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid archive pattern {pattern!r}: {reason}")
        self.pattern = pattern


class PatternNotFoundError(UpdaterError):
    """Raised when no link matches the expected archive name."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"No archive link matches pattern {pattern!r}")
        self.pattern = pattern


class NoLocalVersionError(UpdaterError):
    """The installed manifest is missing or has no version line."""

    def __init__(self, manifest_path: Path, reason: str) -> None:
        super().__init__(f"No local version at {manifest_path}: {reason}")
        self.manifest_path = manifest_path


class ArchiveOpenError(UpdaterError):
    """Raised when the archive is missing or is not a readable zip file."""

    def __init__(self, archive_path: Path, reason: str) -> None:
        super().__init__(f"Cannot open archive {archive_path}: {reason}")
        self.archive_path = archive_path


class PathTraversalError(UpdaterError):
    """Raised when an archive entry would be written outside the destination."""

    def __init__(self, entry_name: str, path: str) -> None:
        super().__init__(f"{path}: illegal file path for entry {entry_name!r}")
        self.entry_name = entry_name
        self.path = path


class ExtractionIOError(UpdaterError):
    """Raised when writing an extracted entry to disk fails."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path


class CleanupWarning(UserWarning):
    """The temporary archive could not be deleted after a successful update."""
