"""Local installation package: version check & archive extraction."""

from updater.install.extractor import extract_archive, resolve_entry_path
from updater.install.filesystem import LocalFileSystem
from updater.install.manifest import (
    VersionCheck,
    VersionStatus,
    compare_versions,
    read_installed_version,
    remote_version,
)

__all__ = [
    "extract_archive",
    "resolve_entry_path",
    "LocalFileSystem",
    "VersionCheck",
    "VersionStatus",
    "compare_versions",
    "read_installed_version",
    "remote_version",
]
