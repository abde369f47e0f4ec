"""Installed-vs-remote version comparison.

The installed version comes from the addon's ``.toc`` manifest (first line
mentioning ``Version``, last whitespace-separated token).  The remote version
comes from the archive filename (last ``-`` segment minus ``.zip``).

Tokens are compared as exact strings.  No version parsing is attempted, so
``11.27`` and ``11.270`` are different versions and report ``STALE``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from updater.errors import NoLocalVersionError

logger = logging.getLogger(__name__)

VERSION_MARKER = "Version"


class VersionStatus(str, Enum):
    CURRENT = "current"
    STALE = "stale"
    NOT_INSTALLED = "not_installed"


@dataclass
class VersionCheck:
    """Outcome of comparing the installed manifest with an archive name."""

    status: VersionStatus
    remote_version: str
    installed_version: Optional[str] = None

    @property
    def needs_update(self) -> bool:
        return self.status is not VersionStatus.CURRENT


def read_installed_version(manifest_path: Path) -> str:
    """Return the version token declared in *manifest_path*.

    Raises:
        NoLocalVersionError: If the file cannot be read or has no version line.
    """
    try:
        with manifest_path.open("r", encoding="utf-8", errors="replace") as fh:
            for line in fh:
                if VERSION_MARKER in line:
                    tokens = line.split()
                    # The marker is a substring of the line so tokens is non-empty.
                    return tokens[-1]
    except OSError as e:
        raise NoLocalVersionError(manifest_path, e.strerror or str(e)) from e

    raise NoLocalVersionError(manifest_path, f"no line containing {VERSION_MARKER!r}")


def remote_version(archive_name: str) -> str:
    """Return the version token of an archive name like ``elvui-11.27.zip``."""
    last = archive_name.split("-")[-1]
    return last.removesuffix(".zip")


def compare_versions(manifest_path: Path, archive_name: str) -> VersionCheck:
    """Compare the installed manifest at *manifest_path* against *archive_name*."""
    remote = remote_version(archive_name)
    try:
        installed = read_installed_version(manifest_path)
    except NoLocalVersionError as e:
        logger.info("%s, treating as not installed", e)
        return VersionCheck(status=VersionStatus.NOT_INSTALLED, remote_version=remote)

    status = VersionStatus.CURRENT if installed == remote else VersionStatus.STALE
    logger.info("Installed version %s, remote version %s (%s)", installed, remote, status.value)
    return VersionCheck(status=status, remote_version=remote, installed_version=installed)
