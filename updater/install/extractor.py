"""Safe zip extraction into an existing directory tree.

Every entry is resolved against the destination and rejected if the cleaned
path does not sit strictly below it, which covers ``..`` segments and
absolute entry names (zip-slip).  Extraction fails fast: the first bad entry
or I/O error aborts the run and files written for earlier entries are left in
place.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
import zipfile
import zlib
from pathlib import Path
from typing import List

from updater.errors import ArchiveOpenError, ExtractionIOError, PathTraversalError

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o644


def _entry_mode(info: zipfile.ZipInfo) -> int:
    """Permission bits stored for *info*, or the default when the archive has none."""
    mode = stat.S_IMODE(info.external_attr >> 16) & 0o777
    return mode or DEFAULT_FILE_MODE


def resolve_entry_path(dest_dir: Path, entry_name: str) -> Path:
    """Return where *entry_name* lands under *dest_dir*.

    Raises:
        PathTraversalError: If the cleaned path is not strictly inside *dest_dir*.
    """
    root = os.path.abspath(dest_dir)
    candidate = os.path.abspath(os.path.join(root, entry_name))
    if not candidate.startswith(root.rstrip(os.sep) + os.sep):
        raise PathTraversalError(entry_name, candidate)
    return Path(candidate)


def _write_entry(archive: zipfile.ZipFile, info: zipfile.ZipInfo, target: Path) -> None:
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(target, flags, _entry_mode(info))
        with os.fdopen(fd, "wb") as out_file, archive.open(info) as src:
            shutil.copyfileobj(src, out_file)
    except OSError as e:
        raise ExtractionIOError(target, e.strerror or str(e)) from e
    except (zipfile.BadZipFile, zlib.error, EOFError) as e:
        raise ExtractionIOError(target, f"corrupt entry {info.filename!r}: {e}") from e
    except RuntimeError as e:
        # encrypted entry, or NotImplementedError for an unsupported compression method
        raise ExtractionIOError(target, f"unreadable entry {info.filename!r}: {e}") from e


def extract_archive(archive_path: Path, dest_dir: Path) -> List[Path]:
    """Decompress every entry of *archive_path* into *dest_dir*.

    Entries are processed in the order stored in the archive index.  Both the
    entry stream and the destination file are closed before moving on, so at
    most two handles are open regardless of archive size.

    Args:
        archive_path: Local zip file.
        dest_dir: Directory to extract into.

    Returns:
        The destination paths written, in archive order.

    Raises:
        ArchiveOpenError: The archive is missing or not a zip file.
        PathTraversalError: An entry would land outside *dest_dir*.
        ExtractionIOError: Creating a directory or writing a file failed, or an
            entry's data cannot be decoded.
    """
    try:
        archive = zipfile.ZipFile(archive_path, "r")
    except (OSError, zipfile.BadZipFile) as e:
        raise ArchiveOpenError(archive_path, str(e)) from e

    written: List[Path] = []
    with archive:
        for info in archive.infolist():
            target = resolve_entry_path(dest_dir, info.filename)

            if info.is_dir():
                try:
                    target.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise ExtractionIOError(target, e.strerror or str(e)) from e
                written.append(target)
                continue

            _write_entry(archive, info, target)
            written.append(target)
            logger.debug("Extracted %s", target)

    logger.info("Extracted %d entries from %s into %s", len(written), archive_path, dest_dir)
    return written
