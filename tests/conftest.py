"""Shared fixtures: in-memory zip archives and an isolated Settings object."""

from __future__ import annotations

import io
import struct
import zipfile
from pathlib import Path
from typing import Callable, Iterable, Tuple, Union

import pytest

from updater.config import Settings


def _build_zip(entries: Iterable[Tuple[Union[str, zipfile.ZipInfo], bytes]]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries:
            zf.writestr(name, data)
    return buf.getvalue()


def _corrupt_first_member(data: bytes) -> bytes:
    """Overwrite the start of the first entry's compressed stream."""
    offset = zipfile.ZipFile(io.BytesIO(data)).infolist()[0].header_offset
    name_len, extra_len = struct.unpack("<HH", data[offset + 26 : offset + 30])
    start = offset + 30 + name_len + extra_len
    return data[:start] + b"\xff" * 8 + data[start + 8 :]


@pytest.fixture
def zip_bytes() -> Callable[..., bytes]:
    """Return a builder: ``zip_bytes([("a.txt", b"..."), ("dir/", b"")])``."""
    return _build_zip


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[..., Path]:
    """Return a builder that writes the archive to ``tmp_path`` and returns its path."""

    def _make(entries, name: str = "archive.zip") -> Path:
        path = tmp_path / name
        path.write_bytes(_build_zip(entries))
        return path

    return _make


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway Interface directory."""
    interface = tmp_path / "Interface"
    interface.mkdir()
    return Settings(
        interface_dir=interface,
        addon_name="elvui",
        addon_folder="ElvUI",
        manifest_name="ElvUI.toc",
        base_url="https://www.tukui.org",
        index_url="https://www.tukui.org/download.php?ui=elvui",
        archive_pattern=None,
    )


@pytest.fixture
def corrupt_zip_bytes() -> Callable[..., bytes]:
    """Like ``zip_bytes`` but the first entry's deflate stream is garbage.

    The central directory stays intact, so the archive opens and only
    reading the entry fails.
    """

    def _make(entries) -> bytes:
        return _corrupt_first_member(_build_zip(entries))

    return _make
