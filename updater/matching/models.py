"""Data models for archive link selection."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Candidate:
    """A link considered by the selector, with its derived metadata."""

    link: str
    extension: str
    matches_pattern: bool = False

    @property
    def is_zip(self) -> bool:
        return self.extension == ".zip"
