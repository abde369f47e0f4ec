"""String helpers for recognising file extensions and URL filenames."""

from __future__ import annotations


def _is_alnum(c: str) -> bool:
    return "0" <= c <= "9" or "A" <= c <= "Z" or "a" <= c <= "z"


def classify_extension(s: str, key: str = ".") -> str:
    """Return the extension of *s* (delimiter included), or ``""``.

    Scans backward from the end.  Only ASCII letters and digits may sit
    between the last *key* and the end of the string, so ``"a/elvui-1.0.zip"``
    gives ``".zip"`` while ``"a.zip?x=1"`` and ``"a.tar-gz"`` give ``""``.
    """
    for i in range(len(s) - 1, -1, -1):
        c = s[i]
        if c == key:
            return s[i:]
        if not _is_alnum(c):
            return ""
    return ""


def suffix_after(s: str, key: str = "/") -> str:
    """Return everything after the last *key*, or *s* itself if *key* is absent."""
    idx = s.rfind(key)
    if idx == -1:
        return s
    return s[idx + 1:]
