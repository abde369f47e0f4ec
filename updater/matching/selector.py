"""Pick the addon archive link out of everything an index page links to.

Selection is two-staged:

    links → zip candidates (extension classifier) → first pattern match

The first match in input order wins so results are reproducible when a page
links the same archive more than once.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from updater.errors import InvalidPatternError, PatternNotFoundError
from updater.matching.extension import classify_extension
from updater.matching.models import Candidate

logger = logging.getLogger(__name__)

ZIP_EXTENSION = ".zip"


def compile_archive_pattern(addon_name: str, override: Optional[str] = None) -> re.Pattern[str]:
    """Compile the archive name pattern.

    By default this matches ``<addon_name>-<version>.zip`` (case-sensitive)
    anywhere in a link, e.g. ``/downloads/elvui-11.27.zip``.

    Raises:
        InvalidPatternError: If *override* is not a valid regular expression.
    """
    if override:
        try:
            return re.compile(override)
        except re.error as e:
            raise InvalidPatternError(override, str(e)) from e
    return re.compile(rf"{re.escape(addon_name)}-[^/]+\.zip")


def find_zip_candidates(links: Iterable[str], pattern: Optional[re.Pattern[str]] = None) -> List[Candidate]:
    """Return the links whose extension is exactly ``.zip``, in input order."""
    candidates: List[Candidate] = []
    for link in links:
        ext = classify_extension(link, ".")
        if ext != ZIP_EXTENSION:
            continue
        matched = bool(pattern.search(link)) if pattern is not None else False
        candidates.append(Candidate(link=link, extension=ext, matches_pattern=matched))
    return candidates


def select_archive(links: Iterable[str], pattern: re.Pattern[str]) -> Optional[str]:
    """Return the first zip link matching *pattern*, or ``None`` if there is none."""
    candidates = find_zip_candidates(links, pattern)
    logger.debug("Possible .zip's -> %s", [c.link for c in candidates])

    for candidate in candidates:
        if candidate.matches_pattern:
            logger.info("Zip found successfully -> %s", candidate.link)
            return candidate.link
    return None


def require_archive(links: Iterable[str], pattern: re.Pattern[str]) -> str:
    """Like :func:`select_archive` but raises :class:`PatternNotFoundError`."""
    selected = select_archive(links, pattern)
    if selected is None:
        raise PatternNotFoundError(pattern.pattern)
    return selected
