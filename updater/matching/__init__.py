"""Archive link matching package."""

from updater.matching.extension import classify_extension, suffix_after
from updater.matching.models import Candidate
from updater.matching.selector import (
    compile_archive_pattern,
    find_zip_candidates,
    require_archive,
    select_archive,
)

__all__ = [
    "classify_extension",
    "suffix_after",
    "Candidate",
    "compile_archive_pattern",
    "find_zip_candidates",
    "select_archive",
    "require_archive",
]
