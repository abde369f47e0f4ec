"""Update pipeline: one run from the vendor index page to an installed addon.

``UpdatePipeline.run`` orchestrates:

    fetch index → select archive → compare version → fetch archive
        → extract → clean up

and always returns an :class:`~updater.pipeline.models.UpdateResult` instead
of raising, so callers can branch on its ``state``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin, urlsplit

from updater.config import Settings, settings
from updater.errors import CleanupWarning, ExtractionIOError, FetchError, UpdaterError
from updater.install.extractor import extract_archive
from updater.install.filesystem import LocalFileSystem
from updater.install.manifest import compare_versions
from updater.matching.extension import suffix_after
from updater.matching.selector import compile_archive_pattern, select_archive
from updater.pipeline.models import (
    FetcherProtocol,
    FileSystemProtocol,
    UpdateResult,
    UpdateState,
)
from updater.scraper.extractor import extract_links
from updater.scraper.fetcher import HttpFetcher

logger = logging.getLogger(__name__)


class UpdatePipeline:
    """Fetch, compare, download and install a single addon.

    Args:
        config: Settings to use.  Defaults to the module-level ``settings``.
        fetcher: Network capability.  Defaults to :class:`HttpFetcher`.
        filesystem: Write/delete capability.  Defaults to :class:`LocalFileSystem`.
        check_version: When ``False`` the version comparison is skipped and
            the archive is always installed.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        fetcher: Optional[FetcherProtocol] = None,
        filesystem: Optional[FileSystemProtocol] = None,
        check_version: bool = True,
    ) -> None:
        self.settings = config or settings
        self.fetcher = fetcher or HttpFetcher()
        self.filesystem = filesystem or LocalFileSystem()
        self.check_version = check_version

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------
    def _select(self, result: UpdateResult) -> Optional[str]:
        pattern = compile_archive_pattern(self.settings.addon_name, self.settings.archive_pattern)
        page = self.fetcher.fetch_page(self.settings.index_url)
        result.links = extract_links(page.html)
        link = select_archive(result.links, pattern)
        result.archive_link = link
        return link

    def _compare(self, result: UpdateResult, link: str) -> bool:
        """Record the version check on *result*; return whether to update."""
        result.version = compare_versions(self.settings.manifest_path, suffix_after(link, "/"))
        return result.version.needs_update

    def _download(self, result: UpdateResult, link: str) -> Path:
        """Fetch the archive behind *link* and persist it; return its local path."""
        try:
            download_url = urljoin(self.settings.base_url, link)
        except ValueError as e:
            raise FetchError(link, str(e)) from e
        result.download_url = download_url
        archive = self.fetcher.fetch_archive(download_url)

        filename = suffix_after(urlsplit(archive.final_url).path, "/")
        if filename in ("", ".", ".."):
            filename = suffix_after(link, "/")
        archive_path = self.settings.download_dir / filename
        try:
            self.filesystem.write_bytes(archive_path, archive.content)
        except OSError as e:
            raise ExtractionIOError(archive_path, e.strerror or str(e)) from e
        result.archive_path = archive_path
        logger.info("File created -> %s", archive_path)
        return archive_path

    def _cleanup(self, result: UpdateResult, archive_path: Path) -> None:
        logger.info("Cleaning up zip at -> %s", archive_path)
        try:
            self.filesystem.delete(archive_path)
        except OSError as e:
            warning = CleanupWarning(
                f"Could not delete {archive_path}, this requires manual cleanup: {e}"
            )
            logger.warning("%s", warning)
            result.warnings.append(warning)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def run(self) -> UpdateResult:
        """Run the full pipeline and return its terminal state."""
        result = UpdateResult(state=UpdateState.FAILED)
        try:
            # 1 & 2: Fetch index and select the archive link
            link = self._select(result)
            if link is None:
                logger.info("%s zip pattern was not found, exiting.", self.settings.addon_name)
                result.state = UpdateState.NOT_FOUND
                return result

            # 3: Compare versions
            if self.check_version and not self._compare(result, link):
                logger.info("%s is already up to date, exiting", self.settings.addon_name)
                result.state = UpdateState.ALREADY_CURRENT
                return result

            # 4: Fetch and persist the archive
            archive_path = self._download(result, link)

            # 5: Extract into the AddOns directory
            result.written = extract_archive(archive_path, self.settings.addons_dir)
        except UpdaterError as e:
            logger.error("Update failed: %s", e)
            result.error = e
            return result

        # 6: Cleanup never fails the run
        self._cleanup(result, archive_path)
        result.state = UpdateState.UPDATED
        return result

    def check(self) -> UpdateResult:
        """Dry run: select the archive and compare versions without downloading.

        The returned state is ``UPDATE_AVAILABLE`` when an install would
        happen.
        """
        result = UpdateResult(state=UpdateState.FAILED)
        try:
            link = self._select(result)
        except UpdaterError as e:
            logger.error("Update check failed: %s", e)
            result.error = e
            return result

        if link is None:
            result.state = UpdateState.NOT_FOUND
        elif self._compare(result, link):
            result.state = UpdateState.UPDATE_AVAILABLE
        else:
            result.state = UpdateState.ALREADY_CURRENT
        return result


def run_update(check_version: bool = True) -> UpdateResult:
    """Run the pipeline with the default settings and capabilities."""
    return UpdatePipeline(check_version=check_version).run()
