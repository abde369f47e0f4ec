"""Centralised settings for the addon updater.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_DEFAULT_INTERFACE_DIR = r"C:\Program Files (x86)\World of Warcraft\_retail_\Interface"


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Local installation
    # ------------------------------------------------------------------
    interface_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("UPDATER_INTERFACE_DIR", _DEFAULT_INTERFACE_DIR)
        )
    )
    addon_name: str = field(
        default_factory=lambda: os.environ.get("UPDATER_ADDON_NAME", "elvui")
    )
    addon_folder: str = field(
        default_factory=lambda: os.environ.get("UPDATER_ADDON_FOLDER", "ElvUI")
    )
    manifest_name: str = field(
        default_factory=lambda: os.environ.get("UPDATER_MANIFEST_NAME", "ElvUI.toc")
    )

    @property
    def addons_dir(self) -> Path:
        """Directory the downloaded archive is extracted into."""
        return self.interface_dir / "AddOns"

    @property
    def manifest_path(self) -> Path:
        """The installed addon's ``.toc`` file holding the version line."""
        return self.addons_dir / self.addon_folder / self.manifest_name

    @property
    def download_dir(self) -> Path:
        """Where the archive is persisted between download and cleanup."""
        return self.interface_dir

    # ------------------------------------------------------------------
    # Vendor site
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get("UPDATER_BASE_URL", "https://www.tukui.org")
    )
    index_url: str = field(
        default_factory=lambda: os.environ.get(
            "UPDATER_INDEX_URL", "https://www.tukui.org/download.php?ui=elvui"
        )
    )
    # Regular expression override; derived from addon_name when empty.
    archive_pattern: str | None = field(
        default_factory=lambda: os.environ.get("UPDATER_ARCHIVE_PATTERN") or None
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("UPDATER_USER_AGENT", "addon-updater/1.0")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("UPDATER_LOG_LEVEL", "INFO")
    )


# Module-level singleton, import this everywhere:
#   from updater.config import settings
settings = Settings()
