"""Addon updater CLI entry-point for all updater operations.

Usage:
    python cli/main.py --help

Commands:
    update   : fetch, version-check, download and install the addon
    check    : report whether an update is available (no download)
    links    : list the zip links found on the index page
    extract  : safely extract a local archive into a directory
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from updater.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import dataclasses
from typing import Optional

import typer

from updater.config import Settings, settings
from updater.errors import UpdaterError
from updater.install.extractor import extract_archive
from updater.logging_utils import setup_logging
from updater.matching.selector import compile_archive_pattern, find_zip_candidates
from updater.pipeline import UpdatePipeline, UpdateResult, UpdateState
from updater.scraper import extract_links, fetch_url

app = typer.Typer(
    name="addon-updater",
    help="Keep a World of Warcraft addon in sync with its vendor download page.",
    no_args_is_help=True,
)


def _settings_for(interface_dir: Optional[Path], addon: Optional[str]) -> Settings:
    """Return ``settings`` with per-invocation overrides applied."""
    overrides: dict[str, object] = {}
    if interface_dir is not None:
        overrides["interface_dir"] = interface_dir
    if addon is not None:
        overrides["addon_name"] = addon
    return dataclasses.replace(settings, **overrides)


def _echo_versions(prefix: str, result: UpdateResult) -> None:
    if result.archive_link:
        typer.echo(f"[{prefix}] Archive   : {result.archive_link}")
    if result.version is not None:
        typer.echo(f"[{prefix}] Installed : {result.version.installed_version or '(none)'}")
        typer.echo(f"[{prefix}] Remote    : {result.version.remote_version}")


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------
@app.command("update")
def update(
    force: bool = typer.Option(False, "--force", help="Install even if the versions match."),
    interface_dir: Optional[Path] = typer.Option(None, "--interface-dir", help="Game Interface directory."),
    addon: Optional[str] = typer.Option(None, "--addon", help="Addon name used in archive filenames."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Download and install the addon if the installed copy is stale."""
    setup_logging(debug)
    config = _settings_for(interface_dir, addon)

    typer.echo(f"[update] Checking {config.index_url} …")
    result = UpdatePipeline(config=config, check_version=not force).run()
    _echo_versions("update", result)

    if result.state is UpdateState.NOT_FOUND:
        typer.echo(f"[update] {config.addon_name} zip pattern was not found, exiting.")
    elif result.state is UpdateState.ALREADY_CURRENT:
        typer.echo(f"[update] {config.addon_name} is already up to date.")
    elif result.state is UpdateState.UPDATED:
        typer.echo(f"[update] Installed {len(result.written)} paths into {config.addons_dir}")
        for warning in result.warnings:
            typer.echo(f"[update] Warning: {warning}")
    else:
        typer.echo(f"[update] Failed: {result.reason}")
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------
@app.command("check")
def check(
    interface_dir: Optional[Path] = typer.Option(None, "--interface-dir", help="Game Interface directory."),
    addon: Optional[str] = typer.Option(None, "--addon", help="Addon name used in archive filenames."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Report whether an update is available without downloading anything."""
    setup_logging(debug)
    config = _settings_for(interface_dir, addon)

    result = UpdatePipeline(config=config).check()
    _echo_versions("check", result)

    if result.state is UpdateState.FAILED:
        typer.echo(f"[check] Failed: {result.reason}")
        raise typer.Exit(1)
    messages = {
        UpdateState.NOT_FOUND: "No matching archive found.",
        UpdateState.ALREADY_CURRENT: "Up to date.",
        UpdateState.UPDATE_AVAILABLE: "Update available.",
    }
    typer.echo(f"[check] {messages[result.state]}")


# ---------------------------------------------------------------------------
# links
# ---------------------------------------------------------------------------
@app.command("links")
def links(
    url: Optional[str] = typer.Option(None, help="Index page URL (defaults to the configured one)."),
    addon: Optional[str] = typer.Option(None, "--addon", help="Addon name used in archive filenames."),
) -> None:
    """List the zip links on the index page and whether they match the addon."""
    config = _settings_for(None, addon)
    try:
        pattern = compile_archive_pattern(config.addon_name, config.archive_pattern)
        page = fetch_url(url or config.index_url)
    except UpdaterError as e:
        typer.echo(f"[links] {e}")
        raise typer.Exit(1)

    candidates = find_zip_candidates(extract_links(page.html), pattern)
    if not candidates:
        typer.echo("[links] No .zip links found.")
        return
    for c in candidates:
        marker = "*" if c.matches_pattern else " "
        typer.echo(f"  {marker} {c.link}")


# ---------------------------------------------------------------------------
# extract
# ---------------------------------------------------------------------------
@app.command("extract")
def extract(
    archive: Path = typer.Argument(..., help="Local zip archive."),
    dest: Path = typer.Argument(..., help="Destination directory."),
) -> None:
    """Safely extract a local archive (entries escaping DEST are rejected)."""
    try:
        written = extract_archive(archive, dest)
    except UpdaterError as e:
        typer.echo(f"[extract] {e}")
        raise typer.Exit(1)
    typer.echo(f"[extract] Wrote {len(written)} paths into {dest}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
