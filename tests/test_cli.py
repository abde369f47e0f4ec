"""Tests for the addon-updater CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx
import pytest
import respx
from typer.testing import CliRunner

from cli.main import app
from updater.errors import FetchError
from updater.install.manifest import VersionCheck, VersionStatus
from updater.logging_utils import setup_logging
from updater.pipeline import UpdateResult, UpdateState

runner = CliRunner()


class _StubPipeline:
    """Stands in for ``UpdatePipeline``; returns a canned result."""

    result: UpdateResult
    instances: list["_StubPipeline"] = []

    def __init__(self, config=None, fetcher=None, filesystem=None, check_version=True) -> None:
        self.config = config
        self.check_version = check_version
        _StubPipeline.instances.append(self)

    def run(self) -> UpdateResult:
        return self.result

    def check(self) -> UpdateResult:
        return self.result


@pytest.fixture
def stub_pipeline(monkeypatch):
    _StubPipeline.instances = []
    monkeypatch.setattr("cli.main.UpdatePipeline", _StubPipeline)
    return _StubPipeline


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------

def test_update_reports_install(stub_pipeline, tmp_path: Path) -> None:
    stub_pipeline.result = UpdateResult(
        state=UpdateState.UPDATED,
        archive_link="/downloads/elvui-11.28.zip",
        version=VersionCheck(VersionStatus.STALE, "11.28", "11.27"),
        written=[tmp_path / "a", tmp_path / "b"],
    )

    result = runner.invoke(app, ["update", "--interface-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert "Installed 2 paths" in result.output
    assert "Installed : 11.27" in result.output
    assert stub_pipeline.instances[0].config.interface_dir == tmp_path
    assert stub_pipeline.instances[0].check_version is True


def test_update_force_disables_version_check(stub_pipeline) -> None:
    stub_pipeline.result = UpdateResult(state=UpdateState.UPDATED)

    result = runner.invoke(app, ["update", "--force"])

    assert result.exit_code == 0
    assert stub_pipeline.instances[0].check_version is False


def test_update_already_current(stub_pipeline) -> None:
    stub_pipeline.result = UpdateResult(state=UpdateState.ALREADY_CURRENT)

    result = runner.invoke(app, ["update"])

    assert result.exit_code == 0
    assert "already up to date" in result.output


def test_update_not_found_is_not_an_error(stub_pipeline) -> None:
    stub_pipeline.result = UpdateResult(state=UpdateState.NOT_FOUND)

    result = runner.invoke(app, ["update", "--addon", "tukui"])

    assert result.exit_code == 0
    assert "tukui zip pattern was not found" in result.output


def test_update_failure_exits_nonzero(stub_pipeline) -> None:
    stub_pipeline.result = UpdateResult(
        state=UpdateState.FAILED,
        error=FetchError("https://www.tukui.org/", "HTTP 503"),
    )

    result = runner.invoke(app, ["update"])

    assert result.exit_code == 1
    assert "HTTP 503" in result.output


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------

def test_check_update_available(stub_pipeline) -> None:
    stub_pipeline.result = UpdateResult(
        state=UpdateState.UPDATE_AVAILABLE,
        version=VersionCheck(VersionStatus.NOT_INSTALLED, "11.28"),
    )

    result = runner.invoke(app, ["check"])

    assert result.exit_code == 0
    assert "Update available." in result.output
    assert "Installed : (none)" in result.output


# ---------------------------------------------------------------------------
# links
# ---------------------------------------------------------------------------

def test_links_marks_matching_archive() -> None:
    url = "https://example.com/addons"
    html = '<a href="/foo.zip">a</a><a href="/elvui-1.0.zip">b</a><a href="/x.html">c</a>'
    with respx.mock:
        respx.get(url).mock(return_value=httpx.Response(200, text=html))
        result = runner.invoke(app, ["links", "--url", url, "--addon", "elvui"])

    assert result.exit_code == 0
    assert "* /elvui-1.0.zip" in result.output
    assert "/foo.zip" in result.output
    assert "x.html" not in result.output


def test_links_fetch_failure() -> None:
    url = "https://example.com/addons"
    with respx.mock:
        respx.get(url).mock(return_value=httpx.Response(404))
        result = runner.invoke(app, ["links", "--url", url])

    assert result.exit_code == 1


# ---------------------------------------------------------------------------
# extract
# ---------------------------------------------------------------------------

def test_extract_command(make_zip, tmp_path: Path) -> None:
    archive = make_zip([("ElvUI/ElvUI.toc", b"## Version: 1\n")])
    dest = tmp_path / "out"

    result = runner.invoke(app, ["extract", str(archive), str(dest)])

    assert result.exit_code == 0
    assert (dest / "ElvUI" / "ElvUI.toc").exists()


def test_extract_command_into_current_directory(make_zip, tmp_path: Path, monkeypatch) -> None:
    archive = make_zip([("ElvUI/ElvUI.toc", b"## Version: 1\n")])
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)

    result = runner.invoke(app, ["extract", str(archive), "."])

    assert result.exit_code == 0
    assert (work / "ElvUI" / "ElvUI.toc").exists()


def test_extract_command_rejects_traversal(make_zip, tmp_path: Path) -> None:
    archive = make_zip([("../evil.txt", b"x")])

    result = runner.invoke(app, ["extract", str(archive), str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "illegal file path" in result.output
    assert not (tmp_path / "evil.txt").exists()


# ---------------------------------------------------------------------------
# logging
# ---------------------------------------------------------------------------

def test_setup_logging_levels(monkeypatch) -> None:
    setup_logging(debug=True)
    assert logging.getLogger().level == logging.DEBUG

    monkeypatch.setattr("updater.logging_utils.settings.log_level", "warning")
    setup_logging()
    assert logging.getLogger().level == logging.WARNING

    monkeypatch.setattr("updater.logging_utils.settings.log_level", "chatty")
    setup_logging()
    assert logging.getLogger().level == logging.INFO
