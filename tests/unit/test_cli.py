"""Tests for the cse-market command line."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cse_market.__main__ import cli


async def _fake_render_once(config, page):
    page.set_text("aspi-index", "12345.68")
    page.set_text("ticker-content", "JKH.N0000: LKR 195.50 (+4.50%)")
    return page


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("cse_market.__main__.setup_logging"):
        yield


def test_render_builtin_page_to_stdout(runner):
    with patch("cse_market.__main__.render_once", side_effect=_fake_render_once):
        result = runner.invoke(cli, ["render"])

    assert result.exit_code == 0, result.output
    assert '<span id="aspi-index">12345.68</span>' in result.output


def test_render_page_to_file(runner, tmp_path):
    source = tmp_path / "index.html"
    source.write_text(
        '<html><body><span id="aspi-index">--</span><span id="ticker-content"></span></body></html>',
        encoding="utf-8",
    )
    output = tmp_path / "out.html"

    with patch("cse_market.__main__.render_once", side_effect=_fake_render_once):
        result = runner.invoke(cli, ["render", str(source), "-o", str(output)])

    assert result.exit_code == 0, result.output
    written = output.read_text(encoding="utf-8")
    assert '<span id="aspi-index">12345.68</span>' in written
    assert "JKH.N0000" in written


def test_render_missing_page_file(runner, tmp_path):
    result = runner.invoke(cli, ["render", str(tmp_path / "missing.html")])

    assert result.exit_code != 0


def test_render_invalid_config(runner, monkeypatch):
    monkeypatch.setenv("CSE_API_BASE_URL", "not-a-url")

    result = runner.invoke(cli, ["render"])

    assert result.exit_code == 1


def test_watch_requires_output(runner):
    result = runner.invoke(cli, ["watch"])

    assert result.exit_code != 0
    assert "--output" in result.output


def test_watch_rejects_short_interval(runner, tmp_path):
    result = runner.invoke(cli, ["watch", "-o", str(tmp_path / "out.html"), "--interval", "10"])

    assert result.exit_code != 0
