"""Shared pytest fixtures for magstripe tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

_ENV_VARS = (
    "MAGSTRIPE_CONFIG",
    "MAGSTRIPE_JSON_OUTPUT",
    "MAGSTRIPE_QUIET",
    "MAGSTRIPE_VERBOSE",
    "MAGSTRIPE_DECODE__STRICT",
    "MAGSTRIPE_DECODE__CLEAR_RAW_DATA",
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in an empty directory with no MAGSTRIPE_* env vars.

    Keeps config discovery from picking up a real magstripe.toml.
    """
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
