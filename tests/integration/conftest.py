"""Fixtures for CLI integration tests."""

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from svcs.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def workspace_dir(tmp_path: Path, monkeypatch):
    """Run the test from inside an empty working tree.

    Returns:
        Path: Path to the working tree root
    """
    monkeypatch.delenv("SVCS_DIR", raising=False)
    monkeypatch.delenv("SVCS_DEBUG", raising=False)

    workspace = tmp_path / "test_workspace"
    workspace.mkdir()

    original_cwd = Path.cwd()
    os.chdir(workspace)
    try:
        yield workspace
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def configured(workspace_dir: Path, runner: CliRunner) -> Path:
    """Working tree with the username set to alice."""
    result = runner.invoke(app, ["config", "alice"])
    assert result.exit_code == 0
    return workspace_dir

