# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semversion tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_project(tmp_path: Path):
    """Return a factory that writes a pyproject.toml into a fresh directory."""

    def _make(version: str = "1.0.0", tool_section: str = "") -> Path:
        project_dir = tmp_path / "test_project"
        project_dir.mkdir(exist_ok=True)
        (project_dir / "pyproject.toml").write_text(
            f"""[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "{version}"
{tool_section}
"""
        )
        return project_dir

    return _make


@pytest.fixture
def semversion_logger():
    """Reset the package logger level, restoring it after ``semversion -v`` runs."""
    logger = logging.getLogger("semversion")
    level = logger.level
    logger.setLevel(logging.NOTSET)
    yield logger
    logger.setLevel(level)
