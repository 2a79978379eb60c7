"""Shared pytest fixtures for the nodeinit test suite.

Provides reusable fixtures for:
- Temporary project directories
- ``ProjectConfig`` instances for every database
- Mock asyncio subprocesses for the dependency install step
- Silencing the Rich consoles so test output stays readable
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console

from nodeinit.scaffolder.models import Database, PackageManager, ProjectConfig


# ---------------------------------------------------------------------------
# File-system fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """A temporary base directory projects are generated into."""
    base = tmp_path / "workspace"
    base.mkdir()
    return base


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------

@pytest.fixture
def quiet_console():
    """Redirect the shared Rich consoles into an in-memory recorder.

    Yields the stdout console; call ``export_text()`` on it to inspect what
    was printed.  The stderr console is available as ``.err``.
    """
    out = Console(record=True, width=120, force_terminal=False, color_system=None)
    err = Console(record=True, width=120, force_terminal=False, color_system=None, stderr=True)
    out.err = err  # type: ignore[attr-defined]
    with patch("nodeinit.utils.console", out), \
            patch("nodeinit.utils.err_console", err), \
            patch("nodeinit.scaffolder.generator.console", out), \
            patch("nodeinit.cli.console", out), \
            patch("nodeinit.cli.err_console", err), \
            patch("nodeinit.prompts.default_console", out):
        yield out


# ---------------------------------------------------------------------------
# Project configs
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., ProjectConfig]:
    """Factory for ``ProjectConfig`` with installs disabled by default."""

    def factory(**overrides: Any) -> ProjectConfig:
        values: dict[str, Any] = {
            "name": "My App",
            "description": "A test application",
            "version": "0.1.0",
            "author": "Test Author",
            "license": "MIT",
            "database": Database.NONE,
            "package_manager": PackageManager.NPM,
            "install_dependencies": False,
        }
        values.update(overrides)
        return ProjectConfig(**values)

    return factory


@pytest.fixture
def minimal_config(make_config) -> ProjectConfig:
    """A project with no database, npm, and no install."""
    return make_config()


@pytest.fixture(params=[db for db in Database], ids=lambda db: db.value)
def any_database(request) -> Database:
    """Parametrised over every ``Database`` member."""
    return request.param


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances whose
    ``wait()`` resolves to the given return code.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(returncode: int = 0) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


# ---------------------------------------------------------------------------
# Expected output layout
# ---------------------------------------------------------------------------

BASE_FILES: set[str] = {
    "package.json",
    "index.js",
    "configs/database.js",
    "controllers/auth.controller.js",
    "middlewares/auth.middleware.js",
    "models/user.model.js",
    "routes/auth.route.js",
    "utils/jwt.js",
    ".env.example",
    ".gitignore",
    "README.md",
    "uploads/.gitkeep",
}


@pytest.fixture
def expected_files() -> Callable[[ProjectConfig], set[str]]:
    """Return a function computing the expected relative file set for a config."""

    def compute(config: ProjectConfig) -> set[str]:
        files = set(BASE_FILES)
        if config.database is not Database.NONE:
            files.add("scripts/seed-user.js")
        if config.package_manager is PackageManager.PNPM:
            files.add(".npmrc")
        return files

    return compute
