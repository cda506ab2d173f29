"""Shared pytest fixtures for the create-noiriko test suite.

Provides reusable fixtures for:
- Template renderer and resolvers
- Configuration records (minimal, fully loaded, factory)
- A temporary working directory for CLI runs
- Mock subprocess helpers
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest

from create_noiriko.config import Addon, ProjectConfig
from create_noiriko.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the bundled templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def make_config() -> Callable[..., ProjectConfig]:
    """Factory building a ``ProjectConfig`` named ``my-app`` with overrides."""

    def factory(**overrides: Any) -> ProjectConfig:
        data: dict[str, Any] = {"project_name": "my-app"}
        data.update(overrides)
        return ProjectConfig(**data)

    return factory


@pytest.fixture
def minimal_config(make_config) -> ProjectConfig:
    """Defaults only: pnpm, no auth, no database, no addons."""
    return make_config()


@pytest.fixture
def full_config(make_config) -> ProjectConfig:
    """Clerk + postgres/drizzle + every addon."""
    return make_config(
        auth="clerk",
        database="postgres",
        orm="drizzle",
        addons=[a.value for a in Addon],
    )


# ---------------------------------------------------------------------------
# Working directory
# ---------------------------------------------------------------------------


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary directory set as the process cwd for CLI runs."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Mock Subprocess
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_subprocess():
    """Factory for mock asyncio subprocesses.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """

    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        return mock_proc

    return factory
