"""Shared pytest fixtures for the create-astreus-agent test suite.

Provides reusable fixtures for:
- Temporary destination directories
- Typed and untyped ``ProjectConfig`` instances
- Settings pointing at a temporary output directory
"""

from __future__ import annotations

from pathlib import Path

import pytest

from astreus_create.config import Settings
from astreus_create.scaffolder import ProjectConfig


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """Empty directory new projects are created in (auto-cleanup)."""
    dest = tmp_path / "workspace"
    dest.mkdir()
    yield dest


# ---------------------------------------------------------------------------
# Project configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def typed_config() -> ProjectConfig:
    """The minimal typed project: no features, OpenAI."""
    return ProjectConfig(name="demo", features=[], provider="openai", typescript=True)


@pytest.fixture
def untyped_config() -> ProjectConfig:
    """An untyped project with memory and knowledge on multiple providers."""
    return ProjectConfig(
        name="demo2",
        features=["memory", "knowledge"],
        provider="multiple",
        typescript=False,
    )


@pytest.fixture
def full_config() -> ProjectConfig:
    """A typed project with every feature selected."""
    return ProjectConfig(
        name="everything",
        features=["mcp", "subagents", "plugins", "graph", "knowledge", "memory"],
        provider="anthropic",
        typescript=True,
    )


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(destination: Path) -> Settings:
    """Settings whose output directory is the temporary destination."""
    return Settings(output_dir=destination)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every ``ASTREUS_CREATE_*`` variable from the environment."""
    for var in (
        "ASTREUS_CREATE_OUTPUT_DIR",
        "ASTREUS_CREATE_DEFAULT_NAME",
        "ASTREUS_CREATE_DEFAULT_PROVIDER",
        "ASTREUS_CREATE_TYPESCRIPT",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
