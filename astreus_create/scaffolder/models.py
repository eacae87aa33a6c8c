"""Pydantic v2 models for the project scaffolder.

Defines the closed enumerations offered by the answer collector, the
``ProjectConfig`` consumed by the materializer, and the ``GeneratedProject``
value it returns.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


PROJECT_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Feature(str, Enum):
    """Optional capabilities a generated project may declare."""
    MEMORY = "memory"
    KNOWLEDGE = "knowledge"
    GRAPH = "graph"
    SUBAGENTS = "subagents"
    PLUGINS = "plugins"
    MCP = "mcp"


class Provider(str, Enum):
    """LLM backend the generated project is configured to call."""
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    OLLAMA = "ollama"
    MULTIPLE = "multiple"


# (label, hint) pairs shown by the interactive collector, in menu order.
FEATURE_CHOICES: dict[Feature, tuple[str, str]] = {
    Feature.MEMORY: ("Memory", "Persistent agent memory with vector search"),
    Feature.KNOWLEDGE: ("Knowledge (RAG)", "Document ingestion and retrieval"),
    Feature.GRAPH: ("Graph Workflows", "DAG-based task orchestration"),
    Feature.SUBAGENTS: ("Sub-Agents", "Multi-agent coordination"),
    Feature.PLUGINS: ("Custom Plugins", "Extensible tool system"),
    Feature.MCP: ("MCP Integration", "Model Context Protocol support"),
}

PROVIDER_CHOICES: dict[Provider, tuple[str, str]] = {
    Provider.OPENAI: ("OpenAI", "GPT-4, GPT-3.5"),
    Provider.ANTHROPIC: ("Anthropic", "Claude"),
    Provider.GOOGLE: ("Google", "Gemini"),
    Provider.OLLAMA: ("Ollama", "Local models"),
    Provider.MULTIPLE: ("Multiple providers", "Configure later"),
}


def _tag(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


# ---------------------------------------------------------------------------
# Scaffolder input / output
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """Answers collected from the user, immutable once built.

    ``features`` and ``provider`` are plain tags rather than enum members so
    that values outside the known set reach the materializer, which degrades
    them to documented defaults instead of failing.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        pattern=PROJECT_NAME_PATTERN,
        description="Project name (directory, manifest name and display string)",
    )
    features: tuple[str, ...] = Field(
        default=(),
        description="Selected feature tags, in selection order",
    )
    provider: str = Field(default=Provider.OPENAI.value, description="LLM provider tag")
    typescript: bool = Field(default=True, description="Typed (TypeScript) variant")

    @field_validator("features", mode="before")
    @classmethod
    def _normalise_features(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, (str, bytes)):
            raise ValueError("features must be a list of feature tags, not a string")
        seen: list[str] = []
        for item in value:
            tag = _tag(item)
            if tag not in seen:
                seen.append(tag)
        return tuple(seen)

    @field_validator("provider", mode="before")
    @classmethod
    def _normalise_provider(cls, value: Any) -> str:
        return _tag(value)

    def has_feature(self, feature: Feature | str) -> bool:
        """Return ``True`` if *feature* was selected."""
        return _tag(feature) in self.features

    @property
    def extension(self) -> str:
        """Source file extension for the entry point."""
        return "ts" if self.typescript else "js"


class GeneratedProject(BaseModel):
    """Result of a successful materialization."""

    root: Path = Field(..., description="Absolute path of the created project directory")
    files: list[Path] = Field(default_factory=list, description="Written files, in write order")
    config: ProjectConfig

    def relative_files(self) -> list[str]:
        """Written files relative to the project root, POSIX-style."""
        return [path.relative_to(self.root).as_posix() for path in self.files]
