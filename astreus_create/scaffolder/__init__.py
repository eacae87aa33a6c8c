"""Astreus project scaffolder -- materializes a new agent project on disk.

This module takes a ``ProjectConfig`` and renders a project directory with a
``package.json``, optional ``tsconfig.json``, ``.env.example``,
``.gitignore``, an entry-point source file and a README.

Quick usage::

    from astreus_create.scaffolder import ProjectConfig, materialize

    config = ProjectConfig(
        name="my-agent",
        features=["memory", "graph"],
        provider="anthropic",
        typescript=True,
    )
    project = await materialize(config, "/tmp/output")
"""

from astreus_create.scaffolder.entrypoint import EntryPointBuilder
from astreus_create.scaffolder.errors import (
    DirectoryExistsError,
    FilesystemError,
    ScaffoldError,
)
from astreus_create.scaffolder.generator import ProjectGenerator, materialize
from astreus_create.scaffolder.models import (
    Feature,
    GeneratedProject,
    ProjectConfig,
    Provider,
)
from astreus_create.scaffolder.sdk import ASTREUS_SDK, SdkShape
from astreus_create.scaffolder.templates import TemplateRenderer

__all__ = [
    "ASTREUS_SDK",
    "DirectoryExistsError",
    "EntryPointBuilder",
    "Feature",
    "FilesystemError",
    "GeneratedProject",
    "ProjectConfig",
    "ProjectGenerator",
    "Provider",
    "ScaffoldError",
    "SdkShape",
    "TemplateRenderer",
    "materialize",
]
