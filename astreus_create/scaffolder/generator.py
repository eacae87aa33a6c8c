"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and materializes a new Astreus agent project:
manifest, compiler configuration (typed variant only), environment template,
ignore file, entry-point source and README.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from .entrypoint import EntryPointBuilder
from .errors import DirectoryExistsError, FilesystemError
from .manifest import build_manifest, build_tsconfig, dump_json
from .models import GeneratedProject, ProjectConfig
from .sdk import ASTREUS_SDK, SdkShape
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Output file names (relative to the project root)
# ---------------------------------------------------------------------------

MANIFEST_FILE = "package.json"
TSCONFIG_FILE = "tsconfig.json"
ENV_EXAMPLE_FILE = ".env.example"
GITIGNORE_FILE = ".gitignore"
README_FILE = "README.md"
SOURCE_DIR = "src"


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectConfig``, generates a project directory containing:
    - ``package.json`` with scripts matching the language variant
    - ``tsconfig.json`` (TypeScript only)
    - ``.env.example`` for the chosen provider
    - ``.gitignore``
    - ``src/index.ts`` or ``src/index.js``
    - ``README.md``

    The target SDK is described by an injected ``SdkShape``; the Astreus
    descriptor is used when none is given.
    """

    def __init__(
        self,
        config: ProjectConfig,
        sdk: SdkShape | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.sdk = sdk or ASTREUS_SDK
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path) -> GeneratedProject:
        """Generate the project under *output_dir*.

        Args:
            output_dir: Parent directory where the project folder will be
                created.  A subdirectory named after the project is created
                inside it.

        Returns:
            The ``GeneratedProject`` describing every written file.

        Raises:
            DirectoryExistsError: The project directory is already present.
                Nothing is written in that case.
            FilesystemError: A directory could not be created or a file
                could not be written.  Files written before the failure are
                left in place.
        """
        project_root = Path(output_dir).resolve() / self.config.name
        if await asyncio.to_thread(project_root.exists):
            raise DirectoryExistsError(project_root)

        files = self.render_files()

        await self._create_directory_structure(project_root)

        written: list[Path] = []
        for relative, content in files.items():
            written.append(await self._write(project_root / relative, content))

        return GeneratedProject(root=project_root, files=written, config=self.config)

    def render_files(self) -> dict[str, str]:
        """Render every output file without touching the filesystem.

        Returns:
            Mapping of POSIX path relative to the project root to file
            content, in write order.
        """
        files: dict[str, str] = {
            MANIFEST_FILE: dump_json(build_manifest(self.config, self.sdk)),
        }
        if self.config.typescript:
            files[TSCONFIG_FILE] = dump_json(build_tsconfig())
        files[ENV_EXAMPLE_FILE] = self.sdk.env_content(self.config.provider)
        files[GITIGNORE_FILE] = self.renderer.render("gitignore.j2", {})

        entrypoint = EntryPointBuilder(self.config, self.sdk, self.renderer)
        files[entrypoint.filename] = entrypoint.build()

        files[README_FILE] = self.renderer.render("README.md.j2", self._readme_context())
        return files

    # -- Context building --------------------------------------------------

    def _readme_context(self) -> dict[str, Any]:
        return {
            "project_name": self.config.name,
            "features": list(self.config.features),
            "docs_url": self.sdk.docs_url,
            "examples_url": self.sdk.examples_url,
        }

    # -- Filesystem --------------------------------------------------------

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the project root and its ``src/`` directory."""
        try:
            await asyncio.to_thread(root.mkdir, parents=True, exist_ok=False)
        except FileExistsError as exc:
            # Lost a race with another process after the pre-flight check.
            raise DirectoryExistsError(root) from exc
        except OSError as exc:
            raise FilesystemError(root, exc) from exc

        source_dir = root / SOURCE_DIR
        try:
            await asyncio.to_thread(source_dir.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(source_dir, exc) from exc

    async def _write(self, path: Path, content: str) -> Path:
        try:
            await asyncio.to_thread(_write_file, path, content)
        except OSError as exc:
            raise FilesystemError(path, exc) from exc
        return path


async def materialize(
    config: ProjectConfig,
    destination_root: str | Path,
    sdk: SdkShape | None = None,
) -> GeneratedProject:
    """Create ``destination_root/config.name`` populated from *config*."""
    return await ProjectGenerator(config, sdk=sdk).generate(destination_root)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
