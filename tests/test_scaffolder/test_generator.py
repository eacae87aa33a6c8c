"""Tests for the project materializer.

Covers:
- Full project generation for typed and untyped variants
- Output file set and write order
- Pre-flight directory-exists check
- Filesystem failures surfacing as FilesystemError
- Environment template per provider
- README feature list
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from astreus_create.scaffolder import (
    DirectoryExistsError,
    FilesystemError,
    ProjectConfig,
    ProjectGenerator,
    ScaffoldError,
    SdkShape,
    materialize,
)
from astreus_create.scaffolder.sdk import ASTREUS_ENV_TEMPLATES


pytestmark = pytest.mark.unit


def _read(root: Path, relative: str) -> str:
    return (root / relative).read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestGenerate:
    async def test_typed_project_files(self, typed_config, destination):
        project = await materialize(typed_config, destination)

        assert project.root == destination.resolve() / "demo"
        assert project.root.is_dir()
        assert project.relative_files() == [
            "package.json",
            "tsconfig.json",
            ".env.example",
            ".gitignore",
            "src/index.ts",
            "README.md",
        ]
        for path in project.files:
            assert path.is_file()

    async def test_untyped_project_files(self, untyped_config, destination):
        project = await materialize(untyped_config, destination)

        assert project.relative_files() == [
            "package.json",
            ".env.example",
            ".gitignore",
            "src/index.js",
            "README.md",
        ]
        assert not (project.root / "tsconfig.json").exists()
        assert not (project.root / "src" / "index.ts").exists()

    async def test_directory_tree_is_exact(self, typed_config, destination):
        project = await materialize(typed_config, destination)
        entries = sorted(
            p.relative_to(project.root).as_posix() for p in project.root.rglob("*")
        )
        assert entries == sorted([
            ".env.example",
            ".gitignore",
            "README.md",
            "package.json",
            "src",
            "src/index.ts",
            "tsconfig.json",
        ])

    async def test_demo_scenario(self, typed_config, destination):
        project = await materialize(typed_config, destination)

        manifest = json.loads(_read(project.root, "package.json"))
        assert manifest["scripts"] == {
            "dev": "tsx src/index.ts",
            "build": "tsc",
            "start": "node dist/index.js",
        }
        assert _read(project.root, ".env.example") == "OPENAI_API_KEY=your-api-key-here"
        index = _read(project.root, "src/index.ts")
        assert index.startswith(
            "import { Agent } from '@astreus-ai/astreus';\nimport 'dotenv/config';\n"
        )
        assert "## Features" not in _read(project.root, "README.md")

    async def test_demo2_scenario(self, untyped_config, destination):
        project = await materialize(untyped_config, destination)

        env_lines = _read(project.root, ".env.example").splitlines()
        assert [line for line in env_lines if "=" in line] == [
            "OPENAI_API_KEY=your-openai-key",
            "ANTHROPIC_API_KEY=your-anthropic-key",
            "GEMINI_API_KEY=your-gemini-key",
        ]
        index = _read(project.root, "src/index.js")
        assert "import { Agent, Memory, Knowledge } from '@astreus-ai/astreus';" in index
        assert "    memory: true," in index
        assert "    knowledge: true," in index
        manifest = json.loads(_read(project.root, "package.json"))
        assert "build" not in manifest["scripts"]

    async def test_manifest_name_matches_directory(self, destination):
        config = ProjectConfig(name="My_Agent-2")
        project = await materialize(config, destination)
        assert project.root.name == "My_Agent-2"
        manifest = json.loads(_read(project.root, "package.json"))
        assert manifest["name"] == "My_Agent-2"

    async def test_tsconfig_content(self, typed_config, destination):
        project = await materialize(typed_config, destination)
        tsconfig = json.loads(_read(project.root, "tsconfig.json"))
        assert tsconfig["compilerOptions"]["strict"] is True
        assert tsconfig["include"] == ["src/**/*.ts"]

    async def test_gitignore_content(self, typed_config, destination):
        project = await materialize(typed_config, destination)
        assert _read(project.root, ".gitignore").splitlines() == [
            "node_modules/", "dist/", ".env", "*.log",
        ]

    async def test_readme_lists_features_in_selection_order(self, destination):
        config = ProjectConfig(name="demo", features=["mcp", "memory", "graph"])
        project = await materialize(config, destination)
        readme = _read(project.root, "README.md")
        assert "This project includes:\n- mcp\n- memory\n- graph\n" in readme

    async def test_relative_destination(self, typed_config, destination, monkeypatch):
        monkeypatch.chdir(destination)
        project = await materialize(typed_config, ".")
        assert project.root == destination.resolve() / "demo"

    async def test_returns_config(self, full_config, destination):
        project = await materialize(full_config, destination)
        assert project.config is full_config


# ---------------------------------------------------------------------------
# Provider env template
# ---------------------------------------------------------------------------


class TestEnvTemplate:
    @pytest.mark.parametrize("provider", sorted(ASTREUS_ENV_TEMPLATES))
    async def test_known_provider(self, provider, destination):
        config = ProjectConfig(name="demo", provider=provider)
        project = await materialize(config, destination)
        assert _read(project.root, ".env.example") == ASTREUS_ENV_TEMPLATES[provider]

    async def test_unknown_provider_falls_back(self, destination):
        config = ProjectConfig(name="demo", provider="acme")
        project = await materialize(config, destination)
        assert _read(project.root, ".env.example") == ASTREUS_ENV_TEMPLATES["openai"]
        assert "model: 'gpt-4o'" in _read(project.root, "src/index.ts")


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestDirectoryExists:
    async def test_second_call_fails_and_keeps_first_output(self, typed_config, destination):
        first = await materialize(typed_config, destination)
        before = {p: p.read_text(encoding="utf-8") for p in first.files}

        other = ProjectConfig(name="demo", features=["graph"], provider="ollama", typescript=False)
        with pytest.raises(DirectoryExistsError) as exc_info:
            await materialize(other, destination)

        assert str(exc_info.value) == 'Directory "demo" already exists'
        assert exc_info.value.path == first.root
        assert {p: p.read_text(encoding="utf-8") for p in first.files} == before
        assert not (first.root / "src" / "index.js").exists()

    async def test_existing_file_with_same_name(self, typed_config, destination):
        (destination / "demo").write_text("occupied", encoding="utf-8")
        with pytest.raises(DirectoryExistsError):
            await materialize(typed_config, destination)
        assert (destination / "demo").read_text(encoding="utf-8") == "occupied"

    async def test_nothing_written_when_directory_exists(self, typed_config, destination):
        (destination / "demo").mkdir()
        with patch("astreus_create.scaffolder.generator._write_file") as write:
            with pytest.raises(DirectoryExistsError):
                await materialize(typed_config, destination)
        write.assert_not_called()

    async def test_is_scaffold_error(self, typed_config, destination):
        (destination / "demo").mkdir()
        with pytest.raises(ScaffoldError):
            await materialize(typed_config, destination)


class TestFilesystemError:
    async def test_write_failure_aborts_remaining_steps(self, typed_config, destination):
        from astreus_create.scaffolder import generator as generator_module

        real_write = generator_module._write_file
        written: list[str] = []

        def flaky_write(path: Path, content: str) -> None:
            if path.name == ".env.example":
                raise PermissionError(13, "Permission denied")
            real_write(path, content)
            written.append(path.name)

        with patch.object(generator_module, "_write_file", side_effect=flaky_write):
            with pytest.raises(FilesystemError) as exc_info:
                await materialize(typed_config, destination)

        error = exc_info.value
        assert isinstance(error.__cause__, PermissionError)
        assert error.path.name == ".env.example"
        assert "Permission denied" in str(error)
        # earlier files stay, later ones are never attempted
        assert written == ["package.json", "tsconfig.json"]
        root = destination.resolve() / "demo"
        assert (root / "package.json").exists()
        assert not (root / "README.md").exists()

    async def test_directory_creation_failure(self, typed_config, destination):
        with patch.object(Path, "mkdir", side_effect=OSError(28, "No space left on device")):
            with pytest.raises(FilesystemError) as exc_info:
                await materialize(typed_config, destination)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.path.name == "demo"

    async def test_race_on_directory_creation(self, typed_config, destination):
        with patch.object(Path, "mkdir", side_effect=FileExistsError(17, "File exists")):
            with pytest.raises(DirectoryExistsError):
                await materialize(typed_config, destination)


# ---------------------------------------------------------------------------
# Rendering without writing
# ---------------------------------------------------------------------------


class TestRenderFiles:
    def test_no_filesystem_access(self, typed_config, destination):
        files = ProjectGenerator(typed_config).render_files()
        assert list(files) == [
            "package.json",
            "tsconfig.json",
            ".env.example",
            ".gitignore",
            "src/index.ts",
            "README.md",
        ]
        assert list(destination.iterdir()) == []

    async def test_matches_written_content(self, full_config, destination):
        generator = ProjectGenerator(full_config)
        rendered = generator.render_files()
        project = await generator.generate(destination)
        for relative, content in rendered.items():
            assert _read(project.root, relative) == content

    def test_custom_sdk(self, typed_config):
        shape = SdkShape(package="@acme/agents", docs_url="https://acme.dev")
        files = ProjectGenerator(typed_config, sdk=shape).render_files()
        assert "@acme/agents" in json.loads(files["package.json"])["dependencies"]
        assert "from '@acme/agents';" in files["src/index.ts"]
        assert "(https://acme.dev/docs)" in files["README.md"]
