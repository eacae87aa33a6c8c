"""Command-line entry point for ``create-astreus-agent``.

Collects a ``ProjectConfig`` either from flags or by asking the user, then
hands it to the scaffolder.

Usage::

    create-astreus-agent
    create-astreus-agent my-agent --memory --knowledge --model anthropic
    create-astreus-agent my-agent --template javascript --yes -o ./projects
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.prompt import Confirm, Prompt, PromptBase
from rich.table import Table

from astreus_create import __version__
from astreus_create.config import Settings
from astreus_create.scaffolder import (
    Feature,
    ProjectConfig,
    ProjectGenerator,
    Provider,
    ScaffoldError,
    materialize,
)
from astreus_create.scaffolder.models import FEATURE_CHOICES, PROVIDER_CHOICES
from astreus_create.utils import (
    console,
    create_progress,
    print_banner,
    print_error,
    print_next_steps,
    print_success,
    print_summary_table,
    validate_project_name,
)

TEMPLATES: dict[str, bool] = {"typescript": True, "javascript": False}


class Cancelled(Exception):
    """Raised when the user aborts one of the prompts."""


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-astreus-agent",
        description="Scaffold a new Astreus AI agent project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-astreus-agent\n"
            "  create-astreus-agent my-agent --memory --knowledge --model anthropic\n"
            "  create-astreus-agent my-agent --template javascript --yes\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (prompted for when omitted)",
    )
    parser.add_argument(
        "--features",
        default=None,
        help=f"Comma-separated features: {', '.join(f.value for f in Feature)}",
    )
    parser.add_argument(
        "--memory",
        action="store_true",
        help="Include persistent agent memory",
    )
    parser.add_argument(
        "--knowledge",
        action="store_true",
        help="Include the knowledge base (RAG)",
    )
    parser.add_argument(
        "--model", "--provider",
        dest="provider",
        choices=[p.value for p in Provider],
        default=None,
        help="LLM provider the agent is configured for",
    )
    language = parser.add_mutually_exclusive_group()
    language.add_argument(
        "--template",
        choices=sorted(TEMPLATES),
        default=None,
        help="Language variant of the generated project",
    )
    language.add_argument(
        "--typescript",
        dest="template",
        action="store_const",
        const="typescript",
        help="Shortcut for --template typescript",
    )
    language.add_argument(
        "--javascript",
        dest="template",
        action="store_const",
        const="javascript",
        help="Shortcut for --template javascript",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Accept defaults for every question not answered by a flag",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be generated without writing them",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_feature_list(raw: str) -> list[str]:
    """Parse ``"memory, graph"`` into feature tags.

    Raises:
        ValueError: An entry is not a known feature.
    """
    known = {f.value for f in Feature}
    features: list[str] = []
    for item in raw.split(","):
        tag = item.strip().lower()
        if not tag:
            continue
        if tag not in known:
            raise ValueError(f"Unknown feature: {item.strip()}")
        features.append(tag)
    return features


# ---------------------------------------------------------------------------
# Interactive prompts
# ---------------------------------------------------------------------------


def _ask(prompt_cls: type[PromptBase], *args: Any, **kwargs: Any) -> Any:
    try:
        return prompt_cls.ask(*args, console=console, **kwargs)
    except (KeyboardInterrupt, EOFError) as exc:
        raise Cancelled() from exc


def prompt_name(default: str) -> str:
    while True:
        value = _ask(Prompt, "What is your project name?", default=default).strip()
        error = validate_project_name(value)
        if error is None:
            return value
        print_error(error)


def _print_choices(title: str, choices: dict[str, tuple[str, str]]) -> None:
    table = Table(title=title, show_header=False, box=None, title_justify="left")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Option", style="bold")
    table.add_column("Hint", style="dim")
    for index, (label, hint) in enumerate(choices.values(), start=1):
        table.add_row(str(index), label, hint)
    console.print(table)


def _resolve_choice(token: str, values: list[str]) -> str | None:
    token = token.strip().lower()
    if token.isdigit() and 1 <= int(token) <= len(values):
        return values[int(token) - 1]
    if token in values:
        return token
    return None


def prompt_features() -> list[str]:
    values = [f.value for f in FEATURE_CHOICES]
    _print_choices(
        "Which features do you want to include?",
        {f.value: choice for f, choice in FEATURE_CHOICES.items()},
    )
    while True:
        raw = _ask(
            Prompt,
            "Features (comma-separated numbers or names, blank for none)",
            default="",
            show_default=False,
        )
        selected: list[str] = []
        invalid: list[str] = []
        for token in raw.split(","):
            if not token.strip():
                continue
            tag = _resolve_choice(token, values)
            if tag is None:
                invalid.append(token.strip())
            elif tag not in selected:
                selected.append(tag)
        if not invalid:
            return selected
        print_error(f"Unknown feature(s): {', '.join(invalid)}")


def prompt_provider(default: str) -> str:
    values = [p.value for p in PROVIDER_CHOICES]
    _print_choices(
        "Which LLM provider do you want to use?",
        {p.value: choice for p, choice in PROVIDER_CHOICES.items()},
    )
    default_index = str(values.index(default) + 1) if default in values else "1"
    while True:
        raw = _ask(Prompt, "Provider", default=default_index)
        provider = _resolve_choice(raw, values)
        if provider is not None:
            return provider
        print_error(f"Unknown provider: {raw}")


def prompt_typescript(default: bool) -> bool:
    return bool(_ask(Confirm, "Use TypeScript?", default=default))


# ---------------------------------------------------------------------------
# Config collection
# ---------------------------------------------------------------------------


def collect_config(args: argparse.Namespace, settings: Settings) -> ProjectConfig:
    """Resolve flags and prompts into a ``ProjectConfig``.

    Anything not given as a flag is asked for, unless ``--yes`` was passed,
    in which case the settings' defaults apply.

    Raises:
        Cancelled: The user aborted a prompt.
        ValueError: A flag value is invalid.
    """
    if args.name is not None:
        error = validate_project_name(args.name)
        if error is not None:
            raise ValueError(error)
        name = args.name
    elif args.yes:
        name = settings.default_name
    else:
        name = prompt_name(settings.default_name)

    if args.features is not None or args.memory or args.knowledge:
        features = parse_feature_list(args.features or "")
        if args.memory:
            features.append(Feature.MEMORY.value)
        if args.knowledge:
            features.append(Feature.KNOWLEDGE.value)
    elif args.yes:
        features = []
    else:
        features = prompt_features()

    if args.provider is not None:
        provider = args.provider
    elif args.yes:
        provider = settings.default_provider.value
    else:
        provider = prompt_provider(settings.default_provider.value)

    if args.template is not None:
        typescript = TEMPLATES[args.template]
    elif args.yes:
        typescript = settings.typescript_default
    else:
        typescript = prompt_typescript(settings.typescript_default)

    return ProjectConfig(
        name=name,
        features=features,
        provider=provider,
        typescript=typescript,
    )


def _describe(config: ProjectConfig, location: Path) -> dict[str, str]:
    return {
        "Name": config.name,
        "Features": ", ".join(config.features) or "none",
        "Provider": config.provider,
        "Language": "TypeScript" if config.typescript else "JavaScript",
        "Location": str(location),
    }


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def run(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run the tool and return the process exit code.

    0 on success or cancellation, 1 on invalid input or scaffold failure.
    """
    args = build_parser().parse_args(argv)

    print_banner("create-astreus-agent")

    if settings is None:
        try:
            settings = Settings.from_env()
        except ValidationError as exc:
            print_error(f"Error: {exc}")
            return 1
    output_dir = Path(args.output) if args.output else settings.output_dir

    try:
        config = collect_config(args, settings)
    except Cancelled:
        console.print("[yellow]Operation cancelled[/yellow]")
        return 0
    except (ValueError, ValidationError) as exc:
        print_error(f"Error: {exc}")
        return 1

    if args.dry_run:
        files = ProjectGenerator(config, sdk=settings.sdk).render_files()
        print_summary_table(_describe(config, output_dir.resolve() / config.name), title="Project")
        print_summary_table(
            {path: f"{len(content.encode('utf-8'))} bytes" for path, content in files.items()},
            title="Files (dry run)",
        )
        return 0

    try:
        with create_progress() as progress:
            progress.add_task("Creating project...", total=None)
            project = asyncio.run(materialize(config, output_dir, sdk=settings.sdk))
    except ScaffoldError as exc:
        print_error("Failed to create project")
        print_error(f"Error: {exc}")
        return 1

    print_success("Project created!")
    print_summary_table(_describe(config, project.root), title="Project")
    print_next_steps([f"cd {config.name}", "npm install", "npm run dev"])
    print_success("Happy building! 🚀")
    return 0


def main() -> None:
    """Console-script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
