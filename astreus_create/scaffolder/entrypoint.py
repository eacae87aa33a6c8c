"""Entry-point source generation (``src/index.ts`` / ``src/index.js``).

The file is composed from four independent blocks, each produced by its own
method and joined with a blank line:

1. ``imports_block``  -- SDK symbols for the selected features plus dotenv
2. ``agent_block``    -- ``main()`` opening and the ``Agent.create`` call
3. ``setup_block``    -- commented usage examples for selected features
4. ``loop_block``     -- the interactive readline loop and ``main()`` call

The emitted code is valid TypeScript and JavaScript alike, so the language
flag only decides the file extension.
"""

from __future__ import annotations

from typing import Any

from .models import ProjectConfig
from .sdk import SdkShape
from .templates import TemplateRenderer

BLOCK_SEPARATOR = "\n\n"
EXIT_COMMAND = "exit"


class EntryPointBuilder:
    """Builds the generated project's entry-point source text."""

    def __init__(
        self,
        config: ProjectConfig,
        sdk: SdkShape,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.sdk = sdk
        self.renderer = renderer or TemplateRenderer()
        self.model = sdk.resolve_model(config.provider)

    @property
    def filename(self) -> str:
        return f"src/index.{self.config.extension}"

    # -- Blocks ------------------------------------------------------------

    def imports_block(self) -> str:
        symbols = ", ".join(self.sdk.imports_for(self.config.features))
        return "\n".join([
            f"import {{ {symbols} }} from '{self.sdk.package}';",
            "import 'dotenv/config';",
        ])

    def agent_block(self) -> str:
        """``main()`` header and agent construction with feature options."""
        options = [
            f"    name: {_js_string(self.config.name)}",
            f"    model: {_js_string(self.model)}",
            f"    systemPrompt: {_js_string(self.sdk.system_prompt)}",
        ]
        options.extend(
            f"    {option}: true" for option in self.sdk.options_for(self.config.features)
        )
        lines = [
            "async function main() {",
            "  console.log('Starting Astreus Agent...\\n');",
            "",
            "  // Create the agent",
            f"  const agent = await {self.sdk.agent_symbol}.create({{",
            ",\n".join(options) + ",",
            "  });",
        ]
        return "\n".join(lines)

    def setup_block(self) -> str:
        """Comment-only examples for the selected features, or ``""``."""
        context = self._template_context()
        snippets = [
            self.renderer.render(f"snippets/{feature}.js.j2", context).strip("\n")
            for feature in self.sdk.snippets_for(self.config.features)
        ]
        return BLOCK_SEPARATOR.join(snippets)

    def loop_block(self) -> str:
        return self.renderer.render(
            "entrypoint/loop.js.j2", self._template_context()
        ).strip("\n")

    # -- Assembly ----------------------------------------------------------

    def blocks(self) -> list[tuple[str, str]]:
        """All ``(block_name, text)`` pairs in file order, including empty ones."""
        return [
            ("imports", self.imports_block()),
            ("agent", self.agent_block()),
            ("setup", self.setup_block()),
            ("loop", self.loop_block()),
        ]

    def build(self) -> str:
        """Render the complete entry-point source with a trailing newline."""
        parts = [text for _, text in self.blocks() if text]
        return BLOCK_SEPARATOR.join(parts) + "\n"

    def _template_context(self) -> dict[str, Any]:
        return {
            "project_name": self.config.name,
            "model": self.model,
            "agent_symbol": self.sdk.agent_symbol,
            "symbols": dict(self.sdk.feature_symbols),
            "exit_command": EXIT_COMMAND,
        }


def _js_string(value: str) -> str:
    """Quote *value* as a single-quoted JavaScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
