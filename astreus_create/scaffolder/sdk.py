"""Description of the agent SDK targeted by generated projects.

The generator never hard-codes SDK symbol names, model names or provider
environment variables.  They all live on an ``SdkShape`` instance which is
injected into the generator, so a different SDK release only needs a
different descriptor.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .models import Feature, Provider


# ---------------------------------------------------------------------------
# Lookup tables for the Astreus SDK
# ---------------------------------------------------------------------------

ASTREUS_FEATURE_SYMBOLS: dict[str, str] = {
    Feature.MEMORY.value: "Memory",
    Feature.KNOWLEDGE.value: "Knowledge",
    Feature.GRAPH.value: "Graph",
    Feature.PLUGINS.value: "getPlugin",
}

ASTREUS_MODELS: dict[str, str] = {
    Provider.OPENAI.value: "gpt-4o",
    Provider.ANTHROPIC.value: "claude-sonnet-4-20250514",
    Provider.GOOGLE.value: "gemini-2.0-flash",
    Provider.OLLAMA.value: "llama3",
    Provider.MULTIPLE.value: "gpt-4o",
}

ASTREUS_ENV_TEMPLATES: dict[str, str] = {
    Provider.OPENAI.value: "OPENAI_API_KEY=your-api-key-here",
    Provider.ANTHROPIC.value: "ANTHROPIC_API_KEY=your-api-key-here",
    Provider.GOOGLE.value: "GEMINI_API_KEY=your-api-key-here",
    Provider.OLLAMA.value: (
        "# Ollama runs locally, no API key needed\n"
        "OLLAMA_HOST=http://localhost:11434"
    ),
    Provider.MULTIPLE.value: (
        "# Add API keys for providers you want to use\n"
        "OPENAI_API_KEY=your-openai-key\n"
        "ANTHROPIC_API_KEY=your-anthropic-key\n"
        "GEMINI_API_KEY=your-gemini-key"
    ),
}


# ---------------------------------------------------------------------------
# SdkShape
# ---------------------------------------------------------------------------

class SdkShape(BaseModel):
    """Symbol names, construction options and provider tables of an agent SDK."""

    package: str = Field(default="@astreus-ai/astreus", description="npm package name")
    package_version: str = Field(default="latest", description="Manifest version range")
    agent_symbol: str = Field(default="Agent")
    feature_symbols: dict[str, str] = Field(
        default_factory=lambda: dict(ASTREUS_FEATURE_SYMBOLS),
        description="Feature tag -> exported symbol, in import order",
    )
    option_features: list[str] = Field(
        default_factory=lambda: [Feature.MEMORY.value, Feature.KNOWLEDGE.value],
        description="Features that turn into boolean Agent.create() options",
    )
    snippet_features: list[str] = Field(
        default_factory=lambda: [
            Feature.KNOWLEDGE.value,
            Feature.GRAPH.value,
            Feature.PLUGINS.value,
            Feature.SUBAGENTS.value,
        ],
        description="Features with a commented usage example, in emission order",
    )
    agent_only_snippets: list[str] = Field(
        default_factory=lambda: [Feature.SUBAGENTS.value],
        description="Snippet features whose example needs no feature symbol",
    )
    system_prompt: str = Field(default="You are a helpful AI assistant powered by Astreus.")
    models: dict[str, str] = Field(default_factory=lambda: dict(ASTREUS_MODELS))
    env_templates: dict[str, str] = Field(
        default_factory=lambda: dict(ASTREUS_ENV_TEMPLATES)
    )
    default_provider: str = Field(default=Provider.OPENAI.value)
    docs_url: str = Field(default="https://astreus.org")
    examples_url: str = Field(
        default="https://github.com/astreus-ai/astreus/tree/main/examples"
    )

    def resolve_model(self, provider: str) -> str:
        """Model name for *provider*, or the default provider's model."""
        return self.models.get(provider, self.models[self.default_provider])

    def env_content(self, provider: str) -> str:
        """``.env.example`` text for *provider*, or the default provider's text."""
        return self.env_templates.get(
            provider, self.env_templates[self.default_provider]
        )

    def imports_for(self, features: tuple[str, ...] | list[str]) -> list[str]:
        """SDK symbols to import: the agent symbol plus one per mapped feature.

        Symbols follow the descriptor's order, not the selection order, and
        features without a symbol contribute nothing.
        """
        symbols = [self.agent_symbol]
        for feature, symbol in self.feature_symbols.items():
            if feature in features:
                symbols.append(symbol)
        return symbols

    def options_for(self, features: tuple[str, ...] | list[str]) -> list[str]:
        """Construction options switched on by the selected features."""
        return [option for option in self.option_features if option in features]

    def snippets_for(self, features: tuple[str, ...] | list[str]) -> list[str]:
        """Features whose usage example goes into the generated entry point.

        An example that refers to a feature symbol is skipped when the
        descriptor has no symbol for that feature.
        """
        return [
            feature
            for feature in self.snippet_features
            if feature in features
            and (feature in self.feature_symbols or feature in self.agent_only_snippets)
        ]


ASTREUS_SDK = SdkShape()
