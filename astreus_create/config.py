"""create-astreus-agent configuration.

Typed settings for the command-line tool.  All settings use Pydantic v2
models so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from astreus_create.scaffolder.models import PROJECT_NAME_PATTERN, Provider
from astreus_create.scaffolder.sdk import SdkShape

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Defaults used by the answer collector and the materializer.

    Instances are typically created once by the CLI entry point, either with
    built-in defaults or via :meth:`from_env`.
    """

    output_dir: Path = Field(default=Path("."), description="Where new projects are created")
    default_name: str = Field(default="my-astreus-agent", pattern=PROJECT_NAME_PATTERN)
    default_provider: Provider = Field(default=Provider.OPENAI)
    typescript_default: bool = Field(default=True)
    sdk: SdkShape = Field(default_factory=SdkShape)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the settings to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            ASTREUS_CREATE_OUTPUT_DIR, ASTREUS_CREATE_DEFAULT_NAME,
            ASTREUS_CREATE_DEFAULT_PROVIDER, ASTREUS_CREATE_TYPESCRIPT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("ASTREUS_CREATE_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["ASTREUS_CREATE_OUTPUT_DIR"])
        if os.environ.get("ASTREUS_CREATE_DEFAULT_NAME"):
            kwargs["default_name"] = os.environ["ASTREUS_CREATE_DEFAULT_NAME"]
        if os.environ.get("ASTREUS_CREATE_DEFAULT_PROVIDER"):
            kwargs["default_provider"] = os.environ["ASTREUS_CREATE_DEFAULT_PROVIDER"]
        if os.environ.get("ASTREUS_CREATE_TYPESCRIPT"):
            kwargs["typescript_default"] = (
                os.environ["ASTREUS_CREATE_TYPESCRIPT"].strip().lower() in _TRUTHY
            )
        return cls(**kwargs)
