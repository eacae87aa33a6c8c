"""``package.json`` and ``tsconfig.json`` assembly.

Both files are plain dictionaries serialised as indented JSON.  The manifest
depends only on the project name, the language flag and the SDK package; the
compiler configuration is a fixed template.
"""

from __future__ import annotations

import json
from typing import Any

from .models import ProjectConfig
from .sdk import SdkShape

MANIFEST_VERSION = "0.1.0"
DOTENV_VERSION = "^16.6.1"

TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "@types/node": "^20.19.25",
    "tsx": "^4.19.0",
    "typescript": "^5.8.3",
}


def build_scripts(typescript: bool) -> dict[str, str]:
    """npm scripts for the language variant.

    The untyped variant has no build step and runs the source directly.
    """
    if typescript:
        return {
            "dev": "tsx src/index.ts",
            "build": "tsc",
            "start": "node dist/index.js",
        }
    return {
        "dev": "node src/index.js",
        "start": "node src/index.js",
    }


def build_manifest(config: ProjectConfig, sdk: SdkShape) -> dict[str, Any]:
    """Assemble the ``package.json`` object for *config*."""
    manifest: dict[str, Any] = {
        "name": config.name,
        "version": MANIFEST_VERSION,
        "type": "module",
        "scripts": build_scripts(config.typescript),
        "dependencies": {
            sdk.package: sdk.package_version,
            "dotenv": DOTENV_VERSION,
        },
    }
    if config.typescript:
        manifest["devDependencies"] = dict(TYPESCRIPT_DEV_DEPENDENCIES)
    return manifest


def build_tsconfig() -> dict[str, Any]:
    """Fixed compiler configuration for the typed variant."""
    return {
        "compilerOptions": {
            "target": "ES2020",
            "module": "ESNext",
            "moduleResolution": "node",
            "esModuleInterop": True,
            "strict": True,
            "outDir": "dist",
            "rootDir": "src",
            "skipLibCheck": True,
        },
        "include": ["src/**/*.ts"],
        "exclude": ["node_modules", "dist"],
    }


def dump_json(data: dict[str, Any]) -> str:
    """Serialise *data* with two-space indentation and a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
