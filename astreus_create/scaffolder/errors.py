"""Exceptions raised by the project materializer."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure surfaced by the scaffolder."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class DirectoryExistsError(ScaffoldError):
    """Raised when the destination project directory is already present."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f'Directory "{path.name}" already exists')


class FilesystemError(ScaffoldError):
    """Raised when creating a directory or writing a file fails.

    The originating ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(path, f"Could not write {path}: {reason}")
