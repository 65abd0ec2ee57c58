"""Exceptions raised while materializing a project."""

from __future__ import annotations

from pathlib import Path


class MaterializationError(Exception):
    """Base class for every failure that aborts project generation."""


class InvalidProjectNameError(MaterializationError):
    """Raised when the project name cannot be used as a directory name."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Invalid project name {name!r}: {reason}")


class DirectoryExistsError(MaterializationError):
    """Raised when something already occupies the target path."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Cannot create project: {path} already exists")


class FilesystemError(MaterializationError):
    """Raised when creating a directory or writing a file fails."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to write {path}: {reason}")


class ExternalProcessError(MaterializationError):
    """Raised when an external command cannot be started or exits non-zero."""

    def __init__(self, command: str, returncode: int | None = None, detail: str = "") -> None:
        self.command = command
        self.returncode = returncode
        if returncode is None:
            message = f"Could not run `{command}`"
        else:
            message = f"Command `{command}` failed (exit {returncode})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
