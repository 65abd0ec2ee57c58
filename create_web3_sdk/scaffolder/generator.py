"""Project materializer.

Turns a project name and ``GenerationOptions`` into a Web3 SDK starter
project on disk.  Generation is split in two:

* :func:`build_plan` is pure.  It resolves the template registry into an
  ordered list of directories and ``FileEntry`` values without touching the
  filesystem.
* :class:`ProjectMaterializer` performs the side effects: it creates the
  target directory, writes the plan through a ``FileWriter``, then runs
  ``git init`` and the package manager's install through a ``CommandRunner``.

All paths are resolved against an explicit base directory; the process
working directory is never changed.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Protocol

from create_web3_sdk.config import GenerationOptions
from create_web3_sdk.utils import console, print_failure, print_next_steps, print_success, run_command

from .errors import (
    DirectoryExistsError,
    ExternalProcessError,
    FilesystemError,
    InvalidProjectNameError,
)
from .registry import DIRECTORY_RULES, TEMPLATE_REGISTRY


# ---------------------------------------------------------------------------
# Plan model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileEntry:
    """A single generated file: POSIX path relative to the project root."""

    relative_path: str
    content: str


@dataclass
class ProjectPlan:
    """Everything a generated project contains, in creation order."""

    name: str
    directories: list[str] = field(default_factory=list)
    files: list[FileEntry] = field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [entry.relative_path for entry in self.files]

    def get(self, relative_path: str) -> FileEntry | None:
        for entry in self.files:
            if entry.relative_path == relative_path:
                return entry
        return None


# ---------------------------------------------------------------------------
# Project name validation
# ---------------------------------------------------------------------------

_RESERVED_NAMES = {".", ".."}


def validate_project_name(name: str) -> str:
    """Reject names that cannot be a single directory component.

    The name is otherwise used verbatim: case, underscores and dots are kept.

    Raises:
        InvalidProjectNameError: For empty names, names containing path
            separators, and ``.`` / ``..``.
    """
    if not name or not name.strip():
        raise InvalidProjectNameError(name, "name must not be empty")
    if "/" in name or "\\" in name:
        raise InvalidProjectNameError(name, "name must not contain path separators")
    if name in _RESERVED_NAMES:
        raise InvalidProjectNameError(name, "name must not be '.' or '..'")
    if "\x00" in name:
        raise InvalidProjectNameError(name, "name must not contain NUL bytes")
    return name


# ---------------------------------------------------------------------------
# Plan construction (pure)
# ---------------------------------------------------------------------------


def build_plan(name: str, options: GenerationOptions | None = None) -> ProjectPlan:
    """Resolve the template registry for *name* and *options*.

    The result depends on nothing but the arguments: no filesystem access,
    clock or randomness.
    """
    options = options or GenerationOptions()
    validate_project_name(name)

    directories = [rule.path for rule in DIRECTORY_RULES if rule.when(options)]
    files = [
        FileEntry(entry.path, entry.render(name, options))
        for entry in TEMPLATE_REGISTRY
        if entry.enabled(options)
    ]
    _check_parents(directories, files)
    return ProjectPlan(name=name, directories=directories, files=files)


def _check_parents(directories: list[str], files: list[FileEntry]) -> None:
    """Every file's parent directory must be created by an earlier step."""
    created: set[str] = set()
    for directory in directories:
        parent = str(PurePosixPath(directory).parent)
        if parent != "." and parent not in created:
            raise ValueError(f"Directory {directory!r} is declared before its parent {parent!r}")
        created.add(directory)
    for entry in files:
        parent = str(PurePosixPath(entry.relative_path).parent)
        if parent != "." and parent not in created:
            raise ValueError(f"No directory rule creates {parent!r} for {entry.relative_path!r}")


# ---------------------------------------------------------------------------
# Side-effect seams
# ---------------------------------------------------------------------------


class FileWriter(Protocol):
    """Filesystem capability used by the materializer."""

    async def create_directory(self, path: Path) -> None: ...

    async def write_file(self, path: Path, content: str) -> None: ...


class LocalFileWriter:
    """Writes to the real filesystem, off the event loop."""

    async def create_directory(self, path: Path) -> None:
        await asyncio.to_thread(path.mkdir)

    async def write_file(self, path: Path, content: str) -> None:
        await asyncio.to_thread(_write_file, path, content)


CommandRunner = Callable[[list[str], Path], Awaitable[int]]


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------


class ProjectMaterializer:
    """Creates a project directory from a :class:`ProjectPlan`.

    Steps run strictly in order and stop at the first failure.  Nothing is
    rolled back: a partially written project is left in place for inspection.
    """

    def __init__(
        self,
        base_dir: str | Path | None = None,
        *,
        writer: FileWriter | None = None,
        runner: CommandRunner | None = None,
        install: bool = True,
        git_command: str = "git",
    ) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.writer = writer or LocalFileWriter()
        self.runner = runner or run_command
        self.install = install
        self.git_command = git_command

    # -- Public API --------------------------------------------------------

    async def materialize(
        self, name: str, options: GenerationOptions | None = None
    ) -> Path:
        """Generate the project *name* under the base directory.

        Args:
            name: Project name, used verbatim as the directory name and the
                manifest ``name``.
            options: Which optional template variants to include.

        Returns:
            Absolute path to the generated project root.

        Raises:
            MaterializationError: On invalid names, an occupied target path,
                filesystem failures, or a failing external command.
        """
        options = options or GenerationOptions()
        try:
            with console.status("Creating Web3 SDK project..."):
                plan = build_plan(name, options)
                target = await self._create_root(name)
                await self._write_plan(target, plan)
            # No spinner may be live while a child process owns the terminal.
            if options.init_git:
                console.print("Initializing git repository...")
                await self._run([self.git_command, "init"], target)
            if self.install:
                console.print("Installing dependencies...")
                await self._run([options.package_manager, "install"], target)
        except Exception:
            print_failure("Failed to create project")
            raise

        print_success(f"Successfully created {name}!")
        print_next_steps(name, options.package_manager)
        return target

    # -- Steps -------------------------------------------------------------

    async def _create_root(self, name: str) -> Path:
        target = (self.base_dir / name).absolute()
        if target.exists() or target.is_symlink():
            raise DirectoryExistsError(target)
        try:
            await self.writer.create_directory(target)
        except FileExistsError as exc:
            raise DirectoryExistsError(target) from exc
        except OSError as exc:
            raise FilesystemError(target, exc) from exc
        return target

    async def _write_plan(self, root: Path, plan: ProjectPlan) -> None:
        for directory in plan.directories:
            path = root / directory
            try:
                await self.writer.create_directory(path)
            except OSError as exc:
                raise FilesystemError(path, exc) from exc

        for entry in plan.files:
            path = root / entry.relative_path
            try:
                await self.writer.write_file(path, entry.content)
            except OSError as exc:
                raise FilesystemError(path, exc) from exc

    async def _run(self, cmd: list[str], cwd: Path) -> None:
        cmd_str = " ".join(cmd)
        try:
            returncode = await self.runner(cmd, cwd)
        except OSError as exc:
            raise ExternalProcessError(cmd_str, detail=exc.strerror or str(exc)) from exc
        if returncode != 0:
            raise ExternalProcessError(cmd_str, returncode)


async def materialize(
    name: str,
    options: GenerationOptions | None = None,
    *,
    base_dir: str | Path | None = None,
    install: bool = True,
) -> Path:
    """Convenience wrapper around :meth:`ProjectMaterializer.materialize`."""
    return await ProjectMaterializer(base_dir, install=install).materialize(name, options)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: write UTF-8 content with LF line endings."""
    with path.open("w", encoding="utf-8", newline="\n") as fh:
        fh.write(content)
