"""Shared pytest fixtures for the create-web3-sdk test suite.

Provides reusable fixtures for:
- Option presets (defaults, every feature enabled)
- An in-memory recording ``FileWriter``
- A fake ``CommandRunner`` that records invocations instead of spawning processes
"""

from __future__ import annotations

from pathlib import Path

import pytest

from create_web3_sdk.config import GenerationOptions


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@pytest.fixture
def default_options() -> GenerationOptions:
    """TypeScript on, git on, changesets on, contract bindings and fork tests off."""
    return GenerationOptions()


@pytest.fixture
def full_options() -> GenerationOptions:
    """Every optional feature enabled."""
    return GenerationOptions(
        include_contract_bindings=True,
        include_fork_tests=True,
        use_changesets=True,
        init_git=True,
    )


# ---------------------------------------------------------------------------
# Side-effect doubles
# ---------------------------------------------------------------------------


class RecordingWriter:
    """In-memory ``FileWriter`` that keeps an ordered log of operations.

    ``fail_on`` maps a path to the ``OSError`` raised when that path is
    created or written.
    """

    def __init__(self, fail_on: dict[Path, OSError] | None = None) -> None:
        self.events: list[tuple[str, Path]] = []
        self.directories: set[Path] = set()
        self.files: dict[Path, str] = {}
        self.fail_on = fail_on or {}

    async def create_directory(self, path: Path) -> None:
        if path in self.fail_on:
            raise self.fail_on[path]
        if path in self.directories:
            raise FileExistsError(17, "File exists", str(path))
        self.directories.add(path)
        self.events.append(("mkdir", path))

    async def write_file(self, path: Path, content: str) -> None:
        if path in self.fail_on:
            raise self.fail_on[path]
        if path.parent not in self.directories:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        self.files[path] = content
        self.events.append(("write", path))

    @property
    def writes(self) -> list[Path]:
        return [path for kind, path in self.events if kind == "write"]


class FakeRunner:
    """Records commands and returns preset exit codes keyed by program name."""

    def __init__(self, returncodes: dict[str, int] | None = None) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.returncodes = returncodes or {}

    async def __call__(self, cmd: list[str], cwd: Path) -> int:
        self.calls.append((list(cmd), cwd))
        return self.returncodes.get(cmd[0], 0)

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]


@pytest.fixture
def recording_writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()
