"""Shared utility functions for create-web3-sdk.

Provides async command execution, JSON serialisation and Rich-based console
reporting used by the scaffolder and the command-line front-end.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.tree import Tree

console = Console()
err_console = Console(stderr=True, soft_wrap=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command asynchronously and wait for it to exit.

    The child inherits the parent's stdin, stdout and stderr, so its output
    reaches the user's terminal directly.  There is no timeout.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.

    Returns:
        The process exit code.

    Raises:
        FileNotFoundError: If the program cannot be found.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* the way generated config files are laid out.

    Two-space indentation, key order preserved and a trailing newline.
    """
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]✔ {escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error line to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_failure(message: str) -> None:
    """Print a red failure marker (used when an operation is abandoned)."""
    err_console.print(f"[bold red]✖ {escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_next_steps(project_name: str, package_manager: str) -> None:
    """Print the fixed "next steps" help block shown after a successful run."""
    run = f"{package_manager} run"
    lines = [
        f"cd {escape(project_name)}",
        f"{package_manager} install     [dim]# Install dependencies[/dim]",
        f"{run} check   [dim]# Format and lint code[/dim]",
        f"{run} test    [dim]# Run tests[/dim]",
        f"{run} build   [dim]# Build the SDK[/dim]",
    ]
    console.print()
    console.print(Panel("\n".join(lines), title="Next steps", title_align="left", expand=False))


def print_file_tree(root_name: str, directories: list[str], files: list[str]) -> None:
    """Print relative POSIX directory and file paths as a Rich tree.

    Directories are added first so that empty ones still show up.
    """
    tree = Tree(f"[bold]{escape(root_name)}/[/bold]")
    nodes: dict[str, Tree] = {"": tree}

    def _add(rel: str, is_dir: bool) -> None:
        parts = rel.split("/")
        for depth in range(1, len(parts) + 1):
            key = "/".join(parts[:depth])
            if key in nodes:
                continue
            parent = nodes["/".join(parts[: depth - 1])]
            label = escape(parts[depth - 1])
            leaf_is_file = depth == len(parts) and not is_dir
            nodes[key] = parent.add(label if leaf_is_file else f"[blue]{label}/[/blue]")

    for directory in directories:
        _add(directory, is_dir=True)
    for path in files:
        _add(path, is_dir=False)
    console.print(tree)
