"""Unit tests for create_web3_sdk.utils.

Covers:
- run_command exit codes, working directory and missing programs
- dump_json layout
- Rich output helpers
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from create_web3_sdk import utils
from create_web3_sdk.utils import dump_json, run_command


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.asyncio
    async def test_success(self):
        assert await run_command([sys.executable, "-c", "pass"]) == 0

    @pytest.mark.asyncio
    async def test_nonzero_exit(self):
        assert await run_command([sys.executable, "-c", "import sys; sys.exit(3)"]) == 3

    @pytest.mark.asyncio
    async def test_runs_in_cwd(self, tmp_path: Path):
        code = await run_command(
            [sys.executable, "-c", "open('marker.txt', 'w').write('here')"],
            cwd=tmp_path,
        )
        assert code == 0
        assert (tmp_path / "marker.txt").read_text() == "here"

    @pytest.mark.asyncio
    async def test_output_is_not_captured(self, capfd):
        await run_command([sys.executable, "-c", "print('from child')"])
        assert "from child" in capfd.readouterr().out

    @pytest.mark.asyncio
    async def test_missing_program_raises(self):
        with pytest.raises(FileNotFoundError):
            await run_command(["definitely-not-a-real-program-xyz"])


# ---------------------------------------------------------------------------
# dump_json
# ---------------------------------------------------------------------------


class TestDumpJson:
    def test_two_space_indent_and_trailing_newline(self):
        text = dump_json({"a": {"b": 1}})
        assert text == '{\n  "a": {\n    "b": 1\n  }\n}\n'

    def test_key_order_preserved(self):
        text = dump_json({"z": 1, "a": 2})
        assert list(json.loads(text)) == ["z", "a"]

    def test_non_ascii_kept(self):
        assert "é" in dump_json({"name": "café"})


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    def test_print_error_is_single_line(self, capsys):
        utils.print_error("boom [not markup]")
        captured = capsys.readouterr()
        assert captured.err.strip() == "Error: boom [not markup]"
        assert captured.out == ""

    def test_print_next_steps(self, capsys):
        utils.print_next_steps("my-sdk", "pnpm")
        out = capsys.readouterr().out
        assert "cd my-sdk" in out
        assert "pnpm install" in out
        assert "pnpm run build" in out

    def test_print_file_tree(self, capsys):
        utils.print_file_tree("demo", ["src", "typechain/contracts"], ["src/index.ts", "README.md"])
        out = capsys.readouterr().out
        assert "demo/" in out
        assert "contracts/" in out
        assert "index.ts" in out
        assert "README.md" in out
