"""Tests for the command-line front-end (create_web3_sdk.cli).

Covers:
- Argument defaults and flag parsing
- Option mapping to GenerationOptions
- Dry-run output without side effects
- Error reporting and exit codes
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from create_web3_sdk import __version__
from create_web3_sdk.cli import build_parser, main, options_from_args
from create_web3_sdk.config import GenerationOptions, Settings
from create_web3_sdk.scaffolder import DirectoryExistsError

pytestmark = pytest.mark.unit


@pytest.fixture
def parser():
    return build_parser(Settings())


class TestParser:
    def test_defaults(self, parser):
        args = parser.parse_args(["my-sdk"])
        assert args.project_name == "my-sdk"
        assert args.typescript is True
        assert args.git is True
        assert args.contracts is False
        assert args.fork_tests is False
        assert args.changesets is True
        assert args.package_manager == "bun"
        assert args.skip_install is False
        assert args.dry_run is False

    def test_explicit_positive_flags(self, parser):
        args = parser.parse_args(["my-sdk", "--typescript", "--git"])
        assert args.typescript is True
        assert args.git is True

    def test_negative_flags(self, parser):
        args = parser.parse_args(["my-sdk", "--no-git", "--no-changesets", "--no-typescript"])
        assert args.git is False
        assert args.changesets is False
        assert args.typescript is False

    def test_project_name_required(self, parser, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args([])
        assert exc_info.value.code != 0

    def test_settings_supply_defaults(self):
        parser = build_parser(Settings(package_manager="yarn", skip_install=True))
        args = parser.parse_args(["x"])
        assert args.package_manager == "yarn"
        assert args.skip_install is True

    def test_no_skip_install_overrides_settings(self):
        parser = build_parser(Settings(skip_install=True))
        assert parser.parse_args(["x", "--no-skip-install"]).skip_install is False
        assert parser.parse_args(["x", "--skip-install"]).skip_install is True

    def test_rejects_unknown_package_manager(self, parser, capsys):
        with pytest.raises(SystemExit):
            parser.parse_args(["x", "--package-manager", "pip"])

    def test_version(self, parser, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestOptionsFromArgs:
    def test_mapping(self, parser):
        args = parser.parse_args(
            ["x", "--contracts", "--fork-tests", "--no-git", "--package-manager", "npm"]
        )
        assert options_from_args(args) == GenerationOptions(
            init_git=False,
            include_contract_bindings=True,
            include_fork_tests=True,
            package_manager="npm",
        )


class TestMain:
    def test_dry_run_writes_nothing(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        main(["dry-sdk", "--dry-run", "--contracts"])
        out = capsys.readouterr().out
        assert "package.json" in out
        assert "ERC20.json" in out
        assert not (tmp_path / "dry-sdk").exists()

    def test_invokes_materializer(self):
        with patch("create_web3_sdk.cli.ProjectMaterializer") as cls:
            cls.return_value.materialize = AsyncMock(return_value=Path("/tmp/x"))
            main(["x", "--skip-install", "--no-git"])
        cls.assert_called_once_with(install=False, git_command="git")
        name, options = cls.return_value.materialize.await_args.args
        assert name == "x"
        assert options.init_git is False

    def test_no_skip_install_beats_environment(self):
        with patch.dict("os.environ", {"CREATE_WEB3_SDK_SKIP_INSTALL": "true"}):
            with patch("create_web3_sdk.cli.ProjectMaterializer") as cls:
                cls.return_value.materialize = AsyncMock(return_value=Path("/tmp/x"))
                main(["x", "--no-skip-install"])
        cls.assert_called_once_with(install=True, git_command="git")

    def test_failure_exits_with_one_line_error(self, capsys):
        error = DirectoryExistsError(Path("/tmp/taken"))
        with patch("create_web3_sdk.cli.ProjectMaterializer") as cls:
            cls.return_value.materialize = AsyncMock(side_effect=error)
            with pytest.raises(SystemExit) as exc_info:
                main(["taken"])
        assert exc_info.value.code == 1
        err_lines = capsys.readouterr().err.strip().splitlines()
        assert err_lines == [f"Error: {error}"]

    def test_invalid_name_exits_one(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["a/b", "--dry-run"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: Invalid project name")

    def test_no_typescript_warns(self, capsys, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        main(["ts-sdk", "--no-typescript", "--dry-run"])
        assert "not supported" in capsys.readouterr().out

    def test_bad_environment(self, capsys):
        with patch.dict("os.environ", {"CREATE_WEB3_SDK_PACKAGE_MANAGER": "cargo"}):
            with pytest.raises(SystemExit) as exc_info:
                main(["x", "--dry-run"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error: Invalid environment configuration")
