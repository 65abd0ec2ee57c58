"""Command-line front-end for ``create-web3-sdk``.

Usage::

    create-web3-sdk my-sdk
    create-web3-sdk my-sdk --contracts --fork-tests --package-manager pnpm
    python -m create_web3_sdk my-sdk --no-git --skip-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError

from create_web3_sdk import __version__
from create_web3_sdk.config import PACKAGE_MANAGERS, GenerationOptions, Settings
from create_web3_sdk.scaffolder import MaterializationError, ProjectMaterializer, build_plan
from create_web3_sdk.utils import print_error, print_file_tree, print_warning


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Create the argument parser, taking defaults from *settings*."""
    parser = argparse.ArgumentParser(
        prog="create-web3-sdk",
        description="CLI tool to scaffold Web3 SDK projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-web3-sdk my-sdk\n"
            "  create-web3-sdk my-sdk --contracts --fork-tests\n"
            "  create-web3-sdk my-sdk --no-git --package-manager npm --skip-install\n"
        ),
    )
    parser.add_argument("project_name", metavar="project-name", help="Name of the SDK project")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--typescript",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Use TypeScript (default: true)",
    )
    parser.add_argument(
        "--git",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Initialize git repository (default: true)",
    )
    parser.add_argument(
        "--contracts",
        action="store_true",
        help="Include typechain contract bindings and an example ERC20 ABI",
    )
    parser.add_argument(
        "--fork-tests",
        action="store_true",
        help="Include an Anvil fork test harness for Base Sepolia",
    )
    parser.add_argument(
        "--changesets",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Set up changesets for versioning (default: true)",
    )
    parser.add_argument(
        "--package-manager",
        choices=PACKAGE_MANAGERS,
        default=settings.package_manager,
        help=f"Package manager for scripts and install (default: {settings.package_manager})",
    )
    parser.add_argument(
        "--skip-install",
        action=argparse.BooleanOptionalAction,
        default=settings.skip_install,
        help=(
            "Do not install dependencies after generating the project "
            f"(default: {str(settings.skip_install).lower()})"
        ),
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the files that would be generated without writing anything",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> GenerationOptions:
    return GenerationOptions(
        use_typescript=args.typescript,
        init_git=args.git,
        include_contract_bindings=args.contracts,
        include_fork_tests=args.fork_tests,
        use_changesets=args.changesets,
        package_manager=args.package_manager,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-web3-sdk`` and ``python -m create_web3_sdk``."""
    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        print_error(f"Invalid environment configuration: {exc.errors()[0]['msg']}")
        sys.exit(1)

    args = build_parser(settings).parse_args(argv)

    if not args.typescript:
        print_warning("JavaScript projects are not supported yet; generating TypeScript.")

    try:
        options = options_from_args(args)
        if args.dry_run:
            plan = build_plan(args.project_name, options)
            print_file_tree(args.project_name, plan.directories, plan.paths)
            return

        materializer = ProjectMaterializer(
            install=not args.skip_install,
            git_command=settings.git_command,
        )
        asyncio.run(materializer.materialize(args.project_name, options))
    except MaterializationError as exc:
        print_error(str(exc))
        sys.exit(1)
    except OSError as exc:
        print_error(exc.strerror or str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
