"""Static JSON documents written into every generated project.

Each builder returns a fresh ``dict`` so callers can serialise or inspect it
without sharing mutable state.  None of them depend on the project name.
"""

from __future__ import annotations

from typing import Any

TSCONFIG_BASE_PATH = "tsconfig/base.json"


# ---------------------------------------------------------------------------
# TypeScript compiler configs
# ---------------------------------------------------------------------------


def tsconfig_base() -> dict[str, Any]:
    """Shared compiler options; every other tsconfig extends this file."""
    return {
        "compilerOptions": {
            "target": "ES2020",
            "module": "ESNext",
            "moduleResolution": "node",
            "declaration": True,
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "rootDir": "../src",
            "outDir": "../dist",
        },
        "include": ["../src/**/*"],
        "exclude": ["../node_modules", "../dist", "../**/*.test.ts"],
    }


def tsconfig_variant(out_dir: str, **overrides: Any) -> dict[str, Any]:
    """A build variant that extends the base and only changes its output."""
    return {
        "extends": f"../{TSCONFIG_BASE_PATH}",
        "compilerOptions": {**overrides, "outDir": out_dir},
    }


def tsconfig_esm() -> dict[str, Any]:
    return tsconfig_variant("../dist/esm")


def tsconfig_cjs() -> dict[str, Any]:
    return tsconfig_variant("../dist/cjs", module="CommonJS")


def tsconfig_types() -> dict[str, Any]:
    return tsconfig_variant("../dist/types", emitDeclarationOnly=True)


def tsconfig_root() -> dict[str, Any]:
    """Root ``tsconfig.json`` used by editors; defers entirely to the base."""
    return {"extends": f"./{TSCONFIG_BASE_PATH}"}


# ---------------------------------------------------------------------------
# Tooling configs
# ---------------------------------------------------------------------------


def typedoc_config() -> dict[str, Any]:
    return {
        "$schema": "https://typedoc.org/schema.json",
        "entryPoints": ["src/index.ts"],
        "exclude": ["src/test/**/*.ts"],
        "basePath": "src/",
        "includes": "src/",
        "out": "docs",
        "gitRevision": "main",
    }


def biome_config() -> dict[str, Any]:
    return {
        "$schema": "https://biomejs.dev/schemas/1.5.3/schema.json",
        "organizeImports": {"enabled": False},
        "linter": {
            "enabled": True,
            "rules": {
                "recommended": True,
                "suspicious": {"noConsoleLog": "off"},
                "style": {
                    "noNonNullAssertion": "off",
                    "useShorthandArrayType": "off",
                    "noUselessElse": "off",
                    "noUnusedTemplateLiteral": "off",
                    "useSingleVarDeclarator": "off",
                    "noParameterAssign": "off",
                    "useTemplate": "off",
                    "noShoutyConstants": "off",
                },
            },
        },
        "formatter": {
            "enabled": True,
            "formatWithErrors": False,
            "indentStyle": "space",
            "indentWidth": 2,
            "lineWidth": 80,
        },
        "files": {"ignore": ["dist/**/*", "node_modules/**/*"]},
    }


def changeset_config() -> dict[str, Any]:
    return {
        "$schema": "https://unpkg.com/@changesets/config@2.3.1/schema.json",
        "changelog": "@changesets/cli/changelog",
        "commit": False,
        "fixed": [],
        "linked": [],
        "access": "public",
        "baseBranch": "main",
        "updateInternalDependencies": "patch",
        "ignore": [],
    }


# ---------------------------------------------------------------------------
# Contract ABIs
# ---------------------------------------------------------------------------


def _abi_function(
    name: str,
    inputs: list[tuple[str, str]],
    outputs: list[str],
    mutability: str,
) -> dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "stateMutability": mutability,
        "inputs": [{"name": arg, "type": typ} for arg, typ in inputs],
        "outputs": [{"name": "", "type": typ} for typ in outputs],
    }


def _abi_event(name: str, inputs: list[tuple[str, str, bool]]) -> dict[str, Any]:
    return {
        "type": "event",
        "name": name,
        "anonymous": False,
        "inputs": [
            {"name": arg, "type": typ, "indexed": indexed}
            for arg, typ, indexed in inputs
        ],
    }


def erc20_abi() -> list[dict[str, Any]]:
    """The standard ERC-20 interface, used as the typechain input example."""
    return [
        _abi_function("name", [], ["string"], "view"),
        _abi_function("symbol", [], ["string"], "view"),
        _abi_function("decimals", [], ["uint8"], "view"),
        _abi_function("totalSupply", [], ["uint256"], "view"),
        _abi_function("balanceOf", [("account", "address")], ["uint256"], "view"),
        _abi_function(
            "allowance",
            [("owner", "address"), ("spender", "address")],
            ["uint256"],
            "view",
        ),
        _abi_function(
            "transfer",
            [("to", "address"), ("amount", "uint256")],
            ["bool"],
            "nonpayable",
        ),
        _abi_function(
            "approve",
            [("spender", "address"), ("amount", "uint256")],
            ["bool"],
            "nonpayable",
        ),
        _abi_function(
            "transferFrom",
            [("from", "address"), ("to", "address"), ("amount", "uint256")],
            ["bool"],
            "nonpayable",
        ),
        _abi_event(
            "Transfer",
            [("from", "address", True), ("to", "address", True), ("value", "uint256", False)],
        ),
        _abi_event(
            "Approval",
            [
                ("owner", "address", True),
                ("spender", "address", True),
                ("value", "uint256", False),
            ],
        ),
    ]
