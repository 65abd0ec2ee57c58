"""``package.json`` composition.

The manifest starts from an unconditional base and is extended by an ordered
list of feature patches.  A patch targets one top-level section (``scripts``,
``dependencies`` ...) and is shallow-merged into it only when its option flag
is set, so a disabled feature contributes no keys at all.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from create_web3_sdk.config import GenerationOptions


@dataclass(frozen=True)
class FeaturePatch:
    """An additive change to one manifest section, gated by an option flag."""

    flag: str
    section: str
    values: dict[str, Any] = field(default_factory=dict)

    def applies_to(self, options: GenerationOptions) -> bool:
        return bool(getattr(options, self.flag))


def apply_patches(
    base: dict[str, Any],
    patches: list[FeaturePatch],
    options: GenerationOptions,
) -> dict[str, Any]:
    """Return a copy of *base* with every enabled patch merged in, in order.

    Later patches win on key collisions.  *base* itself is never mutated.
    """
    result = {
        key: dict(value) if isinstance(value, dict) else value
        for key, value in base.items()
    }
    for patch in patches:
        if not patch.applies_to(options):
            continue
        section = result.get(patch.section)
        merged = dict(section) if isinstance(section, dict) else {}
        merged.update(patch.values)
        result[patch.section] = merged
    return result


# ---------------------------------------------------------------------------
# Base manifest
# ---------------------------------------------------------------------------


def _build_pipeline(run: str, *stages: str) -> str:
    return " && ".join(f"{run} {stage}" for stage in stages)


_BUILD_STAGES = ("clean", "build:esm", "build:cjs", "build:types")


def base_manifest(name: str, options: GenerationOptions) -> dict[str, Any]:
    """The unconditional part of the manifest."""
    run = options.run_prefix
    return {
        "name": name,
        "version": "0.1.0",
        "type": "module",
        "main": "./dist/cjs/index.js",
        "module": "./dist/esm/index.js",
        "types": "./dist/types/index.d.ts",
        "exports": {
            ".": {
                "types": "./dist/types/index.d.ts",
                "import": "./dist/esm/index.js",
                "require": "./dist/cjs/index.js",
            }
        },
        "files": ["dist"],
        "scripts": {
            "build": _build_pipeline(run, *_BUILD_STAGES),
            "clean": "rimraf dist",
            "build:esm": "tsc -p tsconfig/esm.json",
            "build:cjs": "tsc -p tsconfig/cjs.json",
            "build:types": "tsc -p tsconfig/types.json",
            "docs": "typedoc",
            "docs:watch": "typedoc --watch",
            "format": "biome format --write ./src",
            "lint": "biome lint ./src",
            "check": "biome check ./src",
            "test": "vitest run",
            "prepare": f"{run} build",
        },
        "dependencies": {
            "viem": "^2.22.12",
        },
        "devDependencies": {
            "@biomejs/biome": "1.5.3",
            "rimraf": "^5.0.0",
            "typedoc": "^0.25.0",
            "typescript": "^5.7.0",
            "vitest": "^3.0.0",
        },
        "peerDependencies": {
            "typescript": "^5.0.0",
        },
    }


# ---------------------------------------------------------------------------
# Feature patches
# ---------------------------------------------------------------------------


def feature_patches(options: GenerationOptions) -> list[FeaturePatch]:
    """Ordered ``(flag, section, values)`` patches for every optional feature."""
    run = options.run_prefix
    return [
        # Contract bindings
        FeaturePatch(
            "include_contract_bindings",
            "scripts",
            {
                "build": _build_pipeline(run, *_BUILD_STAGES, "build:typechain"),
                "build:typechain": (
                    "typechain --target ethers-v6 "
                    "--out-dir typechain/contracts 'abis/*.json'"
                ),
            },
        ),
        FeaturePatch(
            "include_contract_bindings",
            "dependencies",
            {"ethers": "^6.13.0"},
        ),
        FeaturePatch(
            "include_contract_bindings",
            "devDependencies",
            {"typechain": "^8.3.2", "@typechain/ethers-v6": "^0.5.1"},
        ),
        # Anvil fork tests
        FeaturePatch(
            "include_fork_tests",
            "scripts",
            {
                "fork:base-sepolia": "anvil --fork-url https://sepolia.base.org -vvvv",
                "test": (
                    f'concurrently --kill-others --success first "{run} fork:base-sepolia" '
                    '"wait-on tcp:8545 && vitest run"'
                ),
            },
        ),
        FeaturePatch(
            "include_fork_tests",
            "devDependencies",
            {
                "concurrently": "^8.2.2",
                "wait-on": "^7.2.0",
                "@viem/anvil": "^0.0.10",
            },
        ),
        # Changesets
        FeaturePatch(
            "use_changesets",
            "scripts",
            {
                "changeset": "changeset",
                "version": "changeset version",
                "release": f"{run} build && changeset publish --access public",
            },
        ),
        FeaturePatch(
            "use_changesets",
            "devDependencies",
            {"@changesets/cli": "^2.27.11"},
        ),
    ]


def package_manifest(name: str, options: GenerationOptions) -> dict[str, Any]:
    """Compose the full ``package.json`` for *name*."""
    return apply_patches(base_manifest(name, options), feature_patches(options), options)
