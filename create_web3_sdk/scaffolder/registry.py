"""Template registry: every file a generated project can contain.

Each ``TemplateEntry`` maps a stable relative path to a rendering function of
``(name, options) -> content`` and a guard deciding whether the file belongs
in the project at all.  Registry order is write order.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from create_web3_sdk.config import GenerationOptions
from create_web3_sdk.utils import dump_json

from . import documents
from .manifest import package_manifest
from .templates import default_renderer

RenderFn = Callable[[str, GenerationOptions], str]
GuardFn = Callable[[GenerationOptions], bool]


def _always(options: GenerationOptions) -> bool:
    return True


def _flag(name: str) -> GuardFn:
    def guard(options: GenerationOptions) -> bool:
        return bool(getattr(options, name))

    guard.__name__ = f"when_{name}"
    return guard


@dataclass(frozen=True)
class TemplateEntry:
    """One generated file: where it goes, how to render it, when to include it."""

    path: str
    render: RenderFn
    when: GuardFn = _always

    def enabled(self, options: GenerationOptions) -> bool:
        return self.when(options)


@dataclass(frozen=True)
class DirectoryRule:
    """A subdirectory created before any file is written."""

    path: str
    when: GuardFn = _always


# ---------------------------------------------------------------------------
# Render function factories
# ---------------------------------------------------------------------------


def template_context(name: str, options: GenerationOptions) -> dict[str, Any]:
    """Jinja2 context shared by every text template."""
    return {
        "project_name": name,
        "run": options.run_prefix,
        **options.model_dump(),
    }


def _jinja(template_name: str) -> RenderFn:
    def render(name: str, options: GenerationOptions) -> str:
        return default_renderer().render(template_name, template_context(name, options))

    render.__name__ = f"render_{template_name}"
    return render


def _json(build: Callable[[], Any]) -> RenderFn:
    def render(name: str, options: GenerationOptions) -> str:
        return dump_json(build())

    render.__name__ = f"render_{build.__name__}"
    return render


def _render_manifest(name: str, options: GenerationOptions) -> str:
    return dump_json(package_manifest(name, options))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

DIRECTORY_RULES: tuple[DirectoryRule, ...] = (
    DirectoryRule("src"),
    DirectoryRule("test"),
    DirectoryRule("tsconfig"),
    DirectoryRule("test/config", _flag("include_fork_tests")),
    DirectoryRule("typechain", _flag("include_contract_bindings")),
    DirectoryRule("typechain/contracts", _flag("include_contract_bindings")),
    DirectoryRule("abis", _flag("include_contract_bindings")),
    DirectoryRule(".changeset", _flag("use_changesets")),
)

TEMPLATE_REGISTRY: tuple[TemplateEntry, ...] = (
    TemplateEntry("tsconfig/base.json", _json(documents.tsconfig_base)),
    TemplateEntry("tsconfig/esm.json", _json(documents.tsconfig_esm)),
    TemplateEntry("tsconfig/cjs.json", _json(documents.tsconfig_cjs)),
    TemplateEntry("tsconfig/types.json", _json(documents.tsconfig_types)),
    TemplateEntry("tsconfig.json", _json(documents.tsconfig_root)),
    TemplateEntry("package.json", _render_manifest),
    TemplateEntry("typedoc.json", _json(documents.typedoc_config)),
    TemplateEntry("biome.json", _json(documents.biome_config)),
    TemplateEntry(".env.example", _jinja("env.example.j2"), _flag("include_fork_tests")),
    TemplateEntry("src/index.ts", _jinja("index.ts.j2")),
    TemplateEntry(
        "test/config/test.config.ts", _jinja("test.config.ts.j2"), _flag("include_fork_tests")
    ),
    TemplateEntry(
        "test/config/test.utils.ts", _jinja("test.utils.ts.j2"), _flag("include_fork_tests")
    ),
    TemplateEntry("test/sdk.test.ts", _jinja("sdk.test.ts.j2")),
    TemplateEntry("abis/ERC20.json", _json(documents.erc20_abi), _flag("include_contract_bindings")),
    TemplateEntry(".changeset/config.json", _json(documents.changeset_config), _flag("use_changesets")),
    TemplateEntry("README.md", _jinja("README.md.j2")),
    TemplateEntry(".gitignore", _jinja("gitignore.j2"), _flag("init_git")),
)


def get_template(path: str) -> TemplateEntry:
    """Look up a registry entry by its relative output path.

    Raises:
        KeyError: If no template writes to *path*.
    """
    for entry in TEMPLATE_REGISTRY:
        if entry.path == path:
            return entry
    raise KeyError(path)
