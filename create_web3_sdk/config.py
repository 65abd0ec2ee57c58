"""create-web3-sdk configuration.

Typed configuration for the scaffolder.  ``GenerationOptions`` is the flag set
that decides which template variants end up in a generated project;
``Settings`` holds the runtime knobs that only affect side effects (which
package manager to invoke, whether to install at all) and can be populated
from environment variables.
"""

from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

PackageManager = Literal["bun", "npm", "pnpm", "yarn"]

PACKAGE_MANAGERS: tuple[str, ...] = ("bun", "npm", "pnpm", "yarn")

_TRUTHY = {"1", "true", "yes", "on"}


class GenerationOptions(BaseModel):
    """Flags controlling which optional template variants are generated.

    Every generated file is a pure function of the project name and an
    instance of this model, so it is frozen once constructed.
    """

    model_config = ConfigDict(frozen=True)

    use_typescript: bool = Field(
        default=True,
        description="Generate a TypeScript project (the only supported mode)",
    )
    init_git: bool = Field(default=True, description="Write .gitignore and run git init")
    include_contract_bindings: bool = Field(
        default=False,
        description="Add typechain directories, an ERC20 ABI and the build:typechain stage",
    )
    include_fork_tests: bool = Field(
        default=False,
        description="Add the Anvil fork test harness (test/config, .env.example)",
    )
    use_changesets: bool = Field(
        default=True,
        description="Add changesets versioning config and release scripts",
    )
    package_manager: PackageManager = Field(
        default="bun",
        description="Runner used in generated scripts, docs and the install step",
    )

    @property
    def run_prefix(self) -> str:
        """Command prefix for running a package script, e.g. ``bun run``."""
        return f"{self.package_manager} run"


class Settings(BaseModel):
    """Runtime settings for the command-line front-end."""

    package_manager: PackageManager = Field(default="bun")
    skip_install: bool = Field(default=False)
    git_command: str = Field(default="git")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            CREATE_WEB3_SDK_PACKAGE_MANAGER, CREATE_WEB3_SDK_SKIP_INSTALL,
            CREATE_WEB3_SDK_GIT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CREATE_WEB3_SDK_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CREATE_WEB3_SDK_PACKAGE_MANAGER"].strip()
        if os.environ.get("CREATE_WEB3_SDK_SKIP_INSTALL"):
            kwargs["skip_install"] = (
                os.environ["CREATE_WEB3_SDK_SKIP_INSTALL"].strip().lower() in _TRUTHY
            )
        if os.environ.get("CREATE_WEB3_SDK_GIT"):
            kwargs["git_command"] = os.environ["CREATE_WEB3_SDK_GIT"]
        return cls(**kwargs)
