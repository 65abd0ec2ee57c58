"""create-web3-sdk scaffolder -- generates Web3 SDK starter projects.

Quick usage::

    from create_web3_sdk.config import GenerationOptions
    from create_web3_sdk.scaffolder import ProjectMaterializer, build_plan

    plan = build_plan("my-sdk", GenerationOptions(include_contract_bindings=True))
    project_path = await ProjectMaterializer("/tmp").materialize("my-sdk")
"""

from create_web3_sdk.scaffolder.errors import (
    DirectoryExistsError,
    ExternalProcessError,
    FilesystemError,
    InvalidProjectNameError,
    MaterializationError,
)
from create_web3_sdk.scaffolder.generator import (
    FileEntry,
    LocalFileWriter,
    ProjectMaterializer,
    ProjectPlan,
    build_plan,
    materialize,
    validate_project_name,
)
from create_web3_sdk.scaffolder.registry import DIRECTORY_RULES, TEMPLATE_REGISTRY, TemplateEntry
from create_web3_sdk.scaffolder.templates import TemplateRenderer

__all__ = [
    "DIRECTORY_RULES",
    "DirectoryExistsError",
    "ExternalProcessError",
    "FileEntry",
    "FilesystemError",
    "InvalidProjectNameError",
    "LocalFileWriter",
    "MaterializationError",
    "ProjectMaterializer",
    "ProjectPlan",
    "TEMPLATE_REGISTRY",
    "TemplateEntry",
    "TemplateRenderer",
    "build_plan",
    "materialize",
    "validate_project_name",
]
