"""
npmhatch.models - Pydantic Models for Scaffolding
=================================================

This module defines the data passed between the prompt, the generator and
the CLI. Pydantic gives us validation of the package name at construction
time and immutable option records once the prompt is answered.

Architecture Notes
------------------
    ScaffoldOptions      answers collected from the prompt (frozen)
    InstallerSettings    how the package manager is invoked
    GenerationResult     outcome of create_project

Usage Example
-------------
>>> from npmhatch.models import ScaffoldOptions
>>> options = ScaffoldOptions(package_name="@acme/widget", install_deps=False)
>>> options.dir_name
'widget'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from npmhatch.naming import is_valid_package_name, package_name_to_dir_name


# =============================================================================
# Prompt Answers
# =============================================================================

class ScaffoldOptions(BaseModel):
    """
    Answers captured from the interactive prompt.

    The record is frozen: once the prompt returns, neither the name nor
    the install preference changes for the rest of the run.

    Attributes
    ----------
    package_name : str
        Validated npm package name, written to package.json as-is.

    install_deps : bool
        Whether to run the package manager install step.

    Examples
    --------
    >>> ScaffoldOptions(package_name="my-cool-app").install_deps
    True
    """

    model_config = ConfigDict(frozen=True)

    package_name: str = Field(description="npm package name for the new project")
    install_deps: bool = Field(
        default=True,
        description="Install dependencies right after creating the project",
    )

    @field_validator("package_name")
    @classmethod
    def validate_package_name(cls, v: str) -> str:
        """Reject names that do not match the npm package name grammar."""
        if not is_valid_package_name(v):
            msg = f"Invalid package name '{v}'"
            raise ValueError(msg)
        return v

    @property
    def dir_name(self) -> str:
        """
        Folder name for the project.

        Returns
        -------
        str
            The package name without its ``@scope/`` prefix.
        """
        return package_name_to_dir_name(self.package_name)

    def destination(self, cwd: Path) -> Path:
        """Absolute destination path under ``cwd``."""
        return Path(cwd).resolve() / self.dir_name


# =============================================================================
# Installer Configuration
# =============================================================================

class InstallerSettings(BaseModel):
    """
    How the dependency install step is run.

    Attributes
    ----------
    command : str
        Shell command executed inside the new project directory.

    timeout : float | None
        Seconds to wait before killing the installer. ``None`` waits
        for as long as the installer runs.
    """

    command: str = Field(
        default="npm install",
        min_length=1,
        description="Install command, interpreted by the shell",
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds before the installer is killed",
    )


# =============================================================================
# Result Data Classes
# =============================================================================

@dataclass
class GenerationResult:
    """
    Outcome of a successful create_project call.

    Attributes
    ----------
    project_path : Path
        Absolute path of the created project.

    dir_name : str
        Folder name shown in the completion message.

    files_created : list[Path]
        Every file copied from the template.

    installed : bool
        True if the install step ran and succeeded.
    """

    project_path: Path
    dir_name: str
    files_created: list[Path] = field(default_factory=list)
    installed: bool = False
