"""
npmhatch - JavaScript Project Scaffolder
========================================

A CLI tool that creates a new Vite-based JavaScript project from a bundled
template, names it, and optionally installs its dependencies with npm.

Quick Start
-----------
```bash
# Install npmhatch
pip install npmhatch

# Create a new project interactively
npmhatch my-project
```

Example
-------
>>> from pathlib import Path
>>> from npmhatch import ScaffoldOptions, create_project
>>> options = ScaffoldOptions(package_name="@acme/widget", install_deps=False)
>>> create_project(options, cwd=Path.cwd()).project_path.name
'widget'

Architecture
------------
- ``cli``: Typer-based command line interface
- ``prompts``: questionary prompts for the package name and install choice
- ``generator``: template copy, package.json patching, npm install
- ``naming``: npm package name validation and normalization
- ``models``: Pydantic models for options and installer settings
- ``exceptions``: error hierarchy reported by the CLI
- ``template``: files copied into every new project
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from npmhatch.generator import create_project
from npmhatch.models import InstallerSettings, ScaffoldOptions
from npmhatch.naming import (
    is_valid_package_name,
    package_name_to_dir_name,
    to_valid_package_name,
)


__all__ = [
    "InstallerSettings",
    "ScaffoldOptions",
    "__version__",
    "create_project",
    "is_valid_package_name",
    "package_name_to_dir_name",
    "to_valid_package_name",
]
