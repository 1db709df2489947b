"""
npmhatch.generator - Project Generation Pipeline
================================================

This module turns a set of prompt answers into a project on disk. It
copies the bundled template, patches package.json, and optionally runs
the package manager.

Architecture
------------
The generator follows a linear pipeline:

    1. Resolve the destination (once)
    2. Refuse to continue if the destination exists
    3. Copy the template tree
    4. Set the "name" field in package.json
    5. Run the install command (optional)

If any step from 3 onward fails, or the user presses Ctrl+C, the
destination directory is deleted before the error is re-raised. A
directory that existed before the run is never touched.

Usage Example
-------------
>>> from pathlib import Path
>>> from npmhatch.generator import create_project
>>> from npmhatch.models import ScaffoldOptions
>>>
>>> options = ScaffoldOptions(package_name="my-app", install_deps=False)
>>> result = create_project(options, cwd=Path.cwd())
>>> result.project_path.name
'my-app'

See Also
--------
- models.py: ScaffoldOptions, InstallerSettings, GenerationResult
- template/: the files copied into every new project
"""

from __future__ import annotations

import contextlib
import json
import os
import shutil
import signal
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape

from npmhatch.exceptions import (
    DestinationExistsError,
    InstallError,
    ManifestError,
    TemplateCopyError,
)
from npmhatch.models import GenerationResult, InstallerSettings, ScaffoldOptions


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


# =============================================================================
# Module-Level Configuration
# =============================================================================

# Console for rich output
console = Console()

# Bundled template shipped inside the package
TEMPLATE_ROOT = Path(__file__).parent / "template"

MANIFEST_NAME = "package.json"


# =============================================================================
# Template Copy
# =============================================================================

def copy_template(src: Path, dest: Path) -> list[Path]:
    """
    Recursively copy the template tree to ``dest``.

    Parameters
    ----------
    src : Path
        Template root. Read only.

    dest : Path
        Destination directory. Must not exist yet; it is created here.

    Returns
    -------
    list[Path]
        Every file created under ``dest``, sorted.

    Raises
    ------
    TemplateCopyError
        If ``src`` is not a directory or any copy operation fails. The
        original ``OSError`` is chained as ``__cause__``. Partially copied
        files are left for the caller to clean up.
    """
    src = Path(src)
    dest = Path(dest)

    if not src.is_dir():
        raise TemplateCopyError(f"Template directory not found: {src}")

    try:
        shutil.copytree(src, dest)
    except OSError as exc:
        raise TemplateCopyError(f"Failed to copy template: {exc}") from exc

    return sorted(path for path in dest.rglob("*") if path.is_file())


# =============================================================================
# Manifest Patching
# =============================================================================

def update_package_json(dest: Path, project_name: str) -> dict[str, Any]:
    """
    Set the ``name`` field of ``dest/package.json``.

    Other keys keep their values and order. The file is written back with
    two-space indentation and a trailing newline.

    Parameters
    ----------
    dest : Path
        Project directory containing package.json.

    project_name : str
        Value for the ``name`` field.

    Returns
    -------
    dict[str, Any]
        The manifest as written.

    Raises
    ------
    ManifestError
        If the file is missing, unreadable, not a JSON object, or cannot
        be written.
    """
    manifest_path = Path(dest) / MANIFEST_NAME

    try:
        text = manifest_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Cannot read {MANIFEST_NAME}: {exc}") from exc

    try:
        manifest = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {MANIFEST_NAME}: {exc}") from exc

    if not isinstance(manifest, dict):
        raise ManifestError(f"{MANIFEST_NAME} must contain a JSON object")

    manifest["name"] = project_name

    try:
        manifest_path.write_text(
            json.dumps(manifest, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        raise ManifestError(f"Cannot write {MANIFEST_NAME}: {exc}") from exc

    return manifest


# =============================================================================
# Dependency Installation
# =============================================================================

def start_installer(dest: Path, command: str = "npm install") -> subprocess.Popen[bytes]:
    """
    Spawn the install command in ``dest`` and return its process handle.

    The command runs through the shell with all standard streams
    redirected to the null device. On POSIX it gets its own process
    group so the whole tree can be killed.
    """
    return subprocess.Popen(
        command,
        cwd=dest,
        shell=True,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=os.name == "posix",
    )


def _kill_installer(process: subprocess.Popen[bytes]) -> None:
    if os.name == "posix":
        with contextlib.suppress(ProcessLookupError):
            os.killpg(process.pid, signal.SIGKILL)
    else:
        process.kill()
    process.wait()


def install_dependencies(dest: Path, settings: InstallerSettings | None = None) -> None:
    """
    Run the package manager install command and wait for it to exit.

    Parameters
    ----------
    dest : Path
        Working directory for the installer.

    settings : InstallerSettings | None
        Command and optional timeout. Defaults to ``npm install`` with no
        timeout.

    Raises
    ------
    InstallError
        If the installer cannot start, exits non-zero, or times out.

    Notes
    -----
    Output is discarded, never streamed. There is no retry.
    """
    settings = settings or InstallerSettings()

    try:
        process = start_installer(dest, settings.command)
    except OSError as exc:
        raise InstallError(f"Could not start '{settings.command}': {exc}") from exc

    try:
        returncode = process.wait(timeout=settings.timeout)
    except subprocess.TimeoutExpired as exc:
        _kill_installer(process)
        raise InstallError(
            f"'{settings.command}' timed out after {settings.timeout:g}s",
            timed_out=True,
        ) from exc
    except KeyboardInterrupt:
        _kill_installer(process)
        raise

    if returncode != 0:
        raise InstallError(
            f"'{settings.command}' failed with exit code {returncode}",
            returncode=returncode,
            hint="Decline the install step and run it yourself to see the full output.",
        )


# =============================================================================
# Progress Reporting
# =============================================================================

@contextlib.contextmanager
def _step(message: str, done: str, failed: str, *, verbose: bool) -> Iterator[None]:
    if not verbose:
        yield
        return

    try:
        with console.status(f"[bold]{message}[/]"):
            yield
    except (Exception, KeyboardInterrupt):
        console.print(f"[red]✗[/] {failed}")
        raise

    console.print(f"[green]✓[/] {done}")


def remove_destination(project_path: Path, *, verbose: bool = True) -> None:
    """
    Delete a partially created project directory.

    Errors from the deletion propagate unchanged.
    """
    with _step("Cleaning up...", "Cleanup complete", "Cleanup failed", verbose=verbose):
        shutil.rmtree(project_path)


# =============================================================================
# Main Generation Function
# =============================================================================

def create_project(
    options: ScaffoldOptions,
    *,
    cwd: Path,
    template_root: Path = TEMPLATE_ROOT,
    settings: InstallerSettings | None = None,
    verbose: bool = True,
    on_error: Callable[[BaseException], None] | None = None,
) -> GenerationResult:
    """
    Create a new project from the bundled template.

    Parameters
    ----------
    options : ScaffoldOptions
        Prompt answers: package name and install preference.

    cwd : Path
        Directory the project is created in.

    template_root : Path
        Template tree to copy. Defaults to the bundled template.

    settings : InstallerSettings | None
        Install command and timeout, used only when
        ``options.install_deps`` is true.

    verbose : bool, default=True
        If True, show a spinner and a result line for every step.

    on_error : Callable[[BaseException], None] | None
        Called with the failure before the partial project is removed,
        so the caller can report it ahead of the cleanup output.

    Returns
    -------
    GenerationResult
        Where the project was created and what was done.

    Raises
    ------
    DestinationExistsError
        If the destination already exists. Nothing is created or removed.
    TemplateCopyError, ManifestError, InstallError
        If a step fails. The destination has been removed.
    KeyboardInterrupt
        If the user interrupts a step. The destination has been removed.
    """
    dir_name = options.dir_name
    project_path = options.destination(cwd)

    if project_path.exists():
        raise DestinationExistsError(
            project_path,
            hint="Use a different project name or remove the existing directory.",
        )

    result = GenerationResult(project_path=project_path, dir_name=dir_name)

    try:
        with _step(
            "Creating project...",
            "Project files copied",
            "Project creation failed",
            verbose=verbose,
        ):
            result.files_created = copy_template(template_root, project_path)

        update_package_json(project_path, options.package_name)
        if verbose:
            console.print(
                f"[green]✓[/] Set package name to [cyan]{escape(options.package_name)}[/]"
            )

        if options.install_deps:
            with _step(
                "Installing dependencies...",
                "Dependencies installed",
                "Dependency installation failed",
                verbose=verbose,
            ):
                install_dependencies(project_path, settings)
            result.installed = True

    except (Exception, KeyboardInterrupt) as exc:
        if on_error is not None:
            on_error(exc)
        if project_path.exists():
            remove_destination(project_path, verbose=verbose)
        raise

    return result
