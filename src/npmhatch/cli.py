"""
npmhatch.cli - Command Line Interface
=====================================

This module provides the command-line interface for npmhatch using Typer.

Flow
----
    welcome banner
    -> check the project name argument
    -> ask for the package name and install preference
    -> create_project (copy, patch package.json, install)
    -> completion message with next steps

Every failure exits with status 1 and a red message on stderr. Failures
after the project directory was created remove it first.

Usage Examples
--------------
    $ npmhatch my-project
    $ npmhatch "My Cool App"
    $ python -m npmhatch @acme/widget
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from npmhatch import __version__
from npmhatch.exceptions import NpmhatchError, UsageError
from npmhatch.generator import TEMPLATE_ROOT, create_project
from npmhatch.prompts import ask_for_options


# =============================================================================
# CLI Application Setup
# =============================================================================

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

app = typer.Typer(
    name="npmhatch",
    help="Create a new JavaScript project from the bundled template.",
    rich_markup_mode="rich",
    add_completion=False,
)

# Console for rich output
console = Console()
err_console = Console(stderr=True)


# =============================================================================
# Messages
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(Panel(
            f"[bold green]npmhatch[/] version [cyan]{__version__}[/]",
            border_style="green",
        ))
        raise typer.Exit()


def print_welcome() -> None:
    """Print the banner shown at startup."""
    console.print()
    console.print(Panel(
        "[bold magenta]✨ Welcome to npmhatch ✨[/]",
        border_style="magenta",
        expand=False,
    ))
    console.print()


def print_error(message: str, error: BaseException | None = None) -> None:
    """
    Print a red error line on stderr.

    Parameters
    ----------
    message : str
        Prefix describing what failed.

    error : BaseException | None
        Appended after the prefix; its ``hint`` is shown dimmed when it
        is an NpmhatchError.
    """
    text = f"[bold red]✗ {message}[/]"
    if error is not None:
        text += f" {escape(str(error))}"
    err_console.print(text)

    hint = getattr(error, "hint", None)
    if hint:
        err_console.print(f"[dim]{escape(hint)}[/]")


def print_completion(dir_name: str, install_deps: bool) -> None:
    """
    Print the success message with the commands to run next.

    The ``npm install`` line only appears when dependencies were not
    installed by the tool.
    """
    console.print()
    console.print("[bold]🎉 Project created![/]")
    console.print()
    console.print("[bold]Next steps:[/]")
    console.print()
    console.print("[dim] # Enter the project directory[/]")
    console.print(f" cd [cyan]{escape(dir_name)}[/]")

    if not install_deps:
        console.print("[dim] # Install dependencies[/]")
        console.print(" npm install")

    console.print("[dim] # Start the development server[/]")
    console.print(" npm run dev")
    console.print()
    console.print("[dim] # Build for production[/]")
    console.print(" npm run build")
    console.print()


# =============================================================================
# Main Command
# =============================================================================

def report_error(error: BaseException) -> None:
    """Print the red failure line matching the kind of ``error``."""
    if isinstance(error, KeyboardInterrupt):
        print_error("Aborted.")
    elif isinstance(error, UsageError):
        print_error(str(error))
    elif isinstance(error, NpmhatchError):
        print_error("Failed to create project:", error)
    else:
        print_error("Unexpected error:", error)


def run(project_name: str | None, *, cwd: Path, template_root: Path = TEMPLATE_ROOT) -> int:
    """
    Execute the whole scaffolding flow and return the exit status.

    Parameters
    ----------
    project_name : str | None
        The positional argument; seeds the default package name.

    cwd : Path
        Directory the project is created in.

    template_root : Path
        Template tree to copy.

    Returns
    -------
    int
        ``EXIT_SUCCESS`` or ``EXIT_FAILURE``.

    Notes
    -----
    Failures after the project directory exists are reported through
    ``create_project``'s ``on_error`` hook, so the error line comes
    before the cleanup output.
    """
    print_welcome()

    reported: list[BaseException] = []

    def on_error(error: BaseException) -> None:
        report_error(error)
        reported.append(error)

    try:
        if not project_name:
            raise UsageError("Project name is required, e.g. npmhatch my-project")

        options = ask_for_options(project_name)
        result = create_project(
            options,
            cwd=cwd,
            template_root=template_root,
            on_error=on_error,
        )

    except (Exception, KeyboardInterrupt) as e:
        if not any(e is error for error in reported):
            report_error(e)
        return EXIT_FAILURE

    print_completion(result.dir_name, options.install_deps)
    return EXIT_SUCCESS


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def main(
    project_name: Annotated[
        str | None,
        typer.Argument(
            metavar="PROJECT_NAME",
            help="Name of the project to create (used as the default package name)",
            show_default=False,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Create a new project from the bundled template.

    Asks for a package name and whether to install dependencies, copies
    the template into [cyan]./<name>[/], and sets the name in package.json.

    [bold]Example:[/]

        npmhatch my-project
    """
    raise typer.Exit(run(project_name, cwd=Path.cwd()))


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
