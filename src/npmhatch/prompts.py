"""
npmhatch.prompts - Interactive Questions
========================================

Two questions, asked in order with questionary:

    1. Project name (text, re-asked until it is a valid package name)
    2. Install dependencies now? (confirm, default yes)

questionary returns ``None`` from ``.ask()`` when the user presses Ctrl+C
or closes stdin. We turn that into :class:`PromptAbortedError` so the CLI
can exit with a clean message.
"""

from __future__ import annotations

import questionary

from npmhatch.exceptions import PromptAbortedError
from npmhatch.models import ScaffoldOptions
from npmhatch.naming import to_valid_package_name, validate_package_name


def prompt_package_name(initial_target: str) -> str:
    """
    Ask for the package name.

    Parameters
    ----------
    initial_target : str
        The command-line hint; its normalized form is the default answer.

    Returns
    -------
    str
        A name accepted by ``is_valid_package_name``.

    Raises
    ------
    PromptAbortedError
        If the prompt was cancelled.
    """
    result = questionary.text(
        "Project name:",
        default=to_valid_package_name(initial_target),
        validate=validate_package_name,
    ).ask()

    if result is None:
        raise PromptAbortedError("Prompt cancelled")

    return result


def prompt_install_deps() -> bool:
    """Ask whether to install dependencies right away."""
    result = questionary.confirm(
        "Install dependencies now?",
        default=True,
    ).ask()

    if result is None:
        raise PromptAbortedError("Prompt cancelled")

    return result


def ask_for_options(initial_target: str) -> ScaffoldOptions:
    """
    Run the prompt session and return the answers.

    Parameters
    ----------
    initial_target : str
        The positional argument the tool was started with.

    Returns
    -------
    ScaffoldOptions
        Frozen record of both answers.
    """
    package_name = prompt_package_name(initial_target)
    install_deps = prompt_install_deps()
    return ScaffoldOptions(package_name=package_name, install_deps=install_deps)
