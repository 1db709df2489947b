"""
npmhatch.exceptions - Error Hierarchy
=====================================

Every failure the CLI reports to the user maps to a subclass of
:class:`NpmhatchError`. Lower layers (copier, manifest patcher, installer)
wrap the underlying OS or JSON error in one of these classes and chain the
original with ``raise ... from exc``; they never swallow it.

Hierarchy
---------
NpmhatchError
├── UsageError
├── PromptAbortedError
├── DestinationExistsError
├── TemplateCopyError
├── ManifestError
└── InstallError
"""

from __future__ import annotations

from pathlib import Path


class NpmhatchError(Exception):
    """Base exception for all npmhatch errors.

    Parameters
    ----------
    message : str
        Human-readable description shown after the red error prefix.
    hint : str | None
        Optional actionable guidance shown dimmed below the message.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UsageError(NpmhatchError):
    """Raised when the required project name argument is missing."""


class PromptAbortedError(NpmhatchError):
    """Raised when the interactive prompt session is cancelled."""


class DestinationExistsError(NpmhatchError):
    """Raised when the destination directory already exists on disk."""

    def __init__(self, path: Path, *, hint: str | None = None) -> None:
        super().__init__(f"Directory '{path.name}' already exists", hint=hint)
        self.path = path


class TemplateCopyError(NpmhatchError):
    """Raised when the template tree cannot be copied to the destination."""


class ManifestError(NpmhatchError):
    """Raised when package.json cannot be read, parsed, or written."""


class InstallError(NpmhatchError):
    """Raised when the package manager install command does not succeed.

    Attributes
    ----------
    returncode : int | None
        Exit status of the installer, ``None`` if it was killed on timeout.
    timed_out : bool
        True when the installer exceeded its configured timeout.
    """

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        timed_out: bool = False,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.returncode = returncode
        self.timed_out = timed_out
