"""
npmhatch.naming - Package Name Rules
====================================

Pure string helpers for npm package names. The grammar is built from two
named sub-rules so each can be checked on its own:

    SCOPE_PATTERN         @owner            (optional, followed by "/")
    NAME_SEGMENT_PATTERN  name

    PACKAGE_NAME_PATTERN  (SCOPE "/")? NAME_SEGMENT

Examples
--------
>>> is_valid_package_name("@acme/widget")
True
>>> to_valid_package_name("My Cool App")
'my-cool-app'
>>> package_name_to_dir_name("@acme/widget")
'widget'
"""

from __future__ import annotations

import re


# =============================================================================
# Grammar
# =============================================================================

SCOPE_PATTERN = r"@[a-z0-9\-*~][a-z0-9\-*._~]*"
NAME_SEGMENT_PATTERN = r"[a-z0-9\-~][a-z0-9\-._~]*"
PACKAGE_NAME_PATTERN = rf"(?:{SCOPE_PATTERN}/)?{NAME_SEGMENT_PATTERN}"

_SCOPE_RE = re.compile(SCOPE_PATTERN)
_NAME_SEGMENT_RE = re.compile(NAME_SEGMENT_PATTERN)
_PACKAGE_NAME_RE = re.compile(PACKAGE_NAME_PATTERN)

_WHITESPACE_RUN = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE = re.compile(r"^[._]")
_INVALID_RUN = re.compile(r"[^a-z0-9\-~]+")

INVALID_NAME_MESSAGE = "Project name is not a valid npm package name"


def is_valid_scope(scope: str) -> bool:
    """Return True if ``scope`` is a valid ``@owner`` segment (without ``/``)."""
    return _SCOPE_RE.fullmatch(scope) is not None


def is_valid_name_segment(segment: str) -> bool:
    """Return True if ``segment`` is a valid unscoped package name."""
    return _NAME_SEGMENT_RE.fullmatch(segment) is not None


def is_valid_package_name(name: str) -> bool:
    """
    Check ``name`` against the npm package name grammar.

    Parameters
    ----------
    name : str
        Candidate package name, scoped (``@owner/name``) or plain.

    Returns
    -------
    bool
        True if the whole string matches.
    """
    return _PACKAGE_NAME_RE.fullmatch(name) is not None


def to_valid_package_name(raw: str) -> str:
    """
    Turn free-form text into a suggested package name.

    The steps run in a fixed order: strip, lowercase, replace whitespace
    runs with ``-``, drop one leading ``.`` or ``_``, then replace every
    run of characters outside ``[a-z0-9-~]`` with a single ``-``.

    The result is only used as a prompt default; user input is validated,
    never coerced.

    Parameters
    ----------
    raw : str
        Text to normalize, typically the command-line argument.

    Returns
    -------
    str
        The normalized name. Applying the function again returns it unchanged.

    Examples
    --------
    >>> to_valid_package_name("  My Cool App ")
    'my-cool-app'
    >>> to_valid_package_name("_private")
    'private'
    """
    name = raw.strip().lower()
    name = _WHITESPACE_RUN.sub("-", name)
    name = _LEADING_DOT_OR_UNDERSCORE.sub("", name, count=1)
    return _INVALID_RUN.sub("-", name)


def package_name_to_dir_name(name: str) -> str:
    """
    Derive the destination folder name from a package name.

    Scoped names keep the segment after the first ``/``; a name with more
    than one ``/`` yields only the second ``/``-separated part.

    Examples
    --------
    >>> package_name_to_dir_name("@scope/pkg")
    'pkg'
    >>> package_name_to_dir_name("@scope/a/b")
    'a'
    """
    if "/" in name:
        return name.split("/")[1]
    return name


def validate_package_name(name: str) -> bool | str:
    """Prompt validator: True when valid, otherwise the rejection message."""
    return is_valid_package_name(name) or INVALID_NAME_MESSAGE
