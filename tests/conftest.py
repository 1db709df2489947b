"""
pytest configuration and shared fixtures for npmhatch tests.

Fixtures
--------
template_dir : Path
    A small template tree with a package.json and a nested file.

workdir : Path
    An empty directory new projects are created in.

exit_command : Callable[[int], str]
    Builds a shell command that exits with the given status.
"""

import json
import sys
from collections.abc import Callable
from pathlib import Path

import pytest


TEMPLATE_MANIFEST = {
    "name": "template",
    "private": True,
    "version": "0.0.0",
    "scripts": {"dev": "vite", "build": "vite build"},
}


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """
    Create a template tree for copy tests.

    Returns
    -------
    Path
        Template root containing package.json, index.html and src/main.js.
    """
    root = tmp_path / "template"
    (root / "src").mkdir(parents=True)
    (root / "package.json").write_text(
        json.dumps(TEMPLATE_MANIFEST, indent=2) + "\n", encoding="utf-8"
    )
    (root / "index.html").write_text("<div id=\"app\"></div>\n", encoding="utf-8")
    (root / "src" / "main.js").write_text("console.log('hi')\n", encoding="utf-8")
    return root


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Create an empty working directory for generated projects."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def exit_command() -> Callable[[int], str]:
    """Return a factory for shell commands exiting with a given code."""

    def factory(code: int) -> str:
        return f'"{sys.executable}" -c "import sys; sys.exit({code})"'

    return factory


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
