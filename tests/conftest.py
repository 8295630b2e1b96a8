"""
Shared test fixtures.
"""

from pathlib import Path

import pytest


@pytest.fixture
def new_pandoc():
    """Version query for a current pandoc."""
    return lambda: "3.1.11"


@pytest.fixture
def old_pandoc():
    """Version query for a pandoc older than every feature threshold."""
    return lambda: "2.0.6"


@pytest.fixture
def no_pandoc():
    return lambda: None


@pytest.fixture
def rmd_file(tmp_path: Path) -> Path:
    """A source document with front matter."""
    path = tmp_path / "input.Rmd"
    path.write_text(
        "---\n"
        "title: Report\n"
        "author: Someone\n"
        "---\n"
        "\n"
        "# Intro\n"
        "\n"
        "Some text.\n",
        encoding="utf-8",
    )
    return path
