"""Shared fixtures for CLI tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def abbreviations_file(temp_dir: Path) -> Path:
    """Write a small abbreviation YAML file.

    Returns:
        Path to the YAML file inside the temporary directory.
    """
    path = temp_dir / "abbreviations.yaml"
    path.write_text(
        "HTML: HyperText Markup Language\nCSS: Cascading Style Sheets\n",
        encoding="utf-8",
    )
    return path
