"""Pytest configuration and shared fixtures for mdbook-abbr tests."""

import json
import logging
import os
import shutil
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None]:
    """Drop handlers added by setup_logging so they do not outlive a test."""
    logger = logging.getLogger("mdbook_abbr")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers = handlers


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Yields:
        Dictionary of original environment variables

    Cleanup:
        Restores original environment after test
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


def _chapter(
    name: str, content: str, sub_items: list[Any] | None = None
) -> dict[str, Any]:
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": None,
            "sub_items": sub_items or [],
            "path": f"{name.lower().replace(' ', '_')}.md",
            "source_path": f"{name.lower().replace(' ', '_')}.md",
            "parent_names": [],
        }
    }


@pytest.fixture
def make_chapter() -> Callable[..., dict[str, Any]]:
    """Factory for mdBook chapter items."""
    return _chapter


@pytest.fixture
def sample_book() -> dict[str, Any]:
    """A book shaped like mdBook 0.4 output, with nesting and a separator."""
    return {
        "sections": [
            _chapter("Intro", "Welcome to HTML and CSS."),
            "Separator",
            {"PartTitle": "Reference HTML"},
            _chapter(
                "Styling",
                "CSS rules.",
                sub_items=[_chapter("Selectors", "Every CSS selector.")],
            ),
        ],
        "__non_exhaustive": None,
    }


@pytest.fixture
def make_context() -> Callable[..., dict[str, Any]]:
    """Factory for raw mdBook context dicts with a [preprocessor.abbr] table."""

    def _create(
        abbr_table: dict[str, Any] | None = None, root: str = "."
    ) -> dict[str, Any]:
        config: dict[str, Any] = {"book": {"title": "Test Book"}}
        if abbr_table is not None:
            config["preprocessor"] = {"abbr": abbr_table}
        return {
            "root": root,
            "config": config,
            "renderer": "html",
            "mdbook_version": "0.4.40",
        }

    return _create


@pytest.fixture
def make_payload(
    make_context: Callable[..., dict[str, Any]],
) -> Callable[..., str]:
    """Factory for the JSON string mdBook writes to a preprocessor's stdin."""

    def _create(
        book: dict[str, Any], abbr_table: dict[str, Any] | None = None, **kwargs: Any
    ) -> str:
        return json.dumps([make_context(abbr_table, **kwargs), book])

    return _create
