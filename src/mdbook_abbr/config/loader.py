"""Configuration loader for mdbook-abbr.

This module provides the ConfigLoader class, which turns the
``[preprocessor.abbr]`` table of book.toml (as delivered in the mdBook
context) or a standalone YAML file into an AbbreviationSet.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from mdbook_abbr.config.defaults import (
    ENTRY_ABBREVIATION_KEY,
    ENTRY_EXPANSION_KEY,
    FILE_KEY,
    LIST_KEY,
)
from mdbook_abbr.config.validator import flatten_pydantic_errors
from mdbook_abbr.lib.errors import ConfigError, FileNotFoundError
from mdbook_abbr.lib.logging_config import get_logger
from mdbook_abbr.models.abbreviation import AbbreviationEntry, AbbreviationSet
from mdbook_abbr.models.context import PreprocessorContext

logger = get_logger(__name__)


def _make_entry(
    abbreviation: Any, expansion: Any, location: str
) -> AbbreviationEntry:
    try:
        return AbbreviationEntry(abbreviation=abbreviation, expansion=expansion)
    except PydanticValidationError as e:
        error_text = "\n".join(flatten_pydantic_errors(e, location))
        if isinstance(abbreviation, bool) or isinstance(expansion, bool):
            # YAML 1.1 reads bare yes/no/on/off as booleans
            error_text += (
                "\nQuote abbreviations such as 'NO', 'ON' or 'YES' "
                "so YAML reads them as strings"
            )
        raise ConfigError(
            location, f"Invalid abbreviation entry:\n{error_text}"
        ) from e


def parse_entries(value: Any, field: str) -> list[AbbreviationEntry]:
    """Convert a raw config value into abbreviation entries.

    Two shapes are accepted:

    - a table mapping abbreviation to expansion
      (``{HTML = "HyperText Markup Language"}``)
    - an array of tables with ``abbr`` and ``expanded`` keys

    Args:
        value: Raw value from book.toml or a YAML file
        field: Config path used in error messages

    Returns:
        Entries in source order

    Raises:
        ConfigError: If the value has the wrong shape or an entry is invalid
    """
    if isinstance(value, dict):
        return [
            _make_entry(abbr, expanded, f"{field}.{abbr}")
            for abbr, expanded in value.items()
        ]

    if isinstance(value, list):
        entries = []
        for index, item in enumerate(value):
            location = f"{field}[{index}]"
            if not isinstance(item, dict):
                raise ConfigError(
                    location,
                    f"Expected a table with '{ENTRY_ABBREVIATION_KEY}' and "
                    f"'{ENTRY_EXPANSION_KEY}' keys, got {type(item).__name__}",
                )
            unknown = set(item) - {ENTRY_ABBREVIATION_KEY, ENTRY_EXPANSION_KEY}
            if unknown:
                raise ConfigError(
                    location, f"Unknown keys: {', '.join(sorted(unknown))}"
                )
            entries.append(
                _make_entry(
                    item.get(ENTRY_ABBREVIATION_KEY),
                    item.get(ENTRY_EXPANSION_KEY),
                    location,
                )
            )
        return entries

    raise ConfigError(
        field,
        "Expected a table of abbreviation = expansion pairs or an array of "
        f"{{ {ENTRY_ABBREVIATION_KEY}, {ENTRY_EXPANSION_KEY} }} tables, "
        f"got {type(value).__name__}",
    )


def build_set(entries: list[AbbreviationEntry], field: str) -> AbbreviationSet:
    """Validate uniqueness and freeze entries into an AbbreviationSet.

    Raises:
        ConfigError: If an abbreviation is defined more than once
    """
    try:
        return AbbreviationSet(entries=tuple(entries))
    except PydanticValidationError as e:
        messages = [str(err.get("msg", "")) for err in e.errors()]
        raise ConfigError(field, "; ".join(messages)) from e


class ConfigLoader:
    """Loads abbreviation tables from the mdBook context or YAML files.

    This class handles:
    - Reading ``preprocessor.abbr.list`` from the context config
    - Reading ``preprocessor.abbr.file`` relative to the book root
    - Parsing YAML abbreviation files
    - Converting validation errors into human-readable ConfigErrors
    """

    def parse_yaml(self, file_path: str | Path) -> Any:
        """Parse a YAML file and return its contents.

        Args:
            file_path: Path to the YAML file to parse

        Returns:
            Parsed YAML content, or an empty dict if the file is empty

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If YAML parsing fails
        """
        path = Path(file_path)

        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
                return content if content is not None else {}
        except OSError as e:
            raise FileNotFoundError(
                str(file_path),
                f"Abbreviation file not found at {file_path}. "
                f"Please ensure the file exists at this path.",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

    def load_file_entries(self, file_path: str | Path) -> list[AbbreviationEntry]:
        """Load abbreviation entries from a YAML file.

        The file holds either the table/array itself or a mapping with a
        top-level ``list`` key, mirroring the book.toml layout.
        """
        content = self.parse_yaml(file_path)
        if (
            isinstance(content, dict)
            and set(content) == {"list"}
            and isinstance(content["list"], (dict, list))
        ):
            content = content["list"]
        entries = parse_entries(content, str(file_path))
        logger.debug(f"Found {len(entries)} abbreviations in {file_path}")
        return entries

    def load_file(self, file_path: str | Path) -> AbbreviationSet:
        """Load a standalone YAML abbreviation file into an AbbreviationSet."""
        return build_set(self.load_file_entries(file_path), str(file_path))

    def load_from_context(self, context: PreprocessorContext) -> AbbreviationSet:
        """Build the AbbreviationSet from the mdBook context.

        Entries from ``preprocessor.abbr.file`` come first, followed by the
        inline ``preprocessor.abbr.list``. A missing list and file give an
        empty set.

        Args:
            context: Context object received from mdBook

        Returns:
            AbbreviationSet in application order

        Raises:
            FileNotFoundError: If the referenced file does not exist
            ConfigError: If either source is malformed or has duplicates
        """
        entries: list[AbbreviationEntry] = []

        file_value = context.get(FILE_KEY)
        if file_value is not None:
            if not isinstance(file_value, str) or not file_value:
                raise ConfigError(FILE_KEY, "Expected a non-empty file path")
            path = Path(file_value)
            if not path.is_absolute():
                path = Path(context.root) / path
            entries.extend(self.load_file_entries(path))

        list_value = context.get(LIST_KEY)
        if list_value is not None:
            list_entries = parse_entries(list_value, LIST_KEY)
            logger.debug(f"Found {len(list_entries)} abbreviations in {LIST_KEY}")
            entries.extend(list_entries)
        elif file_value is None:
            logger.debug(f"No {LIST_KEY} configured, chapters pass through")

        return build_set(entries, LIST_KEY)
