"""Configuration loading and validation for mdbook-abbr.

Main components:
- ConfigLoader: build an AbbreviationSet from the mdBook context or a YAML file
- parse_entries: accept the table and array-of-tables list shapes
- Default keys and environment variable names
"""

from mdbook_abbr.config.loader import ConfigLoader, build_set, parse_entries

__all__ = [
    "ConfigLoader",
    "build_set",
    "parse_entries",
]
