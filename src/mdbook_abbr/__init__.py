"""mdbook-abbr - annotate abbreviations in mdBook chapters.

An mdBook preprocessor that finds whole-word occurrences of configured
abbreviations and wraps them in ``<abbr title="EXPANSION">ABBR</abbr>``
markup, so renderers show the expansion as a tooltip.

Main features:
- Abbreviations defined inline in book.toml or in a YAML file
- Whole-word, case-sensitive matching
- Standalone ``expand`` command for single files
"""

from mdbook_abbr.lib.errors import ConfigError, InputError, MdbookAbbrError
from mdbook_abbr.lib.substitution import SubstitutionEngine, transform
from mdbook_abbr.models.abbreviation import (
    AbbreviationEntry,
    AbbreviationSet,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AbbreviationEntry",
    "AbbreviationSet",
    "ConfigError",
    "InputError",
    "MdbookAbbrError",
    "SubstitutionEngine",
    "transform",
]
