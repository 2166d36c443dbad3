"""Data models for abbreviations and the mdBook preprocessor context."""

from mdbook_abbr.models.abbreviation import AbbreviationEntry, AbbreviationSet
from mdbook_abbr.models.context import PreprocessorContext

__all__ = [
    "AbbreviationEntry",
    "AbbreviationSet",
    "PreprocessorContext",
]
