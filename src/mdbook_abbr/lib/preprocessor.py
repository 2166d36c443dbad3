"""mdBook preprocessor that annotates abbreviations in chapter content."""

import json
from typing import IO, Any

from pydantic import ValidationError as PydanticValidationError

from mdbook_abbr.config.defaults import PREPROCESSOR_NAME
from mdbook_abbr.config.loader import ConfigLoader
from mdbook_abbr.config.validator import flatten_pydantic_errors
from mdbook_abbr.lib.book import for_each_chapter
from mdbook_abbr.lib.errors import InputError
from mdbook_abbr.lib.logging_config import get_logger
from mdbook_abbr.lib.substitution import SubstitutionEngine
from mdbook_abbr.models.abbreviation import AbbreviationSet
from mdbook_abbr.models.context import PreprocessorContext

logger = get_logger(__name__)


def parse_input(
    stream: IO[bytes] | IO[str],
) -> tuple[PreprocessorContext, dict[str, Any]]:
    """Read the ``[context, book]`` array mdBook writes to stdin.

    mdBook always writes UTF-8, so pass a binary stream to avoid decoding
    with the locale encoding.

    Args:
        stream: Binary or text stream holding the JSON payload

    Returns:
        Tuple of (context, book)

    Raises:
        InputError: If the payload is not valid JSON or has the wrong shape
    """
    try:
        payload = json.load(stream)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputError(f"Failed to parse preprocessor input as JSON: {e}") from e

    if not isinstance(payload, list) or len(payload) != 2:
        raise InputError("Expected preprocessor input to be a [context, book] array")

    raw_context, book = payload
    if not isinstance(book, dict):
        raise InputError(f"Expected book to be an object, got {type(book).__name__}")
    if not isinstance(raw_context, dict):
        raise InputError(
            f"Expected context to be an object, got {type(raw_context).__name__}"
        )

    try:
        context = PreprocessorContext.model_validate(raw_context)
    except PydanticValidationError as e:
        error_text = "\n".join(flatten_pydantic_errors(e, "context"))
        raise InputError(f"Invalid preprocessor context:\n{error_text}") from e

    return context, book


class AbbrPreprocessor:
    """Wraps abbreviations in ``<abbr>`` markup in every chapter.

    The abbreviation set is fixed at construction; ``run`` only reads it.
    """

    def __init__(self, abbreviations: AbbreviationSet) -> None:
        """Create a preprocessor for the given abbreviations.

        Raises:
            ConfigError: If an abbreviation cannot be compiled
        """
        self.abbreviations = abbreviations
        self._engine = SubstitutionEngine(abbreviations)

    @classmethod
    def from_context(
        cls, context: PreprocessorContext, loader: ConfigLoader | None = None
    ) -> "AbbrPreprocessor":
        """Build a preprocessor from the ``[preprocessor.abbr]`` config table."""
        loader = loader or ConfigLoader()
        return cls(loader.load_from_context(context))

    @property
    def name(self) -> str:
        return PREPROCESSOR_NAME

    def supports_renderer(self, renderer: str) -> bool:
        """Output is plain markup, so every renderer is supported."""
        return True

    def run(self, context: PreprocessorContext, book: dict[str, Any]) -> dict[str, Any]:
        """Transform the content of every chapter in the book.

        Args:
            context: Context received from mdBook
            book: Decoded book; chapters are rewritten in place

        Returns:
            The same book object
        """
        if context.mdbook_version:
            logger.debug(
                f"Running {self.name} preprocessor under mdBook "
                f"{context.mdbook_version} for renderer '{context.renderer}'"
            )

        for_each_chapter(book, self._process_chapter)
        return book

    def _process_chapter(self, chapter: dict[str, Any]) -> None:
        logger.debug(f"Processing chapter: {chapter.get('name', '')}")
        chapter["content"] = self._engine.transform(chapter.get("content") or "")
