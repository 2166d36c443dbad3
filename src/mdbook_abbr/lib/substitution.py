"""Abbreviation substitution engine.

Wraps whole-word occurrences of each abbreviation in
``<abbr title="EXPANSION">ABBREVIATION</abbr>``.

Entries are applied one after another, each over the output of the previous
one. An expansion (or the markup around it) that contains a later
abbreviation as a whole word is therefore wrapped again by that later entry,
and running the engine twice over its own output double-wraps. Both are
expected behavior.

Expansions are inserted as-is. A double quote inside an expansion ends the
title attribute early; the text is not escaped.
"""

import re
from collections.abc import Iterable

from mdbook_abbr.lib.errors import ConfigError
from mdbook_abbr.lib.logging_config import get_logger
from mdbook_abbr.models.abbreviation import AbbreviationEntry

logger = get_logger(__name__)

ABBR_MARKUP = '<abbr title="{expansion}">{abbreviation}</abbr>'

# Not preceded / followed by a letter, digit or underscore
_WORD_PATTERN = r"(?<!\w){}(?!\w)"


def render_markup(entry: AbbreviationEntry) -> str:
    """Return the annotation markup for an entry."""
    return ABBR_MARKUP.format(
        expansion=entry.expansion, abbreviation=entry.abbreviation
    )


def compile_pattern(abbreviation: str) -> re.Pattern[str]:
    """Compile the whole-word, case-sensitive pattern for an abbreviation.

    Args:
        abbreviation: Literal abbreviation text

    Returns:
        Compiled pattern

    Raises:
        ConfigError: If the abbreviation is empty or cannot be compiled
    """
    if not abbreviation:
        raise ConfigError("abbreviation", "Abbreviation cannot be empty")
    try:
        return re.compile(_WORD_PATTERN.format(re.escape(abbreviation)))
    except re.error as e:
        raise ConfigError(
            "abbreviation",
            f"Abbreviation {abbreviation!r} cannot be compiled into a pattern: {e}",
        ) from e


class SubstitutionEngine:
    """Applies an ordered sequence of abbreviations to text.

    Patterns are compiled once on construction, so a bad abbreviation fails
    before any text is transformed. The engine holds no mutable state and can
    be shared across threads.
    """

    def __init__(self, entries: Iterable[AbbreviationEntry]) -> None:
        """Compile one rule per entry, preserving order.

        Args:
            entries: Abbreviation entries in application order

        Raises:
            ConfigError: If any abbreviation cannot be compiled
        """
        self._rules: tuple[tuple[re.Pattern[str], str], ...] = tuple(
            (compile_pattern(entry.abbreviation), render_markup(entry))
            for entry in entries
        )
        logger.debug(f"Compiled {len(self._rules)} abbreviation patterns")

    def __len__(self) -> int:
        return len(self._rules)

    def transform(self, text: str) -> str:
        """Return ``text`` with every abbreviation wrapped in markup.

        Args:
            text: Text block, treated as opaque text

        Returns:
            A new string; ``text`` itself is unchanged when nothing matches
        """
        result = text
        for pattern, markup in self._rules:
            # A callable replacement keeps backslashes in the expansion literal
            result = pattern.sub(lambda _match, markup=markup: markup, result)
        return result


def transform(text: str, entries: Iterable[AbbreviationEntry]) -> str:
    """Apply ``entries`` to ``text`` in order.

    Convenience wrapper around SubstitutionEngine for one-off calls. Callers
    transforming many blocks should build the engine once.
    """
    return SubstitutionEngine(entries).transform(text)
