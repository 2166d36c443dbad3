"""Click command answering mdBook's renderer support check.

mdBook runs ``mdbook-abbr supports <renderer>`` before each build and skips
the preprocessor for that renderer if the exit status is non-zero.
"""

import sys

import click

from mdbook_abbr.lib.logging_config import get_logger
from mdbook_abbr.lib.preprocessor import AbbrPreprocessor
from mdbook_abbr.models.abbreviation import AbbreviationSet

logger = get_logger(__name__)


@click.command(name="supports")
@click.argument("renderer")
def supports(renderer: str) -> None:
    """Exit with status 0 if RENDERER is supported.

    Abbreviation markup is plain inline HTML, so every renderer is supported.
    """
    preprocessor = AbbrPreprocessor(AbbreviationSet.empty())
    supported = preprocessor.supports_renderer(renderer)
    logger.debug(f"Renderer '{renderer}' supported: {supported}")
    sys.exit(0 if supported else 1)
