"""Shared error handling for mdbook-abbr commands."""

import sys
from collections.abc import Generator
from contextlib import contextmanager

import click

from mdbook_abbr.lib.errors import ConfigError, FileNotFoundError, InputError
from mdbook_abbr.lib.logging_config import get_logger

logger = get_logger(__name__)

EXIT_UNEXPECTED = 1
EXIT_CONFIG = 2
EXIT_INPUT = 3


@contextmanager
def handle_command_errors() -> Generator[None, None, None]:
    """Context manager for consistent error handling in commands.

    Nothing is written to stdout on failure, so mdBook never receives a
    partially processed book.

    Exit codes:
        1: Unexpected error
        2: Configuration error
        3: Malformed preprocessor input
    """
    try:
        yield
    except (ConfigError, FileNotFoundError) as e:
        logger.debug(f"Configuration error: {e}")
        click.secho("Error: Configuration error", fg="red", err=True)
        click.echo(f"  {e}", err=True)
        sys.exit(EXIT_CONFIG)
    except InputError as e:
        logger.debug(f"Input error: {e}")
        click.secho("Error: Invalid preprocessor input", fg="red", err=True)
        click.echo(f"  {e.message}", err=True)
        sys.exit(EXIT_INPUT)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(EXIT_UNEXPECTED)
