"""Logging setup for mdbook-abbr.

mdBook reads the processed book from stdout, so every log record goes to
stderr.
"""

import logging
import os
import sys

PACKAGE_LOGGER = "mdbook_abbr"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Environment variable to flag name mapping
ENV_VAR_MAP = {
    "verbose": "MDBOOK_ABBR_VERBOSE",
    "quiet": "MDBOOK_ABBR_QUIET",
}
TRUTHY_VALUES = ("true", "1", "yes", "on")


def _env_flag(name: str) -> bool:
    value = os.environ.get(ENV_VAR_MAP[name], "")
    return value.strip().lower() in TRUTHY_VALUES


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the package logger.

    Levels:
    - default: WARNING
    - verbose: DEBUG
    - quiet: ERROR (quiet wins over verbose)

    When neither flag is given, MDBOOK_ABBR_VERBOSE / MDBOOK_ABBR_QUIET are
    consulted.

    Args:
        verbose: Enable debug output
        quiet: Only report errors
    """
    if not verbose and not quiet:
        verbose = _env_flag("verbose")
        quiet = _env_flag("quiet")

    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
