"""Entry point for the mdbook-abbr command.

mdBook calls the preprocessor twice:

    mdbook-abbr supports <renderer>    (exit 0 = supported)
    mdbook-abbr                         ([context, book] JSON on stdin)
"""

import json

import click

from mdbook_abbr import __version__
from mdbook_abbr.cli.commands.expand import expand
from mdbook_abbr.cli.commands.supports import supports
from mdbook_abbr.cli.errors import handle_command_errors
from mdbook_abbr.lib.logging_config import get_logger, setup_logging
from mdbook_abbr.lib.preprocessor import AbbrPreprocessor, parse_input

logger = get_logger(__name__)


def run_preprocessor() -> None:
    """Read the book from stdin, annotate it and write it to stdout."""
    logger.debug("Running mdbook-abbr preprocessor")

    context, book = parse_input(click.get_binary_stream("stdin"))
    preprocessor = AbbrPreprocessor.from_context(context)
    logger.info(f"Loaded {len(preprocessor.abbreviations)} abbreviations")

    processed = preprocessor.run(context, book)

    # Serialize fully before writing so a failure leaves stdout empty
    output = json.dumps(processed, ensure_ascii=False).encode("utf-8")
    stdout = click.get_binary_stream("stdout")
    stdout.write(output)
    stdout.flush()


@click.group(name="mdbook-abbr", invoke_without_command=True)
@click.version_option(__version__, prog_name="mdbook-abbr")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose debug logging",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only log errors",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """mdBook preprocessor that wraps abbreviations in <abbr> tags.

    Without a subcommand, reads mdBook's [context, book] JSON from stdin and
    writes the processed book to stdout. Abbreviations are read from the
    [preprocessor.abbr] table in book.toml.

    Example book.toml:

    \b
        [preprocessor.abbr]
        list = { HTML = "HyperText Markup Language" }
    """
    setup_logging(verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        with handle_command_errors():
            run_preprocessor()


main.add_command(supports)
main.add_command(expand)


if __name__ == "__main__":
    main()
