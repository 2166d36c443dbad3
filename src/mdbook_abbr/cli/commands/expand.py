"""Click command for annotating a single text file outside of mdBook.

Implements ``mdbook-abbr expand``, which applies an abbreviation YAML file to
a Markdown or text file and writes the result.
"""

from pathlib import Path
from typing import IO

import click

from mdbook_abbr.cli.errors import handle_command_errors
from mdbook_abbr.config.loader import ConfigLoader
from mdbook_abbr.lib.logging_config import get_logger
from mdbook_abbr.lib.substitution import SubstitutionEngine

logger = get_logger(__name__)


@click.command(name="expand")
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--abbreviations",
    "-a",
    "abbreviations_path",
    type=click.Path(dir_okay=False),
    required=True,
    help="YAML file mapping abbreviations to expansions",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the result here instead of stdout",
)
def expand(
    input_file: IO[str], abbreviations_path: str, output: str | None
) -> None:
    """Wrap abbreviations in INPUT_FILE with <abbr> tags.

    INPUT_FILE defaults to stdin. The abbreviations file uses the same shapes
    as book.toml: a mapping of abbreviation to expansion, or a list of
    {abbr, expanded} entries, optionally under a top-level "list" key.

    Example:

        mdbook-abbr expand chapter.md -a abbreviations.yaml -o out.md
    """
    with handle_command_errors():
        abbreviations = ConfigLoader().load_file(abbreviations_path)
        engine = SubstitutionEngine(abbreviations)
        logger.debug(
            f"Expanding {input_file.name} with {len(engine)} abbreviations "
            f"from {abbreviations_path}"
        )

        result = engine.transform(input_file.read())

        if output:
            Path(output).write_text(result, encoding="utf-8")
            logger.info(f"Wrote annotated text to {output}")
        else:
            stdout = click.get_binary_stream("stdout")
            stdout.write(result.encode("utf-8"))
            stdout.flush()
