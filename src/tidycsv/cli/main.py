"""tidycsv CLI main entry point with global options."""

import logging
import sys

import click

from ..context import TidyContext, resolve_settings


@click.group()
@click.option(
    "-s",
    "--separator",
    help="Field separator, '\\t' for tab, or 'auto' to detect "
    "(overrides $TIDYCSV_SEPARATOR) [default: auto]",
)
@click.option(
    "--line-terminator",
    help="Line terminator for output, e.g. '\\r\\n' "
    "(overrides $TIDYCSV_LINE_TERMINATOR) [default: \\n]",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, separator, line_terminator, verbose):
    """tidycsv - read, write, detect and tidy CSV files."""
    ctx.ensure_object(TidyContext)

    # Resolve global options once
    ctx.obj.settings = resolve_settings(separator, line_terminator)
    ctx.obj.verbose = verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


# Register commands at module level so tests can import cli with commands attached
from .commands.cat import cat
from .commands.detect import detect
from .commands.put import put
from .commands.tidy import tidy

cli.add_command(cat)
cli.add_command(put)
cli.add_command(tidy)
cli.add_command(detect)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
