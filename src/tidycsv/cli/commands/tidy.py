"""Tidy command - re-format CSV with aligned columns."""

import click
from pydantic import ValidationError

from ...context import pass_context
from ...models import CsvError
from ...writers import write_tidy_csv
from ..helpers import build_config, fail, open_source, open_target, read_rows


@click.command()
@click.argument("source", required=False)
@click.option(
    "-o",
    "--output",
    help="Output file (default: stdout)",
)
@click.option("--encoding", default="utf-8", help="Input and output encoding")
@pass_context
def tidy(ctx, source, output, encoding):
    """Re-format CSV from SOURCE (or stdin) as tidy CSV.

    Fields are padded so each column has a constant width. Single-field
    rows are comments and are written unpadded. The output keeps the
    separator of the input.

    Examples:
        tidycsv tidy data.csv
        tidycsv tidy data.csv -o data.tidy.csv
    """
    try:
        config = build_config(ctx.settings)
        with open_source(source, encoding) as stream:
            rows, separator = read_rows(ctx.settings, stream, config)

        config = config.model_copy(update={"separator": separator})
        with open_target(output, encoding) as out:
            write_tidy_csv(rows, out, config)
            if rows:
                out.write(config.line_terminator)

    except (CsvError, OSError, UnicodeError, ValidationError) as e:
        fail(str(e))
