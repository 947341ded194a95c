"""Cat command - read CSV and output NDJSON."""

import json

import click
from pydantic import ValidationError

from ...context import pass_context
from ...models import CsvError
from ...records import mapped_by_header
from ..helpers import build_config, fail, open_source, read_rows


@click.command()
@click.argument("source", required=False)
@click.option(
    "--header",
    is_flag=True,
    help="Emit objects keyed by the first row instead of arrays",
)
@click.option(
    "--skip-comments", is_flag=True, help="Skip lines starting with '#'"
)
@click.option(
    "--skip-empty-rows",
    is_flag=True,
    help="Skip rows without any non-empty field",
)
@click.option("--encoding", default="utf-8", help="Input encoding")
@pass_context
def cat(ctx, source, header, skip_comments, skip_empty_rows, encoding):
    """Read CSV from SOURCE (or stdin) and output NDJSON.

    Each row becomes a JSON array of strings. With --header, the first row
    names the columns and each following row becomes a JSON object.

    Examples:
        tidycsv cat data.csv                  # Detect separator
        tidycsv -s ';' cat data.csv --header  # Semicolon, objects
        cat data.tsv | tidycsv -s '\\t' cat
    """
    try:
        config = build_config(
            ctx.settings,
            skip_comments=skip_comments,
            skip_empty_rows=skip_empty_rows,
        )
        with open_source(source, encoding) as stream:
            rows, _ = read_rows(ctx.settings, stream, config)

        records = mapped_by_header(rows) if header else rows
        for record in records:
            click.echo(json.dumps(record, ensure_ascii=False))

    except (CsvError, OSError, UnicodeError, ValidationError) as e:
        fail(str(e))
