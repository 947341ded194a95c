"""Put command - write NDJSON from stdin as CSV."""

import json
import sys

import click
from pydantic import ValidationError

from ...context import pass_context
from ...writers import write_csv, write_tidy_csv
from ..helpers import build_config, fail, open_target


def _records_to_rows(records: list, header: bool) -> list:
    """Turn JSON arrays or objects into rows.

    Objects are flattened against the union of their keys, in order of
    first appearance; missing keys become empty fields.
    """
    if all(isinstance(r, list) for r in records):
        return records
    if not all(isinstance(r, dict) for r in records):
        raise ValueError("Records must be all JSON arrays or all JSON objects")

    all_keys = []
    seen = set()
    for record in records:
        for key in record:
            if key not in seen:
                all_keys.append(key)
                seen.add(key)

    rows = [all_keys] if header else []
    rows.extend([record.get(key) for key in all_keys] for record in records)
    return rows


@click.command()
@click.argument("target", required=False)
@click.option("--tidy", is_flag=True, help="Align columns (tidy CSV)")
@click.option(
    "--header/--no-header",
    default=True,
    help="Write a header row for JSON objects [default: header]",
)
@click.option("--encoding", default="utf-8", help="Output encoding")
@pass_context
def put(ctx, target, tidy, header, encoding):
    """Read NDJSON from stdin and write CSV to TARGET (or stdout).

    Each line is a JSON array (one row) or a JSON object (keys become the
    header). The output always ends with a line terminator.

    Examples:
        tidycsv cat in.csv | tidycsv -s ';' put out.csv
        tidycsv cat in.csv --header | tidycsv put --tidy
    """
    try:
        records = []
        for line in sys.stdin:
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                fail(f"Invalid JSON: {e}")

        rows = _records_to_rows(records, header)
        config = build_config(ctx.settings)
        writer = write_tidy_csv if tidy else write_csv

        with open_target(target, encoding) as out:
            writer(rows, out, config)
            if rows:
                out.write(config.line_terminator)

    except (OSError, ValueError, ValidationError) as e:
        fail(str(e))
