"""Detect command - guess the separator of a CSV file."""

import click
from pydantic import ValidationError

from ...context import display_separator, pass_context
from ...detection import detect_stream_separator
from ...models import DEFAULT_SAMPLE_SIZE, DetectionConfig
from ..helpers import fail, open_source


def _parse_candidates(text: str) -> list[str]:
    """Split a candidate string like ',;\\t' into characters."""
    return list(text.replace("\\t", "\t"))


@click.command()
@click.argument("source", required=False)
@click.option(
    "-c",
    "--candidates",
    help="Candidate separators in priority order, e.g. ',;|' [default: ,;:\\t]",
)
@click.option(
    "-e",
    "--expect",
    "expected_values",
    multiple=True,
    help="Cell value expected in the data (repeatable)",
)
@click.option(
    "--sample-size",
    type=int,
    default=DEFAULT_SAMPLE_SIZE,
    show_default=True,
    help="Number of characters to inspect",
)
@click.option("--skip-comments", is_flag=True, help="Ignore lines starting with '#'")
@click.option("--encoding", default="utf-8", help="Input encoding")
@pass_context
def detect(ctx, source, candidates, expected_values, sample_size, skip_comments, encoding):
    """Print the separator detected in SOURCE (or stdin).

    A tab is printed as '\\t'. When no candidate stands out the first
    candidate is printed.

    Examples:
        tidycsv detect data.csv
        tidycsv detect data.txt -c ';|' -e 'Amsterdam'
    """
    try:
        options = {
            "sample_size": sample_size,
            "expected_values": list(expected_values),
        }
        if candidates:
            options["candidates"] = _parse_candidates(candidates)
        detection = DetectionConfig(**options)

        with open_source(source, encoding) as stream:
            separator, _ = detect_stream_separator(
                stream, detection, skip_comments=skip_comments
            )

        click.echo(display_separator(separator))

    except (OSError, UnicodeError, ValidationError) as e:
        fail(str(e))
