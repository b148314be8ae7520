"""Decode command: run the path decoder offline."""

import json

import click
from returns.pipeline import is_successful

from pathjson.core.decoder import decode_path
from pathjson.core.validator import dump_document
from pathjson.domain.types import MAX_PAYLOAD_CHARS


@click.command()
@click.argument("path")
@click.option("--compact", is_flag=True, help="Print the document on a single line")
@click.option(
    "--explain",
    is_flag=True,
    help="Report which codec and segments produced the document",
)
@click.option(
    "--max-chars",
    type=click.IntRange(min=1),
    default=MAX_PAYLOAD_CHARS,
    show_default=True,
    help="Largest accepted decoded document",
)
def decode(path: str, compact: bool, explain: bool, max_chars: int) -> None:
    """Decode the JSON document embedded in PATH.

    PATH is a URL path as a client would send it, for example
    /7b2261223a317d/client.json. Exits with status 1 when no document
    can be recovered.
    """
    result = decode_path(path, max_chars)
    if not is_successful(result):
        failure = result.failure()
        click.echo(json.dumps({"error": failure.message}), err=True)
        raise SystemExit(1)

    document = result.unwrap()
    if explain:
        click.echo(
            f"codec={document.codec} segments={document.start_index}..{document.end_index} "
            f"chars={len(document.text)}",
            err=True,
        )
    indent = None if compact else 2
    click.echo(dump_document(document.value, indent=indent))
