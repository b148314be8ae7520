"""Encode command: build a path segment carrying a JSON document."""

import click
from returns.pipeline import is_successful

from pathjson.core.codecs import ENCODERS
from pathjson.core.validator import parse_json_document


@click.command()
@click.argument("document")
@click.option(
    "--codec",
    type=click.Choice(sorted(ENCODERS)),
    default="base64url",
    show_default=True,
    help="Encoding to apply",
)
def encode(document: str, codec: str) -> None:
    """Encode DOCUMENT, a JSON object or array, for use in a URL path."""
    parsed = parse_json_document(document)
    if not is_successful(parsed):
        raise click.BadParameter(parsed.failure(), param_hint="DOCUMENT")
    click.echo("/" + ENCODERS[codec](document))
