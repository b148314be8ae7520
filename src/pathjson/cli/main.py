"""Main CLI entry point for pathjson."""

import logging
import sys

import click
import structlog

from pathjson import __version__
from pathjson.infrastructure.logging.setup import setup_logging

logger = structlog.get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="pathjson")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (DEBUG level logging)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """pathjson - recover JSON documents embedded in URL paths.

    Run the HTTP service, or decode and encode paths from the command line.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    setup_logging(level="DEBUG" if verbose else "WARNING")
    if verbose:
        logger.debug("Verbose mode enabled")


# Import commands after the CLI group is defined
from pathjson.cli.commands import decode, encode, serve  # noqa: E402

cli.add_command(serve.serve)
cli.add_command(decode.decode)
cli.add_command(encode.encode)


def main() -> None:
    """Main entry point with custom error handling."""
    try:
        cli()
    except click.exceptions.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except SystemExit:
        raise
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
