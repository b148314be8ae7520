"""Serve command."""

import click

from pathjson.server.main import run_server


@click.command()
@click.option("--host", default=None, help="Interface to bind (default: PATHJSON_HOST)")
@click.option("--port", type=int, default=None, help="Port to listen on (default: PATHJSON_PORT)")
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Reload on code changes (default: on in development)",
)
def serve(host: str | None, port: int | None, reload: bool | None) -> None:
    """Run the HTTP service."""
    run_server(host=host, port=port, reload=reload)
