"""pathjson CLI - decode and encode JSON documents carried in URL paths.

This package provides commands for running the HTTP service and for running
the decode pipeline offline.
"""

from pathjson.cli.main import cli

__all__ = ["cli"]
