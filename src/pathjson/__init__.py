"""pathjson - recover JSON documents embedded in URL paths."""

from importlib import metadata

try:
    __version__ = metadata.version("pathjson")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback during dev
    from .__version__ import __version__

__all__ = ["__version__"]
