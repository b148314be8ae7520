"""Two-character signatures of JSON documents in each encoding.

A JSON object starts with ``{"``, which encodes to ``ey`` in base64,
``PM`` in base32 and ``7b`` in hex. The base32 list also carries ``on`` and
``em``; the lists are deliberately narrow, and a document whose encoding does
not start with one of them is not recognised.
"""

from __future__ import annotations

BASE64_PREFIXES = frozenset({"ey"})
BASE32_PREFIXES = frozenset({"pm", "on", "em"})
HEX_PREFIXES = frozenset({"7b"})


def _signature(cleaned: str) -> str:
    return cleaned[:2].lower()


def looks_like_base64(cleaned: str) -> bool:
    """Return True when a base64 or base64url string may encode a JSON object."""
    return _signature(cleaned) in BASE64_PREFIXES


def looks_like_base32(cleaned: str) -> bool:
    """Return True when a base32 string may encode a JSON document."""
    return _signature(cleaned) in BASE32_PREFIXES


def looks_like_hex(cleaned: str) -> bool:
    """Return True when a hex string starts with the encoding of ``{``."""
    return _signature(cleaned) in HEX_PREFIXES


def accept_any(_cleaned: str) -> bool:
    return True


__all__ = [
    "BASE32_PREFIXES",
    "BASE64_PREFIXES",
    "HEX_PREFIXES",
    "accept_any",
    "looks_like_base32",
    "looks_like_base64",
    "looks_like_hex",
]
