"""Text and byte codecs tried against path candidates.

Every decoder takes a candidate (already reduced to its alphabet where the
encoding has one) and returns a ``Result``: ``Success`` with the decoded text
or ``Failure`` with a short reason. Decoders never raise.

Decoded bytes are read as UTF-8 with replacement characters, so a bad byte
sequence does not fail the codec; the JSON parse that follows decides.
"""

from __future__ import annotations

import base64
import binascii
import re
from urllib.parse import quote, unquote

from returns.result import Failure, Result, Success

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_NON_BASE64URL = re.compile(r"[^A-Za-z0-9\-_]")
_NON_BASE64 = re.compile(r"[^A-Za-z0-9+/=]")
_NON_BASE32 = re.compile(r"[^A-Za-z2-7=]")
_NON_HEX = re.compile(r"[^A-Fa-f0-9]")
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def strip_non_base64url(candidate: str) -> str:
    return _NON_BASE64URL.sub("", candidate)


def strip_non_base64(candidate: str) -> str:
    return _NON_BASE64.sub("", candidate)


def strip_non_base32(candidate: str) -> str:
    return _NON_BASE32.sub("", candidate)


def strip_non_hex(candidate: str) -> str:
    return _NON_HEX.sub("", candidate)


def keep(candidate: str) -> str:
    return candidate


def pad_base64(value: str) -> str:
    """Pad a base64 string with ``=`` to a multiple of four characters."""
    remainder = len(value) % 4
    return value + "=" * (4 - remainder) if remainder else value


def _utf8(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def identity(candidate: str) -> Result[str, str]:
    return Success(candidate)


def percent_decode(candidate: str) -> Result[str, str]:
    """Decode ``%XX`` escapes as UTF-8.

    A ``%`` not followed by two hex digits, or escapes that do not form valid
    UTF-8, fail the decode. ``+`` is left as is.
    """
    if _MALFORMED_ESCAPE.search(candidate):
        return Failure("Malformed percent escape")
    try:
        return Success(unquote(candidate, encoding="utf-8", errors="strict"))
    except UnicodeDecodeError as exc:
        return Failure(f"Percent escapes are not valid UTF-8: {exc.reason}")


def _b64decode(padded: str) -> Result[bytes, str]:
    try:
        return Success(base64.b64decode(padded, validate=True))
    except (binascii.Error, ValueError) as exc:
        return Failure(f"Invalid base64: {exc}")


def decode_base64url(cleaned: str) -> Result[str, str]:
    standard = cleaned.replace("-", "+").replace("_", "/")
    return _b64decode(pad_base64(standard)).map(_utf8)


def decode_base64(cleaned: str) -> Result[str, str]:
    return _b64decode(pad_base64(cleaned)).map(_utf8)


def decode_base32(cleaned: str) -> Result[str, str]:
    """Decode RFC 4648 base32, ignoring padding and a trailing partial byte."""
    buffer = 0
    bits = 0
    decoded = bytearray()
    for char in cleaned.upper().rstrip("="):
        index = BASE32_ALPHABET.find(char)
        if index == -1:
            continue
        buffer = (buffer << 5) | index
        bits += 5
        if bits >= 8:
            bits -= 8
            decoded.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1
    return Success(_utf8(bytes(decoded)))


def decode_hex(cleaned: str) -> Result[str, str]:
    """Decode hex digit pairs, dropping a trailing odd nibble."""
    digits = cleaned[: len(cleaned) - len(cleaned) % 2]
    if not digits:
        return Failure("No hex digits")
    try:
        return Success(_utf8(bytes.fromhex(digits)))
    except ValueError as exc:
        return Failure(f"Invalid hex: {exc}")


def encode_percent(text: str) -> str:
    return quote(text, safe="")


def encode_base64url(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def encode_base64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def encode_base32(text: str) -> str:
    return base64.b32encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def encode_hex(text: str) -> str:
    return text.encode("utf-8").hex()


ENCODERS = {
    "percent": encode_percent,
    "base64url": encode_base64url,
    "base64": encode_base64,
    "base32": encode_base32,
    "hex": encode_hex,
}


__all__ = [
    "BASE32_ALPHABET",
    "ENCODERS",
    "decode_base32",
    "decode_base64",
    "decode_base64url",
    "decode_hex",
    "identity",
    "keep",
    "pad_base64",
    "percent_decode",
    "strip_non_base32",
    "strip_non_base64",
    "strip_non_base64url",
    "strip_non_hex",
]
