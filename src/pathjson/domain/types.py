"""Type aliases and constants for the domain layer."""

from typing import Any, Literal, Union

# Decoders, in the order they are attempted for each candidate
CodecName = Literal["percent", "raw", "base64url", "base64", "base32", "hex"]

# Encodings the CLI can produce (identity is not an encoding)
EncodingName = Literal["percent", "base64url", "base64", "base32", "hex"]

# Accepted top-level JSON values
JsonContainer = Union[dict[str, Any], list[Any]]

# Upper bound on decoded text, in characters
MAX_PAYLOAD_CHARS = 64_000

# Lower-cased prefixes that may begin an encoded JSON document:
# "{" and its percent form, hex "7b", base32 "pm", base64 "ey"
START_PREFIXES: tuple[str, ...] = ("{", "%7b", "7b", "pm", "ey")
