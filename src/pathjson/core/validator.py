"""JSON validation for decoded candidate text."""

from __future__ import annotations

import json
import math
from typing import Any

from returns.result import Failure, Result, Success

from pathjson.domain.models import ParsedDocument


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def _finite_float(literal: str) -> float | None:
    # Out-of-range literals such as 1e400 have no JSON rendering; they become null.
    value = float(literal)
    return value if math.isfinite(value) else None


def parse_json_document(text: str) -> Result[ParsedDocument, str]:
    """Parse text as JSON, accepting only an object or an array.

    Args:
        text: Decoded candidate text.

    Returns:
        Success with the parsed document, or Failure with the reason the text
        was rejected. Valid JSON whose top-level value is a string, number,
        boolean or null is rejected.

    Example:
        >>> parse_json_document('{"a": 1}').unwrap().value
        {'a': 1}
        >>> parse_json_document("42").failure()
        'Top-level JSON value is int, expected an object or array'
    """
    try:
        value = json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_finite_float,
        )
    except (ValueError, RecursionError) as exc:
        return Failure(f"Invalid JSON: {exc}")
    if not isinstance(value, (dict, list)):
        return Failure(
            f"Top-level JSON value is {type(value).__name__}, expected an object or array",
        )
    return Success(ParsedDocument(text=text, value=value))


def dump_document(value: Any, indent: int | None = 2) -> str:
    """Serialize a parsed document back to JSON text.

    Non-ASCII characters are written as-is unless the document holds a lone
    surrogate (from an escape such as ``"\\ud800"``), in which case the whole
    document is written with ``\\uXXXX`` escapes so it stays encodable as UTF-8.
    """
    text = json.dumps(value, ensure_ascii=False, indent=indent, allow_nan=False)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return json.dumps(value, ensure_ascii=True, indent=indent, allow_nan=False)
    return text


__all__ = ["dump_document", "parse_json_document"]
