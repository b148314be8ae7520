"""Decode orchestration: codecs in priority order over growing candidates."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

import structlog
from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from pathjson.core import codecs, heuristics
from pathjson.core.candidates import CandidateSequence, find_start_index, split_path
from pathjson.core.validator import parse_json_document
from pathjson.domain.models import DecodedDocument, ParsedDocument, ScanFailure
from pathjson.domain.types import MAX_PAYLOAD_CHARS, CodecName

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Codec:
    """One decode attempt: alphabet filter, prefix check, decoder."""

    name: CodecName
    clean: Callable[[str], str]
    accepts: Callable[[str], bool]
    decode: Callable[[str], Result[str, str]]

    def attempt(self, candidate: str) -> Result[ParsedDocument, str]:
        cleaned = self.clean(candidate)
        if not self.accepts(cleaned):
            return Failure(f"{self.name}: prefix {cleaned[:2]!r} does not match")
        return self.decode(cleaned).bind(parse_json_document)


class CodecMatch(NamedTuple):
    codec: CodecName
    document: ParsedDocument


# Order matters: cheap and likely decodes first
CODEC_CHAIN: tuple[Codec, ...] = (
    Codec("percent", codecs.keep, heuristics.accept_any, codecs.percent_decode),
    Codec("raw", codecs.keep, heuristics.accept_any, codecs.identity),
    Codec(
        "base64url",
        codecs.strip_non_base64url,
        heuristics.looks_like_base64,
        codecs.decode_base64url,
    ),
    Codec(
        "base64",
        codecs.strip_non_base64,
        heuristics.looks_like_base64,
        codecs.decode_base64,
    ),
    Codec(
        "base32",
        codecs.strip_non_base32,
        heuristics.looks_like_base32,
        codecs.decode_base32,
    ),
    Codec("hex", codecs.strip_non_hex, heuristics.looks_like_hex, codecs.decode_hex),
)


def try_parse_json(candidate: str) -> Result[CodecMatch, str]:
    """Run every codec against a candidate and return the first match.

    Args:
        candidate: Path segments joined with ``/``.

    Returns:
        Success with the codec name and parsed document, or Failure listing
        why each codec was rejected.
    """
    reasons: list[str] = []
    for codec in CODEC_CHAIN:
        result = codec.attempt(candidate)
        if is_successful(result):
            return Success(CodecMatch(codec.name, result.unwrap()))
        reasons.append(result.failure())
    return Failure("; ".join(reasons))


def decode_segments(
    segments: Sequence[str],
    max_payload_chars: int = MAX_PAYLOAD_CHARS,
) -> Result[DecodedDocument, ScanFailure]:
    """Scan path segments for an embedded JSON object or array.

    The scan starts at the first segment carrying a known prefix and tries
    that segment alone, then joined with each following segment in turn.
    The first candidate any codec turns into a JSON object or array wins.

    Args:
        segments: Non-empty path segments, in order.
        max_payload_chars: Largest accepted decoded text, in characters.

    Returns:
        Success with the decoded document, or Failure with the reason the
        scan stopped. A match whose decoded text exceeds
        ``max_payload_chars`` ends the scan with ``PAYLOAD_TOO_LARGE``.
    """
    segments = tuple(segments)
    start_index = find_start_index(segments)
    if start_index is None:
        logger.info(
            "No candidate segment",
            operation="decode_path",
            status="rejected",
            segment_count=len(segments),
        )
        return Failure(ScanFailure.NO_CANDIDATE)

    candidates = CandidateSequence(segments, start_index)
    for end_index, candidate in candidates:
        match = try_parse_json(candidate)
        if not is_successful(match):
            logger.debug(
                "Candidate did not decode",
                operation="decode_path",
                start_index=start_index,
                end_index=end_index,
                reasons=match.failure(),
            )
            continue

        codec, document = match.unwrap()
        if len(document.text) > max_payload_chars:
            logger.warning(
                "Decoded payload exceeds limit",
                operation="decode_path",
                status="rejected",
                codec=codec,
                payload_chars=len(document.text),
                limit=max_payload_chars,
            )
            return Failure(ScanFailure.PAYLOAD_TOO_LARGE)

        logger.info(
            "Decoded JSON from path",
            operation="decode_path",
            status="success",
            codec=codec,
            start_index=start_index,
            end_index=end_index,
            payload_chars=len(document.text),
        )
        return Success(
            DecodedDocument(
                value=document.value,
                text=document.text,
                codec=codec,
                candidate=candidate,
                start_index=start_index,
                end_index=end_index,
            ),
        )

    logger.info(
        "No candidate decoded",
        operation="decode_path",
        status="exhausted",
        candidate_count=len(candidates),
    )
    return Failure(ScanFailure.EXHAUSTED)


def decode_path(
    path: str,
    max_payload_chars: int = MAX_PAYLOAD_CHARS,
) -> Result[DecodedDocument, ScanFailure]:
    """Decode the JSON document embedded in a raw request path.

    Example:
        >>> decode_path("/%7B%22a%22%3A1%7D").unwrap().value
        {'a': 1}
    """
    return decode_segments(split_path(path), max_payload_chars)


__all__ = [
    "CODEC_CHAIN",
    "Codec",
    "CodecMatch",
    "decode_path",
    "decode_segments",
    "try_parse_json",
]
