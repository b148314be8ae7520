"""Candidate generation from request path segments."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from pathjson.domain.types import START_PREFIXES


def split_path(path: str) -> tuple[str, ...]:
    """Split a request path into its non-empty segments.

    Example:
        >>> split_path("//eyJh/x//")
        ('eyJh', 'x')
    """
    return tuple(segment for segment in path.strip("/").split("/") if segment)


def find_start_index(segments: Sequence[str]) -> int | None:
    """Return the index of the first segment that may begin a payload."""
    for index, segment in enumerate(segments):
        if segment.lower().startswith(START_PREFIXES):
            return index
    return None


@dataclass(frozen=True)
class CandidateSequence:
    """Growing ``/``-joined candidates starting at a fixed segment.

    Iterating yields ``(end_index, candidate)`` pairs for ``end_index`` from
    ``start_index`` to the last segment. Each iteration starts over.
    """

    segments: tuple[str, ...]
    start_index: int

    def __iter__(self) -> Iterator[tuple[int, str]]:
        accumulated = ""
        for end_index in range(self.start_index, len(self.segments)):
            segment = self.segments[end_index]
            accumulated = f"{accumulated}/{segment}" if accumulated else segment
            yield end_index, accumulated

    def __len__(self) -> int:
        return max(len(self.segments) - self.start_index, 0)


__all__ = ["CandidateSequence", "find_start_index", "split_path"]
