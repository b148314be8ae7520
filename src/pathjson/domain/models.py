"""Models for pathjson.

This module contains the values produced by the decode pipeline and the
pydantic models describing the HTTP error and status bodies.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field

from pathjson.domain.types import CodecName, JsonContainer


@dataclass(frozen=True)
class ParsedDocument:
    """JSON text that parsed to an object or an array."""

    text: str
    value: JsonContainer


@dataclass(frozen=True)
class DecodedDocument:
    """Successful result of scanning a path.

    Attributes:
        value: The parsed JSON object or array.
        text: Decoded text the value was parsed from.
        codec: Name of the decoder that matched.
        candidate: Candidate string the decoder consumed.
        start_index: Index of the first segment of the candidate.
        end_index: Index of the last segment of the candidate.
    """

    value: JsonContainer
    text: str
    codec: CodecName
    candidate: str
    start_index: int
    end_index: int


class ScanFailure(Enum):
    """Terminal failures of a path scan."""

    NO_CANDIDATE = "No JSON-like segment found"
    PAYLOAD_TOO_LARGE = "Payload too large"
    EXHAUSTED = "Could not parse a valid JSON document from the path"

    @property
    def message(self) -> str:
        return self.value

    @property
    def status_code(self) -> int:
        if self is ScanFailure.PAYLOAD_TOO_LARGE:
            return 413
        return 400


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Human readable failure reason")


class HealthResponse(BaseModel):
    """Body of the health check endpoint."""

    status: str
    timestamp: str
    service: str
    version: str
