"""Tests for the two-character prefix heuristics."""

import pytest

from pathjson.core.heuristics import (
    accept_any,
    looks_like_base32,
    looks_like_base64,
    looks_like_hex,
)


@pytest.mark.unit
class TestPrefixHeuristics:
    """The allowlists match on the first two characters, ignoring case."""

    @pytest.mark.parametrize("cleaned", ["eyJhIjoxfQ", "EYJ", "ey"])
    def test_base64_accepts(self, cleaned: str) -> None:
        assert looks_like_base64(cleaned)

    @pytest.mark.parametrize("cleaned", ["", "e", "WzEsMl0", "ImhlbGxvIg", "7b22"])
    def test_base64_rejects(self, cleaned: str) -> None:
        assert not looks_like_base64(cleaned)

    @pytest.mark.parametrize("cleaned", ["PMRGCIR2GF6Q", "pm", "ONXW2", "emzz", "On"])
    def test_base32_accepts(self, cleaned: str) -> None:
        assert looks_like_base32(cleaned)

    @pytest.mark.parametrize("cleaned", ["", "p", "LMYSYMS5", "PN6Q", "ey"])
    def test_base32_rejects(self, cleaned: str) -> None:
        """Valid base32 with another signature is not recognised."""
        assert not looks_like_base32(cleaned)

    @pytest.mark.parametrize("cleaned", ["7b", "7B2261", "7b7d"])
    def test_hex_accepts(self, cleaned: str) -> None:
        assert looks_like_hex(cleaned)

    @pytest.mark.parametrize("cleaned", ["", "7", "5b5d", "b7"])
    def test_hex_rejects(self, cleaned: str) -> None:
        """Hex-encoded arrays are outside the allowlist."""
        assert not looks_like_hex(cleaned)

    def test_accept_any(self) -> None:
        assert accept_any("")
        assert accept_any("anything")
