"""Tests for CLI commands using click.testing.CliRunner."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from pathjson.cli.main import cli
from pathjson.infrastructure.logging import setup_logging


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def detach_logging_from_runner():
    """Rebind log handlers to the real stderr once the runner has closed its streams."""
    yield
    setup_logging(level="WARNING")


@pytest.mark.unit
class TestCliMain:
    """Test main CLI group and global options."""

    def test_cli_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Commands:" in result.output
        for command in ("serve", "decode", "encode"):
            assert command in result.output

    def test_cli_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "pathjson" in result.output.lower()
        assert "version" in result.output.lower()

    def test_cli_invalid_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["invalid-command"])
        assert result.exit_code == 2
        assert "No such command" in result.output


@pytest.mark.unit
class TestDecodeCommand:
    """Test the decode command."""

    def test_decode_hex(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["decode", "/7b22636c69656e745f6e616d65223a2274657374696e67227d/client.json"],
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == {"client_name": "testing"}

    def test_decode_compact(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "--compact", "/eyJhIjoxfQ"])
        assert result.exit_code == 0
        assert result.output == '{"a": 1}\n'

    def test_decode_lone_surrogate(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "--compact", "/%7B%22a%22%3A%22%5Cud800%22%7D"])
        assert result.exit_code == 0
        assert result.output == '{"a": "\\ud800"}\n'

    def test_decode_explain(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--verbose", "decode", "--explain", "/x/7b2261/223a317d"])
        assert result.exit_code == 0
        assert "codec=hex segments=1..2 chars=7" in result.output

    def test_decode_no_candidate(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "/not-json-at-all"])
        assert result.exit_code == 1
        assert "No JSON-like segment found" in result.output

    def test_decode_exhausted(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "/eyZZZ"])
        assert result.exit_code == 1
        assert "Could not parse a valid JSON document from the path" in result.output

    def test_decode_max_chars(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["decode", "--max-chars", "3", "/eyJhIjoxfQ"])
        assert result.exit_code == 1
        assert "Payload too large" in result.output


@pytest.mark.unit
class TestEncodeCommand:
    """Test the encode command."""

    @pytest.mark.parametrize("codec", ["percent", "base64url", "base64", "base32", "hex"])
    def test_encode_then_decode(self, runner: CliRunner, codec: str) -> None:
        """Every encoding produced by encode is recovered by decode."""
        document = '{"a":[1,2]}'
        encoded = runner.invoke(cli, ["encode", "--codec", codec, document])
        assert encoded.exit_code == 0

        decoded = runner.invoke(cli, ["decode", "--compact", encoded.output.strip()])
        assert decoded.exit_code == 0
        assert json.loads(decoded.output) == json.loads(document)

    def test_encode_default_is_base64url(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["encode", '{"a":1}'])
        assert result.output == "/eyJhIjoxfQ\n"

    @pytest.mark.parametrize("document", ["42", '"hello"', "{not json"])
    def test_encode_rejects_non_documents(self, runner: CliRunner, document: str) -> None:
        result = runner.invoke(cli, ["encode", document])
        assert result.exit_code == 2

    def test_encode_unknown_codec(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["encode", "--codec", "rot13", "{}"])
        assert result.exit_code == 2


@pytest.mark.unit
class TestServeCommand:
    """Test the serve command without starting a server."""

    @patch("pathjson.server.main.uvicorn.run")
    def test_serve_passes_options(self, mock_run, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["serve", "--host", "127.0.0.1", "--port", "9001", "--no-reload"])
        assert result.exit_code == 0
        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args == ("pathjson.server.app:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9001
        assert kwargs["reload"] is False
