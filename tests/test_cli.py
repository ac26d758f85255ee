"""Unit tests for src/cli.py"""

from unittest.mock import patch

import pytest

from src.checkers.square import Coordinate
from src.cli import build_parser, main, parse_cell
from src.core.exceptions import InvalidRequestError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5 0", Coordinate(5, 0)),
        ("5,0", Coordinate(5, 0)),
        ("  4   1 ", Coordinate(4, 1)),
        ("-1 3", Coordinate(-1, 3)),  # out of bounds is the controller's call
    ],
)
def test_parse_cell(text: str, expected: Coordinate) -> None:
    assert parse_cell(text) == expected


@pytest.mark.parametrize("text", ["", "5", "5 0 1", "a b", "five zero"])
def test_parse_cell_rejects(text: str) -> None:
    with pytest.raises(InvalidRequestError):
        parse_cell(text)


def test_parser_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_serve_uses_overrides() -> None:
    with patch("src.cli.serve") as serve:
        main(["--log-level", "warning", "serve", "--host", "0.0.0.0", "--port", "9000"])

    settings = serve.call_args.args[0]
    assert settings.server_host == "0.0.0.0"
    assert settings.server_port == 9000
    assert settings.log_level == "warning"


def test_play_uses_api_url_override() -> None:
    with patch("src.cli.play") as play, patch("src.cli.asyncio.run") as run:
        main(["play", "--api-url", "http://example.test/api"])

    settings = play.call_args.args[0]
    assert settings.api_base_url == "http://example.test/api"
    run.assert_called_once()
