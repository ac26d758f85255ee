"""
Command line entry point.

  checkers play    play against the game service in the terminal
  checkers serve   run the stand-in game service locally
"""

import argparse
import asyncio
import logging
from typing import Optional, Sequence

import uvicorn

from src.checkers.square import Coordinate
from src.client.api_client import GameApiClient
from src.client.transport import HttpTransport
from src.core.config import Settings, get_settings
from src.core.exceptions import InvalidRequestError
from src.server.app import create_app
from src.services.game_controller import GameController
from src.ui.text_view import render

logger = logging.getLogger(__name__)

PROMPT = "row col | n = new game | q = quit > "
QUIT_COMMANDS = {"q", "quit", "exit"}
NEW_GAME_COMMANDS = {"n", "new"}


def parse_cell(text: str) -> Coordinate:
    """'5 0' or '5,0' -> Coordinate(5, 0)"""
    parts = text.replace(",", " ").split()
    if len(parts) != 2 or not all(part.lstrip("-").isdigit() for part in parts):
        raise InvalidRequestError(f"Cannot interpret {text!r} as 'row col'.")
    return Coordinate(int(parts[0]), int(parts[1]))


async def play(settings: Settings) -> None:
    async with HttpTransport(
        settings.api_base_url, timeout=settings.request_timeout
    ) as transport:
        controller = GameController(GameApiClient(transport))
        controller.subscribe(lambda: print("\n" + render(controller) + "\n"))
        await controller.start()

        while True:
            command = (await asyncio.to_thread(input, PROMPT)).strip().lower()
            if command in QUIT_COMMANDS:
                break
            if command in NEW_GAME_COMMANDS:
                await controller.start_new_game()
                continue
            try:
                cell = parse_cell(command)
            except InvalidRequestError as exc:
                print(exc)
                continue
            await controller.click(cell)

        await controller.wait_for_background()


def serve(settings: Settings) -> None:
    logger.info("Server starting on %s:%s", settings.server_host, settings.server_port)
    uvicorn.run(
        create_app(settings),
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="checkers", description="Checkers against a remote bot.")
    parser.add_argument("--log-level", default=None, help="Overrides CHECKERS_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--api-url", default=None, help="Overrides CHECKERS_API_BASE_URL")

    serve_parser = subparsers.add_parser("serve", help="Run the stand-in game service")
    serve_parser.add_argument("--host", default=None, help="Overrides CHECKERS_SERVER_HOST")
    serve_parser.add_argument("--port", type=int, default=None, help="Overrides CHECKERS_SERVER_PORT")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    overrides = {
        "log_level": args.log_level,
        "api_base_url": getattr(args, "api_url", None),
        "server_host": getattr(args, "host", None),
        "server_port": getattr(args, "port", None),
    }
    settings = get_settings().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        serve(settings)
    else:
        try:
            asyncio.run(play(settings))
        except (KeyboardInterrupt, EOFError):
            pass


if __name__ == "__main__":
    main()
