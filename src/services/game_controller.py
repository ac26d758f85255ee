"""
Mediates between the operator's clicks and the game service.

The controller owns four pieces of state:
* session: the last game state the service reported (None while loading)
* selection: the armed piece, if any
* in_flight: set while a new-game or move request is outstanding
* tally: the win/loss/draw record

Everything runs on one event loop. `in_flight` is checked and set without awaiting in between,
which is all the synchronization a single-threaded controller needs.
A request that never returns leaves `in_flight` set: there is no timeout or cancellation here.
"""

import asyncio
import logging
from enum import Enum, auto
from typing import Any, Callable, Coroutine, Optional

from src.checkers.square import Coordinate
from src.client.api_client import GameApi
from src.core.exceptions import CheckersError
from src.core.models import Session, Tally
from src.core.shared_types import Side

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class Phase(Enum):
    NO_SELECTION = auto()
    ARMED = auto()
    SUBMITTING = auto()


class GameController:
    """Interaction state machine for one operator playing against the game service."""

    def __init__(self, api: GameApi) -> None:
        self.api = api
        self.session: Optional[Session] = None
        self.selection: Optional[Coordinate] = None
        self.tally = Tally()
        self.in_flight = False
        self._submitting: Optional[tuple[Coordinate, Coordinate]] = None
        self._listeners: list[Listener] = []
        self._background: set[asyncio.Task[None]] = set()

    # --- Observed state ---
    @property
    def phase(self) -> Phase:
        if self._submitting is not None:
            return Phase.SUBMITTING
        if self.selection is not None:
            return Phase.ARMED
        return Phase.NO_SELECTION

    @property
    def loading(self) -> bool:
        return self.session is None

    def accepts_clicks(self) -> bool:
        """Clicks only count on the human's turn of a running game, and never while a request is outstanding."""
        return (
            not self.in_flight
            and self.session is not None
            and self.session.awaits_human
        )

    def subscribe(self, listener: Listener) -> None:
        """Register a callback run after every state change (to re-render)."""
        self._listeners.append(listener)

    # --- Session lifecycle ---
    async def start(self) -> None:
        """Load the first game and the tally. Neither waits for the other."""
        await asyncio.gather(self.start_new_game(), self.refresh_tally())

    async def start_new_game(self) -> None:
        if self.in_flight:
            logger.debug("New game ignored: a request is still in flight.")
            return

        self.in_flight = True
        self._notify()
        try:
            session = await self.api.new_game()
        except CheckersError as exc:
            logger.error("Error starting new game: %s", exc)
        else:
            self.session = session
            self.selection = None
            logger.info("New game started, %s to move.", session.current_turn)
        finally:
            self.in_flight = False
            self._notify()

    async def refresh_tally(self) -> None:
        """Read-only side query, so it does not take the in-flight gate."""
        try:
            tally = await self.api.win_record()
        except CheckersError as exc:
            logger.error("Error fetching win record: %s", exc)
            return
        self.tally = tally
        self._notify()

    # --- Selection & move submission ---
    async def click(self, cell: Coordinate) -> None:
        """Handle a click on a cell of the board."""
        if not cell.is_within_bounds():
            logger.warning("Click outside the board ignored: %s", cell)
            return
        session = self.session
        if session is None or not self.accepts_clicks():
            logger.debug("Click on %s ignored.", cell)
            return

        if self.selection is None:
            if session.board.is_owned_by(cell, Side.HUMAN):
                self.selection = cell
                self._notify()
            return

        if cell == self.selection:
            self.selection = None
            self._notify()
            return

        await self._submit_move(self.selection, cell)

    async def _submit_move(self, origin: Coordinate, target: Coordinate) -> None:
        self.in_flight = True
        self._submitting = (origin, target)
        self._notify()
        try:
            session = await self.api.make_move(origin, target)
        except CheckersError as exc:
            logger.error("Error making move %s -> %s: %s", origin, target, exc)
        else:
            self.session = session
            if session.game_over:
                logger.info("Game over, winner: %s", session.winner or "none")
                self._in_background(self.refresh_tally())
        finally:
            self.selection = None
            self._submitting = None
            self.in_flight = False
            self._notify()

    # --- Background work ---
    def _in_background(self, coroutine: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coroutine)
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def wait_for_background(self) -> None:
        """Wait until the background tally refreshes have finished."""
        while self._background:
            await asyncio.gather(*self._background)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()
