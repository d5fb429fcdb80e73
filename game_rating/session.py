"""
Interactive two-player session.

Asks for an account type and two players, simulates a few games for each
player and prints both histories.
"""

from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .account import GameAccount, create_account
from .config import GAMES_PER_PLAYER
from .console import ConsoleIO
from .errors import InvalidIntegerError, InvalidSelectionError
from .utils import parse_int, setup_logging

logger = setup_logging(__name__)

MENU = (
    "Select a game account type:",
    "1. Standard Game Account",
    "2. Half Points Deducted Game Account",
    "3. Victory Series Bonus Game Account",
)


class SessionState(Enum):
    SELECT_VARIANT = "select_variant"
    PLAYER1_SETUP = "player1_setup"
    PLAYER2_SETUP = "player2_setup"
    SIMULATE_AND_REPORT = "simulate_and_report"
    DONE = "done"


class SessionRunner:
    """
    Drives one console session from the account menu to the final report.

    Invalid input during setup ends the session before any account exists.
    """

    def __init__(
        self,
        io: Optional[ConsoleIO] = None,
        rng: Optional[np.random.Generator] = None,
        games_per_player: int = GAMES_PER_PLAYER,
    ):
        """
        Initialize a session.

        Args:
            io: Console boundary; defaults to stdin/stdout
            rng: Random source handed to both accounts
            games_per_player: Games simulated for each player
        """
        self.io = io if io is not None else ConsoleIO()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.games_per_player = games_per_player
        self.state = SessionState.SELECT_VARIANT
        self.choice: Optional[int] = None
        self.player1: Optional[GameAccount] = None
        self.player2: Optional[GameAccount] = None
        self._setup1: Optional[Tuple[str, int]] = None
        self._setup2: Optional[Tuple[str, int]] = None

    def run(self) -> SessionState:
        """Run the session until it is done and return the final state."""
        handlers = {
            SessionState.SELECT_VARIANT: self._select_variant,
            SessionState.PLAYER1_SETUP: self._player1_setup,
            SessionState.PLAYER2_SETUP: self._player2_setup,
            SessionState.SIMULATE_AND_REPORT: self._simulate_and_report,
        }
        while self.state is not SessionState.DONE:
            next_state = handlers[self.state]()
            logger.info("Session %s -> %s", self.state.value, next_state.value)
            self.state = next_state
        return self.state

    def _abort(self, message: str, error: Exception) -> SessionState:
        logger.warning("Session aborted: %s", error)
        self.io.write(message)
        return SessionState.DONE

    def _select_variant(self) -> SessionState:
        for line in MENU:
            self.io.write(line)

        try:
            choice = parse_int(self.io.prompt())
            if not 1 <= choice <= 3:
                raise InvalidSelectionError(f"Choice out of range: {choice}")
        except (InvalidIntegerError, InvalidSelectionError) as e:
            return self._abort("Invalid choice. Exiting.", e)

        self.choice = choice
        return SessionState.PLAYER1_SETUP

    def _read_player(self, number: int) -> Tuple[str, int]:
        name = self.io.prompt(f"Enter player name {number}: ")
        rating = parse_int(self.io.prompt(f"Enter initial rating for player {number}: "))
        return name, rating

    def _player1_setup(self) -> SessionState:
        try:
            self._setup1 = self._read_player(1)
        except InvalidIntegerError as e:
            return self._abort("Invalid initial rating for player 1. Exiting.", e)
        return SessionState.PLAYER2_SETUP

    def _player2_setup(self) -> SessionState:
        try:
            self._setup2 = self._read_player(2)
        except InvalidIntegerError as e:
            return self._abort("Invalid initial rating for player 2. Exiting.", e)
        return SessionState.SIMULATE_AND_REPORT

    def _simulate_and_report(self) -> SessionState:
        self.player1 = create_account(self.choice, *self._setup1, rng=self.rng)
        self.player2 = create_account(self.choice, *self._setup2, rng=self.rng)

        for player in (self.player1, self.player2):
            player.play_games(self.games_per_player, self.io)
            player.print_stats(self.io.write)

        return SessionState.DONE


def main(seed: Optional[int] = None) -> int:
    """Run an interactive session on the console. Always returns 0."""
    SessionRunner(rng=np.random.default_rng(seed)).run()
    return 0
