"""
Game accounts: a player's rating, game counter, points policy and history.
"""

from typing import Callable, List, Optional

import numpy as np

from .config import K_FACTOR, OPPONENT_RATING_MAX, OPPONENT_RATING_MIN
from .console import ConsoleIO
from .core import GameHistory, GameMode, GameRecord, PointsPolicy, PolicyKind, create_game_mode
from .errors import HistoryMismatchError, InvalidIntegerError, InvalidSelectionError
from .utils import parse_int, setup_logging

logger = setup_logging(__name__)

# Menu choice -> points policy
ACCOUNT_TYPES = {
    1: PolicyKind.STANDARD,
    2: PolicyKind.HALF_LOSS_PENALTY,
    3: PolicyKind.WIN_STREAK_BONUS,
}

OUTCOMES = ("Win", "Loss")


class GameAccount:
    """
    A player's account.

    Games recorded with record_result (and play_games) are scored by the
    account's points policy. Games recorded with win_game/lose_game are scored
    by its game mode instead, against a randomly drawn opponent rating, and
    add the mode's whole new rating to the current one.
    """

    def __init__(
        self,
        name: str,
        initial_rating: int,
        policy: Optional[PointsPolicy] = None,
        mode: GameMode = GameMode.STANDARD,
        rng: Optional[np.random.Generator] = None,
        k_factor: float = K_FACTOR,
    ):
        """
        Initialize a game account.

        Args:
            name: Display name of the player
            initial_rating: Starting rating, used as given
            policy: Points policy; a standard policy is created if omitted
            mode: Game mode for win_game/lose_game
            rng: Random source for outcomes and opponent ratings
            k_factor: K-factor used by the standard game mode
        """
        self._name = name
        self._rating = initial_rating
        self.games_played = 0
        self.history = GameHistory()
        self.k_factor = k_factor
        self._policy = policy if policy is not None else PointsPolicy(PolicyKind.STANDARD)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.game_mode = GameMode.STANDARD
        self.set_game_mode(mode)

    @property
    def name(self) -> str:
        return self._name

    @property
    def rating(self) -> int:
        """Current rating. Only changed by recording a game."""
        return self._rating

    @property
    def policy(self) -> PointsPolicy:
        return self._policy

    def __repr__(self) -> str:
        return (
            f"GameAccount(name={self._name!r}, rating={self.rating}, "
            f"games_played={self.games_played}, policy={self._policy.kind.value!r})"
        )

    def set_game_mode(self, mode) -> None:
        """Switch the game mode used by win_game/lose_game. Nothing else changes."""
        self.game_mode = create_game_mode(mode)
        logger.info("%s switched to %s mode", self._name, self.game_mode.value)

    def record_result(self, opponent_name: str, outcome: str, opponent_rating: int) -> GameRecord:
        """
        Record a game scored by the points policy.

        Outcomes other than "win"/"loss" (any case) score zero points.

        Args:
            opponent_name: Name of the opponent
            outcome: Outcome from this player's perspective
            opponent_rating: The opponent's rating

        Returns:
            The appended game record
        """
        points_change = self._policy.compute(outcome, opponent_rating)
        return self._apply(opponent_name, outcome, opponent_rating, points_change)

    def win_game(self, opponent_name: str) -> GameRecord:
        """Record a win scored by the game mode against a random opponent rating."""
        return self._play_against(opponent_name, "Win")

    def lose_game(self, opponent_name: str) -> GameRecord:
        """Record a loss scored by the game mode against a random opponent rating."""
        return self._play_against(opponent_name, "Loss")

    def _play_against(self, opponent_name: str, outcome: str) -> GameRecord:
        opponent_rating = self.get_opponent_rating(opponent_name)
        # The mode's new rating is applied as the points change itself, so a
        # practice win doubles the rating
        points_change = self.game_mode.calculate_rating(self._rating, opponent_rating, outcome, self.k_factor)
        return self._apply(opponent_name, outcome, opponent_rating, points_change)

    def get_opponent_rating(self, opponent_name: str) -> int:
        """
        Look up an opponent's rating.

        There is no player registry, so the rating is drawn uniformly from
        [OPPONENT_RATING_MIN, OPPONENT_RATING_MAX) regardless of the name.
        """
        return int(self.rng.integers(OPPONENT_RATING_MIN, OPPONENT_RATING_MAX))

    def _apply(self, opponent_name: str, outcome: str, opponent_rating: int, points_change: int) -> GameRecord:
        self.games_played += 1
        self._rating += points_change
        record = GameRecord(
            opponent_name=opponent_name,
            outcome=outcome,
            opponent_rating=opponent_rating,
            points_change=points_change,
            index=self.games_played - 1,
        )
        self.history.append(record)

        if self.games_played != len(self.history):
            raise HistoryMismatchError(
                f"{self._name}: {self.games_played} games played but {len(self.history)} recorded"
            )

        logger.debug(
            "%s game %d vs %s: %s, points change %d, rating now %d",
            self._name, record.index + 1, opponent_name, outcome, points_change, self.rating,
        )
        return record

    def stats_lines(self) -> List[str]:
        """Return the game history and summary as printable lines."""
        lines = [f"Game history for {self._name} ({self.game_mode.value} mode):"]
        lines.extend(record.describe() for record in self.history)
        lines.append(f"Total games played: {self.games_played}, Current Rating: {self.rating}")
        return lines

    def print_stats(self, write: Callable[[str], None] = print) -> None:
        """Write the game history and summary, one line per call to write."""
        for line in self.stats_lines():
            write(line)

    def random_outcome(self) -> str:
        """Pick "Win" or "Loss" with equal probability."""
        return OUTCOMES[0] if self.rng.integers(2) == 0 else OUTCOMES[1]

    def play_games(self, number_of_games: int, io: Optional[ConsoleIO] = None) -> List[GameRecord]:
        """
        Simulate games, asking the console for each opponent's name and rating.

        A rating that does not parse skips that game; nothing is recorded for it.

        Args:
            number_of_games: How many games to prompt for
            io: Console boundary; defaults to stdin/stdout

        Returns:
            The records of the games that were recorded
        """
        io = io if io is not None else ConsoleIO()
        recorded = []

        for i in range(number_of_games):
            game_number = i + 1
            opponent_name = io.prompt(f"Enter opponent name for game {game_number}: ")
            raw_rating = io.prompt(f"Enter rating for game {game_number}: ")

            try:
                opponent_rating = parse_int(raw_rating)
            except InvalidIntegerError as e:
                logger.warning("%s: skipping game %d: %s", self._name, game_number, e)
                io.write(f"Invalid rating. Game {game_number} not recorded.")
                continue

            outcome = self.random_outcome()
            io.write(f"Game result for game {game_number}: {outcome}")
            recorded.append(self.record_result(opponent_name, outcome, opponent_rating))

        return recorded


def create_account(
    choice: int,
    name: str,
    initial_rating: int,
    rng: Optional[np.random.Generator] = None,
) -> GameAccount:
    """
    Create an account for a menu choice.

    Args:
        choice: 1 (standard), 2 (half points deducted) or 3 (victory series bonus)
        name: Display name of the player
        initial_rating: Starting rating
        rng: Random source for the account

    Raises:
        InvalidSelectionError: If choice is not one of the menu entries
    """
    if choice not in ACCOUNT_TYPES:
        raise InvalidSelectionError(f"Invalid account type: {choice}")
    return GameAccount(name, initial_rating, policy=PointsPolicy(ACCOUNT_TYPES[choice]), rng=rng)
