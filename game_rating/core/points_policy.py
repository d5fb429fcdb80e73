"""
Points policies converting a game outcome into a rating delta.

These drive record_result and play_games. They are independent of the Elo
formula used by the game modes.
"""

from enum import Enum
from typing import Callable, Dict

from ..config import WIN_STREAK_BONUS, WIN_STREAK_THRESHOLD
from .elo_rating import LOSS, WIN
from .numeric import truncating_div


class PolicyKind(Enum):
    """The available points policies."""

    STANDARD = "standard"
    HALF_LOSS_PENALTY = "half-loss-penalty"
    WIN_STREAK_BONUS = "win-streak-bonus"


class PointsPolicy:
    """
    A points policy of a given kind.

    Standard and half-loss-penalty policies are stateless. The win-streak-bonus
    policy counts consecutive wins, so every account needs its own instance.
    """

    def __init__(
        self,
        kind: PolicyKind = PolicyKind.STANDARD,
        streak_threshold: int = WIN_STREAK_THRESHOLD,
        streak_bonus: int = WIN_STREAK_BONUS,
    ):
        """
        Initialize a points policy.

        Args:
            kind: Which policy to apply
            streak_threshold: Consecutive wins needed before the bonus applies
            streak_bonus: Flat bonus added to each win once the streak is reached
        """
        self.kind = PolicyKind(kind)
        self.streak_threshold = streak_threshold
        self.streak_bonus = streak_bonus
        self.consecutive_wins = 0

        self._dispatch: Dict[PolicyKind, Callable[[str, int], int]] = {
            PolicyKind.STANDARD: self._standard,
            PolicyKind.HALF_LOSS_PENALTY: self._half_loss_penalty,
            PolicyKind.WIN_STREAK_BONUS: self._win_streak_bonus,
        }

    def __repr__(self) -> str:
        return f"PointsPolicy(kind={self.kind.value!r}, consecutive_wins={self.consecutive_wins})"

    def compute(self, outcome: str, opponent_rating: int) -> int:
        """
        Compute the points change for a game.

        Args:
            outcome: "win", "loss" (any case) or anything else, which scores 0
            opponent_rating: The opponent's rating

        Returns:
            Signed points change
        """
        return self._dispatch[self.kind](outcome.lower(), opponent_rating)

    def _standard(self, outcome: str, opponent_rating: int) -> int:
        if outcome == WIN:
            return opponent_rating
        elif outcome == LOSS:
            return -opponent_rating
        return 0

    def _half_loss_penalty(self, outcome: str, opponent_rating: int) -> int:
        if outcome == WIN:
            return opponent_rating
        elif outcome == LOSS:
            return truncating_div(-opponent_rating, 2)
        return 0

    def _win_streak_bonus(self, outcome: str, opponent_rating: int) -> int:
        if outcome == WIN:
            self.consecutive_wins += 1
            bonus = self.streak_bonus if self.consecutive_wins >= self.streak_threshold else 0
            return opponent_rating + bonus
        elif outcome == LOSS:
            self.consecutive_wins = 0
            return -opponent_rating
        return 0
