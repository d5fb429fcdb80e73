"""
Game modes deciding how the formula path turns a result into a rating.
"""

from enum import Enum
from typing import Union

from ..config import K_FACTOR
from .elo_rating import new_rating


class GameMode(Enum):
    """
    How a game played through win_game/lose_game affects rating.

    STANDARD applies the Elo formula; PRACTICE never changes rating.
    """

    STANDARD = "Standard"
    PRACTICE = "Practice"

    def calculate_rating(self, rating_a: int, rating_b: int, outcome: str, k_factor: float = K_FACTOR) -> int:
        """
        Return player A's rating after the game under this mode.

        Args:
            rating_a: Current rating of player A
            rating_b: Rating of the opponent
            outcome: Outcome from player A's perspective
            k_factor: K-factor passed to the Elo formula

        Returns:
            The new rating (not the delta)
        """
        if self is GameMode.PRACTICE:
            return rating_a
        return new_rating(rating_a, rating_b, outcome, k_factor)


def create_game_mode(mode: Union[str, GameMode]) -> GameMode:
    """
    Resolve a mode name ("standard", "Practice", ...) or member to a GameMode.

    Raises:
        ValueError: If the name matches no mode
    """
    if isinstance(mode, GameMode):
        return mode

    for member in GameMode:
        if member.value.lower() == str(mode).strip().lower():
            return member

    raise ValueError(f"Unknown game mode: {mode!r}")
