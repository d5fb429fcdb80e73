"""
Core implementation of the Elo rating formula used by the standard game mode.
"""

import math

from ..config import K_FACTOR
from .numeric import truncate_toward_zero

WIN = "win"
LOSS = "loss"


def expected_score(rating_a: float, rating_b: float) -> float:
    """
    Calculate the expected score for player A against player B.

    Args:
        rating_a: Elo rating of player A
        rating_b: Elo rating of player B

    Returns:
        Expected score for player A (between 0 and 1)
    """
    return 1.0 / (1.0 + math.pow(10, (rating_b - rating_a) / 400.0))


def update_elo(rating: float, expected: float, actual: float, k_factor: float = K_FACTOR) -> float:
    """
    Update an Elo rating based on the expected and actual outcomes.

    Args:
        rating: Current Elo rating
        expected: Expected outcome (between 0 and 1)
        actual: Actual outcome (0 for loss, 1 for win)
        k_factor: K-factor for Elo calculation (determines how much ratings change)

    Returns:
        Updated Elo rating, not yet truncated
    """
    return rating + k_factor * (actual - expected)


def new_rating(rating_a: int, rating_b: int, outcome: str, k_factor: float = K_FACTOR) -> int:
    """
    Calculate player A's rating after a game against player B.

    Only "win" and "loss" (any case) move the rating; every other outcome
    returns rating_a unchanged. The updated rating is truncated toward zero.

    Args:
        rating_a: Current rating of player A
        rating_b: Rating of player B
        outcome: Outcome from player A's perspective
        k_factor: K-factor for Elo calculation

    Returns:
        Player A's new integer rating
    """
    normalized = outcome.lower()
    if normalized == WIN:
        actual = 1.0
    elif normalized == LOSS:
        actual = 0.0
    else:
        return rating_a

    expected = expected_score(rating_a, rating_b)
    return truncate_toward_zero(update_elo(rating_a, expected, actual, k_factor))
