"""
Exceptions raised by the game rating package.
"""


class GameRatingError(Exception):
    """Base class for all game rating errors."""


class InvalidIntegerError(GameRatingError, ValueError):
    """Raised when console input cannot be parsed as a 32-bit integer."""


class InvalidSelectionError(GameRatingError, ValueError):
    """Raised when a menu choice is not one of the offered account types."""


class HistoryMismatchError(GameRatingError):
    """Raised when an account's game counter and history length disagree."""
