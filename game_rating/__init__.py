"""
Game Rating - rating bookkeeping for two-player game accounts.
"""

from .core import (
    GameHistory,
    GameMode,
    GameRecord,
    PointsPolicy,
    PolicyKind,
    create_game_mode,
    expected_score,
    new_rating,
    update_elo,
)
from .account import GameAccount, create_account
from .console import ConsoleIO
from .session import SessionRunner, SessionState, main

__all__ = [
    "GameAccount",
    "create_account",
    "GameHistory",
    "GameMode",
    "GameRecord",
    "PointsPolicy",
    "PolicyKind",
    "create_game_mode",
    "expected_score",
    "new_rating",
    "update_elo",
    "ConsoleIO",
    "SessionRunner",
    "SessionState",
    "main",
]
