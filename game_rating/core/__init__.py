"""
Core rating functionality: the Elo formula, game modes, points policies and
game history. Nothing here does console I/O.
"""

from .elo_rating import expected_score, update_elo, new_rating
from .game_mode import GameMode, create_game_mode
from .history import GameHistory, GameRecord
from .numeric import truncate_toward_zero, truncating_div
from .points_policy import PointsPolicy, PolicyKind
