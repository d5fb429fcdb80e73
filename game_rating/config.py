"""
Central configuration for the game rating accounts.

Shared constants live here so the formula path, the points policies and the
console session agree on them.
"""

import logging

# --- Elo formula ---
K_FACTOR = 32

# --- Opponent lookup ---
# Opponent ratings are drawn from [OPPONENT_RATING_MIN, OPPONENT_RATING_MAX)
OPPONENT_RATING_MIN = 1000
OPPONENT_RATING_MAX = 2000

# --- Win streak bonus ---
WIN_STREAK_THRESHOLD = 3
WIN_STREAK_BONUS = 10

# --- Session ---
GAMES_PER_PLAYER = 3

# --- Input parsing ---
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# --- Logging ---
# Diagnostics go to stderr; keep them quiet so the console conversation stays clean
LOG_LEVEL = logging.WARNING
