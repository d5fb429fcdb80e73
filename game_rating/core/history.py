"""
Game records and the append-only history that holds them.
"""

from dataclasses import dataclass
from typing import Iterator, List


@dataclass(frozen=True)
class GameRecord:
    """The result of one recorded game."""
    opponent_name: str
    outcome: str
    opponent_rating: int
    points_change: int
    index: int

    def describe(self) -> str:
        return (
            f"Game {self.index + 1}: Against {self.opponent_name}, {self.outcome} "
            f"with rating {self.opponent_rating}. Points Change: {self.points_change}"
        )


class GameHistory:
    """Chronological log of an account's games. Records can only be appended."""

    def __init__(self):
        self._records: List[GameRecord] = []

    def append(self, record: GameRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[GameRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> GameRecord:
        return self._records[index]

    @property
    def total_points_change(self) -> int:
        """Sum of every recorded points change."""
        return sum(record.points_change for record in self._records)
