"""
Game statistics
Cumulative victories and total games shared by every session of a host
"""

import threading
from typing import Optional, Tuple


class GameStatistics:
    """Victory and game counters, always updated as a pair under one lock"""

    def __init__(self):
        self._lock = threading.Lock()
        self._victories = 0
        self._total_games = 0

    @property
    def victories(self) -> int:
        return self.snapshot()[0]

    @property
    def total_games(self) -> int:
        return self.snapshot()[1]

    def record_game(self, won: bool):
        """Count one finished game"""
        with self._lock:
            self._total_games += 1
            if won:
                self._victories += 1

    def snapshot(self) -> Tuple[int, int]:
        """Return (victories, total_games) read together"""
        with self._lock:
            return self._victories, self._total_games

    def win_ratio(self) -> Optional[float]:
        """Victories over total games, None before the first finished game"""
        victories, total = self.snapshot()
        if total == 0:
            return None
        return victories / total

    def reset(self):
        """Clear both counters"""
        with self._lock:
            self._victories = 0
            self._total_games = 0

    def __repr__(self) -> str:
        victories, total = self.snapshot()
        return f"GameStatistics(victories={victories}, total_games={total})"
