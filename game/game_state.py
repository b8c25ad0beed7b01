"""
Session states - one value instead of separate in-game/game-over flags
"""

from enum import Enum, auto


class SessionState(Enum):
    """Session states"""
    HOME = auto()
    PLAYING = auto()
    OVER = auto()

    @property
    def in_game(self):
        return self is SessionState.PLAYING

    @property
    def game_over(self):
        return self is SessionState.OVER
