import pytest

from entities.player import Player
from game.game import Game


class FakeMaze:
    """Records moves; exit state is set by the test"""
    def __init__(self, width, height, player, difficulty=None):
        self.width = width
        self.height = height
        self.player = player
        self.difficulty = difficulty
        self.moves = []
        self.exited = False

    def update_player_loc(self, dx, dy):
        self.moves.append((dx, dy))

    def exited_maze(self):
        return self.exited


@pytest.fixture
def player():
    return Player("Tester", "link")


@pytest.fixture
def fake_maze(player):
    return FakeMaze(11, 11, player)


@pytest.fixture
def game():
    return Game(maze_factory=FakeMaze)
