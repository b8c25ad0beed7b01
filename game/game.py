"""
Game - session lifecycle, level progression and scoring
"""

import threading

from config import DEFAULT_PLAYER_NAME, DEFAULT_CHARACTER
from entities.player import Player
from game.controller import Controller
from game.game_state import SessionState
from maze.difficulty import Difficulty, maze_size, to_difficulty
from maze.maze import Maze
from utils.constants import (
    START_LEVEL_WIDTH, START_LEVEL_HEIGHT, POINTS_ENEMY_KILLED, MAX_LEVEL,
    DIFFICULTY_EASY, DIFFICULTY_MEDIUM, DIFFICULTY_HARD
)


class Game:
    """
    Maze game session

    Owns the player, the maze of the current level and its controller.
    Moves between HOME, PLAYING and OVER. Every transition, including the
    check of the state it starts from, runs under one lock. Score and level
    are only written by the main loop.
    """
    START_LEVEL_WIDTH = START_LEVEL_WIDTH
    START_LEVEL_HEIGHT = START_LEVEL_HEIGHT
    POINTS_ENEMY_KILLED = POINTS_ENEMY_KILLED
    MAX_LEVEL = MAX_LEVEL

    EASY = DIFFICULTY_EASY
    MEDIUM = DIFFICULTY_MEDIUM
    HARD = DIFFICULTY_HARD

    def __init__(self, maze_factory=Maze):
        """
        Args:
            maze_factory: Callable(width, height, player, difficulty) building a maze
        """
        self.maze_factory = maze_factory
        self._state_lock = threading.Lock()
        self._state = SessionState.HOME

        self.player = Player(DEFAULT_PLAYER_NAME, DEFAULT_CHARACTER)
        self.maze = None
        self.controller = None

        self.score = 0
        self.high_score = 0
        self.level = 0  # Shown as Level 1
        self.difficulty = Difficulty.MEDIUM
        self.finished_level = False

    # ========== STATE ==========

    def _transition(self, new_state, from_states=None):
        """
        Move to new_state, only from one of from_states when given

        The check and the write happen under the lock.

        Returns:
            True if the state changed
        """
        with self._state_lock:
            if from_states is not None and self._state not in from_states:
                return False
            self._state = new_state
            return True

    def get_state(self):
        return self._state

    def is_game_over(self):
        """True when the player lost or passed all levels"""
        return self._state.game_over

    def is_in_game(self):
        """True while a maze is being played"""
        return self._state.in_game

    def _record_high_score(self):
        self.high_score = max(self.high_score, self.score)

    def set_is_game_over(self, is_game_over):
        """
        Set or clear game over

        Either way the score goes back to zero; it is folded into the
        high score first.
        """
        if is_game_over:
            self._transition(SessionState.OVER)
        else:
            self._transition(SessionState.HOME, from_states=(SessionState.OVER,))

        self._record_high_score()
        self.score = 0

    def set_in_game(self, in_game):
        """Enter or leave the maze screen. A finished session stays OVER."""
        self._transition(
            SessionState.PLAYING if in_game else SessionState.HOME,
            from_states=(SessionState.HOME, SessionState.PLAYING)
        )

    def return_home(self):
        """Back to the home screen from any state, keeping the run's score as high score"""
        self._transition(SessionState.HOME)
        self._record_high_score()
        self.finished_level = False

    # ========== SESSION ==========

    def start_new_game(self):
        """Fresh player at level 0 in a new maze; difficulty and high score carry over"""
        self.player = Player(self.player.name, self.player.character)
        self.level = 0
        self.score = 0
        self.finished_level = False
        self.create_maze()
        self._transition(SessionState.PLAYING)
        print(f"New game: difficulty {self.difficulty.label}")

    def create_maze(self):
        """Create a maze sized by level and difficulty, with a controller for it"""
        width, height = maze_size(self.level, self.difficulty)
        self.maze = self.maze_factory(width, height, self.player, self.difficulty)
        self.controller = Controller(self.maze, self.player)
        print(f"Level {self.level + 1}: maze {width}x{height}")

    def check_next_level(self):
        """
        Advance when the player has left the maze

        Polled once per frame.

        Returns:
            True if a level was finished
        """
        if self._state is SessionState.OVER or self.level >= MAX_LEVEL:
            return False
        if self.maze is None or not self.maze.exited_maze():
            return False

        self.finished_level = True
        self.level += 1
        self.player.clear_inventory()

        if self.level == MAX_LEVEL:
            print("All levels complete!")
            self.set_is_game_over(True)
            self.set_in_game(False)
        else:
            self.create_maze()
        return True

    def check_player_alive(self):
        """
        End the session if the player died

        Returns:
            True if this call ended the game
        """
        if self.player.is_alive():
            return False
        if not self._transition(SessionState.OVER, from_states=(SessionState.PLAYING,)):
            return False

        print(f"Game over at level {self.level + 1}")
        self.update_score()
        self._record_high_score()
        self.score = 0
        return True

    def has_won(self):
        return self.level == MAX_LEVEL

    # ========== SCORE ==========

    def update_score(self):
        """1 point per treasure, POINTS_ENEMY_KILLED per enemy killed"""
        self.score = (self.player.get_num_treasure_collected()
                      + POINTS_ENEMY_KILLED * self.player.get_enemy_killed())

    def get_score(self):
        return self.score

    # ========== ACCESSORS ==========

    def get_level(self):
        return self.level

    def set_level(self, level):
        """
        Jump to a level

        Raises:
            ValueError: if level is outside [0, MAX_LEVEL]
        """
        if isinstance(level, bool) or not isinstance(level, int) or not 0 <= level <= MAX_LEVEL:
            raise ValueError(f"Level must be between 0 and {MAX_LEVEL}, got {level!r}")
        self.level = level
        if level == MAX_LEVEL:
            self.set_is_game_over(True)

    def get_difficulty(self):
        return self.difficulty

    def set_difficulty(self, difficulty):
        """
        Raises:
            ValueError: if difficulty is not EASY, MEDIUM or HARD
        """
        self.difficulty = to_difficulty(difficulty)

    def get_finished_level(self):
        """True right after a maze was exited, until the level screen clears it"""
        return self.finished_level

    def set_finished_level(self, finished):
        self.finished_level = finished

    def get_maze(self):
        return self.maze

    def get_player(self):
        return self.player

    def get_controller(self):
        return self.controller

    def set_controller(self, controller):
        self.controller = controller

    def __repr__(self):
        return (f"Game(state={self._state.name}, level={self.level}, "
                f"difficulty={self.difficulty.name}, score={self.score})")
