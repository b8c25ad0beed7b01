"""
Difficulty settings for Maze Quest
Difficulty is an additive term in the maze size formula, so a harder
setting produces a bigger maze at every level.
"""

from enum import IntEnum

from utils.constants import (
    DIFFICULTY_EASY, DIFFICULTY_MEDIUM, DIFFICULTY_HARD, DIFFICULTY_NAMES,
    START_LEVEL_WIDTH, START_LEVEL_HEIGHT, ENEMY_DAMAGE, ENEMY_MOVE_COOLDOWN
)


class Difficulty(IntEnum):
    """Difficulty setting"""
    EASY = DIFFICULTY_EASY
    MEDIUM = DIFFICULTY_MEDIUM
    HARD = DIFFICULTY_HARD

    @property
    def label(self):
        return DIFFICULTY_NAMES[self.value]

    def next(self):
        """Cycle EASY -> MEDIUM -> HARD -> EASY (used by the home menu)"""
        members = list(Difficulty)
        return members[(members.index(self) + 1) % len(members)]


def to_difficulty(value):
    """
    Convert an int or Difficulty to Difficulty

    Raises:
        ValueError: if value is not one of EASY/MEDIUM/HARD
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid difficulty: {value!r}")
    try:
        return Difficulty(value)
    except ValueError:
        raise ValueError(f"Invalid difficulty: {value!r}") from None


def maze_size(level, difficulty):
    """Width and height of the maze for a level at a difficulty"""
    width = START_LEVEL_WIDTH + 2 * (level + int(difficulty))
    height = START_LEVEL_HEIGHT + 2 * (level + int(difficulty))
    return width, height


class DifficultyConfig:
    """Spawn settings for a single difficulty"""
    def __init__(self, **kwargs):
        # Cells per spawned entity (lower = denser)
        self.cells_per_treasure = kwargs.get('cells_per_treasure', 12)
        self.cells_per_enemy = kwargs.get('cells_per_enemy', 40)
        self.cells_per_sword = kwargs.get('cells_per_sword', 60)

        # Enemy stats
        self.enemy_damage = kwargs.get('enemy_damage', ENEMY_DAMAGE)
        self.enemy_move_cooldown = kwargs.get('enemy_move_cooldown', ENEMY_MOVE_COOLDOWN)

    def counts_for(self, cols, rows):
        """
        Entity counts for a maze of the given size

        Returns:
            (treasure_count, sword_count, enemy_count)
        """
        area = cols * rows
        treasure = max(1, area // self.cells_per_treasure)
        swords = max(1, area // self.cells_per_sword)
        enemies = area // self.cells_per_enemy
        return treasure, swords, enemies


LEVEL_EASY = DifficultyConfig(
    cells_per_treasure=10,
    cells_per_enemy=60,
    cells_per_sword=40,
    enemy_damage=20,
    enemy_move_cooldown=0.8,
)

LEVEL_MEDIUM = DifficultyConfig(
    cells_per_treasure=12,
    cells_per_enemy=40,
    cells_per_sword=60,
    enemy_damage=25,
    enemy_move_cooldown=0.6,
)

LEVEL_HARD = DifficultyConfig(
    cells_per_treasure=15,
    cells_per_enemy=25,
    cells_per_sword=80,
    enemy_damage=34,
    enemy_move_cooldown=0.4,
)

DIFFICULTY_CONFIGS = {
    Difficulty.EASY: LEVEL_EASY,
    Difficulty.MEDIUM: LEVEL_MEDIUM,
    Difficulty.HARD: LEVEL_HARD,
}


def get_difficulty_config(difficulty):
    """Get configuration for a difficulty"""
    return DIFFICULTY_CONFIGS[to_difficulty(difficulty)]
