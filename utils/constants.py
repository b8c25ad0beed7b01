"""
Global constants for Maze Quest
"""

# Screen settings
CELL_SIZE = 32
WALL_THICK = 3

# HUD panel height
PANEL_H = 90

# Wall bit flags (for maze generation)
TOP = 1
RIGHT = 2
BOTTOM = 4
LEFT = 8

# Direction vectors with wall bits
DIRS = [
    (0, -1, TOP, BOTTOM),    # up
    (1, 0, RIGHT, LEFT),     # right
    (0, 1, BOTTOM, TOP),     # down
    (-1, 0, LEFT, RIGHT),    # left
]

# Direction to bit mapping
DIR_TO_BITS = {
    (0, -1): (TOP, BOTTOM),
    (1, 0): (RIGHT, LEFT),
    (0, 1): (BOTTOM, TOP),
    (-1, 0): (LEFT, RIGHT),
}

# Level progression
START_LEVEL_WIDTH = 11
START_LEVEL_HEIGHT = 11
MAX_LEVEL = 10
MIN_MAZE_SIZE = 2

# Difficulty values (added straight into the maze size formula)
DIFFICULTY_EASY = -1
DIFFICULTY_MEDIUM = 0
DIFFICULTY_HARD = 1

DIFFICULTY_NAMES = {
    DIFFICULTY_EASY: "EASY",
    DIFFICULTY_MEDIUM: "MEDIUM",
    DIFFICULTY_HARD: "HARD",
}

# Player settings
PLAYER_MAX_HEALTH = 100

# Enemy settings
ENEMY_DAMAGE = 25
ENEMY_MOVE_COOLDOWN = 0.6  # Seconds between steps

# Items
ITEM_SWORD = "sword"
ITEM_TREASURE = "treasure"
TREASURE_VALUE = 1

# Score constants
POINTS_ENEMY_KILLED = 10
