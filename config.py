"""
Game configuration
"""

GAME_TITLE = "Maze Quest"
GAME_VERSION = "1.0.0"

# Window
SCREEN_W = 800
SCREEN_H = 600
FPS = 60

# Input
KEY_REPEAT_DELAY_MS = 200  # Held keys repeat as KEYDOWN events
KEY_REPEAT_INTERVAL_MS = 90

# Default player
DEFAULT_PLAYER_NAME = "Default"
DEFAULT_CHARACTER = "link"
