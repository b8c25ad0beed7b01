"""
Color palette for Maze Quest
"""

# Background colors
COLOR_BG = (20, 22, 28)           # Main background
COLOR_MAZE_BG = (16, 18, 24)      # Maze area background
COLOR_PANEL_BG = (12, 14, 18)     # Panel background

# UI colors
COLOR_WALL = (230, 230, 230)      # Maze walls
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text

# Entity colors
COLOR_PLAYER = (70, 140, 255)     # Player
COLOR_GOAL = (60, 200, 120)       # Exit
COLOR_ENEMY = (255, 90, 90)
COLOR_TREASURE = (255, 215, 0)
COLOR_SWORD = (190, 200, 230)

# Bars
COLOR_HEALTH_BAR_BG = (60, 60, 60)
COLOR_HEALTH_BAR_FULL = (80, 220, 120)
COLOR_HEALTH_BAR_LOW = (220, 80, 80)

# Menu colors
COLOR_MENU_SELECTION = (255, 220, 120)     # Selected menu item
COLOR_MENU_BORDER = (255, 220, 120)        # Selection border

COLOR_WIN = (100, 255, 150)
COLOR_LOSE = (255, 100, 100)

PICKUP_COLORS = {
    'treasure': COLOR_TREASURE,
    'sword': COLOR_SWORD,
}
