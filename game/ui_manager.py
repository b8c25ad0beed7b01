"""
UI Manager - handles all UI rendering (maze, HUD, menus, screens)
"""

import pygame
from utils.colors import (
    COLOR_BG, COLOR_MAZE_BG, COLOR_WALL, COLOR_PLAYER, COLOR_GOAL,
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_PANEL_BG,
    COLOR_HEALTH_BAR_BG, COLOR_HEALTH_BAR_FULL, COLOR_HEALTH_BAR_LOW,
    COLOR_MENU_SELECTION, COLOR_MENU_BORDER, COLOR_WIN, COLOR_LOSE
)
from utils.constants import TOP, RIGHT, BOTTOM, LEFT, WALL_THICK, ITEM_SWORD
from utils.helpers import format_score


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self.font_title = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_large = pygame.font.SysFont("consolas", 28, bold=True)
        self.font_title = pygame.font.SysFont("consolas", 48, bold=True)

    # ========== MAZE ==========

    def draw_maze(self, screen, maze, cell_size):
        """Draw maze background, entities, player and walls"""
        screen.fill(COLOR_BG)
        pygame.draw.rect(screen, COLOR_MAZE_BG, (0, 0, maze.cols * cell_size, maze.rows * cell_size))

        self._draw_cell(screen, maze.exit_pos[0], maze.exit_pos[1], cell_size, COLOR_GOAL)

        for pickup in maze.pickup_manager.get_uncollected_pickups():
            self._draw_cell(screen, pickup.x, pickup.y, cell_size, pickup.get_color(), pad=cell_size // 3)

        for enemy in maze.enemy_manager.enemies:
            self._draw_cell(screen, enemy.x, enemy.y, cell_size, enemy.get_color(), pad=cell_size // 5)

        self._draw_cell(screen, maze.player.x, maze.player.y, cell_size, COLOR_PLAYER)

        self._draw_walls(screen, maze.walls, maze.cols, maze.rows, cell_size)

    def _draw_walls(self, screen, walls, cols, rows, cell_size):
        for y in range(rows):
            for x in range(cols):
                w = walls[y * cols + x]
                x0 = x * cell_size
                y0 = y * cell_size
                x1 = x0 + cell_size
                y1 = y0 + cell_size

                if w & TOP:
                    pygame.draw.line(screen, COLOR_WALL, (x0, y0), (x1, y0), WALL_THICK)
                if w & RIGHT:
                    pygame.draw.line(screen, COLOR_WALL, (x1, y0), (x1, y1), WALL_THICK)
                if w & BOTTOM:
                    pygame.draw.line(screen, COLOR_WALL, (x0, y1), (x1, y1), WALL_THICK)
                if w & LEFT:
                    pygame.draw.line(screen, COLOR_WALL, (x0, y0), (x0, y1), WALL_THICK)

    def _draw_cell(self, screen, x, y, cell_size, color, pad=None):
        """Draw filled cell"""
        if pad is None:
            pad = max(2, cell_size // 6)
        rect = (x * cell_size + pad, y * cell_size + pad, cell_size - pad * 2, cell_size - pad * 2)
        pygame.draw.rect(screen, color, rect, border_radius=max(1, cell_size // 6))

    # ========== HUD ==========

    def draw_hud(self, screen, game, panel_y, screen_w, panel_h):
        """
        Draw HUD (Heads-Up Display)

        Args:
            screen: Pygame screen
            game: Game session
            panel_y: Y position of panel
            screen_w: Screen width
            panel_h: Panel height
        """
        player = game.get_player()
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        self._draw_health_bar(screen, player, 10, panel_y + 10, 160, 18)

        stats = [
            f"Level: {game.get_level() + 1}  Difficulty: {game.get_difficulty().label}",
            f"Score: {format_score(game.get_score())}  Treasure: {player.get_num_treasure_collected()}  "
            f"Kills: {player.get_enemy_killed()}  Swords: {player.count_item(ITEM_SWORD)}",
            "WASD: Move | ESC: Home",
        ]
        for i, line in enumerate(stats):
            text = self.font_small.render(line, True, COLOR_TEXT if i < 2 else COLOR_TEXT_DIM)
            screen.blit(text, (10, panel_y + 36 + i * 17))

    def _draw_health_bar(self, screen, player, x, y, width, height):
        """Draw health bar"""
        pygame.draw.rect(screen, COLOR_HEALTH_BAR_BG, (x, y, width, height), border_radius=4)

        health_percent = player.get_health_percent()
        fill_width = int(width * health_percent)
        color = COLOR_HEALTH_BAR_FULL if health_percent > 0.3 else COLOR_HEALTH_BAR_LOW

        if fill_width > 0:
            pygame.draw.rect(screen, color, (x, y, fill_width, height), border_radius=4)
        pygame.draw.rect(screen, (200, 200, 200), (x, y, width, height), 2, border_radius=4)

        text = self.font_small.render(
            f"Health: {int(player.stats['health'])}/{int(player.stats['max_health'])}",
            True, COLOR_TEXT
        )
        screen.blit(text, (x + width + 10, y + 2))

    # ========== SCREENS ==========

    def draw_menu(self, screen, title, menu_items, selected_index, subtitle=None):
        """
        Draw a menu

        Args:
            screen: Pygame screen
            title: Menu title
            menu_items: List of menu item strings
            selected_index: Currently selected item index
            subtitle: Optional subtitle text
        """
        screen.fill(COLOR_BG)
        screen_w, screen_h = screen.get_size()

        title_text = self.font_title.render(title, True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(title_text, title_text.get_rect(center=(screen_w // 2, 80)))

        if subtitle:
            subtitle_text = self.font_medium.render(subtitle, True, COLOR_TEXT)
            screen.blit(subtitle_text, subtitle_text.get_rect(center=(screen_w // 2, 130)))

        start_y = 220
        gap = 50
        for i, item in enumerate(menu_items):
            is_selected = i == selected_index
            color = COLOR_MENU_SELECTION if is_selected else COLOR_TEXT

            text = self.font_large.render(item, True, color)
            text_rect = text.get_rect(center=(screen_w // 2, start_y + i * gap))
            if is_selected:
                pygame.draw.rect(screen, COLOR_MENU_BORDER, text_rect.inflate(40, 16), 3, border_radius=8)
            screen.blit(text, text_rect)

        help_text = self.font_small.render(
            "UP/DOWN: Navigate | ENTER: Select | LEFT/RIGHT: Change | ESC: Quit", True, COLOR_TEXT_DIM
        )
        screen.blit(help_text, help_text.get_rect(center=(screen_w // 2, screen_h - 40)))

    def draw_level_complete(self, screen, level, score):
        """Draw level complete overlay"""
        self._draw_overlay(screen)
        screen_w, screen_h = screen.get_size()

        title = self.font_title.render("LEVEL COMPLETE!", True, COLOR_WIN)
        screen.blit(title, title.get_rect(center=(screen_w // 2, screen_h // 2 - 60)))

        text = self.font_large.render(f"Next: Level {level + 1}   Score: {format_score(score)}", True, COLOR_TEXT)
        screen.blit(text, text.get_rect(center=(screen_w // 2, screen_h // 2)))

        prompt = self.font_medium.render("Press ENTER to continue", True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(prompt, prompt.get_rect(center=(screen_w // 2, screen_h // 2 + 60)))

    def draw_game_over(self, screen, won, high_score):
        """Draw game over / win screen"""
        screen.fill(COLOR_BG)
        screen_w, screen_h = screen.get_size()

        title = self.font_title.render("YOU WIN!" if won else "GAME OVER", True, COLOR_WIN if won else COLOR_LOSE)
        screen.blit(title, title.get_rect(center=(screen_w // 2, screen_h // 2 - 50)))

        message = self.font_large.render(f"High score: {format_score(high_score)}", True, COLOR_TEXT)
        screen.blit(message, message.get_rect(center=(screen_w // 2, screen_h // 2 + 20)))

        prompt = self.font_medium.render("Press ENTER for menu", True, COLOR_TEXT_DIM)
        screen.blit(prompt, prompt.get_rect(center=(screen_w // 2, screen_h // 2 + 80)))

    def _draw_overlay(self, screen):
        """Semi-transparent overlay"""
        screen_w, screen_h = screen.get_size()
        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        screen.blit(overlay, (0, 0))
