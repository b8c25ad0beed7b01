"""
Maze Quest
Collect treasure, fight enemies and clear all levels
"""

import os
import sys

# Enable smooth live resize on Windows (must be set before pygame import)
if sys.platform == 'win32':
    os.environ.setdefault('SDL_WINDOWS_ENABLE_MESSAGELOOP', '1')

import pygame

from game.game import Game
from game.game_state import SessionState
from game.ui_manager import UIManager
from utils.constants import CELL_SIZE, PANEL_H
from utils.helpers import clamp
from config import (
    GAME_TITLE, GAME_VERSION, SCREEN_W, SCREEN_H, FPS,
    KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS
)


class MazeGame:
    """
    Main game class
    """
    def __init__(self):
        pygame.init()
        pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)

        self.game = Game()
        self.ui_manager = UIManager()

        self.screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        self.clock = pygame.time.Clock()
        self.running = True

        # Menu state
        self.menu_index = 0

    def _menu_items(self):
        return [
            "Start Game",
            f"Difficulty: {self.game.get_difficulty().label}",
            "Quit",
        ]

    def _cell_size(self):
        """Largest cell size that fits the current maze on screen"""
        maze = self.game.get_maze()
        return clamp(min(SCREEN_W // maze.cols, (SCREEN_H - PANEL_H) // maze.rows), 4, CELL_SIZE)

    # ========== EVENTS ==========

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            state = self.game.get_state()
            if state is SessionState.HOME:
                self._handle_menu_event(event)
            elif state is SessionState.PLAYING:
                self._handle_playing_event(event)
            elif state is SessionState.OVER:
                self._handle_game_over_event(event)

    def _handle_menu_event(self, event):
        if event.type != pygame.KEYDOWN:
            return

        items = self._menu_items()
        if event.key in (pygame.K_UP, pygame.K_w):
            self.menu_index = (self.menu_index - 1) % len(items)
        elif event.key in (pygame.K_DOWN, pygame.K_s):
            self.menu_index = (self.menu_index + 1) % len(items)
        elif event.key in (pygame.K_LEFT, pygame.K_RIGHT) and self.menu_index == 1:
            self.game.set_difficulty(self.game.get_difficulty().next())
        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if self.menu_index == 0:
                self.game.start_new_game()
            elif self.menu_index == 1:
                self.game.set_difficulty(self.game.get_difficulty().next())
            else:
                self.running = False
        elif event.key == pygame.K_ESCAPE:
            self.running = False

    def _handle_playing_event(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.game.return_home()
            return

        if self.game.get_finished_level():
            if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.game.set_finished_level(False)
            return

        self.game.get_controller().handle_event(event)

    def _handle_game_over_event(self, event):
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE):
            self.game.return_home()

    # ========== UPDATE ==========

    def update(self, dt):
        if not self.game.is_in_game() or self.game.get_finished_level():
            return

        self.game.get_maze().update(dt)
        self.game.update_score()
        if self.game.check_player_alive():
            return
        self.game.check_next_level()

    # ========== DRAW ==========

    def draw(self):
        state = self.game.get_state()

        if state is SessionState.HOME:
            self.ui_manager.draw_menu(
                self.screen, GAME_TITLE, self._menu_items(), self.menu_index,
                subtitle=f"High score: {self.game.high_score}"
            )
        elif state is SessionState.PLAYING:
            cell_size = self._cell_size()
            maze = self.game.get_maze()
            self.ui_manager.draw_maze(self.screen, maze, cell_size)
            self.ui_manager.draw_hud(self.screen, self.game, maze.rows * cell_size, SCREEN_W, PANEL_H)
            if self.game.get_finished_level():
                self.ui_manager.draw_level_complete(self.screen, self.game.get_level(), self.game.get_score())
        else:
            self.ui_manager.draw_game_over(self.screen, self.game.has_won(), self.game.high_score)

        pygame.display.flip()

    def run(self):
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self.handle_events()
            self.update(dt)
            if self.running:
                self.draw()

        pygame.quit()
        print("Game closed.")


def main():
    MazeGame().run()


if __name__ == "__main__":
    main()
