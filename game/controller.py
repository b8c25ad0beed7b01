"""
Controller - maps key presses to unit moves on the maze
"""

import pygame


# key -> (dx, dy, log message)
KEY_MOVES = {
    pygame.K_d: (1, 0, "right"),
    pygame.K_a: (-1, 0, "left"),
    pygame.K_w: (0, -1, "up"),
    pygame.K_s: (0, 1, "down"),
}


def movement_for_key(key):
    """Movement vector (dx, dy) for a key code; (0, 0) when unmapped"""
    dx, dy, _ = KEY_MOVES.get(key, (0, 0, None))
    return dx, dy


class Controller:
    """
    Keyboard controller bound to one maze
    """
    def __init__(self, maze, player=None):
        self.maze = maze
        self.player = player

    def key_pressed(self, key):
        """
        Forward the move for a pressed key to the maze

        Unmapped keys still reach the maze, as a (0, 0) move.

        Returns:
            The (dx, dy) that was forwarded
        """
        dx, dy, message = KEY_MOVES.get(key, (0, 0, "Key Pressed!!!"))
        print(message)
        self.maze.update_player_loc(dx, dy)
        return dx, dy

    def key_released(self, key):
        pass

    def key_typed(self, text):
        pass

    def handle_event(self, event):
        """Dispatch a pygame event to the matching key handler"""
        if event.type == pygame.KEYDOWN:
            return self.key_pressed(event.key)
        if event.type == pygame.KEYUP:
            self.key_released(event.key)
        elif event.type == pygame.TEXTINPUT:
            self.key_typed(event.text)
        return None

    def __repr__(self):
        return f"Controller(maze={self.maze!r})"
