"""
Enemy entities
Enemies wander the maze one open cell at a time
"""

import random
from maze.maze_core import neighbors_open
from utils.colors import COLOR_ENEMY
from utils.constants import ENEMY_DAMAGE, ENEMY_MOVE_COOLDOWN


class Enemy:
    """
    Wandering enemy
    """
    def __init__(self, x, y, damage=ENEMY_DAMAGE, move_cooldown=ENEMY_MOVE_COOLDOWN):
        """
        Args:
            x, y: Grid position
            damage: Health removed from an unarmed player on contact
            move_cooldown: Seconds between steps
        """
        self.x = x
        self.y = y
        self.damage = damage
        self.move_cooldown = move_cooldown
        self.move_timer = 0.0
        self.prev_pos = None

    def get_color(self):
        """Get RGB color for rendering"""
        return COLOR_ENEMY

    def update(self, dt, walls, cols, rows, rng=random):
        """
        Advance the move timer and step when it elapses

        Returns:
            True if the enemy moved
        """
        self.move_timer += dt
        if self.move_timer < self.move_cooldown:
            return False

        self.move_timer = 0.0
        return self._wander(walls, cols, rows, rng)

    def _wander(self, walls, cols, rows, rng):
        """Random step, avoiding an immediate back-track when possible"""
        neighbors = neighbors_open(walls, cols, rows, self.x, self.y)
        forward = [n for n in neighbors if n != self.prev_pos]
        choices = forward or neighbors
        if not choices:
            return False

        self.prev_pos = (self.x, self.y)
        self.x, self.y = rng.choice(choices)
        return True

    def __repr__(self):
        return f"Enemy(pos=({self.x},{self.y}), damage={self.damage})"


class EnemyManager:
    """
    Manages all enemies in the maze
    """
    def __init__(self):
        self.enemies = []

    def add_enemy(self, x, y, damage=ENEMY_DAMAGE, move_cooldown=ENEMY_MOVE_COOLDOWN):
        """Add an enemy to the maze"""
        enemy = Enemy(x, y, damage, move_cooldown)
        self.enemies.append(enemy)
        return enemy

    def update(self, dt, walls, cols, rows, rng=random):
        """
        Update all enemies

        Returns:
            List of enemies that moved
        """
        return [enemy for enemy in self.enemies if enemy.update(dt, walls, cols, rows, rng)]

    def get_enemies_at(self, x, y):
        """Enemies standing on a cell"""
        return [enemy for enemy in self.enemies if enemy.x == x and enemy.y == y]

    def remove(self, enemy):
        """Remove a killed enemy"""
        if enemy in self.enemies:
            self.enemies.remove(enemy)

    def __repr__(self):
        return f"EnemyManager(enemies={len(self.enemies)})"
