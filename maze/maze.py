"""
Maze - grid geometry, player position and entities for one level
"""

import random

from entities.enemy import EnemyManager
from entities.pickup import PickupManager
from game.collision import CollisionHandler
from maze.difficulty import Difficulty, get_difficulty_config
from maze.generator import generate_walls
from maze.maze_core import bfs_shortest_path
from utils.constants import ITEM_SWORD, ITEM_TREASURE, MIN_MAZE_SIZE


class Maze:
    """
    A single maze level

    The player starts in the top-left cell and leaves through the
    bottom-right one.
    """
    def __init__(self, width, height, player, difficulty=Difficulty.MEDIUM, seed=None, algorithm=0):
        """
        Args:
            width, height: Maze dimensions in cells
            player: Player placed at the start cell
            difficulty: Controls spawn counts and enemy stats
            seed: Optional seed for a reproducible layout
            algorithm: Generator index (see maze.generator.GEN_ALGOS)
        """
        if width < MIN_MAZE_SIZE or height < MIN_MAZE_SIZE:
            raise ValueError(f"Maze must be at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE}, got {width}x{height}")

        self.width = width
        self.height = height
        self.player = player
        self.config = get_difficulty_config(difficulty)
        self.rng = random.Random(seed)

        self.start_pos = (0, 0)
        self.exit_pos = (width - 1, height - 1)

        self.walls = generate_walls(width, height, algorithm, seed=self.rng.random())

        self.enemy_manager = EnemyManager()
        self.pickup_manager = PickupManager()
        self.collision_handler = CollisionHandler()

        self.player.reset_position(*self.start_pos)
        self._spawn_entities()

    @property
    def cols(self):
        return self.width

    @property
    def rows(self):
        return self.height

    def _free_cells(self):
        """Cells entities may spawn on, shuffled"""
        # Keep the first steps out of the start clear of enemies
        safe = set(bfs_shortest_path(self.walls, self.width, self.height, self.start_pos, self.exit_pos)[:3])
        cells = [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if (x, y) not in (self.start_pos, self.exit_pos) and (x, y) not in safe
        ]
        self.rng.shuffle(cells)
        return cells

    def _spawn_entities(self):
        """Spawn treasure, swords and enemies on distinct cells"""
        treasure_count, sword_count, enemy_count = self.config.counts_for(self.width, self.height)
        cells = self._free_cells()

        for _ in range(treasure_count):
            if not cells:
                return
            x, y = cells.pop()
            self.pickup_manager.add_pickup(x, y, ITEM_TREASURE)

        for _ in range(sword_count):
            if not cells:
                return
            x, y = cells.pop()
            self.pickup_manager.add_pickup(x, y, ITEM_SWORD)

        for _ in range(enemy_count):
            if not cells:
                return
            x, y = cells.pop()
            self.enemy_manager.add_enemy(x, y, self.config.enemy_damage, self.config.enemy_move_cooldown)

    def update_player_loc(self, dx, dy):
        """
        Move the player by (dx, dy) and resolve what they walk into

        Returns:
            True if the player moved
        """
        if (dx, dy) == (0, 0):
            return False
        if not self.player.is_alive() or self.exited_maze():
            return False

        if not self.player.move(dx, dy, self.walls, self.width, self.height):
            return False

        self.resolve_collisions()
        return True

    def resolve_collisions(self, attackers=None):
        """Apply pickups and combat at the player's cell"""
        return self.collision_handler.check_player_position(
            self.player, self.enemy_manager, self.pickup_manager, attackers
        )

    def exited_maze(self):
        """True once the player stands on the exit cell"""
        return (self.player.x, self.player.y) == self.exit_pos

    def update(self, dt):
        """
        Advance enemies; only an enemy stepping onto the player fights

        Args:
            dt: Delta time in seconds
        """
        if not self.player.is_alive() or self.exited_maze():
            return
        moved = self.enemy_manager.update(dt, self.walls, self.width, self.height, self.rng)
        arrived = [e for e in moved if (e.x, e.y) == (self.player.x, self.player.y)]
        if arrived:
            self.resolve_collisions(arrived)

    def __repr__(self):
        return f"Maze(size={self.width}x{self.height}, player=({self.player.x},{self.player.y}))"
