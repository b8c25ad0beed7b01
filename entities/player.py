"""
Player entity with health, inventory and combat/treasure counters
"""

from utils.constants import PLAYER_MAX_HEALTH
from maze.maze_core import can_move


class Player:
    """
    Player entity

    Treasure and kill counters last for the whole session, the inventory
    only for the current level.
    """
    def __init__(self, name, character):
        self.name = name
        self.character = character

        # Grid position (placed by the maze)
        self.x = 0
        self.y = 0

        # Inventory (item names, e.g. 'sword')
        self.inventory = []

        # Stats
        self.stats = {
            'health': PLAYER_MAX_HEALTH,
            'max_health': PLAYER_MAX_HEALTH,
        }

        # Gameplay tracking
        self.treasure_collected = 0
        self.enemies_killed = 0
        self.moves = 0

    def move(self, dx, dy, walls, cols, rows):
        """
        Move player in direction (dx, dy)
        Returns True if move was successful
        """
        if not can_move(walls, cols, rows, self.x, self.y, dx, dy):
            return False

        self.x += dx
        self.y += dy
        self.moves += 1
        return True

    def reset_position(self, x, y):
        """Place player on a cell (new maze)"""
        self.x = x
        self.y = y

    # ========== INVENTORY ==========

    def add_item(self, item):
        """Add an item to inventory"""
        self.inventory.append(item)

    def has_item(self, item):
        """Check if player carries an item"""
        return item in self.inventory

    def use_item(self, item):
        """Use an item (remove one from inventory)"""
        if item in self.inventory:
            self.inventory.remove(item)
            return True
        return False

    def count_item(self, item):
        return self.inventory.count(item)

    def clear_inventory(self):
        """Drop everything carried (called on level advance)"""
        self.inventory.clear()

    # ========== COUNTERS ==========

    def add_treasure(self, amount=1):
        self.treasure_collected += amount

    def add_kill(self):
        self.enemies_killed += 1

    def get_num_treasure_collected(self):
        """Number of treasures collected so far"""
        return self.treasure_collected

    def get_enemy_killed(self):
        """Number of enemies killed so far"""
        return self.enemies_killed

    # ========== HEALTH ==========

    def take_damage(self, amount):
        """
        Take damage
        Returns True if player died
        """
        self.stats['health'] = max(0, self.stats['health'] - amount)
        return self.stats['health'] <= 0

    def get_health_percent(self):
        """Get health as percentage (0-1)"""
        return self.stats['health'] / self.stats['max_health']

    def is_alive(self):
        """Check if player is alive"""
        return self.stats['health'] > 0

    def __repr__(self):
        return (f"Player(name={self.name!r}, pos=({self.x},{self.y}), "
                f"hp={self.stats['health']}, treasure={self.treasure_collected}, "
                f"kills={self.enemies_killed})")
