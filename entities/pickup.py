"""
Pickup entities
Treasure adds to the player's count, swords go to the inventory
"""

from utils.colors import PICKUP_COLORS
from utils.constants import ITEM_SWORD, ITEM_TREASURE, TREASURE_VALUE


class Pickup:
    """
    Item lying on a maze cell
    """
    def __init__(self, x, y, pickup_type):
        """
        Args:
            x, y: Grid position
            pickup_type: 'treasure' or 'sword'
        """
        if pickup_type not in (ITEM_TREASURE, ITEM_SWORD):
            raise ValueError(f"Unknown pickup type: {pickup_type!r}")
        self.x = x
        self.y = y
        self.type = pickup_type
        self.collected = False

    def get_color(self):
        """Get RGB color based on type"""
        return PICKUP_COLORS.get(self.type, (255, 255, 255))

    def collect(self, player):
        """
        Collect pickup and apply it to player

        Returns:
            True if collected successfully
        """
        if self.collected:
            return False

        self.collected = True
        if self.type == ITEM_TREASURE:
            player.add_treasure(TREASURE_VALUE)
        else:
            player.add_item(self.type)
        return True

    def __repr__(self):
        return f"Pickup(pos=({self.x},{self.y}), type={self.type}, collected={self.collected})"


class PickupManager:
    """
    Manages all pickups in the maze
    """
    def __init__(self):
        self.pickups = []

    def add_pickup(self, x, y, pickup_type):
        pickup = Pickup(x, y, pickup_type)
        self.pickups.append(pickup)
        return pickup

    def collect_pickup(self, x, y, player):
        """
        Collect the pickup at a position, if any

        Returns:
            Pickup collected, or None
        """
        for pickup in self.pickups:
            if pickup.x == x and pickup.y == y and pickup.collect(player):
                return pickup
        return None

    def get_uncollected_pickups(self):
        """Get list of pickups still on the board"""
        return [p for p in self.pickups if not p.collected]
