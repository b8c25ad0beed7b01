"""
Collision detection and handling
"""

from utils.constants import ITEM_SWORD


class CollisionHandler:
    """
    Handles what happens when the player shares a cell with an entity
    """
    def check_player_position(self, player, enemy_manager, pickup_manager, attackers=None):
        """
        Check player's current position for collisions with entities

        Args:
            player: Player object
            enemy_manager: EnemyManager object
            pickup_manager: PickupManager object
            attackers: Enemies that just moved; only those on the player's
                cell fight. None means every enemy on the cell fights
                (the player walked in).

        Returns:
            Dictionary with collision results:
            {
                'pickup': Pickup or None,
                'enemies': list of Enemy fought,
                'kills': int,
                'player_died': bool
            }
        """
        result = {
            'pickup': None,
            'enemies': [],
            'kills': 0,
            'player_died': False
        }

        px, py = player.x, player.y

        # Pick up before fighting, so a sword on the enemy's cell counts
        pickup = pickup_manager.collect_pickup(px, py, player)
        if pickup:
            result['pickup'] = pickup

        if attackers is None:
            attackers = enemy_manager.get_enemies_at(px, py)
        else:
            attackers = [e for e in attackers if (e.x, e.y) == (px, py)]

        for enemy in attackers:
            if not player.is_alive():
                break
            result['enemies'].append(enemy)
            if player.use_item(ITEM_SWORD):
                enemy_manager.remove(enemy)
                player.add_kill()
                result['kills'] += 1
                print(f"Enemy killed at ({px}, {py})")
            elif player.take_damage(enemy.damage):
                result['player_died'] = True
                print("Player died!")

        return result
