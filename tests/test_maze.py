import pytest

from entities.player import Player
from maze.difficulty import Difficulty, maze_size, get_difficulty_config
from maze.generator import GEN_ALGOS, generate_walls
from maze.maze import Maze
from maze.maze_core import bfs_shortest_path, can_move, neighbors_open
from utils.constants import RIGHT, BOTTOM


def count_passages(walls, cols, rows):
    """Open edges, each counted once"""
    total = 0
    for y in range(rows):
        for x in range(cols):
            w = walls[y * cols + x]
            if x + 1 < cols and not w & RIGHT:
                total += 1
            if y + 1 < rows and not w & BOTTOM:
                total += 1
    return total


@pytest.mark.parametrize("algorithm", range(len(GEN_ALGOS)))
@pytest.mark.parametrize("cols, rows", [(2, 2), (9, 9), (15, 7)])
def test_generators_build_perfect_mazes(algorithm, cols, rows):
    walls = generate_walls(cols, rows, algorithm, seed=7)

    # A spanning tree over all cells
    assert count_passages(walls, cols, rows) == cols * rows - 1
    assert bfs_shortest_path(walls, cols, rows, (0, 0), (cols - 1, rows - 1))


def test_generator_is_reproducible_with_seed():
    assert generate_walls(11, 11, seed=3) == generate_walls(11, 11, seed=3)


def test_outer_border_is_closed():
    walls = generate_walls(9, 9, seed=1)
    for x in range(9):
        assert not can_move(walls, 9, 9, x, 0, 0, -1)
        assert not can_move(walls, 9, 9, x, 8, 0, 1)


@pytest.mark.parametrize("level, difficulty, expected", [
    (0, Difficulty.EASY, 9),
    (0, Difficulty.MEDIUM, 11),
    (0, Difficulty.HARD, 13),
    (9, Difficulty.HARD, 31),
])
def test_maze_size(level, difficulty, expected):
    assert maze_size(level, difficulty) == (expected, expected)


def test_difficulty_cycles():
    assert Difficulty.EASY.next() is Difficulty.MEDIUM
    assert Difficulty.HARD.next() is Difficulty.EASY
    assert Difficulty.MEDIUM.label == "MEDIUM"


def test_maze_places_player_at_start(player):
    player.reset_position(5, 5)
    maze = Maze(11, 11, player, seed=1)

    assert (player.x, player.y) == maze.start_pos == (0, 0)
    assert maze.exit_pos == (10, 10)
    assert not maze.exited_maze()


def test_maze_rejects_tiny_dimensions(player):
    with pytest.raises(ValueError):
        Maze(1, 5, player)


def test_spawns_avoid_start_and_exit(player):
    maze = Maze(15, 15, player, difficulty=Difficulty.HARD, seed=4)
    positions = [(p.x, p.y) for p in maze.pickup_manager.pickups]
    positions += [(e.x, e.y) for e in maze.enemy_manager.enemies]

    assert maze.start_pos not in positions
    assert maze.exit_pos not in positions
    assert len(positions) == len(set(positions))

    treasure, swords, enemies = get_difficulty_config(Difficulty.HARD).counts_for(15, 15)
    assert len(maze.pickup_manager.pickups) == treasure + swords
    assert len(maze.enemy_manager.enemies) == enemies


def test_zero_move_is_noop(player):
    maze = Maze(9, 9, player, seed=2)
    assert maze.update_player_loc(0, 0) is False
    assert (player.x, player.y) == (0, 0)
    assert player.moves == 0


def test_move_off_grid_is_blocked(player):
    maze = Maze(9, 9, player, seed=2)
    assert maze.update_player_loc(-1, 0) is False
    assert maze.update_player_loc(0, -1) is False
    assert (player.x, player.y) == (0, 0)


def test_walking_the_path_exits_maze(player):
    maze = Maze(11, 11, player, difficulty=Difficulty.EASY, seed=9)
    path = bfs_shortest_path(maze.walls, maze.cols, maze.rows, maze.start_pos, maze.exit_pos)

    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        assert maze.update_player_loc(x1 - x0, y1 - y0)

    assert maze.exited_maze()
    assert player.moves == len(path) - 1
    # No more moves after leaving
    dx, dy = path[-2][0] - path[-1][0], path[-2][1] - path[-1][1]
    assert maze.update_player_loc(dx, dy) is False


def test_dead_player_cannot_move(player):
    maze = Maze(9, 9, player, seed=2)
    player.take_damage(player.stats['max_health'])
    dx, dy = next(
        (dx, dy) for dx, dy in ((1, 0), (0, 1))
        if can_move(maze.walls, maze.cols, maze.rows, 0, 0, dx, dy)
    )
    assert maze.update_player_loc(dx, dy) is False


def test_update_moves_enemies_on_cooldown(player):
    maze = Maze(21, 21, player, difficulty=Difficulty.HARD, seed=5)
    assert maze.enemy_manager.enemies
    before = [(e.x, e.y) for e in maze.enemy_manager.enemies]

    maze.update(0.01)
    assert [(e.x, e.y) for e in maze.enemy_manager.enemies] == before

    maze.update(1.0)
    after = [(e.x, e.y) for e in maze.enemy_manager.enemies]
    assert after != before


def _empty_maze(player, seed=3):
    maze = Maze(9, 9, player, seed=seed)
    maze.enemy_manager.enemies = []
    maze.pickup_manager.pickups = []
    return maze


def test_idle_enemy_on_player_cell_does_not_keep_hitting(player):
    maze = _empty_maze(player)
    player.reset_position(4, 4)
    maze.enemy_manager.add_enemy(4, 4, damage=10, move_cooldown=1000.0)
    maze.enemy_manager.add_enemy(0, 8, damage=10, move_cooldown=0.1)

    for _ in range(5):
        maze.update(0.2)

    assert player.stats['health'] == player.stats['max_health']


def test_enemy_stepping_onto_player_attacks(player):
    maze = _empty_maze(player)
    # A dead end has one way out; park the player there
    dead_end, way_out = next(
        ((x, y), neighbors_open(maze.walls, 9, 9, x, y)[0])
        for y in range(9) for x in range(9)
        if len(neighbors_open(maze.walls, 9, 9, x, y)) == 1
        and neighbors_open(maze.walls, 9, 9, x, y)[0] != maze.exit_pos
        and (x, y) != maze.exit_pos
    )
    player.reset_position(*way_out)
    maze.enemy_manager.add_enemy(*dead_end, damage=30, move_cooldown=0.1)

    maze.update(0.2)

    assert player.stats['health'] == player.stats['max_health'] - 30
