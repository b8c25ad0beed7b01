"""
Maze generation algorithms
Both produce perfect mazes (exactly one path between any two cells)
"""

import random
from utils.constants import DIRS
from maze.maze_core import full_walls, idx, in_bounds, carve_passage


def gen_dfs_backtracker(cols, rows, rng):
    """Depth-First Search with backtracking"""
    walls = full_walls(cols, rows)
    visited = [False] * (cols * rows)

    stack = [(0, 0)]
    visited[idx(cols, 0, 0)] = True

    while stack:
        cx, cy = stack[-1]
        neighbors = []

        for dx, dy, wall_bit, opp_bit in DIRS:
            nx, ny = cx + dx, cy + dy
            if in_bounds(cols, rows, nx, ny) and not visited[idx(cols, nx, ny)]:
                neighbors.append((nx, ny, wall_bit, opp_bit))

        if neighbors:
            nx, ny, wall_bit, opp_bit = rng.choice(neighbors)
            walls[idx(cols, cx, cy)] &= ~wall_bit
            walls[idx(cols, nx, ny)] &= ~opp_bit
            visited[idx(cols, nx, ny)] = True
            stack.append((nx, ny))
        else:
            stack.pop()

    return walls


def gen_prim(cols, rows, rng):
    """Prim's algorithm"""
    walls = full_walls(cols, rows)
    visited = [False] * (cols * rows)

    visited[idx(cols, 0, 0)] = True
    frontier = []
    for dx, dy, _, _ in DIRS:
        if in_bounds(cols, rows, dx, dy):
            frontier.append(((0, 0), (dx, dy)))

    while frontier:
        i = rng.randrange(len(frontier))
        (ax, ay), (bx, by) = frontier.pop(i)
        if visited[idx(cols, bx, by)]:
            continue

        carve_passage(walls, cols, ax, ay, bx, by)
        visited[idx(cols, bx, by)] = True

        for dx, dy, _, _ in DIRS:
            nx, ny = bx + dx, by + dy
            if in_bounds(cols, rows, nx, ny) and not visited[idx(cols, nx, ny)]:
                frontier.append(((bx, by), (nx, ny)))

    return walls


# ========== ALGORITHM LIST ==========

GEN_ALGOS = [
    ("DFS Backtracker", gen_dfs_backtracker),
    ("Prim", gen_prim),
]


def generate_walls(cols, rows, algorithm=0, seed=None):
    """
    Generate a maze wall grid

    Args:
        cols, rows: Maze dimensions
        algorithm: Index into GEN_ALGOS
        seed: Optional seed for a reproducible maze

    Returns:
        List of wall bitmasks, one per cell
    """
    _, gen_func = GEN_ALGOS[algorithm]
    return gen_func(cols, rows, random.Random(seed))
