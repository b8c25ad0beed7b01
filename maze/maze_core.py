"""
Core maze functions - wall grid, movement checks and pathfinding
"""

from collections import deque
from utils.constants import TOP, RIGHT, BOTTOM, LEFT, DIR_TO_BITS


def full_walls(cols, rows):
    """Grid with every wall closed"""
    return [TOP | RIGHT | BOTTOM | LEFT for _ in range(cols * rows)]


def idx(cols, x, y):
    """Convert 2D coordinates to 1D index"""
    return y * cols + x


def in_bounds(cols, rows, x, y):
    """Check if coordinates are within grid bounds"""
    return 0 <= x < cols and 0 <= y < rows


def carve_passage(walls, cols, ax, ay, bx, by):
    """Carve a passage between two adjacent cells"""
    bits = DIR_TO_BITS.get((bx - ax, by - ay))
    if bits is None:
        return
    wall_bit, opp_bit = bits
    walls[idx(cols, ax, ay)] &= ~wall_bit
    walls[idx(cols, bx, by)] &= ~opp_bit


def is_open_between(walls, cols, ax, ay, bx, by):
    """Check if passage is open between two adjacent cells"""
    bits = DIR_TO_BITS.get((bx - ax, by - ay))
    if bits is None:
        return False
    wall_bit, _ = bits
    return (walls[idx(cols, ax, ay)] & wall_bit) == 0


def can_move(walls, cols, rows, x, y, dx, dy):
    """Check if a step in direction (dx, dy) from (x, y) is open"""
    if not in_bounds(cols, rows, x + dx, y + dy):
        return False
    return is_open_between(walls, cols, x, y, x + dx, y + dy)


def neighbors_open(walls, cols, rows, x, y):
    """Get list of open neighbor cells"""
    res = []
    for dx, dy in DIR_TO_BITS:
        if can_move(walls, cols, rows, x, y, dx, dy):
            res.append((x + dx, y + dy))
    return res


# ========== PATHFINDING ==========

def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def bfs_shortest_path(walls, cols, rows, start, goal):
    """BFS shortest path finder"""
    if start == goal:
        return [start]

    q = deque([start])
    prev = {start: None}

    while q:
        x, y = q.popleft()
        for n in neighbors_open(walls, cols, rows, x, y):
            if n not in prev:
                prev[n] = (x, y)
                if n == goal:
                    return reconstruct_path(prev, goal)
                q.append(n)
    return []
