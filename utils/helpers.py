"""
Helper utility functions for Maze Quest
"""


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def format_score(score):
    """Format score with thousands separator"""
    return f"{score:,}"
