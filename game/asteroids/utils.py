"""
Utility functions for game mechanics
"""

from __future__ import annotations


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def squared_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared distance between two points"""
    dx = x1 - x2
    dy = y1 - y2
    return dx * dx + dy * dy


def within_box(x1: float, y1: float, x2: float, y2: float, half_extent: float) -> bool:
    """Check if two points are closer than half_extent on both axes"""
    return abs(x1 - x2) < half_extent and abs(y1 - y2) < half_extent
