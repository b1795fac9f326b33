"""
math_utils.py
-------------
Small 2D helpers shared by movement, spawning and collision code.
All vectors are pygame.Vector2.
"""

import math

import pygame

TAU = 2.0 * math.pi


def clamp(value: float, lo: float, hi: float) -> float:
    """Restrict value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def clamp_point(point, lo, hi) -> pygame.Vector2:
    """Componentwise clamp of a point into the rectangle lo..hi."""
    return pygame.Vector2(clamp(point[0], lo[0], hi[0]),
                          clamp(point[1], lo[1], hi[1]))


def wrap_angle(angle: float) -> float:
    """Normalize an angle in radians into [0, 2π)."""
    wrapped = math.fmod(angle, TAU)
    if wrapped < 0.0:
        wrapped += TAU
    # fmod of a tiny negative value can round up to exactly TAU
    return 0.0 if wrapped >= TAU else wrapped


def from_angle(magnitude: float, angle: float) -> pygame.Vector2:
    """Build a vector from polar coordinates (r, theta)."""
    return pygame.Vector2(magnitude, 0).rotate_rad(angle)


def to_polar(vector) -> tuple:
    """Convert a vector to polar coordinates (r, theta)."""
    return math.hypot(vector[0], vector[1]), math.atan2(vector[1], vector[0])
