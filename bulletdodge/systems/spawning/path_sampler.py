"""
path_sampler.py
---------------
Geometry providers that map a normalized parameter t in [0, 1) to a point
and tangent angle along a predefined curve.

Responsibilities
----------------
- Parameterize a polyline by arc length so equal steps in t cover equal
  distances along the path.
- Report the direction of travel (tangent) at the sampled point.
- Build the default spawn path that runs clockwise around the screen edge.
"""

import math
from abc import ABC, abstractmethod
from bisect import bisect_right

import pygame


class PathSampler(ABC):
    """Interface consumed by BulletSpawner."""

    @abstractmethod
    def sample_at(self, t: float) -> tuple:
        """
        Sample the path.

        Args:
            t (float): Path parameter in [0, 1).

        Returns:
            tuple[pygame.Vector2, float]: Position and tangent angle (radians).
        """


class PolylinePath(PathSampler):
    """Straight segments through a list of points, sampled by arc length."""

    def __init__(self, points, closed: bool = True):
        """
        Args:
            points: Sequence of (x, y) vertices.
            closed (bool): Join the last vertex back to the first.
        """
        vertices = [pygame.Vector2(p) for p in points]
        if len(vertices) < 2:
            raise ValueError("A path needs at least two points")
        if closed:
            vertices.append(vertices[0])

        self.points = vertices
        self.closed = closed

        # Zero-length segments have no tangent and are dropped
        self._segments = []
        self._starts = []
        total = 0.0
        for a, b in zip(vertices, vertices[1:]):
            length = a.distance_to(b)
            if length == 0:
                continue
            self._starts.append(total)
            self._segments.append((a, b, length, math.atan2(b.y - a.y, b.x - a.x)))
            total += length

        if total == 0:
            raise ValueError("A path needs a non-zero length")
        self.length = total

    def sample_at(self, t: float) -> tuple:
        """Return (position, tangent_angle) at fraction t of the path length."""
        t = t % 1.0
        distance = t * self.length

        index = max(bisect_right(self._starts, distance) - 1, 0)
        a, b, length, tangent = self._segments[index]
        local = (distance - self._starts[index]) / length

        # Offset from the segment start keeps axis-aligned edges exact
        return a + (b - a) * min(local, 1.0), tangent


def screen_edge_path(width: float, height: float) -> PolylinePath:
    """
    Closed clockwise rectangle around the screen.

    In screen coordinates (y down) the tangent rotated by +π/2 points into
    the playfield on every edge.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Screen size must be positive, got {(width, height)}")
    return PolylinePath([(0, 0), (width, 0), (width, height), (0, height)], closed=True)
