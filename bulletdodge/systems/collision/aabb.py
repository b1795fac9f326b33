"""
aabb.py
-------
Axis-aligned bounding box with float coordinates.

pygame.Rect truncates to integers, which is too coarse for the slow
sub-pixel motion of the player at low frame times, so hitboxes use this
instead and only convert to Rect for debug drawing.
"""

import pygame


class AABB:
    """Axis-aligned bounding box defined by its min and max corners."""

    __slots__ = ("min", "max")

    def __init__(self, min_corner, max_corner):
        """
        Create a box from two corners in any order.

        The corners are normalized so that min.x <= max.x and min.y <= max.y.
        """
        self.min = pygame.Vector2(min(min_corner[0], max_corner[0]),
                                  min(min_corner[1], max_corner[1]))
        self.max = pygame.Vector2(max(min_corner[0], max_corner[0]),
                                  max(min_corner[1], max_corner[1]))

    @classmethod
    def from_center(cls, center, size) -> "AABB":
        """Create a box with the given center and (width, height)."""
        half_w = size[0] / 2.0
        half_h = size[1] / 2.0
        return cls((center[0] - half_w, center[1] - half_h),
                   (center[0] + half_w, center[1] + half_h))

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def center(self) -> pygame.Vector2:
        return (self.min + self.max) / 2.0

    def intersects(self, other: "AABB") -> bool:
        """True when the interiors overlap. Touching edges do not count."""
        return (self.min.x < other.max.x and other.min.x < self.max.x and
                self.min.y < other.max.y and other.min.y < self.max.y)

    def contains_point(self, point) -> bool:
        return self.min.x <= point[0] <= self.max.x and self.min.y <= point[1] <= self.max.y

    def to_rect(self) -> pygame.Rect:
        """Integer Rect covering this box, for drawing."""
        return pygame.Rect(int(self.min.x), int(self.min.y),
                           max(1, round(self.width)), max(1, round(self.height)))

    def __repr__(self):
        return f"AABB(({self.min.x:.1f}, {self.min.y:.1f}), ({self.max.x:.1f}, {self.max.y:.1f}))"
