"""
spatial_hash.py
---------------
Uniform grid that buckets object ids by the cells their AABB touches.

Boxes are clamped to the map before keying, so anything outside the map
lands in the border cells instead of being lost. Queries therefore return
candidates only; callers confirm overlap with AABB.intersects().
"""

import math

from bulletdodge.core.utils.math_utils import clamp


class SpatialHashGrid:
    """Broad-phase grid for collision queries."""

    __slots__ = ("map_width", "map_height", "cell_size", "grid_width", "grid_height", "_cells")

    def __init__(self, map_width: float, map_height: float, cell_size: float):
        if map_width <= 0 or map_height <= 0:
            raise ValueError(f"Map size must be positive, got {(map_width, map_height)}")
        if cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_size}")

        self.map_width = map_width
        self.map_height = map_height
        self.cell_size = cell_size
        self.grid_width = max(1, math.ceil(map_width / cell_size))
        self.grid_height = max(1, math.ceil(map_height / cell_size))
        self._cells = {}  # {cell_key: set(object_id)}

    # ===========================================================
    # Keying
    # ===========================================================
    def _cell_index(self, value: float, limit: float, count: int) -> int:
        value = clamp(value, 0.0, limit)
        return min(int(value // self.cell_size), count - 1)

    def keys(self, aabb):
        """Yield the keys of every cell the box touches."""
        min_x = self._cell_index(aabb.min.x, self.map_width, self.grid_width)
        max_x = self._cell_index(aabb.max.x, self.map_width, self.grid_width)
        min_y = self._cell_index(aabb.min.y, self.map_height, self.grid_height)
        max_y = self._cell_index(aabb.max.y, self.map_height, self.grid_height)

        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                yield x + y * self.grid_width

    # ===========================================================
    # Insert / Query
    # ===========================================================
    def insert(self, object_id, aabb):
        for key in self.keys(aabb):
            self._cells.setdefault(key, set()).add(object_id)

    def get(self, key) -> set:
        """Return a copy of the ids stored in one cell."""
        return set(self._cells.get(key, ()))

    def query(self, aabb) -> set:
        """Return all ids sharing at least one cell with the box."""
        result = set()
        for key in self.keys(aabb):
            cell = self._cells.get(key)
            if cell:
                result |= cell
        return result

    def clear(self):
        self._cells.clear()
