import math

from nexus_grid.config import ADJACENCY_DISTANCE_FACTOR, HEX_RADIUS
from nexus_grid.layout import cell_center_odd_q


class HexGrid:
    """Fixed odd-q hex lattice with distance-based adjacency.

    Cell centres are laid out in board space (cell (0, 0) at the origin).
    Two cells are neighbours when their centres are closer than
    ``hex_radius * adjacency_factor``; for the canonical layout this gives the
    usual six neighbours for interior cells.
    """

    def __init__(self, cols, rows, hex_radius=HEX_RADIUS, adjacency_factor=ADJACENCY_DISTANCE_FACTOR):
        if cols < 1:
            raise ValueError("Grid needs at least 1 column.")
        if rows < 1:
            raise ValueError("Grid needs at least 1 row.")
        if hex_radius <= 0:
            raise ValueError("Hex radius must be positive.")

        self.cols = cols
        self.rows = rows
        self.hex_radius = hex_radius
        self.adjacency_distance = hex_radius * adjacency_factor
        self._coords = tuple((q, r) for r in range(rows) for q in range(cols))
        self._positions = {
            (q, r): cell_center_odd_q(q, r, hex_radius) for q, r in self._coords
        }
        self._neighbors = self._build_adjacency()

    def _build_adjacency(self):
        # Neighbours always lie within one column and one row.
        neighbors = {coord: set() for coord in self._coords}
        for q, r in self._coords:
            for nq in range(q - 1, q + 2):
                for nr in range(r - 1, r + 2):
                    other = (nq, nr)
                    if other == (q, r) or other not in self._positions:
                        continue
                    if self.distance((q, r), other) < self.adjacency_distance:
                        neighbors[(q, r)].add(other)
        return {coord: frozenset(found) for coord, found in neighbors.items()}

    @property
    def size(self):
        return self.cols * self.rows

    def coords(self):
        """All coordinates, row by row."""
        return self._coords

    def contains(self, coord):
        return coord in self._positions

    def position(self, coord):
        return self._positions[coord]

    def neighbors(self, coord):
        return self._neighbors[coord]

    def are_adjacent(self, a, b):
        return b in self._neighbors.get(a, ())

    def distance(self, a, b):
        ax, ay = self._positions[a]
        bx, by = self._positions[b]
        return math.hypot(ax - bx, ay - by)
