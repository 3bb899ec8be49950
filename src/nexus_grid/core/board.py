import logging
import math
import random
from dataclasses import dataclass

from nexus_grid.config import HEX_RADIUS, NEXUS_BOARD_STANDARD
from nexus_grid.core.errors import IllegalMoveError
from nexus_grid.core.grid import HexGrid

logger = logging.getLogger(__name__)

_OWNER_SYMBOLS = ("a", "b")


@dataclass(frozen=True)
class CellState:
    """Immutable view of one cell, handed to listeners."""

    is_blocker: bool
    is_power_node: bool
    owner: object


class HexCell:
    def __init__(self, q, r, is_blocker=False):
        self.q = q
        self.r = r
        self.is_blocker = is_blocker
        self.is_power_node = False
        self.owner = None

    @property
    def coord(self):
        return (self.q, self.r)

    def is_empty(self):
        return not self.is_blocker and not self.is_power_node and self.owner is None

    def state(self):
        return CellState(self.is_blocker, self.is_power_node, self.owner)

    def __repr__(self):
        return (
            f"HexCell(q={self.q}, r={self.r}, blocker={self.is_blocker}, "
            f"power={self.is_power_node}, owner={self.owner!r})"
        )


class Board:
    """Occupancy of every cell of a fixed grid.

    Blockers are fixed when the board is built; the two power nodes are
    placed once afterwards. From then on the only mutation is ``claim``.
    """

    def __init__(self, grid, blocker_coords=()):
        blockers = set(blocker_coords)
        unknown = [coord for coord in blockers if not grid.contains(coord)]
        if unknown:
            raise ValueError(f"Blocker coordinates outside the grid: {sorted(unknown)}")

        self.grid = grid
        self._cells = {
            coord: HexCell(coord[0], coord[1], is_blocker=coord in blockers)
            for coord in grid.coords()
        }
        # Power node coordinate by colour, in player order.
        self.power_nodes = {}

    @classmethod
    def create(
        cls,
        rows=NEXUS_BOARD_STANDARD.rows,
        cols=NEXUS_BOARD_STANDARD.cols,
        blocker_fraction=NEXUS_BOARD_STANDARD.blocker_fraction,
        hex_radius=HEX_RADIUS,
        rng=None,
        blocker_coords=None,
    ):
        """Build a grid and scatter ``floor(rows * cols * blocker_fraction)`` blockers."""
        if not 0.0 <= blocker_fraction <= 1.0:
            raise ValueError("Blocker fraction must be between 0 and 1.")

        grid = HexGrid(cols, rows, hex_radius)
        if blocker_coords is None:
            rng = rng or random.Random()
            blocker_count = math.floor(rows * cols * blocker_fraction)
            blocker_coords = rng.sample(grid.coords(), blocker_count)

        board = cls(grid, blocker_coords)
        logger.debug(
            "Created %dx%d board with %d blockers", rows, cols, board.count_blockers()
        )
        return board

    def place_power_nodes(self, player_colors, rng=None, coords=None):
        """Turn two distinct non-blocker cells into pre-owned power nodes.

        ``coords`` pins the cells (one per colour, same order); otherwise they
        are drawn uniformly at random from the non-blocker cells.
        """
        colors = tuple(player_colors)
        if len(colors) != 2 or colors[0] == colors[1]:
            raise ValueError("Power nodes need exactly two distinct player colors.")
        if self.power_nodes:
            raise ValueError("Power nodes are already placed.")

        if coords is None:
            candidates = [cell.coord for cell in self._cells.values() if not cell.is_blocker]
            if len(candidates) < 2:
                raise ValueError("Board needs at least 2 non-blocker cells for power nodes.")
            rng = rng or random.Random()
            coords = rng.sample(candidates, 2)
        else:
            coords = tuple(coords)
            if len(coords) != 2 or coords[0] == coords[1]:
                raise ValueError("Power nodes need two distinct coordinates.")
            for coord in coords:
                cell = self._cells.get(coord)
                if cell is None or cell.is_blocker:
                    raise ValueError(f"Power node {coord} must be a non-blocker cell.")

        for color, coord in zip(colors, coords):
            cell = self._cells[coord]
            cell.is_power_node = True
            cell.owner = color
            self.power_nodes[color] = coord

    def get_cell(self, coord):
        return self._cells.get(coord)

    def cells(self):
        return list(self._cells.values())

    def owner_at(self, coord):
        cell = self._cells.get(coord)
        if cell is None:
            return None
        return cell.owner

    def power_node(self, color):
        return self.power_nodes.get(color)

    def is_cell_claimable(self, coord):
        cell = self._cells.get(coord)
        return cell is not None and cell.is_empty()

    def claimable_coords(self):
        return [cell.coord for cell in self._cells.values() if cell.is_empty()]

    def claim(self, coord, color):
        cell = self._cells.get(coord)
        if cell is None:
            raise IllegalMoveError(coord, "outside the board")
        if cell.is_blocker:
            raise IllegalMoveError(coord, "blocker")
        if cell.is_power_node:
            raise IllegalMoveError(coord, "power node")
        if cell.owner is not None:
            raise IllegalMoveError(coord, "already claimed")
        cell.owner = color
        return cell

    def is_full(self):
        return all(
            cell.is_power_node or cell.is_blocker or cell.owner is not None
            for cell in self._cells.values()
        )

    def count_blockers(self):
        return sum(1 for cell in self._cells.values() if cell.is_blocker)

    def count_owned(self, color):
        return sum(
            1 for cell in self._cells.values() if not cell.is_blocker and cell.owner == color
        )

    def describe(self):
        """Text map of the board, one line per row.

        ``#`` blocker, ``.`` empty, ``A``/``B`` power nodes and ``a``/``b``
        claimed cells of the first and second player.
        """
        symbols = {color: _OWNER_SYMBOLS[index] for index, color in enumerate(self.power_nodes)}
        lines = []
        for r in range(self.grid.rows):
            row = []
            for q in range(self.grid.cols):
                cell = self._cells[(q, r)]
                if cell.is_blocker:
                    row.append("#")
                elif cell.owner is None:
                    row.append(".")
                else:
                    symbol = symbols.get(cell.owner, "?")
                    row.append(symbol.upper() if cell.is_power_node else symbol)
            lines.append(" ".join(row))
        return "\n".join(lines)
