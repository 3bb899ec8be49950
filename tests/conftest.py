"""Shared board fixtures."""

import pytest

from nexus_grid.core import Board, HexGrid

HUMAN = "red"
CPU = "blue"
COLORS = (HUMAN, CPU)


def build_board(cols, rows, blockers=(), power_nodes=None, owners=None, hex_radius=40.0):
    """Board with fixed blockers, power nodes and pre-claimed cells.

    ``owners`` maps coordinates to colours and is written straight onto the
    cells, so it may also colour blockers.
    """
    board = Board(HexGrid(cols, rows, hex_radius), blocker_coords=blockers)
    if power_nodes is not None:
        board.place_power_nodes(COLORS, coords=power_nodes)
    for coord, color in (owners or {}).items():
        board.get_cell(coord).owner = color
    return board


def snapshot(board):
    return {cell.coord: cell.state() for cell in board.cells()}


@pytest.fixture
def line_board():
    """Single row of five cells: human power node left, computer power node right."""
    return build_board(5, 1, power_nodes=[(0, 0), (4, 0)])


@pytest.fixture
def scenario_board():
    """3x3 board without blockers, power nodes at opposite corners."""
    return build_board(3, 3, power_nodes=[(0, 0), (2, 2)])
