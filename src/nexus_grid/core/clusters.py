"""Connected-component analysis of same-coloured cells.

A cluster is a maximal group of non-blocker cells sharing one owner colour,
connected through grid adjacency. Power nodes carry their player's colour and
therefore belong to clusters like any claimed cell.

Speculative queries never touch the board: the hypothetical owner is looked up
through a local override map.
"""

from collections import deque


def cluster_components(color, board, overrides=None, order=None):
    """Return every cluster of ``color`` as a frozenset of coordinates.

    ``overrides`` maps coordinates to owner colours that replace the real ones
    for this call only. ``order`` optionally fixes which cells are tried as
    traversal starts; the resulting components do not depend on it.
    """
    overrides = overrides or {}

    def is_member(coord):
        cell = board.get_cell(coord)
        if cell is None or cell.is_blocker:
            return False
        return overrides.get(coord, cell.owner) == color

    start_coords = board.grid.coords() if order is None else order
    visited = set()
    components = []
    for start in start_coords:
        if start in visited or not is_member(start):
            continue

        component = {start}
        visited.add(start)
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in board.grid.neighbors(current):
                if neighbor in visited or not is_member(neighbor):
                    continue
                visited.add(neighbor)
                component.add(neighbor)
                queue.append(neighbor)

        components.append(frozenset(component))
    return components


def largest_cluster(color, board, overrides=None):
    """The biggest cluster of ``color``, or an empty frozenset."""
    components = cluster_components(color, board, overrides)
    if not components:
        return frozenset()
    return max(components, key=len)


def largest_cluster_size(color, board):
    return len(largest_cluster(color, board))


def speculative_cluster_size(color, board, coord, hypothetical_color):
    """Largest cluster of ``color`` as if ``coord`` were owned by ``hypothetical_color``."""
    if not board.grid.contains(coord):
        raise ValueError(f"Coordinate {coord} is outside the board.")
    return len(largest_cluster(color, board, overrides={coord: hypothetical_color}))


def cluster_sizes(colors, board):
    return tuple(largest_cluster_size(color, board) for color in colors)
