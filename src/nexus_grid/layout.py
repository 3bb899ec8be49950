"""Generic layout helpers for odd-q vertical hex boards."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

SQRT3 = math.sqrt(3)


@dataclass(frozen=True)
class HexGridLayout:
    """Resolved screen-fit layout for an odd-q vertical hex grid."""

    columns: int
    rows: int
    radius_px: float
    origin_x_px: float
    origin_y_px: float


def board_width_px(columns: int, radius_px: float) -> float:
    """Pixel width of an odd-q vertical hex board."""

    return radius_px * (1.5 * (columns - 1) + 2)


def board_height_px(columns: int, rows: int, radius_px: float) -> float:
    """Pixel height of an odd-q vertical hex board."""

    odd_offset = 0.5 if columns > 1 else 0.0
    return radius_px * ((rows - 1 + odd_offset) * SQRT3 + 2)


def cell_center_odd_q(q: int, r: int, radius: float) -> tuple[float, float]:
    """Centre of cell (q, r) relative to the centre of cell (0, 0).

    Columns are 1.5 radii apart, rows are sqrt(3) radii apart and odd
    columns sit half a row lower.
    """

    x = radius * 1.5 * q
    y = radius * SQRT3 * (r + 0.5 * (q % 2))
    return x, y


def axial_to_pixel_odd_q(
    q: int,
    r: int,
    radius_px: float,
    origin_x_px: float,
    origin_y_px: float,
) -> tuple[float, float]:
    """Map odd-q offset coordinates to top-left based pixel centre coordinates."""

    x, y = cell_center_odd_q(q, r, radius_px)
    return origin_x_px + radius_px + x, origin_y_px + radius_px + y


def neighbor_coords_odd_q(q: int, r: int) -> list[tuple[int, int]]:
    """Return six odd-q neighbor coordinates without bounds filtering."""

    if q % 2 == 0:
        deltas = [(1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (0, 1)]
    else:
        deltas = [(1, 1), (1, 0), (0, -1), (-1, 0), (-1, 1), (0, 1)]
    return [(q + dq, r + dr) for dq, dr in deltas]


def hex_corner_points(x: float, y: float, radius: float) -> tuple[tuple[float, float], ...]:
    """Six flat-top corner points around a centre."""

    return tuple(
        (x + radius * math.cos(math.pi / 180 * (60 * i)), y + radius * math.sin(math.pi / 180 * (60 * i)))
        for i in range(6)
    )


def compute_fit_hex_layout(
    screen_width_px: int,
    screen_height_px: int,
    top_bar_height_px: int,
    columns: int,
    rows: int,
    view_width_scale: float = 0.9,
    view_height_scale: float = 0.8,
    fit_scale: float = 0.95,
) -> HexGridLayout:
    """Fit a fixed-size odd-q board into the area below the top bar."""

    if columns < 1 or rows < 1:
        raise ValueError("grid needs at least one row and one column")

    available_width = float(screen_width_px)
    available_height = float(screen_height_px) - float(top_bar_height_px)
    if available_width < 1 or available_height < 1:
        raise ValueError("screen dimensions must leave positive playable area")

    radius_by_width = available_width * view_width_scale / (columns * 1.5)
    radius_by_height = available_height * view_height_scale / (rows * SQRT3)
    radius = min(radius_by_width, radius_by_height) * fit_scale

    width = board_width_px(columns, radius)
    height = board_height_px(columns, rows, radius)
    origin_x = (available_width - width) / 2
    origin_y = top_bar_height_px + (available_height - height) / 2

    return HexGridLayout(
        columns=columns,
        rows=rows,
        radius_px=radius,
        origin_x_px=origin_x,
        origin_y_px=origin_y,
    )


def pick_nearest_center(
    px: float,
    py: float,
    centers: Iterable[tuple[tuple[int, int], tuple[float, float]]],
    radius: float,
) -> tuple[int, int] | None:
    """Return the coordinate whose centre is nearest to the pixel, within one radius."""

    closest = None
    min_distance = radius
    for coord, (x, y) in centers:
        distance = math.hypot(px - x, py - y)
        if distance < min_distance:
            min_distance = distance
            closest = coord
    return closest


__all__ = [
    "HexGridLayout",
    "board_width_px",
    "board_height_px",
    "cell_center_odd_q",
    "axial_to_pixel_odd_q",
    "neighbor_coords_odd_q",
    "hex_corner_points",
    "compute_fit_hex_layout",
    "pick_nearest_center",
]
