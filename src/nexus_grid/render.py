"""Arcade-based UI rendering for NexusGrid."""

from __future__ import annotations

from dataclasses import dataclass

import arcade

from nexus_grid.config import (
    BOARD_FIT_SCALE,
    BOARD_VIEW_HEIGHT_SCALE,
    BOARD_VIEW_WIDTH_SCALE,
    COLOR_BACKGROUND,
    COLOR_BAR,
    COLOR_BLOCKER,
    COLOR_BUTTON,
    COLOR_EMPTY_OUTLINE,
    COLOR_TEXT,
    COLOR_TITLE,
    FONT_NAME,
    FONT_SIZE_BAR,
    FONT_SIZE_BODY,
    FONT_SIZE_BUTTON,
    FONT_SIZE_RESULT,
    FONT_SIZE_TITLE,
    MENU_INSTRUCTIONS,
    PLAYER_CPU,
    PLAYER_HUMAN,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOP_BAR_HEIGHT,
    UI_EMPTY_OUTLINE_ALPHA,
    UI_GRID_LINE_WIDTH_PX,
    UI_POWER_NODE_INNER_SCALE,
    UI_SELECTED_LINE_WIDTH_PX,
    WINDOW_TITLE,
)
from nexus_grid.core import TurnState, winner_label
from nexus_grid.layout import axial_to_pixel_odd_q, compute_fit_hex_layout, hex_corner_points, pick_nearest_center
from nexus_grid.runtime import TextCache

_TEXT_CACHE = TextCache(max_entries=512)


@dataclass(frozen=True)
class Button:
    """Axis-aligned button in top-left screen coordinates."""

    label: str
    center_x: float
    center_y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        return abs(x - self.center_x) <= self.width / 2 and abs(y - self.center_y) <= self.height / 2


START_BUTTON = Button("Start Game", SCREEN_WIDTH / 2, SCREEN_HEIGHT * 0.7, 240, 60)
PLAY_AGAIN_BUTTON = Button("Play Again?", SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2 + 60, 220, 50)
_OVERLAY_WIDTH = 400
_OVERLAY_HEIGHT = 200


def fit_board_layout(cols: int, rows: int):
    """Screen layout for a board of the given size; its radius is also the game's hex radius."""

    return compute_fit_hex_layout(
        screen_width_px=SCREEN_WIDTH,
        screen_height_px=SCREEN_HEIGHT,
        top_bar_height_px=TOP_BAR_HEIGHT,
        columns=cols,
        rows=rows,
        view_width_scale=BOARD_VIEW_WIDTH_SCALE,
        view_height_scale=BOARD_VIEW_HEIGHT_SCALE,
        fit_scale=BOARD_FIT_SCALE,
    )


class BoardView:
    """Screen placement of a board: one fitted layout plus cached hex geometry."""

    def __init__(self, board):
        self.board = board
        grid = board.grid
        self.layout = fit_board_layout(grid.cols, grid.rows)
        radius = self.layout.radius_px
        self.geometry: dict[tuple[int, int], dict[str, object]] = {}
        for q, r in grid.coords():
            x, y = axial_to_pixel_odd_q(q, r, radius, self.layout.origin_x_px, self.layout.origin_y_px)
            points = hex_corner_points(x, y, radius)
            self.geometry[(q, r)] = {
                "center": (x, y),
                "points_arcade": _to_arcade_points(points),
                "inner_arcade": _to_arcade_points(hex_corner_points(x, y, radius * UI_POWER_NODE_INNER_SCALE)),
            }

    @property
    def radius(self) -> float:
        return self.layout.radius_px

    def cell_under_pixel(self, px: float, py: float) -> tuple[int, int] | None:
        """Coordinate under a top-left based pixel, if any."""

        centers = ((coord, entry["center"]) for coord, entry in self.geometry.items())
        return pick_nearest_center(px, py, centers, self.radius)


def draw_menu(window) -> None:
    window.clear(color=COLOR_BACKGROUND)
    _draw_text(WINDOW_TITLE, SCREEN_WIDTH / 2, SCREEN_HEIGHT * 0.2, COLOR_TITLE, FONT_SIZE_TITLE)
    _draw_text(
        MENU_INSTRUCTIONS,
        SCREEN_WIDTH / 2,
        SCREEN_HEIGHT * 0.4,
        COLOR_TEXT,
        FONT_SIZE_BODY,
        width=int(SCREEN_WIDTH * 0.8),
    )
    _draw_button(START_BUTTON, FONT_SIZE_BUTTON)


def draw_frame(window, view: BoardView, game, selected=None) -> None:
    window.clear(color=COLOR_BACKGROUND)
    board = view.board
    for cell in board.cells():
        geometry = view.geometry[cell.coord]
        points = geometry["points_arcade"]
        if cell.is_blocker:
            arcade.draw_polygon_filled(points, (*COLOR_BLOCKER, UI_EMPTY_OUTLINE_ALPHA))
            arcade.draw_polygon_outline(points, COLOR_BLOCKER, UI_GRID_LINE_WIDTH_PX)
        elif cell.is_power_node:
            arcade.draw_polygon_filled(points, cell.owner)
            arcade.draw_polygon_filled(geometry["inner_arcade"], COLOR_TEXT)
            arcade.draw_polygon_outline(points, cell.owner, UI_SELECTED_LINE_WIDTH_PX)
        elif cell.owner is not None:
            arcade.draw_polygon_filled(points, (*cell.owner, UI_EMPTY_OUTLINE_ALPHA))
            arcade.draw_polygon_outline(points, cell.owner, UI_GRID_LINE_WIDTH_PX)
        elif cell.coord == selected:
            selected_color = game.color_of(game.current_player)
            arcade.draw_polygon_outline(points, selected_color, UI_SELECTED_LINE_WIDTH_PX)
        else:
            arcade.draw_polygon_outline(
                points, (*COLOR_EMPTY_OUTLINE, UI_EMPTY_OUTLINE_ALPHA), UI_GRID_LINE_WIDTH_PX
            )

    draw_top_bar(game)
    if game.game_over:
        draw_game_over(game)


def draw_top_bar(game) -> None:
    human_size, cpu_size = game.cluster_sizes()
    bar_y = TOP_BAR_HEIGHT / 2
    _draw_label_box(f"You: {human_size}", 60, bar_y, game.color_of(PLAYER_HUMAN), anchor_x="left")
    _draw_label_box(f"AI: {cpu_size}", SCREEN_WIDTH - 60, bar_y, game.color_of(PLAYER_CPU), anchor_x="right")

    if game.turn_state is TurnState.GAME_OVER:
        status, color = "GAME OVER", COLOR_TEXT
    elif game.turn_state is TurnState.AWAITING_COMPUTER_MOVE:
        status, color = "AI Thinking...", game.color_of(PLAYER_CPU)
    else:
        status, color = "Your Turn", game.color_of(PLAYER_HUMAN)
    _draw_label_box(status, SCREEN_WIDTH / 2, bar_y, color)


def draw_game_over(game) -> None:
    result = game.result
    if result is None:
        return
    center_x = SCREEN_WIDTH / 2
    center_y = SCREEN_HEIGHT / 2
    arcade.draw_lbwh_rectangle_filled(
        center_x - _OVERLAY_WIDTH / 2,
        _to_arcade_y(center_y + _OVERLAY_HEIGHT / 2),
        _OVERLAY_WIDTH,
        _OVERLAY_HEIGHT,
        (*COLOR_BACKGROUND, 204),
    )
    arcade.draw_lbwh_rectangle_outline(
        center_x - _OVERLAY_WIDTH / 2,
        _to_arcade_y(center_y + _OVERLAY_HEIGHT / 2),
        _OVERLAY_WIDTH,
        _OVERLAY_HEIGHT,
        COLOR_TEXT,
        2,
    )
    human_size, cpu_size = result.cluster_sizes
    _draw_text(winner_label(result), center_x, center_y - 40, COLOR_TITLE, FONT_SIZE_RESULT)
    _draw_text(
        f"Your Cluster: {human_size} | AI Cluster: {cpu_size}",
        center_x,
        center_y + 10,
        COLOR_TEXT,
        FONT_SIZE_BODY,
    )
    _draw_button(PLAY_AGAIN_BUTTON, FONT_SIZE_BODY + 8)


def _draw_button(button: Button, font_size: int) -> None:
    arcade.draw_lbwh_rectangle_filled(
        button.center_x - button.width / 2,
        _to_arcade_y(button.center_y + button.height / 2),
        button.width,
        button.height,
        COLOR_BUTTON,
    )
    _draw_text(button.label, button.center_x, button.center_y, COLOR_TEXT, font_size)


def _draw_label_box(text: str, x: float, y: float, color, anchor_x: str = "center") -> None:
    label = _TEXT_CACHE.get(
        text, x, _to_arcade_y(y), color, FONT_SIZE_BAR, FONT_NAME, anchor_x=anchor_x
    )
    padding = 8
    arcade.draw_lbwh_rectangle_filled(
        label.left - padding,
        label.bottom - padding / 2,
        label.content_width + padding * 2,
        label.content_height + padding,
        COLOR_BAR,
    )
    label.draw()


def _draw_text(text: str, x: float, y: float, color, font_size: int, width: int | None = None) -> None:
    _TEXT_CACHE.get(text, x, _to_arcade_y(y), color, font_size, FONT_NAME, width=width).draw()


def _to_arcade_y(y_top: float) -> float:
    return SCREEN_HEIGHT - y_top


def _to_arcade_points(points):
    return [(px, _to_arcade_y(py)) for px, py in points]
