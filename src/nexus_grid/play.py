if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import logging
import random

import arcade

import nexus_grid.render as ui
from nexus_grid.config import (
    CPU_MOVE_DELAY_SECONDS,
    FPS,
    NEXUS_BOARD_STANDARD,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_TITLE,
)
from nexus_grid.core import GameListener, NexusGame, TurnState
from nexus_grid.runtime import ArcadeFrameClock, ArcadeWindowController

logger = logging.getLogger(__name__)

SCENE_MENU = "menu"
SCENE_GAME = "game"


class PlaySession(GameListener):
    """Presentation state around one ``NexusGame``: scene, selection, CPU timer."""

    def __init__(self, rows, cols, seed=None):
        self.rows = rows
        self.cols = cols
        self.rng = random.Random(seed)
        self.scene = SCENE_MENU
        self.game = None
        self.view = None
        self.selected = None
        self.cpu_timer = 0.0

    def start_game(self):
        # The core measures AI distances in the drawn hex size.
        hex_radius = ui.fit_board_layout(self.cols, self.rows).radius_px
        if self.game is None:
            self.game = NexusGame(rows=self.rows, cols=self.cols, hex_radius=hex_radius, rng=self.rng)
            self.game.subscribe(self)
        else:
            self.game.hex_radius = hex_radius
            self.game.restart_game(self.rows, self.cols)
        self.view = ui.BoardView(self.game.board)
        self.selected = None
        self.cpu_timer = 0.0
        self.scene = SCENE_GAME

    def on_turn_changed(self, player_index):
        if self.game.turn_state is TurnState.AWAITING_COMPUTER_MOVE:
            self.cpu_timer = CPU_MOVE_DELAY_SECONDS

    def on_game_over(self, result):
        self.selected = None

    def handle_press(self, x, y):
        if self.scene == SCENE_MENU:
            if ui.START_BUTTON.contains(x, y):
                self.start_game()
            return

        if self.game.game_over:
            if ui.PLAY_AGAIN_BUTTON.contains(x, y):
                self.start_game()
            return

        if self.game.turn_state is not TurnState.AWAITING_HUMAN_MOVE:
            return
        coord = self.view.cell_under_pixel(x, y)
        if coord is not None and self.game.board.is_cell_claimable(coord):
            self.selected = coord

    def handle_release(self):
        if self.scene != SCENE_GAME or self.selected is None:
            return
        coord = self.selected
        self.selected = None
        self.game.attempt_claim(coord)

    def update(self, dt_seconds):
        if self.scene != SCENE_GAME:
            return
        if self.game.turn_state is not TurnState.AWAITING_COMPUTER_MOVE:
            return
        self.cpu_timer = max(0.0, self.cpu_timer - max(0.0, dt_seconds))
        if self.cpu_timer > 0.0:
            return
        self.game.request_computer_move()

    def draw(self, window):
        if self.scene == SCENE_MENU:
            ui.draw_menu(window)
        else:
            ui.draw_frame(window, self.view, self.game, self.selected)


def play_nexus(rows=NEXUS_BOARD_STANDARD.rows, cols=NEXUS_BOARD_STANDARD.cols, seed=None):
    window_controller = ArcadeWindowController(
        SCREEN_WIDTH,
        SCREEN_HEIGHT,
        WINDOW_TITLE,
        enabled=True,
        vsync=False,
    )
    window = window_controller.window
    if window is None:
        return

    frame_clock = ArcadeFrameClock()
    session = PlaySession(rows, cols, seed=seed)
    logger.info("Starting NexusGrid window (%dx%d board)", rows, cols)

    while True:
        dt_seconds = frame_clock.tick(FPS)
        if window_controller.poll_events():
            break

        for symbol in window_controller.consume_key_presses():
            if symbol == arcade.key.ESCAPE:
                window_controller.close()
                return

        for click in window_controller.consume_mouse_presses():
            if click.button != arcade.MOUSE_BUTTON_LEFT:
                continue
            session.handle_press(click.x, window_controller.to_top_left_y(click.y))

        if window_controller.consume_mouse_releases():
            session.handle_release()

        session.update(dt_seconds)
        session.draw(window)
        window_controller.flip()

    window_controller.close()


if __name__ == "__main__":
    play_nexus()
