import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from nexus_grid.config import (
    AI_WEIGHTS_STANDARD,
    HEX_RADIUS,
    NEXUS_BOARD_STANDARD,
    PLAYER_COLORS,
    PLAYER_CPU,
    PLAYER_HUMAN,
)
from nexus_grid.core.ai import MoveEvaluator
from nexus_grid.core.board import Board
from nexus_grid.core.clusters import cluster_sizes
from nexus_grid.core.errors import IllegalMoveError, NoLegalMovesError

logger = logging.getLogger(__name__)


class TurnState(Enum):
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    AWAITING_COMPUTER_MOVE = "awaiting_computer_move"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameResult:
    """Final largest-cluster sizes; ``winner`` is a player index or None for a tie."""

    cluster_sizes: tuple
    winner: int | None

    @property
    def is_tie(self):
        return self.winner is None

    @classmethod
    def from_cluster_sizes(cls, sizes):
        human, cpu = sizes
        if human > cpu:
            winner = PLAYER_HUMAN
        elif cpu > human:
            winner = PLAYER_CPU
        else:
            winner = None
        return cls(cluster_sizes=tuple(sizes), winner=winner)


@dataclass
class GameState:
    board: Board
    current_player: int = PLAYER_HUMAN
    turn_state: TurnState = TurnState.AWAITING_HUMAN_MOVE
    result: GameResult | None = None
    moves: list = field(default_factory=list)

    @property
    def game_over(self):
        return self.turn_state is TurnState.GAME_OVER


class GameListener:
    """Observer for presentation layers; override the callbacks you need."""

    def on_turn_changed(self, player_index):
        pass

    def on_game_over(self, result):
        pass

    def on_cell_state_changed(self, coord, cell_state):
        pass


class NexusGame:
    """Turn controller for one human-versus-computer game.

    The human always moves first. Every claim is followed by an end-of-game
    check; the computer's move is computed synchronously when
    ``request_computer_move`` is called.
    """

    def __init__(
        self,
        rows=NEXUS_BOARD_STANDARD.rows,
        cols=NEXUS_BOARD_STANDARD.cols,
        blocker_fraction=NEXUS_BOARD_STANDARD.blocker_fraction,
        player_colors=PLAYER_COLORS,
        hex_radius=HEX_RADIUS,
        weights=AI_WEIGHTS_STANDARD,
        rng=None,
        board=None,
    ):
        self.player_colors = tuple(player_colors)
        if len(self.player_colors) != 2 or self.player_colors[0] == self.player_colors[1]:
            raise ValueError("A game needs exactly two distinct player colors.")

        self.rows = rows
        self.cols = cols
        self.blocker_fraction = blocker_fraction
        self.hex_radius = hex_radius
        self.rng = rng or random.Random()
        self.evaluator = MoveEvaluator(
            own_color=self.player_colors[PLAYER_CPU],
            opponent_color=self.player_colors[PLAYER_HUMAN],
            weights=weights,
            rng=self.rng,
        )
        self._listeners = []
        self.state = None
        if board is None:
            self.restart_game()
        else:
            self._start(board)

    def subscribe(self, listener):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def board(self):
        return self.state.board

    @property
    def turn_state(self):
        return self.state.turn_state

    @property
    def current_player(self):
        return self.state.current_player

    @property
    def game_over(self):
        return self.state.game_over

    @property
    def result(self):
        return self.state.result

    def color_of(self, player_index):
        return self.player_colors[player_index]

    def restart_game(self, rows=None, cols=None):
        """Start over on a fresh random board; the only way out of GAME_OVER."""
        if rows is not None:
            self.rows = rows
        if cols is not None:
            self.cols = cols

        board = Board.create(
            rows=self.rows,
            cols=self.cols,
            blocker_fraction=self.blocker_fraction,
            hex_radius=self.hex_radius,
            rng=self.rng,
        )
        board.place_power_nodes(self.player_colors, rng=self.rng)
        self._start(board)
        return self.state

    def _start(self, board):
        if len(board.power_nodes) != 2:
            raise ValueError("Board must have both power nodes placed before play.")
        self.state = GameState(board=board)
        logger.info(
            "New %dx%d game, power nodes at %s",
            board.grid.cols,
            board.grid.rows,
            list(board.power_nodes.values()),
        )
        if not board.claimable_coords():
            self._set_game_over()
            return
        self._emit_turn_changed()

    def attempt_claim(self, coord):
        """Claim ``coord`` for the human. Returns False if the claim was rejected."""
        if self.state.turn_state is not TurnState.AWAITING_HUMAN_MOVE:
            logger.debug("Ignoring human claim at %s during %s", coord, self.state.turn_state.value)
            return False

        try:
            self._apply_claim(PLAYER_HUMAN, coord)
        except IllegalMoveError as exc:
            logger.debug("Rejected claim: %s", exc)
            return False

        self._after_claim(next_state=TurnState.AWAITING_COMPUTER_MOVE, next_player=PLAYER_CPU)
        return True

    def request_computer_move(self):
        """Let the computer claim its best cell. Returns the coordinate, or None."""
        if self.state.turn_state is not TurnState.AWAITING_COMPUTER_MOVE:
            return None

        try:
            coord = self.evaluator.compute_move(self.board)
        except NoLegalMovesError:
            logger.info("Computer has no legal moves left")
            self._set_game_over()
            return None

        self._apply_claim(PLAYER_CPU, coord)
        self._after_claim(next_state=TurnState.AWAITING_HUMAN_MOVE, next_player=PLAYER_HUMAN)
        return coord

    def cluster_sizes(self):
        return cluster_sizes(self.player_colors, self.board)

    def _apply_claim(self, player_index, coord):
        cell = self.board.claim(coord, self.color_of(player_index))
        self.state.moves.append((player_index, coord))
        logger.debug("Player %d claimed %s", player_index, coord)
        for listener in list(self._listeners):
            listener.on_cell_state_changed(coord, cell.state())

    def _after_claim(self, next_state, next_player):
        if self.board.is_full() or not self.board.claimable_coords():
            self._set_game_over()
            return
        self.state.turn_state = next_state
        self.state.current_player = next_player
        self._emit_turn_changed()

    def _set_game_over(self):
        result = GameResult.from_cluster_sizes(self.cluster_sizes())
        self.state.turn_state = TurnState.GAME_OVER
        self.state.result = result
        logger.info(
            "Game over after %d moves: clusters %s, %s",
            len(self.state.moves),
            result.cluster_sizes,
            winner_label(result),
        )
        logger.debug("Final board:\n%s", self.board.describe())
        for listener in list(self._listeners):
            listener.on_game_over(result)

    def _emit_turn_changed(self):
        for listener in list(self._listeners):
            listener.on_turn_changed(self.state.current_player)


def winner_label(result):
    if result.winner == PLAYER_HUMAN:
        return "You Win!"
    if result.winner == PLAYER_CPU:
        return "AI Wins!"
    return "It's a Tie!"
