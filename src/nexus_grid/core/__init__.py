"""Core gameplay modules."""

from .ai import MoveEvaluator
from .board import Board, CellState, HexCell
from .clusters import cluster_components, largest_cluster_size, speculative_cluster_size
from .errors import GameError, IllegalMoveError, NoLegalMovesError
from .game import GameListener, GameResult, GameState, NexusGame, TurnState, winner_label
from .grid import HexGrid

__all__ = [
    "Board",
    "CellState",
    "GameError",
    "GameListener",
    "GameResult",
    "GameState",
    "HexCell",
    "HexGrid",
    "IllegalMoveError",
    "MoveEvaluator",
    "NexusGame",
    "NoLegalMovesError",
    "TurnState",
    "cluster_components",
    "largest_cluster_size",
    "speculative_cluster_size",
    "winner_label",
]
