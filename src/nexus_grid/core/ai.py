import logging
import math
import random

from nexus_grid.config import AI_WEIGHTS_STANDARD
from nexus_grid.core.clusters import largest_cluster_size, speculative_cluster_size
from nexus_grid.core.errors import NoLegalMovesError

logger = logging.getLogger(__name__)


class MoveEvaluator:
    """One-ply heuristic for the computer player.

    Each claimable cell is scored by how much it grows the computer's largest
    cluster, how much it would have grown the opponent's largest cluster, and
    how close it is to the computer's existing cells.
    """

    def __init__(self, own_color, opponent_color, weights=AI_WEIGHTS_STANDARD, rng=None):
        if own_color == opponent_color:
            raise ValueError("Evaluator colors must differ.")
        self.own_color = own_color
        self.opponent_color = opponent_color
        self.weights = weights
        self.rng = rng or random.Random()

    def score_move(self, board, coord, opponent_largest=None):
        if opponent_largest is None:
            opponent_largest = largest_cluster_size(self.opponent_color, board)

        own_potential = speculative_cluster_size(self.own_color, board, coord, self.own_color)
        score = own_potential * self.weights.own_cluster

        opponent_potential = speculative_cluster_size(
            self.opponent_color, board, coord, self.opponent_color
        )
        if opponent_potential > opponent_largest:
            score += (opponent_potential - opponent_largest) * self.weights.opponent_gain

        nearest = self._nearest_friendly_distance(board, coord)
        if nearest is not None:
            reach = board.grid.hex_radius * self.weights.proximity_reach_radii
            score += (reach - nearest) * self.weights.proximity
        return score

    def _nearest_friendly_distance(self, board, coord):
        friendly = [
            cell.coord
            for cell in board.cells()
            if not cell.is_blocker and cell.owner == self.own_color
        ]
        power_node = board.power_node(self.own_color)
        if power_node is not None and power_node not in friendly:
            friendly.append(power_node)
        if not friendly:
            return None
        return min(board.grid.distance(coord, other) for other in friendly)

    def scored_moves(self, board):
        """Score of every claimable cell, in board order."""
        opponent_largest = largest_cluster_size(self.opponent_color, board)
        return [
            (coord, self.score_move(board, coord, opponent_largest))
            for coord in board.claimable_coords()
        ]

    def rank_moves(self, board):
        """Scored claimable cells, best first; equal scores keep board order."""
        return sorted(self.scored_moves(board), key=lambda move: move[1], reverse=True)

    def compute_move(self, board):
        """Pick the highest scoring claimable cell; ties keep the first one."""
        scored = self.scored_moves(board)
        if not scored:
            raise NoLegalMovesError("no claimable cells left")

        best_move = None
        best_score = -math.inf
        for coord, score in scored:
            if score > best_score:
                best_score = score
                best_move = coord

        if best_move is None:
            best_move = self.rng.choice([coord for coord, _ in scored])
            logger.debug("No move beat the sentinel, picked %s at random", best_move)
        else:
            logger.debug("Best move %s scored %.2f of %d candidates", best_move, best_score, len(scored))
        return best_move
