import math
import random

import pytest

from conftest import CPU, HUMAN, build_board, snapshot
from nexus_grid.config import AI_WEIGHTS_STANDARD
from nexus_grid.core import MoveEvaluator, NoLegalMovesError


@pytest.fixture
def evaluator():
    return MoveEvaluator(own_color=CPU, opponent_color=HUMAN, rng=random.Random(0))


def test_scenario_scores_every_open_cell(evaluator, scenario_board):
    scenario_board.claim((1, 1), HUMAN)

    scored = dict(evaluator.scored_moves(scenario_board))
    assert set(scored) == {(1, 0), (2, 0), (0, 1), (2, 1), (0, 2), (1, 2)}

    # Cells touching the computer's power node grow its cluster to 2 and sit
    # one step (sqrt(3) radii) away from it.
    step = 40.0 * math.sqrt(3)
    assert scored[(2, 1)] == pytest.approx(1.5 * 2 + 1.2 * 1 + 0.1 * (200 - step))
    assert scored[(1, 2)] == pytest.approx(scored[(2, 1)])
    # Blocking the human's three-cell bridge is worth less than growing.
    assert scored[(1, 0)] == pytest.approx(1.5 + 1.2 * 2 + 0.1 * (200 - 120))
    assert scored[(2, 0)] == pytest.approx(1.5 + 0.1 * (200 - 2 * step))


def test_scenario_picks_highest_scoring_cell(evaluator, scenario_board):
    scenario_board.claim((1, 1), HUMAN)
    before = snapshot(scenario_board)

    move = evaluator.compute_move(scenario_board)

    assert move in {(2, 1), (1, 2)}
    scored = dict(evaluator.scored_moves(scenario_board))
    assert scored[move] == max(scored.values())
    assert snapshot(scenario_board) == before


def test_scenario_is_deterministic(scenario_board):
    scenario_board.claim((1, 1), HUMAN)
    moves = {
        MoveEvaluator(CPU, HUMAN, rng=random.Random(seed)).compute_move(scenario_board)
        for seed in range(5)
    }
    assert len(moves) == 1


def test_prefers_extending_own_cluster(evaluator, line_board):
    line_board.claim((1, 0), HUMAN)
    assert evaluator.compute_move(line_board) == (3, 0)
    assert evaluator.score_move(line_board, (3, 0)) == pytest.approx(17.0)
    assert evaluator.score_move(line_board, (2, 0)) == pytest.approx(10.7)


def test_opponent_gain_counts_only_growth(evaluator, line_board):
    no_growth = evaluator.score_move(line_board, (3, 0))
    assert no_growth == pytest.approx(1.5 * 2 + 0.1 * (200 - 60))


def test_ties_keep_first_candidate(evaluator, scenario_board, monkeypatch):
    monkeypatch.setattr(evaluator, "score_move", lambda board, coord, opponent_largest=None: 1.0)
    assert evaluator.compute_move(scenario_board) == scenario_board.claimable_coords()[0]


def test_falls_back_to_random_legal_cell(scenario_board, monkeypatch):
    evaluator = MoveEvaluator(CPU, HUMAN, rng=random.Random(7))
    monkeypatch.setattr(evaluator, "score_move", lambda board, coord, opponent_largest=None: -math.inf)

    candidates = scenario_board.claimable_coords()
    expected = random.Random(7).choice(candidates)
    assert evaluator.compute_move(scenario_board) == expected


def test_no_legal_moves(evaluator):
    board = build_board(3, 1, blockers=[(1, 0)], power_nodes=[(0, 0), (2, 0)])
    with pytest.raises(NoLegalMovesError):
        evaluator.compute_move(board)


def test_distance_term_skipped_without_friendly_cells(evaluator):
    board = build_board(2, 1)
    assert evaluator.score_move(board, (0, 0)) == pytest.approx(
        AI_WEIGHTS_STANDARD.own_cluster + AI_WEIGHTS_STANDARD.opponent_gain
    )


def test_evaluator_colors_must_differ():
    with pytest.raises(ValueError):
        MoveEvaluator(HUMAN, HUMAN)


def test_rank_moves_orders_best_first(evaluator, scenario_board):
    scenario_board.claim((1, 1), HUMAN)

    ranked = evaluator.rank_moves(scenario_board)
    scores = [score for _, score in ranked]

    assert sorted(ranked) == sorted(evaluator.scored_moves(scenario_board))
    assert scores == sorted(scores, reverse=True)
    assert {coord for coord, _ in ranked[:2]} == {(2, 1), (1, 2)}
    assert [coord for coord, _ in ranked[2:]] == [(1, 0), (0, 2), (0, 1), (2, 0)]
    assert evaluator.compute_move(scenario_board) == ranked[0][0]


def test_rank_moves_keeps_board_order_on_equal_scores(evaluator, scenario_board, monkeypatch):
    monkeypatch.setattr(evaluator, "score_move", lambda board, coord, opponent_largest=None: 1.0)
    ranked = evaluator.rank_moves(scenario_board)
    assert [coord for coord, _ in ranked] == scenario_board.claimable_coords()
