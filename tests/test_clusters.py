import random

import pytest

from conftest import CPU, HUMAN, build_board, snapshot
from nexus_grid.core import Board, cluster_components, largest_cluster_size, speculative_cluster_size
from nexus_grid.core.clusters import cluster_sizes, largest_cluster


def _random_board(seed):
    rng = random.Random(seed)
    board = Board.create(rows=7, cols=6, rng=rng)
    board.place_power_nodes((HUMAN, CPU), rng=rng)
    for coord in board.claimable_coords():
        if rng.random() < 0.7:
            board.claim(coord, rng.choice((HUMAN, CPU)))
    return board


def test_empty_color_has_no_cluster():
    board = build_board(3, 3)
    assert largest_cluster_size(HUMAN, board) == 0
    assert largest_cluster(HUMAN, board) == frozenset()


def test_single_claimed_cell():
    board = build_board(3, 3, owners={(1, 1): HUMAN})
    assert largest_cluster_size(HUMAN, board) == 1


def test_two_adjacent_cells():
    board = build_board(3, 3, owners={(1, 1): HUMAN, (1, 0): HUMAN})
    assert largest_cluster_size(HUMAN, board) == 2


def test_interposed_blocker_splits_cluster():
    board = build_board(3, 1, blockers=[(1, 0)], owners={(0, 0): HUMAN, (2, 0): HUMAN})
    components = cluster_components(HUMAN, board)
    assert sorted(len(component) for component in components) == [1, 1]
    assert largest_cluster_size(HUMAN, board) == 1


def test_colored_blocker_is_never_part_of_a_cluster():
    board = build_board(
        3, 1, blockers=[(1, 0)], owners={(0, 0): HUMAN, (1, 0): HUMAN, (2, 0): HUMAN}
    )
    assert largest_cluster_size(HUMAN, board) == 1
    assert all((1, 0) not in component for component in cluster_components(HUMAN, board))


def test_power_nodes_count_toward_clusters(line_board):
    line_board.claim((1, 0), HUMAN)
    assert largest_cluster_size(HUMAN, line_board) == 2
    assert largest_cluster_size(CPU, line_board) == 1


def test_other_color_breaks_cluster(line_board):
    line_board.claim((1, 0), CPU)
    line_board.claim((2, 0), HUMAN)
    assert largest_cluster_size(HUMAN, line_board) == 1
    assert cluster_sizes((HUMAN, CPU), line_board) == (1, 1)


@pytest.mark.parametrize("seed", range(10))
def test_result_independent_of_start_order(seed):
    board = _random_board(seed)
    coords = list(board.grid.coords())
    expected = set(cluster_components(HUMAN, board))

    rng = random.Random(seed)
    for _ in range(5):
        rng.shuffle(coords)
        assert set(cluster_components(HUMAN, board, order=coords)) == expected
    assert set(cluster_components(HUMAN, board, order=reversed(coords))) == expected


@pytest.mark.parametrize("seed", range(10))
def test_every_cell_in_at_most_one_component(seed):
    board = _random_board(seed)
    for color in (HUMAN, CPU):
        components = cluster_components(color, board)
        members = [coord for component in components for coord in component]
        assert len(members) == len(set(members))
        assert len(members) == board.count_owned(color)


@pytest.mark.parametrize("seed", range(10))
def test_speculative_matches_mutate_and_revert(seed):
    board = _random_board(seed)
    for coord in board.grid.coords():
        for hypothetical in (HUMAN, CPU, None):
            before = snapshot(board)
            speculative = speculative_cluster_size(HUMAN, board, coord, hypothetical)
            assert snapshot(board) == before

            cell = board.get_cell(coord)
            original = cell.owner
            cell.owner = hypothetical
            actual = largest_cluster_size(HUMAN, board)
            cell.owner = original

            assert speculative == actual


def test_speculative_outside_board_rejected(scenario_board):
    with pytest.raises(ValueError):
        speculative_cluster_size(HUMAN, scenario_board, (7, 7), HUMAN)
