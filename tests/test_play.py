import pytest

pytest.importorskip("arcade")

from nexus_grid.config import HEX_RADIUS
from nexus_grid.play import PlaySession


def test_game_uses_the_drawn_hex_radius():
    session = PlaySession(8, 8, seed=1)
    session.start_game()

    assert session.view.radius != pytest.approx(HEX_RADIUS)
    assert session.game.board.grid.hex_radius == pytest.approx(session.view.radius)


def test_restart_refits_radius_for_new_size():
    session = PlaySession(8, 8, seed=1)
    session.start_game()
    first_radius = session.view.radius

    session.rows, session.cols = 5, 6
    session.start_game()

    assert session.game.board.grid.size == 30
    assert session.view.radius != pytest.approx(first_radius)
    assert session.game.board.grid.hex_radius == pytest.approx(session.view.radius)
