from nexus_grid.layout import compute_fit_hex_layout


def test_import_package():
    import nexus_grid

    assert nexus_grid.__version__


def test_import_core_without_display():
    from nexus_grid.core import NexusGame

    game = NexusGame(rows=4, cols=4)
    assert game.board.grid.size == 16


def test_fit_layout_stays_on_screen():
    layout = compute_fit_hex_layout(
        screen_width_px=1024,
        screen_height_px=768,
        top_bar_height_px=60,
        columns=8,
        rows=8,
    )
    assert layout.columns == 8 and layout.rows == 8
    assert layout.radius_px > 6
    assert layout.origin_x_px >= 0
    assert layout.origin_y_px >= 60
