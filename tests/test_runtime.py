import logging

import pytest

from nexus_grid.__main__ import parse_args
from nexus_grid.runtime import configure_logging


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    handler_count = len(logger.handlers)
    configure_logging(logging.WARNING)

    assert len(logger.handlers) == handler_count
    assert logger.level == logging.WARNING


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")


def test_cli_defaults():
    args = parse_args([])
    assert (args.rows, args.cols) == (8, 8)
    assert args.seed is None
    assert args.log_level == "INFO"


def test_cli_overrides():
    args = parse_args(["--rows", "5", "-c", "6", "--seed", "3", "--log-level", "debug"])
    assert (args.rows, args.cols, args.seed, args.log_level) == (5, 6, 3, "debug")


def test_cli_rejects_non_positive_size():
    with pytest.raises(SystemExit):
        parse_args(["--rows", "0"])


def test_cli_rejects_single_cell_board():
    with pytest.raises(SystemExit):
        parse_args(["--rows", "1", "--cols", "1"])

    args = parse_args(["--rows", "1", "--cols", "2"])
    assert (args.rows, args.cols) == (1, 2)
