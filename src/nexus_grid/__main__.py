"""Module entrypoint for `python -m nexus_grid`."""

if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import argparse

from nexus_grid.config import NEXUS_BOARD_STANDARD


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="nexus_grid",
        description="Claim hexagons and build the largest connected cluster",
    )
    parser.add_argument(
        "--rows", "-r",
        type=int,
        default=NEXUS_BOARD_STANDARD.rows,
        help=f"Board rows (default: {NEXUS_BOARD_STANDARD.rows})",
    )
    parser.add_argument(
        "--cols", "-c",
        type=int,
        default=NEXUS_BOARD_STANDARD.cols,
        help=f"Board columns (default: {NEXUS_BOARD_STANDARD.cols})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for blocker, power node and fallback move randomness",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)
    if args.rows < 1 or args.cols < 1:
        parser.error("--rows and --cols must be positive")
    if args.rows * args.cols < 2:
        parser.error("the board needs at least 2 cells")
    return args


def main(argv=None):
    args = parse_args(argv)

    from nexus_grid.runtime import configure_logging

    configure_logging(args.log_level)

    from nexus_grid.play import play_nexus

    play_nexus(rows=args.rows, cols=args.cols, seed=args.seed)


if __name__ == "__main__":
    main()
