"""Recoverable game-rule errors."""


class GameError(Exception):
    """Base class for expected, recoverable game conditions."""


class IllegalMoveError(GameError):
    """A claim targeted a cell that cannot be claimed."""

    def __init__(self, coord, reason):
        super().__init__(f"cannot claim {coord}: {reason}")
        self.coord = coord
        self.reason = reason


class NoLegalMovesError(GameError):
    """No claimable cell is left on the board."""
