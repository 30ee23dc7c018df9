from __future__ import annotations


class InvalidDimensions(ValueError):
    """Raised when a grid is requested with fewer than one dot per axis."""


class IllegalMove(ValueError):
    """Raised by the session when a move is refused before it reaches the rules."""


class GameBusy(ValueError):
    """Raised when a game's lock could not be acquired in time."""
