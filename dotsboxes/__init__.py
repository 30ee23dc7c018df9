"""Dots and Boxes rules engine.

The functional API (`initialize`, `is_valid_move`, `apply_move`, `is_terminal`,
`winner`) is pure; `GameSession` wraps it for callers that want one owner per game.
"""

from dotsboxes.errors import GameBusy, IllegalMove, InvalidDimensions
from dotsboxes.models import Box, GameState, GridSize, Line, MoveResult, Orientation, Player
from dotsboxes.rules import apply_move, available_moves, initialize, is_terminal, is_valid_move, winner
from dotsboxes.session import ActionResult, GameSession

__all__ = [
    "ActionResult",
    "Box",
    "GameBusy",
    "GameSession",
    "GameState",
    "GridSize",
    "IllegalMove",
    "InvalidDimensions",
    "Line",
    "MoveResult",
    "Orientation",
    "Player",
    "apply_move",
    "available_moves",
    "initialize",
    "is_terminal",
    "is_valid_move",
    "winner",
]
