from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field


class Player(StrEnum):
    player1 = "player1"
    player2 = "player2"


class Orientation(StrEnum):
    horizontal = "horizontal"
    vertical = "vertical"


class _Frozen(BaseModel):
    # Every transition builds a new snapshot; nothing is edited in place.
    model_config = ConfigDict(frozen=True)


class Line(_Frozen):
    id: str
    row: int
    col: int
    orientation: Orientation
    is_drawn: bool = False

    # Who drew it. Stays None until the line is drawn.
    owner: Player | None = None


class Box(_Frozen):
    id: str
    row: int
    col: int
    owner: Player | None = None


class GridSize(_Frozen):
    """Dimensions in dots, not boxes."""

    rows: int
    cols: int


def _default_player_chars() -> dict[Player, str]:
    return {Player.player1: "X", Player.player2: "O"}


def _zero_scores() -> dict[Player, int]:
    return {Player.player1: 0, Player.player2: 0}


class GameState(_Frozen):
    lines: tuple[Line, ...]
    boxes: tuple[Box, ...]
    player_turn: Player = Player.player1

    # Display characters used when boxes are rendered as text.
    player_chars: dict[Player, str] = Field(default_factory=_default_player_chars)

    scores: dict[Player, int] = Field(default_factory=_zero_scores)
    grid_size: GridSize

    def line(self, line_id: str) -> Line | None:
        return next((line for line in self.lines if line.id == line_id), None)

    def box(self, box_id: str) -> Box | None:
        return next((box for box in self.boxes if box.id == box_id), None)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of `apply_move`.

    Unpacks as `(state, boxes_formed)` so callers can treat it as a pair.
    """

    state: GameState
    boxes_formed: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[object]:
        yield self.state
        yield self.boxes_formed
