from __future__ import annotations

import logging

from dotsboxes.errors import InvalidDimensions
from dotsboxes.ids import box_id, box_line_ids, line_id as make_line_id
from dotsboxes.models import Box, GameState, GridSize, Line, MoveResult, Orientation, Player

logger = logging.getLogger(__name__)


def other_player(player: Player | str) -> Player:
    return Player.player2 if Player(player) == Player.player1 else Player.player1


def _require_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimensions(f"{name} must be an integer number of dots (got {value!r})")
    if value < 1:
        raise InvalidDimensions(f"{name} must be at least 1 (got {value})")
    return value


def initialize(rows: int, cols: int) -> GameState:
    """Build the opening state for a grid of `rows` x `cols` dots.

    A 6x6 grid of dots has 5x5 boxes. Grids with a single row or column of
    dots are accepted and simply have no boxes.
    """

    rows = _require_dimension("rows", rows)
    cols = _require_dimension("cols", cols)

    lines: list[Line] = []
    for r in range(rows):
        for c in range(cols - 1):
            lines.append(
                Line(id=make_line_id(Orientation.horizontal, r, c), row=r, col=c, orientation=Orientation.horizontal)
            )
    for r in range(rows - 1):
        for c in range(cols):
            lines.append(
                Line(id=make_line_id(Orientation.vertical, r, c), row=r, col=c, orientation=Orientation.vertical)
            )

    boxes = [Box(id=box_id(r, c), row=r, col=c) for r in range(rows - 1) for c in range(cols - 1)]

    logger.debug("initialized %dx%d grid: %d lines, %d boxes", rows, cols, len(lines), len(boxes))
    return GameState(lines=tuple(lines), boxes=tuple(boxes), grid_size=GridSize(rows=rows, cols=cols))


def is_valid_move(state: GameState, line_id: str) -> bool:
    """A move is valid if the line exists and hasn't been drawn yet.

    Whether the game is already over is left to the caller.
    """

    line = state.line(line_id)
    return line is not None and not line.is_drawn


def apply_move(state: GameState, line_id: str, player: Player | str) -> MoveResult:
    """Draw `line_id` for `player` and claim any boxes it closes.

    Returns a fresh state plus the ids of newly formed boxes, in box order.
    The turn stays with `player` when a box formed and passes to the opponent
    otherwise. Unknown or already drawn lines are a no-op: the original state
    comes back unchanged with no boxes, whatever `player` is. A real move by
    something other than a `Player` value raises `ValueError`.
    """

    idx = next((i for i, line in enumerate(state.lines) if line.id == line_id), None)
    if idx is None or state.lines[idx].is_drawn:
        logger.debug("ignoring move %s by %s: unknown or already drawn", line_id, player)
        return MoveResult(state=state)

    player = Player(player)

    lines = list(state.lines)
    lines[idx] = lines[idx].model_copy(update={"is_drawn": True, "owner": player})
    drawn = {line.id for line in lines if line.is_drawn}

    boxes = list(state.boxes)
    formed: list[str] = []
    for i, box in enumerate(boxes):
        if box.owner is not None:
            continue
        if all(lid in drawn for lid in box_line_ids(box)):
            boxes[i] = box.model_copy(update={"owner": player})
            formed.append(box.id)

    scores = dict(state.scores)
    scores[player] = scores.get(player, 0) + len(formed)

    new_state = state.model_copy(
        update={
            "lines": tuple(lines),
            "boxes": tuple(boxes),
            "scores": scores,
            # Snapshots never share a mutable dict.
            "player_chars": dict(state.player_chars),
            "player_turn": player if formed else other_player(player),
        }
    )

    if formed:
        logger.debug("%s drew %s and completed %s", player.value, line_id, ",".join(formed))
    else:
        logger.debug("%s drew %s", player.value, line_id)

    return MoveResult(state=new_state, boxes_formed=tuple(formed))


def is_terminal(state: GameState) -> bool:
    return all(line.is_drawn for line in state.lines)


def winner(state: GameState) -> Player | None:
    """Higher score wins once every line is drawn. Ties and unfinished games give None."""

    if not is_terminal(state):
        return None

    p1 = state.scores.get(Player.player1, 0)
    p2 = state.scores.get(Player.player2, 0)
    if p1 > p2:
        return Player.player1
    if p2 > p1:
        return Player.player2
    return None


def available_moves(state: GameState) -> list[str]:
    return [line.id for line in state.lines if not line.is_drawn]


def drawn_line_count(state: GameState) -> int:
    return sum(1 for line in state.lines if line.is_drawn)
