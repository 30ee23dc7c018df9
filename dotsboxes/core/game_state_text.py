from __future__ import annotations

from dotsboxes.ids import box_id, line_id
from dotsboxes.models import GameState, Orientation, Player


def _drawn_ids(state: GameState) -> set[str]:
    return {line.id for line in state.lines if line.is_drawn}


def _owner_chars(state: GameState) -> dict[str, str]:
    return {box.id: state.player_chars.get(box.owner, "?") for box in state.boxes if box.owner is not None}


def board_to_text(state: GameState) -> str:
    """ASCII picture of the grid: `+` dots, `---` and `|` for drawn lines, owner chars in boxes."""

    rows, cols = state.grid_size.rows, state.grid_size.cols
    drawn = _drawn_ids(state)
    owners = _owner_chars(state)

    out: list[str] = []
    for r in range(rows):
        dots = ["+"]
        for c in range(cols - 1):
            dots.append("---" if line_id(Orientation.horizontal, r, c) in drawn else "   ")
            dots.append("+")
        out.append("".join(dots))

        if r == rows - 1:
            break

        cells: list[str] = []
        for c in range(cols):
            cells.append("|" if line_id(Orientation.vertical, r, c) in drawn else " ")
            if c < cols - 1:
                owner = owners.get(box_id(r, c))
                cells.append(f" {owner} " if owner else "   ")
        out.append("".join(cells).rstrip())

    return "\n".join(out)


def game_state_to_text(state: GameState) -> str:
    """Deterministic board + score summary, suitable for logs and test diffs."""

    chars = state.player_chars
    scores = " ".join(
        f"{chars.get(p, p.value)}={state.scores.get(p, 0)}" for p in (Player.player1, Player.player2)
    )
    turn = state.player_turn
    return f"{board_to_text(state)}\nScore: {scores}. Turn: {turn.value} ({chars.get(turn, '?')})."
