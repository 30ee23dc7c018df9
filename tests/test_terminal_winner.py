from __future__ import annotations

from dotsboxes.models import Player
from dotsboxes.rules import available_moves, drawn_line_count, initialize, is_terminal, winner


def test_two_by_two_end_to_end(play_in_turn) -> None:
    state = initialize(2, 2)
    top, bottom, left, right = "horizontal-0-0", "horizontal-1-0", "vertical-0-0", "vertical-0-1"

    state, log = play_in_turn(state, [top, bottom, left, right])

    assert log == [
        (Player.player1, ()),
        (Player.player2, ()),
        (Player.player1, ()),
        (Player.player2, ("b-0-0",)),
    ]
    assert state.box("b-0-0").owner == Player.player2  # type: ignore[union-attr]
    assert state.scores == {Player.player1: 0, Player.player2: 1}
    assert is_terminal(state)
    assert winner(state) == Player.player2


def test_winner_is_none_while_in_progress(play_in_turn) -> None:
    state = initialize(2, 2)
    state, _ = play_in_turn(state, ["horizontal-0-0", "horizontal-1-0", "vertical-0-0"])

    assert not is_terminal(state)
    assert winner(state) is None


def test_tied_game_has_no_winner(play_in_turn) -> None:
    # 3 rows x 2 cols of dots: b-0-0 above b-1-0, sharing horizontal-1-0.
    state = initialize(3, 2)
    state, log = play_in_turn(
        state,
        [
            "horizontal-1-0",
            "horizontal-0-0",
            "horizontal-2-0",
            "vertical-0-0",
            "vertical-0-1",  # player1 closes b-0-0 and moves again
            "vertical-1-0",
            "vertical-1-1",  # player2 closes b-1-0
        ],
    )

    assert log[4] == (Player.player1, ("b-0-0",))
    assert log[5][0] == Player.player1
    assert log[6] == (Player.player2, ("b-1-0",))
    assert is_terminal(state)
    assert state.scores == {Player.player1: 1, Player.player2: 1}
    assert winner(state) is None


def test_terminal_tracks_drawn_line_count(play_in_turn) -> None:
    state = initialize(3, 3)
    total = len(state.lines)

    for lid in list(available_moves(state)):
        assert is_terminal(state) is (drawn_line_count(state) == total)
        state, _ = play_in_turn(state, [lid])

    assert drawn_line_count(state) == total
    assert is_terminal(state)
    assert available_moves(state) == []
