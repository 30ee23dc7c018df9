from __future__ import annotations

from collections.abc import Callable, Generator, Iterable

import pytest

from dotsboxes.models import GameState, Player
from dotsboxes.rules import apply_move
from dotsboxes.session import GameSession


@pytest.fixture(autouse=True)
def _clear_dots_boxes_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests hermetic: ignore whatever the developer's shell exports."""

    for name in ("DOTS_BOXES_ROWS", "DOTS_BOXES_COLS", "DOTS_BOXES_LOCK_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def session_2x2() -> Generator[GameSession, None, None]:
    s = GameSession(rows=2, cols=2)
    yield s
    s.close()


MoveLog = list[tuple[Player, tuple[str, ...]]]


def _play_in_turn(state: GameState, line_ids: Iterable[str]) -> tuple[GameState, MoveLog]:
    """Apply moves with whoever holds the turn, returning the final state and (mover, boxes) per move."""

    log: MoveLog = []
    for lid in line_ids:
        mover = state.player_turn
        state, formed = apply_move(state, lid, mover)
        log.append((mover, formed))
    return state, log


@pytest.fixture()
def play_in_turn() -> Callable[[GameState, Iterable[str]], tuple[GameState, MoveLog]]:
    return _play_in_turn
