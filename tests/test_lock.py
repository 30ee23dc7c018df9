from __future__ import annotations

import threading

import pytest

from dotsboxes.errors import GameBusy
from dotsboxes.lock import active_game_ids, game_lock


def test_lock_is_released_after_use() -> None:
    with game_lock(game_id="lock-a", timeout=0.1):
        assert "lock-a" in active_game_ids()
    with game_lock(game_id="lock-a", timeout=0.1):
        pass

    assert "lock-a" not in active_game_ids()


def test_busy_game_raises() -> None:
    with game_lock(game_id="lock-b", timeout=0.1):
        with pytest.raises(GameBusy) as e:
            with game_lock(game_id="lock-b", timeout=0.01):
                pass  # pragma: no cover
        assert str(e.value) == "Game is busy"

        # Other games are unaffected.
        with game_lock(game_id="lock-c", timeout=0.01):
            pass

        # A failed attempt must not drop the entry the holder still uses.
        assert "lock-b" in active_game_ids()

    assert "lock-b" not in active_game_ids()
    assert "lock-c" not in active_game_ids()


def test_lock_released_when_body_raises() -> None:
    with pytest.raises(RuntimeError):
        with game_lock(game_id="lock-d", timeout=0.1):
            raise RuntimeError("boom")

    with game_lock(game_id="lock-d", timeout=0.01):
        pass
    assert "lock-d" not in active_game_ids()


def test_second_thread_waits_while_first_holds() -> None:
    holding = threading.Event()
    release = threading.Event()

    def holder() -> None:
        with game_lock(game_id="lock-e", timeout=1.0):
            holding.set()
            release.wait(timeout=5)

    t = threading.Thread(target=holder)
    t.start()
    try:
        assert holding.wait(timeout=5)
        with pytest.raises(GameBusy):
            with game_lock(game_id="lock-e", timeout=0.05):
                pass  # pragma: no cover
    finally:
        release.set()
        t.join(timeout=5)

    assert not t.is_alive()
    assert "lock-e" not in active_game_ids()

    # Once released the game is free again.
    with game_lock(game_id="lock-e", timeout=0.05):
        pass
