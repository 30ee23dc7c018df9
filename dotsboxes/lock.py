from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field

from dotsboxes.config import get_lock_timeout
from dotsboxes.errors import GameBusy

_registry_guard = threading.Lock()


@dataclass(slots=True)
class _Entry:
    lock: threading.Lock = field(default_factory=threading.Lock)

    # Threads holding or waiting on `lock`. The entry is dropped at zero.
    users: int = 0


_locks: dict[str, _Entry] = {}


def _checkout(game_id: str) -> _Entry:
    with _registry_guard:
        entry = _locks.get(game_id)
        if entry is None:
            entry = _locks[game_id] = _Entry()
        entry.users += 1
        return entry


def _checkin(game_id: str, entry: _Entry) -> None:
    with _registry_guard:
        entry.users -= 1
        if entry.users == 0 and _locks.get(game_id) is entry:
            del _locks[game_id]


@contextmanager
def game_lock(*, game_id: str, timeout: float | None = None):
    """Per-game lock so concurrent callers never interleave moves on one game.

    Locks are process-local and keyed by game id. An entry only lives while
    some thread holds or waits on it, so the registry never outgrows the
    games currently being played.
    """

    wait = get_lock_timeout() if timeout is None else timeout
    entry = _checkout(game_id)
    try:
        if not entry.lock.acquire(timeout=wait):
            raise GameBusy("Game is busy")
        try:
            yield
        finally:
            entry.lock.release()
    finally:
        _checkin(game_id, entry)


def active_game_ids() -> list[str]:
    with _registry_guard:
        return sorted(_locks)
