from __future__ import annotations

import math
import os
import threading

DEFAULT_ROWS = 6
DEFAULT_COLS = 6
DEFAULT_LOCK_TIMEOUT_S = 5.0


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from e


def get_default_grid_size() -> tuple[int, int]:
    """Grid size in dots, as (rows, cols).

    A 6x6 grid of dots gives 5x5 boxes.
    """

    return _int_from_env("DOTS_BOXES_ROWS", DEFAULT_ROWS), _int_from_env("DOTS_BOXES_COLS", DEFAULT_COLS)


def get_lock_timeout() -> float:
    raw = os.environ.get("DOTS_BOXES_LOCK_TIMEOUT")
    if raw is None or not raw.strip():
        return DEFAULT_LOCK_TIMEOUT_S
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"DOTS_BOXES_LOCK_TIMEOUT must be a number of seconds (got {raw!r})") from e

    # Lock.acquire only takes finite, non-negative timeouts up to TIMEOUT_MAX.
    if not math.isfinite(value) or value < 0 or value > threading.TIMEOUT_MAX:
        raise ValueError(f"DOTS_BOXES_LOCK_TIMEOUT must be a finite, non-negative number of seconds (got {raw!r})")
    return value
