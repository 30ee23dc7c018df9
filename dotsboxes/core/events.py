from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

EventType = Literal[
    "LINE_DRAWN",
    "BOXES_COMPLETED",
    "TURN_PASSED",
    "GAME_ENDED",
    "GAME_RESTARTED",
]


@dataclass(frozen=True, slots=True)
class GameEvent:
    type: EventType
    seq: int
    payload: dict[str, str]
    ts: datetime

    @staticmethod
    def now(*, type: EventType, seq: int, payload: dict[str, str]) -> "GameEvent":
        return GameEvent(type=type, seq=seq, payload=payload, ts=datetime.now(timezone.utc))
