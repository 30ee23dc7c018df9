from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import uuid4

from dotsboxes.config import get_default_grid_size
from dotsboxes.core.events import EventType, GameEvent
from dotsboxes.core.game_state_text import game_state_to_text
from dotsboxes.errors import IllegalMove
from dotsboxes.fsm import GameFSM, GamePhase, phase_for
from dotsboxes.lock import game_lock
from dotsboxes.models import GameState, Player
from dotsboxes.rules import apply_move, initialize, winner
from dotsboxes.turn_processing.validators import ValidationContext, pipeline_for_action

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ActionResult:
    state: GameState
    boxes_formed: tuple[str, ...]
    events: tuple[GameEvent, ...]


class GameSession:
    """Single owner of one game's current state.

    Every move goes through the same path:
    - acquire the per-game lock
    - validate (game over, whose turn, line drawable)
    - apply the move, which also settles whose turn is next
    - advance the phase machine and record events
    """

    def __init__(self, *, rows: int | None = None, cols: int | None = None, game_id: str | None = None):
        default_rows, default_cols = get_default_grid_size()
        self.game_id = game_id or str(uuid4())
        self._state = initialize(default_rows if rows is None else rows, default_cols if cols is None else cols)
        self._fsm = GameFSM(self._state)
        self._history: list[GameEvent] = []
        self._closed = False

    def __enter__(self) -> GameSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._fsm.phase

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.terminal

    @property
    def winner(self) -> Player | None:
        return winner(self._state)

    @property
    def history(self) -> tuple[GameEvent, ...]:
        return tuple(self._history)

    def _event(self, events: list[GameEvent], type_: EventType, payload: dict[str, str]) -> None:
        seq = len(self._history) + len(events) + 1
        events.append(GameEvent.now(type=type_, seq=seq, payload=payload))

    def play(self, *, player: Player | str, line_id: str) -> ActionResult:
        player = Player(player)
        ctx = ValidationContext(game_id=self.game_id, player=player, action="draw", line_id=line_id)

        with game_lock(game_id=self.game_id):
            self._require_open()
            state = self._state
            try:
                pipeline_for_action(ctx.action).validate(ctx=ctx, state=state)
            except IllegalMove as e:
                logger.info("game %s: refused %s by %s: %s", self.game_id, line_id, player.value, e)
                raise

            result = apply_move(state, line_id, player)
            new_state = result.state
            phase = self._fsm.advance(new_state)

            events: list[GameEvent] = []
            self._event(events, "LINE_DRAWN", {"line_id": line_id, "player": player.value})
            if result.boxes_formed:
                self._event(
                    events,
                    "BOXES_COMPLETED",
                    {
                        "player": player.value,
                        "box_ids": ",".join(result.boxes_formed),
                        "score": str(new_state.scores[player]),
                    },
                )
            else:
                self._event(events, "TURN_PASSED", {"from": player.value, "to": new_state.player_turn.value})

            if phase == GamePhase.terminal:
                won = winner(new_state)
                self._event(
                    events,
                    "GAME_ENDED",
                    {
                        "winner": won.value if won is not None else "",
                        "scores": ",".join(f"{p.value}={s}" for p, s in sorted(new_state.scores.items())),
                    },
                )
                logger.debug("game %s ended, winner=%s", self.game_id, won.value if won is not None else "draw")

            self._state = new_state
            self._history.extend(events)

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("game %s after %s:\n%s", self.game_id, line_id, game_state_to_text(new_state))
            return ActionResult(state=new_state, boxes_formed=result.boxes_formed, events=tuple(events))

    def restart(self) -> GameState:
        """Throw the current game away and start again on the same grid."""

        with game_lock(game_id=self.game_id):
            self._require_open()
            size = self._state.grid_size
            pipeline_for_action("restart").validate(
                ctx=ValidationContext(game_id=self.game_id, player=self._state.player_turn, action="restart"),
                state=self._state,
            )

            self._state = initialize(size.rows, size.cols)
            self._fsm.restart()
            if phase_for(self._state) == GamePhase.terminal:
                # Grids without lines are over before they start.
                self._fsm.finish()
            self._fsm.game = self._state

            events: list[GameEvent] = []
            self._event(events, "GAME_RESTARTED", {"rows": str(size.rows), "cols": str(size.cols)})
            self._history.extend(events)

            logger.debug("game %s restarted (%dx%d)", self.game_id, size.rows, size.cols)
            return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Stop accepting moves. The final state and history stay readable."""

        with game_lock(game_id=self.game_id):
            self._closed = True
        logger.debug("game %s closed", self.game_id)

    def _require_open(self) -> None:
        if self._closed:
            raise IllegalMove("Game session is closed")
