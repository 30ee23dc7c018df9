from __future__ import annotations

from enum import StrEnum

from statemachine import State, StateMachine

from dotsboxes.models import GameState
from dotsboxes.rules import is_terminal


class GamePhase(StrEnum):
    in_progress = "in_progress"
    terminal = "terminal"


def phase_for(state: GameState) -> GamePhase:
    return GamePhase.terminal if is_terminal(state) else GamePhase.in_progress


class GameFSM(StateMachine):
    """Whole-game phases.

    - in_progress loops on every drawn line until the last one is drawn
    - terminal only leaves through an explicit restart
    - the rules functions never consult this; the session drives it
    """

    in_progress = State(GamePhase.in_progress.value, value=GamePhase.in_progress.value, initial=True)
    terminal = State(GamePhase.terminal.value, value=GamePhase.terminal.value)

    draw_line = in_progress.to.itself()
    finish = in_progress.to(terminal)
    restart = terminal.to(in_progress) | in_progress.to.itself()

    def __init__(self, game: GameState):
        self.game = game
        super().__init__(start_value=phase_for(game).value)

    @property
    def phase(self) -> GamePhase:
        return GamePhase(str(self.current_state.value))

    def advance(self, game: GameState) -> GamePhase:
        """Follow a move: `finish` if `game` is over, `draw_line` otherwise."""

        if phase_for(game) == GamePhase.terminal:
            self.finish()
        else:
            self.draw_line()
        self.game = game
        return self.phase
