from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from dotsboxes.errors import IllegalMove
from dotsboxes.models import GameState, Player
from dotsboxes.rules import is_terminal, is_valid_move


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Inputs available to validators.

    Keep this tight and string-friendly so we can safely log it.
    """

    game_id: str
    player: Player
    action: str
    line_id: str | None = None


class TurnValidator(ABC):
    """A small, composable validation unit for an incoming action."""

    @abstractmethod
    def validate(self, *, ctx: ValidationContext, state: GameState) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class CompletedGameValidator(TurnValidator):
    """Deny almost all actions after every line has been drawn."""

    allow_actions: frozenset[str] = frozenset()

    def validate(self, *, ctx: ValidationContext, state: GameState) -> None:
        if ctx.action not in self.allow_actions and is_terminal(state):
            raise IllegalMove("Game is over")


@dataclass(frozen=True, slots=True)
class PlayerTurnValidator(TurnValidator):
    """Only the player holding the turn may draw."""

    def validate(self, *, ctx: ValidationContext, state: GameState) -> None:
        if ctx.player != state.player_turn:
            raise IllegalMove(f"Not your turn (expected player={state.player_turn.value})")


@dataclass(frozen=True, slots=True)
class DrawableLineValidator(TurnValidator):
    """The requested line must exist and still be undrawn."""

    def validate(self, *, ctx: ValidationContext, state: GameState) -> None:
        if ctx.line_id is None:
            raise IllegalMove(f"Action '{ctx.action}' requires a line id")

        if state.line(ctx.line_id) is None:
            raise IllegalMove(f"Unknown line: {ctx.line_id}")

        if not is_valid_move(state, ctx.line_id):
            raise IllegalMove(f"Line already drawn: {ctx.line_id}")


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[TurnValidator, ...]

    def validate(self, *, ctx: ValidationContext, state: GameState) -> None:
        for v in self.validators:
            v.validate(ctx=ctx, state=state)


DEFAULT_ACTION_PIPELINES: dict[str, ValidatorPipeline] = {
    "draw": ValidatorPipeline(
        validators=(
            CompletedGameValidator(),
            PlayerTurnValidator(),
            DrawableLineValidator(),
        )
    ),
    # Restarting is always allowed, including from a finished game.
    "restart": ValidatorPipeline(validators=()),
}


def pipeline_for_action(action: str) -> ValidatorPipeline:
    pipe = DEFAULT_ACTION_PIPELINES.get(action)
    if pipe is None:
        raise ValueError(f"Unknown action: {action}")
    return pipe
