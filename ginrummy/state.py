"""Core game state data structures for Gin Rummy."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Final, Literal, Union

from .cards import Card

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .scoring import RoundResult


class Player(str, Enum):
    """The two seats at the table."""

    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> "Player":
        return Player.OPPONENT if self is Player.PLAYER else Player.PLAYER


class TurnPhase(str, Enum):
    """Phases within a single player's turn."""

    DRAW = "draw"
    DISCARD = "discard"


class GameStatus(str, Enum):
    PLAYING = "playing"
    ROUND_OVER = "round_over"
    FINISHED = "finished"


DRAW_RESULT: Final = "draw"

RoundWinner = Union[Player, Literal["draw"], None]


@dataclass(frozen=True, slots=True)
class RoundState:
    """Cards and turn bookkeeping for the round in progress.

    ``deck`` and ``discard_pile`` are stacks whose top is the last element.
    """

    deck: tuple[Card, ...]
    player_hand: tuple[Card, ...]
    opponent_hand: tuple[Card, ...]
    discard_pile: tuple[Card, ...]
    turn_owner: Player = Player.PLAYER
    turn_phase: TurnPhase = TurnPhase.DRAW

    def hand(self, player: Player) -> tuple[Card, ...]:
        return self.player_hand if player is Player.PLAYER else self.opponent_hand

    def with_hand(self, player: Player, hand: tuple[Card, ...]) -> "RoundState":
        if player is Player.PLAYER:
            return replace(self, player_hand=hand)
        return replace(self, opponent_hand=hand)

    @property
    def top_discard(self) -> Card | None:
        return self.discard_pile[-1] if self.discard_pile else None

    def all_cards(self) -> list[Card]:
        return [*self.deck, *self.player_hand, *self.opponent_hand, *self.discard_pile]


@dataclass(frozen=True, slots=True)
class GameState:
    """A round plus everything that survives across rounds."""

    round_state: RoundState
    player_score: int = 0
    opponent_score: int = 0
    status: GameStatus = GameStatus.PLAYING
    round_winner: RoundWinner = None
    game_winner: Player | None = None
    round_number: int = 1
    last_result: "RoundResult | None" = None

    def score(self, player: Player) -> int:
        return self.player_score if player is Player.PLAYER else self.opponent_score

    def with_round(self, round_state: RoundState) -> "GameState":
        return replace(self, round_state=round_state)
