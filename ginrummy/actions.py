"""Actions and events accepted by the game reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .cards import Card
from .state import Player

__all__ = [
    "StartGame",
    "RestartGame",
    "DrawFromDeck",
    "DrawFromDiscard",
    "DiscardCard",
    "EndTurn",
    "Knock",
    "NextRound",
    "OpponentTurnCompleted",
    "StockExhausted",
    "Action",
]


@dataclass(frozen=True)
class StartGame:
    """Deal a new game from scratch."""


@dataclass(frozen=True)
class RestartGame:
    """Throw away the current game and deal a new one."""


@dataclass(frozen=True)
class DrawFromDeck:
    actor: Player = Player.PLAYER


@dataclass(frozen=True)
class DrawFromDiscard:
    actor: Player = Player.PLAYER


@dataclass(frozen=True)
class DiscardCard:
    card: Card
    actor: Player = Player.PLAYER


@dataclass(frozen=True)
class EndTurn:
    """Pass the turn to the other seat."""


@dataclass(frozen=True)
class Knock:
    actor: Player = Player.PLAYER


@dataclass(frozen=True)
class NextRound:
    """Deal the next round after a round has been scored."""


@dataclass(frozen=True)
class OpponentTurnCompleted:
    """Result of a whole opponent turn computed outside the reducer."""

    deck: tuple[Card, ...]
    discard_pile: tuple[Card, ...]
    opponent_hand: tuple[Card, ...]


@dataclass(frozen=True)
class StockExhausted:
    """The turn owner needed a stock card but the stock is empty."""

    actor: Player = Player.OPPONENT


Action = Union[
    StartGame,
    RestartGame,
    DrawFromDeck,
    DrawFromDiscard,
    DiscardCard,
    EndTurn,
    Knock,
    NextRound,
    OpponentTurnCompleted,
    StockExhausted,
]
