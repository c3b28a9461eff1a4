"""Rule constants, configuration and turn transitions for Gin Rummy."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, replace
from enum import Enum
from typing import Final

from . import melds
from .cards import Card
from .deck import DECK_SIZE, build_deck
from .state import Player, RoundState, TurnPhase

__all__ = [
    "ExhaustedDeckPolicy",
    "GinConfig",
    "DEFAULT_CONFIG",
    "IllegalAction",
    "IllegalDraw",
    "DeckExhausted",
    "IllegalDiscard",
    "IllegalKnock",
    "InvariantViolation",
    "draw_from_deck",
    "draw_from_discard",
    "discard_card",
    "end_turn",
    "can_knock",
    "check_partition",
]


class ExhaustedDeckPolicy(str, Enum):
    """How a round ends when the turn owner cannot draw from the stock.

    ``KNOCK`` scores the round as a knock by ``Player.PLAYER`` whoever found
    the stock empty. ``ACTOR_KNOCKS`` makes the seat that could not draw the
    knocker. ``DRAW`` scores nothing.
    """

    KNOCK = "knock"
    ACTOR_KNOCKS = "actor-knocks"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class GinConfig:
    """Tunable rule values for a game."""

    hand_size: int = 10
    knock_limit: int = 10
    gin_bonus: int = 25
    undercut_bonus: int = 25
    target_score: int = 100
    exhausted_deck: ExhaustedDeckPolicy = ExhaustedDeckPolicy.KNOCK


DEFAULT_CONFIG: Final[GinConfig] = GinConfig()


class IllegalAction(RuntimeError):
    """Raised when a transition is requested outside its legal state."""


class IllegalDraw(IllegalAction):
    """Raised when a player attempts to draw illegally."""


class DeckExhausted(IllegalDraw):
    """Raised when the stock is empty at draw time."""


class IllegalDiscard(IllegalAction):
    """Raised when a player attempts to discard illegally."""


class IllegalKnock(IllegalAction):
    """Raised when a knock is requested without meeting the requirements."""


class InvariantViolation(AssertionError):
    """Raised when card bookkeeping is inconsistent; indicates a caller bug."""


def _require_draw_turn(state: RoundState, actor: Player) -> None:
    if state.turn_owner is not actor:
        raise IllegalDraw("not this player's turn")
    if state.turn_phase is not TurnPhase.DRAW:
        raise IllegalDraw("player must be awaiting a draw")


def draw_from_deck(state: RoundState, actor: Player) -> RoundState:
    """Move the top stock card into ``actor``'s hand."""

    _require_draw_turn(state, actor)
    if not state.deck:
        raise DeckExhausted("draw pile is empty")

    card = state.deck[-1]
    updated = state.with_hand(actor, state.hand(actor) + (card,))
    return replace(updated, deck=state.deck[:-1], turn_phase=TurnPhase.DISCARD)


def draw_from_discard(state: RoundState, actor: Player) -> RoundState:
    """Move the top discard card into ``actor``'s hand."""

    _require_draw_turn(state, actor)
    if not state.discard_pile:
        raise IllegalDraw("discard pile is empty")

    card = state.discard_pile[-1]
    updated = state.with_hand(actor, state.hand(actor) + (card,))
    return replace(updated, discard_pile=state.discard_pile[:-1], turn_phase=TurnPhase.DISCARD)


def discard_card(
    state: RoundState,
    actor: Player,
    card: Card,
    config: GinConfig = DEFAULT_CONFIG,
) -> RoundState:
    """Put ``card`` from ``actor``'s hand on top of the discard pile.

    The phase stays ``DISCARD`` until :func:`end_turn` is called so the caller
    still has the chance to knock.
    """

    if state.turn_owner is not actor:
        raise IllegalDiscard("not this player's turn to discard")
    if state.turn_phase is not TurnPhase.DISCARD:
        raise IllegalDiscard("player must draw before discarding")

    hand = state.hand(actor)
    if card not in hand:
        raise InvariantViolation(f"card {card.code} not present in hand")
    remaining = tuple(c for c in hand if c != card)
    if len(remaining) != config.hand_size:
        raise InvariantViolation(
            f"hand holds {len(remaining)} cards after discard, expected {config.hand_size}"
        )

    updated = state.with_hand(actor, remaining)
    return replace(updated, discard_pile=state.discard_pile + (card,))


def end_turn(state: RoundState) -> RoundState:
    return replace(state, turn_owner=state.turn_owner.other, turn_phase=TurnPhase.DRAW)


def can_knock(state: RoundState, actor: Player, config: GinConfig = DEFAULT_CONFIG) -> bool:
    """Return ``True`` when ``actor`` has just discarded and may end the round."""

    if state.turn_owner is not actor or state.turn_phase is not TurnPhase.DISCARD:
        return False
    hand = state.hand(actor)
    if len(hand) != config.hand_size:
        return False
    return melds.deadwood_total(hand) <= config.knock_limit


def check_partition(state: RoundState) -> None:
    """Ensure the piles and hands split the 52-card universe exactly."""

    counts = Counter(state.all_cards())
    duplicates = sorted(card.code for card, count in counts.items() if count > 1)
    if duplicates:
        raise InvariantViolation(f"duplicate cards in play: {', '.join(duplicates)}")
    if len(counts) != DECK_SIZE or set(counts) != set(build_deck()):
        raise InvariantViolation(f"expected {DECK_SIZE} distinct cards, found {len(counts)}")
