"""Turn-decision provider boundary and synchronous turn drivers.

The reducer never consults a provider itself. These helpers ask a provider
for a decision, fall back deterministically when it fails, and turn the
outcome into actions or events that are fed back through
:func:`ginrummy.game.reduce`.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol, Sequence

from . import actions, melds, rules
from .cards import Card
from .game import reduce
from .rules import DEFAULT_CONFIG, GinConfig
from .state import GameState, GameStatus, Player, TurnPhase

__all__ = [
    "TurnDecision",
    "NO_DECISION",
    "DecisionProvider",
    "HeuristicProvider",
    "resolve_discard",
    "play_opponent_turn",
    "play_player_turn",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnDecision:
    take_discard: bool = False
    card_to_discard: Card | None = None


NO_DECISION = TurnDecision()


class DecisionProvider(Protocol):
    """Chooses draws and discards for a seat.

    ``decide`` is asked twice per turn: before drawing with the current hand
    and the top discard, and before discarding with the grown hand and
    ``top_discard=None``. Returning ``None`` means no decision.
    """

    def decide(self, hand: Sequence[Card], top_discard: Card | None) -> TurnDecision | None:
        ...


def _best_discard(hand: Sequence[Card]) -> tuple[Card, int]:
    """Return the discard leaving the lowest deadwood and that deadwood."""

    remaining_deadwood = [
        melds.deadwood_total(hand[:idx] + hand[idx + 1 :]) for idx in range(len(hand))
    ]
    best = min(
        range(len(hand)),
        key=lambda idx: (remaining_deadwood[idx], -hand[idx].value, -idx),
    )
    return hand[best], remaining_deadwood[best]


@dataclass(slots=True)
class HeuristicProvider:
    """Deadwood-minimising provider used for the simulated opponent."""

    hand_size: int = DEFAULT_CONFIG.hand_size

    def decide(self, hand: Sequence[Card], top_discard: Card | None) -> TurnDecision | None:
        hand = tuple(hand)
        if len(hand) > self.hand_size:
            card, _ = _best_discard(hand)
            return TurnDecision(take_discard=False, card_to_discard=card)
        if top_discard is None:
            return NO_DECISION

        card, deadwood_after = _best_discard(hand + (top_discard,))
        take = card != top_discard and deadwood_after < melds.deadwood_total(hand)
        return TurnDecision(take_discard=take)


def resolve_discard(hand: Sequence[Card], decision: TurnDecision | None) -> Card:
    """Return the provider's card when it is in ``hand``, else the last card."""

    if not hand:
        raise rules.InvariantViolation("cannot discard from an empty hand")
    if decision is not None and decision.card_to_discard in hand:
        return decision.card_to_discard
    if decision is not None and decision.card_to_discard is not None:
        logger.warning("Provider chose %s which is not in hand, using fallback", decision.card_to_discard)
    return hand[-1]


def _consult(provider: DecisionProvider, hand: Sequence[Card], top_discard: Card | None) -> TurnDecision:
    """Ask ``provider`` for a decision; errors and ``None`` become ``NO_DECISION``."""

    try:
        decision = provider.decide(tuple(hand), top_discard)
    except Exception as exc:
        logger.warning("Decision provider failed: %s", exc)
        return NO_DECISION
    return decision if decision is not None else NO_DECISION


def play_opponent_turn(
    game: GameState,
    provider: DecisionProvider,
) -> actions.OpponentTurnCompleted | actions.StockExhausted:
    """Compute the opponent's whole turn and return the event describing it."""

    round_state = game.round_state
    if (
        game.status is not GameStatus.PLAYING
        or round_state.turn_owner is not Player.OPPONENT
        or round_state.turn_phase is not TurnPhase.DRAW
    ):
        raise rules.IllegalAction("not the opponent's turn")

    deck = round_state.deck
    discard_pile = round_state.discard_pile
    hand = round_state.opponent_hand
    top = round_state.top_discard

    draw_decision = _consult(provider, hand, top)
    if draw_decision.take_discard and top is not None:
        discard_pile = discard_pile[:-1]
        hand = hand + (top,)
    elif deck:
        hand = hand + (deck[-1],)
        deck = deck[:-1]
    else:
        return actions.StockExhausted(actor=Player.OPPONENT)

    card = resolve_discard(hand, _consult(provider, hand, None))
    hand = tuple(c for c in hand if c != card)
    return actions.OpponentTurnCompleted(
        deck=deck,
        discard_pile=discard_pile + (card,),
        opponent_hand=hand,
    )


def play_player_turn(
    game: GameState,
    provider: DecisionProvider,
    *,
    rng: random.Random | None = None,
    config: GinConfig = DEFAULT_CONFIG,
) -> GameState:
    """Drive the player seat through one turn, knocking whenever allowed."""

    round_state = game.round_state
    draw_decision = _consult(provider, round_state.player_hand, round_state.top_discard)
    if draw_decision.take_discard and round_state.discard_pile:
        game = reduce(game, actions.DrawFromDiscard(), rng=rng, config=config)
    else:
        game = reduce(game, actions.DrawFromDeck(), rng=rng, config=config)
    if game.status is not GameStatus.PLAYING or game.round_state.turn_phase is not TurnPhase.DISCARD:
        return game

    hand = game.round_state.player_hand
    card = resolve_discard(hand, _consult(provider, hand, None))
    game = reduce(game, actions.DiscardCard(card), rng=rng, config=config)
    if rules.can_knock(game.round_state, Player.PLAYER, config):
        return reduce(game, actions.Knock(), rng=rng, config=config)
    return reduce(game, actions.EndTurn(), rng=rng, config=config)
