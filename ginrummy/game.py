"""Pure reducer applying actions and events to a :class:`GameState`."""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import get_args

from . import actions, lifecycle, melds, rules, scoring
from .rules import DEFAULT_CONFIG, GinConfig
from .state import GameState, GameStatus, Player, TurnPhase

__all__ = ["reduce"]

logger = logging.getLogger(__name__)

_ACTION_TYPES = get_args(actions.Action)


def _ignored(game: GameState, action: actions.Action, reason: str) -> GameState:
    logger.debug("Ignoring %s: %s", type(action).__name__, reason)
    return game


def _resolve_exhausted_stock(game: GameState, actor: Player, config: GinConfig) -> GameState:
    """End the round because ``actor`` cannot draw from an empty stock."""

    round_state = game.round_state
    knocker = Player.PLAYER if config.exhausted_deck is rules.ExhaustedDeckPolicy.KNOCK else actor
    knocker_deadwood = melds.deadwood_total(round_state.hand(knocker))
    defender_deadwood = melds.deadwood_total(round_state.hand(knocker.other))
    logger.info("Stock exhausted on %s's draw, resolving as %s", actor.value, config.exhausted_deck.value)
    if config.exhausted_deck is rules.ExhaustedDeckPolicy.DRAW:
        result = scoring.drawn_round(knocker, knocker_deadwood, defender_deadwood)
    else:
        result = scoring.score_knock(knocker, knocker_deadwood, defender_deadwood, config)
    return scoring.apply_result(game, result, config)


def _knock(game: GameState, actor: Player, config: GinConfig) -> GameState:
    round_state = game.round_state
    if not rules.can_knock(round_state, actor, config):
        raise rules.IllegalKnock("knock requires a completed discard and low enough deadwood")
    result = scoring.score_knock(
        actor,
        melds.deadwood_total(round_state.hand(actor)),
        melds.deadwood_total(round_state.hand(actor.other)),
        config,
    )
    return scoring.apply_result(game, result, config)


def _complete_opponent_turn(
    game: GameState,
    event: actions.OpponentTurnCompleted,
    config: GinConfig,
) -> GameState:
    round_state = game.round_state
    if round_state.turn_owner is not Player.OPPONENT or round_state.turn_phase is not TurnPhase.DRAW:
        raise rules.IllegalAction("not the opponent's turn")
    if len(event.opponent_hand) != config.hand_size:
        raise rules.InvariantViolation(
            f"opponent finished the turn with {len(event.opponent_hand)} cards"
        )

    updated = replace(
        round_state,
        deck=tuple(event.deck),
        discard_pile=tuple(event.discard_pile),
        opponent_hand=tuple(event.opponent_hand),
    )
    rules.check_partition(updated)

    if melds.check_for_gin(updated.opponent_hand):
        result = scoring.score_gin(Player.OPPONENT, melds.deadwood_total(updated.player_hand), config)
        return scoring.apply_result(game.with_round(updated), result, config)

    return game.with_round(replace(updated, turn_owner=Player.PLAYER, turn_phase=TurnPhase.DRAW))


def _play(game: GameState, action: actions.Action, config: GinConfig) -> GameState:
    """Apply an in-round action, raising ``IllegalAction`` when it does not fit."""

    round_state = game.round_state
    if isinstance(action, actions.DrawFromDeck):
        try:
            return game.with_round(rules.draw_from_deck(round_state, action.actor))
        except rules.DeckExhausted:
            return _resolve_exhausted_stock(game, action.actor, config)
    if isinstance(action, actions.DrawFromDiscard):
        return game.with_round(rules.draw_from_discard(round_state, action.actor))
    if isinstance(action, actions.DiscardCard):
        if len(round_state.hand(action.actor)) == config.hand_size:
            raise rules.IllegalDiscard("already discarded this turn")
        return game.with_round(rules.discard_card(round_state, action.actor, action.card, config))
    if isinstance(action, actions.EndTurn):
        return game.with_round(rules.end_turn(round_state))
    if isinstance(action, actions.Knock):
        return _knock(game, action.actor, config)
    if isinstance(action, actions.OpponentTurnCompleted):
        return _complete_opponent_turn(game, action, config)
    if isinstance(action, actions.StockExhausted):
        if round_state.turn_owner is not action.actor or round_state.turn_phase is not TurnPhase.DRAW:
            raise rules.IllegalDraw("not this player's draw")
        if round_state.deck:
            raise rules.IllegalDraw("stock still has cards")
        return _resolve_exhausted_stock(game, action.actor, config)
    raise TypeError(f"unsupported action {action!r}")


def reduce(
    game: GameState,
    action: actions.Action,
    *,
    rng: random.Random | None = None,
    config: GinConfig = DEFAULT_CONFIG,
) -> GameState:
    """Return the state that follows ``action``.

    Illegal requests leave the game untouched and return ``game`` itself.
    Invariant violations propagate to the caller.
    """

    if isinstance(action, (actions.StartGame, actions.RestartGame)):
        return lifecycle.new_game(rng, config)
    if isinstance(action, actions.NextRound):
        if game.status is not GameStatus.ROUND_OVER:
            return _ignored(game, action, f"status is {game.status.value}")
        return lifecycle.next_round(game, rng, config)
    if not isinstance(action, _ACTION_TYPES):
        raise TypeError(f"unsupported action {action!r}")
    if game.status is not GameStatus.PLAYING:
        return _ignored(game, action, f"status is {game.status.value}")

    try:
        return _play(game, action, config)
    except rules.IllegalAction as exc:
        return _ignored(game, action, str(exc))
