"""Game creation and round turnover."""

from __future__ import annotations

import logging
import random
from dataclasses import replace

from . import deck
from .rules import DEFAULT_CONFIG, GinConfig
from .state import GameState, GameStatus, Player, RoundState, TurnPhase

__all__ = ["deal_round", "new_game", "next_round"]

logger = logging.getLogger(__name__)


def deal_round(
    first: Player,
    rng: random.Random | None = None,
    config: GinConfig = DEFAULT_CONFIG,
) -> RoundState:
    """Shuffle a fresh deck and deal a round with ``first`` to act."""

    dealt = deck.deal(deck.shuffle(deck.build_deck(), rng), hand_size=config.hand_size)
    stock, discard_pile = deck.seed_discard(dealt.remaining_deck)
    return RoundState(
        deck=stock,
        player_hand=dealt.player_hand,
        opponent_hand=dealt.opponent_hand,
        discard_pile=discard_pile,
        turn_owner=first,
        turn_phase=TurnPhase.DRAW,
    )


def new_game(
    rng: random.Random | None = None,
    config: GinConfig = DEFAULT_CONFIG,
    first: Player = Player.PLAYER,
) -> GameState:
    """Return a freshly dealt game with both scores at zero."""

    return GameState(round_state=deal_round(first, rng, config))


def next_round(
    game: GameState,
    rng: random.Random | None = None,
    config: GinConfig = DEFAULT_CONFIG,
) -> GameState:
    """Deal the following round, keeping scores.

    The previous round's winner opens; after a drawn round the turn owner
    stays as it was.
    """

    first = game.round_winner if isinstance(game.round_winner, Player) else game.round_state.turn_owner
    logger.debug("Dealing round %d, %s to act", game.round_number + 1, first.value)
    return replace(
        game,
        round_state=deal_round(first, rng, config),
        status=GameStatus.PLAYING,
        round_winner=None,
        round_number=game.round_number + 1,
        last_result=None,
    )
