from __future__ import annotations

import logging
from typing import Callable, Iterator, Sequence

import pytest

from ginrummy.cards import Card, cards_from_codes
from ginrummy.deck import build_deck
from ginrummy.state import Player, RoundState, TurnPhase

RoundFactory = Callable[..., RoundState]


def _cards(codes: Sequence[str]) -> tuple[Card, ...]:
    return tuple(cards_from_codes(codes))


@pytest.fixture
def make_round() -> RoundFactory:
    """Build a ``RoundState`` whose stock holds every card not named explicitly.

    ``deck_top`` codes are placed on top of the stock, last one on top.
    Passing ``deck=()`` yields an empty stock.
    """

    def factory(
        player: Sequence[str],
        opponent: Sequence[str],
        discard: Sequence[str] = ("KC",),
        *,
        deck: Sequence[str] | None = None,
        deck_top: Sequence[str] = (),
        turn_owner: Player = Player.PLAYER,
        phase: TurnPhase = TurnPhase.DRAW,
    ) -> RoundState:
        player_hand = _cards(player)
        opponent_hand = _cards(opponent)
        discard_pile = _cards(discard)
        top = _cards(deck_top)
        if deck is None:
            used = set(player_hand) | set(opponent_hand) | set(discard_pile) | set(top)
            stock = tuple(card for card in build_deck() if card not in used) + top
        else:
            stock = _cards(deck) + top
        return RoundState(
            deck=stock,
            player_hand=player_hand,
            opponent_hand=opponent_hand,
            discard_pile=discard_pile,
            turn_owner=turn_owner,
            turn_phase=phase,
        )

    return factory


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    logger = logging.getLogger("ginrummy")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
