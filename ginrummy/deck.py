"""Deck assembly, shuffling and dealing."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from .cards import Card, Rank, Suit

__all__ = ["DECK_SIZE", "Deal", "build_deck", "shuffle", "deal", "seed_discard"]

DECK_SIZE = 52


@dataclass(frozen=True, slots=True)
class Deal:
    """Hands and leftover stock produced by a positional deal."""

    player_hand: tuple[Card, ...]
    opponent_hand: tuple[Card, ...]
    remaining_deck: tuple[Card, ...]


def build_deck() -> list[Card]:
    """Return the 52-card universe in canonical suit-major order."""

    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank.ordered()]


def shuffle(deck: Sequence[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a uniformly shuffled copy of ``deck``.

    Fisher-Yates over a fresh list; the caller's sequence is never mutated.
    """

    source = rng if rng is not None else random
    shuffled = list(deck)
    for i in range(len(shuffled) - 1, 0, -1):
        j = source.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def deal(deck: Sequence[Card], hand_size: int = 10) -> Deal:
    """Slice ``deck`` into two hands and the remaining stock."""

    if len(deck) < hand_size * 2:
        raise ValueError("insufficient cards in deck for requested hand size")
    return Deal(
        player_hand=tuple(deck[:hand_size]),
        opponent_hand=tuple(deck[hand_size : hand_size * 2]),
        remaining_deck=tuple(deck[hand_size * 2 :]),
    )


def seed_discard(remaining_deck: Sequence[Card]) -> tuple[tuple[Card, ...], tuple[Card, ...]]:
    """Move the top of the stock onto a fresh discard pile."""

    if not remaining_deck:
        raise ValueError("cannot seed discard pile from an empty deck")
    return tuple(remaining_deck[:-1]), (remaining_deck[-1],)
