from __future__ import annotations

import random
from collections import Counter

import numpy as np
import pytest

from ginrummy.cards import Card
from ginrummy.deck import DECK_SIZE, build_deck, deal, seed_discard, shuffle


def test_build_deck_yields_each_card_once_in_canonical_order() -> None:
    deck = build_deck()

    assert len(deck) == DECK_SIZE
    assert len({(card.suit, card.rank) for card in deck}) == DECK_SIZE
    assert deck[0] == Card.from_code("AH")
    assert deck[12] == Card.from_code("KH")
    assert deck[13] == Card.from_code("AD")
    assert deck[-1] == Card.from_code("KS")


def test_shuffle_preserves_cards_and_leaves_input_untouched() -> None:
    deck = build_deck()
    original = list(deck)

    shuffled = shuffle(deck, random.Random(42))

    assert shuffled is not deck
    assert deck == original
    assert Counter(shuffled) == Counter(original)
    assert shuffled != original


def test_shuffle_is_reproducible_for_a_seed() -> None:
    assert shuffle(build_deck(), random.Random(9)) == shuffle(build_deck(), random.Random(9))


def test_shuffle_positions_are_uniform() -> None:
    deck = build_deck()
    index = {card: idx for idx, card in enumerate(deck)}
    rng = random.Random(2024)
    samples = 2000
    counts = np.zeros((DECK_SIZE, DECK_SIZE), dtype=np.int64)

    for _ in range(samples):
        for position, card in enumerate(shuffle(deck, rng)):
            counts[index[card], position] += 1

    assert counts.min() > 0
    expected = samples / DECK_SIZE
    chi_square = ((counts - expected) ** 2 / expected).sum(axis=1)
    # 51 degrees of freedom per card; mean 51, standard deviation about 10.
    assert chi_square.max() < 120


def test_deal_slices_positionally() -> None:
    deck = build_deck()

    dealt = deal(deck)

    assert dealt.player_hand == tuple(deck[:10])
    assert dealt.opponent_hand == tuple(deck[10:20])
    assert dealt.remaining_deck == tuple(deck[20:])


def test_deal_rejects_short_deck() -> None:
    with pytest.raises(ValueError):
        deal(build_deck()[:15])


def test_seed_discard_moves_top_of_stock() -> None:
    remaining = tuple(build_deck()[20:])

    stock, discard_pile = seed_discard(remaining)

    assert discard_pile == (remaining[-1],)
    assert stock == remaining[:-1]
