"""Greedy meld detection and deadwood scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Iterable, Sequence

from .cards import RANK_INDEX, Card, Suit

__all__ = [
    "MeldKind",
    "Meld",
    "MeldResult",
    "Deadwood",
    "find_melds",
    "deadwood",
    "deadwood_total",
    "check_for_gin",
]

MIN_MELD_SIZE = 3


class MeldKind(str, Enum):
    SET = "set"
    RUN = "run"


@dataclass(frozen=True, slots=True)
class Meld:
    """A set or run derived from a hand; never stored on the table."""

    kind: MeldKind
    cards: tuple[Card, ...]

    def is_valid(self) -> bool:
        """Return ``True`` when the cards satisfy the set or run rules."""

        if len(self.cards) < MIN_MELD_SIZE:
            return False
        if self.kind is MeldKind.SET:
            ranks = {card.rank for card in self.cards}
            suits = {card.suit for card in self.cards}
            return len(self.cards) <= 4 and len(ranks) == 1 and len(suits) == len(self.cards)
        if len({card.suit for card in self.cards}) != 1:
            return False
        positions = [RANK_INDEX[card.rank] for card in self.cards]
        return all(b == a + 1 for a, b in zip(positions, positions[1:]))


@dataclass(frozen=True, slots=True)
class MeldResult:
    melds: tuple[Meld, ...]
    remaining: tuple[Card, ...]


@dataclass(frozen=True, slots=True)
class Deadwood:
    total: int
    cards: tuple[Card, ...]


def _rank_key(card: Card) -> int:
    return RANK_INDEX[card.rank]


def _find_sets(cards: Sequence[Card]) -> list[Meld]:
    sets: list[Meld] = []
    for _, group in groupby(cards, key=_rank_key):
        same_rank = tuple(group)
        if len(same_rank) >= MIN_MELD_SIZE:
            sets.append(Meld(MeldKind.SET, same_rank))
    return sets


def _find_runs(suit_cards: Sequence[Card]) -> list[Meld]:
    """Scan one rank-sorted suit group, emitting maximal runs without backtracking."""

    runs: list[Meld] = []
    start = 0
    while start <= len(suit_cards) - MIN_MELD_SIZE:
        run = [suit_cards[start]]
        for card in suit_cards[start + 1 :]:
            if _rank_key(card) != _rank_key(run[-1]) + 1:
                break
            run.append(card)
        if len(run) >= MIN_MELD_SIZE:
            runs.append(Meld(MeldKind.RUN, tuple(run)))
            start += len(run)
        else:
            start += 1
    return runs


def find_melds(hand: Iterable[Card]) -> MeldResult:
    """Partition ``hand`` into melds and leftover cards.

    Sets are taken first and always absorb every card of their rank; runs are
    then searched per suit among the cards sets left behind. The partition is
    greedy, so it is not guaranteed to minimise deadwood.

    ``melds`` lists sets in rank order, Ace first, followed by runs in
    canonical suit order.
    """

    cards = sorted(hand, key=_rank_key)
    melds = _find_sets(cards)
    consumed = {card for meld in melds for card in meld.cards}

    unmelded = [card for card in cards if card not in consumed]
    for suit in Suit:
        suit_cards = [card for card in unmelded if card.suit is suit]
        for run in _find_runs(suit_cards):
            melds.append(run)
            consumed.update(run.cards)

    remaining = tuple(card for card in cards if card not in consumed)
    return MeldResult(melds=tuple(melds), remaining=remaining)


def deadwood(hand: Iterable[Card]) -> Deadwood:
    remaining = find_melds(hand).remaining
    return Deadwood(total=sum(card.value for card in remaining), cards=remaining)


def deadwood_total(hand: Iterable[Card]) -> int:
    return deadwood(hand).total


def check_for_gin(hand: Iterable[Card]) -> bool:
    return deadwood_total(hand) == 0
