"""Card abstractions and helpers for Gin Rummy."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Iterable, Sequence


class Suit(str, Enum):
    """Enumeration of the four suits, in canonical deck order."""

    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


class Rank(str, Enum):
    """Enumeration of ranks ordered Ace low to King."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @classmethod
    def ordered(cls) -> tuple["Rank", ...]:
        """Return ranks in rule order for run validation."""

        return tuple(cls)

    @property
    def position(self) -> int:
        return RANK_INDEX[self]


_SUIT_SYMBOLS: Final[dict[Suit, str]] = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

RANK_INDEX: Final[dict[Rank, int]] = {rank: idx for idx, rank in enumerate(Rank)}
SUIT_INDEX: Final[dict[Suit, int]] = {suit: idx for idx, suit in enumerate(Suit)}
RANK_VALUES: Final[dict[Rank, int]] = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical card.

    Identity is the ``(suit, rank)`` pair; ``value`` is always derived from the
    rank and cannot be passed to the constructor.
    """

    suit: Suit
    rank: Rank
    value: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", RANK_VALUES[self.rank])

    @classmethod
    def of(cls, rank: Rank, suit: Suit) -> "Card":
        return cls(suit=suit, rank=rank)

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a compact code such as ``"10H"`` or ``"QS"``."""

        if len(code) < 2:
            raise ValueError(f"invalid card code '{code}'")
        try:
            rank = Rank(code[:-1].upper())
            suit = Suit(code[-1].upper())
        except ValueError as exc:
            raise ValueError(f"invalid card code '{code}'") from exc
        return cls(suit=suit, rank=rank)

    @property
    def code(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def label(self) -> str:
        """Create a display label suitable for CLI representations."""

        return f"{self.rank.value}{self.suit.symbol}"

    def __str__(self) -> str:
        return self.label()


def cards_from_codes(codes: Iterable[str]) -> list[Card]:
    return [Card.from_code(code) for code in codes]


def sort_hand(cards: Iterable[Card]) -> list[Card]:
    """Sort by suit in canonical order, then by rank with Ace low."""

    return sorted(cards, key=lambda c: (SUIT_INDEX[c.suit], RANK_INDEX[c.rank]))


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(card.label() for card in cards)
