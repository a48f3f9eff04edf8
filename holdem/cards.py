from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import Iterable, List, Sequence, Union


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return RANKS[ACE_HIGH - self.value]

    @property
    def title(self) -> str:
        return self.name.title()

    @property
    def plural(self) -> str:
        if self is Rank.SIX:
            return "Sixes"
        return f"{self.title}s"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Rank":
        idx = RANKS.find(symbol.upper()) if len(symbol) == 1 else -1
        if idx < 0:
            raise ValueError(f"Invalid rank: {symbol}")
        return cls(ACE_HIGH - idx)


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"

    @property
    def icon(self) -> str:
        return SUIT_ICONS[self.value]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Suit":
        try:
            return cls(symbol.lower())
        except ValueError:
            raise ValueError(f"Invalid suit: {symbol}") from None


RANKS = "AKQJT98765432"
SUITS = "hdcs"
SUIT_ICONS = {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}
ACE_HIGH = 14


@total_ordering
@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # Accept symbols ("A", "h") as well as enum members; the set of
        # constructible cards stays exactly Rank x Suit.
        rank = self.rank
        if not isinstance(rank, Rank):
            if isinstance(rank, str):
                rank = Rank.from_symbol(rank)
            elif isinstance(rank, int) and not isinstance(rank, bool) and 2 <= rank <= ACE_HIGH:
                rank = Rank(rank)
            else:
                raise ValueError(f"Invalid rank: {rank}")
        suit = self.suit
        if not isinstance(suit, Suit):
            if not isinstance(suit, str):
                raise ValueError(f"Invalid suit: {suit}")
            suit = Suit.from_symbol(suit)
        object.__setattr__(self, "rank", rank)
        object.__setattr__(self, "suit", suit)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"({self.suit.icon}, {self.rank.title})"

    def __repr__(self) -> str:
        return f"Card({self.label})"

    @property
    def label(self) -> str:
        return f"{self.rank.symbol}{self.suit.value}"

    @property
    def sort_key(self) -> tuple:
        return (int(self.rank), SUITS.index(self.suit.value))

    @property
    def index(self) -> int:
        """Position of this card in the canonical (fresh deck) order."""
        return (int(self.rank) - 2) * len(SUITS) + SUITS.index(self.suit.value)


CardLike = Union[Card, str]


def canonical_cards() -> List[Card]:
    """All 52 cards, rank-major: 2h 2d 2c 2s 3h ... Ac As."""
    return [Card(rank, suit) for rank in RANKS[::-1] for suit in SUITS]


CANONICAL_ORDER = tuple(canonical_cards())


def parse_label(label: str) -> Card:
    if not isinstance(label, str) or len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    return Card(label[0], label[1])


def parse_cards(labels: Iterable[CardLike]) -> List[Card]:
    return [item if isinstance(item, Card) else parse_label(item) for item in labels]


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]
