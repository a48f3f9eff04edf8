from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Sequence

from .cards import Card, CardLike, cards_to_labels, parse_cards
from .errors import DuplicateCardError


class Street(str, Enum):
    PRE_FLOP = "PRE_FLOP"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"

    @property
    def card_count(self) -> int:
        """Cards revealed when this street is dealt."""
        return _STREET_CARDS[self]

    @property
    def board_size(self) -> int:
        """Board size once this street has been dealt."""
        return _BOARD_SIZES[self]

    @property
    def next(self) -> Optional["Street"]:
        order = list(Street)
        idx = order.index(self)
        return order[idx + 1] if idx + 1 < len(order) else None

    @classmethod
    def after(cls, board_size: int) -> "Street":
        for street in cls:
            if street.board_size == board_size:
                return street
        raise ValueError(f"Invalid board size: {board_size}")


_STREET_CARDS = {Street.PRE_FLOP: 0, Street.FLOP: 3, Street.TURN: 1, Street.RIVER: 1}
_BOARD_SIZES = {Street.PRE_FLOP: 0, Street.FLOP: 3, Street.TURN: 4, Street.RIVER: 5}

MAX_BOARD = 5


@dataclass(frozen=True)
class DealConfig:
    burn_before_street: bool = False


@dataclass(frozen=True)
class HoleCards:
    first: Card
    second: Card

    def __post_init__(self) -> None:
        if not isinstance(self.first, Card) or not isinstance(self.second, Card):
            raise ValueError("Hole cards must be Card instances")
        if self.first == self.second:
            raise DuplicateCardError(f"Duplicate hole card: {self.first.label}")

    @classmethod
    def of(cls, first: CardLike, second: CardLike) -> "HoleCards":
        a, b = parse_cards([first, second])
        return cls(a, b)

    def __iter__(self) -> Iterator[Card]:
        return iter((self.first, self.second))

    def __len__(self) -> int:
        return 2

    @property
    def labels(self) -> List[str]:
        return [self.first.label, self.second.label]


@dataclass
class Board:
    # Community cards in deal order. Burn cards are kept apart in ``burned``
    # and never count towards the board.
    cards: List[Card] = field(default_factory=list)
    burned: List[Card] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.cards) not in (0, 3, 4, 5):
            raise ValueError(f"Invalid board size: {len(self.cards)}")
        if len(set(self.cards)) != len(self.cards):
            raise DuplicateCardError("Board cards must be distinct")

    @classmethod
    def of(cls, labels: Sequence[CardLike]) -> "Board":
        return cls(cards=parse_cards(labels))

    @property
    def street(self) -> Street:
        return Street.after(len(self.cards))

    @property
    def labels(self) -> List[str]:
        return cards_to_labels(self.cards)

    def extend(self, cards: Sequence[Card]) -> None:
        if len(self.cards) + len(cards) > MAX_BOARD:
            raise ValueError("Board holds at most five cards")
        if len(set(self.cards) | set(cards)) != len(self.cards) + len(cards):
            raise DuplicateCardError("Board cards must be distinct")
        self.cards.extend(cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

