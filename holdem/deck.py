from __future__ import annotations

import random
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from .cards import CANONICAL_ORDER, Card, CardLike, parse_cards
from .errors import DeckExhausted, DuplicateCardError

RandomSource = Union[int, random.Random, None]

DECK_SIZE = 52


def make_rng(source: RandomSource = None) -> random.Random:
    """Return a private ``random.Random`` for ``source``.

    An ``int`` seeds a new generator, an existing ``Random`` is used as-is and
    ``None`` gets a fresh OS-seeded generator. The module-level generator is
    never touched.
    """
    if isinstance(source, random.Random):
        return source
    if source is None:
        return random.Random()
    if isinstance(source, bool) or not isinstance(source, int):
        raise ValueError(f"Unsupported random source: {source!r}")
    return random.Random(source)


class Deck:
    """The 52 cards in a fixed order plus a cursor over the cards already dealt.

    A fresh deck is in canonical order (see ``cards.canonical_cards``). The
    cursor only moves forward; ``reset`` starts a new hand.
    """

    def __init__(self) -> None:
        self._cards: List[Card] = list(CANONICAL_ORDER)
        self._cursor = 0

    @classmethod
    def from_cards(cls, cards: Iterable[CardLike]) -> "Deck":
        ordered = parse_cards(cards)
        if len(ordered) != DECK_SIZE or set(ordered) != set(CANONICAL_ORDER):
            raise ValueError("Deck must contain each of the 52 cards exactly once")
        deck = cls()
        deck._cards = ordered
        return deck

    @classmethod
    def stacked(cls, top: Sequence[CardLike]) -> "Deck":
        """Deck with ``top`` dealt first, then the rest in canonical order."""
        head = parse_cards(top)
        if len(set(head)) != len(head):
            raise DuplicateCardError("Stacked cards must be distinct")
        chosen = set(head)
        return cls.from_cards(head + [card for card in CANONICAL_ORDER if card not in chosen])

    # Lifecycle -------------------------------------------------------

    def shuffle(self, rng: RandomSource = None) -> "Deck":
        # Only the undealt cards move, so nothing already dealt can reappear.
        generator = make_rng(rng)
        undealt = self._cards[self._cursor :]
        generator.shuffle(undealt)
        self._cards[self._cursor :] = undealt
        return self

    def reset(self) -> None:
        self._cards = list(CANONICAL_ORDER)
        self._cursor = 0

    def deal_one(self) -> Card:
        if self._cursor >= DECK_SIZE:
            raise DeckExhausted("Not enough cards left in deck")
        card = self._cards[self._cursor]
        self._cursor += 1
        return card

    def deal(self, count: int) -> List[Card]:
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {count}")
        if count > self.remaining:
            raise DeckExhausted("Not enough cards left in deck")
        return [self.deal_one() for _ in range(count)]

    # Views -----------------------------------------------------------

    @property
    def remaining(self) -> int:
        return DECK_SIZE - self._cursor

    @property
    def dealt(self) -> int:
        return self._cursor

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def undealt(self) -> List[Card]:
        return self._cards[self._cursor :]

    def __len__(self) -> int:
        return self.remaining

    def __iter__(self) -> Iterator[Card]:
        return iter(self.undealt())

    def __repr__(self) -> str:
        return f"Deck(remaining={self.remaining})"


def build_deck(seed: RandomSource = None) -> Deck:
    """Fresh deck shuffled with ``seed``."""
    return Deck().shuffle(seed)

