from __future__ import annotations

import itertools
from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

from .cards import Card, Rank
from .errors import DuplicateCardError, InsufficientCardsForEvaluation

HAND_SIZE = 5
MAX_CARDS = 7
WHEEL = frozenset({Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE})


class Category(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def slug(self) -> str:
        return self.name.lower()

    @property
    def title(self) -> str:
        return self.name.replace("_", " ").title().replace(" A ", " a ").replace(" Of ", " of ")


@dataclass(frozen=True, order=True)
class EvaluatedHand:
    """Best five-card hand: a category plus the ranks that break ties inside it.

    Ordering and equality only look at ``(category, key)``; two hands built
    from different cards but with the same key are an exact tie.
    """

    category: Category
    key: Tuple[int, ...]
    cards: Tuple[Card, ...] = field(default=(), compare=False)

    @property
    def labels(self) -> List[str]:
        return [card.label for card in self.cards]

    def describe(self) -> str:
        ranks = [Rank(value) for value in self.key]
        category = self.category
        if category == Category.STRAIGHT_FLUSH:
            if ranks[0] == Rank.ACE:
                return "Royal Flush"
            return f"Straight Flush, {ranks[0].title}-high"
        if category == Category.FOUR_OF_A_KIND:
            return f"Four of a Kind, {ranks[0].plural}"
        if category == Category.FULL_HOUSE:
            return f"Full House, {ranks[0].plural} over {ranks[1].plural}"
        if category == Category.FLUSH:
            return f"Flush, {ranks[0].title}-high"
        if category == Category.STRAIGHT:
            return f"Straight, {ranks[0].title}-high"
        if category == Category.THREE_OF_A_KIND:
            return f"Three of a Kind, {ranks[0].plural}"
        if category == Category.TWO_PAIR:
            return f"Two Pair, {ranks[0].plural} and {ranks[1].plural}"
        if category == Category.PAIR:
            return f"Pair of {ranks[0].plural}"
        if category == Category.HIGH_CARD:
            return f"High Card, {ranks[0].title}"
        raise ValueError(f"Unknown category {category!r}")


def evaluate(hole_cards: Iterable[Card], board: Iterable[Card]) -> EvaluatedHand:
    """Best hand for one player from two hole cards and 0-5 community cards."""
    hole = list(hole_cards)
    community = list(board)
    if len(hole) + len(community) < HAND_SIZE:
        raise InsufficientCardsForEvaluation(
            f"Need at least {HAND_SIZE} cards, got {len(hole) + len(community)}"
        )
    if len(hole) != 2:
        raise ValueError(f"Expected 2 hole cards, got {len(hole)}")
    if len(community) > 5:
        raise ValueError(f"Board holds at most 5 cards, got {len(community)}")
    return evaluate_best(hole + community)


def evaluate_best(cards: Sequence[Card]) -> EvaluatedHand:
    """Return the strongest 5-card hand among 5 to 7 cards. Higher is better."""
    cards = list(cards)
    if len(cards) < HAND_SIZE:
        raise InsufficientCardsForEvaluation(f"Need at least {HAND_SIZE} cards, got {len(cards)}")
    if len(cards) > MAX_CARDS:
        raise ValueError(f"At most {MAX_CARDS} cards can be evaluated, got {len(cards)}")
    _check_distinct(cards)

    best: Optional[EvaluatedHand] = None
    for combo in itertools.combinations(cards, HAND_SIZE):
        hand = _evaluate_five(combo)
        if best is None or hand > best:
            best = hand
    assert best is not None
    return best


def evaluate_five(cards: Sequence[Card]) -> EvaluatedHand:
    if len(cards) != HAND_SIZE:
        raise ValueError(f"Expected {HAND_SIZE} cards, got {len(cards)}")
    _check_distinct(cards)
    return _evaluate_five(cards)


def _check_distinct(cards: Sequence[Card]) -> None:
    seen = set()
    for card in cards:
        if not isinstance(card, Card):
            raise ValueError(f"Not a card: {card!r}")
        if card in seen:
            raise DuplicateCardError(f"Duplicate card: {card.label}")
        seen.add(card)


def _evaluate_five(cards: Sequence[Card]) -> EvaluatedHand:
    counts = Counter(card.rank for card in cards)
    # Group ranks by multiplicity first, then rank: quads, trips, pairs, singles.
    groups = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    count_values = [count for _, count in groups]
    grouped_ranks = tuple(int(rank) for rank, _ in groups)

    is_flush = len({card.suit for card in cards}) == 1
    straight_high = _straight_high(counts)

    if straight_high and is_flush:
        return _hand(Category.STRAIGHT_FLUSH, (straight_high,), cards, straight_high)
    if count_values[0] == 4:
        return _hand(Category.FOUR_OF_A_KIND, grouped_ranks, cards)
    if count_values[0] == 3 and count_values[1] == 2:
        return _hand(Category.FULL_HOUSE, grouped_ranks, cards)
    if is_flush:
        return _hand(Category.FLUSH, grouped_ranks, cards)
    if straight_high:
        return _hand(Category.STRAIGHT, (straight_high,), cards, straight_high)
    if count_values[0] == 3:
        return _hand(Category.THREE_OF_A_KIND, grouped_ranks, cards)
    if count_values[0] == 2 and count_values[1] == 2:
        return _hand(Category.TWO_PAIR, grouped_ranks, cards)
    if count_values[0] == 2:
        return _hand(Category.PAIR, grouped_ranks, cards)
    return _hand(Category.HIGH_CARD, grouped_ranks, cards)


def _straight_high(counts: Counter) -> Optional[int]:
    if len(counts) != HAND_SIZE:
        return None
    ranks = sorted(int(rank) for rank in counts)
    if ranks[-1] - ranks[0] == 4:
        return ranks[-1]
    if set(counts) == WHEEL:  # Ace low
        return int(Rank.FIVE)
    return None


def _hand(
    category: Category,
    key: Tuple[int, ...],
    cards: Sequence[Card],
    straight_high: Optional[int] = None,
) -> EvaluatedHand:
    return EvaluatedHand(category=category, key=key, cards=_order_cards(cards, key, straight_high))


def _order_cards(cards: Sequence[Card], key: Tuple[int, ...], straight_high: Optional[int]) -> Tuple[Card, ...]:
    # Most significant first: pattern ranks in key order; for a wheel the ace
    # plays low and goes last.
    if straight_high is not None:
        if straight_high == int(Rank.FIVE):
            return tuple(sorted(cards, key=lambda card: int(card.rank) % int(Rank.ACE), reverse=True))
        return tuple(sorted(cards, key=lambda card: card.sort_key, reverse=True))
    position = {rank: idx for idx, rank in enumerate(key)}
    return tuple(sorted(cards, key=lambda card: (position[int(card.rank)], -card.sort_key[1])))
