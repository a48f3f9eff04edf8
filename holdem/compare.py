from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Mapping, Optional

from .cards import Card
from .errors import DuplicateCardError
from .evaluator import EvaluatedHand, evaluate
from .models import HoleCards


class Outcome(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare(a: EvaluatedHand, b: EvaluatedHand) -> Outcome:
    """Three-way comparison: category first, then the tie-break key."""
    left = (a.category, a.key)
    right = (b.category, b.key)
    if left > right:
        return Outcome.GREATER
    if left < right:
        return Outcome.LESS
    return Outcome.EQUAL


def rank_players(hands: Mapping[int, EvaluatedHand]) -> List[List[int]]:
    """Group seats into tiers, strongest first. Seats in one tier tie exactly."""
    tiers: List[List[int]] = []
    ordered = sorted(hands.items(), key=lambda item: ((item[1].category, item[1].key), -item[0]), reverse=True)
    previous: Optional[EvaluatedHand] = None
    for seat, hand in ordered:
        if previous is not None and compare(hand, previous) == Outcome.EQUAL:
            tiers[-1].append(seat)
        else:
            tiers.append([seat])
        previous = hand
    return tiers


@dataclass(frozen=True)
class ShowdownResult:
    hands: Dict[int, EvaluatedHand]
    winners: List[int]
    losers: List[int]

    @property
    def is_split(self) -> bool:
        return len(self.winners) > 1

    @property
    def best(self) -> EvaluatedHand:
        return self.hands[self.winners[0]]


def showdown(holes: Mapping[int, HoleCards], board: Iterable[Card]) -> ShowdownResult:
    """Evaluate every contesting seat against the shared board and split them
    into winners (several on an exact tie) and losers."""
    if not holes:
        raise ValueError("Showdown needs at least one contesting player")
    community = list(board)
    seen = set(community)
    if len(seen) != len(community):
        raise DuplicateCardError("Board cards must be distinct")
    for seat, hole in holes.items():
        for card in hole:
            if card in seen:
                raise DuplicateCardError(f"Card {card.label} held by seat {seat} is already in play")
            seen.add(card)

    hands = {seat: evaluate(hole, community) for seat, hole in holes.items()}
    tiers = rank_players(hands)
    winners = tiers[0]
    losers = sorted(seat for tier in tiers[1:] for seat in tier)
    return ShowdownResult(hands=hands, winners=winners, losers=losers)
