from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from holdem.cards import Card, parse_cards
from holdem.dealing import deal_hole_cards, run_out_board
from holdem.deck import Deck
from holdem.models import Board, DealConfig, HoleCards


def cards(*labels: str) -> List[Card]:
    return parse_cards(labels)


def hole(first: str, second: str) -> HoleCards:
    return HoleCards.of(first, second)


def board(*labels: str) -> Board:
    return Board.of(labels)


def deal_full_hand(
    n_players: int,
    seed: int,
    config: DealConfig = DealConfig(),
) -> Tuple[Deck, Dict[int, HoleCards], Board]:
    """Shuffle a fresh deck, deal hole cards and run the board out to the river."""
    deck = Deck().shuffle(seed)
    holes = deal_hole_cards(deck, n_players, config)
    community = Board()
    run_out_board(deck, community, config)
    return deck, holes, community


def all_cards_in_play(holes: Dict[int, HoleCards], community: Board) -> List[Card]:
    in_play: List[Card] = []
    for seat in sorted(holes):
        in_play.extend(holes[seat])
    in_play.extend(community)
    return in_play


def labels_of(items: Iterable[Card]) -> List[str]:
    return [card.label for card in items]


def stacked(labels: Sequence[str]) -> Deck:
    return Deck.stacked(labels)
