"""Dealing protocol: hole cards round-robin, then the board street by street.

The functions here hold no state of their own. Everything that changes lives
in the ``Deck`` (its cursor) and the ``Board`` passed in by the caller.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .cards import Card
from .deck import Deck
from .errors import DeckExhausted, InsufficientCards, InvalidStageTransition
from .models import Board, DealConfig, HoleCards, Street

MIN_PLAYERS = 2
MAX_PLAYERS = 10
HOLE_CARD_COUNT = 2


def _resolve_config(config: Optional[DealConfig]) -> DealConfig:
    if config is None:
        return DealConfig()
    if not isinstance(config, DealConfig):
        raise ValueError(f"Unsupported deal config: {config!r}")
    return config


def deal_hole_cards(deck: Deck, n_players: int, config: Optional[DealConfig] = None) -> Dict[int, HoleCards]:
    """Deal two cards to each of ``n_players`` seats, one card per seat per pass."""
    _resolve_config(config)
    if isinstance(n_players, bool) or not isinstance(n_players, int):
        raise ValueError(f"Player count must be an integer, got {n_players!r}")
    if not MIN_PLAYERS <= n_players <= MAX_PLAYERS:
        raise ValueError(f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {n_players}")

    needed = HOLE_CARD_COUNT * n_players
    if needed > deck.remaining:
        raise InsufficientCards(f"Need {needed} cards for {n_players} players, {deck.remaining} left")

    dealt: Dict[int, List[Card]] = {seat: [] for seat in range(n_players)}
    for _ in range(HOLE_CARD_COUNT):
        for seat in range(n_players):
            dealt[seat].append(deck.deal_one())
    return {seat: HoleCards(*cards) for seat, cards in dealt.items()}


def deal_board(deck: Deck, board: Board, street: Street, config: Optional[DealConfig] = None) -> List[Card]:
    """Reveal ``street`` onto ``board`` and return the new community cards.

    Streets must come in order (flop, turn, river) and each only once. With
    ``burn_before_street`` one card is discarded into ``board.burned`` first.
    """
    config = _resolve_config(config)
    street = Street(street)
    expected = board.street.next
    if street != expected:
        current = board.street.value
        if expected is None:
            raise InvalidStageTransition(f"Board is complete after {current}; cannot deal {street.value}")
        raise InvalidStageTransition(f"Cannot deal {street.value} after {current}; expected {expected.value}")

    needed = street.card_count + (1 if config.burn_before_street else 0)
    if needed > deck.remaining:
        raise DeckExhausted("Not enough cards left in deck")

    if config.burn_before_street:
        board.burned.append(deck.deal_one())
    cards = deck.deal(street.card_count)
    board.extend(cards)
    return cards


def run_out_board(deck: Deck, board: Board, config: Optional[DealConfig] = None) -> List[Card]:
    """Deal every street still missing from ``board`` through the river."""
    revealed: List[Card] = []
    street = board.street.next
    while street is not None:
        revealed.extend(deal_board(deck, board, street, config))
        street = street.next
    return revealed
