from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .cards import Card
from .compare import ShowdownResult, showdown
from .dealing import deal_board, deal_hole_cards
from .deck import Deck
from .errors import InvalidStageTransition
from .models import Board, DealConfig, HoleCards, Street

LOGGER = logging.getLogger("holdem.table")

# Dealer runs the card side of a single hand: deck, hole cards, board and
# showdown. Betting, blinds and chips belong to whoever drives it.


@dataclass
class HandContext:
    # Everything about one hand's cards. The deck belongs to this hand only.
    hand_id: str
    seed: Optional[int]
    deck: Deck
    config: DealConfig
    holes: Dict[int, HoleCards] = field(default_factory=dict)
    board: Board = field(default_factory=Board)
    events: List[Dict[str, object]] = field(default_factory=list)

    @property
    def street(self) -> Street:
        return self.board.street

    @property
    def is_board_complete(self) -> bool:
        return self.board.street == Street.RIVER


class Dealer:
    def __init__(self, config: Optional[DealConfig] = None) -> None:
        self.config = config or DealConfig()
        self.hand_counter = 0

    # Hand lifecycle --------------------------------------------------

    def start_hand(self, n_players: int, seed: Optional[int] = None) -> HandContext:
        if seed is None:
            seed = int(time.time() * 1000) & 0xFFFFFFFF
        deck = Deck().shuffle(seed)
        return self.start_hand_with_deck(n_players, deck, seed=seed)

    def start_hand_with_deck(self, n_players: int, deck: Deck, seed: Optional[int] = None) -> HandContext:
        """Start a hand from a prepared deck (stacked or shuffled by the caller).

        ``seed`` is recorded only when it replays the deck through
        ``Deck().shuffle(seed)``; leave it as ``None`` otherwise.
        """
        hand_id = f"H-{time.strftime('%Y%m%d')}-{self.hand_counter:05d}"
        ctx = HandContext(hand_id=hand_id, seed=seed, deck=deck, config=self.config)
        ctx.holes = deal_hole_cards(deck, n_players, self.config)
        self.hand_counter += 1

        ctx.events.append(
            {
                "ev": "HOLE_CARDS",
                "players": n_players,
                "hands": {seat: hole.labels for seat, hole in ctx.holes.items()},
            }
        )
        LOGGER.info("Hand %s dealt to %s players (seed=%s)", hand_id, n_players, seed)
        return ctx

    def deal_next(self, ctx: HandContext) -> List[Card]:
        street = ctx.board.street.next
        if street is None:
            raise InvalidStageTransition("Board is complete after RIVER")
        burned_before = len(ctx.board.burned)
        cards = deal_board(ctx.deck, ctx.board, street, self.config)
        event: Dict[str, object] = {"ev": street.value, "cards": [card.label for card in cards]}
        if len(ctx.board.burned) > burned_before:
            event["burned"] = ctx.board.burned[-1].label
        ctx.events.append(event)
        LOGGER.debug("Hand %s %s: %s", ctx.hand_id, street.value, " ".join(event["cards"]))
        return cards

    def run_out(self, ctx: HandContext) -> List[Card]:
        revealed: List[Card] = []
        while not ctx.is_board_complete:
            revealed.extend(self.deal_next(ctx))
        return revealed

    def showdown(self, ctx: HandContext, seats: Optional[Iterable[int]] = None) -> ShowdownResult:
        """Resolve the hand among ``seats`` (default: every dealt seat)."""
        contenders = sorted(ctx.holes) if seats is None else sorted(set(seats))
        unknown = [seat for seat in contenders if seat not in ctx.holes]
        if unknown:
            raise ValueError(f"Unknown seats: {unknown}")
        result = showdown({seat: ctx.holes[seat] for seat in contenders}, ctx.board)
        ctx.events.append(self.showdown_payload(ctx, result))
        LOGGER.info(
            "Hand %s showdown: seats %s win with %s",
            ctx.hand_id,
            result.winners,
            result.best.describe(),
        )
        return result

    # Payload helpers -------------------------------------------------

    def hand_payload(self, ctx: HandContext) -> Dict[str, object]:
        return {
            "hand_id": ctx.hand_id,
            "seed": ctx.seed,
            "street": ctx.street.value,
            "burn_before_street": ctx.config.burn_before_street,
            "holes": {seat: hole.labels for seat, hole in ctx.holes.items()},
            "board": ctx.board.labels,
            "cards_remaining": ctx.deck.remaining,
        }

    def showdown_payload(self, ctx: HandContext, result: ShowdownResult) -> Dict[str, object]:
        return {
            "ev": "SHOWDOWN",
            "hand_id": ctx.hand_id,
            "board": ctx.board.labels,
            "hands": [
                {
                    "seat": seat,
                    "hole": ctx.holes[seat].labels,
                    "rank": hand.category.slug,
                    "description": hand.describe(),
                    "best": hand.labels,
                }
                for seat, hand in sorted(result.hands.items())
            ],
            "winners": list(result.winners),
            "losers": list(result.losers),
        }
