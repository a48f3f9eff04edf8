"""Texas Hold'em dealing and hand evaluation primitives."""

from .cards import CANONICAL_ORDER, Card, RANKS, Rank, SUITS, Suit, canonical_cards, parse_cards, parse_label
from .compare import Outcome, ShowdownResult, compare, rank_players, showdown
from .dealing import MAX_PLAYERS, MIN_PLAYERS, deal_board, deal_hole_cards, run_out_board
from .deck import Deck, build_deck
from .errors import (
    DeckExhausted,
    DuplicateCardError,
    HoldemError,
    InsufficientCards,
    InsufficientCardsForEvaluation,
    InvalidStageTransition,
)
from .evaluator import Category, EvaluatedHand, evaluate, evaluate_best, evaluate_five
from .models import Board, DealConfig, HoleCards, Street
from .table import Dealer, HandContext

__all__ = [
    "Card",
    "CANONICAL_ORDER",
    "RANKS",
    "SUITS",
    "Rank",
    "Suit",
    "canonical_cards",
    "parse_cards",
    "parse_label",
    "Deck",
    "build_deck",
    "deal_hole_cards",
    "deal_board",
    "run_out_board",
    "MIN_PLAYERS",
    "MAX_PLAYERS",
    "Category",
    "EvaluatedHand",
    "evaluate",
    "evaluate_best",
    "evaluate_five",
    "Outcome",
    "ShowdownResult",
    "compare",
    "rank_players",
    "showdown",
    "Board",
    "DealConfig",
    "HoleCards",
    "Street",
    "Dealer",
    "HandContext",
    "HoldemError",
    "DeckExhausted",
    "DuplicateCardError",
    "InsufficientCards",
    "InsufficientCardsForEvaluation",
    "InvalidStageTransition",
]
