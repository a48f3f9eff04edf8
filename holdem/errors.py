from __future__ import annotations


class HoldemError(Exception):
    """Base class for every error raised by the dealing and evaluation core."""


class DeckExhausted(HoldemError, ValueError):
    pass


class InsufficientCards(HoldemError, ValueError):
    pass


class InvalidStageTransition(HoldemError, RuntimeError):
    pass


class InsufficientCardsForEvaluation(HoldemError, ValueError):
    pass


class DuplicateCardError(HoldemError, ValueError):
    pass
