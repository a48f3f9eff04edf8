import random

import pytest

from holdem.cards import CANONICAL_ORDER, parse_label
from holdem.deck import DECK_SIZE, Deck, build_deck
from holdem.errors import DeckExhausted, DuplicateCardError


def test_new_deck_is_canonical_and_complete():
    deck = Deck()
    assert deck.cards == CANONICAL_ORDER
    assert deck.remaining == DECK_SIZE
    assert deck.dealt == 0
    assert len(deck) == 52


def test_fresh_deck_deals_in_canonical_order():
    deck = Deck()
    assert [deck.deal_one().label for _ in range(5)] == ["2h", "2d", "2c", "2s", "3h"]


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 777, 2**31])
def test_shuffle_is_permutation_of_canonical_cards(seed):
    deck = Deck().shuffle(seed)
    assert len(deck.cards) == 52
    assert len(set(deck.cards)) == 52
    assert set(deck.cards) == set(CANONICAL_ORDER)


def test_same_seed_reproduces_the_same_order():
    assert Deck().shuffle(42).cards == Deck().shuffle(42).cards
    assert build_deck(42).cards == Deck().shuffle(42).cards


def test_different_seeds_give_different_orders():
    assert Deck().shuffle(1).cards != Deck().shuffle(2).cards


def test_shuffle_accepts_random_instance_and_leaves_global_state_alone():
    random.seed(1234)
    expected_next = random.random()
    random.seed(1234)

    deck = Deck().shuffle(random.Random(99))
    assert deck.cards == Deck().shuffle(99).cards
    Deck().shuffle()  # unseeded shuffle uses a private generator
    assert random.random() == expected_next


def test_shuffle_rejects_unsupported_sources():
    with pytest.raises(ValueError, match="Unsupported random source"):
        Deck().shuffle("seed")  # type: ignore[arg-type]


def test_deal_one_advances_cursor_until_exhausted():
    deck = Deck().shuffle(5)
    order = deck.cards
    dealt = [deck.deal_one() for _ in range(52)]
    assert tuple(dealt) == order
    assert deck.remaining == 0
    assert deck.dealt == 52
    with pytest.raises(DeckExhausted, match="Not enough cards"):
        deck.deal_one()


def test_deal_is_atomic_when_not_enough_cards_remain():
    deck = Deck()
    deck.deal(50)
    with pytest.raises(DeckExhausted):
        deck.deal(3)
    assert deck.remaining == 2
    assert len(deck.deal(2)) == 2


def test_deck_exhausted_is_a_value_error():
    deck = Deck()
    deck.deal(52)
    with pytest.raises(ValueError):
        deck.deal(1)


def test_shuffle_after_dealing_only_moves_undealt_cards():
    deck = Deck()
    first = deck.deal(10)
    deck.shuffle(3)
    assert list(deck.cards[:10]) == first
    assert set(deck.undealt()) == set(CANONICAL_ORDER[10:])


def test_reset_restores_full_canonical_deck():
    deck = Deck().shuffle(8)
    deck.deal(20)
    deck.reset()
    assert deck.cards == CANONICAL_ORDER
    assert deck.remaining == 52


def test_stacked_deck_deals_chosen_cards_first():
    deck = Deck.stacked(["As", "Kd", "2c"])
    assert [deck.deal_one().label for _ in range(3)] == ["As", "Kd", "2c"]
    assert set(deck.cards) == set(CANONICAL_ORDER)
    assert parse_label("As") not in deck.undealt()


def test_stacked_deck_rejects_duplicates():
    with pytest.raises(DuplicateCardError):
        Deck.stacked(["As", "As"])


def test_from_cards_requires_full_permutation():
    with pytest.raises(ValueError, match="exactly once"):
        Deck.from_cards(list(CANONICAL_ORDER[:51]))
    with pytest.raises(ValueError, match="exactly once"):
        Deck.from_cards(list(CANONICAL_ORDER[:51]) + [CANONICAL_ORDER[0]])
    reversed_deck = Deck.from_cards(list(reversed(CANONICAL_ORDER)))
    assert reversed_deck.deal_one().label == "As"


def test_iteration_covers_undealt_cards_only():
    deck = Deck()
    deck.deal(50)
    assert [card.label for card in deck] == ["Ac", "As"]


def test_shuffle_spreads_a_card_over_every_position():
    ace = parse_label("As")
    counts = [0] * DECK_SIZE
    for seed in range(2_000):
        counts[build_deck(seed).cards.index(ace)] += 1
    # 2000 shuffles over 52 slots averages about 38 per slot.
    assert all(count > 0 for count in counts)
    assert min(counts) >= 10
    assert max(counts) <= 80


def test_shuffle_moves_first_card_uniformly_within_a_private_rng():
    rng = random.Random(2024)
    first = [Deck().shuffle(rng).cards[0].label for _ in range(5_200)]
    # Each card should lead roughly 100 times.
    assert len(set(first)) == DECK_SIZE
    assert max(first.count(label) for label in set(first)) <= 180
