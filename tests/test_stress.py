from holdem.compare import Outcome, compare, showdown
from holdem.dealing import MAX_PLAYERS
from holdem.models import DealConfig

from .helpers import all_cards_in_play, deal_full_hand


def test_thousand_seeded_hands_deal_and_resolve_cleanly():
    config = DealConfig(burn_before_street=True)
    split_pots = 0
    for seed in range(1_000, 2_000):
        n_players = 2 + seed % (MAX_PLAYERS - 1)
        deck, holes, community = deal_full_hand(n_players, seed, config)
        in_play = all_cards_in_play(holes, community)
        assert len(set(in_play)) == len(in_play)

        result = showdown(holes, community)
        assert sorted(result.winners + result.losers) == list(range(n_players))
        best = result.best
        for seat in result.winners:
            assert compare(result.hands[seat], best) == Outcome.EQUAL
        for seat in result.losers:
            assert compare(result.hands[seat], best) == Outcome.LESS
        if result.is_split:
            split_pots += 1

    assert split_pots < 1_000
