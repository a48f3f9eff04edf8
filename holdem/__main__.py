from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO

from .dealing import MAX_PLAYERS, MIN_PLAYERS
from .errors import HoldemError
from .models import DealConfig
from .table import Dealer

LOGGER = logging.getLogger("holdem.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class SimulationConfig:
    players: int = 6
    hands: int = 1
    seed: Optional[int] = None
    burn: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deal Texas Hold'em hands and resolve the showdown")
    parser.add_argument("--players", type=int, default=6, help=f"Players per hand ({MIN_PLAYERS}-{MAX_PLAYERS})")
    parser.add_argument("--hands", type=int, default=1, help="Number of independent hands to deal")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Shuffle seed for the first hand; hand i uses seed + i (default: time based)",
    )
    parser.add_argument("--burn", action="store_true", help="Burn one card before each street")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    return parser


def run(config: SimulationConfig, out: Optional[TextIO] = None) -> List[List[int]]:
    """Deal ``config.hands`` hands to showdown and print each one; returns the winners."""
    if config.hands < 1:
        raise ValueError("At least one hand must be dealt")
    if out is None:
        out = sys.stdout
    dealer = Dealer(DealConfig(burn_before_street=config.burn))
    all_winners: List[List[int]] = []
    for idx in range(config.hands):
        seed = None if config.seed is None else config.seed + idx
        ctx = dealer.start_hand(config.players, seed=seed)
        dealer.run_out(ctx)
        result = dealer.showdown(ctx)

        print(f"{ctx.hand_id} (seed {ctx.seed})", file=out)
        print(f"  Board: {' '.join(ctx.board.labels)}", file=out)
        for seat, hand in sorted(result.hands.items()):
            marker = "*" if seat in result.winners else " "
            hole = " ".join(ctx.holes[seat].labels)
            print(f" {marker} Seat {seat}: {hole}  {hand.describe()}", file=out)
        label = "Split pot" if result.is_split else "Winner"
        print(f"  {label}: {', '.join(f'seat {seat}' for seat in result.winners)}", file=out)
        all_winners.append(list(result.winners))
    return all_winners


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    config = SimulationConfig(players=args.players, hands=args.hands, seed=args.seed, burn=args.burn)
    try:
        run(config)
    except (HoldemError, ValueError) as exc:
        LOGGER.error("Cannot deal: %s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
