#!/usr/bin/env python3
"""Deal random five-card showdown rounds, one table per line.

Each round shuffles a fresh deck and deals five cards to every seat, so the
output can be piped straight into the tally driver.

Example:
    python scripts/deal_rounds.py --rounds 1000 --seats 2 | python -m tally -
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterator, List, Optional

from showdown.cards import HAND_SIZE, SUITS, RANKS, build_deck, cards_to_labels, deal

LOGGER = logging.getLogger("deal_rounds")


def deal_rounds(rounds: int, seats: int, seed: Optional[int] = None) -> Iterator[str]:
    if seats * HAND_SIZE > len(RANKS) * len(SUITS):
        raise ValueError(f"Cannot deal {seats} hands from one deck")
    for number in range(rounds):
        deck = build_deck(None if seed is None else seed + number)
        labels: List[str] = []
        for _ in range(seats):
            labels.extend(cards_to_labels(deal(deck, HAND_SIZE)))
        yield " ".join(labels)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random showdown rounds")
    parser.add_argument("--rounds", type=int, default=1_000)
    parser.add_argument("--seats", type=int, default=2)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    for line in deal_rounds(args.rounds, args.seats, args.seed):
        sys.stdout.write(line + "\n")
    LOGGER.info("Dealt %d rounds for %d seats", args.rounds, args.seats)


if __name__ == "__main__":
    main()
