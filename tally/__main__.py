import argparse
import logging
import sys
from typing import List, Optional

from .models import TallyConfig
from .rounds import play_rounds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count five-card showdown wins per seat")
    parser.add_argument("rounds", help="File with one round per line ('-' reads stdin)")
    parser.add_argument("--seats", type=int, default=None, help="Expected seats per round")
    parser.add_argument("--player", type=int, default=1, help="1-based player to report")
    parser.add_argument("--all", action="store_true", help="Report every seat's win count")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip malformed rounds with a warning instead of stopping",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every round's winners")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.player < 1:
        parser.error("--player must be 1 or greater")
    if args.seats is not None and args.seats < 1:
        parser.error("--seats must be 1 or greater")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = TallyConfig(seats=args.seats, report_player=args.player, strict=not args.lenient)

    if args.rounds == "-":
        tally = play_rounds(sys.stdin, config)
    else:
        with open(args.rounds, encoding="utf-8") as handle:
            tally = play_rounds(handle, config)

    if args.all:
        for seat, wins in tally.as_rows():
            print(f"Player {seat + 1} win count: {wins}")
    else:
        player = config.report_player
        print(f"Player {player} win count: {tally.wins_for(player - 1)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
