from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from showdown.cards import HAND_SIZE, Card, parse_label
from showdown.evaluator import resolve_table_winners
from showdown.models import SeatResult

from .models import TallyConfig, WinTally

LOGGER = logging.getLogger("tally")

# Round text is one table per line: every seat's cards in seat order,
# separated by whitespace, e.g. "8C TS KC 9H 4S 7D 2S 5D 3S AC".


class RoundFormatError(ValueError):
    pass


def parse_round(line: str, seats: Optional[int] = None) -> List[List[Card]]:
    tokens = line.split()
    if not tokens:
        raise RoundFormatError("Round has no cards")
    if len(tokens) % HAND_SIZE:
        raise RoundFormatError(
            f"Round has {len(tokens)} cards, not a multiple of {HAND_SIZE}: {line.strip()!r}"
        )
    try:
        cards = [parse_label(token) for token in tokens]
    except ValueError as exc:
        raise RoundFormatError(f"{exc} in round {line.strip()!r}") from exc

    repeated = sorted({card.label for card in cards if cards.count(card) > 1})
    if repeated:
        raise RoundFormatError(f"Card dealt twice ({', '.join(repeated)}): {line.strip()!r}")

    hands = [cards[idx : idx + HAND_SIZE] for idx in range(0, len(cards), HAND_SIZE)]
    if seats is not None and len(hands) != seats:
        raise RoundFormatError(f"Expected {seats} seats, got {len(hands)}: {line.strip()!r}")
    return hands


def load_rounds(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        line = line.strip()
        if line:
            yield line


def play_round(line: str, config: TallyConfig) -> List[SeatResult]:
    hands = parse_round(line, seats=config.seats)
    return resolve_table_winners(hands)


def play_rounds(lines: Iterable[str], config: Optional[TallyConfig] = None) -> WinTally:
    config = config or TallyConfig()
    tally = WinTally()
    for number, line in enumerate(load_rounds(lines), start=1):
        try:
            winners = play_round(line, config)
        except RoundFormatError as exc:
            if config.strict:
                raise
            LOGGER.warning("Skipping round %d: %s", number, exc)
            tally.skipped_rounds += 1
            continue
        LOGGER.debug(
            "Round %d winners: %s",
            number,
            ", ".join(f"seat {r.seat + 1} ({r.classification.describe()})" for r in winners),
        )
        tally.record(winners)

    LOGGER.info(
        "Resolved %d rounds (%d tied, %d skipped)",
        tally.rounds,
        tally.tied_rounds,
        tally.skipped_rounds,
    )
    return tally
