from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from showdown.models import SeatResult


@dataclass
class TallyConfig:
    seats: Optional[int] = None
    report_player: int = 1
    strict: bool = True


@dataclass
class WinTally:
    # Seats are 0-based here; reports turn them into 1-based player numbers.
    wins: Counter = field(default_factory=Counter)
    rounds: int = 0
    tied_rounds: int = 0
    skipped_rounds: int = 0

    def record(self, results: Iterable[SeatResult]) -> None:
        winners = list(results)
        self.rounds += 1
        if len(winners) > 1:
            self.tied_rounds += 1
        for result in winners:
            self.wins[result.seat] += 1

    def wins_for(self, seat: int) -> int:
        return self.wins.get(seat, 0)

    def as_rows(self) -> List[Tuple[int, int]]:
        return sorted(self.wins.items())

    def reset(self) -> None:
        self.wins.clear()
        self.rounds = 0
        self.tied_rounds = 0
        self.skipped_rounds = 0
