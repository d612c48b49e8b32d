from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Mapping, Optional, Tuple


class HandCategory(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


class Outcome(str, Enum):
    FIRST_WINS = "FIRST_WINS"
    SECOND_WINS = "SECOND_WINS"
    TIE = "TIE"

    def reversed(self) -> "Outcome":
        if self is Outcome.FIRST_WINS:
            return Outcome.SECOND_WINS
        if self is Outcome.SECOND_WINS:
            return Outcome.FIRST_WINS
        return Outcome.TIE


@dataclass(frozen=True)
class CardFeatures:
    # ranks are sorted high to low; duplicates are kept.
    ranks: Tuple[int, ...]
    rank_counts: Mapping[int, int]
    suit_counts: Mapping[str, int]

    @property
    def is_flush(self) -> bool:
        return len(self.suit_counts) == 1


@dataclass(frozen=True)
class RepeatPattern:
    pairs: Tuple[int, ...] = ()
    triple: Optional[int] = None
    quad: Optional[int] = None


@dataclass(frozen=True)
class HandClassification:
    """Category plus the ordered rank keys used to break ties inside it.

    ``primary_keys`` hold the ranks that make the category (the trips then the
    pair for a full house); ``secondary_keys`` hold the kickers, high to low.
    """

    category: HandCategory
    primary_keys: Tuple[int, ...] = ()
    secondary_keys: Tuple[int, ...] = ()

    @property
    def strength(self) -> Tuple[HandCategory, Tuple[int, ...], Tuple[int, ...]]:
        return (self.category, self.primary_keys, self.secondary_keys)

    def describe(self) -> str:
        keys = " ".join(str(value) for value in self.primary_keys + self.secondary_keys)
        return f"{self.category.label} [{keys}]" if keys else self.category.label


@dataclass(frozen=True)
class SeatResult:
    seat: int
    classification: HandClassification
