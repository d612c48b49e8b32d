from __future__ import annotations

from collections import Counter
from typing import List, Mapping, Sequence, Tuple

from .cards import HAND_SIZE, RANK_VALUE, Card
from .models import CardFeatures, HandCategory, HandClassification, Outcome, RepeatPattern, SeatResult

# Pure functions only: every call derives its result from the cards it is
# given. Wheel straights (A-5-4-3-2) are not sequences; the ace always ranks 14.


class HandEvaluationError(ValueError):
    """Raised when the evaluator is handed input it cannot rank."""


class InvalidHandSize(HandEvaluationError):
    def __init__(self, size: int) -> None:
        super().__init__(f"Hand must hold {HAND_SIZE} cards, got {size}")
        self.size = size


class EmptyTable(HandEvaluationError):
    def __init__(self) -> None:
        super().__init__("Table has no hands to resolve")


def extract_features(cards: Sequence[Card]) -> CardFeatures:
    ranks = tuple(sorted((card.value for card in cards), reverse=True))
    rank_counts = Counter(ranks)
    suit_counts = Counter(card.suit for card in cards)
    return CardFeatures(ranks=ranks, rank_counts=rank_counts, suit_counts=suit_counts)


def find_repeats(rank_counts: Mapping[int, int]) -> RepeatPattern:
    pairs: List[int] = []
    triple = None
    quad = None
    for rank, count in rank_counts.items():
        if count == 4:
            quad = rank
        elif count == 3:
            triple = rank
        elif count == 2:
            pairs.append(rank)
    return RepeatPattern(pairs=tuple(pairs), triple=triple, quad=quad)


def is_sequence(ranks: Sequence[int]) -> bool:
    """True when five descending ranks step down by exactly one each time."""
    if len(ranks) != HAND_SIZE:
        return False
    return all(high - 1 == low for high, low in zip(ranks, ranks[1:]))


def _without(ranks: Sequence[int], used: Sequence[int]) -> Tuple[int, ...]:
    return tuple(rank for rank in ranks if rank not in used)


def classify(cards: Sequence[Card]) -> HandClassification:
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(len(cards))

    features = extract_features(cards)
    ranks = features.ranks
    repeats = find_repeats(features.rank_counts)
    flush = features.is_flush
    sequence = is_sequence(ranks)

    if flush and sequence and ranks[0] == RANK_VALUE["A"]:
        return HandClassification(HandCategory.ROYAL_FLUSH)
    if flush and sequence:
        return HandClassification(HandCategory.STRAIGHT_FLUSH, (ranks[0],))
    if repeats.quad is not None:
        quad = (repeats.quad,)
        return HandClassification(HandCategory.FOUR_OF_A_KIND, quad, _without(ranks, quad))
    if repeats.triple is not None and repeats.pairs:
        return HandClassification(HandCategory.FULL_HOUSE, (repeats.triple, max(repeats.pairs)))
    if flush:
        return HandClassification(HandCategory.FLUSH, ranks)
    if sequence:
        return HandClassification(HandCategory.STRAIGHT, (ranks[0],))
    if repeats.triple is not None:
        triple = (repeats.triple,)
        return HandClassification(HandCategory.THREE_OF_A_KIND, triple, _without(ranks, triple))
    if len(repeats.pairs) == 2:
        pairs = tuple(sorted(repeats.pairs, reverse=True))
        return HandClassification(HandCategory.TWO_PAIR, pairs, _without(ranks, pairs))
    if repeats.pairs:
        pair = repeats.pairs
        return HandClassification(HandCategory.ONE_PAIR, pair, _without(ranks, pair))
    return HandClassification(HandCategory.HIGH_CARD, ranks)


def _compare_keys(first: Sequence[int], second: Sequence[int]) -> Outcome:
    for mine, theirs in zip(first, second):
        if mine > theirs:
            return Outcome.FIRST_WINS
        if mine < theirs:
            return Outcome.SECOND_WINS
    return Outcome.TIE


def compare(first: HandClassification, second: HandClassification) -> Outcome:
    if first.category > second.category:
        return Outcome.FIRST_WINS
    if first.category < second.category:
        return Outcome.SECOND_WINS

    outcome = _compare_keys(first.primary_keys, second.primary_keys)
    if outcome is not Outcome.TIE:
        return outcome
    return _compare_keys(first.secondary_keys, second.secondary_keys)


def resolve_table_winners(hands: Sequence[Sequence[Card]]) -> List[SeatResult]:
    """Return the seat(s) holding the best hand, lowest seat first.

    Seats are numbered by position in ``hands``. A strictly better hand clears
    any earlier ties; an equal hand joins them.
    """
    if not hands:
        raise EmptyTable()

    best: List[SeatResult] = []
    for seat, cards in enumerate(hands):
        result = SeatResult(seat=seat, classification=classify(cards))
        if not best:
            best.append(result)
            continue
        outcome = compare(best[0].classification, result.classification)
        if outcome is Outcome.TIE:
            best.append(result)
        elif outcome is Outcome.SECOND_WINS:
            best = [result]
    return best
