"""Five-card hand ranking: classify hands and pick the winners at a table."""

from .cards import Card, HAND_SIZE, RANKS, SUITS, build_deck, deal, parse_cards, parse_label
from .evaluator import (
    EmptyTable,
    HandEvaluationError,
    InvalidHandSize,
    classify,
    compare,
    extract_features,
    find_repeats,
    is_sequence,
    resolve_table_winners,
)
from .models import CardFeatures, HandCategory, HandClassification, Outcome, RepeatPattern, SeatResult

__all__ = [
    "Card",
    "HAND_SIZE",
    "RANKS",
    "SUITS",
    "build_deck",
    "deal",
    "parse_cards",
    "parse_label",
    "EmptyTable",
    "HandEvaluationError",
    "InvalidHandSize",
    "classify",
    "compare",
    "extract_features",
    "find_repeats",
    "is_sequence",
    "resolve_table_winners",
    "CardFeatures",
    "HandCategory",
    "HandClassification",
    "Outcome",
    "RepeatPattern",
    "SeatResult",
]
