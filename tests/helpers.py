from __future__ import annotations

from typing import List

from showdown.cards import Card, parse_cards
from showdown.evaluator import classify
from showdown.models import HandClassification


def hand(labels: str) -> List[Card]:
    """Build a hand from space-separated labels, e.g. "AH KH QH JH TH"."""
    return parse_cards(labels.split())


def classify_labels(labels: str) -> HandClassification:
    return classify(hand(labels))


def round_line(*hands: str) -> str:
    """Join per-seat hands (seat order) into one line of round text."""
    return " ".join(hands)
