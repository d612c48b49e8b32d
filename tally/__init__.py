"""Round driver: parses round text, resolves each table and counts wins."""

from .models import TallyConfig, WinTally
from .rounds import RoundFormatError, load_rounds, parse_round, play_round, play_rounds

__all__ = [
    "TallyConfig",
    "WinTally",
    "RoundFormatError",
    "load_rounds",
    "parse_round",
    "play_round",
    "play_rounds",
]
