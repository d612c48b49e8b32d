import io
import logging

import pytest

from showdown.models import HandCategory
from tally.__main__ import main
from tally.models import TallyConfig, WinTally
from tally.rounds import RoundFormatError, load_rounds, parse_round, play_round, play_rounds

from .helpers import round_line

ROUNDS = "\n".join(
    [
        round_line("8C TS KC 9H 4S", "7D 2S 5D 3S AC"),
        round_line("5C AD 5D AC 9C", "7C 5H 8D TD KS"),
        round_line("3H 7H 6S KC JS", "QH TD JC 2D 8S"),
        "",
        round_line("AH AD 9C 8S 2H", "AS AC 9D 8H 2D"),
    ]
)


def test_parse_round_splits_hands_by_seat():
    hands = parse_round(round_line("8C TS KC 9H 4S", "7D 2S 5D 3S AC"))
    assert len(hands) == 2
    assert [card.label for card in hands[1]] == ["7D", "2S", "5D", "3S", "AC"]


def test_load_rounds_skips_blank_lines():
    assert list(load_rounds(io.StringIO(" AH\n\n  \nKD \n"))) == ["AH", "KD"]


def test_play_round_returns_winning_seats():
    winners = play_round(round_line("5C AD 5D AC 9C", "7C 5H 8D TD KS"), TallyConfig())
    assert [w.seat for w in winners] == [0]
    assert winners[0].classification.category is HandCategory.TWO_PAIR


def test_play_rounds_counts_wins_and_ties():
    tally = play_rounds(io.StringIO(ROUNDS))
    assert tally.rounds == 4
    assert tally.tied_rounds == 1
    # Seat 1 takes round 1 on ace high, seat 0 takes rounds 2 and 3; round 4
    # is split.
    assert tally.wins_for(0) == 3
    assert tally.wins_for(1) == 2
    assert tally.as_rows() == [(0, 3), (1, 2)]


def test_strict_run_stops_on_malformed_round():
    lines = [round_line("8C TS KC 9H 4S", "7D 2S 5D 3S AC"), "AH KH QH"]
    with pytest.raises(RoundFormatError):
        play_rounds(lines)


def test_lenient_run_skips_malformed_round(caplog):
    lines = [round_line("8C TS KC 9H 4S", "7D 2S 5D 3S AC"), "AH KH QH"]
    with caplog.at_level(logging.WARNING, logger="tally"):
        tally = play_rounds(lines, TallyConfig(strict=False))
    assert tally.rounds == 1
    assert tally.skipped_rounds == 1
    assert "Skipping round 2" in caplog.text


def test_win_tally_reset():
    tally = play_rounds(io.StringIO(ROUNDS))
    tally.reset()
    assert tally == WinTally()


def test_cli_reports_first_player(tmp_path, capsys):
    path = tmp_path / "rounds.txt"
    path.write_text(ROUNDS + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "Player 1 win count: 3"


def test_cli_reports_every_seat(tmp_path, capsys):
    path = tmp_path / "rounds.txt"
    path.write_text(ROUNDS, encoding="utf-8")
    assert main([str(path), "--all", "--seats", "2"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Player 1 win count: 3",
        "Player 2 win count: 2",
    ]


def test_lenient_run_skips_short_hands_and_repeats():
    lines = [
        "AH KH QH JH 2C 3C 4C 5C",
        "AH AH AH AH AH",
        round_line("8C TS KC 9H 4S", "7D 2S 5D 3S AC"),
    ]
    tally = play_rounds(lines, TallyConfig(strict=False))
    assert tally.rounds == 1
    assert tally.skipped_rounds == 2
    assert tally.wins_for(1) == 1


def test_cli_rejects_player_below_one(tmp_path, capsys):
    path = tmp_path / "rounds.txt"
    path.write_text(ROUNDS, encoding="utf-8")
    for player in ("0", "-2"):
        with pytest.raises(SystemExit) as excinfo:
            main([str(path), "--player", player])
        assert excinfo.value.code == 2
        assert "--player must be 1 or greater" in capsys.readouterr().err
