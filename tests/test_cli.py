import io

import pytest

from holdem.__main__ import SimulationConfig, build_parser, main, run


def test_run_prints_each_hand_and_returns_winners():
    out = io.StringIO()
    winners = run(SimulationConfig(players=4, hands=3, seed=100), out=out)
    text = out.getvalue()
    assert len(winners) == 3
    assert all(winner and set(winner) <= {0, 1, 2, 3} for winner in winners)
    assert text.count("Board:") == 3
    assert "(seed 100)" in text and "(seed 102)" in text
    assert text.count("Seat 3:") == 3


def test_run_is_reproducible_with_seed():
    first, second = io.StringIO(), io.StringIO()
    run(SimulationConfig(players=5, seed=9), out=first)
    run(SimulationConfig(players=5, seed=9), out=second)
    strip_ids = lambda text: [line for line in text.splitlines() if not line.startswith("H-")]
    assert strip_ids(first.getvalue()) == strip_ids(second.getvalue())


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.players == 6
    assert args.hands == 1
    assert args.seed is None
    assert args.burn is False


def test_main_deals_with_burns(capsys):
    assert main(["--players", "3", "--seed", "4", "--burn"]) == 0
    captured = capsys.readouterr()
    assert "Board:" in captured.out
    assert "Winner" in captured.out or "Split pot" in captured.out


def test_main_rejects_bad_player_count(caplog):
    assert main(["--players", "11", "--seed", "1"]) == 2
    assert any("Player count" in record.getMessage() for record in caplog.records)


def test_main_rejects_zero_hands():
    assert main(["--hands", "0"]) == 2


def test_parser_rejects_non_integer_players():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--players", "many"])


def test_run_writes_to_current_stdout_by_default(capsys):
    run(SimulationConfig(players=2, seed=3))
    assert "Board:" in capsys.readouterr().out


def test_parser_accepts_log_level_in_any_case():
    assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"


def test_parser_rejects_unknown_log_level():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--log-level", "verbose"])
    assert excinfo.value.code == 2
