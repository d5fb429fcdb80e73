"""
Tests for the interactive session.
"""

from unittest.mock import patch

import numpy as np
import pytest

from game_rating.core import PolicyKind
from game_rating.session import MENU, SessionRunner, SessionState, main


def test_half_loss_penalty_session(scripted_io, fake_rng):
    """Variant 2, both players start at 1000 and play three games each."""
    io = scripted_io([
        "2",
        "A", "1000",
        "B", "1000",
        "X", "100", "Y", "101", "Z", "200",
        "X", "300", "Y", "1", "Z", "50",
    ])
    # Win, Loss, Win for A; Loss, Loss, Win for B
    runner = SessionRunner(io=io, rng=fake_rng([0, 1, 0, 1, 1, 0]))

    assert runner.run() is SessionState.DONE

    a, b = runner.player1, runner.player2
    assert a.policy.kind is PolicyKind.HALF_LOSS_PENALTY
    assert a.games_played == 3
    assert b.games_played == 3
    assert [record.points_change for record in a.history] == [100, -50, 200]
    assert [record.points_change for record in b.history] == [-150, 0, 50]
    assert a.rating == 1250
    assert b.rating == 900

    assert io.output == list(MENU) + [
        "Game result for game 1: Win",
        "Game result for game 2: Loss",
        "Game result for game 3: Win",
        "Game history for A (Standard mode):",
        "Game 1: Against X, Win with rating 100. Points Change: 100",
        "Game 2: Against Y, Loss with rating 101. Points Change: -50",
        "Game 3: Against Z, Win with rating 200. Points Change: 200",
        "Total games played: 3, Current Rating: 1250",
        "Game result for game 1: Loss",
        "Game result for game 2: Loss",
        "Game result for game 3: Win",
        "Game history for B (Standard mode):",
        "Game 1: Against X, Loss with rating 300. Points Change: -150",
        "Game 2: Against Y, Loss with rating 1. Points Change: 0",
        "Game 3: Against Z, Win with rating 50. Points Change: 50",
        "Total games played: 3, Current Rating: 900",
    ]


def test_seeded_session_rating_matches_history(scripted_io):
    answers = ["3", "A", "1000", "B", "1000"] + ["Opp", "50"] * 6
    runner = SessionRunner(io=scripted_io(answers), rng=np.random.default_rng(1234))
    runner.run()

    for player in (runner.player1, runner.player2):
        assert player.games_played == 3
        assert player.rating == 1000 + sum(record.points_change for record in player.history)


def test_seeded_sessions_are_reproducible(scripted_io):
    answers = ["1", "A", "1500", "B", "1500"] + ["Opp", "1200"] * 6
    first = SessionRunner(io=scripted_io(answers), rng=np.random.default_rng(99))
    second = SessionRunner(io=scripted_io(answers), rng=np.random.default_rng(99))
    first.run()
    second.run()

    assert first.io.output == second.io.output


def test_skipped_game_during_session(scripted_io, fake_rng):
    io = scripted_io([
        "1",
        "A", "1000",
        "B", "1000",
        "X", "oops", "Y", "100", "Z", "100",
        "X", "100", "Y", "100", "Z", "100",
    ])
    runner = SessionRunner(io=io, rng=fake_rng([0] * 5))
    runner.run()

    assert "Invalid rating. Game 1 not recorded." in io.output
    assert runner.player1.games_played == 2
    assert runner.player2.games_played == 3


@pytest.mark.parametrize("choice", ["0", "4", "abc", "", "1.0"])
def test_invalid_choice_aborts(scripted_io, choice):
    io = scripted_io([choice, "A", "1000"])
    runner = SessionRunner(io=io)

    assert runner.run() is SessionState.DONE
    assert io.output == list(MENU) + ["Invalid choice. Exiting."]
    assert runner.player1 is None
    assert runner.player2 is None
    # Nothing past the menu is read
    assert io.prompts == [""]


def test_invalid_rating_player1_aborts(scripted_io):
    io = scripted_io(["1", "A", "lots", "B", "1000"])
    runner = SessionRunner(io=io)
    runner.run()

    assert io.output[-1] == "Invalid initial rating for player 1. Exiting."
    assert io.prompts == ["", "Enter player name 1: ", "Enter initial rating for player 1: "]
    assert runner.player1 is None


def test_invalid_rating_player2_aborts(scripted_io):
    io = scripted_io(["2", "A", "1000", "B", "none"])
    runner = SessionRunner(io=io)
    runner.run()

    assert io.output[-1] == "Invalid initial rating for player 2. Exiting."
    assert runner.player1 is None
    assert runner.player2 is None


def test_custom_games_per_player(scripted_io, fake_rng):
    io = scripted_io(["1", "A", "0", "B", "0", "X", "10", "Y", "20"])
    runner = SessionRunner(io=io, rng=fake_rng([0, 1]), games_per_player=1)
    runner.run()

    assert runner.player1.rating == 10
    assert runner.player2.rating == -20


def test_main_returns_zero_on_abort(capsys):
    with patch("builtins.input", side_effect=["9"]):
        assert main(seed=0) == 0

    out = capsys.readouterr().out
    assert out.endswith("Invalid choice. Exiting.\n")


def test_main_handles_end_of_input(capsys):
    with patch("builtins.input", side_effect=EOFError):
        assert main() == 0

    assert "Invalid choice. Exiting." in capsys.readouterr().out
