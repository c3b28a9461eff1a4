from __future__ import annotations

import pytest
import typer
from typer.testing import CliRunner

from ginrummy import benchmark
from ginrummy.benchmark import run_simulation
from ginrummy.cards import Card
from ginrummy.cli.main import _build_config, app
from ginrummy.cli.render import describe_result, format_hand
from ginrummy.rules import ExhaustedDeckPolicy
from ginrummy.scoring import score_knock
from ginrummy.state import Player

runner = CliRunner()


def test_simulate_prints_summary() -> None:
    result = runner.invoke(app, ["simulate", "--games", "1", "--seed", "3", "--target", "30"])

    assert result.exit_code == 0, result.output
    assert "Simulation Summary" in result.output


def test_play_can_quit_at_first_prompt() -> None:
    result = runner.invoke(app, ["play", "--seed", "4"], input="q\n")

    assert result.exit_code == 0, result.output
    assert "Your Melds" in result.output


def test_build_config_rejects_non_positive_target() -> None:
    with pytest.raises(typer.BadParameter):
        _build_config(0, ExhaustedDeckPolicy.KNOCK)


def test_format_hand_numbers_cards() -> None:
    text = format_hand([Card.from_code("AH"), Card.from_code("10S")], numbered=True)

    assert "1:" in text
    assert "2:" in text


def test_describe_result_mentions_points() -> None:
    assert "13" in describe_result(score_knock(Player.PLAYER, 5, 18))


def test_simulate_passes_options_through(monkeypatch) -> None:
    seen = {}

    def fake_run_simulation(games, *, seed, config):
        seen.update(games=games, seed=seed, config=config)
        return run_simulation(1, seed=seed, config=config)

    monkeypatch.setattr(benchmark, "run_simulation", fake_run_simulation)

    result = runner.invoke(
        app,
        ["simulate", "--games", "4", "--seed", "11", "--target", "25", "--exhausted-deck", "draw"],
    )

    assert result.exit_code == 0, result.output
    assert seen["games"] == 4
    assert seen["seed"] == 11
    assert seen["config"].target_score == 25
    assert seen["config"].exhausted_deck is ExhaustedDeckPolicy.DRAW
