from __future__ import annotations

from dataclasses import replace

import pytest

from ginrummy.rules import GinConfig
from ginrummy.scoring import ResultKind, apply_result, drawn_round, score_gin, score_knock
from ginrummy.state import DRAW_RESULT, GameState, GameStatus, Player


@pytest.fixture
def fresh_game(make_round) -> GameState:
    round_state = make_round(
        ("AH", "2H", "3H", "4S", "4D", "4C", "5D", "9C", "10C", "JC"),
        ("6H", "7H", "8H", "9H", "2S", "2D", "2C", "3S", "5S", "10S"),
    )
    return GameState(round_state=round_state)


@pytest.mark.parametrize(
    ("knocker_dw", "defender_dw", "kind", "scorer", "points"),
    [
        (5, 18, ResultKind.KNOCK, Player.PLAYER, 13),
        (0, 14, ResultKind.GIN, Player.PLAYER, 39),
        (8, 5, ResultKind.UNDERCUT, Player.OPPONENT, 28),
        (7, 7, ResultKind.UNDERCUT, Player.OPPONENT, 25),
        (0, 0, ResultKind.GIN, Player.PLAYER, 25),
    ],
)
def test_score_knock_outcomes(
    knocker_dw: int, defender_dw: int, kind: ResultKind, scorer: Player, points: int
) -> None:
    result = score_knock(Player.PLAYER, knocker_dw, defender_dw)

    assert result.kind is kind
    assert result.scorer is scorer
    assert result.points == points
    assert result.knocker is Player.PLAYER


def test_bonuses_come_from_config() -> None:
    config = GinConfig(gin_bonus=20, undercut_bonus=10)

    assert score_knock(Player.OPPONENT, 0, 6, config).points == 26
    assert score_knock(Player.OPPONENT, 9, 4, config).points == 15
    assert score_gin(Player.OPPONENT, 33, config).points == 53


def test_score_gin_credits_the_winner() -> None:
    result = score_gin(Player.OPPONENT, 33)

    assert result.kind is ResultKind.OPPONENT_GIN
    assert result.scorer is Player.OPPONENT
    assert result.points == 58
    assert result.knocker_deadwood == 0


def test_apply_result_below_target_ends_the_round(fresh_game: GameState) -> None:
    after = apply_result(fresh_game, score_knock(Player.PLAYER, 5, 18))

    assert after.status is GameStatus.ROUND_OVER
    assert after.round_winner is Player.PLAYER
    assert after.player_score == 13
    assert after.opponent_score == 0
    assert after.game_winner is None
    assert after.last_result is not None and after.last_result.points == 13


def test_apply_result_reaching_target_finishes_the_game(fresh_game: GameState) -> None:
    game = replace(fresh_game, player_score=40, opponent_score=80)

    after = apply_result(game, score_knock(Player.PLAYER, 8, 5))

    assert after.status is GameStatus.FINISHED
    assert after.opponent_score == 108
    assert after.game_winner is Player.OPPONENT


def test_tie_at_target_goes_to_player(fresh_game: GameState) -> None:
    game = replace(fresh_game, player_score=90, opponent_score=100)

    after = apply_result(game, score_knock(Player.PLAYER, 2, 12))

    assert after.player_score == after.opponent_score == 100
    assert after.status is GameStatus.FINISHED
    assert after.game_winner is Player.PLAYER


def test_target_score_is_configurable(fresh_game: GameState) -> None:
    after = apply_result(fresh_game, score_knock(Player.PLAYER, 5, 18), GinConfig(target_score=10))

    assert after.status is GameStatus.FINISHED
    assert after.game_winner is Player.PLAYER


def test_drawn_round_scores_nothing(fresh_game: GameState) -> None:
    after = apply_result(fresh_game, drawn_round(Player.OPPONENT, 30, 12))

    assert after.status is GameStatus.ROUND_OVER
    assert after.round_winner == DRAW_RESULT
    assert (after.player_score, after.opponent_score) == (0, 0)
    assert after.last_result is not None and after.last_result.kind is ResultKind.DRAW
