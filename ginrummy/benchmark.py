"""Headless bot-versus-bot simulation harness."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import numpy as np

from . import actions, lifecycle, scoreboard
from .game import reduce
from .opponent import DecisionProvider, HeuristicProvider, play_opponent_turn, play_player_turn
from .rules import DEFAULT_CONFIG, GinConfig
from .state import GameState, GameStatus, Player

__all__ = ["SimulationReport", "play_round", "run_simulation"]

logger = logging.getLogger(__name__)

TURN_LIMIT = 400


@dataclass(frozen=True, slots=True)
class SimulationReport:
    """Summary of a batch of simulated games."""

    history: scoreboard.MatchHistory
    games: int
    mean_points_per_round: float
    mean_knocker_deadwood: float
    mean_rounds_per_game: float


def play_round(
    game: GameState,
    player_provider: DecisionProvider,
    opponent_provider: DecisionProvider,
    *,
    rng: random.Random | None = None,
    config: GinConfig = DEFAULT_CONFIG,
) -> GameState:
    """Play turns until the round in progress is scored."""

    for _ in range(TURN_LIMIT):
        if game.status is not GameStatus.PLAYING:
            return game
        if game.round_state.turn_owner is Player.PLAYER:
            game = play_player_turn(game, player_provider, rng=rng, config=config)
        else:
            game = reduce(game, play_opponent_turn(game, opponent_provider), rng=rng, config=config)
    raise RuntimeError(f"round {game.round_number} did not finish within {TURN_LIMIT} turns")


def run_simulation(
    games: int,
    *,
    seed: int = 123,
    config: GinConfig = DEFAULT_CONFIG,
    player_provider: DecisionProvider | None = None,
    opponent_provider: DecisionProvider | None = None,
) -> SimulationReport:
    """Play ``games`` complete games and aggregate the results."""

    if games <= 0:
        raise ValueError("games must be positive")

    rng = random.Random(seed)
    player_provider = player_provider or HeuristicProvider(hand_size=config.hand_size)
    opponent_provider = opponent_provider or HeuristicProvider(hand_size=config.hand_size)
    history = scoreboard.MatchHistory()
    rounds_per_game: list[int] = []

    for game_number in range(1, games + 1):
        game = lifecycle.new_game(rng, config)
        while True:
            game = play_round(game, player_provider, opponent_provider, rng=rng, config=config)
            if game.last_result is not None:
                history.record(scoreboard.RoundSummary(game_number, game.round_number, game.last_result))
            if game.status is GameStatus.FINISHED:
                break
            game = reduce(game, actions.NextRound(), rng=rng, config=config)
        if game.game_winner is not None:
            history.record_game(game.game_winner)
        rounds_per_game.append(game.round_number)
        logger.debug("Game %d finished after %d round(s)", game_number, game.round_number)

    points = np.array([summary.result.points for summary in history.rounds], dtype=np.int64)
    knocker_deadwood = np.array(
        [summary.result.knocker_deadwood for summary in history.rounds], dtype=np.int64
    )
    return SimulationReport(
        history=history,
        games=games,
        mean_points_per_round=float(points.mean()) if points.size else 0.0,
        mean_knocker_deadwood=float(knocker_deadwood.mean()) if knocker_deadwood.size else 0.0,
        mean_rounds_per_game=float(np.mean(rounds_per_game)),
    )
