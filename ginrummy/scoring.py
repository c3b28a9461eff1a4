"""Round scoring and cumulative game score bookkeeping."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from .rules import DEFAULT_CONFIG, GinConfig
from .state import DRAW_RESULT, GameState, GameStatus, Player

__all__ = [
    "ResultKind",
    "RoundResult",
    "score_knock",
    "score_gin",
    "drawn_round",
    "apply_result",
]

logger = logging.getLogger(__name__)


class ResultKind(str, Enum):
    KNOCK = "knock"
    GIN = "gin"
    UNDERCUT = "undercut"
    OPPONENT_GIN = "opponent_gin"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Outcome of a finished round.

    ``knocker`` is the side that ended the round (the gin holder for
    ``OPPONENT_GIN``); ``scorer`` is ``None`` only for a drawn round.
    """

    kind: ResultKind
    scorer: Player | None
    points: int
    knocker: Player
    knocker_deadwood: int
    defender_deadwood: int


def score_knock(
    knocker: Player,
    knocker_deadwood: int,
    defender_deadwood: int,
    config: GinConfig = DEFAULT_CONFIG,
) -> RoundResult:
    """Score a knock by comparing deadwood totals."""

    if knocker_deadwood == 0:
        kind, scorer = ResultKind.GIN, knocker
        points = defender_deadwood + config.gin_bonus
    elif knocker_deadwood < defender_deadwood:
        kind, scorer = ResultKind.KNOCK, knocker
        points = defender_deadwood - knocker_deadwood
    else:
        kind, scorer = ResultKind.UNDERCUT, knocker.other
        points = knocker_deadwood - defender_deadwood + config.undercut_bonus
    return RoundResult(
        kind=kind,
        scorer=scorer,
        points=points,
        knocker=knocker,
        knocker_deadwood=knocker_deadwood,
        defender_deadwood=defender_deadwood,
    )


def score_gin(winner: Player, loser_deadwood: int, config: GinConfig = DEFAULT_CONFIG) -> RoundResult:
    """Score a gin reached at the end of a turn; gin wins regardless of comparison."""

    return RoundResult(
        kind=ResultKind.OPPONENT_GIN,
        scorer=winner,
        points=loser_deadwood + config.gin_bonus,
        knocker=winner,
        knocker_deadwood=0,
        defender_deadwood=loser_deadwood,
    )


def drawn_round(knocker: Player, knocker_deadwood: int, defender_deadwood: int) -> RoundResult:
    return RoundResult(
        kind=ResultKind.DRAW,
        scorer=None,
        points=0,
        knocker=knocker,
        knocker_deadwood=knocker_deadwood,
        defender_deadwood=defender_deadwood,
    )


def apply_result(game: GameState, result: RoundResult, config: GinConfig = DEFAULT_CONFIG) -> GameState:
    """Credit ``result`` to the cumulative score and settle the game status.

    Reaching ``config.target_score`` finishes the game; the higher total wins
    and a tie goes to ``Player.PLAYER``.
    """

    if result.scorer is None:
        logger.info("Round %d drawn", game.round_number)
        return replace(
            game,
            status=GameStatus.ROUND_OVER,
            round_winner=DRAW_RESULT,
            last_result=result,
        )

    player_score = game.player_score
    opponent_score = game.opponent_score
    if result.scorer is Player.PLAYER:
        player_score += result.points
    else:
        opponent_score += result.points

    logger.info(
        "Round %d: %s by %s, %s scores %d (%d-%d)",
        game.round_number,
        result.kind.value,
        result.knocker.value,
        result.scorer.value,
        result.points,
        player_score,
        opponent_score,
    )

    if player_score >= config.target_score or opponent_score >= config.target_score:
        winner = Player.PLAYER if player_score >= opponent_score else Player.OPPONENT
        logger.info("Game over, %s wins", winner.value)
        return replace(
            game,
            player_score=player_score,
            opponent_score=opponent_score,
            status=GameStatus.FINISHED,
            round_winner=result.scorer,
            game_winner=winner,
            last_result=result,
        )

    return replace(
        game,
        player_score=player_score,
        opponent_score=opponent_score,
        status=GameStatus.ROUND_OVER,
        round_winner=result.scorer,
        last_result=result,
    )
