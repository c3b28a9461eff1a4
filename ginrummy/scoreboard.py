"""Helpers for tracking multi-round match results."""

from __future__ import annotations

from dataclasses import dataclass, field

from .scoring import ResultKind, RoundResult
from .state import Player

__all__ = ["RoundSummary", "PlayerMatchTotal", "MatchHistory"]


@dataclass(frozen=True, slots=True)
class RoundSummary:
    """Summary captured after a single round."""

    game_number: int
    round_number: int
    result: RoundResult


@dataclass(frozen=True, slots=True)
class PlayerMatchTotal:
    """Aggregate totals accumulated for one seat across all recorded rounds."""

    player: Player
    rounds_won: int
    points: int
    gins: int
    undercuts: int
    knocks: int


@dataclass(slots=True)
class MatchHistory:
    """Mutable tracker that accumulates round summaries for a match."""

    rounds: list[RoundSummary] = field(default_factory=list)
    games_won: dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player})
    _wins: dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player}, repr=False)
    _points: dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player}, repr=False)
    _gins: dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player}, repr=False)
    _undercuts: dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player}, repr=False)
    _knocks: dict[Player, int] = field(default_factory=lambda: {p: 0 for p in Player}, repr=False)

    def record(self, summary: RoundSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        if summary.round_number <= 0:
            raise ValueError("round_number must be positive")
        self.rounds.append(summary)
        result = summary.result
        if result.kind is not ResultKind.DRAW:
            self._knocks[result.knocker] += 1
        if result.scorer is None:
            return
        self._wins[result.scorer] += 1
        self._points[result.scorer] += result.points
        if result.kind in (ResultKind.GIN, ResultKind.OPPONENT_GIN):
            self._gins[result.scorer] += 1
        elif result.kind is ResultKind.UNDERCUT:
            self._undercuts[result.scorer] += 1

    def record_game(self, winner: Player) -> None:
        self.games_won[winner] += 1

    @property
    def drawn_rounds(self) -> int:
        return sum(1 for summary in self.rounds if summary.result.kind is ResultKind.DRAW)

    def totals(self) -> list[PlayerMatchTotal]:
        """Return the cumulative totals for each seat in seating order."""

        return [
            PlayerMatchTotal(
                player=player,
                rounds_won=self._wins[player],
                points=self._points[player],
                gins=self._gins[player],
                undercuts=self._undercuts[player],
                knocks=self._knocks[player],
            )
            for player in Player
        ]
