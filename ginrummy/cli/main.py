"""Typer entry-point wiring for the Gin Rummy CLI."""

from __future__ import annotations

import random

import typer
from rich import box
from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from .. import actions, benchmark, lifecycle, rules
from ..cards import Card, sort_hand
from ..game import reduce
from ..log import setup_logging
from ..opponent import HeuristicProvider, play_opponent_turn
from ..rules import ExhaustedDeckPolicy, GinConfig
from ..state import GameState, GameStatus, Player, TurnPhase
from .render import describe_result, format_card, render_state

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _build_config(target: int, exhausted_deck: ExhaustedDeckPolicy) -> GinConfig:
    if target <= 0:
        raise typer.BadParameter("Target score must be positive.")
    return GinConfig(target_score=target, exhausted_deck=exhausted_deck)


def _describe_opponent_event(
    before: GameState, event: actions.OpponentTurnCompleted | actions.StockExhausted
) -> str:
    if isinstance(event, actions.StockExhausted):
        return "[cyan]Opponent[/cyan] found the stock empty."
    top = before.round_state.top_discard
    took_pile = top is not None and top in event.opponent_hand
    source = f"took {format_card(top)} from the pile" if took_pile else "drew from the deck"
    return f"[cyan]Opponent[/cyan] {source} and discarded {format_card(event.discard_pile[-1])}."


def _choose_draw() -> actions.Action | None:
    choice = Prompt.ask(
        "Draw from [bold]d[/bold]eck or [bold]p[/bold]ile ([bold]q[/bold] to quit)",
        choices=["d", "p", "q"],
        default="d",
        console=console,
    )
    if choice == "q":
        return None
    if choice == "p":
        return actions.DrawFromDiscard()
    return actions.DrawFromDeck()


def _choose_discard(hand: list[Card]) -> actions.DiscardCard:
    choices = [str(idx) for idx in range(1, len(hand) + 1)]
    idx = IntPrompt.ask("Card to discard", choices=choices, show_choices=False, console=console)
    return actions.DiscardCard(hand[idx - 1])


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for reproducible games (omit for randomness)."),
    target: int = typer.Option(100, min=1, help="Score that ends the game."),
    exhausted_deck: ExhaustedDeckPolicy = typer.Option(
        ExhaustedDeckPolicy.KNOCK,
        case_sensitive=False,
        help="How a round ends when the stock runs out.",
    ),
    log_level: str = typer.Option("WARNING", help="Logging level for engine messages."),
    debug: bool = typer.Option(False, "--debug", help="Reveal the opponent's hand."),
) -> None:
    """Play a game against the heuristic opponent."""

    setup_logging(log_level, console=Console(stderr=True))
    config = _build_config(target, exhausted_deck)
    rng = random.Random(seed)
    provider = HeuristicProvider(hand_size=config.hand_size)
    game = lifecycle.new_game(rng, config)

    while True:
        round_state = game.round_state
        if game.status is GameStatus.FINISHED:
            console.print(render_state(game, reveal_opponent=True))
            winner = "You win" if game.game_winner is Player.PLAYER else "Opponent wins"
            console.print(f"[bold green]Game over! {winner} {game.player_score}-{game.opponent_score}.[/bold green]")
            return
        if game.status is GameStatus.ROUND_OVER:
            console.print(render_state(game, reveal_opponent=True))
            if not Confirm.ask("Deal the next round?", default=True, console=console):
                return
            game = reduce(game, actions.NextRound(), rng=rng, config=config)
            continue

        if round_state.turn_owner is Player.OPPONENT:
            event = play_opponent_turn(game, provider)
            console.print(_describe_opponent_event(game, event))
            game = reduce(game, event, rng=rng, config=config)
            if game.last_result is not None:
                console.print(describe_result(game.last_result))
            continue

        console.print(render_state(game, reveal_opponent=debug))
        if round_state.turn_phase is TurnPhase.DRAW:
            draw = _choose_draw()
            if draw is None:
                return
            game = reduce(game, draw, rng=rng, config=config)
            continue

        hand = sort_hand(round_state.player_hand)
        game = reduce(game, _choose_discard(hand), rng=rng, config=config)
        if rules.can_knock(game.round_state, Player.PLAYER, config) and Confirm.ask(
            "Knock?", default=False, console=console
        ):
            game = reduce(game, actions.Knock(), rng=rng, config=config)
        else:
            game = reduce(game, actions.EndTurn(), rng=rng, config=config)


@app.command()
def simulate(
    games: int = typer.Option(20, min=1, help="Number of complete games to simulate."),
    seed: int = typer.Option(123, help="Random seed for the simulation."),
    target: int = typer.Option(100, min=1, help="Score that ends each game."),
    exhausted_deck: ExhaustedDeckPolicy = typer.Option(
        ExhaustedDeckPolicy.KNOCK,
        case_sensitive=False,
        help="How a round ends when the stock runs out.",
    ),
    log_level: str = typer.Option("WARNING", help="Logging level for engine messages."),
) -> None:
    """Run heuristic-versus-heuristic games and summarise the results."""

    setup_logging(log_level, console=Console(stderr=True))
    config = _build_config(target, exhausted_deck)
    report = benchmark.run_simulation(games, seed=seed, config=config)

    table = Table(title="Simulation Summary", box=box.SIMPLE_HEAVY)
    table.add_column("Seat", justify="center")
    table.add_column("Games", justify="right")
    table.add_column("Rounds", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Knocks", justify="right")
    table.add_column("Gins", justify="right")
    table.add_column("Undercuts", justify="right")

    for total in report.history.totals():
        table.add_row(
            total.player.value,
            str(report.history.games_won[total.player]),
            str(total.rounds_won),
            str(total.points),
            str(total.knocks),
            str(total.gins),
            str(total.undercuts),
        )

    console.print(table)
    console.print(
        f"[cyan]{len(report.history.rounds)} round(s) over {report.games} game(s); "
        f"{report.mean_points_per_round:.1f} points per round, "
        f"knocker deadwood {report.mean_knocker_deadwood:.1f}, "
        f"{report.mean_rounds_per_game:.1f} rounds per game.[/cyan]"
    )


def main() -> None:
    """Entry-point for ``python -m ginrummy``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
