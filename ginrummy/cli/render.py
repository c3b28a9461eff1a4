"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table

from .. import melds
from ..cards import Card, Suit, sort_hand
from ..scoring import ResultKind, RoundResult
from ..state import GameState, Player

_SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "magenta",
    Suit.CLUBS: "green",
    Suit.SPADES: "cyan",
}

_SEAT_NAMES = {Player.PLAYER: "You", Player.OPPONENT: "Opponent"}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    color = _SUIT_COLORS[card.suit]
    return f"[{color}]{card.label()}[/{color}]"


def format_hand(cards: Sequence[Card], *, numbered: bool = False) -> str:
    if not cards:
        return "—"
    if numbered:
        return "  ".join(f"[dim]{idx}[/dim]:{format_card(card)}" for idx, card in enumerate(cards, start=1))
    return " ".join(format_card(card) for card in cards)


def _meld_markup(hand: Sequence[Card]) -> str:
    analysis = melds.find_melds(hand)
    parts = [f"[bold]{meld.kind.value}[/bold] {format_hand(meld.cards)}" for meld in analysis.melds]
    total = sum(card.value for card in analysis.remaining)
    parts.append(f"[yellow]deadwood {total}[/yellow] {format_hand(analysis.remaining)}")
    return "\n".join(parts)


def describe_result(result: RoundResult) -> str:
    """Return a one-line description of how a round ended."""

    if result.kind is ResultKind.DRAW:
        return "Round drawn: the stock ran out."
    scorer = _SEAT_NAMES[result.scorer] if result.scorer is not None else "Nobody"
    knocker = _SEAT_NAMES[result.knocker]
    if result.kind in (ResultKind.GIN, ResultKind.OPPONENT_GIN):
        return f"{knocker} went gin! {scorer} +{result.points}."
    if result.kind is ResultKind.UNDERCUT:
        return (
            f"{knocker} knocked with {result.knocker_deadwood} but got undercut "
            f"({result.defender_deadwood}). {scorer} +{result.points}."
        )
    return (
        f"{knocker} knocked: deadwood {result.knocker_deadwood} vs "
        f"{result.defender_deadwood}. {scorer} +{result.points}."
    )


def render_state(game: GameState, *, reveal_opponent: bool = False, title: str = "Gin Rummy") -> RenderableType:
    """Return a Rich panel describing the current table state."""

    round_state = game.round_state
    table = Table(box=box.ROUNDED, expand=True)
    table.add_column("Seat", justify="left", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Hand", justify="left")

    player_hand = sort_hand(round_state.player_hand)
    opponent_hand = sort_hand(round_state.opponent_hand)
    for seat, hand in ((Player.PLAYER, player_hand), (Player.OPPONENT, opponent_hand)):
        name = _SEAT_NAMES[seat]
        if seat is round_state.turn_owner:
            name = f"[bold yellow]{name}[/bold yellow]"
        visible = seat is Player.PLAYER or reveal_opponent
        hand_display = format_hand(hand, numbered=seat is Player.PLAYER) if visible else f"{len(hand)} cards"
        table.add_row(name, str(game.score(seat)), hand_display)

    grid = Table.grid(expand=True)
    grid.add_column(justify="left")
    grid.add_row(f"[cyan]Round[/cyan]: {game.round_number}  [cyan]Status[/cyan]: {game.status.value}")
    grid.add_row(f"[cyan]Deck[/cyan]: {len(round_state.deck)} card(s)")
    top = round_state.top_discard
    grid.add_row(f"[cyan]Discard[/cyan]: {format_card(top) if top else '—'} ({len(round_state.discard_pile)} card(s))")
    grid.add_row(f"[cyan]Phase[/cyan]: {round_state.turn_phase.value}")

    components: list[RenderableType] = [
        table,
        Panel(grid, title="Table State", box=box.SQUARE, border_style="blue"),
        Panel(_meld_markup(round_state.player_hand), title="Your Melds", box=box.SQUARE, border_style="green"),
    ]
    if game.last_result is not None:
        components.append(Panel(describe_result(game.last_result), border_style="magenta"))
    return Panel(Group(*components), title=title, padding=(0, 1), border_style="cyan")
