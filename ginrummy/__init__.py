"""Top-level package for the Gin Rummy rules engine."""

from . import actions, cards, deck, game, lifecycle, melds, opponent, rules, scoreboard, scoring, state

__all__ = [
    "actions",
    "cards",
    "deck",
    "game",
    "lifecycle",
    "melds",
    "opponent",
    "rules",
    "scoreboard",
    "scoring",
    "state",
]
