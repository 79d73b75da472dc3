"""Game engine for UNO."""

from unogame.engine.card import Card, CardType, Color, create_deck
from unogame.engine.deck import Deck, DiscardPile
from unogame.engine.errors import (
    EmptyState,
    GameOver,
    IllegalMove,
    IndexOutOfRange,
    InvalidColorChoice,
    UnoError,
)
from unogame.engine.game_state import Direction, GameState, TurnResult
from unogame.engine.player import Player
from unogame.engine.rules import (
    STANDARD_RULES,
    Action,
    DrawCard,
    PlayCard,
    RuleSet,
    can_play,
)

__all__ = [
    "Card",
    "CardType",
    "Color",
    "create_deck",
    "Deck",
    "DiscardPile",
    "Player",
    "Direction",
    "GameState",
    "TurnResult",
    "Action",
    "PlayCard",
    "DrawCard",
    "RuleSet",
    "STANDARD_RULES",
    "can_play",
    "UnoError",
    "IllegalMove",
    "IndexOutOfRange",
    "EmptyState",
    "InvalidColorChoice",
    "GameOver",
]
