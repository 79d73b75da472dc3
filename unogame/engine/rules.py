"""UNO rules: actions, card legality and special-card effects."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Union

from unogame.engine.card import Card, CardType, Color
from unogame.engine.errors import InvalidColorChoice

if TYPE_CHECKING:
    from unogame.engine.game_state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayCard:
    """Action: play the card at ``hand_index`` (0-based) from the current hand."""

    hand_index: int


@dataclass(frozen=True)
class DrawCard:
    """Action: draw one card and end the turn."""


Action = Union[PlayCard, DrawCard]

ColorChooser = Callable[[], Color]
Effect = Callable[["GameState", Card, ColorChooser], None]


def can_play(card: Card, top_card: Card) -> bool:
    """Check if ``card`` may be played on ``top_card``.

    A played wild's chosen color is carried on ``top_card.color``.
    """
    if card.is_wild:
        return True
    if card.color == top_card.color:
        return True
    if card.is_number and top_card.is_number:
        return card.number == top_card.number
    if not card.is_number and not top_card.is_number:
        return card.kind == top_card.kind
    return False


def resolve_color(choose_color: ColorChooser) -> Color:
    """Ask the input boundary for a wild color and validate the answer."""
    choice = choose_color()
    if isinstance(choice, Color):
        return choice
    try:
        return Color(str(choice).strip().lower())
    except ValueError:
        raise InvalidColorChoice(
            f"Invalid color: {choice!r}",
            {"allowed": ", ".join(c.value for c in Color)},
        ) from None


def _skip(game: GameState, card: Card, choose_color: ColorChooser) -> None:
    game.record("Next player is skipped!")
    game.advance_turn()


def _reverse(game: GameState, card: Card, choose_color: ColorChooser) -> None:
    game.record("Direction is reversed!")
    game.reverse_direction()


def _draw_two(game: GameState, card: Card, choose_color: ColorChooser) -> None:
    game.advance_turn()
    victim = game.current_player
    game.record(f"{victim.name} draws two cards!")
    game.deal(victim, 2)


def _wild(game: GameState, card: Card, choose_color: ColorChooser) -> None:
    color = resolve_color(choose_color)
    game.discard_pile.replace_top(card.with_color(color))
    game.record(f"{game.current_player.name} chose {color.value}")


def _wild_draw_four(game: GameState, card: Card, choose_color: ColorChooser) -> None:
    _wild(game, card, choose_color)
    game.advance_turn()
    victim = game.current_player
    game.record(f"{victim.name} draws four cards!")
    game.deal(victim, 4)


STANDARD_EFFECTS: Dict[CardType, Effect] = {
    CardType.SKIP: _skip,
    CardType.REVERSE: _reverse,
    CardType.DRAW_TWO: _draw_two,
    CardType.WILD: _wild,
    CardType.WILD_DRAW_FOUR: _wild_draw_four,
}


@dataclass(frozen=True)
class RuleSet:
    """The legality check and effect table a game is played with.

    Card kinds missing from ``effects`` (number cards) have no effect.
    """

    can_play: Callable[[Card, Card], bool] = can_play
    effects: Dict[CardType, Effect] = field(default_factory=lambda: dict(STANDARD_EFFECTS))
    hand_size: int = 7

    def apply_effect(self, game: GameState, card: Card, choose_color: ColorChooser) -> None:
        effect = self.effects.get(card.kind)
        if effect is not None:
            logger.debug("Applying %s effect", card.kind.value)
            effect(game, card, choose_color)


STANDARD_RULES = RuleSet()
