"""Game state and turn engine for UNO."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from unogame.engine.card import Card, Color
from unogame.engine.deck import Deck, DiscardPile
from unogame.engine.errors import GameOver, IllegalMove, InvalidColorChoice
from unogame.engine.player import Player
from unogame.engine.rules import (
    STANDARD_RULES,
    Action,
    ColorChooser,
    DrawCard,
    PlayCard,
    RuleSet,
    resolve_color,
)

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 10


class Direction(int, Enum):
    """Turn direction, as the step applied to the seat index."""

    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1

    def reversed(self) -> "Direction":
        return Direction(-self.value)


@dataclass
class TurnResult:
    """What happened during one accepted action."""

    player: Player
    action: Action
    card: Optional[Card] = None
    events: List[str] = field(default_factory=list)
    winner: Optional[Player] = None


def _no_color() -> Color:
    raise InvalidColorChoice("No color was chosen for the wild card")


class GameState:
    """Mutable state of one UNO game.

    Owns the players, the draw pile and the discard pile. Actions are
    submitted for the current player through :meth:`draw_action` and
    :meth:`play_action`; rejected actions leave the state untouched.
    """

    def __init__(
        self,
        players: Sequence[Player],
        deck: Deck,
        discard_pile: DiscardPile,
        rules: RuleSet = STANDARD_RULES,
    ):
        if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
            raise ValueError(
                f"UNO needs {MIN_PLAYERS}-{MAX_PLAYERS} players, got {len(players)}"
            )
        self.players: tuple[Player, ...] = tuple(players)
        self.deck = deck
        self.discard_pile = discard_pile
        self.rules = rules
        self.direction = Direction.CLOCKWISE
        self.current_player_index = 0
        self.history: List[str] = []

    @classmethod
    def new(
        cls,
        player_names: Sequence[str],
        rng: Optional[random.Random] = None,
        rules: RuleSet = STANDARD_RULES,
    ) -> "GameState":
        """Create a game: shuffle, deal each player a hand, seed the discard pile."""
        discard = DiscardPile()
        deck = Deck(discard, rng=rng)
        players = [Player(name, seat) for seat, name in enumerate(player_names)]
        game = cls(players, deck, discard, rules=rules)

        for player in game.players:
            game.deal(player, rules.hand_size)

        first = deck.draw()
        while first.is_wild:
            deck.put_back(first)
            first = deck.draw()
        discard.add_card(first)

        logger.info(
            "New game: %d players, starting card %s",
            len(game.players),
            first,
        )
        return game

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def top_card(self) -> Card:
        return self.discard_pile.top()

    def record(self, event: str) -> None:
        """Append an event to the game history."""
        self.history.append(event)
        logger.debug(event)

    def deal(self, player: Player, count: int) -> int:
        """Give ``player`` up to ``count`` cards; returns how many were dealt.

        Stops early, without raising, once every card is in a hand or on
        top of the discard pile.
        """
        for dealt in range(count):
            if not self.deck.can_draw():
                self.record("No cards left to draw")
                return dealt
            player.add_card(self.deck.draw())
        return count

    def advance_turn(self) -> None:
        self.current_player_index = (
            self.current_player_index + self.direction.value
        ) % len(self.players)

    def reverse_direction(self) -> None:
        self.direction = self.direction.reversed()

    def winner(self) -> Optional[Player]:
        """First player, in seat order, with an empty hand."""
        for player in self.players:
            if player.hand_size() == 0:
                return player
        return None

    def is_game_over(self) -> bool:
        return self.winner() is not None

    def card_count(self) -> int:
        """Cards in the deck, the discard pile and every hand."""
        return (
            len(self.deck)
            + len(self.discard_pile)
            + sum(p.hand_size() for p in self.players)
        )

    def apply_action(
        self, action: Action, choose_color: ColorChooser = _no_color
    ) -> TurnResult:
        if isinstance(action, DrawCard):
            return self.draw_action()
        if isinstance(action, PlayCard):
            return self.play_action(action.hand_index, choose_color)
        raise TypeError(f"Unknown action: {action!r}")

    def draw_action(self) -> TurnResult:
        """Current player draws one card; the turn passes."""
        self._check_not_over()
        player = self.current_player
        start = len(self.history)

        if self.deal(player, 1):
            self.record(f"{player.name} drew a card")
        else:
            self.record(f"{player.name} has no card to draw")
        self.advance_turn()
        return TurnResult(player, DrawCard(), events=self.history[start:])

    def play_action(
        self, hand_index: int, choose_color: ColorChooser = _no_color
    ) -> TurnResult:
        """Play the card at ``hand_index`` for the current player.

        Raises IndexOutOfRange for a bad index and IllegalMove for a card
        that does not match the top card; neither changes the state.
        """
        self._check_not_over()
        player = self.current_player
        card = player.card_at(hand_index)
        top = self.top_card
        if not self.rules.can_play(card, top):
            raise IllegalMove(card, top)
        if card.is_wild:
            # settle the color before anything moves so a bad answer changes nothing
            color = resolve_color(choose_color)
            choose_color = lambda: color  # noqa: E731

        start = len(self.history)
        player.remove_card_at(hand_index)
        self.discard_pile.add_card(card)
        self.record(f"{player.name} played {card}")
        self.rules.apply_effect(self, card, choose_color)
        self.advance_turn()

        winner = self.winner()
        if winner is not None:
            self.record(f"{winner.name} wins!")
            logger.info("%s won the game", winner.name)
        return TurnResult(
            player,
            PlayCard(hand_index),
            card=card,
            events=self.history[start:],
            winner=winner,
        )

    def _check_not_over(self) -> None:
        winner = self.winner()
        if winner is not None:
            raise GameOver("The game is already over", {"winner": winner.name})
