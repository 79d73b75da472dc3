"""Shared helpers for building games in a known position."""

import random
from typing import Callable, Optional, Sequence

import pytest

from unogame.engine import (
    STANDARD_RULES,
    Card,
    CardType,
    Color,
    Deck,
    DiscardPile,
    GameState,
    Player,
    RuleSet,
)


def num(color: Color, number: int) -> Card:
    return Card(CardType.NUMBER, color, number)


def build_game(
    hands: Sequence[Sequence[Card]],
    top: Card,
    deck: Optional[Sequence[Card]] = None,
    rules: RuleSet = STANDARD_RULES,
) -> GameState:
    discard = DiscardPile()
    discard.add_card(top)
    if deck is None:
        deck = [num(Color.YELLOW, n) for n in range(10)]
    draw_pile = Deck(discard, rng=random.Random(0), cards=deck)
    players = []
    for seat, hand in enumerate(hands):
        player = Player(f"p{seat}", seat)
        for card in hand:
            player.add_card(card)
        players.append(player)
    return GameState(players, draw_pile, discard, rules=rules)


@pytest.fixture
def make_game() -> Callable[..., GameState]:
    return build_game
